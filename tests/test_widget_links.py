"""
Tests for deep link construction.
"""

import pytest

from nextdeck_widget.core.widgets import ACTION_CARD, ACTION_QUICK_ADD, build_link


class TestBuildLink:
    """Tests for build_link()."""

    def test_card_link_all_params(self):
        """Test a card edit link with every parameter present."""
        link = build_link(ACTION_CARD, board_id=5, card_id=9, column_id=2, edit=True)

        assert link is not None
        assert link.url == "nextdeck://card?board=5&card=9&stack=2&edit=1"

    def test_quick_add_without_board(self):
        """Test that a link without parameters has no query component."""
        link = build_link(ACTION_QUICK_ADD)

        assert link is not None
        assert link.url == "nextdeck://quick-add"

    def test_quick_add_with_board(self):
        """Test the quick-add link for a board."""
        link = build_link(ACTION_QUICK_ADD, board_id=5)

        assert link is not None
        assert link.url == "nextdeck://quick-add?board=5"

    def test_edit_false_omitted(self):
        """Test that edit is absent unless requested."""
        link = build_link(ACTION_CARD, card_id=9)

        assert link is not None
        assert link.params == {"card": "9"}

    def test_parameter_order(self):
        """Test that parameters always render as board, card, stack, edit."""
        link = build_link(ACTION_CARD, column_id=2, edit=True, board_id=5)

        assert link is not None
        assert link.url == "nextdeck://card?board=5&stack=2&edit=1"

    def test_zero_ids_are_present(self):
        """Test that an id of zero still produces its parameter."""
        link = build_link(ACTION_CARD, board_id=0, card_id=0)

        assert link is not None
        assert link.url == "nextdeck://card?board=0&card=0"

    def test_custom_scheme(self):
        """Test building links for another scheme."""
        link = build_link(ACTION_QUICK_ADD, scheme="decktest")

        assert link is not None
        assert link.url == "decktest://quick-add"

    @pytest.mark.parametrize("action", ["", "two words", "-leading", "a/b", "quick_add"])
    def test_invalid_action(self, action):
        """Test that actions unusable as a URL host produce no link."""
        assert build_link(action, board_id=1) is None
