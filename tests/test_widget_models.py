"""
Tests for widget configuration and content models.

Tests validate:
- Documented defaults
- Lenient handling of unknown or malformed host values
- DeepLink rendering
"""

import pytest

from nextdeck_widget.core.snapshot import BoardRef
from nextdeck_widget.core.widgets import (
    AssignmentFilter,
    ContentFilter,
    DeepLink,
    Surface,
    ViewMode,
    WidgetConfiguration,
    WidgetContent,
    WidgetFamily,
)


class TestWidgetConfigurationDefaults:
    """Tests for default configuration values."""

    def test_defaults(self):
        """Test that an empty configuration uses board / all / all."""
        config = WidgetConfiguration()

        assert config.view_mode == ViewMode.BOARD
        assert config.selected_board is None
        assert config.content_filter == ContentFilter.ALL
        assert config.assignment_filter == AssignmentFilter.ALL

    def test_string_values(self):
        """Test that host string values map onto enums."""
        config = WidgetConfiguration(
            view_mode="upcoming", content_filter="dueSoon", assignment_filter="assigned"
        )

        assert config.view_mode == ViewMode.UPCOMING
        assert config.content_filter == ContentFilter.DUE_SOON
        assert config.assignment_filter == AssignmentFilter.ASSIGNED

    def test_is_frozen(self):
        """Test that configurations are immutable."""
        config = WidgetConfiguration()
        with pytest.raises(Exception):
            config.view_mode = ViewMode.UPCOMING  # type: ignore[misc]


class TestWidgetConfigurationFallbacks:
    """Tests for unknown and malformed values."""

    @pytest.mark.parametrize("value", ["grid", "", 3, None, ["board"]])
    def test_unknown_view_mode(self, value):
        """Test that unknown view modes fall back to board."""
        assert WidgetConfiguration(view_mode=value).view_mode == ViewMode.BOARD

    @pytest.mark.parametrize("value", ["duesoon", "DUE_SOON", 1, None])
    def test_unknown_content_filter(self, value):
        """Test that unknown content filters fall back to all."""
        assert WidgetConfiguration(content_filter=value).content_filter == ContentFilter.ALL

    @pytest.mark.parametrize("value", ["mine", 0, None, {}])
    def test_unknown_assignment_filter(self, value):
        """Test that unknown assignment filters fall back to all."""
        config = WidgetConfiguration(assignment_filter=value)
        assert config.assignment_filter == AssignmentFilter.ALL

    def test_unknown_values_are_logged(self, caplog):
        """Test that fallbacks leave a warning behind."""
        WidgetConfiguration(view_mode="grid")
        assert "Unknown view mode value 'grid'" in caplog.text


class TestSelectedBoard:
    """Tests for the selected board reference."""

    def test_bare_id(self):
        """Test that a bare board id becomes a reference."""
        assert WidgetConfiguration(selected_board=5).selected_board == BoardRef(id=5)

    def test_mapping(self):
        """Test that an id/title mapping becomes a reference."""
        config = WidgetConfiguration(selected_board={"id": 5, "title": "Old name"})
        assert config.selected_board == BoardRef(id=5, title="Old name")

    def test_board_ref(self):
        """Test that a BoardRef is kept as-is."""
        ref = BoardRef(id=5, title="Work")
        assert WidgetConfiguration(selected_board=ref).selected_board == ref

    def test_non_string_title_is_dropped(self):
        """Test that a malformed title does not invalidate the reference."""
        config = WidgetConfiguration(selected_board={"id": 5, "title": 12})
        assert config.selected_board == BoardRef(id=5, title=None)

    @pytest.mark.parametrize("value", ["5", True, {"title": "Work"}, {"id": "5"}, [5]])
    def test_malformed_selection(self, value):
        """Test that malformed selections are treated as no selection."""
        assert WidgetConfiguration(selected_board=value).selected_board is None


class TestDeepLink:
    """Tests for DeepLink rendering."""

    def test_url_without_query(self):
        """Test that a link without parameters has no query component."""
        link = DeepLink(scheme="nextdeck", action="quick-add")

        assert link.url == "nextdeck://quick-add"
        assert "?" not in link.url

    def test_url_with_query(self):
        """Test that parameters render in insertion order."""
        link = DeepLink(
            scheme="nextdeck", action="card", query=(("board", "5"), ("edit", "1"))
        )

        assert link.url == "nextdeck://card?board=5&edit=1"
        assert str(link) == link.url

    def test_params(self):
        """Test the dict view of the query."""
        link = DeepLink(scheme="nextdeck", action="card", query=(("board", "5"),))
        assert link.params == {"board": "5"}

    def test_dump_includes_url(self):
        """Test that serialized links carry their URL."""
        link = DeepLink(scheme="nextdeck", action="card", query=(("card", "9"),))
        assert link.model_dump(mode="json")["url"] == "nextdeck://card?card=9"


class TestWidgetContent:
    """Tests for WidgetContent defaults."""

    def test_empty_content(self):
        """Test that content defaults to an empty, well-formed value."""
        content = WidgetContent(
            surface=Surface.BOARD,
            family=WidgetFamily.SYSTEM_SMALL,
            view_mode=ViewMode.BOARD,
        )

        assert content.items == ()
        assert content.columns == ()
        assert content.is_empty
        assert content.has_data is False

    def test_surface_kinds(self):
        """Test that every surface maps to a host widget kind."""
        assert Surface.BOARD.kind == "NextDeckWidget"
        assert Surface.QUICK_ADD.kind == "NewCardWidget"
        assert Surface.UPCOMING_LARGE.kind == "UpcomingLargeWidget"
        assert Surface.UPCOMING_LOCK.kind == "UpcomingLockWidget"
