"""
Deep link construction.

Links take the form::

    nextdeck://<action>[?board=<id>][&card=<id>][&stack=<id>][&edit=1]

Each parameter is present only when its source value is. A link with no
parameters has no query component at all. Building a link never
navigates; it only produces a value for the presentation layer.
"""

import logging
import re

from nextdeck_widget.core.widgets.models import DeepLink

logger = logging.getLogger(__name__)

LINK_SCHEME = "nextdeck"

ACTION_CARD = "card"
ACTION_QUICK_ADD = "quick-add"

# Actions become the URL host, so they must be valid host labels
_ACTION_RE = re.compile(r"^[A-Za-z0-9](?:[A-Za-z0-9-]*[A-Za-z0-9])?$")


def build_link(
    action: str,
    board_id: int | None = None,
    card_id: int | None = None,
    column_id: int | None = None,
    edit: bool = False,
    *,
    scheme: str = LINK_SCHEME,
) -> DeepLink | None:
    """
    Build a navigation target for an action.

    Args:
        action: Action name (``card``, ``quick-add``)
        board_id: Adds ``board=<id>`` when set
        card_id: Adds ``card=<id>`` when set
        column_id: Adds ``stack=<id>`` when set
        edit: Adds ``edit=1`` when true
        scheme: URL scheme of the host application

    Returns:
        DeepLink, or None if the action cannot be used as a URL host

    Example:
        >>> build_link("card", board_id=5, card_id=9, column_id=2, edit=True).url
        'nextdeck://card?board=5&card=9&stack=2&edit=1'
        >>> build_link("quick-add").url
        'nextdeck://quick-add'
    """
    if not isinstance(action, str) or not _ACTION_RE.match(action):
        logger.debug(f"Cannot build link for action {action!r}")
        return None

    query: list[tuple[str, str]] = []
    if board_id is not None:
        query.append(("board", str(board_id)))
    if card_id is not None:
        query.append(("card", str(card_id)))
    if column_id is not None:
        query.append(("stack", str(column_id)))
    if edit:
        query.append(("edit", "1"))

    return DeepLink(scheme=scheme, action=action, query=tuple(query))
