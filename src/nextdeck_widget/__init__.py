"""
nextdeck-widget - home and lock screen widgets for NextDeck boards

Reads the board snapshot the NextDeck app shares with its widgets and
resolves, per widget surface, the cards to show and the deep links that
open them.
"""

__version__ = "0.1.0"

# Re-export core models for convenience
from nextdeck_widget.core.snapshot.models import Board, Card, Snapshot
from nextdeck_widget.core.widgets.models import Surface, WidgetConfiguration, WidgetContent
from nextdeck_widget.core.widgets.pipeline import render_surface

__all__ = [
    "Board",
    "Card",
    "Snapshot",
    "Surface",
    "WidgetConfiguration",
    "WidgetContent",
    "render_surface",
    "__version__",
]
