"""
nextdeck-widget CLI - widget commands.

Preview what each widget surface would show for the snapshot currently in
shared storage, list the boards offered by the board picker, and build
deep links.
"""

import json as json_module
from datetime import datetime
from pathlib import Path

import typer
from rich.columns import Columns
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from nextdeck_widget.cli.errors import (
    ExitCode,
    print_invalid_link_error,
    print_settings_error,
)
from nextdeck_widget.core.config import SettingsError, WidgetSettings, load_settings
from nextdeck_widget.core.config.loader import get_default_shared_dir
from nextdeck_widget.core.snapshot import SharedDirectorySnapshotStore, Snapshot, load_snapshot
from nextdeck_widget.core.widgets import (
    Surface,
    ViewMode,
    WidgetConfiguration,
    WidgetContent,
    WidgetFamily,
    WidgetItem,
    build_link,
    get_surface_configuration,
    render_surface,
    suggested_boards,
)
from nextdeck_widget.utils.project import get_project_dir

console = Console()


def _load_settings() -> WidgetSettings:
    """
    Load settings for the current project.

    Raises:
        typer.Exit: If the settings fail validation
    """
    try:
        return load_settings(get_project_dir())
    except SettingsError as e:
        print_settings_error(str(e))
        raise typer.Exit(ExitCode.USER_ERROR)


def _open_store(settings: WidgetSettings) -> SharedDirectorySnapshotStore:
    shared_dir = settings.store.shared_dir or get_default_shared_dir()
    return SharedDirectorySnapshotStore(shared_dir, settings.store.app_group_id)


def _read_snapshot(settings: WidgetSettings) -> Snapshot | None:
    return load_snapshot(_open_store(settings), settings.store.payload_key)


def format_due(due: int | None) -> str:
    """Format an epoch-millisecond due date in local time."""
    if due is None:
        return ""
    try:
        return datetime.fromtimestamp(due / 1000).strftime("%Y-%m-%d %H:%M")
    except (OverflowError, OSError, ValueError):
        return str(due)


def _items_table(items: tuple[WidgetItem, ...], title: str | None = None) -> Table:
    table = Table(title=title, show_header=True)
    table.add_column("Due", style="yellow")
    table.add_column("Title", style="white", max_width=40)
    table.add_column("Board", style="cyan")
    table.add_column("Link", style="dim")
    for item in items:
        table.add_row(
            format_due(item.card.due),
            escape(item.card.title) + (" [green]●[/green]" if item.card.assigned_to_me else ""),
            escape(item.board_title) if item.board_title else "[dim]?[/dim]",
            item.link.url if item.link else "",
        )
    return table


def print_content(content: WidgetContent) -> None:
    """Render widget content for the terminal."""
    if content.board is not None:
        heading = escape(content.board.title)
    elif content.view_mode == ViewMode.UPCOMING:
        heading = "Upcoming"
    else:
        heading = "No board"
    console.print(
        f"[bold]{heading}[/bold] [dim]({content.surface.value}, {content.family.value})[/dim]"
    )

    if content.quick_add_link is not None:
        console.print(f"[cyan]+ New card:[/cyan] {content.quick_add_link.url}")

    if not content.has_data:
        console.print("[yellow]No snapshot available[/yellow]")
        return

    if content.surface == Surface.QUICK_ADD:
        return

    if content.is_empty:
        console.print("[dim]No cards[/dim]")
        return

    if content.columns:
        console.print(Columns([_items_table(column) for column in content.columns]))
    else:
        console.print(_items_table(content.items))


def show(
    ctx: typer.Context,
    surface: Surface = typer.Argument(..., help="Widget surface to preview"),
    family: WidgetFamily | None = typer.Option(
        None,
        "--family",
        "-f",
        help="Widget size (defaults to the surface's first supported size)",
    ),
    mode: str | None = typer.Option(None, "--mode", help="View mode: board or upcoming"),
    board: int | None = typer.Option(None, "--board", "-b", help="Selected board id"),
    content_filter: str | None = typer.Option(
        None, "--filter", help="Board mode filter: all, assigned or dueSoon"
    ),
    assignment: str | None = typer.Option(
        None, "--assignment", help="Upcoming filter: assigned or all"
    ),
    now: int | None = typer.Option(
        None, "--now", help="Reference time in epoch milliseconds", hidden=True
    ),
    json_output: bool = typer.Option(False, "--json", help="Output content as JSON"),
) -> None:
    """
    Preview the content of a widget surface.

    The surface's stored configuration (.nextdeck/widgets.yaml) is used,
    with any options given here taking precedence.

    Examples:
        nextdeck-widget show board
        nextdeck-widget show board --family system-medium --filter dueSoon
        nextdeck-widget show upcoming-large --assignment all
        nextdeck-widget show upcoming-lock --json
    """
    debug = ctx.obj.get("debug", False) if ctx.obj else False
    settings = _load_settings()

    configuration = get_surface_configuration(surface, settings.widgets.config_path)
    overrides: dict[str, object] = {}
    if mode is not None:
        overrides["view_mode"] = mode
    if board is not None:
        overrides["selected_board"] = board
    if content_filter is not None:
        overrides["content_filter"] = content_filter
    if assignment is not None:
        overrides["assignment_filter"] = assignment
    if overrides:
        configuration = WidgetConfiguration(**{**configuration.model_dump(), **overrides})

    if debug:
        console.print(f"[dim]Configuration: {configuration.model_dump(mode='json')}[/dim]")

    snapshot = _read_snapshot(settings)
    content = render_surface(surface, snapshot, configuration, family, now=now)

    if json_output:
        typer.echo(json_module.dumps(content.model_dump(mode="json"), indent=2))
        return

    print_content(content)


def boards(
    json_output: bool = typer.Option(False, "--json", help="Output boards as JSON"),
) -> None:
    """
    List the boards offered by the widget board picker.

    Examples:
        nextdeck-widget boards
        nextdeck-widget boards --json
    """
    settings = _load_settings()
    snapshot = _read_snapshot(settings)
    refs = suggested_boards(snapshot)

    if json_output:
        typer.echo(json_module.dumps([ref.model_dump() for ref in refs], indent=2))
        return

    if not refs:
        console.print("[dim]No boards available[/dim]")
        return

    default_id = snapshot.default_board_id if snapshot is not None else None
    table = Table(title="Boards", show_header=True)
    table.add_column("ID", style="cyan", justify="right")
    table.add_column("Title", style="white")
    table.add_column("Default", style="green")
    for ref in refs:
        table.add_row(str(ref.id), escape(ref.title or ""), "✓" if ref.id == default_id else "")
    console.print(table)


def status(
    json_output: bool = typer.Option(False, "--json", help="Output status as JSON"),
) -> None:
    """
    Show where the snapshot is read from and what it contains.

    Examples:
        nextdeck-widget status
    """
    settings = _load_settings()
    store = _open_store(settings)
    path: Path = store.group_dir / settings.store.payload_key
    snapshot = load_snapshot(store, settings.store.payload_key)

    output = {
        "path": str(path),
        "present": path.is_file(),
        "valid": snapshot is not None,
        "updated_at": snapshot.updated_at if snapshot is not None else None,
        "boards": len(snapshot.boards) if snapshot is not None else 0,
        "cards": len(snapshot.cards) if snapshot is not None else 0,
    }

    if json_output:
        typer.echo(json_module.dumps(output, indent=2))
        return

    table = Table(title="Widget Snapshot", show_header=False)
    table.add_column("Label", style="cyan")
    table.add_column("Value", style="green")
    table.add_row("Path", output["path"])
    table.add_row("Present", "yes" if output["present"] else "[yellow]no[/yellow]")
    table.add_row("Valid", "yes" if output["valid"] else "[yellow]no[/yellow]")
    if snapshot is not None:
        table.add_row("Updated", format_due(snapshot.updated_at))
    table.add_row("Boards", str(output["boards"]))
    table.add_row("Cards", str(output["cards"]))
    console.print(table)


def link(
    action: str = typer.Argument(..., help="Link action, e.g. card or quick-add"),
    board: int | None = typer.Option(None, "--board", help="Board id"),
    card: int | None = typer.Option(None, "--card", help="Card id"),
    stack: int | None = typer.Option(None, "--stack", help="Column (stack) id"),
    edit: bool = typer.Option(False, "--edit", help="Open the card for editing"),
) -> None:
    """
    Print a deep link into the NextDeck app.

    Examples:
        nextdeck-widget link quick-add --board 5
        nextdeck-widget link card --board 5 --card 9 --stack 2 --edit
    """
    target = build_link(action, board_id=board, card_id=card, column_id=stack, edit=edit)
    if target is None:
        print_invalid_link_error(action)
        raise typer.Exit(ExitCode.USER_ERROR)
    typer.echo(target.url)
