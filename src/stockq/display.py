"""Rich terminal formatting for CLI output."""

from __future__ import annotations

from datetime import datetime, timezone

from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.tree import Tree

from stockq.fields import FIELD_ALIASES, NumericField
from stockq.models import HistoryEntry, InventoryItem, Movement
from stockq.query import Metatag, Negation, Node, OrGroup, Query

console = Console()


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _format_date(dt: datetime | None) -> str:
    """Format a datetime for display."""
    if dt is None:
        return "-"
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt.strftime("%Y-%m-%d %H:%M")


def _gondola_cell(item: InventoryItem) -> str:
    if item.gondola_limit and item.gondola_quantity >= item.gondola_limit:
        return f"[green]{item.gondola_quantity}/{item.gondola_limit}[/green]"
    if item.gondola_limit:
        return f"{item.gondola_quantity}/{item.gondola_limit}"
    return str(item.gondola_quantity)


def _stock_cell(item: InventoryItem) -> str:
    if item.min_stock_threshold and item.quantity <= item.min_stock_threshold:
        return f"[red]{item.quantity}[/red]"
    return str(item.quantity)


# ---------------------------------------------------------------------------
# Inventory table
# ---------------------------------------------------------------------------


def display_items(items: list[InventoryItem], query: str = "") -> None:
    """Display inventory items as a rich table."""
    if not items:
        suffix = f' for "{escape(query)}"' if query.strip() else ""
        console.print(f"[dim]No items found{suffix}.[/dim]")
        return

    table = Table(title="Inventory", show_header=True, header_style="bold")
    table.add_column("Brand", style="cyan")
    table.add_column("Model")
    table.add_column("Type")
    table.add_column("Stock", justify="right")
    table.add_column("Gondola", justify="right")
    table.add_column("Location")
    table.add_column("Barcode", style="dim")

    for item in items:
        model = escape(item.model)
        if item.discontinued:
            model = f"[strike]{model}[/strike]"
        table.add_row(
            escape(item.brand),
            model,
            escape(item.type or "-"),
            _stock_cell(item),
            _gondola_cell(item),
            escape(item.location or "-"),
            escape(item.barcode or "-"),
        )

    console.print(table)


# ---------------------------------------------------------------------------
# History table
# ---------------------------------------------------------------------------


def display_history(entries: list[HistoryEntry], query: str = "") -> None:
    """Display stock movements as a rich table."""
    if not entries:
        suffix = f' for "{escape(query)}"' if query.strip() else ""
        console.print(f"[dim]No history entries found{suffix}.[/dim]")
        return

    table = Table(title="History", show_header=True, header_style="bold")
    table.add_column("When", width=16)
    table.add_column("Battery", style="cyan")
    table.add_column("Move", width=4)
    table.add_column("Qty", justify="right")
    table.add_column("Location")
    table.add_column("Reason")
    table.add_column("Source", style="dim")

    for entry in entries:
        move = "[green]in[/green]" if entry.movement == Movement.IN else "[red]out[/red]"
        table.add_row(
            _format_date(entry.timestamp),
            escape(entry.battery_name or "-"),
            move,
            str(entry.quantity),
            escape(entry.location or "-"),
            escape(entry.reason.replace("_", " ") or "-"),
            escape(entry.source or "-"),
        )

    console.print(table)


# ---------------------------------------------------------------------------
# Query explanation
# ---------------------------------------------------------------------------


def _node_label(node: Node) -> str:
    if isinstance(node, Negation):
        return "[bold red]NOT[/bold red]"
    if isinstance(node, OrGroup):
        return "[bold yellow]ANY OF[/bold yellow]"
    if isinstance(node, Metatag):
        if node.field is None:
            return f"[red]unknown field[/red] {escape(repr(node.key))} (never matches)"
        kind = "number" if isinstance(node.field, NumericField) else "text"
        mode = " literal" if node.literal else ""
        return (
            f"[cyan]{node.field.value}[/cyan] ({kind}{mode}) "
            f"{node.operator.value} {escape(repr(node.value))}"
        )
    mode = "literal" if node.literal else "text"
    return f"[green]any field[/green] ({mode}) contains {escape(repr(node.pattern))}"


def _add_node(parent: Tree, node: Node) -> None:
    branch = parent.add(_node_label(node))
    if isinstance(node, Negation):
        _add_node(branch, node.inner)
    elif isinstance(node, OrGroup):
        for child in node.branches:
            _add_node(branch, child)


def build_query_tree(query: Query) -> Tree:
    """Render a parsed query as a rich tree of its clauses."""
    root = Tree(f"[bold]ALL OF[/bold] {escape(repr(query.source))}")
    if not query.clauses:
        root.add("[dim]empty query, matches everything[/dim]")
    for clause in query.clauses:
        _add_node(root, clause)
    return root


def display_query(query: Query) -> None:
    console.print(build_query_tree(query))


# ---------------------------------------------------------------------------
# Field aliases
# ---------------------------------------------------------------------------


def display_fields() -> None:
    """List metatag keys and the fields they resolve to."""
    table = Table(title="Metatag fields", show_header=True, header_style="bold")
    table.add_column("Field", style="cyan")
    table.add_column("Kind")
    table.add_column("Keys")

    for field, aliases in FIELD_ALIASES.items():
        kind = "number" if isinstance(field, NumericField) else "text"
        table.add_row(field.value, kind, ", ".join(aliases))

    console.print(table)
