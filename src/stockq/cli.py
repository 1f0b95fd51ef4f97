"""Typer CLI for stockq — search, explain, fields."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import typer

from stockq.config import resolve_catalog_path, resolve_log_level
from stockq.models import Catalog, SortOption

logger = logging.getLogger("stockq.cli")

app = typer.Typer(
    name="stockq",
    help="Filter a battery inventory and its stock history with a query language.",
    no_args_is_help=True,
)


@app.callback()
def _configure(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log parsing and filtering"),
) -> None:
    logging.basicConfig(stream=sys.stderr, level=resolve_log_level(verbose))


def _open_catalog(path: str | None) -> Catalog:
    """Load the catalog at *path* (or the configured one), exiting on failure."""
    from stockq.catalog import load_catalog

    catalog_path = Path(path) if path else resolve_catalog_path()
    if not catalog_path.exists():
        typer.echo(
            f"Catalog not found at {catalog_path}. Pass --catalog or set STOCKQ_CATALOG_PATH.",
            err=True,
        )
        raise typer.Exit(1)

    try:
        return load_catalog(catalog_path)
    except ValueError as e:
        logger.debug("Catalog load failed", exc_info=True)
        typer.echo(str(e), err=True)
        raise typer.Exit(1) from None


# ---------------------------------------------------------------------------
# stockq search
# ---------------------------------------------------------------------------


@app.command()
def search(
    query: str = typer.Argument("", help="Query, e.g. 'sony -loc:estoque qty:>=10'"),
    history: bool = typer.Option(False, "--history", "-H", help="Search stock movements"),
    sort: SortOption = typer.Option(SortOption.NAME, "--sort", "-s", help="Inventory ordering"),
    desc: bool = typer.Option(False, "--desc", help="Reverse the ordering"),
    limit: int = typer.Option(0, "--limit", "-n", min=0, help="Max rows to show (0 = all)"),
    catalog: str = typer.Option(None, "--catalog", "-c", help="Catalog JSON file"),
) -> None:
    """Search inventory items (or history entries) matching QUERY."""
    from stockq.catalog import search_history, search_items
    from stockq.display import display_history, display_items

    data = _open_catalog(catalog)

    if history:
        display_history(search_history(data, query, limit=limit), query)
    else:
        items = search_items(data, query, sort=sort, ascending=not desc, limit=limit)
        display_items(items, query)


# ---------------------------------------------------------------------------
# stockq explain
# ---------------------------------------------------------------------------


@app.command()
def explain(
    query: str = typer.Argument(..., help="Query to parse"),
) -> None:
    """Show how a query is parsed, without loading a catalog."""
    from stockq.display import display_query
    from stockq.query import parse_query

    display_query(parse_query(query))


# ---------------------------------------------------------------------------
# stockq fields
# ---------------------------------------------------------------------------


@app.command()
def fields() -> None:
    """List metatag keys and the record fields they restrict."""
    from stockq.display import display_fields

    display_fields()


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------


def main() -> None:
    """CLI entry point."""
    app()


if __name__ == "__main__":
    main()
