"""Catalog loading and listing helpers — the host side of a query.

The interpreter in :mod:`stockq.query` only sees individual records; this
module supplies them from a JSON catalog and orders the survivors.
"""

from __future__ import annotations

import json
import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Callable

from stockq.models import Catalog, HistoryEntry, InventoryItem, SortOption
from stockq.query import filter_records

logger = logging.getLogger("stockq.catalog")

# ---------------------------------------------------------------------------
# Loading
# ---------------------------------------------------------------------------


def load_catalog(path: str | Path) -> Catalog:
    """Read and validate a catalog document.

    The file holds ``{"items": [...], "history": [...]}``; both keys are
    optional. Raises ``FileNotFoundError`` when *path* is missing and
    ``ValueError`` when the JSON or any record is invalid.
    """
    path = Path(path)
    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid catalog JSON in {path}: {e}") from e

    if not isinstance(raw, dict):
        raise ValueError(f"Catalog {path} must be a JSON object")

    catalog = Catalog.model_validate(raw)
    logger.debug(
        "Loaded %d item(s) and %d history entries from %s",
        len(catalog.items),
        len(catalog.history),
        path,
    )
    return catalog


# ---------------------------------------------------------------------------
# Ordering
# ---------------------------------------------------------------------------

_SORT_KEYS: dict[SortOption, Callable[[InventoryItem], str | int]] = {
    SortOption.NAME: lambda item: (item.brand + item.model).casefold(),
    SortOption.BRAND: lambda item: item.brand.casefold(),
    SortOption.TYPE: lambda item: (item.type or "").casefold(),
    SortOption.STOCK_QTY: lambda item: item.quantity,
    SortOption.GONDOLA_QTY: lambda item: item.gondola_quantity,
}


def sort_items(
    items: list[InventoryItem],
    option: SortOption = SortOption.NAME,
    ascending: bool = True,
) -> list[InventoryItem]:
    """Return *items* ordered by *option*. Ties keep their input order."""
    return sorted(items, key=_SORT_KEYS[option], reverse=not ascending)


def _timestamp_key(entry: HistoryEntry) -> datetime:
    ts = entry.timestamp
    if ts is None:
        return datetime.min.replace(tzinfo=timezone.utc)
    if ts.tzinfo is None:
        ts = ts.replace(tzinfo=timezone.utc)
    return ts


def newest_first(history: list[HistoryEntry]) -> list[HistoryEntry]:
    """Order history entries newest first; undated entries go last."""
    return sorted(history, key=_timestamp_key, reverse=True)


# ---------------------------------------------------------------------------
# Search
# ---------------------------------------------------------------------------


def _truncate(results: list, limit: int | None) -> list:
    if limit is not None and limit < 0:
        raise ValueError(f"limit must be >= 0, got {limit}")
    return results[:limit] if limit else results


def search_items(
    catalog: Catalog,
    query: str,
    sort: SortOption = SortOption.NAME,
    ascending: bool = True,
    limit: int | None = None,
) -> list[InventoryItem]:
    """Filter inventory items by *query*, then sort and truncate."""
    results = sort_items(filter_records(catalog.items, query), sort, ascending)
    logger.debug("Query %r matched %d of %d item(s)", query, len(results), len(catalog.items))
    return _truncate(results, limit)


def search_history(
    catalog: Catalog,
    query: str,
    limit: int | None = None,
) -> list[HistoryEntry]:
    """Filter history entries by *query*, newest first."""
    results = newest_first(filter_records(catalog.history, query))
    logger.debug(
        "Query %r matched %d of %d history entries", query, len(results), len(catalog.history)
    )
    return _truncate(results, limit)
