"""Stockq — a boolean query language for battery inventory and stock history."""

from __future__ import annotations

__version__ = "0.1.0"

from stockq.models import Catalog, HistoryEntry, InventoryItem, Movement, Searchable, SortOption
from stockq.query import Query, filter_records, matches, parse_query

__all__ = [
    "Catalog",
    "HistoryEntry",
    "InventoryItem",
    "Movement",
    "Query",
    "Searchable",
    "SortOption",
    "filter_records",
    "matches",
    "parse_query",
]
