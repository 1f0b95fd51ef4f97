"""Pydantic models for stockq — the records a query is evaluated against."""

from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import Protocol, runtime_checkable

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from stockq.fields import NumericField, TextField

# ---------------------------------------------------------------------------
# Capability surface
# ---------------------------------------------------------------------------


@runtime_checkable
class Searchable(Protocol):
    """Anything a query can be evaluated against."""

    def text_value(self, field: TextField) -> str: ...

    def number_value(self, field: NumericField) -> int: ...


class _Record(BaseModel):
    """Base for concrete records: named fields looked up by canonical name.

    Fields a variant does not define resolve to ``""`` or ``0``.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    def text_value(self, field: TextField) -> str:
        value = getattr(self, field.value, None)
        if value is None:
            return ""
        if isinstance(value, Enum):
            return str(value.value)
        return str(value)

    def number_value(self, field: NumericField) -> int:
        value = getattr(self, field.value, None)
        return int(value or 0)


# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------


class Movement(str, Enum):
    """Direction of a stock movement."""

    IN = "in"
    OUT = "out"


class SortOption(str, Enum):
    """Orderings offered for inventory listings."""

    NAME = "name"
    BRAND = "brand"
    TYPE = "type"
    STOCK_QTY = "stock_qty"
    GONDOLA_QTY = "gondola_qty"


# ---------------------------------------------------------------------------
# Record variants
# ---------------------------------------------------------------------------


class InventoryItem(_Record):
    """A battery model kept in stock and/or on the shop gondola."""

    id: str = ""
    name: str | None = None
    brand: str
    model: str
    type: str | None = None
    quantity: int = 0
    gondola_quantity: int = 0
    gondola_limit: int = 0
    pack_size: int = 1
    barcode: str = ""
    discontinued: bool = False
    location: str | None = None
    voltage: str | None = None
    chemistry: str | None = None
    source: str | None = None
    notes: str | None = None
    min_stock_threshold: int = 0

    @property
    def display_name(self) -> str:
        return self.name or f"{self.brand} {self.model}".strip()


class HistoryEntry(_Record):
    """One stock movement recorded against an inventory item."""

    id: str = ""
    battery_id: str = ""
    battery_name: str = ""
    movement: Movement = Field(alias="type")
    location: str = ""
    quantity: int = 0
    reason: str = ""
    source: str = ""
    timestamp: datetime | None = None


class Catalog(BaseModel):
    """The record collection a host hands to the interpreter."""

    items: list[InventoryItem] = Field(default_factory=list)
    history: list[HistoryEntry] = Field(default_factory=list)
