"""Shared fixtures and sample records for stockq tests."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from stockq.models import Catalog, HistoryEntry, InventoryItem

# ---------------------------------------------------------------------------
# Sample corpus (camelCase keys, as exported by the inventory app)
# ---------------------------------------------------------------------------

SAMPLE_ITEMS: list[dict] = [
    {
        "id": "bat-001",
        "brand": "Sony",
        "model": "AA-2000",
        "type": "AA",
        "quantity": 12,
        "gondolaQuantity": 4,
        "gondolaLimit": 10,
        "packSize": 2,
        "barcode": "4902030123456",
        "location": "Estoque",
        "voltage": "1.5V",
        "chemistry": "Alkaline",
        "notes": "Caixa azul",
        "minStockThreshold": 5,
    },
    {
        "id": "bat-002",
        "brand": "Duracell",
        "model": "CR2032",
        "type": "Coin",
        "quantity": 3,
        "gondolaQuantity": 8,
        "gondolaLimit": 8,
        "packSize": 1,
        "barcode": "5000394033089",
        "location": "Gôndola A",
        "voltage": "3V",
        "chemistry": "Lithium",
    },
    {
        "id": "bat-003",
        "brand": "Ação Energia",
        "model": "AB1234CD",
        "type": "9V",
        "quantity": 0,
        "gondolaQuantity": 2,
        "gondolaLimit": 6,
        "packSize": 1,
        "barcode": "7891234567895",
        "discontinued": True,
        "location": "Depósito",
        "voltage": "9V",
        "chemistry": "Zinc Carbon",
    },
    {
        "id": "bat-004",
        "brand": "Panasonic",
        "model": "LR44",
        "type": "Button",
        "quantity": 25,
        "gondolaQuantity": 0,
        "gondolaLimit": 5,
        "packSize": 10,
        "barcode": "5410853012345",
        "location": "Estoque",
        "chemistry": "Alkaline",
        "notes": "Reposição semanal",
    },
]

SAMPLE_HISTORY: list[dict] = [
    {
        "id": "h-001",
        "batteryId": "bat-001",
        "batteryName": "Sony AA-2000",
        "type": "in",
        "location": "stock",
        "quantity": 20,
        "reason": "Compra fornecedor",
        "source": "manual",
        "timestamp": "2026-01-10T10:00:00Z",
    },
    {
        "id": "h-002",
        "batteryId": "bat-002",
        "batteryName": "Duracell CR2032",
        "type": "out",
        "location": "gondola",
        "quantity": 2,
        "reason": "Venda",
        "source": "map",
        "timestamp": "2026-01-12T15:30:00Z",
    },
    {
        "id": "h-003",
        "batteryId": "bat-004",
        "batteryName": "Panasonic LR44",
        "type": "out",
        "location": "stock",
        "quantity": 1,
        "reason": "Defeito",
        "source": "manual",
    },
]


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def items() -> list[InventoryItem]:
    return [InventoryItem.model_validate(raw) for raw in SAMPLE_ITEMS]


@pytest.fixture()
def history() -> list[HistoryEntry]:
    return [HistoryEntry.model_validate(raw) for raw in SAMPLE_HISTORY]


@pytest.fixture()
def sony(items: list[InventoryItem]) -> InventoryItem:
    return items[0]


@pytest.fixture()
def catalog(items, history) -> Catalog:
    return Catalog(items=items, history=history)


@pytest.fixture()
def catalog_path(tmp_path: Path) -> Path:
    """Write the sample corpus to a temporary catalog file."""
    path = tmp_path / "catalog.json"
    path.write_text(json.dumps({"items": SAMPLE_ITEMS, "history": SAMPLE_HISTORY}))
    return path
