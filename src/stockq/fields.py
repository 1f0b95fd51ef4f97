"""Metatag keys, canonical record fields and numeric comparison."""

from __future__ import annotations

import operator
import re
from enum import Enum
from typing import Callable

from stockq.text import fold

# ---------------------------------------------------------------------------
# Canonical fields
# ---------------------------------------------------------------------------


class TextField(str, Enum):
    """Textual record fields. Values double as model attribute names."""

    NAME = "name"
    BATTERY_NAME = "battery_name"
    BRAND = "brand"
    MODEL = "model"
    TYPE = "type"
    BARCODE = "barcode"
    LOCATION = "location"
    NOTES = "notes"
    VOLTAGE = "voltage"
    CHEMISTRY = "chemistry"
    REASON = "reason"
    SOURCE = "source"
    MOVEMENT = "movement"


class NumericField(str, Enum):
    """Integer record fields. Values double as model attribute names."""

    QUANTITY = "quantity"
    GONDOLA_QUANTITY = "gondola_quantity"
    GONDOLA_LIMIT = "gondola_limit"
    PACK_SIZE = "pack_size"


CanonicalField = TextField | NumericField

# Fields probed by bare terms and quoted literals, in probe order.
DEFAULT_SEARCH_FIELDS: tuple[TextField, ...] = (
    TextField.NAME,
    TextField.BATTERY_NAME,
    TextField.BRAND,
    TextField.MODEL,
    TextField.TYPE,
    TextField.BARCODE,
    TextField.LOCATION,
    TextField.NOTES,
    TextField.VOLTAGE,
    TextField.CHEMISTRY,
    TextField.REASON,
    TextField.SOURCE,
)

# ---------------------------------------------------------------------------
# Alias table
# ---------------------------------------------------------------------------

FIELD_ALIASES: dict[CanonicalField, tuple[str, ...]] = {
    NumericField.QUANTITY: ("qty", "quantity", "count", "estoque", "stock", "qtd"),
    NumericField.GONDOLA_QUANTITY: ("gondola", "gondolaqty", "display"),
    NumericField.GONDOLA_LIMIT: ("limit", "gondolalimit", "max"),
    NumericField.PACK_SIZE: ("pack", "packsize"),
    TextField.BRAND: ("brand", "marca"),
    TextField.MODEL: ("model", "modelo"),
    TextField.TYPE: ("type", "tipo"),
    TextField.BARCODE: ("barcode", "ean", "code"),
    TextField.LOCATION: ("loc", "location", "local"),
    TextField.VOLTAGE: ("volt", "voltage"),
    TextField.CHEMISTRY: ("chem", "chemistry"),
    TextField.REASON: ("reason", "motivo"),
    TextField.SOURCE: ("source", "fonte"),
    TextField.BATTERY_NAME: ("battery", "bateria"),
    TextField.MOVEMENT: ("movement", "movimento"),
}

_KEY_INDEX: dict[str, CanonicalField] = {
    alias: field for field, aliases in FIELD_ALIASES.items() for alias in aliases
}


def normalize_key(key: str) -> str:
    """Fold a metatag key for alias lookup (``Marca`` -> ``marca``)."""
    return fold(key.strip())


def resolve_field(key: str) -> CanonicalField | None:
    """Map a metatag key (or one of its synonyms) to its canonical field.

    Returns ``None`` for unknown keys.
    """
    return _KEY_INDEX.get(normalize_key(key))


# ---------------------------------------------------------------------------
# Operators
# ---------------------------------------------------------------------------


class Operator(str, Enum):
    """Relational operators accepted in front of a metatag value."""

    EQ = "="
    GT = ">"
    LT = "<"
    GE = ">="
    LE = "<="

    def compare(self, actual: int, target: int | float) -> bool:
        return _COMPARATORS[self](actual, target)


_COMPARATORS: dict[Operator, Callable[[int, int | float], bool]] = {
    Operator.EQ: operator.eq,
    Operator.GT: operator.gt,
    Operator.LT: operator.lt,
    Operator.GE: operator.ge,
    Operator.LE: operator.le,
}

# Two-character operators must be tried before their one-character prefixes;
# an explicit "=" is accepted and stripped like the others.
_OPERATOR_PRIORITY = (Operator.GE, Operator.LE, Operator.GT, Operator.LT, Operator.EQ)


def parse_operator(expression: str) -> tuple[Operator, str]:
    """Split a leading relational operator off *expression*.

    ``">=10"`` -> ``(Operator.GE, "10")``; no prefix means ``Operator.EQ``.
    """
    for op in _OPERATOR_PRIORITY:
        if expression.startswith(op.value):
            return op, expression[len(op.value) :]
    return Operator.EQ, expression


_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def parse_int(text: str) -> int | float:
    """Parse the leading integer of *text*; anything unparsable is 0.

    Values too long for an exact ``int`` come back as a signed infinity.
    """
    m = _LEADING_INT.match(text)
    if not m:
        return 0
    try:
        return int(m.group(1))
    except ValueError:
        return float(m.group(1))
