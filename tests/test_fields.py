"""Tests for stockq.fields — alias resolution, operators, integer parsing."""

from __future__ import annotations

import pytest

from stockq.fields import (
    DEFAULT_SEARCH_FIELDS,
    FIELD_ALIASES,
    NumericField,
    Operator,
    TextField,
    parse_int,
    parse_operator,
    resolve_field,
)

# ---------------------------------------------------------------------------
# Alias resolution
# ---------------------------------------------------------------------------


class TestResolveField:
    @pytest.mark.parametrize("key", ["qty", "quantity", "count", "estoque", "stock", "qtd"])
    def test_quantity_aliases(self, key: str) -> None:
        assert resolve_field(key) is NumericField.QUANTITY

    @pytest.mark.parametrize(
        ("key", "field"),
        [
            ("gondola", NumericField.GONDOLA_QUANTITY),
            ("display", NumericField.GONDOLA_QUANTITY),
            ("max", NumericField.GONDOLA_LIMIT),
            ("gondolalimit", NumericField.GONDOLA_LIMIT),
            ("pack", NumericField.PACK_SIZE),
            ("marca", TextField.BRAND),
            ("modelo", TextField.MODEL),
            ("tipo", TextField.TYPE),
            ("ean", TextField.BARCODE),
            ("code", TextField.BARCODE),
            ("local", TextField.LOCATION),
            ("volt", TextField.VOLTAGE),
            ("chem", TextField.CHEMISTRY),
            ("motivo", TextField.REASON),
            ("fonte", TextField.SOURCE),
            ("bateria", TextField.BATTERY_NAME),
            ("movimento", TextField.MOVEMENT),
        ],
    )
    def test_synonyms(self, key: str, field) -> None:
        assert resolve_field(key) is field

    def test_case_and_diacritics_ignored(self) -> None:
        assert resolve_field("MARCA") is TextField.BRAND
        assert resolve_field("Márca") is TextField.BRAND

    def test_unknown_key(self) -> None:
        assert resolve_field("zzz") is None
        assert resolve_field("") is None

    def test_no_alias_collisions(self) -> None:
        aliases = [a for keys in FIELD_ALIASES.values() for a in keys]
        assert len(aliases) == len(set(aliases))

    def test_movement_is_metatag_only(self) -> None:
        assert TextField.MOVEMENT not in DEFAULT_SEARCH_FIELDS
        assert TextField.NAME in DEFAULT_SEARCH_FIELDS


# ---------------------------------------------------------------------------
# Operators
# ---------------------------------------------------------------------------


class TestParseOperator:
    @pytest.mark.parametrize(
        ("expression", "op", "rest"),
        [
            (">=10", Operator.GE, "10"),
            ("<=10", Operator.LE, "10"),
            (">10", Operator.GT, "10"),
            ("<10", Operator.LT, "10"),
            ("=10", Operator.EQ, "10"),
            ("10", Operator.EQ, "10"),
            ("", Operator.EQ, ""),
            ("sony", Operator.EQ, "sony"),
        ],
    )
    def test_prefixes(self, expression: str, op: Operator, rest: str) -> None:
        assert parse_operator(expression) == (op, rest)

    def test_only_first_operator_stripped(self) -> None:
        assert parse_operator(">>5") == (Operator.GT, ">5")


class TestCompare:
    def test_all_operators(self) -> None:
        assert Operator.EQ.compare(5, 5)
        assert not Operator.EQ.compare(5, 6)
        assert Operator.GT.compare(6, 5)
        assert not Operator.GT.compare(5, 5)
        assert Operator.LT.compare(4, 5)
        assert Operator.GE.compare(5, 5)
        assert Operator.LE.compare(5, 5)
        assert not Operator.LE.compare(6, 5)


# ---------------------------------------------------------------------------
# Integer parsing
# ---------------------------------------------------------------------------


class TestParseInt:
    @pytest.mark.parametrize(
        ("text", "value"),
        [
            ("12", 12),
            ("12abc", 12),
            (" 7", 7),
            ("-3", -3),
            ("+4", 4),
            ("1.5", 1),
            ("abc", 0),
            ("", 0),
            (">5", 0),
        ],
    )
    def test_leading_integer(self, text: str, value: int) -> None:
        assert parse_int(text) == value

    def test_too_many_digits_is_infinite(self) -> None:
        assert parse_int("9" * 5000) > 10**100
        assert parse_int("-" + "9" * 5000) < -(10**100)
        assert parse_int(" 1" + "0" * 5000 + "abc") > 10**100
