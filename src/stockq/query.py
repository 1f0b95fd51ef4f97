"""Boolean query interpreter — parse a query string once, evaluate it per record.

Grammar, by token (first rule that applies wins):

* ``-X``          negation of ``X``
* ``(A~B~...)``   true when any branch is true
* ``"text"``      literal substring match on the default fields (no wildcards)
* ``key:value``   metatag restricting one field; ``key:>=10`` on numeric fields
* ``text``        substring match on the default fields, ``*`` is a wildcard

Top-level tokens are ANDed together. An empty query matches every record.
Parsing never raises: malformed input degrades to one of the rules above.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from functools import lru_cache
from typing import Iterable, TypeVar, Union

from stockq.fields import (
    DEFAULT_SEARCH_FIELDS,
    CanonicalField,
    NumericField,
    Operator,
    TextField,
    normalize_key,
    parse_int,
    parse_operator,
    resolve_field,
)
from stockq.models import Searchable
from stockq.text import match_string
from stockq.tokenizer import split_branches, tokenize

logger = logging.getLogger("stockq.query")

# OR-groups (two or more branches) nested deeper than this are matched as plain text.
MAX_NESTING = 32

R = TypeVar("R", bound=Searchable)

# ---------------------------------------------------------------------------
# AST
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Term:
    """Match *pattern* against every default searchable field."""

    pattern: str
    literal: bool = False


@dataclass(frozen=True)
class Metatag:
    """A ``key:value`` restriction on one canonical field.

    ``field`` is ``None`` when the key is unknown; such a metatag never matches.
    """

    key: str
    field: CanonicalField | None
    operator: Operator
    value: str
    literal: bool = False


@dataclass(frozen=True)
class Negation:
    inner: Node


@dataclass(frozen=True)
class OrGroup:
    branches: tuple[Node, ...]


Node = Union[Term, Metatag, Negation, OrGroup]


@dataclass(frozen=True)
class Query:
    """A parsed query: every clause must hold for a record to match."""

    source: str
    clauses: tuple[Node, ...]

    def matches(self, record: Searchable) -> bool:
        return all(evaluate(clause, record) for clause in self.clauses)


# ---------------------------------------------------------------------------
# Parsing
# ---------------------------------------------------------------------------


def _is_quoted(text: str) -> bool:
    return len(text) >= 2 and text.startswith('"') and text.endswith('"')


def _parse_metatag(token: str) -> Metatag:
    key, expression = token.split(":", 1)

    if _is_quoted(expression):
        # Exact literal: operators are not parsed.
        return Metatag(
            key=normalize_key(key),
            field=resolve_field(key),
            operator=Operator.EQ,
            value=expression[1:-1],
            literal=True,
        )

    op, value = parse_operator(expression)
    return Metatag(
        key=normalize_key(key),
        field=resolve_field(key),
        operator=op,
        value=value,
    )


def parse_token(token: str, depth: int = 0) -> Node:
    """Parse one raw token into an AST node."""
    token = token.strip()

    # Leading dashes and single-branch parentheses peel off without recursing.
    negations = 0
    branches: list[str] = []
    while True:
        if token.startswith("-"):
            negations += 1
            token = token[1:].strip()
        elif token.startswith("(") and token.endswith(")"):
            branches = split_branches(token[1:-1])
            if len(branches) > 1:
                break
            token = branches[0].strip()
            branches = []
        else:
            break

    node: Node
    if branches and depth < MAX_NESTING:
        node = OrGroup(tuple(parse_token(b, depth + 1) for b in branches))
    elif _is_quoted(token):
        node = Term(token[1:-1], literal=True)
    elif ":" in token:
        node = _parse_metatag(token)
    else:
        node = Term(token)

    return Negation(node) if negations % 2 else node


@lru_cache(maxsize=256)
def parse_query(query: str) -> Query:
    """Tokenize and parse *query*. Results are cached per query string."""
    clauses = tuple(parse_token(token) for token in tokenize(query))
    logger.debug("Parsed query %r into %d clause(s)", query, len(clauses))
    return Query(source=query, clauses=clauses)


# ---------------------------------------------------------------------------
# Evaluation
# ---------------------------------------------------------------------------


def _match_any_field(record: Searchable, pattern: str, literal: bool) -> bool:
    return any(
        match_string(record.text_value(field), pattern, literal)
        for field in DEFAULT_SEARCH_FIELDS
    )


def _evaluate_metatag(tag: Metatag, record: Searchable) -> bool:
    if isinstance(tag.field, NumericField):
        return tag.operator.compare(record.number_value(tag.field), parse_int(tag.value))
    if isinstance(tag.field, TextField):
        return match_string(record.text_value(tag.field), tag.value, tag.literal)
    return False


def evaluate(node: Node, record: Searchable) -> bool:
    """Evaluate a single AST node against *record*."""
    if isinstance(node, Negation):
        return not evaluate(node.inner, record)
    if isinstance(node, OrGroup):
        return any(evaluate(branch, record) for branch in node.branches)
    if isinstance(node, Metatag):
        return _evaluate_metatag(node, record)
    return _match_any_field(record, node.pattern, node.literal)


def matches(record: Searchable, query: str) -> bool:
    """Return True when *record* satisfies every token of *query*."""
    return parse_query(query).matches(record)


def filter_records(records: Iterable[R], query: str) -> list[R]:
    """Keep the records matching *query*, preserving their order."""
    parsed = parse_query(query)
    return [record for record in records if parsed.matches(record)]
