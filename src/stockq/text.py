"""Diacritic-insensitive text matching with ``*`` wildcards."""

from __future__ import annotations

import re
import unicodedata

# ---------------------------------------------------------------------------
# Normalization
# ---------------------------------------------------------------------------

_COMBINING_MARKS = re.compile("[\u0300-\u036f]")


def fold(text: str) -> str:
    """Fold *text* for comparison.

    Applies: NFD decomposition -> strip combining marks -> lowercase.
    """
    text = unicodedata.normalize("NFD", text)
    return _COMBINING_MARKS.sub("", text).lower()


def fold_pattern(pattern: str) -> str:
    """Fold a user-typed pattern; underscores also become spaces."""
    return fold(pattern.replace("_", " "))


# ---------------------------------------------------------------------------
# Matching
# ---------------------------------------------------------------------------


def _match_wildcard(haystack: str, pattern: str) -> bool:
    """Find each ``*``-separated segment of *pattern* in order, left to right."""
    pos = 0
    for segment in pattern.split("*"):
        found = haystack.find(segment, pos)
        if found < 0:
            return False
        pos = found + len(segment)
    return True


def match_string(text: str, pattern: str, literal: bool = False) -> bool:
    """Return True when *pattern* occurs anywhere in *text*.

    Both sides are folded first. Unless *literal* is set, ``*`` in the
    pattern matches any run of characters. An empty pattern always matches.
    """
    haystack = fold(text)
    needle = fold_pattern(pattern)

    if not literal and "*" in needle:
        return _match_wildcard(haystack, needle)

    return needle in haystack
