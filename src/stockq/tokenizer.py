"""Query tokenization — split on spaces outside quotes and parentheses."""

from __future__ import annotations

_QUOTE = '"'
_OPEN = "("
_CLOSE = ")"
_SPACE = " "
_OR = "~"


def tokenize(query: str) -> list[str]:
    """Split *query* into top-level tokens.

    - A space delimits only outside quotes and at parenthesis depth 0
    - Every ``"`` toggles quoting; parentheses inside quotes are plain text
    - A stray ``)`` never drives the depth below 0
    - An unterminated quote or group is flushed as the final token
    - Consecutive spaces never produce empty tokens
    """
    tokens: list[str] = []
    buf: list[str] = []
    depth = 0
    in_quotes = False

    for ch in query:
        if ch == _QUOTE:
            in_quotes = not in_quotes
        elif ch == _OPEN and not in_quotes:
            depth += 1
        elif ch == _CLOSE and not in_quotes:
            depth = max(depth - 1, 0)
        elif ch == _SPACE and depth == 0 and not in_quotes:
            if buf:
                tokens.append("".join(buf))
                buf = []
            continue
        buf.append(ch)

    if buf:
        tokens.append("".join(buf))
    return tokens


def split_branches(content: str) -> list[str]:
    """Split the inside of an OR-group on ``~``.

    Only separators at parenthesis depth 0 and outside quotes count, so a
    nested group such as ``(a~b)`` in ``(a~b)~c`` stays one branch.
    """
    branches: list[str] = []
    buf: list[str] = []
    depth = 0
    in_quotes = False

    for ch in content:
        if ch == _QUOTE:
            in_quotes = not in_quotes
        elif ch == _OPEN and not in_quotes:
            depth += 1
        elif ch == _CLOSE and not in_quotes:
            depth = max(depth - 1, 0)
        elif ch == _OR and depth == 0 and not in_quotes:
            branches.append("".join(buf))
            buf = []
            continue
        buf.append(ch)

    branches.append("".join(buf))
    return branches
