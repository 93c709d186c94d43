"""Checking, generating and repairing bracket sequences."""

from __future__ import annotations

from collections.abc import Iterator

_OPENERS = "({["
_MATCHING = {")": "(", "}": "{", "]": "["}


def is_valid(text: str) -> bool:
    """Tell whether every bracket in ``text`` is closed in the right order."""
    stack: list[str] = []
    for char in text:
        if char in _OPENERS:
            stack.append(char)
            continue
        if not stack:
            return False
        expected = _MATCHING.get(char)
        if expected is not None and stack[-1] != expected:
            return False
        stack.pop()
    return not stack


def generate_parentheses(n: int) -> list[str]:
    """Return every well-formed string of ``n`` pairs of round brackets."""

    def extend(prefix: str, opened: int, closed: int) -> Iterator[str]:
        if opened + closed == 2 * n:
            yield prefix
            return
        if opened < n:
            yield from extend(prefix + "(", opened + 1, closed)
        if closed < opened:
            yield from extend(prefix + ")", opened, closed + 1)

    return list(extend("", 0, 0))


def min_add_to_make_valid(text: str) -> int:
    """Count the brackets that must be added to balance ``text``.

    Every character other than ``(`` is treated as a closing bracket.
    """
    unmatched_close = 0
    open_count = 0
    for char in text:
        if char == "(":
            open_count += 1
        elif open_count:
            open_count -= 1
        else:
            unmatched_close += 1
    return unmatched_close + open_count