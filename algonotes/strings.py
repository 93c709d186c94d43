"""String searching, counting and rewriting puzzles."""

from __future__ import annotations

from collections import Counter
from collections.abc import MutableSequence
from itertools import zip_longest
from typing import Any

_DIGITS = frozenset("0123456789")
_VOWELS = frozenset("aeiouAEIOU")


def length_of_longest_substring(text: str) -> int:
    """Return the length of the longest run of ``text`` with no repeated character."""
    last_seen: dict[str, int] = {}
    start = best = 0
    for index, char in enumerate(text):
        if last_seen.get(char, -1) >= start:
            start = last_seen[char] + 1
        last_seen[char] = index
        best = max(best, index - start + 1)
    return best


def prefix_table(pattern: str) -> list[int]:
    """Return, for each position, the length of the longest proper prefix that is also a suffix."""
    table = [0] * len(pattern)
    length = 0
    for index, char in enumerate(pattern[1:], start=1):
        while length and char != pattern[length]:
            length = table[length - 1]
        if char == pattern[length]:
            length += 1
        table[index] = length
    return table


def first_occurrence(haystack: str, needle: str) -> int:
    """Return the index of the first match of ``needle`` in ``haystack``, or -1."""
    if not needle:
        return 0
    table = prefix_table(needle)
    matched = 0
    for index, char in enumerate(haystack):
        while matched and char != needle[matched]:
            matched = table[matched - 1]
        if char == needle[matched]:
            matched += 1
            if matched == len(needle):
                return index - matched + 1
    return -1


def reverse_string(chars: MutableSequence[Any]) -> None:
    """Reverse ``chars`` in place."""
    chars.reverse()


def longest_palindrome(text: str) -> int:
    """Return the length of the longest palindrome that can be built from the characters of ``text``."""
    counts = Counter(text).values()
    paired = sum(count - count % 2 for count in counts)
    has_odd = any(count % 2 for count in counts)
    return paired + int(has_odd)


def add_strings(num1: str, num2: str) -> str:
    """Add two non-negative decimal numbers given as strings, keeping leading zeros."""
    for name, value in (("num1", num1), ("num2", num2)):
        if not set(value) <= _DIGITS:
            raise ValueError(f"{name} must hold only decimal digits, got {value!r}")
    digits: list[str] = []
    carry = 0
    for left, right in zip_longest(reversed(num1), reversed(num2), fillvalue="0"):
        carry, digit = divmod(int(left) + int(right) + carry, 10)
        digits.append(str(digit))
    if carry:
        digits.append("1")
    return "".join(reversed(digits))


def repeated_string_match(a: str, b: str) -> int:
    """Return the fewest copies of ``a`` whose concatenation contains ``b``, or -1."""
    if a == b:
        return 1
    if not a:
        raise ValueError("a must not be empty unless b is empty too")
    repeat = max(1, -(-len(b) // len(a)))
    if first_occurrence(a * repeat, b) != -1:
        return repeat
    if first_occurrence(a * (repeat + 1), b) != -1:
        return repeat + 1
    return -1


def _typed(text: str) -> list[str]:
    kept: list[str] = []
    for char in text:
        if char != "#":
            kept.append(char)
        elif kept:
            kept.pop()
    return kept


def backspace_compare(first: str, second: str) -> bool:
    """Tell whether two strings are equal once every ``#`` has erased the character before it."""
    return _typed(first) == _typed(second)


def sort_vowels(text: str) -> str:
    """Put the vowels of ``text`` in ascending code-point order, leaving other characters in place."""
    vowels = iter(sorted(char for char in text if char in _VOWELS))
    return "".join(next(vowels) if char in _VOWELS else char for char in text)