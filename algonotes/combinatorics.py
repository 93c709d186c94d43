"""Permutations and subsets by backtracking."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from typing import Any


def _swap_permutations(items: list[Any], index: int, unique: bool) -> Iterator[list[Any]]:
    if index == len(items):
        yield list(items)
        return
    seen: set[Any] = set()
    for i in range(index, len(items)):
        if unique:
            if items[i] in seen:
                continue
            seen.add(items[i])
        items[index], items[i] = items[i], items[index]
        yield from _swap_permutations(items, index + 1, unique)
        items[index], items[i] = items[i], items[index]


def permute(nums: Sequence[Any]) -> list[list[Any]]:
    """Return every ordering of ``nums`` in swap-backtracking order."""
    return list(_swap_permutations(list(nums), 0, unique=False))


def permute_unique(nums: Sequence[Any]) -> list[list[Any]]:
    """Return every distinct ordering of ``nums``, which may hold repeats."""
    return list(_swap_permutations(list(nums), 0, unique=True))


def subsets(nums: Sequence[Any]) -> list[list[Any]]:
    """Return every subset of ``nums``, each leaving out an element before taking it."""
    items = list(nums)

    def choose(index: int, chosen: list[Any]) -> Iterator[list[Any]]:
        if index == len(items):
            yield list(chosen)
            return
        yield from choose(index + 1, chosen)
        chosen.append(items[index])
        yield from choose(index + 1, chosen)
        chosen.pop()

    return list(choose(0, []))