"""Array and matrix puzzles."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Sequence
from heapq import merge
from typing import Any

_EMPTY_CELLS = ("0", 0)


def spiral_order(matrix: Sequence[Sequence[Any]]) -> list[Any]:
    """Return the elements of ``matrix`` in clockwise spiral order."""
    rows = [list(row) for row in matrix]
    result: list[Any] = []
    if not rows:
        return result
    top, bottom = 0, len(rows) - 1
    left, right = 0, len(rows[0]) - 1
    while top <= bottom and left <= right:
        result.extend(rows[top][left : right + 1])
        top += 1
        result.extend(row[right] for row in rows[top : bottom + 1])
        right -= 1
        if top <= bottom:
            result.extend(reversed(rows[bottom][left : right + 1]))
            bottom -= 1
        if left <= right:
            result.extend(row[left] for row in reversed(rows[top : bottom + 1]))
            left += 1
    return result


def largest_rectangle_area(heights: Iterable[int]) -> int:
    """Return the area of the largest rectangle fitting under the histogram."""
    bars = list(heights)
    stack: list[int] = []
    best = 0
    for index, height in enumerate([*bars, 0]):
        while stack and bars[stack[-1]] > height:
            top = stack.pop()
            width = index - stack[-1] - 1 if stack else index
            best = max(best, bars[top] * width)
        stack.append(index)
    return best


def maximal_rectangle(matrix: Sequence[Sequence[Any]]) -> int:
    """Return the area of the largest all-filled rectangle; ``"0"`` cells are empty."""
    if not matrix:
        return 0
    heights = [0] * len(matrix[0])
    best = 0
    for row in matrix:
        heights = [0 if cell in _EMPTY_CELLS else h + 1 for h, cell in zip(heights, row)]
        best = max(best, largest_rectangle_area(heights))
    return best


def max_sliding_window(nums: Sequence[Any], k: int) -> list[Any]:
    """Return the maximum of every window of ``k`` consecutive elements."""
    if k < 1:
        raise ValueError(f"k must be at least 1, got {k}")
    values = list(nums)
    window: deque[int] = deque()
    result: list[Any] = []
    for index, value in enumerate(values):
        while window and value > values[window[-1]]:
            window.pop()
        window.append(index)
        if window[0] <= index - k:
            window.popleft()
        if index >= k - 1:
            result.append(values[window[0]])
    return result


def merge_sort(nums: Iterable[Any]) -> list[Any]:
    """Return a new list with the elements of ``nums`` in stable ascending order."""
    items = list(nums)
    if len(items) <= 1:
        return items
    middle = (len(items) + 1) // 2
    return list(merge(merge_sort(items[:middle]), merge_sort(items[middle:])))


def min_k_bit_flips(nums: Sequence[int], k: int) -> int:
    """Return the fewest flips of ``k`` consecutive bits that make every bit 1, or -1."""
    if k < 1:
        raise ValueError(f"k must be at least 1, got {k}")
    size = len(nums)
    active: deque[int] = deque()
    flips = 0
    for index, bit in enumerate(nums):
        if active and active[0] < index:
            active.popleft()
        if len(active) % 2 == bit:
            if index + k > size:
                return -1
            active.append(index + k - 1)
            flips += 1
    return flips


def min_days(bloom_day: Sequence[int], m: int, k: int) -> int:
    """Return the first day on which ``m`` bouquets of ``k`` adjacent flowers can be made, or -1."""
    if m < 1 or k < 1:
        raise ValueError(f"m and k must be at least 1, got m={m}, k={k}")
    days = list(bloom_day)
    if m * k > len(days):
        return -1

    def enough(day: int) -> bool:
        bouquets = run = 0
        for bloom in days:
            if bloom <= day:
                run += 1
            else:
                bouquets += run // k
                run = 0
        return bouquets + run // k >= m

    low, high = min(days), max(days)
    while low <= high:
        middle = (low + high) // 2
        if enough(middle):
            high = middle - 1
        else:
            low = middle + 1
    return low


def time_required_to_buy(tickets: Sequence[int], k: int) -> int:
    """Return the seconds until person ``k`` in the ticket line has bought all their tickets."""
    counts = list(tickets)
    if not 0 <= k < len(counts):
        raise IndexError(f"k must index the line of {len(counts)} people, got {k}")
    if any(count < 0 for count in counts):
        raise ValueError("ticket counts must not be negative")
    target = counts[k]
    if target == 0:
        return 0
    return sum(
        min(count, target if position <= k else target - 1)
        for position, count in enumerate(counts)
    )