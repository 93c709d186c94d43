"""Small integer puzzles."""

from __future__ import annotations

_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1


def reverse_integer(x: int) -> int:
    """Reverse the decimal digits of ``x``; return 0 if the result leaves 32-bit range."""
    magnitude = int(str(abs(x))[::-1])
    result = -magnitude if x < 0 else magnitude
    return result if _INT_MIN <= result <= _INT_MAX else 0


def is_palindrome_number(x: int) -> bool:
    """Tell whether ``x`` reads the same in both directions; negatives never do."""
    if x < 0:
        return False
    digits = str(x)
    return digits == digits[::-1]


def climb_stairs(n: int) -> int:
    """Count the ways to climb ``n`` steps taking one or two at a time."""
    if n <= 1:
        return 1
    previous, current = 1, 1
    for _ in range(n - 1):
        previous, current = current, previous + current
    return current


def fib(n: int) -> int:
    """Return the ``n``-th Fibonacci number; ``n`` up to 1 is returned as is."""
    if n <= 1:
        return n
    previous, current = 0, 1
    for _ in range(n - 1):
        previous, current = current, previous + current
    return current


def find_the_winner(n: int, k: int) -> int:
    """Return the 1-based seat of the survivor when every ``k``-th of ``n`` friends leaves."""
    if n < 1:
        raise ValueError(f"n must be at least 1, got {n}")
    position = 0
    for size in range(2, n + 1):
        position = (position + k) % size
    return position + 1