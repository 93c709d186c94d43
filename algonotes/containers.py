"""A stack built on queues and a queue built on stacks."""

from __future__ import annotations

from collections import deque
from typing import Any


class QueueStack:
    """A last-in, first-out stack that only uses queue operations internally."""

    def __init__(self) -> None:
        self._items: deque[Any] = deque()
        self._buffer: deque[Any] = deque()

    def __len__(self) -> int:
        return len(self._items)

    def push(self, x: Any) -> None:
        """Put ``x`` on top of the stack."""
        self._items.append(x)

    def pop(self) -> Any:
        """Remove and return the top element."""
        if not self._items:
            raise IndexError("pop from empty stack")
        while len(self._items) > 1:
            self._buffer.append(self._items.popleft())
        value = self._items.popleft()
        self._items, self._buffer = self._buffer, self._items
        return value

    def top(self) -> Any:
        """Return the top element without removing it."""
        if not self._items:
            raise IndexError("top of empty stack")
        return self._items[-1]

    def is_empty(self) -> bool:
        """Tell whether the stack holds nothing."""
        return not self._items


class StackQueue:
    """A first-in, first-out queue that only uses stack operations internally."""

    def __init__(self) -> None:
        self._inbox: list[Any] = []
        self._outbox: list[Any] = []

    def __len__(self) -> int:
        return len(self._inbox) + len(self._outbox)

    def _refill(self) -> None:
        if not self._outbox:
            while self._inbox:
                self._outbox.append(self._inbox.pop())

    def push(self, x: Any) -> None:
        """Add ``x`` to the back of the queue."""
        self._inbox.append(x)

    def pop(self) -> Any:
        """Remove and return the front element."""
        self._refill()
        if not self._outbox:
            raise IndexError("pop from empty queue")
        return self._outbox.pop()

    def peek(self) -> Any:
        """Return the front element without removing it."""
        self._refill()
        if not self._outbox:
            raise IndexError("peek at empty queue")
        return self._outbox[-1]

    def is_empty(self) -> bool:
        """Tell whether the queue holds nothing."""
        return not self._inbox and not self._outbox