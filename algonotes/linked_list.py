"""Singly linked lists and the classic operations on them."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any


@dataclass(eq=False)
class ListNode:
    """A node of a singly linked list."""

    val: Any = 0
    next: ListNode | None = None

    def __iter__(self) -> Iterator[Any]:
        """Yield the values from this node to the end of the list."""
        node: ListNode | None = self
        while node is not None:
            yield node.val
            node = node.next


def _nodes(head: ListNode | None) -> Iterator[ListNode]:
    node = head
    while node is not None:
        yield node
        node = node.next


def build_list(values: Iterable[Any]) -> ListNode | None:
    """Build a linked list holding ``values`` in order; empty input gives None."""
    head: ListNode | None = None
    for value in reversed(list(values)):
        head = ListNode(value, head)
    return head


def to_list(head: ListNode | None) -> list[Any]:
    """Return the values of a linked list as a Python list."""
    return list(head) if head is not None else []


def remove_nth_from_end(head: ListNode | None, n: int) -> ListNode | None:
    """Unlink the ``n``-th node counted from the end and return the new head."""
    length = sum(1 for _ in _nodes(head))
    if not 1 <= n <= length:
        raise ValueError(f"n must be between 1 and {length}, got {n}")
    assert head is not None
    steps = length - n
    if steps == 0:
        return head.next
    prev = head
    for _ in range(steps - 1):
        assert prev.next is not None
        prev = prev.next
    removed = prev.next
    assert removed is not None
    prev.next = removed.next
    removed.next = None
    return head


def rotate_right(head: ListNode | None, k: int) -> ListNode | None:
    """Rotate the list ``k`` places to the right and return the new head."""
    if k < 0:
        raise ValueError(f"k must not be negative, got {k}")
    if head is None or head.next is None:
        return head
    nodes = list(_nodes(head))
    k %= len(nodes)
    if k == 0:
        return head
    new_head = nodes[-k]
    nodes[-k - 1].next = None
    nodes[-1].next = head
    return new_head


def reverse_list(head: ListNode | None) -> ListNode | None:
    """Reverse the list in place and return its new head."""
    prev: ListNode | None = None
    current = head
    while current is not None:
        current.next, prev, current = prev, current, current.next
    return prev


def is_palindrome_list(head: ListNode | None) -> bool:
    """Tell whether the list reads the same forwards and backwards."""
    values = to_list(head)
    return values == values[::-1]


def middle_node(head: ListNode | None) -> ListNode | None:
    """Return the middle node; for an even length, the second of the two middles."""
    slow = fast = head
    while fast is not None and fast.next is not None:
        assert slow is not None
        slow = slow.next
        fast = fast.next.next
    return slow