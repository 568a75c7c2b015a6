"""A singly linked list."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Iterator, Optional


@dataclass
class ListNode:
    """One node of a singly linked list."""

    val: Any
    next: Optional["ListNode"] = None

    def __iter__(self) -> Iterator[Any]:
        node: Optional[ListNode] = self
        while node is not None:
            yield node.val
            node = node.next


def make_single_linked_list(values: Iterable[Any]) -> Optional[ListNode]:
    """Build a list holding ``values`` in order; ``None`` when there are none."""
    head = None
    for value in reversed(list(values)):
        head = ListNode(value, head)
    return head


def is_palindrome(head: Optional[ListNode]) -> bool:
    """Tell whether the list reads the same forwards and backwards."""
    values = list(head) if head is not None else []
    return values == values[::-1]