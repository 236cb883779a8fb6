"""Singly linked list helpers and classic list algorithms."""

from __future__ import annotations

from dataclasses import dataclass
from itertools import pairwise, zip_longest
from typing import Iterable, Iterator, Optional


@dataclass(eq=False, repr=False)
class ListNode:
    """A node of a singly linked list."""

    val: int = 0
    next: Optional["ListNode"] = None

    def __iter__(self) -> Iterator["ListNode"]:
        node: Optional[ListNode] = self
        while node is not None:
            yield node
            node = node.next

    def __repr__(self) -> str:
        return f"ListNode({[n.val for n in self]!r})"


def build_list(values: Iterable[int]) -> Optional[ListNode]:
    """Build a linked list holding ``values`` in order; empty input gives None."""
    dummy = ListNode()
    tail = dummy
    for value in values:
        tail.next = ListNode(value)
        tail = tail.next
    return dummy.next


def list_values(head: Optional[ListNode]) -> list[int]:
    """Return the values of a linked list as a Python list."""
    return [] if head is None else [node.val for node in head]


def add_two_numbers(l1: Optional[ListNode], l2: Optional[ListNode]) -> Optional[ListNode]:
    """Add two numbers stored as reversed digit lists; return a new digit list."""
    dummy = ListNode()
    tail = dummy
    carry = 0
    while l1 is not None or l2 is not None or carry:
        total = carry
        if l1 is not None:
            total += l1.val
            l1 = l1.next
        if l2 is not None:
            total += l2.val
            l2 = l2.next
        carry, digit = divmod(total, 10)
        tail.next = ListNode(digit)
        tail = tail.next
    return dummy.next


def merge_two_lists(list1: Optional[ListNode], list2: Optional[ListNode]) -> Optional[ListNode]:
    """Splice two sorted lists into one sorted list; ties take from ``list1`` first."""
    dummy = ListNode()
    tail = dummy
    while list1 is not None and list2 is not None:
        if list1.val <= list2.val:
            tail.next, list1 = list1, list1.next
        else:
            tail.next, list2 = list2, list2.next
        tail = tail.next
    tail.next = list1 if list1 is not None else list2
    return dummy.next


def merge_k_lists(lists: Iterable[Optional[ListNode]]) -> Optional[ListNode]:
    """Merge any number of sorted lists by repeated pairwise merging."""
    pending = list(lists)
    if not pending:
        return None
    while len(pending) > 1:
        it = iter(pending)
        pending = [merge_two_lists(a, b) for a, b in zip_longest(it, it)]
    return pending[0]


def reverse_k_group(head: Optional[ListNode], k: int) -> Optional[ListNode]:
    """Reverse the list in consecutive groups of ``k``; a short tail stays as is."""
    if k < 1:
        raise ValueError("k must be a positive integer")
    dummy = ListNode()
    tail = dummy
    node = head
    while True:
        group: list[ListNode] = []
        cursor = node
        while cursor is not None and len(group) < k:
            group.append(cursor)
            cursor = cursor.next
        if len(group) < k:
            tail.next = node
            break
        tail.next = group[-1]
        for later, earlier in pairwise(reversed(group)):
            later.next = earlier
        group[0].next = None
        tail = group[0]
        node = cursor
    return dummy.next