"""Singly linked list node, conversion helpers and list algorithms."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Optional


@dataclass(eq=False)
class ListNode:
    """A singly linked list node holding an integer value."""

    val: int
    next: Optional["ListNode"] = None

    def __iter__(self) -> Iterator["ListNode"]:
        node: Optional[ListNode] = self
        while node is not None:
            yield node
            node = node.next


def _nodes(head: Optional[ListNode]) -> Iterator[ListNode]:
    return iter(head) if head is not None else iter(())


def build_list(values: Iterable[int]) -> Optional[ListNode]:
    """Build a linked list holding ``values`` in order and return its head."""
    dummy = ListNode(0)
    tail = dummy
    for value in values:
        tail.next = ListNode(value)
        tail = tail.next
    return dummy.next


def list_values(head: Optional[ListNode]) -> list[int]:
    """Return the values of an acyclic list, head first."""
    return [node.val for node in _nodes(head)]


def add_two_numbers(
    l1: Optional[ListNode], l2: Optional[ListNode]
) -> Optional[ListNode]:
    """Add two numbers stored as lists of decimal digits, least significant first.

    An empty operand makes the other one the result unchanged.
    """
    if l1 is None:
        return l2
    if l2 is None:
        return l1
    dummy = ListNode(0)
    tail = dummy
    carry = 0
    p1: Optional[ListNode] = l1
    p2: Optional[ListNode] = l2
    while p1 is not None or p2 is not None:
        if p1 is not None:
            carry += p1.val
            p1 = p1.next
        if p2 is not None:
            carry += p2.val
            p2 = p2.next
        carry, digit = divmod(carry, 10)
        tail.next = ListNode(digit)
        tail = tail.next
    if carry:
        tail.next = ListNode(carry)
    return dummy.next


def remove_nth_from_end(head: Optional[ListNode], n: int) -> Optional[ListNode]:
    """Unlink the n-th node counted from the tail and return the head.

    ``n == 0`` removes nothing.
    """
    if n == 0:
        return head
    if n < 0:
        raise ValueError("n must not be negative")
    fast = head
    for _ in range(n):
        if fast is None:
            raise ValueError("n exceeds the length of the list")
        fast = fast.next
    assert head is not None
    if fast is None:
        return head.next
    slow = head
    while fast.next is not None:
        fast = fast.next
        assert slow.next is not None
        slow = slow.next
    assert slow.next is not None
    slow.next = slow.next.next
    return head


def merge_two_lists(
    l1: Optional[ListNode], l2: Optional[ListNode]
) -> Optional[ListNode]:
    """Splice two ascending lists into one; on ties the node of ``l1`` comes first."""
    dummy = ListNode(0)
    tail = dummy
    while l1 is not None and l2 is not None:
        if l1.val <= l2.val:
            tail.next, l1 = l1, l1.next
        else:
            tail.next, l2 = l2, l2.next
        tail = tail.next
    tail.next = l1 if l1 is not None else l2
    return dummy.next


def rotate_right(head: Optional[ListNode], k: int) -> Optional[ListNode]:
    """Rotate the list to the right by ``k`` places and return the new head."""
    if head is None or k == 0:
        return head
    nodes = list(head)
    k %= len(nodes)
    if k == 0:
        return head
    nodes[-1].next = head
    new_tail = nodes[-k - 1]
    new_head = new_tail.next
    new_tail.next = None
    return new_head


def delete_duplicates(head: Optional[ListNode]) -> Optional[ListNode]:
    """Drop repeated values from a sorted list, keeping the first of each run."""
    node = head
    while node is not None and node.next is not None:
        if node.val == node.next.val:
            node.next = node.next.next
        else:
            node = node.next
    return head


def reverse_between(head: Optional[ListNode], m: int, n: int) -> Optional[ListNode]:
    """Reverse the nodes at 1-based positions ``m`` through ``n`` inclusive."""
    nodes = list(_nodes(head))
    if not 1 <= m <= n <= len(nodes):
        raise ValueError("positions must satisfy 1 <= m <= n <= length")
    before = nodes[m - 2] if m > 1 else None
    after = nodes[n] if n < len(nodes) else None
    segment = nodes[m - 1:n]
    for earlier, later in zip(segment, segment[1:]):
        later.next = earlier
    segment[0].next = after
    if before is None:
        return segment[-1]
    before.next = segment[-1]
    return head


def has_cycle(head: Optional[ListNode]) -> bool:
    """Return whether following ``next`` links from ``head`` ever loops."""
    slow = fast = head
    while fast is not None and fast.next is not None:
        fast = fast.next.next
        assert slow is not None
        slow = slow.next
        if fast is slow:
            return True
    return False


def get_intersection_node(
    head_a: Optional[ListNode], head_b: Optional[ListNode]
) -> Optional[ListNode]:
    """Return the first node shared by both lists, or ``None``."""
    len_a = sum(1 for _ in _nodes(head_a))
    len_b = sum(1 for _ in _nodes(head_b))
    a, b = head_a, head_b
    for _ in range(len_a - len_b):
        assert a is not None
        a = a.next
    for _ in range(len_b - len_a):
        assert b is not None
        b = b.next
    while a is not None and b is not None:
        if a is b:
            return a
        a, b = a.next, b.next
    return None


def remove_elements(head: Optional[ListNode], val: int) -> Optional[ListNode]:
    """Unlink every node holding ``val`` and return the new head."""
    dummy = ListNode(0, head)
    prev = dummy
    while prev.next is not None:
        if prev.next.val == val:
            prev.next = prev.next.next
        else:
            prev = prev.next
    return dummy.next


def reverse_list(head: Optional[ListNode]) -> Optional[ListNode]:
    """Reverse the list in place iteratively and return the new head."""
    prev: Optional[ListNode] = None
    node = head
    while node is not None:
        node.next, prev, node = prev, node, node.next
    return prev


def reverse_list_recursive(head: Optional[ListNode]) -> Optional[ListNode]:
    """Reverse the list in place recursively and return the new head."""
    if head is None or head.next is None:
        return head
    new_head = reverse_list_recursive(head.next)
    head.next.next = head
    head.next = None
    return new_head


def is_palindrome_list(head: Optional[ListNode]) -> bool:
    """Return whether the list reads the same forwards and backwards."""
    values = list_values(head)
    return values == values[::-1]


def delete_node(node: Optional[ListNode]) -> None:
    """Remove ``node`` from its list given only the node itself.

    The successor's value is copied in and the successor unlinked; a missing
    node or a tail node is left untouched.
    """
    if node is None or node.next is None:
        return
    node.val = node.next.val
    node.next = node.next.next