"""Operations on singly linked lists."""

from __future__ import annotations

import heapq
from typing import Optional

from algodrills.nodes import ListNode, from_values


def binary_list_value(head: Optional[ListNode]) -> int:
    """Read a list of bits, most significant first, as an integer."""
    total = 0
    for bit in head or ():
        total = (total << 1) | bit
    return total


def partition(head: Optional[ListNode], x: int) -> Optional[ListNode]:
    """Relink so nodes below ``x`` come first, keeping relative order."""
    before = before_tail = ListNode()
    after = after_tail = ListNode()
    node = head
    while node is not None:
        if node.val < x:
            before_tail.next = node
            before_tail = node
        else:
            after_tail.next = node
            after_tail = node
        node = node.next
    after_tail.next = None
    before_tail.next = after.next
    return before.next


def odd_even_list(head: Optional[ListNode]) -> Optional[ListNode]:
    """Relink so nodes at odd positions (1-based) precede those at even ones."""
    if head is None:
        return None
    odd = odd_tail = ListNode()
    even = even_tail = ListNode()
    node: Optional[ListNode] = head
    position = 1
    while node is not None:
        if position % 2 == 1:
            odd_tail.next = node
            odd_tail = node
        else:
            even_tail.next = node
            even_tail = node
        node = node.next
        position += 1
    odd_tail.next = even.next
    even_tail.next = None
    return odd.next


def has_cycle(head: Optional[ListNode]) -> bool:
    """Tell whether following ``next`` from ``head`` ever loops."""
    slow = fast = head
    while fast is not None and fast.next is not None:
        slow = slow.next
        fast = fast.next.next
        if slow is fast:
            return True
    return False


def reverse_list(head: Optional[ListNode]) -> Optional[ListNode]:
    """Reverse a list in place and return its new head."""
    prev: Optional[ListNode] = None
    node = head
    while node is not None:
        node.next, prev, node = prev, node, node.next
    return prev


def merge_two_lists(
    list1: Optional[ListNode], list2: Optional[ListNode]
) -> Optional[ListNode]:
    """Merge two sorted lists into a new sorted list; the inputs are untouched."""
    return from_values(heapq.merge(list1 or (), list2 or ()))


def swap_pairs(head: Optional[ListNode]) -> Optional[ListNode]:
    """Swap every two adjacent nodes by relinking them."""
    if head is None or head.next is None:
        return head
    dummy = prev = ListNode()
    node: Optional[ListNode] = head
    while node is not None and node.next is not None:
        first, second = node, node.next
        prev.next = second
        first.next = second.next
        second.next = first
        prev = first
        node = first.next
    return dummy.next