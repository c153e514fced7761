"""Classic algorithms on chains of linked nodes."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable
from typing import Any

from linkwork.nodes import Node


def lists_equal(head1: Node | None, head2: Node | None) -> bool:
    """Return True when both chains hold the same values in the same order."""
    a, b = head1, head2
    while a is not None and b is not None:
        if a.value != b.value:
            return False
        a, b = a.next, b.next
    return a is None and b is None


def length(head: Node | None) -> int:
    count = 0
    while head is not None:
        count += 1
        head = head.next
    return count


def advance(head: Node | None, k: int) -> Node | None:
    """Return the node ``k`` steps after ``head`` (None just past the end)."""
    if k < 0:
        raise IndexError("cannot advance a negative number of steps")
    node = head
    for _ in range(k):
        if node is None:
            raise IndexError("advanced past the end of the list")
        node = node.next
    return node


def intersection(head1: Node | None, head2: Node | None) -> Node | None:
    """Return the first node shared by both chains, or None."""
    len1, len2 = length(head1), length(head2)
    if len1 > len2:
        ptr1, ptr2 = advance(head1, len1 - len2), head2
    else:
        ptr1, ptr2 = head1, advance(head2, len2 - len1)
    while ptr1 is not None and ptr2 is not None:
        if ptr1 is ptr2:
            return ptr1
        ptr1, ptr2 = ptr1.next, ptr2.next
    return None


def remove_from_end(head: Node | None, k: int) -> Node | None:
    """Unlink the ``k``-th node from the end (1-based) and return the head."""
    if k < 1:
        raise IndexError("k must be at least 1")
    lead = advance(head, k)
    if lead is None:
        assert head is not None
        return head.next
    current = head
    while lead.next is not None:
        current = current.next
        lead = lead.next
    current.next = current.next.next
    return head


def merge_sorted(head1: Node | None, head2: Node | None) -> Node | None:
    """Splice two sorted chains into one sorted chain; ties favour ``head1``."""
    dummy = Node(None)
    tail = dummy
    a, b = head1, head2
    while a is not None and b is not None:
        if a.value <= b.value:
            tail.next, a = a, a.next
        else:
            tail.next, b = b, b.next
        tail = tail.next
    tail.next = a if a is not None else b
    return dummy.next


def merge_k_sorted(heads: Iterable[Node | None]) -> Node | None:
    """Merge sorted chains pairwise from the front until one remains."""
    queue = deque(heads)
    if not queue:
        return None
    while len(queue) > 1:
        first = queue.popleft()
        second = queue.popleft()
        queue.append(merge_sorted(first, second))
    return queue[0]


def middle(head: Node | None) -> Node | None:
    """Return the middle node; the second of two middles for even lengths."""
    slow = fast = head
    while fast is not None and fast.next is not None:
        slow = slow.next
        fast = fast.next.next
    return slow


def _meeting_point(head: Node | None) -> Node | None:
    slow = fast = head
    while fast is not None and fast.next is not None:
        slow = slow.next
        fast = fast.next.next
        if slow is fast:
            return slow
    return None


def has_cycle(head: Node | None) -> bool:
    return _meeting_point(head) is not None


def remove_cycle(head: Node | None) -> None:
    """Break the cycle in the chain by unlinking its last node."""
    meeting = _meeting_point(head)
    if meeting is None:
        raise ValueError("list has no cycle")
    start = head
    while start is not meeting:
        start = start.next
        meeting = meeting.next
    last = start
    while last.next is not start:
        last = last.next
    last.next = None


def remove_duplicates(head: Node | None) -> Node | None:
    """Drop nodes equal to their predecessor and return the head."""
    node = head
    while node is not None:
        while node.next is not None and node.value == node.next.value:
            node.next = node.next.next
        node = node.next
    return head


def reversed_values(head: Node | None) -> list[Any]:
    """Return the chain's values from last to first."""
    values = list(head) if head is not None else []
    values.reverse()
    return values


def reverse(head: Node | None) -> Node | None:
    previous = None
    current = head
    while current is not None:
        current.next, previous, current = previous, current, current.next
    return previous


def reverse_recursive(head: Node | None) -> Node | None:
    if head is None or head.next is None:
        return head
    new_head = reverse_recursive(head.next)
    head.next.next = head
    head.next = None
    return new_head


def reverse_in_groups(head: Node | None, k: int) -> Node | None:
    """Reverse each run of ``k`` nodes, including a shorter final run."""
    if k < 1:
        raise ValueError("group size must be at least 1")
    new_head: Node | None = None
    previous_tail: Node | None = None
    current = head
    while current is not None:
        group_head = current
        previous = None
        for _ in range(k):
            if current is None:
                break
            current.next, previous, current = previous, current, current.next
        if previous_tail is None:
            new_head = previous
        else:
            previous_tail.next = previous
        previous_tail = group_head
    return new_head