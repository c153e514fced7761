"""Singly linked nodes and a list built on them."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any


@dataclass(eq=False, repr=False)
class Node:
    """A node of a singly linked list; compared by identity."""

    value: Any
    next: Node | None = None

    def __iter__(self) -> Iterator[Any]:
        node: Node | None = self
        while node is not None:
            yield node.value
            node = node.next

    def __repr__(self) -> str:
        return f"Node({self.value!r})"


def build(values: Iterable[Any]) -> Node | None:
    """Link ``values`` into nodes and return the head, or None when empty."""
    head: Node | None = None
    tail: Node | None = None
    for value in values:
        node = Node(value)
        if tail is None:
            head = node
        else:
            tail.next = node
        tail = node
    return head


class LinkedList:
    """A singly linked list addressed by zero-based positions."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self.head: Node | None = build(values)

    def __iter__(self) -> Iterator[Any]:
        return iter(self.head) if self.head is not None else iter(())

    def __len__(self) -> int:
        return sum(1 for _ in self)

    def __str__(self) -> str:
        return "".join(f"{value}->" for value in self) + "NULL"

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"

    def _node_at(self, position: int) -> Node:
        if position < 0:
            raise IndexError("position out of range")
        node = self.head
        for _ in range(position):
            if node is None:
                break
            node = node.next
        if node is None:
            raise IndexError("position out of range")
        return node

    def insert_at_head(self, value: Any) -> None:
        self.head = Node(value, self.head)

    def append(self, value: Any) -> None:
        node = Node(value)
        if self.head is None:
            self.head = node
            return
        tail = self.head
        while tail.next is not None:
            tail = tail.next
        tail.next = node

    def insert_at(self, position: int, value: Any) -> None:
        """Insert ``value`` so that it ends up at ``position`` (0..len)."""
        if position == 0:
            self.insert_at_head(value)
            return
        previous = self._node_at(position - 1)
        previous.next = Node(value, previous.next)

    def update_at(self, position: int, value: Any) -> None:
        self._node_at(position).value = value

    def delete_head(self) -> None:
        if self.head is None:
            raise IndexError("delete from empty list")
        self.head = self.head.next

    def delete_tail(self) -> None:
        if self.head is None:
            raise IndexError("delete from empty list")
        if self.head.next is None:
            self.head = None
            return
        second_last = self.head
        while second_last.next is not None and second_last.next.next is not None:
            second_last = second_last.next
        second_last.next = None

    def delete_at(self, position: int) -> None:
        if position == 0:
            self.delete_head()
            return
        previous = self._node_at(position - 1)
        if previous.next is None:
            raise IndexError("position out of range")
        previous.next = previous.next.next

    def delete_alternate(self) -> None:
        """Remove every second node, keeping positions 0, 2, 4, ..."""
        node = self.head
        while node is not None and node.next is not None:
            node.next = node.next.next
            node = node.next