"""A singly linked list of nodes carrying arbitrary content."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterator, Optional


@dataclass(eq=False)
class Node:
    """One element of a linked list."""

    content: Any
    next: Optional["Node"] = None


def delete_one(node: Optional[Node], delete: Optional[Callable[[Any], None]]) -> None:
    """Pass ``node``'s content to ``delete`` and detach the node.

    Nothing happens when either argument is None.
    """
    if node is None or delete is None:
        return
    delete(node.content)
    node.next = None


class LinkedList:
    """A singly linked list addressed through its first node."""

    def __init__(self, head: Optional[Node] = None) -> None:
        self.head = head

    def _nodes(self) -> Iterator[Node]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def add_front(self, node: Optional[Node]) -> None:
        """Make ``node`` the new first element; None is ignored."""
        if node is None:
            return
        node.next = self.head
        self.head = node

    def add_back(self, node: Optional[Node]) -> None:
        """Attach ``node`` after the last element; None is ignored."""
        if node is None:
            return
        tail = self.last()
        if tail is None:
            self.head = node
        else:
            tail.next = node

    def last(self) -> Optional[Node]:
        """Return the last node, or None for an empty list."""
        tail = None
        for tail in self._nodes():
            pass
        return tail

    def clear(self, delete: Optional[Callable[[Any], None]]) -> None:
        """Hand every node's content to ``delete`` and empty the list.

        With no ``delete`` the list is left as it is.
        """
        if delete is None:
            return
        node = self.head
        while node is not None:
            following = node.next
            delete_one(node, delete)
            node = following
        self.head = None

    def iterate(self, func: Optional[Callable[[Any], None]]) -> None:
        """Call ``func`` on each node's content in order."""
        if func is None:
            return
        for node in self._nodes():
            func(node.content)

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __iter__(self) -> Iterator[Any]:
        return (node.content for node in self._nodes())