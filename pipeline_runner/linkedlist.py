"""A singly linked list of arbitrary contents."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterable, Iterator, Optional

Deleter = Optional[Callable[[Any], object]]


@dataclass(eq=False)
class Node:
    """One element of a LinkedList."""

    content: Any
    next: Optional["Node"] = None


def delete_node(node: Optional[Node], delete: Deleter) -> None:
    """Hand a node's content to delete and detach the node from its successor.

    Nothing happens unless both a node and a delete callback are given.
    """
    if node is None or delete is None:
        return
    delete(node.content)
    node.next = None


def _as_node(item: Any) -> Node:
    return item if isinstance(item, Node) else Node(item)


class LinkedList:
    """Singly linked list; iteration yields the contents in order."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self.head: Optional[Node] = None
        for item in items:
            self.push_back(item)

    def _nodes(self) -> Iterator[Node]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def push_front(self, node: Any) -> Node:
        """Put a node (or a content, wrapped in a new node) at the front."""
        new = _as_node(node)
        new.next = self.head
        self.head = new
        return new

    def push_back(self, node: Any) -> Node:
        """Attach a node (or a content, wrapped in a new node) at the end."""
        new = _as_node(node)
        tail = self.last()
        if tail is None:
            self.head = new
        else:
            tail.next = new
        return new

    def last(self) -> Optional[Node]:
        """The final node, or None for an empty list."""
        tail = None
        for tail in self._nodes():
            pass
        return tail

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __iter__(self) -> Iterator[Any]:
        return (node.content for node in self._nodes())

    def clear(self, delete: Deleter = None) -> None:
        """Empty the list, passing every content to delete in order."""
        node = self.head
        while node is not None:
            following = node.next
            if delete is not None:
                delete(node.content)
            node.next = None
            node = following
        self.head = None

    def for_each(self, func: Callable[[Any], object]) -> None:
        """Call func on every content in order."""
        for content in self:
            func(content)

    def map(self, func: Callable[[Any], Any], delete: Deleter = None) -> "LinkedList":
        """Build a new list of func(content) for every content.

        A None result from func is a failure: the contents built so far are
        passed to delete and ValueError is raised.
        """
        result = LinkedList()
        for content in self:
            mapped = func(content)
            if mapped is None:
                result.clear(delete)
                raise ValueError("mapping function produced no value")
            result.push_back(mapped)
        return result