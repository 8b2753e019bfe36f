"""A singly linked list of arbitrary contents."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterable, Iterator, Optional


@dataclass
class Node:
    """One link of a list: its content and the next node."""

    content: Any
    next: Optional["Node"] = None


class LinkedList:
    """A singly linked list that iterates over its contents from the head."""

    def __init__(self, contents: Iterable[Any] = ()) -> None:
        self.head: Optional[Node] = None
        for content in contents:
            self.add_back(content)

    def add_front(self, content: Any) -> Node:
        """Insert ``content`` at the head and return its node."""
        node = Node(content, self.head)
        self.head = node
        return node

    def add_back(self, content: Any) -> Node:
        """Append ``content`` at the tail and return its node."""
        node = Node(content)
        tail = self.last()
        if tail is None:
            self.head = node
        else:
            tail.next = node
        return node

    def last(self) -> Optional[Node]:
        """The tail node, or None for an empty list."""
        node = self.head
        if node is None:
            return None
        while node.next is not None:
            node = node.next
        return node

    def _nodes(self) -> Iterator[Node]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def for_each(self, f: Callable[[Any], Any]) -> None:
        """Call ``f`` on every content, from head to tail."""
        for node in self._nodes():
            f(node.content)

    def map(
        self, f: Callable[[Any], Any], delete: Callable[[Any], Any]
    ) -> "LinkedList":
        """A new list holding ``f(content)`` for every content.

        If ``f`` raises part-way, ``delete`` is called on every content
        already produced and the exception propagates.
        """
        result = LinkedList()
        try:
            for node in self._nodes():
                result.add_back(f(node.content))
        except Exception:
            result.clear(delete)
            raise
        return result

    def clear(self, delete: Optional[Callable[[Any], Any]] = None) -> None:
        """Empty the list, calling ``delete`` on each content from tail to head."""
        contents = list(self)
        self.head = None
        if delete is not None:
            for content in reversed(contents):
                delete(content)

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __iter__(self) -> Iterator[Any]:
        for node in self._nodes():
            yield node.content

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"