"""A singly linked list of arbitrary contents."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterable, Iterator


@dataclass(eq=False)
class Node:
    """One list node holding ``content`` and a link to the next node."""

    content: Any
    next: Node | None = None


class LinkedList:
    """A singly linked list built from :class:`Node` objects."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self.head: Node | None = None
        for item in items:
            self.add_back(Node(item))

    def _nodes(self) -> Iterator[Node]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def add_front(self, node: Node) -> None:
        """Insert ``node`` at the beginning of the list."""
        if self.head is not None:
            node.next = self.head
        self.head = node

    def add_back(self, node: Node) -> None:
        """Attach ``node`` after the current last node."""
        tail = self.last()
        if tail is None:
            self.head = node
        else:
            tail.next = node

    def last(self) -> Node | None:
        """Return the last node, or None if the list is empty."""
        tail = None
        for tail in self._nodes():
            pass
        return tail

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __iter__(self) -> Iterator[Any]:
        return (node.content for node in self._nodes())

    def iterate(self, func: Callable[[Any], Any]) -> None:
        """Call ``func`` on the content of every node in order."""
        for content in self:
            func(content)

    def map(
        self,
        func: Callable[[Any], Any],
        delete: Callable[[Any], Any] | None = None,
    ) -> LinkedList:
        """Return a new list of ``func`` applied to each content.

        If ``func`` fails, the contents already produced are passed to
        ``delete`` and the error is re-raised.
        """
        result = LinkedList()
        try:
            for content in self:
                result.add_back(Node(func(content)))
        except Exception:
            result.clear(delete)
            raise
        return result

    def clear(self, delete: Callable[[Any], Any] | None = None) -> None:
        """Remove every node, passing each content to ``delete`` if given."""
        node = self.head
        while node is not None:
            following = node.next
            if delete is not None:
                delete(node.content)
            node.next = None
            node = following
        self.head = None