"""A doubly ended linked list of non-None elements."""

from collections import deque
from typing import Any, Iterator


class LinkedList:
    """A list that grows at either end."""

    def __init__(self, *args: Any) -> None:
        if len(args) > 1:
            raise TypeError("LinkedList takes at most one initial element")
        self._nodes: deque = deque(args)

    @staticmethod
    def _require(elem: Any) -> Any:
        if elem is None:
            raise ValueError("element must not be None")
        return elem

    def insert_back(self, elem: Any) -> None:
        """Append elem at the tail."""
        self._nodes.append(self._require(elem))

    def insert_front(self, elem: Any) -> None:
        """Insert elem at the head."""
        self._nodes.appendleft(self._require(elem))

    def clear(self) -> None:
        """Remove every element."""
        self._nodes.clear()

    def __len__(self) -> int:
        return len(self._nodes)

    def __iter__(self) -> Iterator[Any]:
        return iter(list(self._nodes))

    def __repr__(self) -> str:
        return f"LinkedList({list(self._nodes)!r})"