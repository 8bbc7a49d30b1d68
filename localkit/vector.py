"""A growable sequence with explicit capacity bookkeeping."""

import sys
from typing import Any, Callable, Iterator, List, Optional

from .crayon import Crayon

_DEFAULT_CAPACITY = 20


class Vector:
    """A list of elements whose capacity grows in steps of 20."""

    def __init__(self, capacity: int = _DEFAULT_CAPACITY, elem_size: int = 0) -> None:
        if capacity <= 0:
            raise ValueError(
                "Vector Fatal Error: vector initial capacity must be bigger than ZERO!"
            )
        self._items: List[Any] = []
        self._capacity = capacity
        self.elem_size = elem_size

    @property
    def capacity(self) -> int:
        """Number of elements the vector holds before it must grow."""
        return self._capacity

    def _make_room(self) -> None:
        if len(self._items) >= self._capacity:
            self.extend_capacity(_DEFAULT_CAPACITY)

    def _element(self, elem: Any) -> Any:
        return bytearray(self.elem_size) if elem is None else elem

    def push_front(self, elem: Any) -> None:
        """Insert elem at the front; None inserts a zeroed element buffer."""
        self._make_room()
        self._items.insert(0, self._element(elem))

    def push_back(self, elem: Any) -> None:
        """Append elem; None appends a zeroed element buffer."""
        self._make_room()
        self._items.append(self._element(elem))

    def peek_front(self) -> Optional[Any]:
        """The first element, or None when empty."""
        return self._items[0] if self._items else None

    def peek_back(self) -> Optional[Any]:
        """The last element, or None when empty."""
        return self._items[-1] if self._items else None

    def pop_front(self) -> Optional[Any]:
        """Remove and return the first element, or None when empty."""
        return self._items.pop(0) if self._items else None

    def pop_back(self) -> Optional[Any]:
        """Remove and return the last element, or None when empty."""
        return self._items.pop() if self._items else None

    def remove(self, target: Any, comp: Callable[[Any, Any], bool]) -> Optional[Any]:
        """Remove and return the first element for which comp(target, elem) holds."""
        if target is None:
            raise ValueError("target must not be None")
        for pos, elem in enumerate(self._items):
            if comp(target, elem):
                del self._items[pos]
                return elem
        return None

    def clear(self) -> None:
        """Drop every element and release the capacity."""
        self._items.clear()
        self._capacity = 0

    def in_bound(self, index: int) -> bool:
        """True when index addresses an existing element."""
        return 0 <= index < len(self._items)

    def at(self, index: int) -> Any:
        """The element at index; IndexError when out of bound."""
        if not self.in_bound(index):
            raise IndexError(
                f"Vector Fatal Error: The index {index} is out of bound, "
                f"vector size: {len(self._items)}"
            )
        return self._items[index]

    def extend_capacity(self, extra: int) -> None:
        """Grow the capacity by extra elements."""
        self._capacity += extra

    def meta_info(self) -> None:
        """Print size, capacity and element size to standard output."""
        bold, reset = Crayon.BOLD.value, Crayon.NOCRAYON.value
        out = sys.stdout
        out.write(f"Vector Size: {bold}{len(self._items)}\n{reset}")
        out.write(f"Vector Capacity: {bold}{self._capacity}\n{reset}")
        out.write(f"Vector's Element Size: {bold}{self.elem_size}\n{reset}")

    def is_empty(self) -> bool:
        """True when the vector holds no elements."""
        return not self._items

    def apply(self, fn: Callable[[Any], Any]) -> None:
        """Call fn on every element in order."""
        if fn is None:
            raise ValueError("fn must not be None")
        for elem in self._items:
            fn(elem)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(list(self._items))

    def __repr__(self) -> str:
        return f"Vector({self._items!r}, capacity={self._capacity})"