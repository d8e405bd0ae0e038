"""A circular doubly linked sequence with identity-free equality callbacks."""

from __future__ import annotations

import operator
from collections import deque
from collections.abc import Callable, Iterable, Iterator
from typing import Any, Optional, Tuple

Eq = Callable[[Any, Any], bool]


class CircularList:
    """Ordered collection with cheap insertion and removal at both ends."""

    def __init__(self, items: Optional[Iterable[Any]] = None) -> None:
        self._items: deque[Any] = deque(items if items is not None else ())

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __repr__(self) -> str:
        return f"CircularList({list(self._items)!r})"

    def first(self) -> Any:
        """Return the element at the head; raise IndexError when empty."""
        if not self._items:
            raise IndexError("first() on an empty list")
        return self._items[0]

    def last(self) -> Any:
        """Return the element at the tail; raise IndexError when empty."""
        if not self._items:
            raise IndexError("last() on an empty list")
        return self._items[-1]

    def is_empty(self) -> bool:
        return not self._items

    def prepend(self, data: Any) -> None:
        self._items.appendleft(data)

    def append(self, data: Any) -> None:
        self._items.append(data)

    def remove_first(self) -> None:
        """Drop the head element; does nothing on an empty list."""
        if self._items:
            self._items.popleft()

    def remove_last(self) -> None:
        """Drop the tail element; does nothing on an empty list."""
        if self._items:
            self._items.pop()

    def find(self, data: Any, eq: Eq = operator.eq) -> Optional[Tuple[int, Any]]:
        """Return (position, element) of the first element matching data, or None."""
        for position, item in enumerate(self._items):
            if eq(item, data):
                return position, item
        return None

    def remove(self, data: Any, eq: Eq = operator.eq) -> bool:
        """Remove the first element matching data; report whether one was removed."""
        found = self.find(data, eq)
        if found is None:
            return False
        del self._items[found[0]]
        return True

    def clear(self) -> None:
        self._items.clear()

    def for_each(self, action: Callable[[Any], Any]) -> None:
        """Call action on every element, head to tail."""
        for item in self._items:
            action(item)

    def to_string(self, to_str: Callable[[Any], str] = str) -> str:
        """Render as 'List: -> a <-> b <-' followed by a newline."""
        if not self._items:
            return "List: (empty)\n"
        body = " <-> ".join(to_str(item) for item in self._items)
        return f"List: -> {body} <-\n"

    def print(self, to_str: Callable[[Any], str] = str) -> None:
        print(self.to_string(to_str), end="")