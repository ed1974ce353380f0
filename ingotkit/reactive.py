"""A list that tells registered watchers whenever its content changes."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from typing import Generic, TypeVar

__all__ = ["ReactiveList"]

T = TypeVar("T")

Watcher = Callable[[list], None]


class ReactiveList(Generic[T]):
    """A list that notifies every watcher with its new values after each change."""

    def __init__(self, values: Iterable[T] | None = None) -> None:
        self._items: list[T] = list(values) if values is not None else []
        self._watchers: list[Watcher] = []

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._items!r})"

    def watch(self, callback: Watcher) -> Callable[[], None]:
        """Register ``callback``; return a function that unregisters it."""
        self._watchers.append(callback)

        def unwatch() -> None:
            if callback in self._watchers:
                self._watchers.remove(callback)

        return unwatch

    def _notify(self) -> None:
        for watcher in list(self._watchers):
            watcher(list(self._items))

    def set(self, index: int, item: T) -> None:
        """Replace the item at ``index``; raises IndexError when out of range."""
        if not 0 <= index < len(self._items):
            raise IndexError(f"index {index} is out of range")
        self._items[index] = item
        self._notify()

    def get(self, index: int) -> T | None:
        """Return the item at ``index``, or ``None`` when it is out of range."""
        if 0 <= index < len(self._items):
            return self._items[index]
        return None

    def push(self, item: T) -> None:
        """Append ``item`` to the end."""
        self._items.append(item)
        self._notify()

    def pop(self) -> T | None:
        """Remove and return the last item, or ``None`` when empty."""
        result = self._items.pop() if self._items else None
        self._notify()
        return result

    def __iter__(self) -> Iterator[T]:
        return iter(list(self._items))

    def __len__(self) -> int:
        return len(self._items)