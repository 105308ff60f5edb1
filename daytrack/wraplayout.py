"""A layout that places items left to right and wraps onto new rows."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator


@dataclass(frozen=True)
class Rect:
    """An axis-aligned rectangle with integer coordinates."""

    x: int
    y: int
    width: int
    height: int

    @property
    def right(self) -> int:
        """The x coordinate of the last column inside the rectangle."""
        return self.x + self.width - 1

    @property
    def bottom(self) -> int:
        """The y coordinate of the last row inside the rectangle."""
        return self.y + self.height - 1


class WrapLayout:
    """Holds item sizes and flows them into rows that fit a given area."""

    def __init__(self) -> None:
        self._items: list[tuple[int, int]] = []

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[tuple[int, int]]:
        return iter(self._items)

    def __getitem__(self, index: int) -> tuple[int, int]:
        return self._items[index]

    def add(self, width: int, height: int) -> None:
        """Append an item with the given preferred size."""
        self._items.append((width, height))

    def take(self, index: int) -> tuple[int, int]:
        """Remove and return the item at ``index``."""
        if not 0 <= index < len(self._items):
            raise IndexError(f"no item at index {index}")
        return self._items.pop(index)

    def arrange(self, area: Rect) -> list[Rect]:
        """Return the geometry of every item laid out inside ``area``."""
        placed: list[Rect] = []
        x, y = area.x, area.y
        row_height = 0
        for width, height in self._items:
            if x + width > area.right:
                x = area.x
                y += row_height
                row_height = 0
            placed.append(Rect(x, y, width, height))
            x += width
            row_height = max(row_height, height)
        return placed

    def size_hint(self) -> tuple[int, int]:
        """Return the widest item width and the tallest item height."""
        width = max((w for w, _ in self._items), default=0)
        height = max((h for _, h in self._items), default=0)
        return width, height