"""A flow layout: items placed left to right, wrapping onto new lines."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Size:
    width: int
    height: int

    def expanded_to(self, other: Size) -> Size:
        """Return the size holding the larger width and height of both."""
        return Size(max(self.width, other.width), max(self.height, other.height))


@dataclass(frozen=True)
class Rect:
    x: int
    y: int
    width: int
    height: int

    @property
    def right(self) -> int:
        return self.x + self.width - 1

    @property
    def bottom(self) -> int:
        return self.y + self.height - 1

    @property
    def size(self) -> Size:
        return Size(self.width, self.height)

    def adjusted(self, dx1: int, dy1: int, dx2: int, dy2: int) -> Rect:
        """Move the top-left corner by (dx1, dy1) and the bottom-right by (dx2, dy2)."""
        return Rect(
            self.x + dx1,
            self.y + dy1,
            self.width + dx2 - dx1,
            self.height + dy2 - dy1,
        )


class FlowLayout:
    """Lays out item sizes in rows that wrap at the available width.

    A negative margin counts as no margin. A negative spacing falls back to
    ``parent_spacing``; without one, items are packed with no gap.
    """

    def __init__(
        self,
        margin: int = -1,
        h_spacing: int = -1,
        v_spacing: int = -1,
        parent_spacing: int | None = None,
    ) -> None:
        self.margin = margin
        self.h_space = h_spacing
        self.v_space = v_spacing
        self.parent_spacing = parent_spacing
        self._items: list[Size] = []
        self.geometry: Rect | None = None
        self.item_geometries: list[Rect] = []

    def add_item(self, size: Size) -> None:
        self._items.append(size)

    def item_at(self, index: int) -> Size:
        if not 0 <= index < len(self._items):
            raise IndexError(f"no item at index {index}")
        return self._items[index]

    def take_at(self, index: int) -> Size:
        if not 0 <= index < len(self._items):
            raise IndexError(f"no item at index {index}")
        return self._items.pop(index)

    def __len__(self) -> int:
        return len(self._items)

    def _smart_spacing(self) -> int:
        return -1 if self.parent_spacing is None else self.parent_spacing

    def horizontal_spacing(self) -> int:
        return self.h_space if self.h_space >= 0 else self._smart_spacing()

    def vertical_spacing(self) -> int:
        return self.v_space if self.v_space >= 0 else self._smart_spacing()

    @property
    def _margins(self) -> int:
        return max(self.margin, 0)

    def height_for_width(self, width: int) -> int:
        height, _ = self._do_layout(Rect(0, 0, width, 0))
        return height

    def minimum_size(self) -> Size:
        size = Size(0, 0)
        for item in self._items:
            size = size.expanded_to(item)
        m = self._margins
        return Size(size.width + 2 * m, size.height + 2 * m)

    def size_hint(self) -> Size:
        return self.minimum_size()

    def set_geometry(self, rect: Rect) -> list[Rect]:
        """Place every item inside ``rect`` and return their rectangles."""
        self.geometry = rect
        _, self.item_geometries = self._do_layout(rect)
        return list(self.item_geometries)

    def _do_layout(self, rect: Rect) -> tuple[int, list[Rect]]:
        m = self._margins
        effective = rect.adjusted(m, m, -m, -m)
        x, y = effective.x, effective.y
        line_height = 0
        placed: list[Rect] = []
        space_x = max(self.horizontal_spacing(), 0)
        space_y = max(self.vertical_spacing(), 0)
        for item in self._items:
            next_x = x + item.width + space_x
            if next_x - space_x > effective.right and line_height > 0:
                x = effective.x
                y = y + line_height + space_y
                next_x = x + item.width + space_x
                line_height = 0
            placed.append(Rect(x, y, item.width, item.height))
            x = next_x
            line_height = max(line_height, item.height)
        return y + line_height - rect.y + m, placed