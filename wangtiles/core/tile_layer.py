"""
Wang Autotile - Tile Layer

Sparse, unbounded tile storage plus the region and grid containers the
painter and filler use to track touched cells.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Generic, Iterator, TypeVar

from pygame import Rect

T = TypeVar("T")

Position = tuple[int, int]


@dataclass(frozen=True)
class Cell:
    """A reference to a tile. `checked` marks cells written by a fill."""

    tile: int | None = None
    checked: bool = False

    @property
    def is_empty(self) -> bool:
        return self.tile is None


EMPTY_CELL = Cell()


class Region:
    """A set of cells, built up from rectangles."""

    def __init__(self, cells: set[Position] | None = None):
        self._cells: set[Position] = set(cells) if cells else set()

    def add(self, rect: Rect) -> None:
        for y in range(rect.top, rect.bottom):
            for x in range(rect.left, rect.right):
                self._cells.add((x, y))

    def __iadd__(self, rect: Rect) -> Region:
        self.add(rect)
        return self

    def add_cell(self, pos: Position) -> None:
        self.add(Rect(pos[0], pos[1], 1, 1))

    def __contains__(self, pos: Position) -> bool:
        return pos in self._cells

    def __iter__(self) -> Iterator[Position]:
        """Iterate row by row, left to right."""
        return iter(sorted(self._cells, key=lambda p: (p[1], p[0])))

    def __len__(self) -> int:
        return len(self._cells)

    def is_empty(self) -> bool:
        return not self._cells

    def bounding_rect(self) -> Rect:
        if not self._cells:
            return Rect(0, 0, 0, 0)
        rects = [Rect(x, y, 1, 1) for x, y in self._cells]
        return rects[0].unionall(rects[1:])

    def translated(self, dx: int, dy: int) -> Region:
        return Region({(x + dx, y + dy) for x, y in self._cells})

    def __eq__(self, other) -> bool:
        if isinstance(other, Region):
            return self._cells == other._cells
        return NotImplemented

    def __repr__(self) -> str:
        return f"Region({sorted(self._cells)})"


class Grid(Generic[T]):
    """Sparse map from positions to values. Unset positions read as a default."""

    def __init__(self, default_factory: Callable[[], T]):
        self._default_factory = default_factory
        self._cells: dict[Position, T] = {}

    def get(self, pos: Position) -> T:
        if pos in self._cells:
            return self._cells[pos]
        return self._default_factory()

    def set(self, pos: Position, value: T) -> None:
        self._cells[pos] = value

    def __contains__(self, pos: Position) -> bool:
        return pos in self._cells

    def positions(self) -> list[Position]:
        return list(self._cells)

    def __len__(self) -> int:
        return len(self._cells)

    def clear(self) -> None:
        self._cells.clear()


class TileLayer:
    """
    Sparse grid of cells addressed in layer-local coordinates.

    The layer has a position and a nominal size, but cells may be set
    anywhere; the size only matters for resize().
    """

    def __init__(self, name: str = "", x: int = 0, y: int = 0, width: int = 0, height: int = 0):
        self.name = name
        self.x = x
        self.y = y
        self.width = width
        self.height = height
        self._cells: dict[Position, Cell] = {}

    @property
    def position(self) -> Position:
        return (self.x, self.y)

    def set_position(self, x: int, y: int) -> None:
        self.x = x
        self.y = y

    def cell_at(self, x: int, y: int) -> Cell:
        return self._cells.get((x, y), EMPTY_CELL)

    def set_cell(self, x: int, y: int, cell: Cell) -> None:
        if cell.is_empty:
            self._cells.pop((x, y), None)
        else:
            self._cells[(x, y)] = cell

    def region(self, predicate: Callable[[Cell], bool]) -> Region:
        """Cells (in layer coordinates) whose content satisfies the predicate."""
        return Region({pos for pos, cell in self._cells.items() if predicate(cell)})

    def bounds(self) -> Rect:
        """Rectangle covering the nominal size and every stored cell."""
        rect = Rect(0, 0, self.width, self.height)
        if self._cells:
            used = self.region(lambda cell: True).bounding_rect()
            rect = used if rect.width == 0 or rect.height == 0 else rect.union(used)
        return rect

    def resize(self, width: int, height: int, offset: Position = (0, 0)) -> None:
        """
        Resize the layer, moving its contents by `offset`.

        Cells that end up outside the new size are dropped.
        """
        dx, dy = offset
        moved = {}
        for (x, y), cell in self._cells.items():
            nx, ny = x + dx, y + dy
            if 0 <= nx < width and 0 <= ny < height:
                moved[(nx, ny)] = cell
        self._cells = moved
        self.width = width
        self.height = height

    def is_empty(self) -> bool:
        return not self._cells

    def __iter__(self) -> Iterator[tuple[int, int, Cell]]:
        for (x, y), cell in sorted(self._cells.items(), key=lambda item: (item[0][1], item[0][0])):
            yield x, y, cell

    def __len__(self) -> int:
        return len(self._cells)

    def __repr__(self) -> str:
        return f"TileLayer({self.name!r}, {len(self._cells)} cells)"
