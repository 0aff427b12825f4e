"""
Wang Autotile - Grid Geometry

Finds the cell next to a given cell in one of the 8 WangId directions. On
orthogonal and isometric maps a fixed offset table does the job; staggered
and hexagonal maps are treated as a square grid rotated by 45 degrees, where
the neighbors depend on the stagger axis and the row/column parity.

A geometry is picked once per map with create_geometry() and handed to the
painter and filler.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum

from .wang_id import (
    BOTTOM,
    BOTTOM_LEFT,
    BOTTOM_RIGHT,
    LEFT,
    NUM_INDEXES,
    RIGHT,
    TOP,
    TOP_LEFT,
    TOP_RIGHT,
)

Position = tuple[int, int]


class Orientation(Enum):
    ORTHOGONAL = "orthogonal"
    ISOMETRIC = "isometric"
    STAGGERED = "staggered"
    HEXAGONAL = "hexagonal"


class StaggerAxis(Enum):
    X = "x"
    Y = "y"


class StaggerIndex(Enum):
    ODD = 0
    EVEN = 1


# (dx, dy) for each WangId index
AROUND_TILE_OFFSETS = (
    (0, -1),
    (1, -1),
    (1, 0),
    (1, 1),
    (0, 1),
    (-1, 1),
    (-1, 0),
    (-1, -1),
)

#  3 0
#  2 1
# Cells around the top-left vertex of a tile; cell k touches the vertex with
# its corner (k + 2) % 4.
AROUND_VERTEX_OFFSETS = (
    (0, -1),
    (0, 0),
    (-1, 0),
    (-1, -1),
)


class GridGeometry(ABC):
    """Neighbor lookup for one map orientation."""

    @abstractmethod
    def neighbor(self, pos: Position, index: int) -> Position:
        """Cell adjacent to `pos` in WangId direction `index`."""

    def around(self, pos: Position) -> list[Position]:
        """All 8 neighbors, in WangId index order."""
        return [self.neighbor(pos, index) for index in range(NUM_INDEXES)]

    def vertex_cells(self, pos: Position) -> list[Position]:
        """The 4 cells sharing the top-left vertex of `pos`."""
        left = self.neighbor(pos, LEFT)
        return [self.neighbor(pos, TOP), pos, left, self.neighbor(left, TOP)]


class OrthogonalGeometry(GridGeometry):

    def neighbor(self, pos: Position, index: int) -> Position:
        dx, dy = AROUND_TILE_OFFSETS[index]
        return (pos[0] + dx, pos[1] + dy)

    def vertex_cells(self, pos: Position) -> list[Position]:
        return [(pos[0] + dx, pos[1] + dy) for dx, dy in AROUND_VERTEX_OFFSETS]

    def __repr__(self) -> str:
        return "OrthogonalGeometry()"


class HexagonalGeometry(GridGeometry):
    """
    Neighbors on staggered and hexagonal maps.

    The WangId edges map onto the four diagonal hex neighbors (top is
    top-right, right is bottom-right, and so on). The corners map onto the
    cells two half-steps away along the stagger axis.
    """

    def __init__(
        self,
        stagger_axis: StaggerAxis = StaggerAxis.Y,
        stagger_index: StaggerIndex = StaggerIndex.ODD,
    ):
        self.stagger_axis = stagger_axis
        self.stagger_index = stagger_index

        if stagger_axis == StaggerAxis.X:
            self._corner_offsets = {
                TOP_RIGHT: (2, 0),
                BOTTOM_RIGHT: (0, 1),
                BOTTOM_LEFT: (-2, 0),
                TOP_LEFT: (0, -1),
            }
        else:
            self._corner_offsets = {
                TOP_RIGHT: (1, 0),
                BOTTOM_RIGHT: (0, 2),
                BOTTOM_LEFT: (-1, 0),
                TOP_LEFT: (0, -2),
            }

    def _do_stagger(self, x: int, y: int) -> bool:
        index = x if self.stagger_axis == StaggerAxis.X else y
        return bool((index & 1) ^ self.stagger_index.value)

    def top_left(self, x: int, y: int) -> Position:
        if self.stagger_axis == StaggerAxis.Y:
            return (x, y - 1) if self._do_stagger(x, y) else (x - 1, y - 1)
        return (x - 1, y) if self._do_stagger(x, y) else (x - 1, y - 1)

    def top_right(self, x: int, y: int) -> Position:
        if self.stagger_axis == StaggerAxis.Y:
            return (x + 1, y - 1) if self._do_stagger(x, y) else (x, y - 1)
        return (x + 1, y) if self._do_stagger(x, y) else (x + 1, y - 1)

    def bottom_left(self, x: int, y: int) -> Position:
        if self.stagger_axis == StaggerAxis.Y:
            return (x, y + 1) if self._do_stagger(x, y) else (x - 1, y + 1)
        return (x - 1, y + 1) if self._do_stagger(x, y) else (x - 1, y)

    def bottom_right(self, x: int, y: int) -> Position:
        if self.stagger_axis == StaggerAxis.Y:
            return (x + 1, y + 1) if self._do_stagger(x, y) else (x, y + 1)
        return (x + 1, y + 1) if self._do_stagger(x, y) else (x + 1, y)

    def neighbor(self, pos: Position, index: int) -> Position:
        x, y = pos
        if index == TOP:
            return self.top_right(x, y)
        if index == RIGHT:
            return self.bottom_right(x, y)
        if index == BOTTOM:
            return self.bottom_left(x, y)
        if index == LEFT:
            return self.top_left(x, y)
        dx, dy = self._corner_offsets[index]
        return (x + dx, y + dy)

    def __repr__(self) -> str:
        return f"HexagonalGeometry({self.stagger_axis.name}, {self.stagger_index.name})"


def create_geometry(
    orientation: Orientation = Orientation.ORTHOGONAL,
    stagger_axis: StaggerAxis = StaggerAxis.Y,
    stagger_index: StaggerIndex = StaggerIndex.ODD,
) -> GridGeometry:
    """Pick the geometry for a map's orientation."""
    if orientation in (Orientation.STAGGERED, Orientation.HEXAGONAL):
        return HexagonalGeometry(stagger_axis, stagger_index)
    return OrthogonalGeometry()
