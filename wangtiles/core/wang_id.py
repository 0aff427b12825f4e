"""
Wang Autotile - WangId

A WangId packs the colors of a tile's 4 edges and 4 corners into a single
integer, 8 bits per slot. Slots are numbered clockwise starting at the top
edge; even indexes are edges, odd indexes are corners:

    7 0 1
    6   2
    5 4 3

Color 0 means "no color". When a WangId is used as a mask, a slot is either
0 (don't care) or INDEX_MASK (constrained).
"""

from __future__ import annotations

from typing import Sequence

# Slot indexes
TOP, TOP_RIGHT, RIGHT, BOTTOM_RIGHT, BOTTOM, BOTTOM_LEFT, LEFT, TOP_LEFT = range(8)

NUM_EDGES = 4
NUM_CORNERS = 4
NUM_INDEXES = 8  # Also used as "no direction"

BITS_PER_INDEX = 8
INDEX_MASK = (1 << BITS_PER_INDEX) - 1
FULL_MASK = (1 << (BITS_PER_INDEX * NUM_INDEXES)) - 1

EDGE_INDEXES = (TOP, RIGHT, BOTTOM, LEFT)
CORNER_INDEXES = (TOP_RIGHT, BOTTOM_RIGHT, BOTTOM_LEFT, TOP_LEFT)


def _check_index(index: int) -> None:
    if not 0 <= index < NUM_INDEXES:
        raise IndexError(f"WangId index out of range: {index}")


def is_corner(index: int) -> bool:
    """Odd indexes are corners."""
    return index % 2 == 1


def opposite_index(index: int) -> int:
    return (index + 4) % NUM_INDEXES


def corner_index(corner: int) -> int:
    """Map a corner number (0=top-right, clockwise) to its slot index."""
    return corner * 2 + 1


def edge_index(edge: int) -> int:
    """Map an edge number (0=top, clockwise) to its slot index."""
    return edge * 2


def shared_indexes(direction: int) -> list[tuple[int, int]]:
    """
    Slots a tile shares with its neighbor in the given direction.

    Returns:
        List of (own_index, neighbor_index) pairs. A corner neighbor shares a
        single corner; an edge neighbor shares the edge plus both corners
        at its ends.
    """
    _check_index(direction)
    opposite = opposite_index(direction)
    if is_corner(direction):
        return [(direction, opposite)]
    return [
        (direction, opposite),
        ((direction + 1) % NUM_INDEXES, (direction + 3) % NUM_INDEXES),
        ((direction + 7) % NUM_INDEXES, (direction + 5) % NUM_INDEXES),
    ]


class WangId:
    """Color signature of a tile's corners and edges."""

    __slots__ = ("_value",)

    def __init__(self, value: int = 0):
        if not 0 <= value <= FULL_MASK:
            raise ValueError(f"WangId value out of range: {value:#x}")
        self._value = value

    @classmethod
    def from_colors(cls, colors: Sequence[int]) -> WangId:
        """Build a WangId from 8 slot colors, in index order."""
        if len(colors) != NUM_INDEXES:
            raise ValueError(f"Expected {NUM_INDEXES} colors, got {len(colors)}")
        wang_id = cls()
        for index, color in enumerate(colors):
            wang_id.set_index_color(index, color)
        return wang_id

    @classmethod
    def full_mask(cls) -> WangId:
        return cls(FULL_MASK)

    @classmethod
    def from_surrounding(cls, surrounding: Sequence[WangId | None]) -> WangId:
        """
        Derive the WangId implied by the 8 tiles around a position.

        Args:
            surrounding: WangIds of the neighbors in index order (None for
                cells without a tile).

        Corners take their color from the diagonal neighbor first, then from
        the two edge neighbors touching the same vertex.
        """
        result = cls()
        for direction in CORNER_INDEXES + EDGE_INDEXES:
            neighbor = surrounding[direction]
            if neighbor is None:
                continue
            for own, theirs in shared_indexes(direction):
                if not result.index_color(own):
                    result.set_index_color(own, neighbor.index_color(theirs))
        return result

    @property
    def value(self) -> int:
        return self._value

    def index_color(self, index: int) -> int:
        _check_index(index)
        return (self._value >> (index * BITS_PER_INDEX)) & INDEX_MASK

    def set_index_color(self, index: int, color: int) -> None:
        _check_index(index)
        if not 0 <= color <= INDEX_MASK:
            raise ValueError(f"Color out of range: {color}")
        shift = index * BITS_PER_INDEX
        self._value = (self._value & ~(INDEX_MASK << shift)) | (color << shift)

    def corner_color(self, corner: int) -> int:
        return self.index_color(corner_index(corner))

    def set_corner_color(self, corner: int, color: int) -> None:
        if not 0 <= corner < NUM_CORNERS:
            raise IndexError(f"Corner out of range: {corner}")
        self.set_index_color(corner_index(corner), color)

    def edge_color(self, edge: int) -> int:
        return self.index_color(edge_index(edge))

    def set_edge_color(self, edge: int, color: int) -> None:
        if not 0 <= edge < NUM_EDGES:
            raise IndexError(f"Edge out of range: {edge}")
        self.set_index_color(edge_index(edge), color)

    def colors(self) -> list[int]:
        return [self.index_color(i) for i in range(NUM_INDEXES)]

    def mask(self) -> WangId:
        """Mask with INDEX_MASK in every slot that holds a color."""
        result = WangId()
        for index in range(NUM_INDEXES):
            if self.index_color(index):
                result.set_index_color(index, INDEX_MASK)
        return result

    def has_wildcards(self) -> bool:
        return any(color == 0 for color in self.colors())

    def is_empty(self) -> bool:
        return self._value == 0

    def copy(self) -> WangId:
        return WangId(self._value)

    def __and__(self, other: WangId) -> WangId:
        return WangId(self._value & int(other))

    def __int__(self) -> int:
        return self._value

    def __eq__(self, other) -> bool:
        if isinstance(other, WangId):
            return self._value == other._value
        return NotImplemented

    __hash__ = None  # Mutable

    def __repr__(self) -> str:
        return f"WangId({','.join(str(c) for c in self.colors())})"
