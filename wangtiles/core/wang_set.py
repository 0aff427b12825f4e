"""
Wang Autotile - WangSet

A WangSet is the catalog of tiles for one terrain family: the colors it
defines and the WangId each tile carries. The solver queries it for tiles
matching a (partial) WangId.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterator

from .constants import DEFAULT_COLOR_PROBABILITY, DEFAULT_TILE_PROBABILITY
from .wang_id import NUM_INDEXES, WangId, is_corner


class InvalidWangIdError(ValueError):
    """Raised when a WangId does not fit the WangSet it is assigned in."""


class WangSetType(Enum):
    CORNER = "corner"
    EDGE = "edge"
    MIXED = "mixed"


@dataclass
class WangColor:
    name: str
    probability: float = DEFAULT_COLOR_PROBABILITY


class WangSet:
    """Maps tile ids to WangIds for a single terrain family."""

    def __init__(self, name: str = "", type: WangSetType = WangSetType.MIXED):
        self.name = name
        self._type = type
        self._colors: list[WangColor] = []
        self._wang_ids: dict[int, WangId] = {}
        self._tile_probabilities: dict[int, float] = {}

    @classmethod
    def from_dict(cls, data: dict) -> WangSet:
        """
        Build a WangSet from plain data.

        Expected layout:
            {
                "name": "Grass",
                "type": "mixed",
                "colors": [{"name": "grass", "probability": 1.0}, ...],
                "tiles": [{"id": 0, "wang_id": [8 ints], "probability": 1.0}, ...]
            }
        """
        wang_set = cls(data.get("name", ""), WangSetType(data.get("type", "mixed")))
        for color in data.get("colors", []):
            wang_set.add_color(
                color["name"], color.get("probability", DEFAULT_COLOR_PROBABILITY)
            )
        for tile in data.get("tiles", []):
            wang_set.set_wang_id(
                tile["id"],
                WangId.from_colors(tile["wang_id"]),
                tile.get("probability", DEFAULT_TILE_PROBABILITY),
            )
        return wang_set

    def type(self) -> WangSetType:
        return self._type

    def add_color(self, name: str, probability: float = DEFAULT_COLOR_PROBABILITY) -> int:
        """Add a color and return its number (colors are numbered from 1)."""
        self._colors.append(WangColor(name, probability))
        return len(self._colors)

    def color_count(self) -> int:
        return len(self._colors)

    def color(self, color: int) -> WangColor:
        if not 1 <= color <= len(self._colors):
            raise IndexError(f"No color {color} in WangSet '{self.name}'")
        return self._colors[color - 1]

    def set_wang_id(
        self, tile_id: int, wang_id: WangId, probability: float = DEFAULT_TILE_PROBABILITY
    ) -> None:
        """
        Assign a WangId to a tile.

        Raises:
            InvalidWangIdError: If a slot uses an unknown color, or the WangId
                colors edges in a corner set (or corners in an edge set)
        """
        self._validate(wang_id)
        self._wang_ids[tile_id] = wang_id.copy()
        self._tile_probabilities[tile_id] = probability

    def _validate(self, wang_id: WangId) -> None:
        for index in range(NUM_INDEXES):
            color = wang_id.index_color(index)
            if color > self.color_count():
                raise InvalidWangIdError(
                    f"{wang_id!r} uses color {color}, but '{self.name}' "
                    f"only has {self.color_count()} colors"
                )
            if not color:
                continue
            if self._type == WangSetType.CORNER and not is_corner(index):
                raise InvalidWangIdError(f"Corner set '{self.name}' cannot color edges: {wang_id!r}")
            if self._type == WangSetType.EDGE and is_corner(index):
                raise InvalidWangIdError(f"Edge set '{self.name}' cannot color corners: {wang_id!r}")

    def wang_id_of(self, tile_id: int | None) -> WangId | None:
        if tile_id is None:
            return None
        return self._wang_ids.get(tile_id)

    def wang_ids_by_tile_id(self) -> Iterator[tuple[int, WangId]]:
        return iter(self._wang_ids.items())

    def tile_ids(self) -> list[int]:
        return list(self._wang_ids)

    def __len__(self) -> int:
        return len(self._wang_ids)

    def is_empty(self) -> bool:
        return not self._wang_ids

    def tile_probability(self, tile_id: int) -> float:
        return self._tile_probabilities.get(tile_id, DEFAULT_TILE_PROBABILITY)

    def wang_id_probability(self, wang_id: WangId) -> float:
        """Product of the probabilities of the colors used by the WangId."""
        probability = 1.0
        for color in wang_id.colors():
            if color:
                probability *= self._colors[color - 1].probability
        return probability

    def tile_weight(self, tile_id: int) -> float:
        return self.tile_probability(tile_id) * self.wang_id_probability(self._wang_ids[tile_id])

    def candidates_for_signature(
        self, desired: WangId, mask: WangId
    ) -> list[tuple[int, float]]:
        """
        Tiles whose WangId equals `desired` on every slot set in `mask`.

        Returns:
            List of (tile_id, weight) pairs. Tiles with zero weight are left out.
        """
        masked = desired & mask
        candidates = []
        for tile_id, wang_id in self._wang_ids.items():
            if wang_id & mask != masked:
                continue
            weight = self.tile_weight(tile_id)
            if weight > 0:
                candidates.append((tile_id, weight))
        return candidates

    def color_usage(self, color: int) -> tuple[bool, bool]:
        """
        Scan every tile to see where a color is used.

        Returns:
            (used_as_edge, used_as_corner)
        """
        used_as_edge = False
        used_as_corner = False
        if not 0 < color <= self.color_count():
            return used_as_edge, used_as_corner

        for wang_id in self._wang_ids.values():
            for index in range(NUM_INDEXES):
                if wang_id.index_color(index) == color:
                    corner = is_corner(index)
                    used_as_corner |= corner
                    used_as_edge |= not corner
        return used_as_edge, used_as_corner

    def __repr__(self) -> str:
        return f"WangSet({self.name!r}, {self._type.value}, {len(self._wang_ids)} tiles)"
