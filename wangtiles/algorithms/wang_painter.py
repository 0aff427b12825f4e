"""
Wang Autotile - Wang Painter

Turns paint strokes into color constraints and commits them to a tile layer.

A stroke paints one color at a position, either on a single edge or corner
(direction mode) or on the whole tile (tile mode). Painting a slot also
paints the matching slots of the neighbors that share it, so the constraint
buffer always describes a consistent set of edges and vertices. Committing
runs the WangFiller over the buffer and copies the chosen tiles into the
layer.
"""

from __future__ import annotations

import logging
import random
from enum import Enum, auto

from ..core.geometry import GridGeometry, OrthogonalGeometry, Position
from ..core.tile_layer import TileLayer
from ..core.wang_id import (
    BOTTOM,
    BOTTOM_LEFT,
    BOTTOM_RIGHT,
    CORNER_INDEXES,
    EDGE_INDEXES,
    LEFT,
    NUM_CORNERS,
    NUM_INDEXES,
    RIGHT,
    TOP,
    TOP_LEFT,
    TOP_RIGHT,
    corner_index,
    is_corner,
    opposite_index,
)
from ..core.wang_set import WangSet, WangSetType
from .wang_filler import FillRegion, WangFiller

logger = logging.getLogger(__name__)


class PainterStateError(RuntimeError):
    """Raised when the painter is used without a WangSet."""


class BrushMode(Enum):
    IDLE = auto()
    PAINT_CORNER = auto()
    PAINT_EDGE = auto()
    PAINT_EDGE_AND_CORNER = auto()


MODE_FOR_SET_TYPE = {
    WangSetType.CORNER: BrushMode.PAINT_CORNER,
    WangSetType.EDGE: BrushMode.PAINT_EDGE,
    WangSetType.MIXED: BrushMode.PAINT_EDGE_AND_CORNER,
}

# Corner strokes land on the nearest edge when only edges can be painted
EDGE_FOR_CORNER = {
    BOTTOM_RIGHT: BOTTOM,
    BOTTOM_LEFT: LEFT,
    TOP_LEFT: TOP,
    TOP_RIGHT: RIGHT,
}

# Slots a tile-mode stroke paints on the center tile
TILE_MODE_INDEXES = {
    BrushMode.PAINT_CORNER: CORNER_INDEXES,
    BrushMode.PAINT_EDGE: EDGE_INDEXES,
    BrushMode.PAINT_EDGE_AND_CORNER: tuple(range(NUM_INDEXES)),
}

# Neighbor whose top-left vertex is the given corner of a tile
VERTEX_OWNER = {
    TOP_RIGHT: RIGHT,
    BOTTOM_RIGHT: BOTTOM_RIGHT,
    BOTTOM_LEFT: BOTTOM,
}


class WangPainter:
    """Collects Wang color strokes and commits them to tile layers."""

    def __init__(self, geometry: GridGeometry | None = None, rng: random.Random | None = None):
        self.geometry = geometry if geometry is not None else OrthogonalGeometry()
        self.rng = rng
        self._wang_set: WangSet | None = None
        self._color = 0
        self._brush_mode = BrushMode.IDLE
        self._fill = FillRegion()

    @property
    def brush_mode(self) -> BrushMode:
        return self._brush_mode

    @property
    def wang_set(self) -> WangSet | None:
        return self._wang_set

    @property
    def color(self) -> int:
        return self._color

    @property
    def fill(self) -> FillRegion:
        """The constraints painted since the last commit or clear."""
        return self._fill

    def set_geometry(self, geometry: GridGeometry) -> None:
        self.geometry = geometry

    def set_wang_set(self, wang_set: WangSet | None) -> None:
        if wang_set is self._wang_set:
            return

        self._color = 0
        self._wang_set = wang_set

        if wang_set is None:
            self._brush_mode = BrushMode.IDLE
        else:
            self._brush_mode = MODE_FOR_SET_TYPE[wang_set.type()]
        logger.debug("WangSet set to %r, brush mode %s", wang_set, self._brush_mode.name)

    def set_color(self, color: int) -> None:
        if color == self._color:
            return

        self._color = color

        if self._wang_set is None:
            return

        set_type = self._wang_set.type()
        if set_type != WangSetType.MIXED:
            self._brush_mode = MODE_FOR_SET_TYPE[set_type]
            return

        # Pick the mode from where the color is actually used
        used_as_edge, used_as_corner = self._wang_set.color_usage(color)
        if used_as_edge == used_as_corner:
            self._brush_mode = BrushMode.PAINT_EDGE_AND_CORNER
        elif used_as_edge:
            self._brush_mode = BrushMode.PAINT_EDGE
        else:
            self._brush_mode = BrushMode.PAINT_CORNER
        logger.debug("Color %d selected, brush mode %s", color, self._brush_mode.name)

    def desired_direction(self, direction: int) -> int:
        """Adjust a stroke direction to something the brush mode can paint."""
        if self._brush_mode == BrushMode.PAINT_CORNER:
            # Corner strokes always paint the top-left vertex of the tile
            return TOP_LEFT
        if self._brush_mode == BrushMode.PAINT_EDGE:
            return EDGE_FOR_CORNER.get(direction, direction)
        if self._brush_mode == BrushMode.PAINT_EDGE_AND_CORNER:
            if direction in (BOTTOM_RIGHT, BOTTOM_LEFT, TOP_RIGHT):
                return TOP_LEFT
        return direction

    def set_terrain(
        self,
        color: int,
        pos: Position,
        direction: int = NUM_INDEXES,
        use_tile_mode: bool = False,
        fill: FillRegion | None = None,
    ) -> None:
        """
        Paint a color at a position.

        Args:
            color: Color to paint
            pos: Tile position
            direction: Edge or corner to paint, ignored in tile mode.
                NUM_INDEXES paints nothing outside tile mode.
            use_tile_mode: Paint every slot of the tile the brush mode allows
            fill: Buffer to write into, defaults to the painter's own

        Raises:
            PainterStateError: If no WangSet is set
        """
        if fill is None:
            fill = self._fill

        self.set_color(color)
        if self._brush_mode == BrushMode.IDLE:
            raise PainterStateError("Cannot paint without a WangSet")

        if use_tile_mode:
            for index in TILE_MODE_INDEXES[self._brush_mode]:
                self.paint_index(color, pos, index, fill)
            return

        direction = self.desired_direction(direction)
        if direction == NUM_INDEXES:
            return

        self.paint_index(color, pos, direction, fill)

    def paint_index(self, color: int, pos: Position, index: int, fill: FillRegion | None = None) -> None:
        """
        Paint one edge or corner of a tile, along with the neighbors sharing it.

        An edge is shared with one neighbor, which gets the color on its
        opposite edge. A corner is a vertex shared by four tiles, each of
        which gets the color on the corner touching that vertex.
        """
        if fill is None:
            fill = self._fill

        if is_corner(index):
            self._paint_vertex(fill, color, pos, index)
        else:
            neighbor = self.geometry.neighbor(pos, index)
            self._constrain(fill, pos, index, color)
            self._constrain(fill, neighbor, opposite_index(index), color)

    def _paint_vertex(self, fill: FillRegion, color: int, pos: Position, index: int) -> None:
        owner = pos
        if index != TOP_LEFT:
            owner = self.geometry.neighbor(pos, VERTEX_OWNER[index])

        for k, cell in enumerate(self.geometry.vertex_cells(owner)):
            self._constrain(fill, cell, corner_index((k + 2) % NUM_CORNERS), color)

    def _constrain(self, fill: FillRegion, pos: Position, index: int, color: int) -> None:
        info = fill.grid.get(pos)
        info.constrain(index, color)
        fill.grid.set(pos, info)
        fill.region.add_cell(pos)

    def clear(self) -> None:
        """Drop everything painted since the last commit."""
        self._fill = FillRegion()

    def commit(self, tile_layer: TileLayer) -> int:
        """
        Fill the painted constraints into a tile layer and clear the buffer.

        Tiles are first chosen into a temporary stamp layer; only cells that
        received a tile are copied over, so everything else in the layer is
        left as it was.

        Returns:
            Number of cells written to the layer

        Raises:
            PainterStateError: If constraints were painted but no WangSet is set
                (the buffer is cleared anyway)
        """
        if self._fill.is_empty():
            self.clear()
            return 0

        if self._wang_set is None:
            self.clear()
            raise PainterStateError("Cannot commit without a WangSet")

        stamp = TileLayer("stamp")
        filler = WangFiller(self._wang_set, self.geometry, self.rng)
        filler.set_corrections_enabled(True)
        filler.fill_region(stamp, tile_layer, self._fill.region, self._fill.grid)

        brush_region = stamp.region(lambda cell: cell.checked)
        written = 0
        if not brush_region.is_empty():
            brush_rect = brush_region.bounding_rect()
            stamp.set_position(brush_rect.x, brush_rect.y)
            stamp.resize(brush_rect.width, brush_rect.height, (-brush_rect.x, -brush_rect.y))

            for i, j, cell in stamp:
                if cell.is_empty:
                    continue
                tile_layer.set_cell(stamp.x + i, stamp.y + j, cell)
                written += 1

        logger.info(
            "Committed %d painted cells, wrote %d tiles", len(self._fill.region), written
        )
        self.clear()
        return written
