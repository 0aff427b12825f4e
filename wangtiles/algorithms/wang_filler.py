"""
Wang Autotile - Wang Filler

Picks a tile for every cell of a region so that the tiles' WangIds honor the
colors painted into a constraint grid.

Each cell carries a desired WangId and a mask of the slots that must match.
The filler looks for tiles matching every masked slot; when there are none
it relaxes, keeping only the tiles that break the fewest constraints. With
corrections enabled it also:
    - prefers tiles that agree with the tiles already around the cell, and
    - re-solves neighbors outside the region that no longer fit the tiles
      it placed.
"""

from __future__ import annotations

import logging
import random
from collections import deque
from dataclasses import dataclass, field

from ..core.constants import (
    CORRECTIONS_ENABLED_BY_DEFAULT,
    MAX_CORRECTION_CELLS,
    RELAXATION_ENABLED_BY_DEFAULT,
)
from ..core.geometry import GridGeometry, OrthogonalGeometry, Position
from ..core.random_picker import RandomTaker
from ..core.tile_layer import Cell, Grid, Region, TileLayer
from ..core.wang_id import INDEX_MASK, NUM_INDEXES, WangId, shared_indexes
from ..core.wang_set import WangSet

logger = logging.getLogger(__name__)


@dataclass
class CellInfo:
    """Desired colors for one cell, and which of them are constrained."""

    desired: WangId = field(default_factory=WangId)
    mask: WangId = field(default_factory=WangId)

    def constrain(self, index: int, color: int) -> None:
        self.desired.set_index_color(index, color)
        self.mask.set_index_color(index, INDEX_MASK)

    def is_constrained(self, index: int) -> bool:
        return self.mask.index_color(index) == INDEX_MASK

    def copy(self) -> CellInfo:
        return CellInfo(self.desired.copy(), self.mask.copy())


@dataclass
class FillRegion:
    """Constraints painted so far, and the cells they touch."""

    grid: Grid[CellInfo] = field(default_factory=lambda: Grid(CellInfo))
    region: Region = field(default_factory=Region)

    def is_empty(self) -> bool:
        return self.region.is_empty()


class WangFiller:
    """Fills regions of a tile layer with tiles from a WangSet."""

    def __init__(
        self,
        wang_set: WangSet,
        geometry: GridGeometry | None = None,
        rng: random.Random | None = None,
    ):
        self.wang_set = wang_set
        self.geometry = geometry if geometry is not None else OrthogonalGeometry()
        self.rng = rng
        self.corrections_enabled = CORRECTIONS_ENABLED_BY_DEFAULT
        self.relaxation_enabled = RELAXATION_ENABLED_BY_DEFAULT

    def set_corrections_enabled(self, enabled: bool) -> None:
        self.corrections_enabled = enabled

    def fill_region(
        self,
        target: TileLayer,
        back: TileLayer,
        region: Region,
        grid: Grid[CellInfo],
    ) -> int:
        """
        Choose tiles for every cell in `region` and write them to `target`.

        Args:
            target: Layer receiving the chosen tiles (cells are marked checked)
            back: Layer holding the current tiles, consulted for corrections
            region: Cells to fill
            grid: Constraints for the cells in the region

        Returns:
            Number of cells written, including corrected neighbors
        """
        if self.wang_set.is_empty():
            logger.debug("WangSet '%s' has no tiles, nothing to fill", self.wang_set.name)
            return 0

        queue = deque(region)
        constraints: dict[Position, CellInfo] = {pos: grid.get(pos) for pos in queue}
        solved: set[Position] = set()
        corrections = 0
        written = 0

        while queue:
            pos = queue.popleft()
            if pos in solved:
                continue
            solved.add(pos)

            info = constraints[pos]
            preferred = self._preferred_wang_id(target, back, pos) if self.corrections_enabled else None

            tile_id = self.find_best_match(info, preferred, target, pos)
            if tile_id is None:
                logger.debug("No tile fits %s at %s, leaving it alone", info.desired, pos)
                continue

            target.set_cell(pos[0], pos[1], Cell(tile_id, checked=True))
            written += 1

            if not self.corrections_enabled:
                continue

            placed = self.wang_set.wang_id_of(tile_id)
            for direction, neighbor in enumerate(self.geometry.around(pos)):
                if neighbor in constraints or neighbor in solved:
                    continue
                correction = self._correction_for(back, neighbor, direction, placed)
                if correction is None:
                    continue
                if corrections >= MAX_CORRECTION_CELLS:
                    logger.warning(
                        "Stopped correcting neighbors after %d cells", MAX_CORRECTION_CELLS
                    )
                    break
                corrections += 1
                constraints[neighbor] = correction
                queue.append(neighbor)
                logger.debug("Correcting %s to fit tile %d at %s", neighbor, tile_id, pos)

        return written

    def _surrounding_wang_ids(
        self, target: TileLayer, back: TileLayer, pos: Position
    ) -> list[WangId | None]:
        """WangIds of the 8 neighbors, preferring freshly placed tiles."""
        surrounding = []
        for x, y in self.geometry.around(pos):
            cell = target.cell_at(x, y)
            if cell.is_empty:
                cell = back.cell_at(x, y)
            surrounding.append(self.wang_set.wang_id_of(cell.tile))
        return surrounding

    def _preferred_wang_id(self, target: TileLayer, back: TileLayer, pos: Position) -> WangId:
        return WangId.from_surrounding(self._surrounding_wang_ids(target, back, pos))

    def _correction_for(
        self, back: TileLayer, pos: Position, direction: int, placed: WangId
    ) -> CellInfo | None:
        """
        Constraints for a neighbor that no longer fits a placed tile.

        Returns None when the neighbor holds no tile of this WangSet or when
        its tile already agrees with the placed one.
        """
        current = self.wang_set.wang_id_of(back.cell_at(*pos).tile)
        if current is None:
            return None

        info = CellInfo()
        mismatch = False
        for own, theirs in shared_indexes(direction):
            color = placed.index_color(own)
            if not color:
                continue
            info.constrain(theirs, color)
            if current.index_color(theirs) != color:
                mismatch = True

        return info if mismatch else None

    def _penalties(
        self, wang_id: WangId, info: CellInfo, preferred: WangId | None
    ) -> tuple[int, int]:
        """(constraints broken, preferences ignored) for a candidate WangId."""
        unmet = 0
        ignored = 0
        for index in range(NUM_INDEXES):
            color = wang_id.index_color(index)
            if info.is_constrained(index):
                if color != info.desired.index_color(index):
                    unmet += 1
            elif preferred is not None:
                wanted = preferred.index_color(index)
                if wanted and color != wanted:
                    ignored += 1
        return unmet, ignored

    def _fits_placed_neighbors(self, target: TileLayer, pos: Position, wang_id: WangId) -> bool:
        """Whether a candidate agrees with tiles this fill already placed around `pos`."""
        for direction, (x, y) in enumerate(self.geometry.around(pos)):
            neighbor = self.wang_set.wang_id_of(target.cell_at(x, y).tile)
            if neighbor is None:
                continue
            for own, theirs in shared_indexes(direction):
                ours = wang_id.index_color(own)
                other = neighbor.index_color(theirs)
                if ours and other and ours != other:
                    return False
        return True

    def find_best_match(
        self,
        info: CellInfo,
        preferred: WangId | None = None,
        target: TileLayer | None = None,
        pos: Position | None = None,
    ) -> int | None:
        """
        Choose a tile for one cell.

        Args:
            info: Constrained colors for the cell
            preferred: Colors to favor in the unconstrained slots
            target: Layer of tiles placed so far in this fill (optional)
            pos: Position of the cell in `target`

        Returns:
            A tile id, or None if the WangSet has no usable tile
        """
        candidates = self.wang_set.candidates_for_signature(info.desired, info.mask)
        if not candidates and self.relaxation_enabled:
            candidates = [
                (tile_id, weight)
                for tile_id, weight in (
                    (tile_id, self.wang_set.tile_weight(tile_id))
                    for tile_id in self.wang_set.tile_ids()
                )
                if weight > 0
            ]
        if not candidates:
            return None

        best_score = None
        best: list[tuple[int, float]] = []
        for tile_id, weight in candidates:
            score = self._penalties(self.wang_set.wang_id_of(tile_id), info, preferred)
            if best_score is None or score < best_score:
                best_score = score
                best = []
            if score == best_score:
                best.append((tile_id, weight))

        taker = RandomTaker(self.rng)
        for tile_id, weight in best:
            taker.add(tile_id, weight)

        first = taker.take()
        if target is None or pos is None:
            return first

        choice = first
        while not self._fits_placed_neighbors(target, pos, self.wang_set.wang_id_of(choice)):
            if taker.is_empty():
                return first
            choice = taker.take()
        return choice
