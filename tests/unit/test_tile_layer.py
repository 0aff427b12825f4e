"""
Unit tests for Cell, Region, Grid and TileLayer.
"""

from pygame import Rect

from wangtiles.core.tile_layer import Cell, Grid, Region, TileLayer


# =============================================================================
# Region
# =============================================================================

class TestRegion:
    """Tests for Region."""

    def test_add_rect_adds_every_cell(self):
        region = Region()
        region += Rect(1, 2, 2, 2)
        assert len(region) == 4
        assert (1, 2) in region
        assert (2, 3) in region
        assert (3, 3) not in region

    def test_adding_same_cell_twice(self):
        region = Region()
        region.add_cell((0, 0))
        region.add_cell((0, 0))
        assert len(region) == 1

    def test_iterates_row_by_row(self):
        region = Region({(1, 1), (0, 1), (5, 0)})
        assert list(region) == [(5, 0), (0, 1), (1, 1)]

    def test_bounding_rect(self):
        region = Region({(-2, 3), (4, -1)})
        assert region.bounding_rect() == Rect(-2, -1, 7, 5)

    def test_bounding_rect_of_empty_region(self):
        assert Region().bounding_rect() == Rect(0, 0, 0, 0)

    def test_translated(self):
        region = Region({(0, 0), (1, 0)})
        assert region.translated(2, -1) == Region({(2, -1), (3, -1)})
        assert (0, 0) in region

    def test_is_empty(self):
        assert Region().is_empty()
        assert not Region({(0, 0)}).is_empty()


# =============================================================================
# Grid
# =============================================================================

class TestGrid:
    """Tests for Grid."""

    def test_unset_position_reads_default(self):
        grid = Grid(list)
        assert grid.get((3, 3)) == []
        assert (3, 3) not in grid

    def test_default_is_not_stored(self):
        grid = Grid(list)
        grid.get((0, 0)).append(1)
        assert grid.get((0, 0)) == []
        assert len(grid) == 0

    def test_set_and_get(self):
        grid = Grid(int)
        grid.set((1, -1), 7)
        assert grid.get((1, -1)) == 7
        assert grid.positions() == [(1, -1)]

    def test_clear(self):
        grid = Grid(int)
        grid.set((0, 0), 1)
        grid.clear()
        assert len(grid) == 0


# =============================================================================
# TileLayer
# =============================================================================

class TestTileLayer:
    """Tests for TileLayer."""

    def test_unset_cell_is_empty(self):
        layer = TileLayer()
        assert layer.cell_at(10, -10).is_empty

    def test_set_cell(self):
        layer = TileLayer()
        layer.set_cell(-3, 4, Cell(5))
        assert layer.cell_at(-3, 4) == Cell(5)
        assert len(layer) == 1

    def test_setting_empty_cell_erases(self):
        layer = TileLayer()
        layer.set_cell(0, 0, Cell(5))
        layer.set_cell(0, 0, Cell())
        assert layer.is_empty()

    def test_region_with_predicate(self):
        layer = TileLayer()
        layer.set_cell(0, 0, Cell(1, checked=True))
        layer.set_cell(1, 0, Cell(2))
        assert layer.region(lambda cell: cell.checked) == Region({(0, 0)})

    def test_resize_moves_contents(self):
        layer = TileLayer()
        layer.set_cell(5, 6, Cell(1))
        layer.set_cell(6, 7, Cell(2))
        layer.resize(2, 2, (-5, -6))
        assert layer.cell_at(0, 0) == Cell(1)
        assert layer.cell_at(1, 1) == Cell(2)
        assert (layer.width, layer.height) == (2, 2)

    def test_resize_drops_cells_outside(self):
        layer = TileLayer()
        layer.set_cell(0, 0, Cell(1))
        layer.set_cell(3, 3, Cell(2))
        layer.resize(2, 2)
        assert len(layer) == 1

    def test_position(self):
        layer = TileLayer(x=1, y=2)
        layer.set_position(4, 5)
        assert layer.position == (4, 5)

    def test_bounds_cover_cells(self):
        layer = TileLayer(width=2, height=2)
        layer.set_cell(3, -1, Cell(1))
        assert layer.bounds() == Rect(0, -1, 4, 3)

    def test_iteration_is_row_major(self):
        layer = TileLayer()
        layer.set_cell(1, 1, Cell(3))
        layer.set_cell(0, 1, Cell(2))
        layer.set_cell(4, 0, Cell(1))
        assert [cell.tile for _, _, cell in layer] == [1, 2, 3]
