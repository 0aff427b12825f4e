"""
Unit tests for WangId and the slot index helpers.
"""

import pytest

from wangtiles.core.wang_id import (
    BOTTOM,
    BOTTOM_LEFT,
    BOTTOM_RIGHT,
    FULL_MASK,
    INDEX_MASK,
    LEFT,
    NUM_INDEXES,
    RIGHT,
    TOP,
    TOP_LEFT,
    TOP_RIGHT,
    WangId,
    corner_index,
    edge_index,
    is_corner,
    opposite_index,
    shared_indexes,
)


# =============================================================================
# Index Helpers
# =============================================================================

class TestIndexHelpers:
    """Tests for is_corner, opposite_index and friends."""

    def test_odd_indexes_are_corners(self):
        assert [is_corner(i) for i in range(NUM_INDEXES)] == [
            False, True, False, True, False, True, False, True
        ]

    def test_opposite_of_opposite_is_identity(self):
        for i in range(NUM_INDEXES):
            assert opposite_index(opposite_index(i)) == i

    def test_opposite_keeps_slot_kind(self):
        for i in range(NUM_INDEXES):
            assert is_corner(i) == is_corner(opposite_index(i))

    def test_opposites(self):
        assert opposite_index(TOP) == BOTTOM
        assert opposite_index(RIGHT) == LEFT
        assert opposite_index(TOP_RIGHT) == BOTTOM_LEFT
        assert opposite_index(TOP_LEFT) == BOTTOM_RIGHT

    def test_corner_and_edge_numbering(self):
        assert [corner_index(c) for c in range(4)] == [TOP_RIGHT, BOTTOM_RIGHT, BOTTOM_LEFT, TOP_LEFT]
        assert [edge_index(e) for e in range(4)] == [TOP, RIGHT, BOTTOM, LEFT]


class TestSharedIndexes:
    """Tests for shared_indexes."""

    def test_corner_neighbor_shares_one_corner(self):
        assert shared_indexes(TOP_RIGHT) == [(TOP_RIGHT, BOTTOM_LEFT)]

    def test_top_neighbor_shares_edge_and_both_corners(self):
        assert shared_indexes(TOP) == [
            (TOP, BOTTOM),
            (TOP_RIGHT, BOTTOM_RIGHT),
            (TOP_LEFT, BOTTOM_LEFT),
        ]

    def test_left_neighbor(self):
        assert shared_indexes(LEFT) == [
            (LEFT, RIGHT),
            (TOP_LEFT, TOP_RIGHT),
            (BOTTOM_LEFT, BOTTOM_RIGHT),
        ]

    def test_invalid_direction_raises(self):
        with pytest.raises(IndexError):
            shared_indexes(NUM_INDEXES)


# =============================================================================
# WangId
# =============================================================================

class TestWangIdSlots:
    """Tests for reading and writing slot colors."""

    def test_new_wang_id_is_empty(self):
        wang_id = WangId()
        assert wang_id.is_empty()
        assert wang_id.colors() == [0] * 8

    def test_set_and_read_index_color(self):
        wang_id = WangId()
        wang_id.set_index_color(RIGHT, 3)
        assert wang_id.index_color(RIGHT) == 3
        assert wang_id.colors() == [0, 0, 3, 0, 0, 0, 0, 0]

    def test_overwrite_keeps_other_slots(self):
        wang_id = WangId.from_colors([1, 2, 3, 4, 5, 6, 7, 8])
        wang_id.set_index_color(BOTTOM, 9)
        assert wang_id.colors() == [1, 2, 3, 4, 9, 6, 7, 8]

    def test_corner_and_edge_wrappers(self):
        wang_id = WangId()
        wang_id.set_corner_color(3, 5)
        wang_id.set_edge_color(1, 6)
        assert wang_id.index_color(TOP_LEFT) == 5
        assert wang_id.index_color(RIGHT) == 6
        assert wang_id.corner_color(3) == 5
        assert wang_id.edge_color(1) == 6

    def test_slot_values_are_packed_8_bits_apart(self):
        wang_id = WangId()
        wang_id.set_index_color(TOP_RIGHT, 2)
        assert int(wang_id) == 2 << 8

    def test_color_out_of_range_raises(self):
        with pytest.raises(ValueError, match="out of range"):
            WangId().set_index_color(TOP, INDEX_MASK + 1)

    def test_index_out_of_range_raises(self):
        with pytest.raises(IndexError):
            WangId().index_color(8)

    def test_corner_out_of_range_raises(self):
        with pytest.raises(IndexError):
            WangId().set_corner_color(4, 1)

    def test_from_colors_needs_eight_colors(self):
        with pytest.raises(ValueError, match="Expected 8"):
            WangId.from_colors([1, 2, 3])


class TestWangIdMasking:
    """Tests for mask(), & and equality."""

    def test_mask_marks_colored_slots(self):
        wang_id = WangId.from_colors([1, 0, 2, 0, 0, 0, 0, 3])
        assert wang_id.mask().colors() == [255, 0, 255, 0, 0, 0, 0, 255]

    def test_and_drops_unmasked_slots(self):
        wang_id = WangId.from_colors([1, 2, 3, 4, 5, 6, 7, 8])
        mask = WangId.from_colors([INDEX_MASK, 0, 0, 0, INDEX_MASK, 0, 0, 0])
        assert (wang_id & mask).colors() == [1, 0, 0, 0, 5, 0, 0, 0]

    def test_full_mask(self):
        assert int(WangId.full_mask()) == FULL_MASK
        assert not WangId.full_mask().has_wildcards()

    def test_equality_by_value(self):
        assert WangId.from_colors([1] * 8) == WangId.from_colors([1] * 8)
        assert WangId.from_colors([1] * 8) != WangId.from_colors([2] * 8)

    def test_copy_is_independent(self):
        original = WangId.from_colors([1] * 8)
        copy = original.copy()
        copy.set_index_color(TOP, 2)
        assert original.index_color(TOP) == 1

    def test_has_wildcards(self):
        assert WangId.from_colors([1, 1, 1, 1, 1, 1, 1, 0]).has_wildcards()
        assert not WangId.from_colors([1] * 8).has_wildcards()

    def test_repr_lists_colors(self):
        assert repr(WangId.from_colors([1, 2, 0, 0, 0, 0, 0, 0])) == "WangId(1,2,0,0,0,0,0,0)"


class TestFromSurrounding:
    """Tests for WangId.from_surrounding."""

    def test_no_neighbors_gives_empty(self):
        assert WangId.from_surrounding([None] * 8).is_empty()

    def test_edge_comes_from_opposite_edge_of_neighbor(self):
        surrounding = [None] * 8
        surrounding[TOP] = WangId.from_colors([0, 0, 0, 0, 4, 0, 0, 0])
        assert WangId.from_surrounding(surrounding).index_color(TOP) == 4

    def test_corner_prefers_diagonal_neighbor(self):
        surrounding = [None] * 8
        surrounding[TOP_RIGHT] = WangId.from_colors([0, 0, 0, 0, 0, 2, 0, 0])
        surrounding[TOP] = WangId.from_colors([0, 0, 0, 3, 0, 0, 0, 0])
        assert WangId.from_surrounding(surrounding).index_color(TOP_RIGHT) == 2

    def test_corner_falls_back_to_edge_neighbors(self):
        surrounding = [None] * 8
        surrounding[RIGHT] = WangId.from_colors([0, 0, 0, 0, 0, 0, 0, 5])
        assert WangId.from_surrounding(surrounding).index_color(TOP_RIGHT) == 5

    def test_full_surroundings_of_uniform_tiles(self):
        surrounding = [WangId.from_colors([2] * 8) for _ in range(8)]
        assert WangId.from_surrounding(surrounding) == WangId.from_colors([2] * 8)
