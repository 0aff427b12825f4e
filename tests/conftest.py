"""Shared pytest fixtures for autotiling tests."""

import json
import random
from pathlib import Path

import pytest

from wangtiles.core.wang_set import WangSet, WangSetType
from wangtiles.core.wang_id import WangId

FIXTURES_DIR = Path(__file__).parent / "fixtures"


def load_fixture(name):
    with open(FIXTURES_DIR / name) as f:
        return json.load(f)


@pytest.fixture
def rng():
    """Seeded random source so fills are reproducible."""
    return random.Random(12345)


@pytest.fixture
def mixed_set():
    """Mixed set with one all-grass (tile 1) and one all-sand (tile 2) tile."""
    return WangSet.from_dict(load_fixture("two_color_mixed.json"))


@pytest.fixture
def corner_set():
    """Complete 16-tile land/water corner set. Tile id bits: TR, BR, BL, TL."""
    return WangSet.from_dict(load_fixture("corner_set.json"))


@pytest.fixture
def edge_set():
    """Complete 16-tile road/grass edge set. Tile id bits: top, right, bottom, left."""
    wang_set = WangSet("Roads", WangSetType.EDGE)
    wang_set.add_color("grass")
    wang_set.add_color("road")
    for tile_id in range(16):
        colors = [0] * 8
        for bit, index in enumerate((0, 2, 4, 6)):
            colors[index] = 2 if tile_id & (1 << bit) else 1
        wang_set.set_wang_id(tile_id, WangId.from_colors(colors))
    return wang_set


@pytest.fixture
def edge_only_color_set():
    """Mixed set where color 1 only appears on edges and color 2 only on corners."""
    wang_set = WangSet("Split", WangSetType.MIXED)
    wang_set.add_color("edge color")
    wang_set.add_color("corner color")
    wang_set.add_color("unused")
    wang_set.set_wang_id(0, WangId.from_colors([1, 2, 1, 2, 1, 2, 1, 2]))
    return wang_set
