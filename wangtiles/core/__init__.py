"""
Core autotiling types.

WangIds, WangSets, weighted random selection, tile layers and grid
geometry.
"""

from .geometry import (
    GridGeometry,
    HexagonalGeometry,
    Orientation,
    OrthogonalGeometry,
    StaggerAxis,
    StaggerIndex,
    create_geometry,
)
from .random_picker import RandomPicker, RandomTaker, global_random
from .tile_layer import Cell, Grid, Region, TileLayer
from .wang_id import WangId
from .wang_set import InvalidWangIdError, WangColor, WangSet, WangSetType

__all__ = [
    "Cell",
    "Grid",
    "GridGeometry",
    "HexagonalGeometry",
    "InvalidWangIdError",
    "Orientation",
    "OrthogonalGeometry",
    "RandomPicker",
    "RandomTaker",
    "Region",
    "StaggerAxis",
    "StaggerIndex",
    "TileLayer",
    "WangColor",
    "WangId",
    "WangSet",
    "WangSetType",
    "create_geometry",
    "global_random",
]
