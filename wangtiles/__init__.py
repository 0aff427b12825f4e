"""
Wang Autotile

Autotiling engine for Wang tile sets: paint corner and edge colors onto a
tile grid and let the engine pick matching tiles.
"""

from .algorithms import BrushMode, WangFiller, WangPainter
from .core import TileLayer, WangId, WangSet, WangSetType

__all__ = [
    "BrushMode",
    "TileLayer",
    "WangFiller",
    "WangId",
    "WangPainter",
    "WangSet",
    "WangSetType",
]
