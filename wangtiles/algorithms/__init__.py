"""
Wang Autotile - Algorithms

The tile solver and the paint front end built on it.
"""

from .wang_filler import CellInfo, FillRegion, WangFiller
from .wang_painter import BrushMode, PainterStateError, WangPainter

__all__ = [
    "BrushMode",
    "CellInfo",
    "FillRegion",
    "PainterStateError",
    "WangFiller",
    "WangPainter",
]
