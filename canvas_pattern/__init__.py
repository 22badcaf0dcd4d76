"""canvas-pattern: tileable image paint sources for a 2D canvas backend."""

from canvas_pattern.core.pattern import CanvasPattern
from canvas_pattern.core.surface import check_surface_layout, create_pattern
from canvas_pattern.core.types import (
    Color,
    FillOrStrokeStyle,
    InvalidRepetition,
    InvalidSurfaceLayout,
    PatternError,
    RepetitionStyle,
    Surface,
    SurfaceStyle,
    ToFillOrStrokeStyle,
)

__all__ = [
    'CanvasPattern',
    'Color',
    'FillOrStrokeStyle',
    'InvalidRepetition',
    'InvalidSurfaceLayout',
    'PatternError',
    'RepetitionStyle',
    'Surface',
    'SurfaceStyle',
    'ToFillOrStrokeStyle',
    'check_surface_layout',
    'create_pattern',
]
