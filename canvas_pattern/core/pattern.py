"""CanvasPattern — an immutable, tileable image paint source.

A pattern pairs RGBA pixel data with per-axis repetition flags. The flags
are derived once from a RepetitionStyle when the pattern is created and
never change afterwards.

The pixel buffer must hold width * height * 4 bytes. The constructor does
not check this; use surface.check_surface_layout() for fail-fast
validation.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from canvas_pattern.core.types import FillOrStrokeStyle, RepetitionStyle, Surface, SurfaceStyle

logger = logging.getLogger(__name__)

# Every RepetitionStyle member must appear here (see tests/test_pattern.py).
REPEAT_FLAGS: dict[RepetitionStyle, tuple[bool, bool]] = {
    RepetitionStyle.REPEAT: (True, True),
    RepetitionStyle.REPEAT_X: (True, False),
    RepetitionStyle.REPEAT_Y: (False, True),
    RepetitionStyle.NO_REPEAT: (False, False),
}


def repeat_flags(repetition: RepetitionStyle) -> tuple[bool, bool]:
    """Return (repeat_x, repeat_y) for a repetition style."""
    return REPEAT_FLAGS[repetition]


@dataclass(frozen=True)
class CanvasPattern:
    """Image pattern usable as a fill or stroke style."""

    surface_data: bytes
    surface_size: tuple[int, int]  # (width, height)
    repeat_x: bool
    repeat_y: bool

    @classmethod
    def new(
        cls,
        surface_data: bytes | bytearray | memoryview,
        surface_size: tuple[int, int],
        repetition: RepetitionStyle,
    ) -> CanvasPattern:
        """Create a pattern, taking its own copy of the pixel buffer."""
        x, y = repeat_flags(repetition)
        width, height = surface_size
        pattern = cls(
            surface_data=bytes(surface_data),
            surface_size=(int(width), int(height)),
            repeat_x=x,
            repeat_y=y,
        )
        logger.debug('created pattern %dx%d %s', width, height, repetition.keyword)
        return pattern

    def to_fill_or_stroke_style(self) -> FillOrStrokeStyle:
        return Surface(
            SurfaceStyle(
                surface_data=bytearray(self.surface_data),
                surface_size=self.surface_size,
                repeat_x=self.repeat_x,
                repeat_y=self.repeat_y,
            )
        )
