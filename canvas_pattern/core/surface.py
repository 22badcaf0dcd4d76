"""Turn images into RGBA surfaces and build patterns from them.

This is the createPattern() side of the library: decoding is done by
Pillow, pixel arrays come in as numpy uint8 arrays. Everything here hands
CanvasPattern a buffer that already satisfies the width * height * 4
layout.

Example:
    pattern = create_pattern(Image.open('tile.png'), 'repeat-x')
    style = pattern.to_fill_or_stroke_style()
"""

from __future__ import annotations

import logging

import numpy as np
from PIL import Image

from canvas_pattern.core.pattern import CanvasPattern
from canvas_pattern.core.types import InvalidSurfaceLayout, RepetitionStyle

logger = logging.getLogger(__name__)

BYTES_PER_PIXEL = 4


def check_surface_layout(surface_data: bytes | bytearray, surface_size: tuple[int, int]) -> None:
    """Raise InvalidSurfaceLayout unless the buffer is exactly width * height * 4 bytes."""
    width, height = surface_size
    if width < 0 or height < 0:
        raise InvalidSurfaceLayout(f'Negative surface size: {width}x{height}')
    expected = width * height * BYTES_PER_PIXEL
    if len(surface_data) != expected:
        raise InvalidSurfaceLayout(
            f'Surface {width}x{height} needs {expected} bytes, got {len(surface_data)}'
        )


def surface_from_image(image: Image.Image) -> tuple[bytes, tuple[int, int]]:
    """Return (rgba_bytes, (width, height)) for a Pillow image of any mode."""
    if image.mode != 'RGBA':
        image = image.convert('RGBA')
    return image.tobytes(), (image.width, image.height)


def surface_from_array(array: np.ndarray) -> tuple[bytes, tuple[int, int]]:
    """Return (rgba_bytes, (width, height)) for a (h, w, 4) or (h, w, 3) uint8 array.

    RGB arrays get an opaque alpha channel.
    """
    if array.dtype != np.uint8:
        raise InvalidSurfaceLayout(f'Expected uint8 pixels, got {array.dtype}')
    if array.ndim != 3 or array.shape[2] not in (3, 4):
        raise InvalidSurfaceLayout(f'Expected shape (h, w, 3|4), got {array.shape}')

    h, w = array.shape[:2]
    if array.shape[2] == 3:
        alpha = np.full((h, w, 1), 255, dtype=np.uint8)
        array = np.concatenate([array, alpha], axis=2)
    return np.ascontiguousarray(array).tobytes(), (w, h)


def load_surface(path: str) -> tuple[bytes, tuple[int, int]]:
    """Decode an image file into an RGBA surface."""
    with Image.open(path) as img:
        img.load()
        data, size = surface_from_image(img)
    logger.info('loaded %s (%dx%d)', path, size[0], size[1])
    return data, size


def create_pattern(
    image: Image.Image | np.ndarray,
    repetition: RepetitionStyle | str = RepetitionStyle.REPEAT,
) -> CanvasPattern:
    """Build a CanvasPattern from a Pillow image or numpy array.

    `repetition` may be a RepetitionStyle or a createPattern() keyword
    ('repeat', 'repeat-x', 'repeat-y', 'no-repeat', or '').
    """
    if isinstance(repetition, str):
        repetition = RepetitionStyle.from_keyword(repetition)

    if isinstance(image, np.ndarray):
        data, size = surface_from_array(image)
    else:
        data, size = surface_from_image(image)

    return CanvasPattern.new(data, size, repetition)
