"""Report builder — text and JSON descriptions of fill/stroke styles."""

import json
from typing import Any

import numpy as np

from canvas_pattern.core.pattern import REPEAT_FLAGS
from canvas_pattern.core.types import Color, FillOrStrokeStyle, Surface

_FLAGS_TO_KEYWORD = {flags: style.keyword for style, flags in REPEAT_FLAGS.items()}


def _rgba_hex(rgba: tuple[int, ...]) -> str:
    return '#' + ''.join(f'{c:02x}' for c in rgba)


def describe(style: FillOrStrokeStyle) -> dict[str, Any]:
    """Summarise a style as a plain dict."""
    if isinstance(style, Color):
        return {'kind': 'color', 'rgba': list(style.rgba), 'hex': _rgba_hex(style.rgba)}

    surface = style.style
    width, height = surface.surface_size
    expected = width * height * 4
    obj: dict[str, Any] = {
        'kind': 'surface',
        'width': width,
        'height': height,
        'repeat_x': surface.repeat_x,
        'repeat_y': surface.repeat_y,
        'repetition': _FLAGS_TO_KEYWORD[(surface.repeat_x, surface.repeat_y)],
        'bytes': len(surface.surface_data),
        'layout_ok': len(surface.surface_data) == expected,
    }

    # Pixel stats only make sense when the buffer really is w*h RGBA pixels
    if obj['layout_ok'] and expected > 0:
        pixels = np.frombuffer(bytes(surface.surface_data), dtype=np.uint8).reshape(-1, 4)
        first = tuple(int(c) for c in pixels[0])
        mean = tuple(int(round(float(c))) for c in pixels.mean(axis=0))
        obj['first_pixel'] = _rgba_hex(first)
        obj['mean_rgba'] = _rgba_hex(mean)
    return obj


def format_text(style: FillOrStrokeStyle, source: str | None = None) -> str:
    """Format a style as human-readable text."""
    info = describe(style)
    lines = []
    header = 'canvas-pattern'
    if source:
        header += f': {source}'
    lines.append(header)
    lines.append('')

    if info['kind'] == 'color':
        lines.append(f'  color: {info["hex"]}')
        return '\n'.join(lines)

    lines.append(f'  surface: {info["width"]}×{info["height"]}  ({info["bytes"]} bytes)')
    lines.append(f'  repetition: {info["repetition"]}  (x={info["repeat_x"]}, y={info["repeat_y"]})')
    if not info['layout_ok']:
        lines.append('  layout: MISMATCH (expected width*height*4 bytes)')
    if 'first_pixel' in info:
        lines.append(f'  first pixel: {info["first_pixel"]}  mean: {info["mean_rgba"]}')
    return '\n'.join(lines)


def format_json(style: FillOrStrokeStyle, source: str | None = None) -> str:
    """Format a style as JSON."""
    obj: dict[str, Any] = {}
    if source:
        obj['source'] = source
    obj['style'] = describe(style)
    return json.dumps(obj, indent=2)
