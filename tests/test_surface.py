"""Tests for canvas_pattern.core.surface — Pillow/numpy acquisition and createPattern."""

from pathlib import Path

import numpy as np
import pytest
from canvas_pattern.core.surface import (
    check_surface_layout,
    create_pattern,
    load_surface,
    surface_from_array,
    surface_from_image,
)
from canvas_pattern.core.types import InvalidRepetition, InvalidSurfaceLayout, RepetitionStyle
from PIL import Image


class TestCheckSurfaceLayout:
    def test_exact_length_ok(self) -> None:
        check_surface_layout(bytes(2 * 3 * 4), (2, 3))

    def test_empty_surface_ok(self) -> None:
        check_surface_layout(b'', (0, 7))

    def test_short_buffer(self) -> None:
        with pytest.raises(InvalidSurfaceLayout, match='needs 24 bytes, got 23'):
            check_surface_layout(bytes(23), (2, 3))

    def test_negative_size(self) -> None:
        with pytest.raises(InvalidSurfaceLayout):
            check_surface_layout(b'', (-1, 0))


class TestSurfaceFromImage:
    def test_rgba_passthrough(self) -> None:
        img = Image.new('RGBA', (3, 2), (10, 20, 30, 40))
        data, size = surface_from_image(img)
        assert size == (3, 2)
        assert data == bytes([10, 20, 30, 40]) * 6

    def test_rgb_gets_opaque_alpha(self) -> None:
        img = Image.new('RGB', (1, 1), (1, 2, 3))
        data, _size = surface_from_image(img)
        assert data == bytes([1, 2, 3, 255])

    def test_grayscale_converted(self) -> None:
        img = Image.new('L', (2, 2), 128)
        data, size = surface_from_image(img)
        check_surface_layout(data, size)
        assert data[:4] == bytes([128, 128, 128, 255])


class TestSurfaceFromArray:
    def test_rgba_array(self) -> None:
        arr = np.zeros((2, 3, 4), dtype=np.uint8)
        arr[0, 0] = [9, 8, 7, 6]
        data, size = surface_from_array(arr)
        assert size == (3, 2)
        assert data[:4] == bytes([9, 8, 7, 6])
        assert len(data) == 24

    def test_rgb_array_padded(self) -> None:
        arr = np.full((1, 2, 3), 50, dtype=np.uint8)
        data, size = surface_from_array(arr)
        assert size == (2, 1)
        assert data == bytes([50, 50, 50, 255]) * 2

    def test_non_contiguous_array(self) -> None:
        arr = np.arange(4 * 4 * 4, dtype=np.uint8).reshape(4, 4, 4)[:, ::2]
        data, size = surface_from_array(arr)
        check_surface_layout(data, size)
        assert size == (2, 4)

    def test_wrong_dtype(self) -> None:
        with pytest.raises(InvalidSurfaceLayout, match='uint8'):
            surface_from_array(np.zeros((2, 2, 4), dtype=np.float32))

    def test_wrong_shape(self) -> None:
        with pytest.raises(InvalidSurfaceLayout, match='shape'):
            surface_from_array(np.zeros((2, 2), dtype=np.uint8))


class TestLoadSurface:
    def test_png_file(self, tmp_path: Path) -> None:
        path = tmp_path / 'tile.png'
        Image.new('RGBA', (4, 5), (0, 0, 255, 255)).save(path)
        data, size = load_surface(str(path))
        assert size == (4, 5)
        assert data[:4] == bytes([0, 0, 255, 255])
        check_surface_layout(data, size)


class TestCreatePattern:
    def test_keyword(self) -> None:
        pattern = create_pattern(Image.new('RGB', (2, 2)), 'repeat-x')
        assert (pattern.repeat_x, pattern.repeat_y) == (True, False)
        assert pattern.surface_size == (2, 2)

    def test_enum(self) -> None:
        pattern = create_pattern(Image.new('RGB', (2, 2)), RepetitionStyle.NO_REPEAT)
        assert (pattern.repeat_x, pattern.repeat_y) == (False, False)

    def test_default_is_repeat(self) -> None:
        pattern = create_pattern(Image.new('RGB', (1, 1)))
        assert (pattern.repeat_x, pattern.repeat_y) == (True, True)

    def test_from_array(self) -> None:
        arr = np.zeros((3, 1, 4), dtype=np.uint8)
        arr[..., 3] = 255
        pattern = create_pattern(arr, 'repeat-y')
        assert pattern.surface_size == (1, 3)
        style = pattern.to_fill_or_stroke_style().style
        assert bytes(style.surface_data) == bytes([0, 0, 0, 255]) * 3

    def test_bad_keyword(self) -> None:
        with pytest.raises(InvalidRepetition):
            create_pattern(Image.new('RGB', (1, 1)), 'tile')
