"""Shared types for canvas-pattern: RepetitionStyle, SurfaceStyle, FillOrStrokeStyle."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Protocol, Union


class PatternError(Exception):
    """Base class for canvas-pattern errors."""


class InvalidRepetition(PatternError, ValueError):
    """Repetition keyword is not one of the four canvas keywords."""


class InvalidSurfaceLayout(PatternError, ValueError):
    """Pixel buffer does not match width * height * 4 RGBA bytes."""


class RepetitionStyle(Enum):
    """How a pattern tiles along each axis."""

    REPEAT = 'repeat'
    REPEAT_X = 'repeat-x'
    REPEAT_Y = 'repeat-y'
    NO_REPEAT = 'no-repeat'

    @classmethod
    def from_keyword(cls, value: str) -> RepetitionStyle:
        """Parse a createPattern() repetition string.

        The empty string means 'repeat'. Matching is case-sensitive.
        """
        if value == '':
            return cls.REPEAT
        for style in cls:
            if style.value == value:
                return style
        raise InvalidRepetition(f'Invalid repetition: {value!r}. Expected one of: {", ".join(s.value for s in cls)}')

    @property
    def keyword(self) -> str:
        return self.value


@dataclass
class SurfaceStyle:
    """Tiled image source as handed to the paint backend.

    Owns its own copy of the pixels; the backend may keep or mutate it.
    """

    surface_data: bytearray
    surface_size: tuple[int, int]  # (width, height)
    repeat_x: bool
    repeat_y: bool


@dataclass(frozen=True)
class Color:
    """Solid colour fill, RGBA components 0-255."""

    rgba: tuple[int, int, int, int]

    def to_fill_or_stroke_style(self) -> FillOrStrokeStyle:
        return self


@dataclass(frozen=True)
class Surface:
    """Image pattern fill."""

    style: SurfaceStyle


FillOrStrokeStyle = Union[Color, Surface]


class ToFillOrStrokeStyle(Protocol):
    """Anything that can be used as a fillStyle or strokeStyle."""

    def to_fill_or_stroke_style(self) -> FillOrStrokeStyle: ...
