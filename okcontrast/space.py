"""
Metadata about the color spaces used for contrast and lightness search.

The search for an accessible color adjusts lightness in Oklch but measures
contrast on 24-bit RGB. Candidates thus routinely leave the sRGB gamut, and
this module provides the range checks and clipping to bring them back.
"""
import dataclasses
import math
from typing import cast, Literal

from .spec import FloatCoordinateSpec


EPSILON = 0.000075


@dataclasses.dataclass(frozen=True, slots=True)
class Coordinate:
    """
    A color space coordinate.

    Attributes:
        name: the single-letter name of the coordinate
        min: the optional minimum value for the coordinate
        max: the optional maximum value for the coordinate
        type: the optional type for common coordinate semantics

    An **angle** is a hue between 0 and 360 degrees and never clipped. A
    **normal** is a floating point number between 0 and 1, inclusive.

    Instances of this class are immutable.
    """
    name: str
    min: None | float = None
    max: None | float = None
    type: None | Literal['angle', 'normal'] = None

    def __post_init__(self) -> None:
        if len(self.name) != 1:
            raise ValueError('coordinate must have name with exactly 1 character')
        if self.type == 'angle' and (self.min != 0 or self.max != 360):
            raise ValueError('angle coordinate must have range from 0 to 360')
        if self.type == 'normal' and (self.min != 0 or self.max != 1):
            raise ValueError('normal coordinate must have range from 0 to 1')
        if self.min is not None and self.max is not None and self.min > self.max:
            raise ValueError(f'minimum {self.min} greater than maximum {self.max}')

    @property
    def unbounded(self) -> bool:
        """
        Flag for this coordinate having no bounds. That is the case if the
        coordinate represents an angle or has no limits.
        """
        return self.type == 'angle' or self.min is None and self.max is None

    def in_range(self, value: float, *, epsilon: float = EPSILON) -> bool:
        """
        Determine whether the value is within this coordinate's range with an
        epsilon tolerance. For angles and not-a-numbers, that is always the
        case.
        """
        if self.unbounded or math.isnan(value):
            return True

        return (
            (self.min is None or self.min - epsilon <= value)
            and (self.max is None or value <= self.max + epsilon)
        )

    def clip(self, value: float) -> float:
        """Clip the value to this coordinate's range."""
        if self.unbounded or math.isnan(value):
            return value
        if self.min is not None and value < self.min:
            return self.min
        if self.max is not None and value > self.max:
            return self.max
        return value


@dataclasses.dataclass(frozen=True, slots=True)
class Space:
    """
    A color space.

    Attributes:
        tag: is a lower-case Python identifier
        label: is a human-readable, descriptive label
        coordinates: are the coordinates

    Instances of this class are immutable.
    """
    tag: str
    label: str
    coordinates: tuple[Coordinate, Coordinate, Coordinate]

    def in_gamut(self, *coordinates: float, epsilon: float = EPSILON) -> bool:
        """
        Determine whether the coordinates are in gamut for this color space
        within an epsilon tolerance.
        """
        assert len(self.coordinates) == len(coordinates)
        return all(
            coordinate.in_range(value, epsilon=epsilon)
            for coordinate, value in zip(self.coordinates, coordinates)
        )

    def clip(self, *coordinates: float) -> FloatCoordinateSpec:
        """Clip the coordinates to this color space's gamut."""
        return cast(
            FloatCoordinateSpec,
            tuple(c.clip(v) for c, v in zip(self.coordinates, coordinates)),
        )


SRGB = Space(
    tag='srgb',
    label='sRGB',
    coordinates=(
        Coordinate('r', 0, 1, 'normal'),
        Coordinate('g', 0, 1, 'normal'),
        Coordinate('b', 0, 1, 'normal'),
    ),
)

OKLCH = Space(
    tag='oklch',
    label='Oklch',
    coordinates=(
        Coordinate('L', 0, 1, 'normal'),
        Coordinate('C', 0, 0.4),
        Coordinate('h', 0, 360, 'angle'),
    ),
)
