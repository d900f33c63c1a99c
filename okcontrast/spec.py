"""
Basic type declarations for colors, contrast results, and summaries:

  * ``IntCoordinateSpec`` and ``FloatCoordinateSpec`` are triples of integers
    and floating point values, respectively
  * ``TargetLevel`` is the WCAG conformance level driving pass/fail judgments
    and fix suggestions
  * ``ColorEntry`` associates a palette color's identity with its hex value
  * ``Evaluation`` holds the pass/fail flags for one contrast ratio
  * ``ContrastResult`` records the contrast for one ordered pair of colors
  * ``ContrastSummary`` tallies the passing and failing pairs of a matrix

All container types are immutable.
"""
from collections.abc import Mapping
import dataclasses
import enum
from typing import Self, TypeAlias

IntCoordinateSpec: TypeAlias = tuple[int, int, int]
FloatCoordinateSpec: TypeAlias = tuple[float, float, float]


class TargetLevel(enum.Enum):
    """
    The WCAG 2.x conformance level

    Attributes:
        AA: requires a contrast ratio of at least 4.5:1 for normal text
        AAA: requires a contrast ratio of at least 7:1 for normal text
    """
    AA = 'AA'
    AAA = 'AAA'

    @property
    def ratio(self) -> float:
        """The minimum contrast ratio for normal text at this level."""
        return 4.5 if self is TargetLevel.AA else 7.0

    @classmethod
    def of(cls, level: str | Self) -> Self:
        """
        Coerce the argument into a target level. Strings are matched without
        regard to case.
        """
        if isinstance(level, cls):
            return level
        if isinstance(level, str):
            try:
                return cls(level.strip().upper())
            except ValueError:
                pass
        raise ValueError(f'"{level}" is not a valid target level')


@dataclasses.dataclass(frozen=True, slots=True)
class ColorEntry:
    """
    A palette color.

    Attributes:
        id: is the opaque identity of the color
        hex: is the color value as six hexadecimal digits

    Two entries may share the same hex value and still be different colors.
    Only entries with the same ``id`` denote the same color.
    """
    id: str
    hex: str

    @classmethod
    def of(cls, entry: 'Self | tuple[str, str] | Mapping[str, str]') -> Self:
        """
        Coerce the argument into a color entry. It may be a color entry, an
        ``(id, hex)`` pair, or a mapping with ``id`` and ``hex`` keys.
        """
        if isinstance(entry, cls):
            return entry
        if isinstance(entry, tuple):
            identifier, value = entry
            return cls(identifier, value)
        if isinstance(entry, Mapping):
            return cls(entry['id'], entry['hex'])
        raise TypeError(f'{entry!r} is not a valid color entry')


@dataclasses.dataclass(frozen=True, slots=True)
class Evaluation:
    """The WCAG 2.x pass/fail flags for a contrast ratio."""
    passes_aa: bool
    passes_aaa: bool
    passes_aa_large: bool
    passes_ui_component: bool


@dataclasses.dataclass(frozen=True, slots=True)
class ContrastResult:
    """
    The contrast between a foreground and a background color.

    Attributes:
        foreground_id: identifies the foreground color
        background_id: identifies the background color
        ratio: is the WCAG 2.x contrast ratio between 1 and 21, rounded to
            two decimals
        passes_aa: flags a ratio of at least 4.5
        passes_aaa: flags a ratio of at least 7
        passes_aa_large: flags a ratio of at least 3 for large text
        passes_ui_component: flags a ratio of at least 3 for UI components
        suggested_fix: is a replacement foreground that meets the target
            level, or ``None`` if the pair already passes, is a self pair, or
            cannot be fixed by adjusting lightness alone
        apca: is reserved for the APCA contrast and always ``None``

    Instances of this class are immutable. They go stale as soon as either
    color or the target level changes.
    """
    foreground_id: str
    background_id: str
    ratio: float
    passes_aa: bool
    passes_aaa: bool
    passes_aa_large: bool
    passes_ui_component: bool
    suggested_fix: None | str = None
    apca: None | float = None

    @property
    def is_self_pair(self) -> bool:
        """Flag for a result pairing a color with itself."""
        return self.foreground_id == self.background_id

    def passes(self, level: TargetLevel) -> bool:
        """Determine whether this result meets the level for normal text."""
        return self.passes_aa if level is TargetLevel.AA else self.passes_aaa


@dataclasses.dataclass(frozen=True, slots=True)
class ContrastSummary:
    """
    The pass/fail tally for a contrast matrix, excluding self pairs.

    Attributes:
        total: is the number of pairs considered
        passing: is the number of pairs meeting the target level
        failing: is the number of pairs falling short
        percentage: is the rounded percentage of passing pairs, or 0 for an
            empty tally
    """
    total: int
    passing: int
    failing: int
    percentage: int
