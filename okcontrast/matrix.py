"""
Support for the contrast matrix of a palette.

For a palette with N colors, the contrast matrix has N×N results, one for every
ordered pair of foreground and background color, including the N self pairs
on the diagonal. The builder neither validates nor retains the colors. Callers
should validate hex values with :func:`.normalize_hex` before building a
matrix. Malformed values still do not raise but produce not-a-number ratios
that fail every threshold.
"""
from collections.abc import Iterable, Mapping, Sequence
import logging
import math

from .contrast import build_result
from .spec import ColorEntry, ContrastResult, ContrastSummary, TargetLevel


logger = logging.getLogger(__name__)


def build_matrix(
    colors: Iterable[ColorEntry | tuple[str, str] | Mapping[str, str]],
    level: str | TargetLevel = TargetLevel.AA,
) -> list[ContrastResult]:
    """
    Build the contrast matrix for the colors.

    The colors may be color entries, ``(id, hex)`` pairs, or mappings with
    ``id`` and ``hex`` keys. The result lists the foreground colors in the
    given order, with the background colors in the same order for each
    foreground. Only lookup by identifiers is meaningful, however.
    """
    level = TargetLevel.of(level)
    entries = [ColorEntry.of(c) for c in colors]

    matrix = [
        build_result(fg.id, fg.hex, bg.id, bg.hex, level)
        for fg in entries
        for bg in entries
    ]

    logger.debug(
        'built %d×%d contrast matrix for %s with %d suggestions',
        len(entries), len(entries), level.value,
        sum(r.suggested_fix is not None for r in matrix),
    )
    return matrix


def lookup(
    matrix: Iterable[ContrastResult],
    foreground_id: str,
    background_id: str,
) -> None | ContrastResult:
    """
    Look up the result for the ordered pair of foreground and background
    identifiers. The result is ``None`` if the matrix has no such pair.
    """
    for result in matrix:
        if (
            result.foreground_id == foreground_id
            and result.background_id == background_id
        ):
            return result
    return None


def failing_pairs(
    matrix: Iterable[ContrastResult],
    level: str | TargetLevel,
) -> list[ContrastResult]:
    """Get the results that fail the target level, excluding self pairs."""
    level = TargetLevel.of(level)
    return [r for r in matrix if not r.is_self_pair and not r.passes(level)]


def summarize(
    matrix: Sequence[ContrastResult],
    level: str | TargetLevel,
) -> ContrastSummary:
    """
    Summarize the contrast matrix for the target level.

    The summary excludes self pairs. Its percentage is rounded half up and 0
    for palettes with fewer than two colors.
    """
    level = TargetLevel.of(level)
    pairs = [r for r in matrix if not r.is_self_pair]

    total = len(pairs)
    passing = sum(r.passes(level) for r in pairs)
    percentage = math.floor(passing / total * 100 + 0.5) if total > 0 else 0

    return ContrastSummary(
        total=total,
        passing=passing,
        failing=total - passing,
        percentage=percentage,
    )
