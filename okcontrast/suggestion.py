"""
Support for suggesting accessible replacement colors.

When a foreground color fails to meet a contrast target against its
background, :func:`find_nearest_accessible` searches for the closest color
that does meet the target. It only adjusts lightness in Oklch and holds chroma
and hue fixed. Since Oklch is perceptually uniform, the suggestion looks like
a lighter or darker version of the original color.

The search performs a binary search across lightness. Each candidate is
converted to a hex color, which clips it to the sRGB gamut, and its contrast is
measured on that hex color. Hence, every returned suggestion is guaranteed to
meet the target as measured by :func:`.contrast_ratio`. Some targets, notably
AAA against a mid-gray background, cannot be met by adjusting lightness alone.
The search then returns ``None``.
"""
from collections.abc import Iterable, Mapping
import logging

from .contrast import contrast_ratio, target_ratio
from .conversion import hex_to_oklch, oklch_to_hex
from .hexcolor import normalize_hex
from .spec import ColorEntry, FloatCoordinateSpec, TargetLevel


logger = logging.getLogger(__name__)

MAX_ITERATIONS = 50
LIGHTNESS_PRECISION = 0.001


def search_lightness(
    origin: FloatCoordinateSpec,
    background: str,
    target: float,
    darken: bool,
) -> None | str:
    """
    Search for the lightness closest to the origin's that meets the target.

    Args:
        origin: is the foreground color in Oklch
        background: is the normalized background hex color
        target: is the minimum contrast ratio
        darken: selects the direction, with the search range between zero and
            the origin's lightness when darkening and between the origin's
            lightness and one when lightening
    Returns:
        the normalized hex color with the adjusted lightness or ``None`` if no
        lightness in range meets the target

    When a candidate meets the target, the search moves its bound towards the
    origin to minimize the adjustment. Otherwise, it moves the bound away from
    the origin. The search stops after ``MAX_ITERATIONS`` steps or once the
    range is narrower than ``LIGHTNESS_PRECISION``.
    """
    L, C, h = origin
    low, high = (0.0, L) if darken else (L, 1.0)
    best = None

    iterations = 0
    while iterations < MAX_ITERATIONS and high - low > LIGHTNESS_PRECISION:
        iterations += 1

        mid = (low + high) / 2
        candidate = oklch_to_hex(mid, C, h)

        if contrast_ratio(candidate, background) >= target:
            best = candidate
            if darken:
                low = mid
            else:
                high = mid
        elif darken:
            high = mid
        else:
            low = mid

    logger.debug(
        '%s from L=%.4f against %s: %s after %d iterations',
        'darkening' if darken else 'lightening',
        L, background, best, iterations,
    )
    return best


def find_nearest_accessible(
    foreground: str,
    background: str,
    target: float,
) -> None | str:
    """
    Find the color closest to the foreground that meets the contrast target
    against the background.

    Args:
        foreground: is the hex color to adjust
        background: is the hex color to contrast with
        target: is the minimum contrast ratio, e.g., 4.5 for AA
    Returns:
        the normalized hex color of the suggestion, the normalized foreground
        if it already meets the target, or ``None`` if either color is
        malformed or no lightness meets the target

    The search first tries the primary direction, which is darkening if the
    foreground is lighter than the background and lightening otherwise. If
    that fails, it tries the opposite direction. The result is deterministic.
    """
    fg = normalize_hex(foreground)
    bg = normalize_hex(background)
    if fg is None or bg is None:
        return None

    origin = hex_to_oklch(fg)
    backdrop = hex_to_oklch(bg)
    if origin is None or backdrop is None:
        return None

    if contrast_ratio(fg, bg) >= target:
        return fg

    darken = origin[0] > backdrop[0]
    suggestion = search_lightness(origin, bg, target, darken)
    if suggestion is None:
        suggestion = search_lightness(origin, bg, target, not darken)

    if suggestion is None:
        logger.debug('no lightness of %s reaches %s against %s', fg, target, bg)
        return None

    # Clipping to the sRGB gamut must not drop the suggestion below target
    if contrast_ratio(suggestion, bg) < target:
        return None
    return suggestion


def suggestions_for_color(
    foreground: str,
    backgrounds: Iterable[ColorEntry | tuple[str, str] | Mapping[str, str]],
    level: str | TargetLevel,
) -> dict[str, str]:
    """
    Find suggestions for the foreground against several backgrounds.

    The result maps background identifiers to suggested replacements for the
    foreground. It only includes backgrounds with a hex value different from
    the foreground, for which the foreground fails the target level, and for
    which a suggestion exists.
    """
    ratio = target_ratio(level)
    fg = normalize_hex(foreground)
    suggestions: dict[str, str] = {}

    for entry in map(ColorEntry.of, backgrounds):
        if fg is None or normalize_hex(entry.hex) == fg:
            continue

        suggestion = find_nearest_accessible(fg, entry.hex, ratio)
        if suggestion is not None and suggestion != fg:
            suggestions[entry.id] = suggestion

    return suggestions
