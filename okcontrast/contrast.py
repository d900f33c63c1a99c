"""
Support for computing color contrast. This module implements the contrast
ratio of the `Web Content Accessibility Guidelines
<https://www.w3.org/TR/WCAG22/#dfn-contrast-ratio>`_ (WCAG), version 2.x, which
is based on the relative luminance of the two colors.

Unlike perceptual contrast metrics, the WCAG 2.x ratio is symmetric, i.e., the
order of foreground and background does not matter. It ranges from 1:1 for
identical colors to 21:1 for black and white.
"""
import math

from .hexcolor import hex_to_rgb256, normalize_hex
from .spec import ContrastResult, Evaluation, TargetLevel


AA_NORMAL = 4.5
AAA_NORMAL = 7.0
AA_LARGE = 3.0
UI_COMPONENT = 3.0

_BREAKPOINT = 0.03928
_COEFFICIENTS = (0.2126, 0.7152, 0.0722)
_OFFSET = 0.05


def relative_luminance(value: str) -> float:
    """
    Determine the WCAG 2.x relative luminance of the hex color.

    The luminance linearizes each sRGB component with the piecewise gamma
    curve, using WCAG's breakpoint of 0.03928 instead of sRGB's 0.04045, and
    then weighs the components. The color must be a valid hex color.
    """
    def linearize(component: int) -> float:
        c = component / 255
        if c <= _BREAKPOINT:
            return c / 12.92
        return math.pow((c + 0.055) / 1.055, 2.4)

    return math.sumprod(_COEFFICIENTS, map(linearize, hex_to_rgb256(value)))


def luminance_to_ratio(luminance1: float, luminance2: float) -> float:
    """
    Determine the unrounded contrast ratio between two relative luminance
    values.
    """
    lighter = max(luminance1, luminance2)
    darker = min(luminance1, luminance2)
    return (lighter + _OFFSET) / (darker + _OFFSET)


def contrast_ratio(foreground: str, background: str) -> float:
    """
    Determine the contrast ratio between the two hex colors, rounded to two
    decimals.

    If either color is not a valid hex color, this function returns a
    not-a-number, which fails every threshold.
    """
    if normalize_hex(foreground) is None or normalize_hex(background) is None:
        return math.nan

    ratio = luminance_to_ratio(
        relative_luminance(foreground),
        relative_luminance(background),
    )
    return round(ratio, 2)


def evaluate(ratio: float) -> Evaluation:
    """
    Evaluate the contrast ratio against the WCAG 2.x thresholds. Normal text
    and large text or UI components are independent criteria, so a ratio of
    3.5 passes for large text but not for normal text.
    """
    return Evaluation(
        passes_aa=ratio >= AA_NORMAL,
        passes_aaa=ratio >= AAA_NORMAL,
        passes_aa_large=ratio >= AA_LARGE,
        passes_ui_component=ratio >= UI_COMPONENT,
    )


def target_ratio(level: str | TargetLevel, large: bool = False) -> float:
    """
    Determine the minimum contrast ratio for the target level. Large text,
    i.e., 18pt or 14pt bold, requires 3:1 at both levels.
    """
    level = TargetLevel.of(level)
    return AA_LARGE if large else level.ratio


def build_result(
    foreground_id: str,
    foreground: str,
    background_id: str,
    background: str,
    level: str | TargetLevel = TargetLevel.AA,
) -> ContrastResult:
    """
    Determine the complete contrast result for the foreground against the
    background.

    If the pair fails the target level for normal text, the result includes a
    suggested replacement for the foreground. Self pairs, i.e., pairs with the
    same identifier on both sides, never receive a suggestion, not even when
    their hex values differ.
    """
    from .suggestion import find_nearest_accessible

    level = TargetLevel.of(level)
    ratio = contrast_ratio(foreground, background)
    evaluation = evaluate(ratio)

    passes = evaluation.passes_aa if level is TargetLevel.AA else evaluation.passes_aaa
    suggested_fix = None
    if not passes and foreground_id != background_id:
        suggested_fix = find_nearest_accessible(
            foreground, background, target_ratio(level)
        )

    return ContrastResult(
        foreground_id=foreground_id,
        background_id=background_id,
        ratio=ratio,
        passes_aa=evaluation.passes_aa,
        passes_aaa=evaluation.passes_aaa,
        passes_aa_large=evaluation.passes_aa_large,
        passes_ui_component=evaluation.passes_ui_component,
        suggested_fix=suggested_fix,
    )
