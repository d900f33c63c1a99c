"""
Conversion between hex colors, sRGB, linear sRGB, XYZ, Oklab, and Oklch.

All conversions are plain functions taking and returning coordinates, which
makes them easy to compose. Only the round trip through 24-bit RGB is lossy,
since converting a color back from Oklch clips it to the sRGB gamut and rounds
its components to integers.
"""
import math
from typing import cast, TypeAlias

from .hexcolor import hex_to_rgb256, normalize_hex, rgb256_to_hex
from .space import OKLCH, SRGB
from .spec import FloatCoordinateSpec, IntCoordinateSpec


# See https://github.com/color-js/color.js/blob/a77e080a070039c534dda3965a769675aac5f75e/src/spaces/srgb-linear.js

_XYZ_TO_LINEAR_SRGB = (
    (  3.2409699419045226,  -1.537383177570094,   -0.4986107602930034  ),
    ( -0.9692436362808796,   1.8759675015077202,   0.04155505740717559 ),
    (  0.05563007969699366, -0.20397695888897652,  1.0569715142428786  ),
)

_LINEAR_SRGB_TO_XYZ = (
    ( 0.41239079926595934, 0.357584339383878,   0.1804807884018343  ),
    ( 0.21263900587151027, 0.715168678767756,   0.07219231536073371 ),
    ( 0.01933081871559182, 0.11919477979462598, 0.9505321522496607  ),
)

# See https://github.com/color-js/color.js/blob/a77e080a070039c534dda3965a769675aac5f75e/src/spaces/oklab.js

_XYZ_TO_LMS = (
    ( 0.8190224379967030, 0.3619062600528904, -0.1288737815209879 ),
    ( 0.0329836539323885, 0.9292868615863434,  0.0361446663506424 ),
    ( 0.0481771893596242, 0.2642395317527308,  0.6335478284694309 ),
)

_LMS_TO_XYZ = (
    (  1.2268798758459243, -0.5578149944602171,  0.2813910456659647 ),
    ( -0.0405757452148008,  1.1122868032803170, -0.0717110580655164 ),
    ( -0.0763729366746601, -0.4214933324022432,  1.5869240198367816 ),
)

_LMS_TO_OKLAB = (
    ( 0.2104542683093140,  0.7936177747023054, -0.0040720430116193 ),
    ( 1.9779985324311684, -2.4285922420485799,  0.4505937096174110 ),
    ( 0.0259040424655478,  0.7827717124575296, -0.8086757549230774 ),
)

_OKLAB_TO_LMS = (
    ( 1.0000000000000000,  0.3963377773761749,  0.2158037573099136 ),
    ( 1.0000000000000000, -0.1055613458156586, -0.0638541728258133 ),
    ( 1.0000000000000000, -0.0894841775298119, -1.2914855480194092 ),
)


# --------------------------------------------------------------------------------------


_Matrix: TypeAlias = tuple[
    FloatCoordinateSpec, FloatCoordinateSpec, FloatCoordinateSpec
]

def _multiply(matrix: _Matrix, vector: FloatCoordinateSpec) -> FloatCoordinateSpec:
    return cast(
        FloatCoordinateSpec,
        tuple(sum(r * c for r, c in zip(row, vector)) for row in matrix)
    )


# --------------------------------------------------------------------------------------
# 24-bit RGB


def rgb256_to_srgb(r: int, g: int, b: int) -> FloatCoordinateSpec:
    """Convert the given color from 24-bit RGB to sRGB."""
    return r / 255.0, g / 255.0, b / 255.0


def srgb_to_rgb256(r: float, g: float, b: float) -> IntCoordinateSpec:
    """
    Convert the given color from sRGB to 24-bit RGB. This conversion is lossy:
    It clips out-of-gamut components and rounds the result.
    """
    return cast(
        IntCoordinateSpec,
        tuple(round(c * 255) for c in SRGB.clip(r, g, b)),
    )


# --------------------------------------------------------------------------------------
# sRGB and Linear sRGB
# See https://github.com/color-js/color.js/blob/a77e080a070039c534dda3965a769675aac5f75e/src/spaces/srgb.js


def srgb_to_linear_srgb(r: float, g: float, b: float) -> FloatCoordinateSpec:
    """Convert the given color from sRGB to linear sRGB."""
    def convert(value: float) -> float:
        magnitude = math.fabs(value)

        if magnitude <= 0.04045:
            return value / 12.92

        return math.copysign(math.pow((magnitude + 0.055) / 1.055, 2.4), value)

    return convert(r), convert(g), convert(b)


def linear_srgb_to_srgb(r: float, g: float, b: float) -> FloatCoordinateSpec:
    """Convert the given color from linear sRGB to sRGB."""
    def convert(value: float) -> float:
        magnitude = math.fabs(value)

        if magnitude <= 0.0031308:
            return value * 12.92

        return math.copysign(math.pow(magnitude, 1/2.4) * 1.055 - 0.055, value)

    return convert(r), convert(g), convert(b)


def linear_srgb_to_xyz(r: float, g: float, b: float) -> FloatCoordinateSpec:
    """Convert the given color from linear sRGB to XYZ."""
    return _multiply(_LINEAR_SRGB_TO_XYZ, (r, g, b))


# --------------------------------------------------------------------------------------
# XYZ


def xyz_to_linear_srgb(X: float, Y: float, Z: float) -> FloatCoordinateSpec:
    """Convert the given color from XYZ to linear sRGB."""
    return _multiply(_XYZ_TO_LINEAR_SRGB, (X, Y, Z))


def xyz_to_oklab(X: float, Y: float, Z: float) -> FloatCoordinateSpec:
    """Convert the given color from XYZ to Oklab."""
    LMS = _multiply(_XYZ_TO_LMS, (X, Y, Z))
    LMSg = cast(FloatCoordinateSpec, tuple(map(math.cbrt, LMS)))
    return _multiply(_LMS_TO_OKLAB, LMSg)


# --------------------------------------------------------------------------------------
# Oklab and Oklch
# See https://github.com/color-js/color.js/blob/a77e080a070039c534dda3965a769675aac5f75e/src/spaces/oklch.js


def oklab_to_xyz(L: float, a: float, b: float) -> FloatCoordinateSpec:
    """Convert the given color from Oklab to XYZ."""
    LMSg = _multiply(_OKLAB_TO_LMS, (L, a, b))
    LMS = cast(FloatCoordinateSpec, tuple(map(lambda c: math.pow(c, 3), LMSg)))
    return _multiply(_LMS_TO_XYZ, LMS)


def oklab_to_oklch(L: float, a: float, b: float) -> FloatCoordinateSpec:
    """
    Convert the given color from Oklab to Oklch. Achromatic colors have a
    not-a-number hue.
    """
    ε = 0.0002

    if math.fabs(a) < ε and math.fabs(b) < ε:
        h = math.nan
    else:
        h = math.atan2(b, a) * 180 / math.pi

    return L, math.sqrt(math.pow(a, 2) + math.pow(b, 2)), math.fmod(h + 360, 360)


def oklch_to_oklab(L: float, C: float, h: float) -> FloatCoordinateSpec:
    """Convert the given color from Oklch to Oklab."""
    if math.isnan(h):
        a = b = 0.0
    else:
        a = C * math.cos(h * math.pi / 180)
        b = C * math.sin(h * math.pi / 180)

    return L, a, b


# --------------------------------------------------------------------------------------
# Hex Colors


def srgb_to_oklch(r: float, g: float, b: float) -> FloatCoordinateSpec:
    """Convert the given color from sRGB to Oklch."""
    return oklab_to_oklch(*xyz_to_oklab(*linear_srgb_to_xyz(
        *srgb_to_linear_srgb(r, g, b)
    )))


def oklch_to_srgb(L: float, C: float, h: float) -> FloatCoordinateSpec:
    """
    Convert the given color from Oklch to sRGB. The result may be out of gamut
    for sRGB.
    """
    return linear_srgb_to_srgb(*xyz_to_linear_srgb(*oklab_to_xyz(
        *oklch_to_oklab(L, C, h)
    )))


def hex_to_oklch(value: str) -> None | FloatCoordinateSpec:
    """
    Convert the hex color to Oklch. The result is ``None`` if the string is
    not a valid hex color.
    """
    if normalize_hex(value) is None:
        return None
    return srgb_to_oklch(*rgb256_to_srgb(*hex_to_rgb256(value)))


def oklch_to_hex(L: float, C: float, h: float) -> str:
    """
    Convert the Oklch color to a normalized hex color. Lightness is clipped to
    the unit range first. The resulting sRGB color is then clipped to its gamut
    and rounded to 24-bit RGB. Hence, the result may differ noticeably from an
    out-of-gamut original.
    """
    L, C, h = OKLCH.clip(L, C, h)
    return rgb256_to_hex(*srgb_to_rgb256(*oklch_to_srgb(L, C, h)))
