"""
Support for validating, normalizing, and formatting hexadecimal color values.

Palette colors are written as three or six hexadecimal digits, optionally
prefixed with a hash ``#``. Internally, this package only ever uses the
normalized form: six uppercase digits without prefix. The lenient functions in
this module return ``None`` for malformed input and leave it to the caller to
decide how to tell the user. Only :func:`hex_to_rgb256` raises.
"""
import re
from typing import cast, Literal, NoReturn, overload

from .spec import IntCoordinateSpec


_HEX_COLOR = re.compile(r'#?([0-9A-Fa-f]{3}|[0-9A-Fa-f]{6})')


@overload
def _check(
    is_valid: Literal[False], value: object, deficiency: str = ...
) -> NoReturn:
    ...
@overload
def _check(
    is_valid: bool, value: object, deficiency: str = ...
) -> None | NoReturn:
    ...
def _check(
    is_valid: bool, value: object, deficiency: str = 'is malformed'
) -> None | NoReturn:
    if not is_valid:
        raise ValueError(f'hex color "{value}" {deficiency}')
    return


def is_valid_hex(value: str) -> bool:
    """
    Determine whether the string is a hex color with 3 or 6 digits and an
    optional ``#`` prefix.
    """
    return isinstance(value, str) and _HEX_COLOR.fullmatch(value) is not None


def normalize_hex(value: str) -> None | str:
    """
    Normalize the hex color to six uppercase digits without prefix.

    Three-digit colors are expanded by doubling each digit, so that ``#abc``
    becomes ``AABBCC``. The result is ``None`` if the string is not a valid hex
    color.
    """
    if not is_valid_hex(value):
        return None

    digits = value[1:] if value.startswith('#') else value
    if len(digits) == 3:
        digits = ''.join(f'{d}{d}' for d in digits)
    return digits.upper()


def parse_hex_input(value: str) -> None | str:
    """
    Parse hex color input from a user. This is the same as
    :func:`normalize_hex` but reads better at call sites validating input.
    """
    return normalize_hex(value)


def format_hex(value: str) -> str:
    """Format the hex color for display, i.e., uppercase and with ``#``."""
    value = value.upper()
    return value if value.startswith('#') else f'#{value}'


def hex_to_rgb256(value: str) -> IntCoordinateSpec:
    """
    Convert the hex color into 24-bit RGB coordinates. Unlike the other
    functions in this module, this function raises a ``ValueError`` for
    malformed input.
    """
    digits = normalize_hex(value)
    _check(digits is not None, value, 'does not have 3 or 6 hexadecimal digits')
    assert digits is not None
    return cast(
        IntCoordinateSpec,
        tuple(int(digits[n:n+2], base=16) for n in range(0, 6, 2)),
    )


def rgb256_to_hex(r: int, g: int, b: int) -> str:
    """Convert the 24-bit RGB coordinates into a normalized hex color."""
    for c in (r, g, b):
        _check(0 <= c <= 255, f'{r}, {g}, {b}', 'has component out of range')
    return ''.join(f'{c:02X}' for c in (r, g, b))
