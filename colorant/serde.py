"""Support for parsing and serializing color descriptions"""
from collections.abc import Callable
import enum
import logging
import re
from typing import TypeAlias

from . import names
from .errors import (
    InvalidHueFormat,
    InvalidNumber,
    InvalidSaturationLightnessFormat,
    UnknownColorFormat,
    UnknownColorName,
    _FieldError,
)


logger = logging.getLogger(__name__)

TaggedCoordinates: TypeAlias = tuple[str, tuple[float, ...]]


# --------------------------------------------------------------------------------------
# Field Decoders


_HEX_DIGITS = frozenset('0123456789abcdefABCDEF')
_DECIMAL = re.compile(r'[0-9]+(?:[.][0-9]*)?')


def _check_digits(digits: str, field: str) -> None:
    if not digits or not digits.isascii() or not digits.isdigit():
        raise InvalidNumber(field)


def _integer(digits: str, field: str) -> int:
    _check_digits(digits, field)
    try:
        return int(digits, base=10)
    except ValueError as x:
        # More digits than the interpreter converts
        raise InvalidNumber(field) from x


def _clamped_integer(digits: str, field: str, limit: int) -> int:
    _check_digits(digits, field)
    # Numbers with more significant digits than the limit exceed it
    digits = digits.lstrip('0') or '0'
    if len(digits) > len(str(limit)):
        return limit
    return min(int(digits, base=10), limit)


def _float(value: int, field: str) -> float:
    try:
        return float(value)
    except OverflowError as x:
        raise InvalidNumber(field) from x


def _hex(digits: str, length: int) -> int:
    if len(digits) != length or not all(d in _HEX_DIGITS for d in digits):
        raise InvalidNumber(digits)
    return int(digits, base=16)


def parse_hex_pair(digits: str) -> float:
    """Parse two hexadecimal digits into a channel value between 0 and 1."""
    return _hex(digits, 2) / 255


def parse_hex_nibble(digit: str) -> float:
    """
    Parse one hexadecimal digit into a channel value between 0 and 1. Since the
    digit has only four bits, it is scaled by 15, not 255.
    """
    return _hex(digit, 1) / 15


def parse_rgb(field: str) -> float:
    """
    Parse a red, green, or blue field of an ``rgb()`` or ``rgba()`` function.
    The field is either a percentage or a byte value. Out-of-range values are
    clamped to 0–1, no matter how many digits they have.
    """
    if field.endswith('%'):
        return _clamped_integer(field[:-1], field, 100) / 100
    return _clamped_integer(field, field, 255) / 255


def parse_hue(field: str) -> float:
    """
    Parse the hue field of an ``hsl()`` or ``hsla()`` function. The hue is an
    integral number of degrees without percent sign. It is not limited to 360,
    but must fit into a float.
    """
    if field.endswith('%'):
        raise InvalidHueFormat(field)
    return _float(_integer(field, field), field)


def parse_saturation_lightness(field: str) -> float:
    """
    Parse the saturation or lightness field of an ``hsl()`` or ``hsla()``
    function. The field must be an integral percentage. It is not clamped.
    """
    if not field.endswith('%'):
        raise InvalidSaturationLightnessFormat(field)
    return _float(_integer(field[:-1], field), field) / 100


def parse_alpha(field: str) -> float:
    """
    Parse the alpha field of an ``rgba()`` or ``hsla()`` function. The field is
    either an integral percentage or a decimal number. It is not clamped.
    """
    if field.endswith('%'):
        return _float(_integer(field[:-1], field), field) / 100
    if not _DECIMAL.fullmatch(field):
        raise InvalidNumber(field)
    return float(field)


# --------------------------------------------------------------------------------------
# Format Matcher


class Syntax(enum.Enum):
    """
    The syntax of a color description, in the order the matcher tries them.

    Attributes:
        HEX6: for ``#RRGGBB`` and ``0xRRGGBB``
        HEX3: for ``#RGB`` and ``0xRGB``
        RGB: for ``rgb(r,g,b)``
        HSL: for ``hsl(h,s,l)``
        RGBA: for ``rgba(r,g,b,a)``
        HSLA: for ``hsla(h,s,l,a)``
        TRANSPARENT: for ``transparent``
        NAME: for a bare word, which may or may not name a color
    """
    HEX6 = 'hex6'
    HEX3 = 'hex3'
    RGB = 'rgb'
    HSL = 'hsl'
    RGBA = 'rgba'
    HSLA = 'hsla'
    TRANSPARENT = 'transparent'
    NAME = 'name'


_FIELD = r'([0-9]+%?)'
_ALPHA = r'([0-9]+(?:[.][0-9]*)?%?)'

_PATTERNS = (
    (Syntax.HEX6, re.compile(r'(?:#|0x)([0-9a-f]{2})([0-9a-f]{2})([0-9a-f]{2})', re.I)),
    (Syntax.HEX3, re.compile(r'(?:#|0x)([0-9a-f])([0-9a-f])([0-9a-f])', re.I)),
    (Syntax.RGB, re.compile(rf'rgb\({_FIELD},{_FIELD},{_FIELD}\)', re.I)),
    (Syntax.HSL, re.compile(rf'hsl\({_FIELD},{_FIELD},{_FIELD}\)', re.I)),
    (Syntax.RGBA, re.compile(rf'rgba\({_FIELD},{_FIELD},{_FIELD},{_ALPHA}\)', re.I)),
    (Syntax.HSLA, re.compile(rf'hsla\({_FIELD},{_FIELD},{_FIELD},{_ALPHA}\)', re.I)),
)

_NAME = re.compile(r'[a-z0-9]+')


def normalize(description: str) -> str:
    """Remove all whitespace from the color description."""
    return ''.join(description.split())


def match_syntax(text: str) -> None | tuple[Syntax, tuple[str, ...]]:
    """
    Determine the syntax of the normalized color description.

    Args:
        text: is the color description without whitespace
    Returns:
        the first matching syntax and its fields, or ``None`` if no syntax
        matches. Names are returned folded to lower case, whether or not the
        color name table contains them.

    This function only checks the structure of the text. The fields are still
    strings and may violate the rules of their syntax.
    """
    for syntax, pattern in _PATTERNS:
        match = pattern.fullmatch(text)
        if match is not None:
            return syntax, match.groups()

    text = text.lower()
    if text == 'transparent':
        return Syntax.TRANSPARENT, ()
    if _NAME.fullmatch(text):
        return Syntax.NAME, (text,)
    return None


def _decode_name(name: str) -> TaggedCoordinates:
    color = names.lookup(name)
    if color is None:
        raise UnknownColorName(name)
    return 'rgb', tuple(c / 255 for c in color)


_DECODERS: dict[Syntax, Callable[[tuple[str, ...]], TaggedCoordinates]] = {
    Syntax.HEX6: lambda fields: ('rgb', tuple(parse_hex_pair(f) for f in fields)),
    Syntax.HEX3: lambda fields: ('rgb', tuple(parse_hex_nibble(f) for f in fields)),
    Syntax.RGB: lambda fields: ('rgb', tuple(parse_rgb(f) for f in fields)),
    Syntax.HSL: lambda fields: ('hsl', (
        parse_hue(fields[0]),
        parse_saturation_lightness(fields[1]),
        parse_saturation_lightness(fields[2]),
    )),
    Syntax.RGBA: lambda fields: ('rgba', (
        *(parse_rgb(f) for f in fields[:3]),
        parse_alpha(fields[3]),
    )),
    Syntax.HSLA: lambda fields: ('hsla', (
        parse_hue(fields[0]),
        parse_saturation_lightness(fields[1]),
        parse_saturation_lightness(fields[2]),
        parse_alpha(fields[3]),
    )),
    Syntax.TRANSPARENT: lambda _: ('rgba', (0.0, 0.0, 0.0, 0.0)),
    Syntax.NAME: lambda fields: _decode_name(fields[0]),
}


def parse_description(description: str) -> TaggedCoordinates:
    """
    Parse the color description into the tag of its natural shape and the
    coordinates for that shape.

    Raises:
        UnknownColorName: if the description is a bare word that names no color
        UnknownColorFormat: if the description has no recognized syntax
        InvalidNumber: if a field is not a well-formed number
        InvalidHueFormat: if a hue ends in a percent sign
        InvalidSaturationLightnessFormat: if a saturation or lightness does not
            end in a percent sign
    """
    text = normalize(description)
    match = match_syntax(text)
    if match is None:
        raise UnknownColorFormat(description)

    syntax, fields = match
    try:
        tag, coordinates = _DECODERS[syntax](fields)
    except _FieldError as x:
        raise x.within(description) from x
    except UnknownColorName as x:
        raise UnknownColorName(description) from x

    logger.debug('parsed "%s" as %s', description, syntax.name)
    return tag, coordinates


# --------------------------------------------------------------------------------------
# Serialization


class Format(enum.Enum):
    """
    The color format

    Attributes:
        FUNCTION: for ``<tag>(<coordinates>)`` notation
        HEX: for ``#<hex>`` notation
        CSS: for ``rgb()``, ``rgba()``, ``hsl()``, and ``hsla()`` notation
            with bytes and percentages
    """
    FUNCTION = 'f'
    HEX = 'h'
    CSS = 's'


def parse_format_spec(spec: str) -> tuple[Format, int]:
    """
    Parse the color format specifier into the format and precision.

    Args:
        spec: selects the desired output format and precision
    Returns:
        the format and maximum precision for floating point numbers, which
        default to `Format.FUNCTION` and 5, respectively

    A valid format specifier comprises two parts, both of which are optional:

     1. The first part, if present specifies the precision and is written as a
        period followed by one or two decimal digits, e.g., ``.3``.
     2. The second part, if present, specifies the format:

          * ``f`` for function notation, which uses the tag as function name
            and the comma-separated coordinates as arguments
          * ``h`` for hexadecimal notation prefixed with a hash ``#``
          * ``s`` for CSS notation, which writes RGB channels as bytes and
            saturation and lightness as percentages

    Note that ``h`` only works for the 8-bit ``rgb`` and ``rgba`` shapes.
    """
    format = Format.FUNCTION
    precision = 5

    s = spec
    if s:
        f = s[-1]
        if f in ('f', 'h', 's'):
            format = Format(f)
            s = s[:-1]
    if s.startswith('.') and s[1:].isdigit() and len(s) <= 3:
        precision = int(s[1:])
        s = ''
    if s:
        raise ValueError(f'malformed color format "{spec}"')

    return format, precision


def _byte(value: float) -> int:
    return round(value * 255)


def _percent(value: float) -> str:
    return f'{round(value * 100)}%'


def stringify(
    tag: str,
    coordinates: tuple[float, ...],
    format: Format = Format.FUNCTION,
    precision: int = 5
) -> str:
    """
    Format the tagged coordinates in the specified format and with the specified
    precision.

    :bdg-warning:`Lossy conversion` CSS notation writes hues and percentages as
    integers. That is exact for parsed colors but rounds colors produced by
    conversion.
    """
    if format is Format.HEX:
        if tag not in ('rgb', 'rgba'):
            raise ValueError(f'{tag} has no hexadecimal serialization')
        return '#' + ''.join(f'{_byte(c):02x}' for c in coordinates)

    if format is Format.FUNCTION:
        coordinate_text = ', '.join(f'{c:.{precision}}' for c in coordinates)
        return f'{tag}({coordinate_text})'

    if tag in ('rgb', 'rgba'):
        fields = [f'{_byte(c)}' for c in coordinates[:3]]
    elif tag in ('hsl', 'hsla'):
        fields = [f'{round(coordinates[0])}', *map(_percent, coordinates[1:3])]
    else:
        raise ValueError(f'{tag} has no CSS serialization')

    if len(coordinates) == 4:
        fields.append(f'{coordinates[3]:.{precision}}')
    return f'{tag}({", ".join(fields)})'
