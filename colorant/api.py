"""The parsing API: type-directed parsing, checked literals, and coercion."""
import functools
from typing import Any, cast, TypeVar
import warnings

from .errors import InvalidNumber, UnsupportedTargetType
from .serde import parse_description
from .shapes import Colorant, SHAPES


C = TypeVar('C', bound=Colorant)

LITERAL_CACHE_SIZE = 256
"""The number of most recently used color literals kept by ``colorant()``."""


def _check_target(target: object) -> None:
    if not isinstance(target, type) or not issubclass(target, Colorant):
        raise UnsupportedTargetType(target)


def coerce(color: Colorant, target: type[C]) -> C:
    """
    Coerce the color to the target type.

    If the target is ``Colorant`` or the color's own shape, the color is
    returned as is. Otherwise, the color is converted. Conversions between RGB
    and HSL as well as those adding alpha always succeed. Conversions dropping
    alpha only succeed for fully opaque colors.

    Raises:
        UnsupportedTargetType: if the target is not a color type or the color
            cannot be converted without loss of alpha
    """
    _check_target(target)
    try:
        return color.to(target)
    except ValueError as x:
        raise UnsupportedTargetType(
            target, f'{color} cannot be converted to {target.__name__}: {x}'
        ) from x


def parse(target: type[C], description: str | Colorant) -> C:
    """
    Parse a color description.

    This function parses a subset of CSS color syntax: ``#RGB`` and ``#RRGGBB``
    (also with ``0x`` instead of ``#``), ``rgb()``, ``rgba()``, ``hsl()``,
    ``hsla()``, ``transparent``, and the X11 color names, which differ from
    W3C color names for a few colors. It does not support ``currentColor``.
    All whitespace is ignored and names are case-insensitive.

    Args:
        target: is ``Colorant`` to let the description determine the shape, or
            one of ``Rgb``, ``Rgba``, ``Hsl``, and ``Hsla`` to convert the
            parsed color into that shape
        description: is the color description. An existing color is coerced
            to the target without parsing.
    Returns:
        an ``Rgb`` color for hexadecimal notation, ``rgb()``, and names; an
        ``Rgba`` color for ``rgba()`` and ``transparent``; an ``Hsl`` color for
        ``hsl()``; an ``Hsla`` color for ``hsla()``; or a color of the target
        shape.
    Raises:
        UnknownColorFormat: if the description has no recognized syntax
        UnknownColorName: if the description is a word that names no color
        InvalidNumber: if a field is not a well-formed number or its value
            is out of range for the color's shape
        InvalidHueFormat: if a hue ends in a percent sign
        InvalidSaturationLightnessFormat: if a saturation or lightness lacks
            a percent sign
        UnsupportedTargetType: if the parsed color cannot be coerced to the
            target
    """
    _check_target(target)

    if isinstance(description, Colorant):
        return coerce(description, target)

    tag, coordinates = parse_description(description)
    try:
        color = cast(Any, SHAPES[tag])(*coordinates)
    except ValueError as x:
        # Only alpha can be out of range for its shape at this point
        raise InvalidNumber(
            f'{coordinates[-1]}', str(x), description=description
        ) from x

    return coerce(color, target)


@functools.lru_cache(maxsize=LITERAL_CACHE_SIZE)
def colorant(description: str) -> Colorant:
    """
    Parse a color literal.

    This function is meant for color constants at module scope, where a
    malformed literal fails when the module is imported rather than when the
    color is first used. Its results are cached, so that repeated uses of the
    same literal return the same color object. The cache only holds the most
    recently used literals, so that runtime strings do not accumulate.
    """
    return parse(Colorant, description)


def color(description: str) -> Colorant:
    """
    Parse a color description.

    .. deprecated::
        Use ``colorant(description)`` or ``parse(Colorant, description)``
        instead.
    """
    warnings.warn(
        f'color("{description}") is deprecated, use colorant("{description}") '
        f'or parse(Colorant, "{description}")',
        DeprecationWarning,
        stacklevel=2,
    )
    return parse(Colorant, description)
