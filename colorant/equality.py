"""
Equality of colors.

The 8-bit shapes store quantized channels and hence compare exactly. The HSL
shapes store floating point coordinates produced by parsing or by conversion,
which complicates equality in three ways:

 1. Conversion between RGB and HSL accrues a little floating point error.
 2. Hues outside of 0 to 360 still denote the same angle, only with additional
    rotations.
 3. Python requires that two equal instances also have the same hash.

Testing whether two coordinates differ by less than some epsilon does not
yield a usable hash. Instead, this module normalizes coordinates to a canonical
representation that serves for both hashing and equality testing.
"""
import math


PRECISION = 14
"""
The default precision for rounding coordinates during normalization.
"""


def normalize(
    coordinates: tuple[float, ...],
    *,
    angular_index: int = -1,
    integral: bool = False,
    precision: int = PRECISION,
) -> tuple[None | float, ...]:
    """
    Normalize the coordinates.

    Args:
        coordinates: are the color's components.
        angular_index: is the index of the hue, if there is one.
        integral: indicates that the coordinates are multiples of 1/255.
        precision: is the number of decimals to round to.
    Returns:
        The normalized coordinates.

    This function replaces not-a-numbers with ``None``, which equals itself. It
    maps quantized coordinates back onto their byte values. It maps the hue to
    0–360 and rounds it to two decimal digits less than precision, because
    degrees are two orders of magnitude larger than normal coordinates. It
    rounds all other coordinates to as many decimal digits as precision.
    """
    result: list[None | float] = []

    for index, value in enumerate(coordinates):
        if math.isnan(value):
            result.append(None)
            continue

        if integral:
            result.append(round(value * 255))
            continue

        if index == angular_index:
            value = value % 360
            effective_precision = precision - 2
        else:
            effective_precision = precision

        result.append(round(value, effective_precision))

    return tuple(result)
