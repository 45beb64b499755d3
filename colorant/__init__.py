__all__ = (
    # Parse color descriptions
    'parse',
    'colorant',
    'color',
    'coerce',
    # The color shapes
    'Colorant',
    'Rgb',
    'Rgba',
    'Hsl',
    'Hsla',
    # Errors
    'ColorParseError',
    'UnknownColorFormat',
    'UnknownColorName',
    'InvalidNumber',
    'InvalidHueFormat',
    'InvalidSaturationLightnessFormat',
    'UnsupportedTargetType',
)

from .api import (
    parse,
    colorant,
    color,
    coerce,
)

from .errors import (
    ColorParseError,
    UnknownColorFormat,
    UnknownColorName,
    InvalidNumber,
    InvalidHueFormat,
    InvalidSaturationLightnessFormat,
    UnsupportedTargetType,
)

from .shapes import (
    Colorant,
    Rgb,
    Rgba,
    Hsl,
    Hsla,
)
