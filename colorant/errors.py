"""Exceptions raised while parsing color descriptions."""
from typing import Any


class ColorParseError(ValueError):
    """
    Base class for all errors raised by the color parser.

    Attributes:
        description: the complete color description being parsed, if known

    Deriving from ``ValueError`` keeps code working that treats any malformed
    color as a bad value.
    """

    def __init__(self, message: str, *, description: None | str = None) -> None:
        self.description = description
        super().__init__(message)


class UnknownColorFormat(ColorParseError):
    """
    Exception raised when a description matches none of the supported syntaxes
    and names no known color.
    """

    def __init__(self, description: str, message: None | str = None) -> None:
        message = message or f'"{description}" is not a recognized color format'
        super().__init__(message, description=description)


class UnknownColorName(UnknownColorFormat):
    """Exception raised when a bare word is not in the color name table."""

    def __init__(self, description: str, message: None | str = None) -> None:
        message = message or f'"{description}" is not a known color name'
        super().__init__(description, message)


class _FieldError(ColorParseError):
    # A single numeric field inside a color function is malformed
    template = '"{0}" is a malformed field'

    def __init__(
        self,
        field: str,
        message: None | str = None,
        *,
        description: None | str = None,
    ) -> None:
        self.field = field
        message = message or self.template.format(field)
        if description is not None:
            message = f'{message} in color "{description}"'
        super().__init__(message, description=description)

    def within(self, description: str) -> '_FieldError':
        """Create a copy of this error that names the complete description."""
        return type(self)(self.field, description=description)


class InvalidNumber(_FieldError):
    """Exception raised when a field's digits do not form the expected number."""

    template = '"{0}" is not a valid number'


class InvalidHueFormat(_FieldError):
    """Exception raised when a hue carries a percent sign."""

    template = 'hue "{0}" must not end in "%"'


class InvalidSaturationLightnessFormat(_FieldError):
    """Exception raised when a saturation or lightness lacks a percent sign."""

    template = 'saturation or lightness "{0}" must end in "%"'


class UnsupportedTargetType(ColorParseError):
    """
    Exception raised when a parsed color cannot be produced as the requested
    type, either because the type is no color type or because the conversion
    would lose information.
    """

    def __init__(
        self,
        target: Any,
        message: None | str = None,
        *,
        description: None | str = None,
    ) -> None:
        self.target = target
        name = getattr(target, '__name__', repr(target))
        message = message or f'{name} is not a supported color type'
        super().__init__(message, description=description)
