"""
The four color shapes produced by parsing:

  * ``Rgb`` has red, green, and blue channels between 0 and 1, quantized to
    8-bit precision
  * ``Rgba`` adds an alpha channel, also normal and quantized
  * ``Hsl`` has a hue in degrees plus saturation and lightness
  * ``Hsla`` adds an alpha channel

All four derive from ``Colorant``, which also serves as the generic target when
parsing, i.e., lets the syntax of a color description pick the shape. All
shapes are immutable.
"""
import dataclasses
from typing import Any, cast, ClassVar, Self, TypeVar

from .conversion import get_converter
from .equality import normalize
from .serde import parse_format_spec, stringify


def _quantize(channel: str, value: float) -> float:
    value = float(value)
    if not 0 <= value <= 1:
        raise ValueError(f'{channel} {value} is not between 0 and 1')
    return round(value * 255) / 255


C = TypeVar('C', bound='Colorant')


class Colorant:
    """
    A color of some shape.

    Attributes:
        tag: identifies the shape, i.e., ``rgb``, ``rgba``, ``hsl``, or
            ``hsla``
        integral: indicates that the channels are stored with 8-bit precision
        angular_index: is the index of the hue or -1 if there is none

    This class implements ``__hash__()`` and ``__eq__()`` so that colors *of
    the same shape* with sufficiently close coordinates are treated as equal.
    For 8-bit shapes, that means the same byte values. For the HSL shapes, it
    means equality after rounding to 14 significant digits, with hues taken
    modulo 360.
    """
    __slots__ = ()

    tag: ClassVar[str] = 'colorant'
    integral: ClassVar[bool] = False
    angular_index: ClassVar[int] = -1

    @property
    def coordinates(self) -> tuple[float, ...]:
        """Get this color's channels in declaration order."""
        return tuple(getattr(self, f.name) for f in dataclasses.fields(cast(Any, self)))

    @property
    def has_alpha(self) -> bool:
        """Flag for this color having an alpha channel."""
        return self.tag in ('rgba', 'hsla')

    # ----------------------------------------------------------------------------------
    # Hash and Equality

    def _normalized(self) -> tuple[None | float, ...]:
        return normalize(
            self.coordinates,
            angular_index=self.angular_index,
            integral=self.integral,
        )

    def __hash__(self) -> int:
        return hash((self.tag, self._normalized()))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Colorant) or self.tag != other.tag:
            return NotImplemented
        return self._normalized() == other._normalized()

    # ----------------------------------------------------------------------------------
    # Conversion to Other Shapes

    def to(self, target: type[C]) -> C:
        """
        Convert this color to the given shape. Converting to ``Colorant`` or
        to the color's own shape returns the color itself. Converting a
        translucent color to an opaque shape raises a ``ValueError``.
        """
        if target is Colorant or type(self) is target:
            return cast(C, self)
        converter = get_converter(self.tag, target.tag)
        return cast(Any, target)(*converter(*self.coordinates))

    # ----------------------------------------------------------------------------------
    # Serialization to Text

    def __format__(self, format_spec: str) -> str:
        fmt, precision = parse_format_spec(format_spec)
        return stringify(self.tag, self.coordinates, fmt, precision)

    def __str__(self) -> str:
        return stringify(self.tag, self.coordinates)


@dataclasses.dataclass(frozen=True, slots=True, eq=False)
class Rgb(Colorant):
    """
    An opaque RGB color with 8-bit channels.

    Channels are given as floating point numbers between 0 and 1, inclusive,
    and rounded to the nearest multiple of 1/255 upon creation. Values outside
    that range raise a ``ValueError``.
    """
    r: float
    g: float
    b: float

    tag: ClassVar[str] = 'rgb'
    integral: ClassVar[bool] = True

    def __post_init__(self) -> None:
        for name in ('r', 'g', 'b'):
            object.__setattr__(self, name, _quantize(name, getattr(self, name)))

    @classmethod
    def from_rgb256(cls, r: int, g: int, b: int) -> Self:
        """Create a new color from byte-sized channels."""
        return cls(r / 255, g / 255, b / 255)

    @property
    def rgb256(self) -> tuple[int, int, int]:
        """Get the channels as bytes."""
        return round(self.r * 255), round(self.g * 255), round(self.b * 255)


@dataclasses.dataclass(frozen=True, slots=True, eq=False)
class Rgba(Colorant):
    """
    An RGB color with 8-bit channels and 8-bit alpha. Like ``Rgb``, all
    channels including alpha must be between 0 and 1, inclusive.
    """
    r: float
    g: float
    b: float
    alpha: float

    tag: ClassVar[str] = 'rgba'
    integral: ClassVar[bool] = True

    def __post_init__(self) -> None:
        for name in ('r', 'g', 'b', 'alpha'):
            object.__setattr__(self, name, _quantize(name, getattr(self, name)))

    @classmethod
    def from_rgb256(cls, r: int, g: int, b: int, alpha: float = 1.0) -> Self:
        """Create a new color from byte-sized channels and a normal alpha."""
        return cls(r / 255, g / 255, b / 255, alpha)

    @property
    def rgb256(self) -> tuple[int, int, int]:
        """Get the color channels as bytes."""
        return round(self.r * 255), round(self.g * 255), round(self.b * 255)


@dataclasses.dataclass(frozen=True, slots=True, eq=False)
class Hsl(Colorant):
    """
    An opaque HSL color.

    The hue is in degrees and unbounded; saturation and lightness nominally are
    between 0 and 1. This class stores all three without clamping.
    """
    h: float
    s: float
    l: float

    tag: ClassVar[str] = 'hsl'
    angular_index: ClassVar[int] = 0

    def __post_init__(self) -> None:
        for name in ('h', 's', 'l'):
            object.__setattr__(self, name, float(getattr(self, name)))


@dataclasses.dataclass(frozen=True, slots=True, eq=False)
class Hsla(Colorant):
    """An HSL color with alpha. This class stores all channels without clamping."""
    h: float
    s: float
    l: float
    alpha: float

    tag: ClassVar[str] = 'hsla'
    angular_index: ClassVar[int] = 0

    def __post_init__(self) -> None:
        for name in ('h', 's', 'l', 'alpha'):
            object.__setattr__(self, name, float(getattr(self, name)))


SHAPES: dict[str, type[Colorant]] = {
    shape.tag: shape for shape in (Rgb, Rgba, Hsl, Hsla)
}
"""The concrete shapes by tag."""
