"""Conversion between color shapes"""
from collections.abc import Callable
import itertools
import threading
from typing import cast, TypeAlias


ConverterSpec: TypeAlias = Callable[..., tuple[float, ...]]


def _clamp(value: float) -> float:
    return min(max(value, 0.0), 1.0)


def _check_opaque(alpha: float, source: str) -> None:
    if alpha != 1:
        raise ValueError(
            f'{source} color with alpha {alpha} has no opaque equivalent'
        )


# --------------------------------------------------------------------------------------
# RGB and HSL
# See https://www.w3.org/TR/css-color-3/#hsl-color


def rgb_to_hsl(r: float, g: float, b: float) -> tuple[float, float, float]:
    """
    Convert the given color from RGB to HSL. Achromatic colors, i.e., grays,
    have hue and saturation 0.
    """
    c_max = max(r, g, b)
    c_min = min(r, g, b)
    l = (c_max + c_min) / 2
    d = c_max - c_min

    if d == 0:
        return 0.0, 0.0, l

    s = d / (1 - abs(2 * l - 1))

    if c_max == r:
        h = (g - b) / d % 6
    elif c_max == g:
        h = (b - r) / d + 2
    else:
        h = (r - g) / d + 4

    return h * 60 % 360, s, l


def hsl_to_rgb(h: float, s: float, l: float) -> tuple[float, float, float]:
    """
    :bdg-warning:`Lossy conversion` Convert the given color from HSL to RGB.
    The hue wraps around at 360 degrees. Since RGB channels are normal, this
    function clamps them to 0–1, which loses information for saturation or
    lightness outside 0–1.
    """
    h = h % 360 / 360

    m2 = l * (s + 1) if l <= 0.5 else l + s - l * s
    m1 = l * 2 - m2

    def convert(h: float) -> float:
        h = h % 1
        if h * 6 < 1:
            return m1 + (m2 - m1) * h * 6
        if h * 2 < 1:
            return m2
        if h * 3 < 2:
            return m1 + (m2 - m1) * (2 / 3 - h) * 6
        return m1

    return (
        _clamp(convert(h + 1 / 3)),
        _clamp(convert(h)),
        _clamp(convert(h - 1 / 3)),
    )


# --------------------------------------------------------------------------------------
# Adding and dropping alpha


def rgb_to_rgba(r: float, g: float, b: float) -> tuple[float, float, float, float]:
    """Convert the given color from RGB to fully opaque RGBA."""
    return r, g, b, 1.0


def rgba_to_rgb(r: float, g: float, b: float, alpha: float) -> tuple[float, float, float]:
    """
    Convert the given color from RGBA to RGB. Only fully opaque colors can be
    converted; all others raise a ``ValueError``.
    """
    _check_opaque(alpha, 'RGBA')
    return r, g, b


def hsl_to_hsla(h: float, s: float, l: float) -> tuple[float, float, float, float]:
    """Convert the given color from HSL to fully opaque HSLA."""
    return h, s, l, 1.0


def hsla_to_hsl(h: float, s: float, l: float, alpha: float) -> tuple[float, float, float]:
    """
    Convert the given color from HSLA to HSL. Only fully opaque colors can be
    converted; all others raise a ``ValueError``.
    """
    _check_opaque(alpha, 'HSLA')
    return h, s, l


def rgba_to_hsla(
    r: float, g: float, b: float, alpha: float
) -> tuple[float, float, float, float]:
    """Convert the given color from RGBA to HSLA, preserving alpha."""
    return *rgb_to_hsl(r, g, b), alpha


def hsla_to_rgba(
    h: float, s: float, l: float, alpha: float
) -> tuple[float, float, float, float]:
    """
    :bdg-warning:`Lossy conversion` Convert the given color from HSLA to RGBA,
    preserving alpha.
    """
    return *hsl_to_rgb(h, s, l), alpha


# --------------------------------------------------------------------------------------
# Arbitrary Conversions


def _collect_conversions(
    mod: dict[str, object],
    conversions: dict[str, dict[str, ConverterSpec]]
) -> None:
    for name, value in mod.items():
        if not name.startswith('_') and '_to_' in name and callable(value):
            source, _, target = name.partition('_to_')
            targets = conversions.setdefault(source, {})
            if target in targets:
                raise ValueError(f'duplicate conversion from {source} to {target}')
            targets[target] = cast(ConverterSpec, value)


# Each shape's parent and distance from the root. Conversions between RGBA and
# HSLA exist as functions and hence never take this route, which drops alpha.
_BASE_TREE = {
    'rgb': (None, 0),
    'rgba': ('rgb', 1),
    'hsl': ('rgb', 1),
    'hsla': ('hsl', 2),
}

def _elaborate_route(source: str, target: str) -> tuple[str, ...]:
    """Elaborate the route from the source to the target color shape."""
    if source not in _BASE_TREE:
        raise ValueError(f'{source} is not a valid color shape')
    if target not in _BASE_TREE:
        raise ValueError(f'{target} is not a valid color shape')

    # Trace paths from source and target towards root of base tree
    source_path: list[str] = [source]
    target_path: list[str] = [target]

    def step(path: list[str]) -> bool:
        tag, _ = _BASE_TREE[path[-1]]
        if tag is not None:
            path.append(tag)
        return tag is None

    # Sync up traces, so that both have same distance from root
    _, source_dist = _BASE_TREE[source]
    _, target_dist = _BASE_TREE[target]

    path = source_path if source_dist >= target_dist else target_path
    for _ in range(abs(source_dist - target_dist)):
        done = step(path)
        assert not done

    # Keep tracing in lock step until paths share last node
    while source_path[-1] != target_path[-1]:
        done = step(source_path)
        done |= step(target_path)
        assert not done

    # Assemble complete path
    target_path.pop()
    target_path.reverse()
    return tuple(itertools.chain(source_path, target_path))


def _pass_through(*coordinates: float) -> tuple[float, ...]:
    """Pass through the coordinates."""
    return tuple(coordinates)


def _create_converter(conversions: tuple[ConverterSpec, ...]) -> ConverterSpec:
    """
    Instantiate a closure that applies the given conversions. Doing so in a
    dedicated top-level function keeps the closure environment minimal.
    """
    def converter(*coordinates: float) -> tuple[float, ...]:
        value = coordinates
        for fn in conversions:
            value = fn(*value)
        return value
    return converter


_converter_cache: dict[str, dict[str, ConverterSpec]] = {}
_converter_lock = threading.Lock()

def get_converter(source: str, target: str) -> ConverterSpec:
    """
    Instantiate a function that converts coordinates from the source color
    shape to the target color shape.

    This function factory caches converters to avoid re-instantiating the same
    converter over and over again. Each converter's name is computed as
    ``f"{source}_to_{target}"``. Converters that would drop a translucent
    alpha raise a ``ValueError`` when invoked.
    """
    if source not in _BASE_TREE:
        raise ValueError(f'{source} is not a valid color shape')
    if target not in _BASE_TREE:
        raise ValueError(f'{target} is not a valid color shape')

    # Handle trivial case
    if source == target:
        return _pass_through

    with _converter_lock:
        # Initialize converter cache with basic conversions
        if not _converter_cache:
            _collect_conversions(globals(), _converter_cache)

        # Check whether converter already exists
        maybe_converter = _converter_cache[source].get(target)
        if maybe_converter is not None:
            return maybe_converter

        # Turn list of nodes into list of functions into converter function
        route = _elaborate_route(source, target)
        conversions = tuple(
            _converter_cache[t1][t2] for t1, t2 in itertools.pairwise(route)
        )

        # Annotate converter for easy debugability
        converter = _create_converter(conversions)
        name = f'{source}_to_{target}'
        setattr(converter, '__name__', name)
        setattr(converter, '__qualname__', name)
        setattr(converter, 'route', route)
        setattr(converter, 'conversions', conversions)

        _converter_cache[source][target] = converter
        return converter
