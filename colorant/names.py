"""
Support for named colors.

The table of color names ships as ``names.txt`` in the X11 ``rgb.txt`` format,
i.e., one color per line with three decimal byte values followed by the name.
Lines starting with an exclamation mark are comments. Names may contain spaces
and upper-case letters; they are folded to lower case without whitespace on
load, so that ``ghost white``, ``GhostWhite``, and ``ghostwhite`` all denote the
same entry. Replacing the data file with an upstream ``rgb.txt`` thus updates
the palette without touching any code.

The table is loaded on first use and never changes afterwards.
"""
from collections.abc import Iterable, Mapping
import importlib.resources
import logging
import threading
from types import MappingProxyType
from typing import cast, TypeAlias


logger = logging.getLogger(__name__)

DATA_FILE = 'names.txt'

NameTable: TypeAlias = Mapping[str, tuple[int, int, int]]


def fold(name: str) -> str:
    """Fold the color name into its lower-case, whitespace-free key."""
    return ''.join(name.split()).lower()


def read_table(lines: Iterable[str]) -> dict[str, tuple[int, int, int]]:
    """
    Read a table of color names from lines in ``rgb.txt`` format.

    Args:
        lines: are the lines of the table
    Returns:
        a dictionary mapping folded names to red, green, and blue byte values
    Raises:
        ValueError: if a line is malformed, has a component outside 0–255, or
            folds to the same name as an earlier line but has a different color

    Names that fold to the same key with the same color are merged silently.
    Upstream ``rgb.txt`` files list most colors under several spellings.
    """
    table: dict[str, tuple[int, int, int]] = {}

    for number, line in enumerate(lines, start=1):
        line = line.strip()
        if not line or line.startswith('!'):
            continue

        parts = line.split(maxsplit=3)
        if len(parts) != 4 or not all(p.isascii() and p.isdigit() for p in parts[:3]):
            raise ValueError(f'line {number} "{line}" is not "<red> <green> <blue> <name>"')

        color = cast(tuple[int, int, int], tuple(int(p) for p in parts[:3]))
        if not all(0 <= c <= 255 for c in color):
            raise ValueError(f'line {number} "{line}" has component outside 0–255')

        name = fold(parts[3])
        previous = table.setdefault(name, color)
        if previous != color:
            raise ValueError(
                f'line {number} redefines color "{name}" from {previous} to {color}'
            )

    return table


_table: None | NameTable = None
_table_lock = threading.Lock()

def load_table() -> NameTable:
    """
    Get the table of color names.

    The first invocation reads the bundled data file. Concurrent first
    invocations wait for the same load and all receive the same, read-only
    mapping.
    """
    global _table

    table = _table
    if table is not None:
        return table

    with _table_lock:
        if _table is None:
            pkg, _, _ = __name__.rpartition('.')
            source = importlib.resources.files(pkg).joinpath(DATA_FILE)
            with source.open('r', encoding='utf8') as file:
                _table = MappingProxyType(read_table(file))
            logger.debug('loaded %d color names from %s', len(_table), source)
        return _table


def lookup(name: str) -> None | tuple[int, int, int]:
    """
    Look up the color with the given name. This function folds the name before
    looking it up and returns ``None`` for unknown names.
    """
    return load_table().get(fold(name))
