"""
Palette - Ordered set of up to 256 hex colors.

Order matters: a color's position is its swatch index and drives positional
palette swaps (see ``create_swap_map``). Palettes are not reordered in place;
build a new Palette from the reordered color list instead.
"""

import asyncio
import logging
from collections.abc import Iterable, Iterator, Mapping, Sequence
from pathlib import Path
from typing import Any, Union

from spritecreator.codecs.ase import parse_ase
from spritecreator.config import settings
from spritecreator.exceptions import ASEFormatError, CapacityError, EmptyPaletteError
from spritecreator.validation import MAX_PALETTE_COLORS, validate_hex_color

logger = logging.getLogger(__name__)

ColorSource = Union['Palette', Iterable[str]]


class Palette:
    """
    Ordered, duplicate free color collection.

    Example:
        >>> palette = Palette(['#000000', '#ffffff'])
        >>> palette.add_color('#ff0000')
        >>> palette.index_of('#ff0000')
        2
    """

    def __init__(self, colors: Iterable[str] = ()):
        """
        Create a palette.

        Repeated colors keep their first position only.

        :param colors: Initial colors, at most 256
        :raises InvalidColorError: If a color is not a hex color
        :raises CapacityError: If more than 256 colors are given
        """
        colors = list(colors)
        for color in colors:
            validate_hex_color(color)
        if len(colors) > MAX_PALETTE_COLORS:
            raise CapacityError(
                f'Palette cannot contain more than {MAX_PALETTE_COLORS} colors'
            )
        self._colors = list(dict.fromkeys(colors))

    def get_colors(self) -> list[str]:
        """Get a copy of the colors in palette order."""
        return list(self._colors)

    def size(self) -> int:
        return len(self._colors)

    def add_color(self, color: str) -> None:
        """
        Append a color. Adding a color that is already present does nothing.

        :raises InvalidColorError: If color is not a hex color
        :raises CapacityError: If the palette already holds 256 colors
        """
        validate_hex_color(color)
        if len(self._colors) >= MAX_PALETTE_COLORS:
            raise CapacityError(
                f'Cannot add color: palette already contains {MAX_PALETTE_COLORS} colors'
            )
        if color not in self._colors:
            self._colors.append(color)

    def remove_color(self, color: str) -> None:
        """Remove a color. Removing a missing color does nothing."""
        if color in self._colors:
            self._colors.remove(color)

    def index_of(self, color: str) -> int:
        """Get the position of a color, or -1 if it is not in the palette."""
        try:
            return self._colors.index(color)
        except ValueError:
            return -1

    def has_color(self, color: str) -> bool:
        return color in self._colors

    def apply_swap(self, pixels: Iterable[str], swap_map: Mapping[str, str]) -> list[str]:
        """Apply a swap map to pixel data. See ``apply_swap``."""
        return apply_swap(pixels, swap_map)

    # --- Serialization ---

    def to_dict(self) -> dict[str, Any]:
        return {'colors': self.get_colors()}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> 'Palette':
        return cls(data['colors'])

    @classmethod
    def from_ase(cls, buffer: Union[bytes, bytearray, memoryview]) -> 'Palette':
        """
        Create a palette from the RGB swatches of an ASE file.

        :param buffer: Raw ASE file content
        :raises ASEFormatError: If the buffer is not a valid ASE file
        :raises CapacityError: If the file holds more than 256 colors
        """
        return cls(parse_ase(buffer))

    def __len__(self) -> int:
        return len(self._colors)

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._colors))

    def __contains__(self, color: object) -> bool:
        return color in self._colors

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Palette):
            return NotImplemented
        return self._colors == other._colors

    def __repr__(self) -> str:
        return f'Palette({self._colors!r})'


def _color_list(source: ColorSource) -> Sequence[str]:
    if isinstance(source, Palette):
        return source.get_colors()
    return list(source)


def create_swap_map(source: ColorSource, target: ColorSource) -> dict[str, str]:
    """
    Map every source color to the target color at the same position.

    When the target is shorter, its last color is used for all remaining
    source colors.

    Example:
        >>> create_swap_map(['#000000', '#ffffff'], ['#333333'])
        {'#000000': '#333333', '#ffffff': '#333333'}

    :param source: Original palette or color list
    :param target: Replacement palette or color list
    :raises EmptyPaletteError: If target has no colors
    """
    source_colors = _color_list(source)
    target_colors = _color_list(target)
    if not target_colors:
        raise EmptyPaletteError('Cannot create swap map: target palette is empty')

    last = len(target_colors) - 1
    return {
        color: target_colors[min(index, last)]
        for index, color in enumerate(source_colors)
    }


def apply_swap(pixels: Iterable[str], swap_map: Mapping[str, str]) -> list[str]:
    """Replace each mapped color; colors missing from swap_map pass through."""
    return [swap_map.get(color, color) for color in pixels]


async def import_ase_file(path: Union[str, Path]) -> Palette:
    """
    Read an ASE file and build a palette from its RGB swatches.

    The file is read in a worker thread so the event loop is not blocked.

    :param path: Path of the .ase file
    :raises ASEFormatError: If the file is too large or not a valid ASE file
    """
    path = Path(path)
    size = await asyncio.to_thread(lambda: path.stat().st_size)
    if size > settings.MAX_ASE_FILE_SIZE:
        raise ASEFormatError(
            f'Invalid ASE file format: {size} bytes exceeds limit of '
            f'{settings.MAX_ASE_FILE_SIZE}'
        )

    data = await asyncio.to_thread(path.read_bytes)
    palette = Palette.from_ase(data)
    logger.debug('Imported %d colors from %s', len(palette), path)
    return palette
