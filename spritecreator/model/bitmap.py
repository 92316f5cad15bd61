"""
LayerBitmap - Fixed-size pixel grid of a single sprite layer.

Pixels are stored row-major as hex color strings (index = y * width + x).
The bitmap never changes size after construction. For storage in a sprite
document the pixels are run-length encoded, see ``spritecreator.codecs.rle``.
"""

from typing import Mapping, Optional

import numpy as np

from spritecreator.codecs.rle import count_rle_pixels, decode_rle, encode_rle
from spritecreator.colors import hex_to_rgb, rgb_to_hex
from spritecreator.config import settings
from spritecreator.exceptions import (
    InvalidDimensionsError,
    OutOfBoundsError,
    PixelCountMismatchError,
)
from spritecreator.validation import validate_hex_color


class LayerBitmap:
    """
    Pixel grid of one layer.

    Example:
        >>> bitmap = LayerBitmap(4, 4, '#ffffff')
        >>> bitmap.set_pixel(1, 2, '#ff0000')
        >>> bitmap.to_rle()
        '9:#ffffff|1:#ff0000|6:#ffffff'
    """

    def __init__(self, width: int, height: int, fill_color: Optional[str] = None):
        """
        Create a bitmap filled with a single color.

        :param width: Width in pixels, at least 1
        :param height: Height in pixels, at least 1
        :param fill_color: Initial color of every pixel. Defaults to
            ``settings.DEFAULT_FILL_COLOR``
        """
        if fill_color is None:
            fill_color = settings.DEFAULT_FILL_COLOR
        validate_hex_color(fill_color)
        if width < 1 or height < 1:
            raise InvalidDimensionsError(
                f'Bitmap dimensions must be at least 1x1, got {width}x{height}'
            )
        self._width = width
        self._height = height
        self._pixels = [fill_color] * (width * height)

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def pixel_count(self) -> int:
        return self._width * self._height

    def _index(self, x: int, y: int) -> int:
        if not (0 <= x < self._width and 0 <= y < self._height):
            raise OutOfBoundsError(
                f'Pixel coordinates ({x}, {y}) out of bounds for '
                f'{self._width}x{self._height} bitmap'
            )
        return y * self._width + x

    def get_pixel(self, x: int, y: int) -> str:
        """Get the color at (x, y)."""
        return self._pixels[self._index(x, y)]

    def set_pixel(self, x: int, y: int, color: str) -> None:
        """
        Set the color at (x, y).

        Raises:
            OutOfBoundsError: If (x, y) is outside the bitmap
            InvalidColorError: If color is not a hex color
        """
        index = self._index(x, y)
        self._pixels[index] = validate_hex_color(color)

    def get_pixels(self) -> list[str]:
        """Get a copy of all pixels in row-major order."""
        return list(self._pixels)

    def fill(self, color: str) -> None:
        """Set every pixel to color."""
        validate_hex_color(color)
        self._pixels = [color] * self.pixel_count

    def clone(self) -> 'LayerBitmap':
        """Create an independent copy."""
        copy = LayerBitmap.__new__(LayerBitmap)
        copy._width = self._width
        copy._height = self._height
        copy._pixels = list(self._pixels)
        return copy

    def recolor(self, swap_map: Mapping[str, str]) -> 'LayerBitmap':
        """
        Create a copy with a palette swap applied.

        Colors missing from swap_map are kept.
        """
        copy = self.clone()
        copy._pixels = [validate_hex_color(swap_map.get(p, p)) for p in self._pixels]
        return copy

    # --- RLE ---

    def to_rle(self) -> str:
        """Encode the pixels as RLE text."""
        return encode_rle(self._pixels)

    @classmethod
    def from_rle(cls, encoded: str, width: int, height: int) -> 'LayerBitmap':
        """
        Create a bitmap from RLE text.

        Raises:
            RLEDecodeError: If the text is malformed
            PixelCountMismatchError: If the text does not hold exactly
                width * height pixels
        """
        actual = count_rle_pixels(encoded)
        if actual != width * height:
            raise PixelCountMismatchError(actual, width * height)

        bitmap = cls(width, height)
        bitmap._pixels = decode_rle(encoded)
        return bitmap

    # --- numpy ---

    def to_array(self) -> np.ndarray:
        """
        Convert to an RGB image array.

        :return: uint8 array of shape (height, width, 3)
        """
        rgb = [hex_to_rgb(pixel) for pixel in self._pixels]
        return np.array(rgb, dtype=np.uint8).reshape(self._height, self._width, 3)

    @classmethod
    def from_array(cls, array: np.ndarray) -> 'LayerBitmap':
        """
        Create a bitmap from an RGB or RGBA image array.

        Alpha is dropped.

        :param array: uint8 array of shape (height, width, 3 or 4)
        """
        if array.ndim != 3 or array.shape[2] not in (3, 4):
            raise ValueError(f'Expected (height, width, 3|4) array, got {array.shape}')
        if array.dtype != np.uint8:
            raise ValueError(f'Expected uint8 array, got {array.dtype}')

        height, width = array.shape[:2]
        bitmap = cls(width, height)
        flat = array[:, :, :3].reshape(-1, 3)
        bitmap._pixels = [rgb_to_hex(int(r), int(g), int(b)) for r, g, b in flat]
        return bitmap

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LayerBitmap):
            return NotImplemented
        return (
            self._width == other._width
            and self._height == other._height
            and self._pixels == other._pixels
        )

    def __repr__(self) -> str:
        return f'LayerBitmap({self._width}x{self._height})'
