"""
Run-length encoding for layer pixel data.

Format: ``count:color|count:color|...`` where ``count`` is a positive decimal
integer and ``color`` a ``#RRGGBB`` hex color. The empty string encodes zero
pixels. The codec works on any flat color sequence; it knows nothing about
bitmap width or height.

Example:
    >>> encode_rle(['#000000', '#000000', '#ffffff'])
    '2:#000000|1:#ffffff'
    >>> decode_rle('2:#000000|1:#ffffff')
    ['#000000', '#000000', '#ffffff']
"""

import re
from collections.abc import Iterable, Iterator

from spritecreator.exceptions import RLEDecodeError
from spritecreator.validation import validate_hex_color

RUN_SEPARATOR = '|'
COUNT_SEPARATOR = ':'

_COUNT_RE = re.compile(r'[0-9]+')


def encode_rle(pixels: Iterable[str]) -> str:
    """
    Encode a color sequence as RLE text.

    Every color is validated before anything is encoded, so an invalid color
    anywhere in the input fails the whole call.

    Args:
        pixels: Flat color sequence

    Returns:
        RLE text, empty for an empty sequence

    Raises:
        InvalidColorError: If any color is not a valid hex color
    """
    pixels = list(pixels)
    for pixel in pixels:
        validate_hex_color(pixel)

    if not pixels:
        return ''

    runs = []
    current = pixels[0]
    count = 1
    for pixel in pixels[1:]:
        if pixel == current:
            count += 1
        else:
            runs.append(f'{count}{COUNT_SEPARATOR}{current}')
            current = pixel
            count = 1
    runs.append(f'{count}{COUNT_SEPARATOR}{current}')

    return RUN_SEPARATOR.join(runs)


def _parse_run(token: str) -> tuple[int, str]:
    count_text, separator, color = token.partition(COUNT_SEPARATOR)
    if not separator:
        raise ValueError(f'Missing count separator in run {token!r}')
    if not _COUNT_RE.fullmatch(count_text):
        raise ValueError(f'Invalid run count {count_text!r}')
    count = int(count_text)
    if count <= 0:
        raise ValueError(f'Run count must be positive, got {count}')
    return count, validate_hex_color(color)


def iter_runs(encoded: str) -> Iterator[tuple[int, str]]:
    """
    Iterate over the ``(count, color)`` runs of RLE text without expanding them.

    Raises:
        RLEDecodeError: On the first malformed run
    """
    if encoded == '':
        return
    if not isinstance(encoded, str):
        raise RLEDecodeError()

    for token in encoded.split(RUN_SEPARATOR):
        try:
            yield _parse_run(token)
        except ValueError as exc:
            raise RLEDecodeError() from exc


def count_rle_pixels(encoded: str) -> int:
    """Count the pixels RLE text decodes to, validating it on the way."""
    return sum(count for count, _ in iter_runs(encoded))


def decode_rle(encoded: str) -> list[str]:
    """
    Decode RLE text into a flat color list.

    Any malformed run (bad count, bad color, missing separator) fails the
    whole decode with the same error; the specific problem is chained as the
    exception's cause.

    Args:
        encoded: RLE text

    Returns:
        Flat list of hex colors

    Raises:
        RLEDecodeError: If the text is not valid RLE
    """
    runs = list(iter_runs(encoded))
    pixels: list[str] = []
    for count, color in runs:
        pixels.extend([color] * count)
    return pixels
