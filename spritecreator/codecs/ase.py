"""
Adobe Swatch Exchange (ASE) import.

Only the common case is supported: RGB color swatches. CMYK, LAB and gray
swatches are skipped, group blocks are stepped over.

Binary layout (all values big-endian):
    header:  "ASEF", u16 major version, u16 minor version, u32 block count
    block:   u16 type, u32 length, payload
    color:   u16 name length (UTF-16 code units), UTF-16 name,
             4 byte color space ("RGB ", "CMYK", "LAB ", "Gray"),
             component floats, u16 color type
"""

import logging
import math
import struct

from spritecreator.colors import rgb_to_hex
from spritecreator.exceptions import ASEFormatError

logger = logging.getLogger(__name__)

ASE_SIGNATURE = b'ASEF'
ASE_HEADER_SIZE = 12  # Signature, version, block count
BLOCK_HEADER_SIZE = 6  # Type, length
BLOCK_TRAILER_MARGIN = 20  # Blocks are only read while this many bytes remain

BLOCK_COLOR = 0x0001
COLOR_SPACE_RGB = b'RGB '
COLOR_TYPE_SIZE = 2

_BLOCK_HEADER = struct.Struct('>HI')
_NAME_LENGTH = struct.Struct('>H')
_RGB_COMPONENTS = struct.Struct('>fff')


def _component_to_byte(value: float) -> int:
    # Rejects NaN as well
    if not 0.0 <= value <= 1.0:
        raise ValueError(f'Color component out of range: {value}')
    return math.floor(value * 255 + 0.5)


def _read_color_block(data: bytes, start: int, length: int) -> tuple[str | None, int]:
    """
    Read one color block payload.

    :param data: The whole ASE buffer
    :param start: Offset of the payload (after type and length)
    :param length: Declared payload length
    :return: The hex color (None for non-RGB swatches) and the next block offset
    """
    (name_length,) = _NAME_LENGTH.unpack_from(data, start)
    cursor = start + _NAME_LENGTH.size + name_length * 2

    color_space = data[cursor:cursor + 4]
    if len(color_space) < 4:
        raise ValueError('Truncated color block')
    cursor += 4

    color = None
    if color_space == COLOR_SPACE_RGB:
        red, green, blue = _RGB_COMPONENTS.unpack_from(data, cursor)
        color = rgb_to_hex(
            _component_to_byte(red),
            _component_to_byte(green),
            _component_to_byte(blue),
        )
        cursor += _RGB_COMPONENTS.size
    else:
        logger.debug('Skipping %r swatch at offset %d', color_space, start)

    cursor += COLOR_TYPE_SIZE
    # Trust the declared length when it covers more than was read
    return color, max(cursor, start + length)


def _read_swatches(data: bytes) -> list[str]:
    colors = []
    offset = ASE_HEADER_SIZE

    while offset < len(data) - BLOCK_TRAILER_MARGIN:
        block_type, block_length = _BLOCK_HEADER.unpack_from(data, offset)
        offset += _BLOCK_HEADER.size

        if block_type == BLOCK_COLOR:
            color, offset = _read_color_block(data, offset, block_length)
            if color is not None:
                colors.append(color)
        else:
            logger.debug('Skipping ASE block 0x%04x (%d bytes)', block_type, block_length)
            # Length counted from the block start; never step backwards
            offset += max(block_length - BLOCK_HEADER_SIZE, 0)

    return colors


def parse_ase(buffer: bytes | bytearray | memoryview) -> list[str]:
    """
    Extract the RGB swatches of an ASE file.

    Args:
        buffer: Raw file content

    Returns:
        Hex colors in file order

    Raises:
        ASEFormatError: If the signature is missing or the data is corrupt.
            Every parse problem raises the same error; the specific problem
            is chained as the exception's cause.
    """
    data = bytes(buffer)
    if len(data) < len(ASE_SIGNATURE) or data[:4] != ASE_SIGNATURE:
        raise ASEFormatError()

    try:
        colors = _read_swatches(data)
    except (struct.error, ValueError) as exc:
        raise ASEFormatError() from exc

    logger.debug('Read %d RGB swatches from %d byte ASE buffer', len(colors), len(data))
    return colors
