"""Hex color conversions."""

from .validation import validate_hex_color


def hex_to_rgb(color: str) -> tuple[int, int, int]:
    """
    Convert ``#RRGGBB`` to an integer RGB tuple.

    :param color: The hex color
    :return: (red, green, blue), each 0-255
    """
    validate_hex_color(color)
    return int(color[1:3], 16), int(color[3:5], 16), int(color[5:7], 16)


def rgb_to_hex(red: int, green: int, blue: int) -> str:
    """
    Convert integer RGB components to a lower case ``#rrggbb`` string.

    :raises ValueError: If a component is outside 0-255
    """
    for value in (red, green, blue):
        if not 0 <= value <= 255:
            raise ValueError(f'Color component out of range: {value}')
    return f'#{red:02x}{green:02x}{blue:02x}'
