"""
Shared format rules for sprite data.

Patterns and hard limits of the sprite format plus the checks built on them.
The same constants back the pydantic schema in ``spritecreator.formats.schema``,
so the behavioural models and the document validator can never disagree.
"""

import re
from typing import Any

from .exceptions import InvalidColorError, InvalidLayerRefError, InvalidNameError

# Format patterns
HEX_COLOR_PATTERN = r'^#[0-9a-fA-F]{6}$'
LAYER_ID_PATTERN = r'^layer[0-9]+$'
NAME_PATTERN = r'^[a-zA-Z][a-zA-Z0-9_]*$'

_HEX_COLOR_RE = re.compile(HEX_COLOR_PATTERN)
_LAYER_ID_RE = re.compile(LAYER_ID_PATTERN)
_NAME_RE = re.compile(NAME_PATTERN)

# Format limits
MAX_PALETTE_COLORS = 256
MAX_ANIMATION_FRAMES = 256
MIN_CANVAS_SIZE = 1
MAX_CANVAS_SIZE = 512


def _matches(regex: re.Pattern, value: Any) -> bool:
    # fullmatch: "$" alone would accept a trailing newline
    return isinstance(value, str) and regex.fullmatch(value) is not None


def is_valid_hex_color(color: Any) -> bool:
    """Check whether a value is a ``#RRGGBB`` hex color string."""
    return _matches(_HEX_COLOR_RE, color)


def validate_hex_color(color: Any) -> str:
    """
    Validate a hex color.

    Args:
        color: Value to check

    Returns:
        The color, unchanged

    Raises:
        InvalidColorError: If the value is not a ``#RRGGBB`` string
    """
    if not is_valid_hex_color(color):
        raise InvalidColorError(color)
    return color


def is_valid_layer_ref(ref: Any) -> bool:
    """Check whether a value is a layer id such as ``layer0``."""
    return _matches(_LAYER_ID_RE, ref)


def validate_layer_ref(ref: Any) -> str:
    """Validate a layer reference, raising InvalidLayerRefError if malformed."""
    if not is_valid_layer_ref(ref):
        raise InvalidLayerRefError(ref)
    return ref


def is_valid_name(name: Any) -> bool:
    """Check whether a value is a valid animation/variant/scheme name."""
    return _matches(_NAME_RE, name)


def validate_name(name: Any, kind: str = 'animation') -> str:
    """Validate a name, raising InvalidNameError if malformed."""
    if not is_valid_name(name):
        raise InvalidNameError(f'Invalid {kind} name format: {name!r}')
    return name
