"""
spritecreator - Data model and codecs for layered, animated pixel sprites.

Example:
    from spritecreator import LayerBitmap, Animation, AnimationFrame, SpriteDocument

    bitmap = LayerBitmap(16, 16, '#ffffff')
    bitmap.set_pixel(3, 4, '#ff0000')
    encoded = bitmap.to_rle()

    doc = SpriteDocument.load('hero.sprite.json')
    walk = doc.get_animation_model('walk')
"""

__version__ = "0.1.0"

from .exceptions import (
    SpriteError,
    FormatViolationError,
    InvalidColorError,
    InvalidLayerRefError,
    InvalidNameError,
    BoundsViolationError,
    OutOfBoundsError,
    CapacityError,
    InvalidDimensionsError,
    InvalidDurationError,
    InvariantViolationError,
    LastFrameError,
    PixelCountMismatchError,
    EmptyPaletteError,
    EncodingError,
    RLEDecodeError,
    ASEFormatError,
    DocumentDecodeError,
    SchemaIssue,
    SchemaViolationError,
)
from .validation import is_valid_hex_color, validate_hex_color
from .colors import hex_to_rgb, rgb_to_hex
from .codecs import encode_rle, decode_rle, parse_ase
from .model import (
    LayerBitmap,
    Palette,
    create_swap_map,
    apply_swap,
    import_ase_file,
    Animation,
    AnimationFrame,
)
from .formats import (
    SpriteDocument,
    SpriteLayer,
    build_sprite_document,
    validate_sprite_data,
    get_sprite_validation_errors,
)

__all__ = [
    "__version__",
    # Errors
    "SpriteError",
    "FormatViolationError",
    "InvalidColorError",
    "InvalidLayerRefError",
    "InvalidNameError",
    "BoundsViolationError",
    "OutOfBoundsError",
    "CapacityError",
    "InvalidDimensionsError",
    "InvalidDurationError",
    "InvariantViolationError",
    "LastFrameError",
    "PixelCountMismatchError",
    "EmptyPaletteError",
    "EncodingError",
    "RLEDecodeError",
    "ASEFormatError",
    "DocumentDecodeError",
    "SchemaIssue",
    "SchemaViolationError",
    # Colors
    "is_valid_hex_color",
    "validate_hex_color",
    "hex_to_rgb",
    "rgb_to_hex",
    # Codecs
    "encode_rle",
    "decode_rle",
    "parse_ase",
    # Editing models
    "LayerBitmap",
    "Palette",
    "create_swap_map",
    "apply_swap",
    "import_ase_file",
    "Animation",
    "AnimationFrame",
    # Documents
    "SpriteDocument",
    "SpriteLayer",
    "build_sprite_document",
    "validate_sprite_data",
    "get_sprite_validation_errors",
]
