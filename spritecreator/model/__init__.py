"""
Sprite editing models.

Behavioural value types used while a sprite is being edited:
    LayerBitmap    - pixel grid of one layer
    Palette        - ordered set of up to 256 colors
    AnimationFrame - layers shown together for a duration
    Animation      - named sequence of frames

For the serialized document form, use spritecreator.formats.SpriteDocument.
"""

from .bitmap import LayerBitmap
from .palette import Palette, create_swap_map, apply_swap, import_ase_file
from .animation import Animation, AnimationFrame

__all__ = [
    'LayerBitmap',
    'Palette',
    'create_swap_map',
    'apply_swap',
    'import_ase_file',
    'Animation',
    'AnimationFrame',
]
