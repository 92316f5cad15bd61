"""Sprite codecs.

Pure, model-independent encoders and decoders:
- rle: Run-length text encoding of layer pixels
- ase: Adobe Swatch Exchange palette import
"""

from .rle import encode_rle, decode_rle, iter_runs, count_rle_pixels
from .ase import parse_ase

__all__ = [
    'encode_rle',
    'decode_rle',
    'iter_runs',
    'count_rle_pixels',
    'parse_ase',
]
