"""Sprite document formats.

This module contains the document schema and the validated document wrapper.
"""

from .schema import (
    SpriteData,
    CanvasData,
    LayerData,
    AnimationData,
    AnimationFrameData,
    VariantData,
    GeneratorComponent,
    GeneratorComponents,
    validate_sprite,
    validate_sprite_data,
    get_sprite_validation_errors,
)
from .sprite import SpriteDocument, SpriteLayer, build_sprite_document

__all__ = [
    # Schema
    'SpriteData',
    'CanvasData',
    'LayerData',
    'AnimationData',
    'AnimationFrameData',
    'VariantData',
    'GeneratorComponent',
    'GeneratorComponents',
    'validate_sprite',
    'validate_sprite_data',
    'get_sprite_validation_errors',
    # Document
    'SpriteDocument',
    'SpriteLayer',
    'build_sprite_document',
]
