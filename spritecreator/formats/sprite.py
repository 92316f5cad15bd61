"""
SpriteDocument - Validated sprite document with JSON and file I/O.

A SpriteDocument only ever wraps data that passed schema validation; there is
no way to obtain an instance holding an invalid document. Accessors return
copies, so the wrapped document can only change by building a new one.

Example usage:
    # Load from file
    doc = SpriteDocument.load('hero.sprite.json')

    # Decode a layer, recolored with a palette variant
    bitmap = doc.get_layer_bitmap('layer0', variant='blue')

    # Build from editing models and save
    doc = build_sprite_document(
        [SpriteLayer('layer0', 'Ink', bitmap)],
        animations=[walk],
        palette=palette,
    )
    doc.save('hero.sprite.json')
"""

import copy
import json
import logging
from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional, Union

from spritecreator.config import settings
from spritecreator.exceptions import DocumentDecodeError, InvariantViolationError
from spritecreator.model import Animation, LayerBitmap, Palette

from .schema import (
    AnimationData,
    CanvasData,
    GeneratorComponents,
    LayerData,
    SpriteData,
    VariantData,
    validate_sprite,
)

logger = logging.getLogger(__name__)


@dataclass
class SpriteLayer:
    """A layer as used while editing: metadata plus decoded pixels."""

    id: str
    name: str
    bitmap: LayerBitmap
    opacity: float = 1.0
    locked: bool = False

    def to_dict(self) -> dict[str, Any]:
        """Convert to the document layer format (pixels RLE encoded)."""
        return {
            'id': self.id,
            'name': self.name,
            'opacity': self.opacity,
            'locked': self.locked,
            'pixels': self.bitmap.to_rle(),
        }


class SpriteDocument:
    """Schema validated sprite document."""

    def __init__(self, data: Mapping[str, Any]):
        """
        Validate and wrap a sprite document.

        :param data: Parsed document JSON. It is copied; later changes to
            data do not affect the document.
        :raises SchemaViolationError: If data is not a valid sprite document
        """
        self._model = validate_sprite(copy.deepcopy(data))

    @classmethod
    def _from_model(cls, model: SpriteData) -> 'SpriteDocument':
        document = cls.__new__(cls)
        document._model = model
        return document

    @classmethod
    def create(cls, data: Mapping[str, Any]) -> 'SpriteDocument':
        """Create a document from data; same as the constructor."""
        return cls(data)

    # --- Accessors ---

    def get_canvas(self) -> CanvasData:
        return self._model.canvas.model_copy(deep=True)

    def get_layers(self) -> list[LayerData]:
        return [layer.model_copy(deep=True) for layer in self._model.layers]

    def get_layer(self, layer_id: str) -> Optional[LayerData]:
        """
        Get a layer by ID.

        Args:
            layer_id: Layer ID to find

        Returns:
            Layer or None if not found
        """
        for layer in self._model.layers:
            if layer.id == layer_id:
                return layer.model_copy(deep=True)
        return None

    def get_animations(self) -> dict[str, AnimationData]:
        return {
            name: animation.model_copy(deep=True)
            for name, animation in self._model.animations.items()
        }

    def get_animation(self, name: str) -> Optional[AnimationData]:
        animation = self._model.animations.get(name)
        return animation.model_copy(deep=True) if animation is not None else None

    def get_palette(self) -> list[str]:
        return list(self._model.palette)

    def get_variants(self) -> Optional[dict[str, VariantData]]:
        if self._model.variants is None:
            return None
        return {
            name: variant.model_copy(deep=True)
            for name, variant in self._model.variants.items()
        }

    def get_variant(self, name: str) -> Optional[VariantData]:
        variant = (self._model.variants or {}).get(name)
        return variant.model_copy(deep=True) if variant is not None else None

    def get_generator_components(self) -> Optional[GeneratorComponents]:
        components = self._model.generator_components
        return components.model_copy(deep=True) if components is not None else None

    # --- Editing model bridges ---

    def get_layer_bitmap(self, layer_id: str, variant: Optional[str] = None) -> LayerBitmap:
        """
        Decode a layer's pixels at canvas size.

        Args:
            layer_id: Layer ID
            variant: Optional variant name whose palette map is applied

        Raises:
            KeyError: If the layer or variant does not exist
            RLEDecodeError: If the layer's pixel data is malformed
            PixelCountMismatchError: If the pixel data does not fill the canvas
        """
        layer = self.get_layer(layer_id)
        if layer is None:
            raise KeyError(f'Unknown layer: {layer_id}')

        canvas = self._model.canvas
        bitmap = LayerBitmap.from_rle(layer.pixels, canvas.w, canvas.h)

        if variant is not None:
            variant_data = self.get_variant(variant)
            if variant_data is None:
                raise KeyError(f'Unknown variant: {variant}')
            bitmap = bitmap.recolor(variant_data.palette_map)
        return bitmap

    def get_sprite_layers(self) -> list[SpriteLayer]:
        """Decode all layers, in document order."""
        return [
            SpriteLayer(
                id=layer.id,
                name=layer.name,
                bitmap=self.get_layer_bitmap(layer.id),
                opacity=layer.opacity,
                locked=layer.locked,
            )
            for layer in self._model.layers
        ]

    def get_animation_model(self, name: str) -> Animation:
        """
        Get an animation as an editable Animation.

        :raises KeyError: If there is no animation with that name
        """
        animation = self._model.animations.get(name)
        if animation is None:
            raise KeyError(f'Unknown animation: {name}')
        return Animation.from_dict(name, animation.model_dump(by_alias=True))

    def get_palette_model(self) -> Palette:
        return Palette(self._model.palette)

    def get_missing_layer_refs(self) -> dict[str, list[str]]:
        """
        Find animation layer references that name no layer of this document.

        Returns:
            Animation name -> sorted missing layer ids, only for animations
            with missing references
        """
        layer_ids = {layer.id for layer in self._model.layers}
        missing = {}
        for name, animation in self._model.animations.items():
            refs = {ref for frame in animation.frames for ref in frame.layer_refs}
            unknown = sorted(refs - layer_ids)
            if unknown:
                missing[name] = unknown
        return missing

    # --- Serialization ---

    def to_dict(self) -> dict[str, Any]:
        """Get the document as a JSON compatible dict (a copy)."""
        return self._model.model_dump(by_alias=True, exclude_unset=True, mode='json')

    def to_json(self, indent: Optional[int] = None) -> str:
        """
        Serialize to JSON text.

        :param indent: Indentation, defaults to ``settings.JSON_INDENT``
        """
        if indent is None:
            indent = settings.JSON_INDENT
        return json.dumps(self.to_dict(), indent=indent)

    @classmethod
    def from_json(cls, text: Union[str, bytes]) -> 'SpriteDocument':
        """
        Parse and validate JSON text.

        :raises DocumentDecodeError: If text is not valid JSON
        :raises SchemaViolationError: If the JSON is not a valid sprite document
        """
        try:
            data = json.loads(text)
        except (json.JSONDecodeError, UnicodeDecodeError) as exc:
            raise DocumentDecodeError(f'Invalid sprite JSON: {exc}') from exc
        return cls(data)

    def clone(self) -> 'SpriteDocument':
        return SpriteDocument._from_model(self._model.model_copy(deep=True))

    # --- File I/O ---

    @classmethod
    def load(cls, path: Union[str, Path]) -> 'SpriteDocument':
        """
        Load a document from a UTF-8 JSON file.

        Raises:
            DocumentDecodeError: If the file is not valid JSON
            SchemaViolationError: If the file is not a valid sprite document
        """
        path = Path(path)
        document = cls.from_json(path.read_text(encoding='utf-8'))
        logger.debug('Loaded sprite document %s (%d layers)', path, len(document._model.layers))
        return document

    def save(self, path: Union[str, Path]) -> None:
        """Save the document as a UTF-8 JSON file."""
        path = Path(path)
        path.write_text(self.to_json(), encoding='utf-8')
        logger.debug('Saved sprite document %s', path)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SpriteDocument):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    def __repr__(self) -> str:
        canvas = self._model.canvas
        return (
            f'SpriteDocument({canvas.w}x{canvas.h}, '
            f'{len(self._model.layers)} layers, '
            f'{len(self._model.animations)} animations)'
        )


def build_sprite_document(
    layers: Sequence[SpriteLayer],
    animations: Iterable[Animation] = (),
    palette: Optional[Palette] = None,
    *,
    variants: Optional[Mapping[str, Mapping[str, str]]] = None,
    generator_components: Optional[Mapping[str, Any]] = None,
    pixel_size: Optional[int] = None,
) -> SpriteDocument:
    """
    Serialize editing models into a validated sprite document.

    The canvas size is taken from the layer bitmaps, which must all have the
    same size.

    Args:
        layers: Layers in document order, at least one
        animations: Animations, keyed by their names in the document
        palette: Document palette, empty if omitted
        variants: Variant name -> palette map (e.g. from create_swap_map)
        generator_components: Generator catalog in document format
        pixel_size: Display scale, defaults to ``settings.DEFAULT_PIXEL_SIZE``

    Raises:
        InvariantViolationError: If layer bitmaps differ in size
        SchemaViolationError: If the assembled document is invalid
    """
    if layers:
        width, height = layers[0].bitmap.width, layers[0].bitmap.height
    else:
        width = height = 0  # Rejected by schema validation below
    for layer in layers:
        if (layer.bitmap.width, layer.bitmap.height) != (width, height):
            raise InvariantViolationError(
                f'Layer {layer.id} is {layer.bitmap.width}x{layer.bitmap.height}, '
                f'expected {width}x{height}'
            )

    data: dict[str, Any] = {
        'version': settings.DOCUMENT_VERSION,
        'canvas': {
            'w': width,
            'h': height,
            'pixelSize': pixel_size if pixel_size is not None else settings.DEFAULT_PIXEL_SIZE,
        },
        'layers': [layer.to_dict() for layer in layers],
        'animations': {
            animation.get_name(): animation.to_dict() for animation in animations
        },
        'palette': palette.get_colors() if palette is not None else [],
    }
    if variants is not None:
        data['variants'] = {
            name: {'paletteMap': dict(palette_map)}
            for name, palette_map in variants.items()
        }
    if generator_components is not None:
        data['generatorComponents'] = generator_components

    return SpriteDocument(data)
