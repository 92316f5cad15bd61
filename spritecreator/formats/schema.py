"""
Sprite document schema.

Pydantic models describing the serialized sprite document. They are the single
place where document structure is checked: every document is validated here
once, at the boundary, before anything else looks at it.

Serialization format:
{
    "version": 1,
    "canvas": {"w": 32, "h": 32, "pixelSize": 1},
    "layers": [
        {"id": "layer0", "name": "Ink", "opacity": 1.0, "locked": false,
         "pixels": "1024:#000000"}
    ],
    "animations": {
        "walk": {"frames": [{"layerRefs": ["layer0"], "duration": 100}]}
    },
    "palette": ["#000000", "#ffffff"],
    "variants": {                                   // optional
        "blue": {"paletteMap": {"#000000": "#0000ff"}}
    },
    "generatorComponents": {                        // optional
        "heads": [{"id": "human", "layers": ["eyes"], "palette": ["skin"]}],
        "bodies": [...],
        "accessories": [...],
        "colorSchemes": {"skin": ["#f4c2a1", "#8b5a3c"]}
    }
}

Fields use strict types: numbers are not parsed from strings and booleans are
not numbers. Integer fields accept integral floats such as 4.0. Keys are
camelCase only. Unknown keys are kept and written back out unchanged.
"""

from typing import Annotated, Any, Optional

from pydantic import (
    BaseModel,
    BeforeValidator,
    ConfigDict,
    Field,
    StrictBool,
    StrictFloat,
    StrictInt,
    StrictStr,
    StringConstraints,
    ValidationError,
)

from spritecreator.exceptions import SchemaIssue, SchemaViolationError
from spritecreator.validation import (
    HEX_COLOR_PATTERN,
    LAYER_ID_PATTERN,
    MAX_ANIMATION_FRAMES,
    MAX_CANVAS_SIZE,
    MAX_PALETTE_COLORS,
    MIN_CANVAS_SIZE,
    NAME_PATTERN,
)

HexColor = Annotated[str, StringConstraints(strict=True, pattern=HEX_COLOR_PATTERN)]
LayerId = Annotated[str, StringConstraints(strict=True, pattern=LAYER_ID_PATTERN)]
Name = Annotated[str, StringConstraints(strict=True, pattern=NAME_PATTERN)]


def _integral_float_to_int(value: Any) -> Any:
    # JSON writers may emit 4 as 4.0
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return value


# Integer that also accepts integral floats; strings and booleans are rejected
JsonInt = Annotated[StrictInt, BeforeValidator(_integral_float_to_int)]


class SchemaModel(BaseModel):
    """Common configuration of all document models."""

    model_config = ConfigDict(
        # Unknown keys are kept and dumped back out
        extra='allow',
    )


class CanvasData(SchemaModel):
    """Canvas size in sprite pixels and the display scale."""

    w: JsonInt = Field(ge=MIN_CANVAS_SIZE, le=MAX_CANVAS_SIZE)
    h: JsonInt = Field(ge=MIN_CANVAS_SIZE, le=MAX_CANVAS_SIZE)
    pixel_size: JsonInt = Field(ge=1, alias='pixelSize')


class LayerData(SchemaModel):
    """A layer with RLE encoded pixels."""

    id: LayerId
    name: StrictStr = Field(min_length=1)
    opacity: StrictFloat = Field(ge=0.0, le=1.0)
    locked: StrictBool
    pixels: StrictStr


class AnimationFrameData(SchemaModel):
    layer_refs: list[LayerId] = Field(alias='layerRefs')
    duration: JsonInt = Field(ge=1)  # Milliseconds


class AnimationData(SchemaModel):
    frames: list[AnimationFrameData] = Field(
        min_length=1, max_length=MAX_ANIMATION_FRAMES
    )


class VariantData(SchemaModel):
    """A palette swap: original color -> replacement color."""

    palette_map: dict[HexColor, HexColor] = Field(alias='paletteMap')


class GeneratorComponent(SchemaModel):
    """A building block for randomly generated sprites."""

    id: StrictStr
    layers: list[StrictStr]  # Layer names
    palette: list[StrictStr]  # Palette role names, e.g. "skin"


class GeneratorComponents(SchemaModel):
    """Component catalogs for random sprite generation."""

    heads: Optional[list[GeneratorComponent]] = None
    bodies: Optional[list[GeneratorComponent]] = None
    accessories: Optional[list[GeneratorComponent]] = None
    # Palette role name -> candidate colors
    color_schemes: Optional[dict[Name, list[HexColor]]] = Field(
        default=None, alias='colorSchemes'
    )


class SpriteData(SchemaModel):
    """The complete sprite document."""

    version: JsonInt = Field(ge=1)
    canvas: CanvasData
    layers: list[LayerData] = Field(min_length=1)
    animations: dict[Name, AnimationData]
    palette: list[HexColor] = Field(max_length=MAX_PALETTE_COLORS)
    variants: Optional[dict[Name, VariantData]] = None
    generator_components: Optional[GeneratorComponents] = Field(
        default=None, alias='generatorComponents'
    )


def _issues_from(exc: ValidationError) -> list[SchemaIssue]:
    return [
        SchemaIssue(
            path='.'.join(str(part) for part in error['loc']),
            message=error['msg'],
            kind=error['type'],
        )
        for error in exc.errors()
    ]


def validate_sprite(data: Any) -> SpriteData:
    """
    Validate a candidate sprite document.

    Args:
        data: Parsed JSON object

    Returns:
        The validated document model

    Raises:
        SchemaViolationError: With every violation found
    """
    try:
        return SpriteData.model_validate(data)
    except ValidationError as exc:
        raise SchemaViolationError(_issues_from(exc)) from exc


def validate_sprite_data(data: Any) -> bool:
    """Check whether data is a valid sprite document."""
    return not get_sprite_validation_errors(data)


def get_sprite_validation_errors(data: Any) -> list[SchemaIssue]:
    """Get all schema violations of data; empty if it is valid."""
    try:
        SpriteData.model_validate(data)
    except ValidationError as exc:
        return _issues_from(exc)
    return []
