"""
Tests for sprite document schema validation.
"""

import copy

import pytest

from spritecreator.exceptions import SchemaIssue, SchemaViolationError
from spritecreator.formats import (
    get_sprite_validation_errors,
    validate_sprite,
    validate_sprite_data,
)


def _paths(data):
    return [issue.path for issue in get_sprite_validation_errors(data)]


def test_valid_document(sprite_data):
    assert validate_sprite_data(sprite_data)
    assert get_sprite_validation_errors(sprite_data) == []


def test_optional_sections(sprite_data):
    del sprite_data['variants']
    del sprite_data['generatorComponents']
    assert validate_sprite_data(sprite_data)


def test_validation_has_no_side_effects(sprite_data):
    original = copy.deepcopy(sprite_data)
    validate_sprite_data(sprite_data)
    assert sprite_data == original


def test_canvas_too_large(sprite_data):
    sprite_data['canvas']['w'] = 1000
    assert not validate_sprite_data(sprite_data)

    errors = get_sprite_validation_errors(sprite_data)
    assert len(errors) >= 1
    assert errors[0].path == 'canvas.w'
    assert isinstance(errors[0], SchemaIssue)


@pytest.mark.parametrize('field, value', [
    ('w', 0),
    ('h', 513),
    ('pixelSize', 0),
    ('w', '4'),       # Numbers are not parsed from strings
    ('w', 4.5),
    ('h', True),
])
def test_canvas_fields(sprite_data, field, value):
    sprite_data['canvas'][field] = value
    assert _paths(sprite_data) == [f'canvas.{field}']


def test_canvas_limits_inclusive(sprite_data):
    sprite_data['canvas'].update(w=512, h=1)
    assert validate_sprite_data(sprite_data)


def test_integral_floats_accepted(sprite_data):
    """JSON numbers such as 4.0 count as integers."""
    sprite_data['version'] = 1.0
    sprite_data['canvas'].update(w=4.0, h=4.0, pixelSize=8.0)
    sprite_data['animations']['walk']['frames'][0]['duration'] = 100.0
    assert validate_sprite_data(sprite_data)

    model = validate_sprite(sprite_data)
    assert model.canvas.w == 4
    assert isinstance(model.canvas.w, int)


@pytest.mark.parametrize('value', [float('nan'), float('inf'), 100.25])
def test_non_integral_duration(sprite_data, value):
    sprite_data['animations']['walk']['frames'][0]['duration'] = value
    assert _paths(sprite_data) == ['animations.walk.frames.0.duration']


def test_snake_case_keys_rejected(sprite_data):
    """Only the camelCase key spellings are part of the format."""
    canvas = sprite_data['canvas']
    canvas['pixel_size'] = canvas.pop('pixelSize')
    frame = sprite_data['animations']['walk']['frames'][0]
    frame['layer_refs'] = frame.pop('layerRefs')

    assert not validate_sprite_data(sprite_data)
    assert set(_paths(sprite_data)) == {
        'canvas.pixelSize',
        'animations.walk.frames.0.layerRefs',
    }


def test_snake_case_variant_map_rejected(sprite_data):
    variant = sprite_data['variants']['blue']
    variant['palette_map'] = variant.pop('paletteMap')
    assert _paths(sprite_data) == ['variants.blue.paletteMap']


def test_missing_required(sprite_data):
    del sprite_data['palette']
    assert _paths(sprite_data) == ['palette']


def test_requires_a_layer(sprite_data):
    sprite_data['layers'] = []
    assert _paths(sprite_data) == ['layers']


@pytest.mark.parametrize('field, value', [
    ('id', 'background'),
    ('name', ''),
    ('opacity', 1.5),
    ('opacity', -0.1),
    ('locked', 1),
    ('locked', 'false'),
    ('pixels', None),
])
def test_layer_fields(sprite_data, field, value):
    sprite_data['layers'][1][field] = value
    assert _paths(sprite_data) == [f'layers.1.{field}']


def test_animation_name_pattern(sprite_data):
    sprite_data['animations']['2fast'] = sprite_data['animations']['walk']
    assert not validate_sprite_data(sprite_data)


def test_animation_needs_frames(sprite_data):
    sprite_data['animations']['walk']['frames'] = []
    assert _paths(sprite_data) == ['animations.walk.frames']


def test_animation_frame_limit(sprite_data):
    frame = {'layerRefs': ['layer0'], 'duration': 10}
    sprite_data['animations']['walk']['frames'] = [frame] * 256
    assert validate_sprite_data(sprite_data)

    sprite_data['animations']['walk']['frames'] = [frame] * 257
    assert not validate_sprite_data(sprite_data)


@pytest.mark.parametrize('frame, path', [
    ({'layerRefs': ['layer0'], 'duration': 0}, 'duration'),
    ({'layerRefs': ['layer0'], 'duration': True}, 'duration'),
    ({'layerRefs': ['bg'], 'duration': 100}, 'layerRefs.0'),
    ({'duration': 100}, 'layerRefs'),
])
def test_animation_frames(sprite_data, frame, path):
    sprite_data['animations']['walk']['frames'][0] = frame
    assert _paths(sprite_data) == [f'animations.walk.frames.0.{path}']


def test_palette_colors(sprite_data):
    sprite_data['palette'][1] = 'red'
    assert _paths(sprite_data) == ['palette.1']


def test_palette_limit(sprite_data):
    sprite_data['palette'] = [f'#0000{i:02x}' for i in range(256)] + ['#ffffff']
    assert _paths(sprite_data) == ['palette']


def test_variant_colors(sprite_data):
    sprite_data['variants']['blue']['paletteMap']['#ff0000'] = 'blue'
    assert _paths(sprite_data) == ['variants.blue.paletteMap.#ff0000']


def test_color_scheme_colors(sprite_data):
    sprite_data['generatorComponents']['colorSchemes']['skin'].append('#abc')
    assert _paths(sprite_data) == ['generatorComponents.colorSchemes.skin.2']


def test_generator_component_shape(sprite_data):
    del sprite_data['generatorComponents']['heads'][0]['palette']
    assert _paths(sprite_data) == ['generatorComponents.heads.0.palette']


def test_reports_all_violations(sprite_data):
    sprite_data['canvas']['w'] = 1000
    sprite_data['version'] = 0
    sprite_data['palette'] = ['nope']
    assert set(_paths(sprite_data)) == {'canvas.w', 'version', 'palette.0'}


@pytest.mark.parametrize('data', [None, [], 'sprite', 42])
def test_not_an_object(data):
    assert not validate_sprite_data(data)


def test_unknown_keys_are_accepted(sprite_data):
    sprite_data['author'] = 'someone'
    sprite_data['canvas']['background'] = '#ffffff'
    assert validate_sprite_data(sprite_data)


def test_validate_sprite_raises(sprite_data):
    sprite_data['canvas']['w'] = 1000
    with pytest.raises(SchemaViolationError) as exc_info:
        validate_sprite(sprite_data)
    error = exc_info.value
    assert [issue.path for issue in error.errors] == ['canvas.w']
    assert 'canvas.w' in str(error)
    assert isinstance(error, ValueError)


def test_validate_sprite_returns_model(sprite_data):
    model = validate_sprite(sprite_data)
    assert model.canvas.pixel_size == 8
    assert model.layers[1].locked is True
    assert model.variants['blue'].palette_map == {'#ff0000': '#0000ff'}
