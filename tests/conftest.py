"""
Pytest fixtures for spritecreator tests
"""

import struct

import pytest


def _encode_ase_color(name: str, color_space: bytes, components: tuple[float, ...]) -> bytes:
    """Encode one ASE color block, including its type and length."""
    utf16_name = (name + '\0').encode('utf-16-be')
    payload = struct.pack('>H', len(utf16_name) // 2) + utf16_name
    payload += color_space
    payload += struct.pack(f'>{len(components)}f', *components)
    payload += struct.pack('>H', 2)  # Color type: normal
    return struct.pack('>HI', 0x0001, len(payload)) + payload


def build_ase(swatches, extra_blocks=()) -> bytes:
    """
    Build an ASE file.

    :param swatches: (name, color space, components) tuples, e.g.
        ('Red', b'RGB ', (1.0, 0.0, 0.0))
    :param extra_blocks: Raw blocks written before the swatches
    """
    blocks = list(extra_blocks)
    blocks += [_encode_ase_color(*swatch) for swatch in swatches]
    header = b'ASEF' + struct.pack('>HHI', 1, 0, len(blocks))
    return header + b''.join(blocks)


def rgb_swatch(name: str, red: float, green: float, blue: float):
    return name, b'RGB ', (red, green, blue)


@pytest.fixture
def ase_builder():
    """
    Returns the ASE file builder.
    :return: build_ase(swatches, extra_blocks=()) -> bytes
    """
    return build_ase


@pytest.fixture
def primary_ase() -> bytes:
    """
    Returns an ASE file with red, green and blue RGB swatches.
    :return: The file content
    """
    return build_ase([
        rgb_swatch('Red', 1.0, 0.0, 0.0),
        rgb_swatch('Green', 0.0, 1.0, 0.0),
        rgb_swatch('Blue', 0.0, 0.0, 1.0),
    ])


@pytest.fixture
def sprite_data() -> dict:
    """
    Returns a valid 4x4 sprite document with two layers and a walk animation.
    :return: The document as parsed JSON
    """
    return {
        'version': 1,
        'canvas': {'w': 4, 'h': 4, 'pixelSize': 8},
        'layers': [
            {
                'id': 'layer0',
                'name': 'Body',
                'opacity': 1.0,
                'locked': False,
                'pixels': '5:#000000|2:#ff0000|9:#000000',
            },
            {
                'id': 'layer1',
                'name': 'Outline',
                'opacity': 0.5,
                'locked': True,
                'pixels': '16:#ffffff',
            },
        ],
        'animations': {
            'walk': {
                'frames': [
                    {'layerRefs': ['layer0'], 'duration': 100},
                    {'layerRefs': ['layer0', 'layer1'], 'duration': 150},
                ]
            },
        },
        'palette': ['#000000', '#ff0000', '#ffffff'],
        'variants': {
            'blue': {'paletteMap': {'#ff0000': '#0000ff'}},
        },
        'generatorComponents': {
            'heads': [{'id': 'human', 'layers': ['Body'], 'palette': ['skin']}],
            'colorSchemes': {'skin': ['#f4c2a1', '#8b5a3c']},
        },
    }
