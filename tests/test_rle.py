"""
Tests for the run-length pixel codec.
"""

import pytest

from spritecreator.codecs.rle import count_rle_pixels, decode_rle, encode_rle, iter_runs
from spritecreator.exceptions import EncodingError, InvalidColorError, RLEDecodeError


def test_encode_runs():
    """Adjacent equal colors collapse into one run."""
    pixels = ['#000000'] * 3 + ['#ffffff'] + ['#000000'] * 2
    assert encode_rle(pixels) == '3:#000000|1:#ffffff|2:#000000'


def test_encode_empty():
    assert encode_rle([]) == ''
    assert decode_rle('') == []


@pytest.mark.parametrize('pixels', [
    ['#000000'],
    ['#000000', '#FF0000', '#ff0000', '#ff0000', '#00ff00', '#000000'],
    ['#000000', '#111111', '#222222', '#333333'],
    ['#000000', '#ffffff'] * 5,
    ['#abcdef'] * 500 + ['#123456'],
    ['#123456'] + ['#abcdef'] * 500,
], ids=['single', 'mixed', 'distinct', 'alternating', 'long-run-then-one', 'one-then-long-run'])
def test_round_trip(pixels):
    """Decoding an encoded sequence restores it exactly."""
    assert decode_rle(encode_rle(pixels)) == pixels


def test_case_is_preserved():
    """Colors differing only in case are separate runs."""
    assert encode_rle(['#ff0000', '#FF0000']) == '1:#ff0000|1:#FF0000'


def test_compression():
    """A uniform 32x32 layer encodes as a single run."""
    encoded = encode_rle(['#123456'] * 1024)
    assert encoded == '1024:#123456'
    assert len(encoded) < 1024


def test_encode_validates_all_colors():
    with pytest.raises(InvalidColorError):
        encode_rle(['#000000', '#00000', '#000000'])


def test_iter_runs():
    assert list(iter_runs('2:#000000|1:#ffffff')) == [(2, '#000000'), (1, '#ffffff')]


def test_count_pixels():
    assert count_rle_pixels('1000:#000000|24:#ffffff') == 1024
    assert count_rle_pixels('') == 0


@pytest.mark.parametrize('encoded', [
    '3#000000',          # Missing separator
    '0:#000000',         # Zero count
    '-1:#000000',        # Negative count
    '+2:#000000',
    '1.5:#000000',
    ' 2:#000000',
    ':#000000',
    '2:#00000',          # Bad color
    '2:#000000|',        # Trailing separator
    '2:#000000||1:#ffffff',
    '2:#000000:1',
])
def test_decode_malformed(encoded):
    """Every malformed run raises the same decode error."""
    with pytest.raises(RLEDecodeError, match='Invalid RLE encoded data'):
        decode_rle(encoded)


def test_decode_error_cause_is_chained():
    with pytest.raises(RLEDecodeError) as exc_info:
        decode_rle('2:#nothex')
    assert isinstance(exc_info.value.__cause__, InvalidColorError)
    assert isinstance(exc_info.value, EncodingError)


def test_decode_non_string():
    with pytest.raises(RLEDecodeError):
        decode_rle(None)
