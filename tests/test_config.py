"""
Tests for library settings.
"""

from spritecreator.config import Settings


def test_defaults():
    settings = Settings()
    assert settings.DEFAULT_FILL_COLOR == '#000000'
    assert settings.DEFAULT_PIXEL_SIZE == 1
    assert settings.DOCUMENT_VERSION == 1
    assert settings.JSON_INDENT == 2
    assert settings.MAX_ASE_FILE_SIZE == 4 * 1024 * 1024


def test_environment_override(monkeypatch):
    monkeypatch.setenv('SPRITECREATOR_DEFAULT_FILL_COLOR', '#ffffff')
    monkeypatch.setenv('SPRITECREATOR_JSON_INDENT', '4')
    settings = Settings()
    assert settings.DEFAULT_FILL_COLOR == '#ffffff'
    assert settings.JSON_INDENT == 4
