"""Library configuration."""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Library settings."""

    # Bitmap defaults
    DEFAULT_FILL_COLOR: str = "#000000"

    # Document defaults
    DEFAULT_PIXEL_SIZE: int = 1
    DOCUMENT_VERSION: int = 1
    JSON_INDENT: int = 2

    # ASE import
    MAX_ASE_FILE_SIZE: int = 4 * 1024 * 1024  # Bytes

    model_config = {"env_prefix": "SPRITECREATOR_"}


settings = Settings()
