"""Configuration and settings management."""

from typing import Optional
from pydantic_settings import BaseSettings
from pydantic import field_validator
from pathlib import Path

class Settings(BaseSettings):
    # Gemini vision
    GEMINI_API_KEY: Optional[str] = None
    GEMINI_MODEL: str = "gemini-2.0-flash"
    VISION_TIMEOUT_S: float = 30.0
    VISION_MAX_EDGE_PX: int = 1600

    # Catalogs
    POKEMON_TCG_API_KEY: Optional[str] = None
    CATALOG_TIMEOUT_S: float = 10.0
    IMAGE_FALLBACK_TIMEOUT_S: float = 5.0
    NEAR_NUMBER_TOLERANCE: int = 5

    # Display
    DEFAULT_LANGUAGE: str = "he"
    EUR_TO_LOCAL_RATE: float = 4.0
    USD_TO_LOCAL_RATE: float = 3.5

    # Logging
    LOG_LEVEL: str = "INFO"

    # Album storage
    ALBUM_DB_PATH: str = "cache/album.db"

    @field_validator('GEMINI_API_KEY', 'POKEMON_TCG_API_KEY', mode='before')
    @classmethod
    def validate_api_key(cls, v):
        """Convert empty/whitespace strings to None."""
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @field_validator('LOG_LEVEL', mode='before')
    @classmethod
    def validate_log_level(cls, v):
        """Convert empty/whitespace strings to default."""
        if isinstance(v, str) and not v.strip():
            return "INFO"
        return v

    @field_validator('ALBUM_DB_PATH', mode='before')
    @classmethod
    def validate_album_path(cls, v):
        """Convert empty/whitespace strings to default."""
        if isinstance(v, str) and not v.strip():
            return "cache/album.db"
        return v

    @field_validator('DEFAULT_LANGUAGE', mode='before')
    @classmethod
    def validate_language(cls, v):
        """Fall back to Hebrew for anything but a supported locale."""
        if isinstance(v, str) and v.strip().lower() in ("he", "en"):
            return v.strip().lower()
        return "he"

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
        "extra": "ignore"
    }

# Global settings instance
settings = Settings()

def resolve_album_path(db_path: Optional[str] = None) -> Path:
    """Resolve the album database path, relative paths against the project root."""
    path = Path(db_path or settings.ALBUM_DB_PATH)
    if not path.is_absolute():
        project_root = Path(__file__).parent.parent.parent
        path = project_root / path
    return path

def ensure_album_dir(db_path: Optional[str] = None) -> Path:
    """Ensure the album database directory exists and return the database path."""
    path = resolve_album_path(db_path)
    path.parent.mkdir(parents=True, exist_ok=True)
    return path
