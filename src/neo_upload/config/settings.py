"""
Settings for the neo-upload host integration.

Values are read from the environment (prefix ``NEO_UPLOAD_``) or a local
``.env`` file.
"""
import tempfile
from functools import lru_cache
from typing import Union

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from ..core.value_objects.file_size import human_readable_to_bytes


class UploadSettings(BaseSettings):
    """Upload handling settings used when collecting files from a request."""

    model_config = SettingsConfigDict(
        env_prefix="NEO_UPLOAD_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    # Directory where incoming files are spooled before validation
    tmp_dir: str = Field(default_factory=tempfile.gettempdir)

    # Largest accepted upload, bytes or human-readable ("100M")
    max_file_size: int = Field(default=100 * 1024 * 1024, ge=0)

    # Read size when copying an incoming file to its temp path
    chunk_size: int = Field(default=1024 * 1024, gt=0)

    @field_validator("max_file_size", mode="before")
    @classmethod
    def parse_max_file_size(cls, value: Union[int, str]) -> int:
        """Accept both byte counts and human-readable sizes."""
        if isinstance(value, str):
            value = value.strip()
            if value.isdigit():
                return int(value)
            return human_readable_to_bytes(value)
        return value


@lru_cache()
def get_settings() -> UploadSettings:
    """Get cached upload settings."""
    return UploadSettings()
