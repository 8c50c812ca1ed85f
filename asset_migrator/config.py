"""Application configuration management."""
import httpx
from pydantic import ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from asset_migrator.exceptions import ConfigurationError


class Settings(BaseSettings):
    """Migration settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Source content API
    base_url: str
    auth_token: str

    # Destination media host
    cloudinary_key: str
    cloudinary_secret: str
    cloudinary_url: str
    folder_name: str

    # Batching
    chunk_size: int

    # HTTP transport
    http_timeout: float = 30.0
    http_read_timeout: float = 120.0

    # Logging
    log_level: str = "INFO"

    @field_validator(
        "base_url",
        "auth_token",
        "cloudinary_key",
        "cloudinary_secret",
        "cloudinary_url",
        "folder_name",
    )
    @classmethod
    def not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("must not be blank")
        return value

    @field_validator("base_url")
    @classmethod
    def strip_trailing_slash(cls, value: str) -> str:
        return value.rstrip("/")

    @field_validator("chunk_size", mode="before")
    @classmethod
    def chunk_size_is_integer(cls, value):
        # bool is an int subclass
        if isinstance(value, bool):
            raise ValueError("must be a positive integer")
        return value

    @field_validator("chunk_size")
    @classmethod
    def chunk_size_is_positive(cls, value: int) -> int:
        if value < 1:
            raise ValueError("must be a positive integer")
        return value

    @field_validator("log_level")
    @classmethod
    def known_log_level(cls, value: str) -> str:
        value = value.strip().upper()
        if value not in ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"):
            raise ValueError("must be one of CRITICAL, ERROR, WARNING, INFO, DEBUG")
        return value

    @property
    def timeout(self) -> httpx.Timeout:
        """Transport timeout shared by every request of a run."""
        return httpx.Timeout(self.http_timeout, read=self.http_read_timeout)


def load_settings(**overrides) -> Settings:
    """
    Build settings from the environment, failing with a readable error.

    Raises:
        ConfigurationError: If a required value is missing or malformed.
    """
    try:
        return Settings(**overrides)
    except ValidationError as e:
        problems = ", ".join(
            f"{'.'.join(str(part) for part in error['loc']).upper()}: {error['msg']}"
            for error in e.errors()
        )
        raise ConfigurationError(f"Invalid configuration ({problems})") from e
