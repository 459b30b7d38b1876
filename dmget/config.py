"""CLI configuration with environment variable support."""

import tempfile
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_BASE_URL = "https://ed.devmountain.com/materials"
DEFAULT_DESTINATION = Path("~/src")


class Settings(BaseSettings):
    """dmget configuration loaded from environment variables.

    Loads from environment (DMGET_*), .env file, or defaults.
    """

    model_config = SettingsConfigDict(
        env_prefix="DMGET_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Remote materials server
    base_url: str = DEFAULT_BASE_URL
    request_timeout: float = 30.0

    # Directories
    destination: Path = Field(default=DEFAULT_DESTINATION, validate_default=True)
    temp_dir: Path | None = None

    @field_validator("base_url", mode="after")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        """Drop trailing slashes so URLs join cleanly."""
        return v.rstrip("/")

    @field_validator("destination", mode="after")
    @classmethod
    def expand_destination(cls, v: Path) -> Path:
        """Expand ~ and make the destination absolute."""
        return v.expanduser().resolve()

    @field_validator("temp_dir", mode="before")
    @classmethod
    def parse_null_temp_dir(cls, v: str | Path | None) -> str | Path | None:
        """Convert an empty or 'null' string to None."""
        if isinstance(v, str) and v.lower() in ("null", "none", ""):
            return None
        return v

    @property
    def staging_dir(self) -> Path:
        """Directory holding the downloaded archive while it is extracted."""
        if self.temp_dir is not None:
            return self.temp_dir.expanduser()
        return Path(tempfile.gettempdir())
