"""Settings data models for servicecfg."""

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field, field_validator


class StorageSettings(BaseModel):
    """Where service files are stored."""

    root_dir: Path = Field(default_factory=lambda: Path.home() / ".servicecfg" / "config")

    @field_validator("root_dir", mode="before")
    @classmethod
    def expand_root_dir(cls, v: str | Path) -> Path:
        """Expand user path for root_dir."""
        if isinstance(v, str):
            return Path(v).expanduser()
        return v


class CodecSettings(BaseModel):
    """Options passed to the JSON5 codec."""

    indent: int = Field(default=2, ge=0)
    quote_keys: bool = False
    trailing_commas: bool = True


class LoggingSettings(BaseModel):
    """Logging configuration."""

    level: Literal["INFO", "DEBUG", "TRACE"] = "INFO"


class StoreSettings(BaseModel):
    """Root settings model."""

    storage: StorageSettings = Field(default_factory=StorageSettings)
    codec: CodecSettings = Field(default_factory=CodecSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)
