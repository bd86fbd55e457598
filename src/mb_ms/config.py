"""Centralized application configuration."""

import logging
import os
import tomllib
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, computed_field

from mb_ms.errors import ConfigError

logger = logging.getLogger(__name__)

DEFAULT_DATA_DIR = Path.home() / ".local" / "mb-ms"
DATA_DIR_ENV = "MB_MS_DATA_DIR"


class Config(BaseModel):
    """Application-wide configuration."""

    model_config = ConfigDict(frozen=True)

    data_dir: Path = Field(description="Base directory for all application data")
    long_format: bool = Field(default=False, description="Format milliseconds verbosely ('5 seconds') by default")

    @computed_field(description="Optional TOML configuration file")
    @property
    def config_path(self) -> Path:
        """Optional TOML configuration file."""
        return self.data_dir / "config.toml"

    @computed_field(description="Rotating log file")
    @property
    def log_path(self) -> Path:
        """Rotating log file."""
        return self.data_dir / "mb-ms.log"

    @staticmethod
    def build(data_dir: Path | None = None) -> "Config":
        """Build a Config instance from defaults and optional config.toml."""
        resolved_dir = data_dir if data_dir is not None else DEFAULT_DATA_DIR
        config_path = resolved_dir / "config.toml"

        kwargs: dict[str, Any] = {"data_dir": resolved_dir}
        if config_path.is_file():
            try:
                with config_path.open("rb") as f:
                    toml_data = tomllib.load(f)
            except tomllib.TOMLDecodeError as e:
                raise ConfigError(f"Invalid config file {config_path}: {e}") from e
            fmt = toml_data.get("format", {})
            if isinstance(fmt, dict) and "long" in fmt:
                val = fmt["long"]
                if isinstance(val, bool):
                    kwargs["long_format"] = val
                else:
                    logger.warning("Ignoring format.long=%r in %s: expected true or false", val, config_path)

        return Config(**kwargs)


def resolve_data_dir(data_dir: Path | None) -> Path:
    """Pick the data directory: explicit option, then environment, then default."""
    if data_dir is not None:
        return data_dir
    if env_dir := os.environ.get(DATA_DIR_ENV):
        return Path(env_dir)
    return DEFAULT_DATA_DIR
