"""Configuration loading with Pydantic validation.

The configuration file is YAML. Every section except `socket` and `days`
has documented defaults; any validation failure is fatal at startup and
surfaces as a ConfigurationError.
"""

import logging
import os
from pathlib import Path
from typing import Annotated

import yaml
from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    StrictBool,
    StrictInt,
    StrictStr,
    ValidationError,
    field_validator,
)

from .errors import ConfigurationError

logger = logging.getLogger(__name__)

CONFIG_DIR_NAME = "status-clock"
CONFIG_FILE_NAME = "config.yaml"

DEFAULT_WIDTH = 480
DEFAULT_HEIGHT = 320
DEFAULT_MARGIN = 2

PositiveInt = Annotated[StrictInt, Field(gt=0)]


# =============================================================================
# Configuration Models
# =============================================================================


class Point(BaseModel):
    """Screen position of a label's left baseline."""

    x: StrictInt = 0
    y: StrictInt = 0

    def to_tuple(self) -> tuple[int, int]:
        return (self.x, self.y)


class FontsConfig(BaseModel):
    """Font descriptors per label, fontconfig style (`Family:style=bold:size=N`)."""

    model_config = ConfigDict(extra="forbid")

    time: StrictStr = "Noto Sans:style=bold:size=89"
    day: StrictStr = "Noto Sans:style=bold:size=60"
    date: StrictStr = "Noto Sans:style=bold:size=60"
    weather: StrictStr = "Noto Sans:style=bold:size=50"


class CoordinatesConfig(BaseModel):
    """Label positions in surface pixels."""

    model_config = ConfigDict(extra="forbid")

    time: Point = Field(default_factory=lambda: Point(x=DEFAULT_MARGIN, y=110))
    day: Point = Field(default_factory=lambda: Point(x=DEFAULT_MARGIN, y=200))
    date: Point = Field(default_factory=lambda: Point(x=DEFAULT_WIDTH // 2, y=200))
    weather: Point = Field(default_factory=lambda: Point(x=DEFAULT_MARGIN, y=300))


class ThemeColors(BaseModel):
    """Color name overrides for one theme bucket. Unset roles use the bucket default."""

    model_config = ConfigDict(extra="forbid")

    time: StrictStr | None = None
    day: StrictStr | None = None
    date: StrictStr | None = None
    weather: StrictStr | None = None
    background: StrictStr | None = None


class ThemesConfig(BaseModel):
    """Color overrides for each of the five theme buckets."""

    model_config = ConfigDict(extra="forbid")

    early: ThemeColors = Field(default_factory=ThemeColors)
    morning: ThemeColors = Field(default_factory=ThemeColors)
    afternoon: ThemeColors = Field(default_factory=ThemeColors)
    evening: ThemeColors = Field(default_factory=ThemeColors)
    unsync: ThemeColors = Field(default_factory=ThemeColors)


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: StrictStr = Field("INFO", description="Log level")
    format: StrictStr = Field("simple", description="Format: simple, structured")
    file: StrictStr | None = Field(None, description="Log file path")
    max_size_mb: StrictInt = Field(10, ge=1, description="Max log file size")
    backup_count: StrictInt = Field(3, ge=0, description="Number of backup files")


class Config(BaseModel):
    """Root configuration model."""

    socket: StrictStr = Field(..., min_length=1, description="Status socket path")
    echo: StrictBool = Field(False, description="Echo processed lines back to publishers")
    width: PositiveInt = DEFAULT_WIDTH
    height: PositiveInt = DEFAULT_HEIGHT
    days: list[StrictStr] = Field(..., description="Day names, Sunday first")
    fonts: FontsConfig = Field(default_factory=FontsConfig)
    coordinates: CoordinatesConfig = Field(default_factory=CoordinatesConfig)
    themes: ThemesConfig = Field(default_factory=ThemesConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @field_validator("days")
    @classmethod
    def validate_days(cls, v: list[str]) -> list[str]:
        """Require one name per weekday."""
        if len(v) != 7:
            raise ValueError(f"require seven day entries, got {len(v)}")
        return v

    @property
    def socket_path(self) -> Path:
        return Path(self.socket).expanduser()


# =============================================================================
# Loading
# =============================================================================


def default_config_path() -> Path:
    """Return `$XDG_CONFIG_HOME/status-clock/config.yaml` (defaults to ~/.config)."""
    base = os.environ.get("XDG_CONFIG_HOME") or Path.home() / ".config"
    return Path(base) / CONFIG_DIR_NAME / CONFIG_FILE_NAME


def parse_config(data: object, source: str = "<config>") -> Config:
    """Validate already-parsed configuration data.

    Raises:
        ConfigurationError: If the data is not a mapping or fails validation
    """
    if not isinstance(data, dict):
        raise ConfigurationError(
            "Configuration must be a mapping",
            details={"source": source, "type": type(data).__name__},
        )

    try:
        return Config.model_validate(data)
    except ValidationError as e:
        problems = "; ".join(
            f"{'.'.join(str(part) for part in err['loc']) or '<root>'}: {err['msg']}"
            for err in e.errors()
        )
        raise ConfigurationError(
            f"Invalid configuration: {problems}",
            details={"source": source},
            cause=e,
        ) from e


def load_config(path: str | Path) -> Config:
    """Load and validate the configuration file.

    Args:
        path: Path to the YAML configuration file

    Returns:
        Validated configuration

    Raises:
        ConfigurationError: If the file cannot be read, parsed or validated
    """
    config_path = Path(path).expanduser()
    logger.debug("Configuration file: %s", config_path)

    try:
        with open(config_path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except OSError as e:
        raise ConfigurationError(
            "Cannot read configuration file",
            details={"path": str(config_path), "error": e.strerror or str(e)},
            cause=e,
        ) from e
    except yaml.YAMLError as e:
        raise ConfigurationError(
            "Malformed configuration file",
            details={"path": str(config_path), "error": str(e)},
            cause=e,
        ) from e

    config = parse_config(data, source=str(config_path))
    logger.info("Loaded config from %s", config_path)
    return config
