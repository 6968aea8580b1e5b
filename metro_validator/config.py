"""Validation thresholds and their YAML configuration file.

Defaults match the Indian metro networks the tool was built for. Any value
can be overridden from a YAML file whose keys mirror ``ValidationConfig``::

    region:
      name: India
      min_lat: 8
      max_lat: 37
    max_station_distance_km: 60
"""

from pathlib import Path

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

DEFAULT_TIMEZONES = ("Asia/Kolkata", "Asia/Delhi", "Asia/Mumbai", "UTC")


class ConfigError(Exception):
    """Raised when a configuration file cannot be loaded."""


class RegionBox(BaseModel):
    """Bounding box of the service region (soft check)."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    name: str = "India"
    min_lat: float = 8
    max_lat: float = 37
    min_lng: float = 68
    max_lng: float = 97

    def contains(self, lat: float, lng: float) -> bool:
        """Check if a coordinate lies inside the box."""
        return self.min_lat <= lat <= self.max_lat and self.min_lng <= lng <= self.max_lng


class ValidationConfig(BaseModel):
    """Tunable thresholds for the validators."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    region: RegionBox = Field(default_factory=RegionBox)
    valid_timezones: tuple[str, ...] = DEFAULT_TIMEZONES

    # Station distance from its city center, in km
    max_station_distance_km: float = 50
    warn_station_distance_km: float = 30

    # Connection timings, in seconds
    min_travel_time_seconds: int = 30
    max_travel_time_seconds: int = 600
    min_stop_time_seconds: int = 10
    max_stop_time_seconds: int = 120


DEFAULT_CONFIG = ValidationConfig()


def load_config(path: str | Path) -> ValidationConfig:
    """Load a ValidationConfig from a YAML file.

    Raises:
        ConfigError: If the file cannot be read or holds invalid settings.
    """
    path = Path(path)

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e
    except OSError as e:
        raise ConfigError(f"Cannot read config {path}: {e}") from e

    if data is None:
        return DEFAULT_CONFIG

    if not isinstance(data, dict):
        raise ConfigError(f"Expected YAML mapping in {path}, got {type(data).__name__}")

    try:
        return ValidationConfig.model_validate(data)
    except ValidationError as e:
        problems = "; ".join(
            f"{'.'.join(str(x) for x in err['loc'])}: {err['msg']}" for err in e.errors()
        )
        raise ConfigError(f"Invalid config {path}: {problems}") from e
