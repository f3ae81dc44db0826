"""Error types raised by config infrastructure."""

from pathlib import Path

from weather_station.core.errors import WeatherStationError


class ConfigValidationError(WeatherStationError):
    """Raised when the loaded config is not valid YAML or violates the schema."""

    def __init__(self, reason: str) -> None:
        super().__init__(f"Failed to validate config: {reason}")


class ConfigLoadError(WeatherStationError):
    """Raised when the config file cannot be opened or read."""

    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(f"Failed to load config: file not found: {path}")
