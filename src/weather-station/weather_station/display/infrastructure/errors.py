"""Error types raised by display infrastructure."""

from weather_station.core.errors import WeatherStationError


class DisplayTypeNotSupportedError(WeatherStationError):
    """Raised when a display name has no registered implementation."""

    def __init__(self, display_type: str) -> None:
        self.display_type = display_type
        super().__init__(
            f"Failed to create display: unsupported display type '{display_type}'"
        )
