"""Base exception class for all weather-station-specific errors."""


class WeatherStationError(Exception):
    """Base class for all weather-station errors."""

    def __init__(self, message: str, retriable: bool = False) -> None:
        super().__init__(message)
        self.retriable = retriable
