"""Error types raised by the station subject."""

from weather_station.core.errors import WeatherStationError


class InvalidListenerError(WeatherStationError):
    """Raised when a missing (None) listener is registered."""

    def __init__(self) -> None:
        super().__init__("Failed to register listener: listener must not be None")


class ListenerNotificationError(WeatherStationError):
    """Raised in strict mode when a listener fails during a broadcast.

    Listeners registered after the failing one were not notified.
    """

    def __init__(self, listener_name: str, cause: Exception) -> None:
        self.listener_name = listener_name
        self.cause = cause
        super().__init__(
            f"Failed to notify listener '{listener_name}': "
            f"{type(cause).__name__}: {cause}"
        )
