"""Observer port for the station domain — defines events in domain language."""

from typing import Protocol


class StationObserver(Protocol):
    """Observer port emitting structured events from the WeatherData subject.

    Listeners are identified by ``listener_name`` (their class name) so that
    implementations never hold references to the listeners themselves.
    """

    def listener_registered(self, listener_name: str, total_listeners: int) -> None: ...

    def listener_removed(self, listener_name: str, total_listeners: int) -> None: ...

    def listener_remove_ignored(self, listener_name: str) -> None: ...

    def measurements_changed(
        self,
        temperature: float,
        humidity: float,
        pressure: float,
        total_listeners: int,
    ) -> None: ...

    def listener_failed(self, listener_name: str, reason: str) -> None: ...


class NullStationObserver:
    """Discards every event. Used when no observer is injected."""

    def listener_registered(self, listener_name: str, total_listeners: int) -> None:
        pass

    def listener_removed(self, listener_name: str, total_listeners: int) -> None:
        pass

    def listener_remove_ignored(self, listener_name: str) -> None:
        pass

    def measurements_changed(
        self,
        temperature: float,
        humidity: float,
        pressure: float,
        total_listeners: int,
    ) -> None:
        pass

    def listener_failed(self, listener_name: str, reason: str) -> None:
        pass
