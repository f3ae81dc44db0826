"""StructlogStationObserver — production observer that delegates to structlog."""

import structlog


class StructlogStationObserver:
    """Logs station domain events to structlog.

    Does NOT inherit from StationObserver (structural typing via Protocol).
    """

    def __init__(self) -> None:
        self._log = structlog.get_logger()

    def listener_registered(self, listener_name: str, total_listeners: int) -> None:
        self._log.debug(
            "station.listener.registered",
            listener=listener_name,
            total_listeners=total_listeners,
        )

    def listener_removed(self, listener_name: str, total_listeners: int) -> None:
        self._log.debug(
            "station.listener.removed",
            listener=listener_name,
            total_listeners=total_listeners,
        )

    def listener_remove_ignored(self, listener_name: str) -> None:
        self._log.debug(
            "station.listener.remove_ignored",
            listener=listener_name,
            message="Listener was not registered",
        )

    def measurements_changed(
        self,
        temperature: float,
        humidity: float,
        pressure: float,
        total_listeners: int,
    ) -> None:
        self._log.info(
            "station.measurements.changed",
            temperature=temperature,
            humidity=humidity,
            pressure=pressure,
            total_listeners=total_listeners,
        )

    def listener_failed(self, listener_name: str, reason: str) -> None:
        self._log.error(
            "station.listener.failed",
            listener=listener_name,
            reason=reason,
        )
