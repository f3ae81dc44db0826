"""WeatherData — the subject that broadcasts Readings to registered listeners."""

from weather_station.station.domain.errors import (
    InvalidListenerError,
    ListenerNotificationError,
)
from weather_station.station.domain.listener import ReadingListener
from weather_station.station.domain.observer import (
    NullStationObserver,
    StationObserver,
)
from weather_station.station.domain.reading import ZERO_READING, Reading


def _name_of(listener: ReadingListener) -> str:
    return type(listener).__name__


class WeatherData:
    """Holds the current Reading and an ordered registry of listeners.

    Listeners are notified synchronously, in registration order, once per
    ``set_measurements`` call. The registry is snapshotted before each
    broadcast, so listeners may register, remove, or set new measurements
    from inside ``on_update`` without affecting the broadcast in flight.

    With ``isolate_failures=True`` a listener that raises is reported to the
    observer and the remaining listeners are still notified. With
    ``isolate_failures=False`` the first failure aborts the broadcast and is
    re-raised as ListenerNotificationError.
    """

    def __init__(
        self,
        observer: StationObserver | None = None,
        isolate_failures: bool = True,
    ) -> None:
        self._observer: StationObserver = observer or NullStationObserver()
        self._isolate_failures = isolate_failures
        self._listeners: list[ReadingListener] = []
        self._reading: Reading = ZERO_READING

    @property
    def reading(self) -> Reading:
        return self._reading

    @property
    def listeners(self) -> tuple[ReadingListener, ...]:
        return tuple(self._listeners)

    @property
    def isolate_failures(self) -> bool:
        return self._isolate_failures

    def register(self, listener: ReadingListener) -> None:
        """Append *listener* to the registry. Duplicates are allowed.

        Raises:
            InvalidListenerError: if listener is None.
        """
        if listener is None:
            raise InvalidListenerError()
        self._listeners.append(listener)
        self._observer.listener_registered(
            listener_name=_name_of(listener),
            total_listeners=len(self._listeners),
        )

    def remove(self, listener: ReadingListener) -> None:
        """Remove the first registered occurrence of *listener*.

        Removing a listener that is not registered is a no-op.
        """
        try:
            self._listeners.remove(listener)
        except ValueError:
            self._observer.listener_remove_ignored(listener_name=_name_of(listener))
            return
        self._observer.listener_removed(
            listener_name=_name_of(listener),
            total_listeners=len(self._listeners),
        )

    def notify_all(self) -> None:
        """Deliver the current Reading to every registered listener, in order.

        Raises:
            ListenerNotificationError: if isolation is disabled and a listener raises.
        """
        reading = self._reading
        for listener in tuple(self._listeners):
            try:
                listener.on_update(reading)
            except Exception as exc:
                if not self._isolate_failures:
                    raise ListenerNotificationError(
                        listener_name=_name_of(listener), cause=exc
                    ) from exc
                self._observer.listener_failed(
                    listener_name=_name_of(listener),
                    reason=f"{type(exc).__name__}: {exc}",
                )

    def set_measurements(
        self, temperature: float, humidity: float, pressure: float
    ) -> None:
        """Replace the current Reading and immediately broadcast it."""
        self._reading = Reading(
            temperature=temperature, humidity=humidity, pressure=pressure
        )
        self._observer.measurements_changed(
            temperature=temperature,
            humidity=humidity,
            pressure=pressure,
            total_listeners=len(self._listeners),
        )
        self.notify_all()
