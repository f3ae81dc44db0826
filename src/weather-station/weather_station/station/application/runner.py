"""StationRunner — wires displays to a WeatherData subject and replays readings."""

from collections.abc import Callable
from typing import TypeAlias

from weather_station.config.domain.config import StationConfig
from weather_station.station.application.weather_data import WeatherData
from weather_station.station.domain.listener import ReadingListener
from weather_station.station.domain.observer import StationObserver

DisplayFactory: TypeAlias = Callable[[str], ReadingListener]


class StationRunner:
    """Drives a station run from a StationConfig.

    The runner only uses the public WeatherData contract: it registers one
    listener per configured display, in order, then calls ``set_measurements``
    once per configured reading. Displays are built by the injected factory
    so tests can substitute recording listeners.
    """

    def __init__(
        self,
        config: StationConfig,
        display_factory: DisplayFactory,
        observer: StationObserver,
        isolate_failures: bool | None = None,
    ) -> None:
        self._config = config
        self._display_factory = display_factory
        self._observer = observer
        self._isolate_failures = (
            config.isolate_failures if isolate_failures is None else isolate_failures
        )

    def run(self) -> WeatherData:
        """Build the station, replay every configured reading, and return it.

        Raises:
            ListenerNotificationError: if failure isolation is off and a display raises.
        """
        station = WeatherData(
            observer=self._observer, isolate_failures=self._isolate_failures
        )
        for display_type in self._config.displays:
            station.register(self._display_factory(display_type))

        for reading in self._config.readings:
            station.set_measurements(
                temperature=reading.temperature,
                humidity=reading.humidity,
                pressure=reading.pressure,
            )
        return station
