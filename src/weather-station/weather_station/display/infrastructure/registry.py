"""Maps a configured display name to its listener class."""

from collections.abc import Callable

from weather_station.display.domain.output import DisplayOutput
from weather_station.display.infrastructure.current_conditions import (
    CurrentConditionsDisplay,
)
from weather_station.display.infrastructure.errors import DisplayTypeNotSupportedError
from weather_station.display.infrastructure.forecast import ForecastDisplay
from weather_station.display.infrastructure.statistics import StatisticsDisplay
from weather_station.station.domain.listener import ReadingListener

_DISPLAY_FACTORIES: dict[str, Callable[[DisplayOutput], ReadingListener]] = {
    CurrentConditionsDisplay.name: CurrentConditionsDisplay,
    StatisticsDisplay.name: StatisticsDisplay,
    ForecastDisplay.name: ForecastDisplay,
}

SUPPORTED_DISPLAYS: tuple[str, ...] = tuple(_DISPLAY_FACTORIES)


def create_display(display_type: str, output: DisplayOutput) -> ReadingListener:
    """Return a new display listener of the given type writing to *output*.

    Raises:
        DisplayTypeNotSupportedError: if display_type is not a known display.
    """
    factory = _DISPLAY_FACTORIES.get(display_type)
    if factory is None:
        raise DisplayTypeNotSupportedError(display_type=display_type)
    return factory(output)
