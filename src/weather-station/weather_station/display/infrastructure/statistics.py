"""Running average, maximum and minimum temperature display."""

import math

from weather_station.display.domain.formatting import format_number
from weather_station.display.domain.output import DisplayOutput
from weather_station.station.domain.reading import Reading


class StatisticsDisplay:
    """Accumulates temperature statistics over every Reading received.

    ``average`` is NaN until the first Reading arrives; ``render`` reports
    "no readings yet" in that case instead of dividing by zero.

    Does NOT inherit from ReadingListener (structural typing via Protocol).
    """

    name = "statistics"

    def __init__(self, output: DisplayOutput) -> None:
        self._output = output
        self._max_temperature = -math.inf
        self._min_temperature = math.inf
        self._temperature_sum = 0.0
        self._num_readings = 0

    @property
    def num_readings(self) -> int:
        return self._num_readings

    @property
    def average(self) -> float:
        if self._num_readings == 0:
            return math.nan
        return self._temperature_sum / self._num_readings

    @property
    def max_temperature(self) -> float:
        return self._max_temperature

    @property
    def min_temperature(self) -> float:
        return self._min_temperature

    def on_update(self, reading: Reading) -> None:
        self._temperature_sum += reading.temperature
        self._num_readings += 1
        if reading.temperature > self._max_temperature:
            self._max_temperature = reading.temperature
        if reading.temperature < self._min_temperature:
            self._min_temperature = reading.temperature
        self.render()

    def render(self) -> None:
        if self._num_readings == 0:
            text = "Avg/Max/Min temperature = no readings yet"
        else:
            text = (
                "Avg/Max/Min temperature = "
                f"{format_number(self.average)}"
                f"/{format_number(self._max_temperature)}"
                f"/{format_number(self._min_temperature)}"
            )
        self._output.show(display=self.name, text=text)
