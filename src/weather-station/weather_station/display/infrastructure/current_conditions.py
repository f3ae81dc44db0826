"""Display showing the latest temperature and humidity."""

from weather_station.display.domain.formatting import format_number
from weather_station.display.domain.output import DisplayOutput
from weather_station.station.domain.reading import Reading


class CurrentConditionsDisplay:
    """Shows the most recent temperature and humidity.

    Pressure is received with every Reading but is not kept or shown.

    Does NOT inherit from ReadingListener (structural typing via Protocol).
    """

    name = "current_conditions"

    def __init__(self, output: DisplayOutput) -> None:
        self._output = output
        self._temperature = 0.0
        self._humidity = 0.0

    @property
    def temperature(self) -> float:
        return self._temperature

    @property
    def humidity(self) -> float:
        return self._humidity

    def on_update(self, reading: Reading) -> None:
        self._temperature = reading.temperature
        self._humidity = reading.humidity
        self.render()

    def render(self) -> None:
        self._output.show(
            display=self.name,
            text=(
                f"Current conditions: {format_number(self._temperature)}F degrees"
                f" and {format_number(self._humidity)}% humidity"
            ),
        )
