"""ForecastDisplay — renders a simple rule-based forecast for each Reading."""

from weather_station.display.domain.forecast import Forecast, forecast_for
from weather_station.display.domain.output import DisplayOutput
from weather_station.station.domain.reading import Reading


class ForecastDisplay:
    """Shows the forecast for the latest temperature and humidity.

    Does NOT inherit from ReadingListener (structural typing via Protocol).
    """

    name = "forecast"

    def __init__(self, output: DisplayOutput) -> None:
        self._output = output
        self._last_forecast: Forecast | None = None

    @property
    def last_forecast(self) -> Forecast | None:
        return self._last_forecast

    def on_update(self, reading: Reading) -> None:
        self._last_forecast = forecast_for(
            temperature=reading.temperature, humidity=reading.humidity
        )
        self._output.show(
            display=self.name, text=f"Forecast: {self._last_forecast.value}"
        )
