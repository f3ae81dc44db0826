"""Forecast rule — maps a temperature/humidity pair to a Forecast."""

from enum import StrEnum


class Forecast(StrEnum):
    IMPROVING = "Improving weather on the way!"
    COOLER_RAINY = "Watchout for cooler, rainy weather!"
    MORE_OF_THE_SAME = "More of the same"


def forecast_for(temperature: float, humidity: float) -> Forecast:
    """Apply the three-way forecast rule, first match wins.

    Comparisons use exact float equality: 80.0001 F does not count as 80 F.
    """
    if temperature == 80 and humidity == 65:
        return Forecast.IMPROVING
    if temperature == 82 and humidity >= 70:
        return Forecast.COOLER_RAINY
    return Forecast.MORE_OF_THE_SAME
