"""Top-level StationConfig aggregate — the root configuration object."""

from typing import Literal, TypeAlias

from pydantic import BaseModel, Field

from weather_station.station.domain.reading import Reading

DisplayType: TypeAlias = Literal["current_conditions", "statistics", "forecast"]

DEFAULT_DISPLAYS: list[DisplayType] = ["current_conditions", "statistics", "forecast"]


class StationConfig(BaseModel, frozen=True):
    """Root configuration aggregate for a weather-station run.

    ``displays`` are created and registered in the order listed, which is
    also the order they are notified in.
    """

    name: str = Field(min_length=1)
    isolate_failures: bool = True
    displays: list[DisplayType] = Field(
        default_factory=lambda: list(DEFAULT_DISPLAYS), min_length=1
    )
    readings: list[Reading] = Field(default_factory=list)


def default_config() -> StationConfig:
    """The sample station: all three displays fed three sample readings."""
    return StationConfig(
        name="sample-station",
        readings=[
            Reading(temperature=80, humidity=65, pressure=30.4),
            Reading(temperature=82, humidity=70, pressure=29.2),
            Reading(temperature=78, humidity=90, pressure=29.2),
        ],
    )
