"""Reading — one immutable snapshot of the station's measurements."""

from pydantic import BaseModel


class Reading(BaseModel, frozen=True):
    """Temperature (F), relative humidity (%) and barometric pressure (inHg)."""

    temperature: float
    humidity: float
    pressure: float


ZERO_READING = Reading(temperature=0.0, humidity=0.0, pressure=0.0)
