"""Listener port — the capability every reading consumer implements."""

from typing import Protocol

from weather_station.station.domain.reading import Reading


class ReadingListener(Protocol):
    """Receives every Reading broadcast by the station.

    Implementations keep their own private state and must not block.
    """

    def on_update(self, reading: Reading) -> None: ...
