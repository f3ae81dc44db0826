"""Tests for StationConfig and the built-in sample station."""

import pytest
from pydantic import ValidationError

from weather_station.config.domain.config import StationConfig, default_config
from weather_station.station.domain.reading import Reading


class TestStationConfig:
    def test_name_is_required(self) -> None:
        with pytest.raises(ValidationError):
            StationConfig(name="")

    def test_is_frozen(self) -> None:
        cfg = StationConfig(name="s")

        with pytest.raises(ValidationError):
            cfg.name = "other"  # type: ignore[misc]

    def test_default_displays_are_independent_lists(self) -> None:
        first = StationConfig(name="a")
        second = StationConfig(name="b")

        assert first.displays == second.displays
        assert first.displays is not second.displays


class TestDefaultConfig:
    def test_registers_all_displays(self) -> None:
        cfg = default_config()

        assert cfg.displays == ["current_conditions", "statistics", "forecast"]
        assert cfg.isolate_failures is True

    def test_sample_readings(self) -> None:
        cfg = default_config()

        assert cfg.readings == [
            Reading(temperature=80, humidity=65, pressure=30.4),
            Reading(temperature=82, humidity=70, pressure=29.2),
            Reading(temperature=78, humidity=90, pressure=29.2),
        ]
