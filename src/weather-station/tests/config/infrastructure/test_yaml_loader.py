"""Tests for YAML config loading infrastructure."""

from pathlib import Path

import pytest

from tests.config.fake_observer import FakeConfigObserver
from weather_station.config.domain.config import StationConfig
from weather_station.config.infrastructure.errors import (
    ConfigLoadError,
    ConfigValidationError,
)
from weather_station.config.infrastructure.yaml_loader import YamlConfigLoader
from weather_station.station.domain.reading import Reading

# Fixtures directory, absolute so tests are location-independent
# __file__ is tests/config/infrastructure/test_yaml_loader.py
# parent.parent.parent is the tests/ directory
FIXTURES = Path(__file__).parent.parent.parent / "fixtures"


def _load(name: str, observer: FakeConfigObserver | None = None) -> StationConfig:
    loader = YamlConfigLoader(observer=observer or FakeConfigObserver())
    return loader.load(path=FIXTURES / name)


class TestValidConfigLoading:
    """A valid YAML config loads correctly with all fields populated."""

    def test_loads_name(self) -> None:
        cfg = _load("valid_station.yaml")

        assert cfg.name == "backyard-station"

    def test_loads_isolation_flag(self) -> None:
        cfg = _load("valid_station.yaml")

        assert cfg.isolate_failures is False

    def test_loads_displays_in_order(self) -> None:
        cfg = _load("valid_station.yaml")

        assert cfg.displays == ["forecast", "current_conditions"]

    def test_loads_readings(self) -> None:
        cfg = _load("valid_station.yaml")

        assert cfg.readings == [
            Reading(temperature=80, humidity=65, pressure=30.4),
            Reading(temperature=82, humidity=70, pressure=29.2),
        ]

    def test_emits_config_loaded_event(self) -> None:
        observer = FakeConfigObserver()

        _load("valid_station.yaml", observer=observer)

        assert observer.loaded == [
            {"name": "backyard-station", "num_displays": 2, "num_readings": 2}
        ]


class TestDefaults:
    def test_minimal_config_uses_defaults(self) -> None:
        cfg = _load("minimal_station.yaml")

        assert cfg.isolate_failures is True
        assert cfg.displays == ["current_conditions", "statistics", "forecast"]
        assert cfg.readings == []


class TestInvalidConfig:
    def test_missing_file_raises_load_error(self, tmp_path: Path) -> None:
        observer = FakeConfigObserver()
        loader = YamlConfigLoader(observer=observer)

        with pytest.raises(ConfigLoadError):
            loader.load(path=tmp_path / "missing.yaml")

        assert observer.loaded == []

    def test_unknown_display_raises_validation_error(self) -> None:
        with pytest.raises(ConfigValidationError) as exc_info:
            _load("unknown_display.yaml")

        assert "barometer" in str(exc_info.value)

    def test_empty_display_list_is_rejected(self) -> None:
        with pytest.raises(ConfigValidationError):
            _load("empty_displays.yaml")

    def test_non_numeric_reading_is_rejected(self) -> None:
        with pytest.raises(ConfigValidationError):
            _load("bad_reading.yaml")

    def test_non_mapping_document_is_rejected(self) -> None:
        with pytest.raises(ConfigValidationError) as exc_info:
            _load("not_a_mapping.yaml")

        assert "mapping" in str(exc_info.value)

    def test_malformed_yaml_is_rejected(self) -> None:
        with pytest.raises(ConfigValidationError) as exc_info:
            _load("invalid_yaml.yaml")

        assert "invalid YAML" in str(exc_info.value)

    def test_empty_file_is_rejected(self, tmp_path: Path) -> None:
        path = tmp_path / "empty.yaml"
        path.write_text("", encoding="utf-8")
        loader = YamlConfigLoader(observer=FakeConfigObserver())

        with pytest.raises(ConfigValidationError):
            loader.load(path=path)
