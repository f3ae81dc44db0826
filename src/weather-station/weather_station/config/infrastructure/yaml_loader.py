"""YAML config loader — parses, validates, and emits observer events."""

from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from weather_station.config.domain.config import StationConfig
from weather_station.config.domain.observer import ConfigObserver
from weather_station.config.infrastructure.errors import (
    ConfigLoadError,
    ConfigValidationError,
)


class YamlConfigLoader:
    """Loads, validates, and returns a StationConfig from a YAML file."""

    def __init__(self, observer: ConfigObserver) -> None:
        self._observer = observer

    def load(self, path: Path) -> StationConfig:
        """
        Load, validate, and return a StationConfig from a YAML file.

        Raises:
            ConfigLoadError: if the file does not exist or cannot be read.
            ConfigValidationError: if the file is not valid YAML, is not a
                mapping, or violates the StationConfig schema.
        """
        raw = _parse_yaml(path=path)
        cfg = _build_config(raw=raw)
        self._observer.config_loaded(
            name=cfg.name,
            num_displays=len(cfg.displays),
            num_readings=len(cfg.readings),
        )
        return cfg


def _parse_yaml(path: Path) -> Any:
    try:
        with path.open("r", encoding="utf-8") as fh:
            return yaml.safe_load(fh)
    except OSError as exc:
        raise ConfigLoadError(path=path) from exc
    except yaml.YAMLError as exc:
        raise ConfigValidationError(f"invalid YAML in {path}: {exc}") from exc


def _build_config(raw: Any) -> StationConfig:
    if not isinstance(raw, dict):
        raise ConfigValidationError("top-level document must be a mapping")
    try:
        return StationConfig.model_validate(raw)
    except ValidationError as exc:
        raise ConfigValidationError(str(exc)) from exc
