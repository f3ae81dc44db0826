"""CLI entrypoint for weather-station — typer app with a `run` command."""

import logging
import sys
from functools import partial
from pathlib import Path

import structlog
import typer

from weather_station.config.domain.config import StationConfig, default_config
from weather_station.config.infrastructure.observer import StructlogConfigObserver
from weather_station.config.infrastructure.yaml_loader import YamlConfigLoader
from weather_station.core.errors import WeatherStationError
from weather_station.display.infrastructure.console_output import RichConsoleOutput
from weather_station.display.infrastructure.registry import create_display
from weather_station.station.application.runner import StationRunner
from weather_station.station.infrastructure.observer import StructlogStationObserver

app = typer.Typer(add_completion=False)


@app.callback()
def main() -> None:
    """Broadcast weather readings to a set of displays."""


def _configure_structlog(log_format: str, verbose: bool) -> None:
    """Configure structlog based on the requested format. Logs go to stderr."""
    if log_format == "console":
        renderer: structlog.types.Processor = structlog.dev.ConsoleRenderer()
    elif log_format == "json":
        renderer = structlog.processors.JSONRenderer()
    else:
        typer.echo(f"Invalid log format: {log_format!r}. Must be 'console' or 'json'.")
        raise typer.Exit(code=1)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(
            logging.DEBUG if verbose else logging.INFO
        ),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
    )


def _load_config(config_path: Path | None) -> StationConfig:
    if config_path is None:
        return default_config()
    loader = YamlConfigLoader(observer=StructlogConfigObserver())
    return loader.load(path=config_path)


@app.command()
def run(
    config_path: Path | None = typer.Argument(
        None, help="Path to station config YAML (default: built-in sample station)"
    ),
    log_format: str = typer.Option(
        "console",
        "--log-format",
        help="Log format: 'console' or 'json'",
    ),
    isolate: bool | None = typer.Option(
        None,
        "--isolate/--strict",
        help="Keep notifying displays after one fails (default: from config)",
    ),
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Log listener registration events"
    ),
) -> None:
    """Register the configured displays and replay the configured readings."""
    _configure_structlog(log_format=log_format, verbose=verbose)

    try:
        config = _load_config(config_path=config_path)
        output = RichConsoleOutput()
        runner = StationRunner(
            config=config,
            display_factory=partial(create_display, output=output),
            observer=StructlogStationObserver(),
            isolate_failures=isolate,
        )
        runner.run()
    except KeyboardInterrupt:
        typer.echo("Run interrupted.", err=True)
        sys.exit(1)
    except WeatherStationError as exc:
        typer.echo(str(exc), err=True)
        sys.exit(1)
    except Exception as exc:  # noqa: BLE001
        typer.echo(f"Unexpected error: {exc}\nPlease report this bug.", err=True)
        sys.exit(1)


if __name__ == "__main__":
    app()
