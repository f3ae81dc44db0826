"""Structlog implementation of the ConfigObserver port."""

import structlog


class StructlogConfigObserver:
    """Delegates config domain events to structlog.

    Satisfies the ConfigObserver protocol structurally.
    """

    def __init__(self) -> None:
        self._log = structlog.get_logger()

    def config_loaded(self, name: str, num_displays: int, num_readings: int) -> None:
        self._log.info(
            "config.loaded",
            name=name,
            num_displays=num_displays,
            num_readings=num_readings,
        )
