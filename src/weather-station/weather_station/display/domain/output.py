"""Where displays write their rendered text lines."""

from typing import Protocol


class DisplayOutput(Protocol):
    """Receives one rendered line from a named display.

    Implementations may print to a terminal, log, or record for tests.
    """

    def show(self, display: str, text: str) -> None: ...
