"""RichConsoleOutput — writes display lines to the terminal via Rich."""

from rich.console import Console
from rich.markup import escape

# Rich style per display name; unknown displays are printed unstyled.
_DISPLAY_STYLES: dict[str, str] = {
    "current_conditions": "cyan",
    "statistics": "green",
    "forecast": "yellow",
}


class RichConsoleOutput:
    """Prints each rendered line to stdout, coloured by display when a TTY.

    Pass a ``console`` to redirect output (e.g. ``Console(file=io.StringIO())``
    in tests).

    Does NOT inherit from DisplayOutput (structural typing via Protocol).
    """

    def __init__(self, console: Console | None = None) -> None:
        self._console = console or Console(highlight=False, soft_wrap=True)

    def show(self, display: str, text: str) -> None:
        style = _DISPLAY_STYLES.get(display)
        self._console.print(escape(text), style=style)
