"""FakeDisplayOutput for use in tests — records rendered lines without printing."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ShownLine:
    display: str
    text: str


class FakeDisplayOutput:
    def __init__(self) -> None:
        self.lines: list[ShownLine] = []

    def show(self, display: str, text: str) -> None:
        self.lines.append(ShownLine(display=display, text=text))

    def texts(self, display: str | None = None) -> list[str]:
        return [
            line.text for line in self.lines if display is None or line.display == display
        ]
