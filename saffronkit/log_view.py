"""An in-memory list of log lines with the labels and colours they show with."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Tuple

from saffronkit.log import Level

Color = Tuple[float, float, float, float]

_UNKNOWN_STYLE: Tuple[str, Color] = ("[?]      ", (0.80, 0.80, 0.80, 1.0))
_FATAL_STYLE: Tuple[str, Color] = ("[FATAL]  ", (0.60, 0.15, 0.18, 1.0))

_STYLES = {
    Level.DEBUG: ("[DEBUG]  ", (0.65, 0.65, 0.70, 1.0)),
    Level.INFO: ("[INFO]   ", (0.30, 0.60, 0.85, 1.0)),
    Level.WARN: ("[WARN]   ", (0.95, 0.75, 0.20, 1.0)),
    Level.ERROR: ("[ERROR]  ", (0.85, 0.33, 0.31, 1.0)),
    Level.DPANIC: _FATAL_STYLE,
    Level.PANIC: _FATAL_STYLE,
    Level.FATAL: _FATAL_STYLE,
}


@dataclass(frozen=True)
class LogLine:
    """One displayed line and the level of the entry it came from."""

    level: int
    text: str

    @property
    def label(self) -> str:
        return _STYLES.get(self.level, _UNKNOWN_STYLE)[0]

    @property
    def color(self) -> Color:
        return _STYLES.get(self.level, _UNKNOWN_STYLE)[1]


class LogView:
    """Collects log entries as lines for display."""

    def __init__(self) -> None:
        self._lines: List[LogLine] = []

    def add_entry(self, message: str, level: int) -> None:
        """Append a message; each of its lines carries the entry's level."""
        for text in message.split("\n"):
            self._lines.append(LogLine(level, text))

    def clear(self) -> None:
        self._lines.clear()

    def lines(self) -> List[LogLine]:
        return list(self._lines)

    @property
    def text(self) -> str:
        """All lines, each ending with a newline."""
        return "".join(line.text + "\n" for line in self._lines)

    def __len__(self) -> int:
        return len(self._lines)