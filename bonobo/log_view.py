"""A bounded, filterable view over the most recent log messages."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Optional

from bonobo.log import Logger, Type

Color = tuple[float, float, float, float]

_DEFAULT_COLOR: Color = (1.0, 1.0, 1.0, 1.0)
_TYPE_COLORS: dict[Type, Color] = {
    Type.WARNING: (0.7, 0.4, 0.0, 1.0),
    Type.ERROR: (0.7, 0.0, 0.0, 1.0),
    Type.ASSERT: (0.7, 0.0, 0.0, 1.0),
    Type.PARAM: (0.7, 0.0, 0.0, 1.0),
    Type.TRIVIA: (0.8, 0.8, 0.8, 1.0),
}


@dataclass(frozen=True)
class LogEntry:
    type: Type
    text: str


def _passes(text: str, pattern: Optional[str]) -> bool:
    """Match ``text`` against a filter of the form ``"incl,-excl"``, ignoring case."""
    if not pattern:
        return True
    terms = [term.strip() for term in pattern.split(",")]
    terms = [term for term in terms if term]
    if not terms:
        return True
    lowered = text.lower()
    has_include = False
    for term in terms:
        if term.startswith("-"):
            excluded = term[1:].lower()
            if excluded and excluded in lowered:
                return False
        else:
            has_include = True
            if term.lower() in lowered:
                return True
    return not has_include


class LogView:
    """Ring buffer of log messages, fed as a custom output of a logger."""

    def __init__(self, logger: Optional[Logger] = None, rows: int = 64, width: int = 512) -> None:
        if rows <= 0 or width <= 1:
            raise ValueError("rows must be positive and width greater than one")
        self.rows = rows
        self.width = width
        self._texts = [""] * rows
        self._lengths = [0] * rows
        self._types = [Type.TRIVIA] * rows
        self._pointer = 0
        self.auto_scroll = True
        self.scroll_to_bottom = True
        if logger is not None:
            logger.set_custom_output(self.feed)

    def feed(self, type: Type, message: str) -> None:
        """Store a message, overwriting the oldest one when full."""
        self._texts[self._pointer] = message[: self.width - 1]
        self._lengths[self._pointer] = len(message)
        self._types[self._pointer] = Type(type)
        self._pointer = (self._pointer + 1) % self.rows
        self.scroll_to_bottom = True

    def clear(self) -> None:
        self._lengths = [0] * self.rows
        self._pointer = 0
        self.scroll_to_bottom = True

    def entries(self, pattern: Optional[str] = None) -> Iterator[LogEntry]:
        """Yield stored messages from oldest to newest that pass ``pattern``."""
        order = list(range(self._pointer, self.rows)) + list(range(self._pointer))
        for pos in order:
            if self._lengths[pos] == 0 or not _passes(self._texts[pos], pattern):
                continue
            yield LogEntry(self._types[pos], self._texts[pos])

    def color_for(self, type: Type) -> Color:
        return _TYPE_COLORS.get(Type(type), _DEFAULT_COLOR)