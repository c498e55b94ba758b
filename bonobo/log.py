"""Error and warning reporting to standard streams, a log file and a custom sink."""

from __future__ import annotations

import datetime
import enum
import sys
import threading
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Optional, TextIO

#: Longest formatted message kept; longer ones are cut and end with "...".
MAX_MESSAGE_LENGTH = 16382

MESSAGE_ONCE = 1
LOCATION_ONCE = 2


class Type(enum.IntEnum):
    SUCCESS = 0
    INFO = 1
    NEUTRAL = 2
    WARNING = 3
    ERROR = 4
    FILE = 5
    ASSERT = 6
    PARAM = 7
    TRIVIA = 8


class Severity(enum.IntEnum):
    OK = 0
    BAD = 1
    TERMINAL = 2


class Verbosity(enum.IntEnum):
    WHISPER = 0  # message is dropped
    LOUD_UNSITUATED = 1  # message is shown
    LOUD = 2  # message is shown after its file, function and line


class OutputTarget(enum.IntFlag):
    NONE = 0
    STD = 1 << 0
    FILE = 1 << 1
    CUSTOM = 1 << 15


@dataclass
class _Setting:
    prefix: str
    verbosity: Verbosity
    severity: Severity


def _default_settings() -> dict[Type, _Setting]:
    return {
        Type.SUCCESS: _Setting("Success: ", Verbosity.LOUD_UNSITUATED, Severity.OK),
        Type.INFO: _Setting("", Verbosity.LOUD_UNSITUATED, Severity.OK),
        Type.NEUTRAL: _Setting("", Verbosity.LOUD_UNSITUATED, Severity.OK),
        Type.WARNING: _Setting("Warning: ", Verbosity.LOUD, Severity.OK),
        Type.ERROR: _Setting("Error: ", Verbosity.LOUD, Severity.BAD),
        Type.FILE: _Setting("", Verbosity.LOUD_UNSITUATED, Severity.OK),
        Type.ASSERT: _Setting("Assert: ", Verbosity.LOUD, Severity.BAD),
        Type.PARAM: _Setting("Parameter error: ", Verbosity.LOUD, Severity.BAD),
        Type.TRIVIA: _Setting("", Verbosity.LOUD_UNSITUATED, Severity.OK),
    }


CustomOutput = Callable[[Type, str], None]


class Logger:
    """Formats reports and dispatches them to the enabled output targets."""

    def __init__(
        self,
        path: str | Path = "log.txt",
        stdout: Optional[TextIO] = None,
        stderr: Optional[TextIO] = None,
    ) -> None:
        self.path = Path(path)
        self._stdout = stdout if stdout is not None else sys.stdout
        self._stderr = stderr if stderr is not None else sys.stderr
        self._logfile: Optional[TextIO] = None
        self._custom: Optional[CustomOutput] = None
        self._once: dict[tuple, int] = {}
        self._targets = OutputTarget.STD | OutputTarget.CUSTOM | OutputTarget.FILE
        self._file_lock = threading.Lock()
        self._settings = _default_settings()
        self._include_thread_id = False

    def __enter__(self) -> "Logger":
        self.init()
        return self

    def __exit__(self, *exc) -> None:
        self.destroy()

    @property
    def output_targets(self) -> OutputTarget:
        return self._targets

    def init(self) -> None:
        """Open the outputs currently enabled."""
        self.set_output_targets(self._targets)

    def destroy(self) -> None:
        """Write the end marker and close the log file, if open."""
        with self._file_lock:
            if self._logfile is None:
                return
            self._logfile.write("\n === End of log === \n\n")
            self._logfile.flush()
            self._logfile.close()
            self._logfile = None

    def set_custom_output(self, func: Optional[CustomOutput]) -> None:
        self._custom = func

    def set_output_targets(self, flags: int) -> None:
        """Enable the given targets, opening the log file lazily if needed."""
        self._targets = OutputTarget(flags)
        if not self._targets & OutputTarget.FILE:
            return
        with self._file_lock:
            if self._logfile is not None:
                return
            try:
                self._logfile = open(self.path, "w", encoding="utf-8")
            except OSError as err:
                self._stderr.write(
                    f'Failed to open "{self.path}" for writing: {err.strerror}\n'
                    "Disabling logging of messages to file.\n"
                )
                self._targets &= ~OutputTarget.FILE
                return
            now = datetime.datetime.now()
            self._logfile.write(
                f"\n === Log ({now:%b %d %Y}, {now:%H:%M:%S}) === \n\n"
            )
            self._logfile.flush()

    def set_verbosity(self, type: Type, verbosity: Verbosity) -> None:
        self._settings[Type(type)].verbosity = Verbosity(verbosity)

    def set_include_thread_id(self, include: bool) -> None:
        self._include_thread_id = bool(include)

    @staticmethod
    def _format(message: str, args: tuple) -> str:
        text = message % args if args else message
        if len(text) > MAX_MESSAGE_LENGTH:
            text = text[: MAX_MESSAGE_LENGTH - 3] + "..."
        return text

    @staticmethod
    def _once_key(flags: int, text: str, file, function, line) -> tuple:
        parts: list = []
        if flags & MESSAGE_ONCE:
            parts.append(("message", file, function, line, text))
        if flags & LOCATION_ONCE:
            parts.append(("location", file, function, line))
        return tuple(parts)

    def report(
        self,
        type: Type,
        message: str,
        *args,
        flags: int = 0,
        file: Optional[str] = None,
        function: Optional[str] = None,
        line: int = -1,
    ) -> None:
        """Format ``message % args`` and send it to every enabled target."""
        if not self._targets:
            return
        type = Type(type)
        setting = self._settings[type]
        if setting.verbosity == Verbosity.WHISPER:
            return

        text = self._format(message, args)

        if flags:
            key = self._once_key(flags, text, file, function, line)
            if key in self._once:
                self._once[key] += 1
                return
            self._once[key] = 1

        pieces = []
        if self._include_thread_id:
            pieces.append(f"{{{threading.get_ident()}}} ")
        if setting.verbosity == Verbosity.LOUD:
            if line == -1:
                pieces.append("[Unknown location]\n")
            else:
                pieces.append(f"[{file}, {function} ({line})]\n")
        pieces.append(f"{setting.prefix}{text}\n")
        output = "".join(pieces)

        if self._targets & OutputTarget.STD:
            stream = self._stderr if setting.severity != Severity.OK else self._stdout
            stream.write(output)
        if self._targets & OutputTarget.FILE:
            with self._file_lock:
                if self._logfile is not None:
                    self._logfile.write(output)
                    self._logfile.flush()
        if self._targets & OutputTarget.CUSTOM and self._custom is not None:
            self._custom(type, output)

        if setting.severity == Severity.TERMINAL:
            self.destroy()
            raise SystemExit(1)

    def report_param(
        self,
        test,
        file: Optional[str] = None,
        function: Optional[str] = None,
        line: int = -1,
    ) -> bool:
        """Report a bad parameter when ``test`` is false; return its truth."""
        ok = bool(test)
        if not ok:
            self.report(
                Type.PARAM, "Bad parameter!", file=file, function=function, line=line
            )
        return ok

    def hit_count(
        self,
        type: Type,
        message: str,
        *args,
        flags: int = MESSAGE_ONCE,
        file: Optional[str] = None,
        function: Optional[str] = None,
        line: int = -1,
    ) -> int:
        """How many times a once-only report with these arguments was made."""
        text = self._format(message, args)
        return self._once.get(self._once_key(flags, text, file, function, line), 0)