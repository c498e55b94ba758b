"""File helpers."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from bonobo.log import Logger, Type


def slurp_file(path: str | Path, logger: Optional[Logger] = None) -> str:
    """Return a file's contents up to its first NUL, or "" if it cannot be read."""
    try:
        data = Path(path).read_bytes()
    except OSError:
        if logger is not None:
            logger.report(Type.ERROR, 'Failed to open "%s"', str(path), function="slurp_file")
        return ""
    return data.split(b"\0", 1)[0].decode("utf-8", errors="replace")