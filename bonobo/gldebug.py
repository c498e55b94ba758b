"""Naming and routing of graphics-driver debug messages."""

from __future__ import annotations

import enum
from typing import Optional

from bonobo.log import Logger, Type

_VIDEO_MEMORY_NOTICE_ID = 131185
_TEXTURE_MAPPING_NOTICE_ID = 131204


class DebugType(enum.IntEnum):
    ERROR = 0x824C
    DEPRECATED_BEHAVIOR = 0x824D
    UNDEFINED_BEHAVIOR = 0x824E
    PORTABILITY = 0x824F
    PERFORMANCE = 0x8250
    OTHER = 0x8251
    MARKER = 0x8268
    PUSH_GROUP = 0x8269
    POP_GROUP = 0x826A


class DebugSource(enum.IntEnum):
    API = 0x8246
    WINDOW_SYSTEM = 0x8247
    SHADER_COMPILER = 0x8248
    THIRD_PARTY = 0x8249
    APPLICATION = 0x824A
    OTHER = 0x824B


class DebugSeverity(enum.IntEnum):
    HIGH = 0x9146
    MEDIUM = 0x9147
    LOW = 0x9148
    NOTIFICATION = 0x826B


_TYPE_NAMES = {
    DebugType.ERROR: "Error",
    DebugType.DEPRECATED_BEHAVIOR: "Deprecated Behavior",
    DebugType.UNDEFINED_BEHAVIOR: "Undefined Behavior",
    DebugType.PORTABILITY: "Portability Issue",
    DebugType.PERFORMANCE: "Performance Issue",
    DebugType.MARKER: "Stream Annotation",
    DebugType.PUSH_GROUP: "Push group",
    DebugType.POP_GROUP: "Pop group",
    DebugType.OTHER: "Other",
}

_SOURCE_NAMES = {
    DebugSource.API: "API",
    DebugSource.WINDOW_SYSTEM: "Window System",
    DebugSource.SHADER_COMPILER: "Shader Compiler",
    DebugSource.THIRD_PARTY: "Third Party",
    DebugSource.APPLICATION: "Application",
    DebugSource.OTHER: "Other",
}

_SEVERITY_NAMES = {
    DebugSeverity.HIGH: "High",
    DebugSeverity.MEDIUM: "Medium",
    DebugSeverity.LOW: "Low",
    DebugSeverity.NOTIFICATION: "Notification",
}


def _lookup(table: dict, enum_cls: type[enum.IntEnum], value: int, what: str) -> str:
    try:
        return table[enum_cls(value)]
    except ValueError:
        raise ValueError(f"unknown debug {what}: {value:#x}") from None


def type_name(type: int) -> str:
    return _lookup(_TYPE_NAMES, DebugType, type, "type")


def source_name(source: int) -> str:
    return _lookup(_SOURCE_NAMES, DebugSource, source, "source")


def severity_name(severity: int) -> str:
    return _lookup(_SEVERITY_NAMES, DebugSeverity, severity, "severity")


def handle_debug_message(
    logger: Logger, source: int, type: int, id: int, severity: int, message: str
) -> Optional[Type]:
    """Log a driver debug message; return the log type used, or None if dropped."""
    if type in (DebugType.PUSH_GROUP, DebugType.POP_GROUP):
        return None

    text = (
        f"[id: {id}] of type {type_name(type)}, from {source_name(source)}:\n"
        f"\t{message}\n"
    )

    if severity in (DebugSeverity.NOTIFICATION, DebugSeverity.LOW):
        if id == _VIDEO_MEMORY_NOTICE_ID:
            return None
        if id == _TEXTURE_MAPPING_NOTICE_ID and "The texture object (0)" in text:
            return None
        log_type = Type.INFO
    elif severity == DebugSeverity.MEDIUM:
        log_type = Type.WARNING
    elif severity == DebugSeverity.HIGH:
        log_type = Type.ERROR
    else:
        return None

    logger.report(log_type, text)
    return log_type