"""Command-line helpers: enumerated options and logging setup."""

from __future__ import annotations

import json
import logging
import sys
from datetime import datetime, timezone

__all__ = ["EnumOption", "setup_logging", "TRACE"]

TRACE = 5
logging.addLevelName(TRACE, "TRACE")

_LEVELS = {
    "error": logging.ERROR,
    "warn": logging.WARNING,
    "info": logging.INFO,
    "debug": logging.DEBUG,
    "trace": TRACE,
}

_LEVEL_NAMES = {value: key for key, value in _LEVELS.items()}


def _level_name(level: int) -> str:
    if level >= logging.CRITICAL:
        return "fatal"
    return _LEVEL_NAMES.get(level, logging.getLevelName(level).lower())


class EnumOption:
    """A string option restricted to a set of allowed values.

    A non-empty default is added to the allowed values and becomes the
    current value.
    """

    def __init__(self, type_name: str, default: str, *args: str) -> None:
        self.type_name = type_name
        self.value = ""
        options = list(args)
        if default != "":
            options.insert(0, default)
            self.value = default
        self.options = options

    def set(self, value: str) -> None:
        """Set the value, raising ValueError if it is not an allowed option."""
        if value not in self.options:
            raise ValueError(f"invalid value {value}")
        self.value = value

    def __str__(self) -> str:
        return self.value

    def __repr__(self) -> str:
        return f"EnumOption({self.type_name!r}, value={self.value!r}, options={self.options!r})"


class _JSONFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        entry: dict[str, object] = {
            "level": _level_name(record.levelno),
            "time": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
        }
        entry.update(getattr(record, "fields", {}))
        if record.exc_info:
            entry["error"] = self.formatException(record.exc_info)
        entry["message"] = record.getMessage()
        return json.dumps(entry)


class _PrettyFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        stamp = datetime.fromtimestamp(record.created).strftime("%I:%M%p")
        parts = [stamp, _level_name(record.levelno).upper()[:3], record.getMessage()]
        parts.extend(f"{key}={value}" for key, value in getattr(record, "fields", {}).items())
        line = " ".join(parts)
        if record.exc_info:
            line += "\n" + self.formatException(record.exc_info)
        return line


class _SkyeyeHandler(logging.StreamHandler):
    """Marker type so repeated setup replaces the previous handler."""


def setup_logging(level_name: str, format_name: str) -> int:
    """Configure the root logger and return the level that was set.

    "pretty" selects human-readable output; anything else gives JSON lines.
    Unknown level names fall back to info.
    """
    root = logging.getLogger()
    for handler in [h for h in root.handlers if isinstance(h, _SkyeyeHandler)]:
        root.removeHandler(handler)

    handler = _SkyeyeHandler(sys.stderr)
    if format_name.lower() == "pretty":
        handler.setFormatter(_PrettyFormatter())
    else:
        handler.setFormatter(_JSONFormatter())
    root.addHandler(handler)

    level = _LEVELS.get(level_name.lower(), logging.INFO)
    root.setLevel(level)
    logging.getLogger(__name__).info(
        "log level set", extra={"fields": {"new_level": _level_name(level)}}
    )
    return level