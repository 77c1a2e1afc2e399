from dataclasses import dataclass
from typing import Any

from envparams.services.logger.interface import LoggingInterface, level_number


@dataclass
class LogEntry:
    level: str
    msg: str
    ctx: dict[str, Any]


class MemoryLogger(LoggingInterface):
    """In-memory logger that stores entries for test assertions."""

    def __init__(self, name: str = "envparams", level: str = "DEBUG") -> None:
        self.name = name
        self._threshold = level_number(level)
        self.entries: list[LogEntry] = []

    def info(self, msg: str, **ctx: Any) -> None:
        self._append("INFO", msg, ctx)

    def warn(self, msg: str, **ctx: Any) -> None:
        self._append("WARN", msg, ctx)

    def error(self, msg: str, **ctx: Any) -> None:
        self._append("ERROR", msg, ctx)

    def debug(self, msg: str, **ctx: Any) -> None:
        self._append("DEBUG", msg, ctx)

    def _append(self, level: str, msg: str, ctx: dict[str, Any]) -> None:
        if level_number(level) >= self._threshold:
            self.entries.append(LogEntry(level, msg, ctx))

    @property
    def messages(self) -> list[str]:
        """Convenience: return just the message strings."""
        return [e.msg for e in self.entries]

    def at_level(self, level: str) -> list[LogEntry]:
        return [e for e in self.entries if e.level == level]
