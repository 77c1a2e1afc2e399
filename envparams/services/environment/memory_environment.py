from __future__ import annotations

from envparams.services.environment.interface import EnvironmentInterface


class MemoryEnvironment(EnvironmentInterface):
    """Dict-backed environment for unit testing."""

    def __init__(self, overrides: dict[str, str] | None = None) -> None:
        self.values: dict[str, str] = dict(overrides or {})

    def get(self, name: str) -> str | None:
        return self.values.get(name)

    def set(self, name: str, value: str) -> None:
        self.values[name] = value
