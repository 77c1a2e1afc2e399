from __future__ import annotations

import os

from envparams.errors import EnvWriteError
from envparams.services.environment.interface import EnvironmentInterface


class SnapshotEnvironment(EnvironmentInterface):
    """Read-only copy of the process environment with optional overrides."""

    def __init__(self, overrides: dict[str, str] | None = None) -> None:
        self._env = dict(os.environ)
        if overrides:
            self._env.update(overrides)

    def get(self, name: str) -> str | None:
        return self._env.get(name)

    def set(self, name: str, value: str) -> None:
        raise EnvWriteError(name, value, "environment snapshot is read-only")

    @property
    def writable(self) -> bool:
        return False
