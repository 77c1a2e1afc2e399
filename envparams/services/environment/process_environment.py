from __future__ import annotations

import os

from envparams.errors import EnvWriteError
from envparams.services.environment.interface import EnvironmentInterface


class ProcessEnvironment(EnvironmentInterface):
    """Live view of the process environment. Overrides are written into it at construction."""

    def __init__(self, overrides: dict[str, str] | None = None) -> None:
        for key, value in (overrides or {}).items():
            self.set(key, value)

    def get(self, name: str) -> str | None:
        return os.environ.get(name)

    def set(self, name: str, value: str) -> None:
        try:
            os.environ[name] = value
        except (ValueError, OSError) as exc:
            # e.g. embedded NUL or '=' in the name
            raise EnvWriteError(name, value, str(exc)) from exc
