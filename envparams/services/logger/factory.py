from __future__ import annotations

from envparams.params import ConfigParam
from envparams.services.environment.interface import EnvironmentInterface
from envparams.services.logger.interface import LoggingInterface, level_number
from envparams.services.logger.loki_logger import LokiLogger
from envparams.services.logger.memory_logger import MemoryLogger
from envparams.services.logger.pretty_logger import PrettyLogger

LOG_IMPL = ConfigParam("LOG_IMPL", "pretty")
LOG_LEVEL = ConfigParam("ENVPARAMS_LOG_LEVEL", "INFO")


class LoggerFactory:
    """Factory that creates and caches logger instances by implementation name."""

    _registry: dict[str, type[LoggingInterface]] = {
        "pretty": PrettyLogger,
        "memory": MemoryLogger,
        "loki": LokiLogger,
    }

    def __init__(
        self,
        default_impl: str = "pretty",
        level: str = "INFO",
        env: EnvironmentInterface | None = None,
    ) -> None:
        if default_impl not in self._registry:
            raise ValueError(
                f"Unknown logger implementation: '{default_impl}' "
                f"(available: {', '.join(self._registry)})"
            )
        level_number(level)
        self._default_impl = default_impl
        self._level = level
        self._env = env
        self._instances: dict[str, LoggingInterface] = {}

    def create(self, impl_name: str | None = None) -> LoggingInterface:
        """Return a logger instance, creating one if not yet cached."""
        name = impl_name or self._default_impl
        if name not in self._instances:
            cls = self._registry.get(name)
            if cls is None:
                raise ValueError(
                    f"Unknown logger implementation: '{name}' "
                    f"(available: {', '.join(self._registry)})"
                )
            if cls is LokiLogger:
                self._instances[name] = LokiLogger(level=self._level, env=self._env)
            else:
                self._instances[name] = cls(level=self._level)
        return self._instances[name]
