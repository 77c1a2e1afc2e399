from abc import ABC, abstractmethod


class EnvironmentInterface(ABC):
    """Key/value table that configuration parameters are resolved against."""

    @abstractmethod
    def get(self, name: str) -> str | None:
        """Return the raw value for *name*, or None if it is not set."""
        ...

    @abstractmethod
    def set(self, name: str, value: str) -> None:
        """Store *value* under *name*. Raises EnvWriteError if the source is read-only."""
        ...

    @property
    def writable(self) -> bool:
        return True
