from __future__ import annotations


class ConfigParamError(Exception):
    """Base class for configuration parameter failures."""


class ParamAbsentError(ConfigParamError):
    """Neither the environment nor the default supplies a value."""

    def __init__(self, name: str) -> None:
        super().__init__(f"{name} is undefined")
        self.name = name


class ParseError(ConfigParamError, ValueError):
    """A value is present but cannot be converted to the requested type."""

    def __init__(self, name: str, text: str, kind: str) -> None:
        super().__init__(f"illegal {kind} value for {name}: {text!r}")
        self.name = name
        self.text = text
        self.kind = kind


class EnvWriteError(ConfigParamError):
    """The environment source refused a write."""

    def __init__(self, name: str, value: str, reason: str) -> None:
        super().__init__(
            f'Failed to set environment parameter "{name}" to "{value}" because "{reason}"'
        )
        self.name = name
        self.value = value
        self.reason = reason
