"""Typed access to configuration parameters.

A parameter resolves to its environment value when that is set and
non-empty, otherwise to its default when that is non-empty, otherwise it is
absent. The environment is whatever ``EnvironmentInterface`` the accessor was
built with, so tests never have to touch ``os.environ``.
"""

from __future__ import annotations

import ipaddress
import re
import sys
from typing import Callable, Iterable, TextIO, TypeVar

from envparams.catalog import PRINTED_PARAMS, SITE_DEFAULTS
from envparams.errors import EnvWriteError, ParamAbsentError, ParseError
from envparams.params import ConfigParam
from envparams.services.environment.interface import EnvironmentInterface
from envparams.services.logger.interface import LoggingInterface

T = TypeVar("T")

# Buffer sizes used by the typed getters and by print_param
TEXT_CAPACITY = 128
PRINT_CAPACITY = 80


def lookup(env: EnvironmentInterface, param: ConfigParam) -> str | None:
    """Resolve *param* against *env* without truncation. Returns None when absent."""
    value = env.get(param.name)
    if value:
        return value
    if param.has_default:
        return param.default
    return None


_INTEGER = re.compile(r"[+-]?[0-9]+")


def _parse_long(text: str) -> int:
    text = text.strip()
    if not _INTEGER.fullmatch(text):
        raise ValueError(f"not a base-10 integer: {text!r}")
    return int(text, 10)


_FLOAT = re.compile(
    r"[+-]?(?:(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?|nan|inf(?:inity)?)",
    re.IGNORECASE,
)


def _parse_double(text: str) -> float:
    text = text.strip()
    if not _FLOAT.fullmatch(text):
        raise ValueError(f"not a floating-point literal: {text!r}")
    return float(text)


def _parse_inet(text: str) -> ipaddress.IPv4Address:
    return ipaddress.IPv4Address(text.strip())


class ConfigParamAccessor:
    """Resolves ``ConfigParam`` values to strings, numbers and addresses."""

    def __init__(
        self,
        env: EnvironmentInterface,
        logger: LoggingInterface,
        stream: TextIO | None = None,
    ) -> None:
        self.env = env
        self.log = logger
        self._stream = stream

    def get_string(self, param: ConfigParam, buffer_capacity: int = TEXT_CAPACITY) -> str | None:
        """Return the value of *param* truncated to ``buffer_capacity - 1`` characters.

        Returns None when neither the environment nor the default supplies a value.
        """
        if buffer_capacity < 1:
            raise ValueError(f"buffer_capacity must be at least 1, got {buffer_capacity}")
        value = lookup(self.env, param)
        if value is None:
            return None
        return value[: buffer_capacity - 1]

    def require_string(self, param: ConfigParam, buffer_capacity: int = TEXT_CAPACITY) -> str:
        """Like get_string, but raises ParamAbsentError instead of returning None."""
        value = self.get_string(param, buffer_capacity)
        if value is None:
            raise ParamAbsentError(param.name)
        return value

    def get_long(self, param: ConfigParam) -> int:
        """Parse *param* as a base-10 signed integer."""
        return self._convert(param, "integer", _parse_long)

    def get_double(self, param: ConfigParam) -> float:
        """Parse *param* as a floating-point literal."""
        return self._convert(param, "float", _parse_double)

    def get_inet_address(self, param: ConfigParam) -> ipaddress.IPv4Address:
        """Parse *param* as a dotted-quad IPv4 address.

        ``int()`` of the result is the 32-bit address in host byte order.
        """
        return self._convert(param, "inet address", _parse_inet)

    def print_param(self, param: ConfigParam) -> None:
        """Write ``<name>: <value>`` or ``<name> is undefined`` to the output stream."""
        value = self.get_string(param, PRINT_CAPACITY)
        if value is None:
            print(f"{param.name} is undefined", file=self.out)
        else:
            print(f"{param.name}: {value}", file=self.out)

    def print_params(self, params: Iterable[ConfigParam] = PRINTED_PARAMS) -> None:
        for param in params:
            self.print_param(param)

    def set(self, param: ConfigParam, value: str) -> None:
        """Store *value* for *param* in the environment source."""
        try:
            self.env.set(param.name, value)
        except EnvWriteError as exc:
            self.log.error(str(exc), param=param.name, reason=exc.reason)
            raise
        self.log.debug(f"set {param.name}={value}", param=param.name)

    def apply_site_defaults(
        self, defaults: Iterable[tuple[ConfigParam, str]] = SITE_DEFAULTS
    ) -> None:
        """Write every (param, value) pair into the environment, stopping at the first failure."""
        self.log.info("setting EPICS environment parameters")
        for param, value in defaults:
            self.set(param, value)

    @property
    def out(self) -> TextIO:
        # resolved per call so redirected stdout is honoured
        return self._stream or sys.stdout

    # ── Internal ──────────────────────────────────────────────────────────

    def _convert(self, param: ConfigParam, kind: str, parse: Callable[[str], T]) -> T:
        text = self.get_string(param)
        if text is None:
            raise self._illegal(param, "", kind)
        try:
            return parse(text)
        except ValueError as exc:
            raise self._illegal(param, text, kind) from exc

    def _illegal(self, param: ConfigParam, text: str, kind: str) -> ParseError:
        self.log.error(f"illegal value for {param.name}:{text}", param=param.name, kind=kind)
        return ParseError(param.name, text, kind)
