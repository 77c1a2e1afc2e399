"""Loki logger: sends structured JSON logs to Grafana Loki's HTTP push API.

Entries are buffered and pushed once the buffer reaches the flush threshold,
on an explicit ``flush()``, and at interpreter exit. The endpoint and stream
labels are configuration parameters resolved like any other.
"""

from __future__ import annotations

import atexit
import json
import sys
import threading
import time
from typing import Any

import requests

from envparams.accessor import lookup
from envparams.params import ConfigParam
from envparams.services.environment.interface import EnvironmentInterface
from envparams.services.environment.process_environment import ProcessEnvironment
from envparams.services.logger.interface import LoggingInterface, level_number

LOKI_URL = ConfigParam("LOKI_URL", "http://localhost:3100")
LOKI_SERVICE = ConfigParam("LOKI_SERVICE", "envparams")
LOKI_ENVIRONMENT = ConfigParam("LOKI_ENVIRONMENT", "development")

_FLUSH_THRESHOLD = 100  # entries
_PUSH_TIMEOUT = 5  # seconds


class LokiLogger(LoggingInterface):
    """Structured logger that pushes to Grafana Loki via HTTP."""

    def __init__(
        self,
        name: str = "envparams",
        level: str = "INFO",
        env: EnvironmentInterface | None = None,
        flush_threshold: int = _FLUSH_THRESHOLD,
    ) -> None:
        env = env or ProcessEnvironment()
        self.name = name
        self._threshold = level_number(level)
        self._flush_threshold = flush_threshold
        self._push_url = f"{lookup(env, LOKI_URL).rstrip('/')}/loki/api/v1/push"
        self._service = lookup(env, LOKI_SERVICE)
        self._environment = lookup(env, LOKI_ENVIRONMENT)

        # (level, timestamp_ns, record)
        self._buffer: list[tuple[str, str, dict[str, Any]]] = []
        self._lock = threading.Lock()
        self._closed = False
        atexit.register(self.close)

    @property
    def push_url(self) -> str:
        return self._push_url

    def info(self, msg: str, **ctx: Any) -> None:
        self._append("INFO", msg, ctx)

    def warn(self, msg: str, **ctx: Any) -> None:
        self._append("WARN", msg, ctx)

    def error(self, msg: str, **ctx: Any) -> None:
        self._append("ERROR", msg, ctx)

    def debug(self, msg: str, **ctx: Any) -> None:
        self._append("DEBUG", msg, ctx)

    def flush(self) -> None:
        with self._lock:
            self._flush_locked()

    def close(self) -> None:
        """Flush remaining entries; later records are ignored. Safe to call more than once."""
        if self._closed:
            return
        self._closed = True
        self.flush()
        atexit.unregister(self.close)

    # ── Internal ──────────────────────────────────────────────────────────

    def _append(self, level: str, msg: str, ctx: dict[str, Any]) -> None:
        if self._closed or level_number(level) < self._threshold:
            return
        record = {"logger": self.name, "msg": msg, **ctx}
        with self._lock:
            self._buffer.append((level, str(time.time_ns()), record))
            if len(self._buffer) >= self._flush_threshold:
                self._flush_locked()

    def _flush_locked(self) -> None:
        """Flush buffer while already holding the lock."""
        if not self._buffer:
            return

        entries = self._buffer[:]
        self._buffer.clear()

        # One Loki stream per level
        streams: dict[str, list[list[str]]] = {}
        for level, ts_ns, record in entries:
            streams.setdefault(level, []).append([ts_ns, json.dumps(record, default=str)])

        payload = {
            "streams": [
                {
                    "stream": {
                        "service": self._service,
                        "environment": self._environment,
                        "level": level,
                    },
                    "values": values,
                }
                for level, values in streams.items()
            ]
        }

        try:
            response = requests.post(self._push_url, json=payload, timeout=_PUSH_TIMEOUT)
            response.raise_for_status()
        except requests.RequestException as exc:
            print(
                f"loki push to {self._push_url} failed, dropped {len(entries)} entries: {exc}",
                file=sys.stderr,
            )
