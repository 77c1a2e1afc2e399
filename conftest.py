"""Root-level pytest fixtures: in-memory environment, logger and accessor."""

from __future__ import annotations

import pytest

from envparams.accessor import ConfigParamAccessor
from envparams.services.environment.memory_environment import MemoryEnvironment
from envparams.services.logger.memory_logger import MemoryLogger


@pytest.fixture
def memory_env() -> MemoryEnvironment:
    return MemoryEnvironment()


@pytest.fixture
def memory_logger() -> MemoryLogger:
    return MemoryLogger()


@pytest.fixture
def accessor(memory_env: MemoryEnvironment, memory_logger: MemoryLogger) -> ConfigParamAccessor:
    """Accessor over an empty in-memory environment; output goes to stdout (use capsys)."""
    return ConfigParamAccessor(memory_env, memory_logger)
