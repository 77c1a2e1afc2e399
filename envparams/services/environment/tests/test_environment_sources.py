import os

import pytest

from envparams.errors import EnvWriteError
from envparams.services.environment.memory_environment import MemoryEnvironment
from envparams.services.environment.process_environment import ProcessEnvironment
from envparams.services.environment.registry import resolve_source
from envparams.services.environment.snapshot_environment import SnapshotEnvironment


def test_process_reads_live_environment(monkeypatch: pytest.MonkeyPatch):
    env = ProcessEnvironment()
    monkeypatch.setenv("ENVPARAMS_TEST_KEY", "live")
    assert env.get("ENVPARAMS_TEST_KEY") == "live"


def test_process_set_writes_os_environ(monkeypatch: pytest.MonkeyPatch):
    # registered with monkeypatch so the key is removed afterwards
    monkeypatch.setenv("ENVPARAMS_TEST_KEY", "")
    ProcessEnvironment().set("ENVPARAMS_TEST_KEY", "written")
    assert os.environ["ENVPARAMS_TEST_KEY"] == "written"


def test_process_overrides_are_applied(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("ENVPARAMS_TEST_KEY", "from_env")
    env = ProcessEnvironment(overrides={"ENVPARAMS_TEST_KEY": "from_override"})
    assert env.get("ENVPARAMS_TEST_KEY") == "from_override"


def test_process_rejects_invalid_name():
    with pytest.raises(EnvWriteError):
        ProcessEnvironment().set("BAD=NAME", "x")


def test_process_is_writable():
    assert ProcessEnvironment().writable


def test_snapshot_ignores_later_changes(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("ENVPARAMS_TEST_KEY", "before")
    env = SnapshotEnvironment()
    monkeypatch.setenv("ENVPARAMS_TEST_KEY", "after")
    assert env.get("ENVPARAMS_TEST_KEY") == "before"


def test_snapshot_overrides_take_precedence(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("ENVPARAMS_TEST_KEY", "from_env")
    env = SnapshotEnvironment(overrides={"ENVPARAMS_TEST_KEY": "from_override"})
    assert env.get("ENVPARAMS_TEST_KEY") == "from_override"


def test_snapshot_is_read_only():
    env = SnapshotEnvironment()
    assert not env.writable
    with pytest.raises(EnvWriteError, match="read-only"):
        env.set("ENVPARAMS_TEST_KEY", "x")


def test_memory_get_set():
    env = MemoryEnvironment(overrides={"A": "1"})
    env.set("B", "2")
    assert env.get("A") == "1"
    assert env.get("B") == "2"
    assert env.get("C") is None


def test_memory_does_not_touch_process(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.delenv("ENVPARAMS_TEST_KEY", raising=False)
    MemoryEnvironment().set("ENVPARAMS_TEST_KEY", "x")
    assert "ENVPARAMS_TEST_KEY" not in os.environ


def test_resolve_source_by_name():
    env = resolve_source("memory", {"A": "1"})
    assert isinstance(env, MemoryEnvironment)
    assert env.get("A") == "1"
    assert isinstance(resolve_source("snapshot"), SnapshotEnvironment)


def test_resolve_unknown_source():
    with pytest.raises(ValueError, match="Unknown environment source 'vxworks'"):
        resolve_source("vxworks")
