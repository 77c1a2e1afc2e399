import threading

from envparams.threads.hooks import ThreadHooks


def test_hooks_unset_by_default():
    hooks = ThreadHooks()
    assert hooks.default is None
    assert hooks.main is None


def test_hooks_hold_assigned_callbacks():
    seen: list[threading.Thread] = []
    hooks = ThreadHooks(default=seen.append)
    hooks.main = seen.append
    assert hooks.default is not None
    hooks.default(threading.current_thread())
    assert seen == [threading.current_thread()]


def test_hooks_are_per_instance():
    first = ThreadHooks(default=lambda t: None)
    assert ThreadHooks().default is None
    assert first.default is not None
