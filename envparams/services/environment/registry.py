"""Maps ``--source`` names to environment implementations.

Classes are referenced by dotted path and imported only when selected.
"""

import importlib
from typing import Any

from envparams.services.environment.interface import EnvironmentInterface

SOURCES: dict[str, str] = {
    "process": "envparams.services.environment.process_environment.ProcessEnvironment",
    "snapshot": "envparams.services.environment.snapshot_environment.SnapshotEnvironment",
    "memory": "envparams.services.environment.memory_environment.MemoryEnvironment",
}


def resolve_class(dotted_path: str) -> type[Any]:
    """Import and return a class from a dotted module.ClassName path."""
    module_path, class_name = dotted_path.rsplit(".", 1)
    module = importlib.import_module(module_path)
    return getattr(module, class_name)


def resolve_source(
    name: str, overrides: dict[str, str] | None = None
) -> EnvironmentInterface:
    """Instantiate the environment source registered under *name*."""
    dotted = SOURCES.get(name)
    if dotted is None:
        raise ValueError(
            f"Unknown environment source '{name}' (available: {', '.join(SOURCES)})"
        )
    return resolve_class(dotted)(overrides=overrides)
