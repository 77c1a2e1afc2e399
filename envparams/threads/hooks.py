from __future__ import annotations

import threading
from dataclasses import dataclass
from typing import Callable

ThreadHook = Callable[[threading.Thread], None]


@dataclass
class ThreadHooks:
    """Extension points for newly created threads.

    Both are unset by default. Calling them is left to whatever creates the
    threads; nothing here invokes a hook.
    """

    default: ThreadHook | None = None
    main: ThreadHook | None = None
