"""Public runtime orchestration entry points.

Groups the explorer bootstrap (``run_explorer``) and the lower-level event
loop contracts used by tests and composition code.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .loop import RuntimeLoopCallbacks


def run_explorer(*args, **kwargs):
    """Lazily import explorer entrypoint to keep package imports lightweight."""
    from .app import run_explorer as _run_explorer

    return _run_explorer(*args, **kwargs)


def run_main_loop(*args, **kwargs):
    """Lazily import loop runner to avoid package-import cycles."""
    from .loop import run_main_loop as _run_main_loop

    return _run_main_loop(*args, **kwargs)


def __getattr__(name: str):
    if name == "RuntimeLoopCallbacks":
        from . import loop as _loop

        return getattr(_loop, name)
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


__all__ = [
    "RuntimeLoopCallbacks",
    "run_explorer",
    "run_main_loop",
]
