"""Fire-and-forget submission of notification work."""

from __future__ import annotations

import logging
from typing import Any, Callable, Protocol

from fastapi import BackgroundTasks

logger = logging.getLogger(__name__)


class TaskScheduler(Protocol):
    """Run ``func`` outside the caller's control flow.

    The caller never waits for the result and never sees an exception raised
    by ``func``; failures end up in the log.
    """

    def submit(self, func: Callable[..., Any], /, *args: Any, **kwargs: Any) -> None: ...


def run_safely(func: Callable[..., Any], /, *args: Any, **kwargs: Any) -> None:
    """Invoke ``func`` and log any exception instead of raising it."""

    try:
        func(*args, **kwargs)
    except Exception:
        logger.exception(
            "Background notification task %s failed", getattr(func, "__qualname__", func)
        )


class BackgroundTaskScheduler:
    """Defer work until the HTTP response has been sent."""

    def __init__(self, background_tasks: BackgroundTasks) -> None:
        self._background_tasks = background_tasks

    def submit(self, func: Callable[..., Any], /, *args: Any, **kwargs: Any) -> None:
        self._background_tasks.add_task(run_safely, func, *args, **kwargs)


class InlineTaskScheduler:
    """Run work immediately on the calling thread, still swallowing errors.

    Used by command line scripts and tests, where there is no response to
    protect but the same error isolation is expected.
    """

    def submit(self, func: Callable[..., Any], /, *args: Any, **kwargs: Any) -> None:
        run_safely(func, *args, **kwargs)


__all__ = [
    "BackgroundTaskScheduler",
    "InlineTaskScheduler",
    "TaskScheduler",
    "run_safely",
]
