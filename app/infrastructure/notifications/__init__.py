"""In-app and push notification delivery helpers for the infrastructure layer."""

from .dispatcher import DispatchSummary, PushDispatcher
from .scheduler import (
    BackgroundTaskScheduler,
    InlineTaskScheduler,
    TaskScheduler,
    run_safely,
)

__all__ = [
    "BackgroundTaskScheduler",
    "DispatchSummary",
    "InlineTaskScheduler",
    "PushDispatcher",
    "TaskScheduler",
    "run_safely",
]
