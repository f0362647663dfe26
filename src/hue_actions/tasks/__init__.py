"""Clock and task runtime that light actions run on."""

from .clock import Clock, SystemClock, ClockForTesting
from .execution import (
    Execution,
    Task,
    TaskFunc,
    SeriesTask,
    ParallelTask,
    RepeatingTask,
    run,
    start,
    run_for_testing,
)

__all__ = [
    "Clock",
    "SystemClock",
    "ClockForTesting",
    "Execution",
    "Task",
    "TaskFunc",
    "SeriesTask",
    "ParallelTask",
    "RepeatingTask",
    "run",
    "start",
    "run_for_testing",
]
