"""
Suspendable tasks and their composition.

A Task does its work inside an Execution. The Execution supplies the
time, the only suspension point (sleep), and a shared ended flag used for
cancellation. Tasks signal failure by raising; the first failure is
recorded on the Execution so concurrent siblings see it.
"""

from __future__ import annotations

import logging
import threading
from typing import Callable, Iterable, Protocol

from .clock import Clock, SystemClock

LOGGER = logging.getLogger(__name__)


class Execution:
    """
    Shared state for one run of a task tree.

    Args:
        clock: Clock used for now() and sleep(); defaults to SystemClock
    """

    def __init__(self, clock: Clock | None = None):
        self.clock = clock or SystemClock()
        self._lock = threading.Lock()
        self._ended = threading.Event()
        self._done = threading.Event()
        self._error: Exception | None = None

    def now(self) -> float:
        return self.clock.now()

    def sleep(self, duration: float) -> bool:
        """
        Suspend for duration seconds.

        Returns False if the execution was ended before or during the
        sleep. Callers must stop work when this returns False.
        """
        if self._ended.is_set():
            return False
        return self.clock.sleep(duration, self._ended)

    @property
    def error(self) -> Exception | None:
        """First failure recorded, or None."""
        with self._lock:
            return self._error

    def set_error(self, error: Exception) -> None:
        """Record a failure (first one wins) and end the execution."""
        with self._lock:
            if self._error is None:
                self._error = error
        self._ended.set()

    def end(self) -> None:
        """Ask every task in this execution to stop at its next sleep."""
        self._ended.set()

    @property
    def is_ended(self) -> bool:
        return self._ended.is_set()

    def wait(self, timeout: float | None = None) -> bool:
        """Block until the task finishes. Returns False on timeout."""
        return self._done.wait(timeout)

    def _finish(self) -> None:
        self._ended.set()
        self._done.set()


class Task(Protocol):
    """A unit of work run inside an Execution."""

    def do(self, execution: Execution) -> None:
        ...


class TaskFunc:
    """Adapt a plain callable taking an Execution into a Task."""

    def __init__(self, func: Callable[[Execution], None]):
        self._func = func

    def do(self, execution: Execution) -> None:
        self._func(execution)


class SeriesTask:
    """Run tasks one after another; the first failure stops the rest."""

    def __init__(self, tasks: Iterable[Task]):
        self.tasks = list(tasks)

    def do(self, execution: Execution) -> None:
        for task in self.tasks:
            if execution.is_ended:
                return
            task.do(execution)


class RepeatingTask:
    """Run task count times in sequence; the first failure stops the rest."""

    def __init__(self, task: Task, count: int):
        self.task = task
        self.count = count

    def do(self, execution: Execution) -> None:
        for _ in range(self.count):
            if execution.is_ended:
                return
            self.task.do(execution)


class ParallelTask:
    """
    Run tasks concurrently, one thread each.

    Succeeds only if every task succeeds. A failure ends the shared
    execution, so siblings stop at their next sleep, and is re-raised
    once all threads have returned.
    """

    def __init__(self, tasks: Iterable[Task]):
        self.tasks = list(tasks)

    def do(self, execution: Execution) -> None:
        lock = threading.Lock()
        failures: list[Exception] = []

        def run_child(task: Task) -> None:
            try:
                task.do(execution)
            except Exception as e:
                with lock:
                    failures.append(e)
                execution.set_error(e)

        threads = [
            threading.Thread(target=run_child, args=(task,), name=f"ParallelTask[{i}]", daemon=True)
            for i, task in enumerate(self.tasks)
        ]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        if failures:
            raise failures[0]


def _execute(task: Task, execution: Execution) -> None:
    try:
        task.do(execution)
    except Exception as e:
        LOGGER.debug("Task failed: %r", e)
        execution.set_error(e)
    finally:
        execution._finish()


def run(task: Task, clock: Clock | None = None) -> None:
    """
    Run task to completion in the calling thread.

    Raises:
        Exception: The first failure reported by any part of the task
    """
    execution = Execution(clock)
    _execute(task, execution)
    if execution.error is not None:
        raise execution.error


def start(task: Task, clock: Clock | None = None) -> Execution:
    """
    Run task in a background thread.

    Returns:
        The Execution; call end() to cancel and wait() to join
    """
    execution = Execution(clock)
    thread = threading.Thread(target=_execute, args=(task, execution), name="TaskExecution", daemon=True)
    thread.start()
    return execution


def run_for_testing(task: Task, clock: Clock) -> None:
    """Run task against a deterministic clock such as ClockForTesting."""
    run(task, clock)
