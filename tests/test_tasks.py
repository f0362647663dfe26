"""Tests for the task runtime."""

import threading
import time

import pytest

from hue_actions.actions import Immediate, Parallel, Sleep, compile_action
from hue_actions.errors import OpaqueDispatchError, SetError
from hue_actions.tasks import (
    ClockForTesting,
    Execution,
    ParallelTask,
    RepeatingTask,
    SeriesTask,
    SystemClock,
    TaskFunc,
    run,
    run_for_testing,
    start,
)

from tests.helpers import RecordingSetter


def recorder(log, name):
    return TaskFunc(lambda e: log.append(name))


class TestClockForTesting:

    def test_sleep_advances_time(self):
        clock = ClockForTesting(10.0)
        assert clock.sleep(2.5, threading.Event())
        assert clock.now() == 12.5

    def test_sleep_when_interrupted(self):
        clock = ClockForTesting(0.0)
        interrupt = threading.Event()
        interrupt.set()
        assert not clock.sleep(1.0, interrupt)
        assert clock.now() == 0.0


class TestExecution:

    def test_first_error_wins(self):
        execution = Execution(ClockForTesting())
        first, second = ValueError("first"), ValueError("second")
        execution.set_error(first)
        execution.set_error(second)
        assert execution.error is first
        assert execution.is_ended

    def test_sleep_after_end(self):
        clock = ClockForTesting()
        execution = Execution(clock)
        execution.end()
        assert not execution.sleep(1.0)
        assert clock.now() == 0.0


class TestComposition:

    def test_series_runs_in_order(self, clock):
        log = []
        run_for_testing(SeriesTask([recorder(log, "a"), recorder(log, "b")]), clock)
        assert log == ["a", "b"]

    def test_series_stops_on_failure(self, clock):
        log = []

        def fail(e):
            raise ValueError("bad")

        task = SeriesTask([recorder(log, "a"), TaskFunc(fail), recorder(log, "c")])
        with pytest.raises(ValueError, match="bad"):
            run_for_testing(task, clock)
        assert log == ["a"]

    def test_series_stops_when_ended(self, clock):
        log = []
        task = SeriesTask([recorder(log, "a"), TaskFunc(lambda e: e.end()), recorder(log, "c")])
        run_for_testing(task, clock)
        assert log == ["a"]

    def test_repeating_task(self, clock):
        log = []
        run_for_testing(RepeatingTask(recorder(log, "x"), 3), clock)
        assert log == ["x", "x", "x"]

    def test_parallel_waits_for_all(self, clock):
        log = []
        run_for_testing(ParallelTask([recorder(log, "a"), recorder(log, "b")]), clock)
        assert sorted(log) == ["a", "b"]


class TestRealTime:

    def test_parallel_failure_interrupts_sleeping_sibling(self):
        setter = RecordingSetter(SystemClock(), error=SetError(b"boom"))
        action = Parallel([Sleep(10.0), Immediate.of(on=True, lights=[1])])
        began = time.monotonic()
        with pytest.raises(OpaqueDispatchError):
            run(compile_action(action, setter))
        assert time.monotonic() - began < 5.0

    def test_start_and_end(self):
        execution = start(compile_action(Sleep(10.0), RecordingSetter(SystemClock())))
        execution.end()
        assert execution.wait(5.0)
        assert execution.error is None

    def test_start_reports_error(self):
        setter = RecordingSetter(SystemClock(), error=SetError(b"boom"))
        execution = start(compile_action(Immediate.of(on=True), setter))
        assert execution.wait(5.0)
        assert isinstance(execution.error, OpaqueDispatchError)
