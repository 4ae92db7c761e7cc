"""Shortest-job-first scheduling, non-preemptive and preemptive."""

from __future__ import annotations

from collections.abc import Iterable
from operator import attrgetter

from .fcfs import _schedule_bursts, _schedule_units
from .process import Process, ScheduleResult

_KEY = attrgetter("remaining_time", "arrival_time")


def run_sjf_np(processes: Iterable[Process]) -> ScheduleResult:
    """Run the ready process with the least remaining time up to its next I/O or end."""
    return _schedule_bursts(processes, _KEY)


def run_sjf_p(processes: Iterable[Process]) -> ScheduleResult:
    """Each time unit, run the ready process with the least remaining time."""
    return _schedule_units(processes, _KEY)