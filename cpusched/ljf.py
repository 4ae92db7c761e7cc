"""Longest-job-first scheduling, non-preemptive and preemptive."""

from __future__ import annotations

from collections.abc import Iterable

from .fcfs import IoMark, _schedule_bursts, _schedule_units
from .process import Process, ScheduleResult


def _key(proc: Process) -> tuple[int, int]:
    return -proc.remaining_time, proc.arrival_time


def run_ljf_np(processes: Iterable[Process]) -> ScheduleResult:
    """Run the ready process with the most remaining time up to its next I/O or end."""
    return _schedule_bursts(processes, _key, io_mark=IoMark.ALL)


def run_ljf_p(processes: Iterable[Process]) -> ScheduleResult:
    """Each time unit, run the ready process with the most remaining time."""
    return _schedule_units(processes, _key)