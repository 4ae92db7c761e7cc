"""First-come, first-served scheduling on two CPUs."""

from __future__ import annotations

from collections.abc import Iterable

from .fcfs import _tick
from .process import GanttSlot, Process, ScheduleResult


def _next_ready(order: list[Process], current: int, busy: Process | None) -> Process | None:
    return next(
        (
            p
            for p in order
            if p.arrival_time <= current
            and p.remaining_time > 0
            and (busy is None or p.pid != busy.pid)
        ),
        None,
    )


def run_double_fcfs(processes: Iterable[Process]) -> ScheduleResult:
    """Schedule processes first-come, first-served on two CPUs in parallel."""
    procs = [p.copy() for p in processes]
    order = list(procs)
    charts: list[list[GanttSlot]] = [[], []]
    running: list[Process | None] = [None, None]
    current = 0
    left = sum(p.burst_time for p in procs)
    while left > 0:
        order.sort(key=lambda p: p.arrival_time)
        for cpu, other in ((0, 1), (1, 0)):
            if running[cpu] is None:
                running[cpu] = _next_ready(order, current, running[other])
        for cpu, proc in enumerate(list(running)):
            if proc is None:
                continue
            went_io = _tick(proc, current)
            if proc.remaining_time == 0 or went_io:
                running[cpu] = None
            charts[cpu].append(GanttSlot(current, proc.pid, io=went_io))
            left -= 1
        current += 1
    return ScheduleResult(processes=procs, charts=charts, end_time=current)