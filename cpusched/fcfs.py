"""First-come, first-served scheduling and the scheduling loops it shares."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from enum import Enum, auto
from operator import attrgetter
from typing import Any

from .process import GanttSlot, Process, ScheduleResult

SortKey = Callable[[Process], Any]
TickHook = Callable[[list[Process], Process, int], None]


class IoMark(Enum):
    """Which slots of a burst that ends in I/O carry the I/O flag."""

    NONE = auto()
    LAST = auto()
    ALL = auto()


def _finish(proc: Process, time: int) -> None:
    proc.finish_time = time
    proc.turnaround_time = time - proc.original_arrival_time
    proc.waiting_time = proc.turnaround_time - proc.burst_time - proc.total_io_time


def _pick(procs: list[Process], current: int) -> tuple[Process, int]:
    """Return the first ready process in list order, advancing time while idle."""
    pending = [p for p in procs if p.remaining_time > 0]
    current = max(current, min(p.arrival_time for p in pending))
    return next(p for p in pending if p.arrival_time <= current), current


def _tick(proc: Process, current: int) -> bool:
    """Run proc for one unit; return whether it leaves for I/O."""
    if proc.burst_time == proc.remaining_time:
        proc.start_time = current
    proc.remaining_time -= 1
    if proc.remaining_time == 0:
        _finish(proc, current + 1)
    executed = proc.burst_time - proc.remaining_time
    if proc.io_index < proc.io_num and executed == proc.io_start_times[proc.io_index]:
        proc.arrival_time = current + proc.io_durations[proc.io_index] + 1
        proc.io_index += 1
        return True
    return False


def _run_burst(proc: Process, current: int, slots: list[GanttSlot], io_mark: IoMark) -> int:
    """Run proc until its next I/O or completion; return the units executed."""
    if proc.io_index == 0:
        proc.start_time = current
    if proc.io_index == proc.io_num:
        run = proc.remaining_time
        slots.extend(GanttSlot(t, proc.pid) for t in range(current, current + run))
        proc.remaining_time = 0
        _finish(proc, current + run)
        return run
    seg_start = proc.io_start_times[proc.io_index - 1] if proc.io_index else 0
    run = proc.io_start_times[proc.io_index] - seg_start
    last = current + run - 1
    slots.extend(
        GanttSlot(
            t,
            proc.pid,
            io=io_mark is IoMark.ALL or (io_mark is IoMark.LAST and t == last),
        )
        for t in range(current, current + run)
    )
    proc.remaining_time -= run
    proc.arrival_time = current + run + proc.io_durations[proc.io_index]
    proc.io_index += 1
    return run


def _schedule_bursts(
    processes: Iterable[Process], key: SortKey, io_mark: IoMark = IoMark.LAST
) -> ScheduleResult:
    """Non-preemptive loop: the best ready process by key runs a whole burst."""
    procs = [p.copy() for p in processes]
    slots: list[GanttSlot] = []
    current = 0
    left = sum(p.burst_time for p in procs)
    while left > 0:
        procs.sort(key=key)
        proc, current = _pick(procs, current)
        run = _run_burst(proc, current, slots, io_mark)
        current += run
        left -= run
    return ScheduleResult(processes=procs, charts=[slots], end_time=current)


def _schedule_units(
    processes: Iterable[Process], key: SortKey, before_tick: TickHook | None = None
) -> ScheduleResult:
    """Preemptive loop: the best ready process by key runs one unit at a time."""
    procs = [p.copy() for p in processes]
    slots: list[GanttSlot] = []
    current = 0
    left = sum(p.burst_time for p in procs)
    while left > 0:
        procs.sort(key=key)
        proc, current = _pick(procs, current)
        if before_tick is not None:
            before_tick(procs, proc, current)
        went_io = _tick(proc, current)
        slots.append(GanttSlot(current, proc.pid, io=went_io))
        current += 1
        left -= 1
    return ScheduleResult(processes=procs, charts=[slots], end_time=current)


def run_fcfs(processes: Iterable[Process]) -> ScheduleResult:
    """Schedule processes in order of arrival, running each burst to its I/O or end."""
    return _schedule_bursts(processes, attrgetter("arrival_time"))