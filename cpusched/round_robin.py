"""Round-robin scheduling, plain and with one queue per priority."""

from __future__ import annotations

from collections import deque
from collections.abc import Callable, Iterable
from enum import Enum, auto
from operator import attrgetter

from .fcfs import _finish
from .process import GanttSlot, Process, ScheduleResult


class _Outcome(Enum):
    DONE = auto()
    IO = auto()
    PREEMPTED = auto()


def _check_quantum(time_quantum: int) -> None:
    if time_quantum < 1:
        raise ValueError("time_quantum must be at least 1")


def _until_io(proc: Process) -> int:
    if proc.io_index < proc.io_num:
        return proc.io_start_times[proc.io_index] - proc.burst_time + proc.remaining_time
    return proc.remaining_time


def _slice(
    proc: Process, current: int, quantum: int | None, slots: list[GanttSlot], mark_io: bool
) -> tuple[int, _Outcome]:
    """Run proc for at most one quantum (or to its next I/O or end when None)."""
    if proc.burst_time == proc.remaining_time:
        proc.start_time = current
    run = _until_io(proc) if quantum is None else min(quantum, _until_io(proc))
    proc.remaining_time -= run
    end = current + run
    executed = proc.burst_time - proc.remaining_time
    if proc.remaining_time == 0:
        _finish(proc, end)
        outcome = _Outcome.DONE
    elif proc.io_index < proc.io_num and proc.io_start_times[proc.io_index] == executed:
        proc.arrival_time = end + proc.io_durations[proc.io_index]
        proc.io_index += 1
        outcome = _Outcome.IO
    else:
        outcome = _Outcome.PREEMPTED
    flag_last = mark_io and outcome is _Outcome.IO
    slots.extend(
        GanttSlot(t, proc.pid, io=flag_last and t == end - 1) for t in range(current, end)
    )
    return run, outcome


def _run_queues(
    procs: list[Process],
    level_of: Callable[[Process], int],
    quantum_of: Callable[[int], int | None],
    mark_io: bool,
    require_pending: bool = False,
) -> ScheduleResult:
    """Serve FIFO queues by level, the lowest non-empty level first."""
    slots: list[GanttSlot] = []
    queues: dict[int, deque[int]] = {}
    queued = [False] * len(procs)
    current = 0
    left = sum(p.burst_time for p in procs)
    while left > 0:
        for index, proc in enumerate(procs):
            ready = proc.arrival_time <= current and not queued[index]
            if ready and (proc.remaining_time > 0 or not require_pending):
                queues.setdefault(level_of(proc), deque()).append(index)
                queued[index] = True
        levels = [level for level, queue in queues.items() if queue]
        if not levels:
            current += 1
            continue
        level = min(levels)
        index = queues[level].popleft()
        run, outcome = _slice(procs[index], current, quantum_of(level), slots, mark_io)
        if outcome is _Outcome.IO:
            queued[index] = False
        elif outcome is _Outcome.PREEMPTED:
            queues[level].append(index)
        current += run
        left -= run
    return ScheduleResult(processes=procs, charts=[slots], end_time=current)


def run_rr(processes: Iterable[Process], time_quantum: int) -> ScheduleResult:
    """Serve ready processes in turn, each for at most ``time_quantum`` units."""
    _check_quantum(time_quantum)
    return _run_queues(
        [p.copy() for p in processes],
        level_of=lambda proc: 0,
        quantum_of=lambda level: time_quantum,
        mark_io=True,
    )


def run_priority_rr(processes: Iterable[Process], time_quantum: int) -> ScheduleResult:
    """Round robin within each priority; the lowest non-empty priority value runs first."""
    _check_quantum(time_quantum)
    return _run_queues(
        [p.copy() for p in processes],
        level_of=attrgetter("priority"),
        quantum_of=lambda level: time_quantum,
        mark_io=False,
    )