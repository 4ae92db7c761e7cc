"""Multi-level feedback queue scheduling with three levels and aging."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable

from .process import GanttSlot, Process, ScheduleResult

LEVELS = 3
QUANTA = (2, 4)
AGING_LIMIT = 9


def _finish(proc: Process, time: int) -> None:
    proc.finish_time = time
    proc.turnaround_time = time - proc.original_arrival_time
    proc.waiting_time = proc.turnaround_time - proc.burst_time - proc.total_io_time


def _until_io(proc: Process) -> int:
    if proc.io_index < proc.io_num:
        return proc.io_start_times[proc.io_index] - proc.burst_time + proc.remaining_time
    return proc.remaining_time


def _leave_for_io(proc: Process, end: int) -> None:
    proc.arrival_time = end + proc.io_durations[proc.io_index]
    proc.io_index += 1


def run_mlfq(processes: Iterable[Process]) -> ScheduleResult:
    """Schedule with three feedback queues.

    Levels 0 and 1 are round robin with quanta 2 and 4; a process that uses up
    its whole quantum drops one level. Level 2 runs each burst up to its next
    I/O or end. A process that has waited more than 9 units in level 1 or 2 is
    moved up one level.
    """
    procs = sorted((p.copy() for p in processes), key=lambda p: p.arrival_time)
    for proc in procs:
        proc.level = 0
    slots: list[GanttSlot] = []
    queues: list[deque[int]] = [deque() for _ in range(LEVELS)]
    queued = [False] * len(procs)
    waited = [0] * len(procs)
    current = 0
    left = sum(p.burst_time for p in procs)
    while left > 0:
        for index, proc in enumerate(procs):
            if proc.arrival_time <= current and not queued[index]:
                queues[proc.level].append(index)
                queued[index] = True
        level = next((lvl for lvl, queue in enumerate(queues) if queue), None)
        if level is None:
            current += 1
            continue
        index = queues[level].popleft()
        proc = procs[index]
        if level < LEVELS - 1:
            if proc.burst_time == proc.remaining_time:
                proc.start_time = current
            quantum = QUANTA[level]
            run = min(quantum, _until_io(proc))
            proc.remaining_time -= run
            end = current + run
            executed = proc.burst_time - proc.remaining_time
            if proc.remaining_time == 0:
                _finish(proc, end)
            elif proc.io_index < proc.io_num and proc.io_start_times[proc.io_index] == executed:
                queued[index] = False
                _leave_for_io(proc, end)
                if run == quantum:
                    proc.level += 1
            else:
                if run == quantum:
                    proc.level += 1
                queues[proc.level].append(index)
        elif proc.io_index < proc.io_num:
            run = _until_io(proc)
            proc.remaining_time -= run
            _leave_for_io(proc, current + run)
            queued[index] = False
        else:
            run = proc.remaining_time
            _finish(proc, current + run)
            proc.remaining_time = 0
        slots.extend(GanttSlot(t, proc.pid) for t in range(current, current + run))
        current += run
        left -= run

        for source, target in ((1, 0), (2, 1)):
            for _ in range(len(queues[source])):
                other = queues[source].popleft()
                waited[other] += run
                if waited[other] > AGING_LIMIT and other != index:
                    waited[other] = 0
                    procs[other].level -= 1
                    queues[target].append(other)
                else:
                    queues[source].append(other)
        waited[index] = 0
    return ScheduleResult(processes=procs, charts=[slots], end_time=current)