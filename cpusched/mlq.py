"""Multi-level queue scheduling with three fixed levels."""

from __future__ import annotations

from collections.abc import Iterable
from operator import attrgetter

from .process import Process, ScheduleResult
from .round_robin import _check_quantum, _run_queues

LEVELS = 3
ROUND_ROBIN_LEVEL = 1


def run_mlq(processes: Iterable[Process], time_quantum: int) -> ScheduleResult:
    """Schedule with three queues chosen by pid modulo 3.

    Levels 0 and 2 run each burst up to its next I/O or end; level 1 is round
    robin with ``time_quantum``. A lower level always goes first.
    """
    _check_quantum(time_quantum)
    procs = sorted((p.copy() for p in processes), key=attrgetter("arrival_time"))
    for proc in procs:
        proc.level = proc.pid % LEVELS
    return _run_queues(
        procs,
        level_of=attrgetter("level"),
        quantum_of=lambda level: time_quantum if level == ROUND_ROBIN_LEVEL else None,
        mark_io=False,
        require_pending=True,
    )