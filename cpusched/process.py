"""Process descriptions, Gantt chart slots and schedule results."""

from __future__ import annotations

from dataclasses import dataclass, field, replace

MAX_IO = 4


@dataclass
class Process:
    """A simulated process together with its scheduling state."""

    pid: int
    arrival_time: int
    burst_time: int
    priority: int = 0
    deadline: int = 0
    io_start_times: list[int] = field(default_factory=list)
    io_durations: list[int] = field(default_factory=list)
    original_arrival_time: int | None = None
    remaining_time: int | None = None
    io_index: int = 0
    state: int = 0
    level: int = 0
    start_time: int = 0
    finish_time: int = 0
    waiting_time: int = 0
    turnaround_time: int = 0
    io_num: int = field(init=False, default=0)
    total_io_time: int = field(init=False, default=0)

    def __post_init__(self) -> None:
        if self.burst_time < 0:
            raise ValueError("burst_time must not be negative")
        self.io_start_times = list(self.io_start_times)
        self.io_durations = list(self.io_durations)
        if len(self.io_start_times) != len(self.io_durations):
            raise ValueError("every I/O start time needs exactly one duration")
        if len(self.io_start_times) > MAX_IO:
            raise ValueError(f"a process has at most {MAX_IO} I/O requests")
        previous = 0
        for start, duration in zip(self.io_start_times, self.io_durations):
            if not previous < start < self.burst_time:
                raise ValueError(
                    "I/O start times must increase strictly and lie inside the burst"
                )
            if duration < 0:
                raise ValueError("I/O durations must not be negative")
            previous = start
        if self.original_arrival_time is None:
            self.original_arrival_time = self.arrival_time
        if self.remaining_time is None:
            self.remaining_time = self.burst_time
        self.io_num = len(self.io_start_times)
        self.total_io_time = sum(self.io_durations)

    def copy(self) -> Process:
        """Return an independent copy, state included."""
        return replace(
            self,
            io_start_times=list(self.io_start_times),
            io_durations=list(self.io_durations),
        )


@dataclass(frozen=True)
class GanttSlot:
    """One unit of CPU time given to a process."""

    time: int
    pid: int
    io: bool = False


@dataclass
class ScheduleResult:
    """Outcome of one scheduling run."""

    processes: list[Process]
    charts: list[list[GanttSlot]]
    end_time: int
    cpu_utilization: float | None = None

    def average_waiting(self) -> float:
        """Mean waiting time over all processes."""
        if not self.processes:
            return 0.0
        return sum(p.waiting_time for p in self.processes) / len(self.processes)

    def average_turnaround(self) -> float:
        """Mean turnaround time over all processes."""
        if not self.processes:
            return 0.0
        return sum(p.turnaround_time for p in self.processes) / len(self.processes)