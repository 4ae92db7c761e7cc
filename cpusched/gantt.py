"""Gantt chart and result rendering."""

from __future__ import annotations

from collections.abc import Iterable

from .process import GanttSlot, ScheduleResult

IDLE_PID = 0


def build_segments(slots: Iterable[GanttSlot]) -> list[tuple[int, int, int]]:
    """Group slots into (pid, start, end) runs; pid 0 marks idle time."""
    starts: list[tuple[int, int]] = []
    last_pid = -1
    prev_time = -1
    for slot in slots:
        if not starts:
            if slot.time > 0:
                starts.append((IDLE_PID, 0))
            starts.append((slot.pid, slot.time))
            last_pid = slot.pid
        else:
            if slot.time > prev_time + 1 and last_pid != IDLE_PID:
                starts.append((IDLE_PID, prev_time + 1))
                last_pid = IDLE_PID
            if slot.pid != last_pid:
                starts.append((slot.pid, slot.time))
                last_pid = slot.pid
        prev_time = slot.time
    ends = [start for _, start in starts[1:]] + [prev_time + 1]
    return [(pid, start, end) for (pid, start), end in zip(starts, ends)]


def render_gantt(slots: Iterable[GanttSlot]) -> str:
    """Render a Gantt chart block for the given slots."""
    segments = build_segments(slots)
    cells = "".join(
        "|%5s" % "Idle" if pid == IDLE_PID else f"|  P{pid:2d}"
        for pid, _, _ in segments
    )
    marks = [start for _, start, _ in segments]
    marks.append(segments[-1][2] if segments else 0)
    times = str(marks[0]) + "".join(f"{mark:6d}" for mark in marks[1:])
    return f"\n[Gantt Chart]\n{cells}|\n{times}\n\n"


def render_results(result: ScheduleResult) -> str:
    """Render the charts, per-process times and averages of a run."""
    parts = [render_gantt(chart) for chart in result.charts]
    parts.append("\n[Results]\n")
    parts.extend(
        f"P{p.pid}: Waiting = {p.waiting_time}, Turnaround = {p.turnaround_time}\n"
        for p in result.processes
    )
    parts.append(f"\nAverage Waiting Time: {result.average_waiting():.2f}\n")
    parts.append(f"Average Turnaround Time: {result.average_turnaround():.2f}\n")
    if result.cpu_utilization is not None:
        parts.append(f"CPU Utilized Rate: {result.cpu_utilization:.2f}%\n")
    return "".join(parts)