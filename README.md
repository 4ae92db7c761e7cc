# cpusched

A library that simulates CPU scheduling algorithms. Each process has an
arrival time, a CPU burst, a priority, a deadline and up to four I/O
requests. A scheduler runs the set in unit time steps and returns the
finished processes with their waiting and turnaround times, together with a
Gantt log that can be rendered as text.

## Processes

`cpusched.process.Process` is a dataclass:

```python
from cpusched.process import Process

p = Process(
    pid=1,
    arrival_time=0,
    burst_time=8,
    priority=2,
    io_start_times=[3, 5],
    io_durations=[2, 1],
)
```

The I/O start times count units of CPU already executed. They must increase
strictly and lie inside the burst, each needs one duration, and there may be
at most four; otherwise `ValueError` is raised. `remaining_time` and
`original_arrival_time` default to the burst and the arrival time, and
`io_num` and `total_io_time` are derived. `Process.copy()` returns an
independent copy.

## Schedulers

Every scheduler takes an iterable of processes, works on copies of them and
returns a `ScheduleResult`.

| Function | Module | Behaviour |
|---|---|---|
| `run_fcfs(processes)` | `cpusched.fcfs` | First come, first served; each burst runs to its next I/O or its end |
| `run_double_fcfs(processes)` | `cpusched.double_fcfs` | First come, first served on two CPUs; one chart per CPU |
| `run_sjf_np(processes)` | `cpusched.sjf` | Least remaining time first, one burst at a time |
| `run_sjf_p(processes)` | `cpusched.sjf` | Least remaining time first, re-chosen every unit |
| `run_ljf_np(processes)` | `cpusched.ljf` | Most remaining time first, one burst at a time |
| `run_ljf_p(processes)` | `cpusched.ljf` | Most remaining time first, re-chosen every unit |
| `run_rr(processes, time_quantum)` | `cpusched.round_robin` | Round robin |
| `run_priority_rr(processes, time_quantum)` | `cpusched.round_robin` | Round robin within each priority; the lowest priority value goes first |
| `run_mlq(processes, time_quantum)` | `cpusched.mlq` | Three fixed queues chosen by `pid % 3`; level 1 is round robin, levels 0 and 2 run whole bursts |
| `run_mlfq(processes)` | `cpusched.mlfq` | Three feedback queues: quanta 2 and 4, then whole bursts; a process that uses its full quantum drops a level, one that waits more than 9 units in level 1 or 2 moves up |

Ties are broken by arrival time. The round-robin schedulers raise
`ValueError` when `time_quantum` is less than 1.

## Results

`ScheduleResult` holds `processes`, `charts` (a list of Gantt logs, one per
CPU, each a list of `GanttSlot(time, pid, io)`), `end_time` and
`cpu_utilization`, and offers `average_waiting()` and
`average_turnaround()`.

`cpusched.gantt` renders them:

- `build_segments(slots)` groups a log into `(pid, start, end)` runs, with
  pid 0 for idle gaps;
- `render_gantt(slots)` draws one chart as text;
- `render_results(result)` draws every chart followed by the per-process
  times and the averages.

```python
from cpusched.process import Process
from cpusched.round_robin import run_rr
from cpusched.gantt import render_gantt, render_results

procs = [
    Process(pid=1, arrival_time=0, burst_time=5, priority=2),
    Process(pid=2, arrival_time=1, burst_time=3, priority=1),
]
result = run_rr(procs, 4)
print(render_gantt(result.charts[0]))
print(render_results(result))
print(result.average_waiting(), result.average_turnaround())
```

## What it does not do

The package is a library only. It installs no command, does not prompt for
or generate process sets, and has no plain priority, priority-aging,
I/O-ordered or real-time (deadline or period based) schedulers; the
schedulers above leave `cpu_utilization` unset.

## Tests

```
pip install -e .[test]
pytest
```