from collections import Counter, defaultdict

import pytest

from cpusched.double_fcfs import run_double_fcfs
from cpusched.process import Process


def check_invariants(result, inputs):
    by_pid = {p.pid: p for p in inputs}
    on_cpu_at = defaultdict(list)
    for chart in result.charts:
        stamps = [slot.time for slot in chart]
        assert stamps == sorted(set(stamps))
        for slot in chart:
            on_cpu_at[slot.time].append(slot.pid)
            assert slot.time >= by_pid[slot.pid].original_arrival_time
    assert all(len(pids) == len(set(pids)) for pids in on_cpu_at.values())
    executed = Counter(pid for pids in on_cpu_at.values() for pid in pids)
    assert executed == Counter({pid: p.burst_time for pid, p in by_pid.items()})
    for p in result.processes:
        assert p.remaining_time == 0
        assert p.turnaround_time - p.waiting_time == p.burst_time + p.total_io_time
        assert p.finish_time - p.turnaround_time == p.original_arrival_time


def test_two_processes_run_in_parallel():
    inputs = [Process(pid=1, arrival_time=0, burst_time=4), Process(pid=2, arrival_time=0, burst_time=3)]
    result = run_double_fcfs(inputs)
    assert [[s.pid for s in chart] for chart in result.charts] == [[1] * 4, [2] * 3]
    assert result.end_time == 4
    assert [p.waiting_time for p in result.processes] == [0, 0]


@pytest.mark.parametrize(
    "inputs, expected_order",
    [
        (
            [
                Process(pid=1, arrival_time=0, burst_time=2),
                Process(pid=2, arrival_time=0, burst_time=5),
                Process(pid=3, arrival_time=0, burst_time=3),
            ],
            [1, 2, 3],
        ),
        (
            [
                Process(pid=5, arrival_time=4, burst_time=2),
                Process(pid=2, arrival_time=0, burst_time=3),
                Process(pid=7, arrival_time=1, burst_time=1),
            ],
            [5, 2, 7],
        ),
    ],
)
def test_results_keep_input_order(inputs, expected_order):
    result = run_double_fcfs(inputs)
    assert [p.pid for p in result.processes] == expected_order
    check_invariants(result, inputs)


def test_third_process_waits_for_free_cpu():
    inputs = [
        Process(pid=1, arrival_time=0, burst_time=2),
        Process(pid=2, arrival_time=0, burst_time=5),
        Process(pid=3, arrival_time=0, burst_time=3),
    ]
    p1, _, p3 = run_double_fcfs(inputs).processes
    assert p3.start_time == p1.finish_time


def test_io_frees_cpu_for_others():
    inputs = [
        Process(pid=1, arrival_time=0, burst_time=6, io_start_times=[2, 4], io_durations=[3, 1]),
        Process(pid=2, arrival_time=0, burst_time=5, io_start_times=[1], io_durations=[2]),
        Process(pid=3, arrival_time=1, burst_time=4),
    ]
    result = run_double_fcfs(inputs)
    assert sorted(s.pid for chart in result.charts for s in chart if s.io) == [1, 1, 2]
    check_invariants(result, inputs)


def test_empty_input():
    result = run_double_fcfs([])
    assert (result.charts, result.end_time) == ([[], []], 0)