import pytest

from cpusched.process import GanttSlot, Process, ScheduleResult


def test_defaults_follow_arrival_and_burst():
    p = Process(pid=1, arrival_time=4, burst_time=9)
    assert p.original_arrival_time == 4
    assert p.remaining_time == 9
    assert p.io_num == 0
    assert p.total_io_time == 0


def test_io_fields_are_derived():
    p = Process(pid=2, arrival_time=0, burst_time=10, io_start_times=[2, 5], io_durations=[1, 2])
    assert p.io_num == len(p.io_start_times)
    assert p.total_io_time == 3


def test_copy_is_independent():
    p = Process(pid=1, arrival_time=0, burst_time=8, io_start_times=[3], io_durations=[2])
    clone = p.copy()
    clone.remaining_time = 1
    clone.io_start_times.append(5)
    clone.arrival_time = 7
    assert p.remaining_time == 8
    assert p.io_start_times == [3]
    assert p.arrival_time == 0
    assert clone.original_arrival_time == p.original_arrival_time


def test_copy_keeps_state():
    p = Process(pid=3, arrival_time=1, burst_time=5, remaining_time=2, io_index=0, level=2)
    clone = p.copy()
    assert clone == p


def test_mismatched_io_lists_rejected():
    with pytest.raises(ValueError):
        Process(pid=1, arrival_time=0, burst_time=5, io_start_times=[1, 2], io_durations=[1])


def test_too_many_io_requests_rejected():
    with pytest.raises(ValueError):
        Process(
            pid=1,
            arrival_time=0,
            burst_time=20,
            io_start_times=[1, 2, 3, 4, 5],
            io_durations=[1, 1, 1, 1, 1],
        )


@pytest.mark.parametrize("starts", [[0], [3, 3], [4, 2], [5], [7]])
def test_bad_io_start_times_rejected(starts):
    with pytest.raises(ValueError):
        Process(pid=1, arrival_time=0, burst_time=5, io_start_times=starts, io_durations=[1] * len(starts))


def test_negative_burst_rejected():
    with pytest.raises(ValueError):
        Process(pid=1, arrival_time=0, burst_time=-1)


def test_gantt_slot_defaults_to_no_io():
    slot = GanttSlot(time=3, pid=2)
    assert (slot.time, slot.pid, slot.io) == (3, 2, False)


def test_result_averages():
    a = Process(pid=1, arrival_time=0, burst_time=1, waiting_time=2, turnaround_time=5)
    b = Process(pid=2, arrival_time=0, burst_time=1, waiting_time=4, turnaround_time=7)
    result = ScheduleResult(processes=[a, b], charts=[[]], end_time=0)
    assert result.average_waiting() == pytest.approx(3.0)
    assert result.average_turnaround() == pytest.approx(6.0)


def test_empty_result_averages_are_zero():
    result = ScheduleResult(processes=[], charts=[[]], end_time=0)
    assert result.average_waiting() == 0.0
    assert result.average_turnaround() == 0.0