"""CPU scheduling simulator: FCFS, SJF, LJF, round robin and multi-level queues with Gantt charts."""

__version__ = "0.1.0"