from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional


class ProcessNature(Enum):
    CPU_BOUND = "cpu"
    IO_BOUND = "io"


@dataclass
class Process:
    """
    A schedulable process. The scheduler mutates ``vruntime`` and
    ``remaining_work`` in place while it runs.
    """

    pid: str
    remaining_work: int
    priority: int = 0
    nature: ProcessNature = ProcessNature.CPU_BOUND
    vruntime: int = 0

    def __post_init__(self) -> None:
        if self.priority < 0:
            raise ValueError(f"Process {self.pid}: priority must be >= 0, got {self.priority}")
        if self.remaining_work < 0:
            raise ValueError(f"Process {self.pid}: remaining work must be >= 0, got {self.remaining_work}")

    @property
    def finished(self) -> bool:
        return self.remaining_work == 0


@dataclass(frozen=True)
class ExecutionLog:
    """
    One execution slice: which process ran and when (clock nanoseconds).

    ``vruntime`` is the value the process had when it was picked.
    """

    pid: str
    start_time: int
    end_time: int
    executed: int = 0
    vruntime: int = 0

    @property
    def duration(self) -> int:
        return self.end_time - self.start_time


@dataclass
class ProcessSummary:
    pid: str
    priority: int
    nature: ProcessNature
    slices: int
    executed: int
    vruntime: int
    remaining_work: int
    first_start: Optional[int] = None
    completion_time: Optional[int] = None


@dataclass
class SystemSummary:
    process_count: int
    slice_count: int
    executed: int
    makespan: int
    throughput: float


@dataclass
class ScheduleResult:
    processes: List[ProcessSummary] = field(default_factory=list)
    logs: List[ExecutionLog] = field(default_factory=list)
    unit_ns: int = 1_000_000
    system: Optional[SystemSummary] = None
