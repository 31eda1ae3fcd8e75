from __future__ import annotations

import logging
from enum import Enum
from typing import Callable, Dict, Iterable, List, Optional

from .clock import Clock, SimulatedClock
from .metrics import compute_system_metrics, summarize_processes
from .models import ExecutionLog, Process, ProcessNature, ScheduleResult
from .runqueue import OrderingPolicy, ReadyQueue, by_vruntime

logger = logging.getLogger(__name__)

NICE_0_LOAD = 1024
CPU_TIME_SLICE = 1  # time units (ms) a CPU-bound process runs per slice
IO_WAIT_TIME = 10  # time units (ms) an I/O-bound process waits before its tick


def weight(priority: int) -> float:
    """
    Load weight of a priority level: NICE_0_LOAD / (priority + 1).

    Priority 0 gets the full reference weight; every higher number gets less.
    """
    if priority < 0:
        raise ValueError(f"priority must be >= 0, got {priority}")
    return NICE_0_LOAD / (priority + 1)


def vruntime_charge(units: int, priority: int) -> int:
    """
    Virtual runtime owed for ``units`` of time at ``priority``.

    Works out to ``units * (priority + 1)``.
    """
    return round(units * NICE_0_LOAD / weight(priority))


def run_cpu_bound(process: Process, queue: ReadyQueue, clock: Clock, time_slice: int) -> int:
    """
    Run a CPU-bound process for at most one time slice.

    Returns the number of work units executed.
    """
    executed = min(time_slice, process.remaining_work)
    process.remaining_work -= executed
    process.vruntime += vruntime_charge(executed, process.priority)
    clock.advance(executed)

    if not process.finished:
        queue.insert(process)
    return executed


def run_io_bound(process: Process, queue: ReadyQueue, clock: Clock, io_wait: int) -> int:
    """
    Wait on I/O, then run a single unit of work.

    The wait and the tick are charged as two separate vruntime additions.
    Returns the number of work units executed.
    """
    clock.advance(io_wait)
    process.vruntime += vruntime_charge(io_wait, process.priority)

    executed = min(1, process.remaining_work)
    process.remaining_work -= executed
    process.vruntime += vruntime_charge(executed, process.priority)

    if not process.finished:
        queue.insert(process)
    return executed


ExecutionPolicy = Callable[[Process, ReadyQueue, Clock, int], int]

POLICIES: Dict[ProcessNature, ExecutionPolicy] = {
    ProcessNature.CPU_BOUND: run_cpu_bound,
    ProcessNature.IO_BOUND: run_io_bound,
}


class SchedulerState(Enum):
    IDLE = "idle"
    RUNNING = "running"
    DONE = "done"


class CFSScheduler:
    """
    Runs processes to completion in minimum-vruntime order.

    One slice executes fully before the next process is picked; there is no
    preemption inside a slice. The clock only stamps the log.
    """

    def __init__(
        self,
        clock: Optional[Clock] = None,
        time_slice: int = CPU_TIME_SLICE,
        io_wait: int = IO_WAIT_TIME,
        ordering: OrderingPolicy = by_vruntime,
    ):
        if time_slice <= 0:
            raise ValueError(f"time_slice must be positive, got {time_slice}")
        if io_wait < 0:
            raise ValueError(f"io_wait must be >= 0, got {io_wait}")

        self.clock: Clock = clock if clock is not None else SimulatedClock()
        self.time_slice = time_slice
        self.io_wait = io_wait
        self.ordering = ordering
        self.state = SchedulerState.DONE

    def _budget_for(self, process: Process) -> int:
        if process.nature is ProcessNature.CPU_BOUND:
            return self.time_slice
        return self.io_wait

    def schedule(self, processes: Iterable[Optional[Process]]) -> List[ExecutionLog]:
        """
        Schedule ``processes`` until every one of them has finished.

        ``None`` entries are skipped. Returns the execution log, one entry per
        slice, in execution order.
        """
        queue = ReadyQueue(self.ordering)
        logs: List[ExecutionLog] = []

        for process in processes:
            if process is None:
                continue
            if process.finished:
                logger.debug(f"Process {process.pid} has no work left, not enqueued")
                continue
            queue.insert(process)

        logger.info(f"Scheduling {len(queue)} processes")
        self.state = SchedulerState.IDLE

        while not queue.is_empty():
            current = queue.extract_min()
            if current is None:
                continue

            self.state = SchedulerState.RUNNING
            picked_vruntime = current.vruntime
            policy = POLICIES[current.nature]

            start_time = self.clock.now()
            executed = policy(current, queue, self.clock, self._budget_for(current))
            end_time = self.clock.now()

            logs.append(
                ExecutionLog(
                    pid=current.pid,
                    start_time=start_time,
                    end_time=end_time,
                    executed=executed,
                    vruntime=picked_vruntime,
                )
            )
            logger.debug(
                f"Ran {current.pid} for {executed} unit(s): "
                f"vruntime {picked_vruntime} -> {current.vruntime}, "
                f"remaining {current.remaining_work}"
            )
            if current.finished:
                logger.info(f"Process {current.pid} finished with vruntime {current.vruntime}")

            self.state = SchedulerState.IDLE

        self.state = SchedulerState.DONE
        logger.info(f"Schedule complete: {len(logs)} execution slices")
        return logs


def run_schedule(
    processes: List[Optional[Process]],
    scheduler: Optional[CFSScheduler] = None,
) -> ScheduleResult:
    """
    Schedule ``processes`` and summarize the run for reporting.
    """
    scheduler = scheduler or CFSScheduler()
    present = [p for p in processes if p is not None]

    origin = scheduler.clock.now()
    logs = scheduler.schedule(present)

    result = ScheduleResult(
        processes=summarize_processes(present, logs, origin),
        logs=logs,
        unit_ns=scheduler.clock.unit_ns,
    )
    compute_system_metrics(result)
    return result
