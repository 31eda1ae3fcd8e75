from __future__ import annotations

from typing import Dict, List

from .models import ExecutionLog, Process, ProcessSummary, ScheduleResult, SystemSummary


def summarize_processes(processes: List[Process], logs: List[ExecutionLog], origin: int) -> List[ProcessSummary]:
    """
    Build per-process summaries from the post-run processes and the log.

    Times are nanoseconds relative to ``origin`` (the clock reading taken just
    before scheduling started). Processes that never ran keep ``None`` times.
    """
    summaries: Dict[str, ProcessSummary] = {}
    order: List[str] = []

    for p in processes:
        if p.pid not in summaries:
            order.append(p.pid)
        summaries[p.pid] = ProcessSummary(
            pid=p.pid,
            priority=p.priority,
            nature=p.nature,
            slices=0,
            executed=0,
            vruntime=p.vruntime,
            remaining_work=p.remaining_work,
        )

    for log in logs:
        s = summaries.get(log.pid)
        if s is None:
            continue
        s.slices += 1
        s.executed += log.executed
        if s.first_start is None:
            s.first_start = log.start_time - origin
        s.completion_time = log.end_time - origin

    return [summaries[pid] for pid in order]


def compute_system_metrics(result: ScheduleResult) -> SystemSummary:
    """
    Compute slice counts, makespan and throughput for a finished run.
    """
    if not result.logs:
        system = SystemSummary(
            process_count=len(result.processes),
            slice_count=0,
            executed=0,
            makespan=0,
            throughput=0.0,
        )
        result.system = system
        return system

    makespan = result.logs[-1].end_time - result.logs[0].start_time
    executed = sum(log.executed for log in result.logs)
    makespan_units = makespan / result.unit_ns

    # Throughput counts processes that ran to completion, per time unit.
    finished = sum(1 for p in result.processes if p.remaining_work == 0 and p.slices > 0)
    throughput = finished / makespan_units if makespan_units > 0 else 0.0

    system = SystemSummary(
        process_count=len(result.processes),
        slice_count=len(result.logs),
        executed=executed,
        makespan=makespan,
        throughput=throughput,
    )
    result.system = system
    return system


def vruntime_spread(processes: List[Process]) -> int:
    """
    Difference between the largest and smallest vruntime; 0 for no processes.
    """
    if not processes:
        return 0
    values = [p.vruntime for p in processes]
    return max(values) - min(values)
