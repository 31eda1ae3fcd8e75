from cfs_sim.metrics import compute_system_metrics, summarize_processes, vruntime_spread
from cfs_sim.models import ExecutionLog, Process, ScheduleResult


def test_summaries_are_relative_to_origin():
    procs = [Process("A", remaining_work=0, vruntime=2), Process("B", remaining_work=0, vruntime=3)]
    logs = [
        ExecutionLog("A", start_time=100, end_time=110, executed=1),
        ExecutionLog("B", start_time=110, end_time=130, executed=1),
        ExecutionLog("A", start_time=130, end_time=140, executed=1),
    ]

    summaries = summarize_processes(procs, logs, origin=100)

    a, b = summaries
    assert (a.slices, a.executed, a.first_start, a.completion_time) == (2, 2, 0, 40)
    assert (b.slices, b.first_start, b.completion_time) == (1, 10, 30)


def test_process_that_never_ran_has_no_times():
    summaries = summarize_processes([Process("idle", remaining_work=0)], [], origin=0)
    assert summaries[0].slices == 0
    assert summaries[0].first_start is None


def test_system_metrics():
    procs = [Process("A", remaining_work=0)]
    logs = [
        ExecutionLog("A", start_time=0, end_time=10, executed=1),
        ExecutionLog("A", start_time=10, end_time=20, executed=1),
    ]
    result = ScheduleResult(processes=summarize_processes(procs, logs, 0), logs=logs, unit_ns=10)

    system = compute_system_metrics(result)

    assert result.system is system
    assert system.slice_count == 2
    assert system.executed == 2
    assert system.makespan == 20
    assert system.throughput == 0.5


def test_system_metrics_without_logs():
    system = compute_system_metrics(ScheduleResult())
    assert system.slice_count == 0
    assert system.throughput == 0.0


def test_vruntime_spread():
    assert vruntime_spread([]) == 0
    procs = [Process("A", remaining_work=0, vruntime=4), Process("B", remaining_work=0, vruntime=19)]
    assert vruntime_spread(procs) == 15
