from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import List, Optional

from rich import box
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from .cfs import CFSScheduler, run_schedule
from .clock import CLOCKS, make_clock
from .gantt import build_rich_timeline, render_order_strip
from .metrics import vruntime_spread
from .models import Process, ProcessNature, ScheduleResult
from .settings import settings
from .workload_io import dump_workload, load_workload, sample_processes


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="cfs-sim",
        description="Completely Fair Scheduler simulator (weighted virtual runtime).",
    )
    # Options accepted by every subcommand.
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument(
        "--log-level",
        default=settings.LOG_LEVEL,
        help=f"Logging level (default: {settings.LOG_LEVEL}).",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    run_parser = subparsers.add_parser(
        "run",
        parents=[common],
        help="Schedule a workload and print the execution log.",
    )
    run_parser.add_argument(
        "--workload",
        "-w",
        default=None,
        help="Path to JSON or CSV workload file (default: built-in sample processes).",
    )
    run_parser.add_argument(
        "--clock",
        choices=sorted(CLOCKS),
        default=settings.CLOCK,
        help=f"Time source used to stamp slices (default: {settings.CLOCK}).",
    )
    run_parser.add_argument(
        "--time-slice",
        type=int,
        default=settings.CPU_TIME_SLICE,
        help=f"Time units per CPU-bound slice (default: {settings.CPU_TIME_SLICE}).",
    )
    run_parser.add_argument(
        "--io-wait",
        type=int,
        default=settings.IO_WAIT_TIME,
        help=f"Time units an I/O-bound process waits per slice (default: {settings.IO_WAIT_TIME}).",
    )
    run_parser.add_argument(
        "--show-log",
        action="store_true",
        help="Print one row per execution slice.",
    )

    sample_parser = subparsers.add_parser(
        "sample",
        parents=[common],
        help="Write the built-in sample workload to a JSON file.",
    )
    sample_parser.add_argument(
        "--output",
        "-o",
        required=True,
        help="Destination JSON path.",
    )

    return parser


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level.upper(),
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(rich_tracebacks=True)],
        force=True,
    )


def _nature_label(nature: ProcessNature) -> str:
    return "CPU" if nature is ProcessNature.CPU_BOUND else "IO"


def _process_table(title: str, processes: List[Process]) -> Table:
    table = Table(title=title, box=box.SIMPLE_HEAVY)
    table.add_column("PID", justify="center")
    table.add_column("Prio", justify="right")
    table.add_column("Burst", justify="right")
    table.add_column("VRun", justify="right")
    table.add_column("Type", justify="center")

    for p in processes:
        table.add_row(p.pid, str(p.priority), str(p.remaining_work), str(p.vruntime), _nature_label(p.nature))
    return table


def _format_units(ns: Optional[int], unit_ns: int) -> str:
    if ns is None:
        return ""
    return f"{ns / unit_ns:.2f}"


def _print_result(result: ScheduleResult, processes: List[Process], show_log: bool, console: Console) -> None:
    console.print(build_rich_timeline(result.logs, result.unit_ns))
    console.print(render_order_strip(result.logs), highlight=False)
    console.print()

    if show_log:
        log_table = Table(title="Execution log", box=box.SIMPLE_HEAVY)
        log_table.add_column("PID", justify="center")
        log_table.add_column("Start(ns)", justify="right")
        log_table.add_column("End(ns)", justify="right")
        log_table.add_column("Duration(ns)", justify="right")
        log_table.add_column("VRun@pick", justify="right")
        for log in result.logs:
            log_table.add_row(
                log.pid,
                str(log.start_time),
                str(log.end_time),
                str(log.duration),
                str(log.vruntime),
            )
        console.print(log_table)
        console.print()

    proc_table = Table(title="Per-process results", box=box.SIMPLE_HEAVY)
    for h in ["PID", "Type", "Prio", "Slices", "Executed", "VRun", "First run", "Complete"]:
        justify = "center" if h in {"PID", "Type"} else "right"
        proc_table.add_column(h, justify=justify)

    for s in result.processes:
        proc_table.add_row(
            s.pid,
            _nature_label(s.nature),
            str(s.priority),
            str(s.slices),
            str(s.executed),
            str(s.vruntime),
            _format_units(s.first_start, result.unit_ns),
            _format_units(s.completion_time, result.unit_ns),
        )
    console.print(proc_table)
    console.print()

    if result.system:
        system = result.system
        sys_table = Table(title="Summary", box=box.SIMPLE_HEAVY)
        sys_table.add_column("Metric")
        sys_table.add_column("Value", justify="right")

        sys_table.add_row("Processes scheduled", str(system.process_count))
        sys_table.add_row("Execution slices", str(system.slice_count))
        sys_table.add_row("Work units executed", str(system.executed))
        sys_table.add_row("Makespan (units)", _format_units(system.makespan, result.unit_ns))
        sys_table.add_row("Throughput (proc/unit)", f"{system.throughput:.3f}")
        sys_table.add_row("VRuntime spread", str(vruntime_spread(processes)))

        console.print(sys_table)


def _run(args: argparse.Namespace, console: Console) -> int:
    if args.workload:
        processes = load_workload(Path(args.workload))
    else:
        processes = sample_processes()

    scheduler = CFSScheduler(
        clock=make_clock(args.clock),
        time_slice=args.time_slice,
        io_wait=args.io_wait,
    )

    console.print(_process_table("Processes", processes))
    console.print()

    result = run_schedule(processes, scheduler)
    _print_result(result, processes, args.show_log, console)
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    console = Console()

    try:
        configure_logging(args.log_level)

        if args.command == "run":
            return _run(args, console)

        if args.command == "sample":
            dump_workload(sample_processes(), args.output)
            console.print(f"Wrote sample workload to [green]{args.output}[/green]")
            return 0
    except (ValueError, OSError) as exc:
        console.print(f"[red]Error: {escape(str(exc))}[/red]")
        return 1

    parser.error(f"Unknown command: {args.command}")
    return 1


if __name__ == "__main__":
    raise SystemExit(main())
