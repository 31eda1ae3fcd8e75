from __future__ import annotations

import csv
import json
from pathlib import Path
from typing import Iterable, List

from .models import Process, ProcessNature

_NATURE_ALIASES = {
    "cpu": ProcessNature.CPU_BOUND,
    "cpu_bound": ProcessNature.CPU_BOUND,
    "io": ProcessNature.IO_BOUND,
    "io_bound": ProcessNature.IO_BOUND,
}


def sample_processes() -> List[Process]:
    """
    The five-process demo workload: three CPU-bound and two I/O-bound
    processes, all starting at vruntime 0.
    """
    return [
        Process("P1", remaining_work=15, priority=0, nature=ProcessNature.CPU_BOUND),
        Process("P2", remaining_work=20, priority=5, nature=ProcessNature.IO_BOUND),
        Process("P3", remaining_work=10, priority=2, nature=ProcessNature.CPU_BOUND),
        Process("P4", remaining_work=25, priority=1, nature=ProcessNature.IO_BOUND),
        Process("P5", remaining_work=12, priority=3, nature=ProcessNature.CPU_BOUND),
    ]


def load_workload(path: str | Path) -> List[Process]:
    """
    Load a workload from a JSON or CSV file into a list of Process objects.
    """
    path = Path(path)
    suffix = path.suffix.lower()

    if suffix == ".json":
        return _load_json(path)
    if suffix == ".csv":
        return _load_csv(path)

    raise ValueError(f"Unsupported workload format: {suffix} (use .json or .csv)")


def dump_workload(processes: Iterable[Process], path: str | Path) -> None:
    """
    Write processes as a JSON workload that load_workload can read back.
    """
    data = [
        {
            "pid": p.pid,
            "burst": p.remaining_work,
            "priority": p.priority,
            "nature": p.nature.value,
            "vruntime": p.vruntime,
        }
        for p in processes
    ]
    with Path(path).open("w", encoding="utf-8") as f:
        json.dump(data, f, indent=2)
        f.write("\n")


def _load_json(path: Path) -> List[Process]:
    with path.open("r", encoding="utf-8") as f:
        raw = json.load(f)

    if not isinstance(raw, list):
        raise ValueError("JSON workload must be a list of process objects")

    return [_process_from_mapping(entry) for entry in raw]


def _load_csv(path: Path) -> List[Process]:
    processes: List[Process] = []
    with path.open("r", encoding="utf-8", newline="") as f:
        reader = csv.DictReader(f)
        for row in reader:
            processes.append(_process_from_mapping(row))
    return processes


def _parse_nature(value) -> ProcessNature:
    key = str(value).strip().lower()
    if key not in _NATURE_ALIASES:
        raise ValueError(f"Unknown process nature: {value!r} (use cpu or io)")
    return _NATURE_ALIASES[key]


def _as_int(value) -> int:
    # int(True) == 1, so JSON booleans would otherwise pass as numbers.
    if isinstance(value, bool):
        raise TypeError(f"expected an integer, got {value!r}")
    return int(value)


def _process_from_mapping(mapping) -> Process:
    try:
        pid = str(mapping["pid"])
        burst = _as_int(mapping["burst"])
        priority = _as_int(mapping["priority"])
        nature = _parse_nature(mapping["nature"])
    except (KeyError, TypeError, ValueError) as exc:
        raise ValueError(f"Invalid process entry: {mapping!r}") from exc

    vruntime_val = mapping.get("vruntime")
    try:
        vruntime = _as_int(vruntime_val) if vruntime_val not in (None, "") else 0
    except (TypeError, ValueError) as exc:
        raise ValueError(f"Invalid vruntime in process entry: {mapping!r}") from exc

    return Process(
        pid=pid,
        remaining_work=burst,
        priority=priority,
        nature=nature,
        vruntime=vruntime,
    )
