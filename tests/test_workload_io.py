from pathlib import Path

import pytest

from cfs_sim.models import Process, ProcessNature
from cfs_sim.workload_io import dump_workload, load_workload, sample_processes


def test_load_json(tmp_path: Path):
    p = tmp_path / "w.json"
    p.write_text('[{"pid":"A","burst":3,"priority":1,"nature":"cpu"},'
                 '{"pid":"B","burst":2,"priority":0,"nature":"IO_BOUND","vruntime":7}]')
    procs = load_workload(p)
    assert isinstance(procs[0], Process)
    assert procs[0].vruntime == 0
    assert procs[1].nature is ProcessNature.IO_BOUND
    assert procs[1].vruntime == 7


def test_load_csv(tmp_path: Path):
    p = tmp_path / "w.csv"
    p.write_text("pid,burst,priority,nature,vruntime\nA,3,1,cpu,\nB,2,4,io,5\n")
    procs = load_workload(p)
    assert procs[0].pid == "A"
    assert procs[0].vruntime == 0
    assert procs[1].priority == 4
    assert procs[1].nature is ProcessNature.IO_BOUND


def test_unsupported_suffix(tmp_path: Path):
    with pytest.raises(ValueError, match="Unsupported workload format"):
        load_workload(tmp_path / "w.txt")


def test_missing_field_is_rejected(tmp_path: Path):
    p = tmp_path / "w.json"
    p.write_text('[{"pid":"A","burst":3,"nature":"cpu"}]')
    with pytest.raises(ValueError, match="Invalid process entry"):
        load_workload(p)


def test_unknown_nature_is_rejected(tmp_path: Path):
    p = tmp_path / "w.csv"
    p.write_text("pid,burst,priority,nature\nA,3,1,gpu\n")
    with pytest.raises(ValueError):
        load_workload(p)


def test_negative_priority_is_rejected(tmp_path: Path):
    p = tmp_path / "w.json"
    p.write_text('[{"pid":"A","burst":3,"priority":-2,"nature":"cpu"}]')
    with pytest.raises(ValueError, match="priority"):
        load_workload(p)


def test_json_must_be_a_list(tmp_path: Path):
    p = tmp_path / "w.json"
    p.write_text('{"pid":"A"}')
    with pytest.raises(ValueError, match="must be a list"):
        load_workload(p)


def test_dumped_sample_loads_back(tmp_path: Path):
    p = tmp_path / "sample.json"
    dump_workload(sample_processes(), p)
    assert load_workload(p) == sample_processes()


def test_boolean_numbers_are_rejected(tmp_path: Path):
    p = tmp_path / "w.json"
    p.write_text('[{"pid":"A","burst":true,"priority":0,"nature":"cpu"}]')
    with pytest.raises(ValueError, match="Invalid process entry"):
        load_workload(p)

    p.write_text('[{"pid":"A","burst":3,"priority":0,"nature":"cpu","vruntime":false}]')
    with pytest.raises(ValueError, match="Invalid vruntime"):
        load_workload(p)
