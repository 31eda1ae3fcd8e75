"""
CFS simulator package.

Simulates a simplified Completely Fair Scheduler: processes are picked by
minimum virtual runtime, run one slice under a CPU-bound or I/O-bound policy
and charged priority-weighted virtual runtime until their work is done.
"""

from .cfs import CFSScheduler, run_schedule
from .models import ExecutionLog, Process, ProcessNature

__all__ = ["CFSScheduler", "ExecutionLog", "Process", "ProcessNature", "cli", "run_schedule"]
