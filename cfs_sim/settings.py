"""
Configuration defaults, read from the environment with pydantic-settings.

Every field can be overridden with a ``CFS_SIM_`` prefixed variable
(e.g. ``CFS_SIM_IO_WAIT_TIME=5``) or from a ``.env`` file. Command-line
flags take precedence over these values.
"""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # ── Scheduling ──────────────────────────────────────────────
    CPU_TIME_SLICE: int = 1    # time units per CPU-bound slice
    IO_WAIT_TIME: int = 10     # time units an I/O-bound process waits per slice

    # ── Runtime ─────────────────────────────────────────────────
    CLOCK: str = "simulated"   # "simulated" (instant) or "wall" (really sleeps)
    LOG_LEVEL: str = "WARNING"

    model_config = {"env_prefix": "CFS_SIM_", "env_file": ".env", "env_file_encoding": "utf-8", "extra": "ignore"}


settings = Settings()
