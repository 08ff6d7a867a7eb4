"""
Process metrics helpers.

Memory limits are read from cgroup files when running in a container so the
reported total matches what the orchestrator will actually allow. Outside a
container the host memory reported by psutil is used instead.
"""

import logging
import os
import re

import psutil

logger = logging.getLogger(__name__)

BYTES_PER_MB = 1024 * 1024
# cgroup v1 reports a huge number instead of "max" when there is no limit
CGROUP_V1_UNLIMITED = 1e15

CGROUP_V2_MEMORY_MAX = "/sys/fs/cgroup/memory.max"
CGROUP_V1_MEMORY_LIMIT = "/sys/fs/cgroup/memory/memory.limit_in_bytes"

UPTIME_PATTERN = re.compile(r"^\s*(\d+)h\s+(\d+)m\s+(\d+)s\s*$")


def bytes_to_mb(num_bytes: int) -> float:
    return round(num_bytes / BYTES_PER_MB, 2)


def _read_int(path: str) -> int | None:
    with open(path) as f:
        raw = f.read().strip()
    if raw == "max":
        return None
    return int(raw)


def get_container_memory_limit() -> int | None:
    """
    Memory limit of the current cgroup in bytes, or None when unlimited or
    not running inside a container.
    """
    try:
        if os.path.exists(CGROUP_V2_MEMORY_MAX):
            return _read_int(CGROUP_V2_MEMORY_MAX)

        if os.path.exists(CGROUP_V1_MEMORY_LIMIT):
            limit = _read_int(CGROUP_V1_MEMORY_LIMIT)
            if limit is not None and limit > CGROUP_V1_UNLIMITED:
                return None
            return limit
    except (OSError, ValueError) as e:
        logger.warning(f"Could not read cgroup memory limit: {e}")

    return None


def get_memory_total_bytes() -> int:
    limit = get_container_memory_limit()
    if limit is not None:
        return limit
    # local development
    return psutil.virtual_memory().total


def format_mb(megabytes: float) -> str:
    """'512.0' -> '512', '48.50' -> '48.5'; at most two decimals."""
    return f"{megabytes:.2f}".rstrip("0").rstrip(".")


def get_process_memory_bytes() -> int:
    return psutil.Process(os.getpid()).memory_info().rss


def get_memory_usage_mb() -> tuple[float, float]:
    """Returns (used, total) in MB with used never above total."""
    used = get_process_memory_bytes()
    total = max(get_memory_total_bytes(), used)
    return bytes_to_mb(used), bytes_to_mb(total)


def get_cpu_times() -> tuple[float, float]:
    times = psutil.Process(os.getpid()).cpu_times()
    return round(times.user, 3), round(times.system, 3)


def format_uptime(seconds: int) -> str:
    """Formats whole seconds as '1h 2m 3s'. Hours are not wrapped into days."""
    if seconds < 0:
        raise ValueError("seconds must be >= 0")
    hours = seconds // 3600
    minutes = (seconds % 3600) // 60
    secs = seconds % 60
    return f"{hours}h {minutes}m {secs}s"


def parse_uptime(text: str) -> int:
    """Inverse of format_uptime."""
    match = UPTIME_PATTERN.match(text)
    if not match:
        raise ValueError(f"Not an uptime string: {text!r}")
    hours, minutes, secs = (int(group) for group in match.groups())
    return hours * 3600 + minutes * 60 + secs
