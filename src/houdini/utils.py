"""
Utility functions for formatting and device path handling
"""

import re
from datetime import datetime
from typing import Optional


_WHOLE_DISK_RE = re.compile(r"^r?(disk\d+)(s\d+)*$")


def format_elapsed(total_seconds: float) -> str:
    """Format elapsed seconds as e.g. '1d 2h 3m 4s', dropping empty leading units"""
    elapsed = max(int(total_seconds), 0)
    days, remainder = divmod(elapsed, 86400)
    hours, remainder = divmod(remainder, 3600)
    minutes, seconds = divmod(remainder, 60)

    if days > 0:
        return f"{days}d {hours}h {minutes}m {seconds}s"
    elif hours > 0:
        return f"{hours}h {minutes}m {seconds}s"
    elif minutes > 0:
        return f"{minutes}m {seconds}s"
    else:
        return f"{seconds}s"


def format_size(size_bytes: Optional[int]) -> str:
    """Format a byte count using decimal units, as diskutil does"""
    if size_bytes is None or size_bytes < 0:
        return "Unknown"

    value = float(size_bytes)
    for unit in ['B', 'KB', 'MB', 'GB', 'TB']:
        if value < 1000.0:
            if unit == 'B':
                return f"{int(value)} B"
            return f"{value:.1f} {unit}"
        value /= 1000.0
    return f"{value:.1f} PB"


def normalize_device_path(answer: str) -> str:
    """Turn a prompt answer ('4', 'disk4' or '/dev/disk4') into a device path"""
    answer = answer.strip()
    if answer.isdigit():
        return f"/dev/disk{answer}"
    if answer and not answer.startswith("/"):
        return f"/dev/{answer}"
    return answer


def whole_disk_identifier(device_path: str) -> Optional[str]:
    """Return the whole disk identifier ('disk4') behind a node, raw node or slice"""
    name = device_path.rstrip("/").rsplit("/", 1)[-1]
    match = _WHOLE_DISK_RE.match(name)
    return match.group(1) if match else None


def _safe_component(value: str) -> str:
    # Path separators would escape the log directory
    return value.strip().replace("/", "_").replace("\0", "")


def log_file_name(model: str, serial: Optional[str], label: Optional[str],
                  when: datetime) -> str:
    """Build the per-run log file name from model, serial, label and timestamp"""
    parts = [_safe_component(model) or "disk"]
    if serial:
        parts.append(_safe_component(serial))
    if label:
        parts.append(_safe_component(label))
    parts.append(when.strftime("%Y-%m-%d-%H-%M-%S"))
    return "-".join(parts) + ".log"


def format_date(when: datetime) -> str:
    """Format a timestamp the way `date` prints it, without the zone"""
    return when.strftime("%a %b %d %H:%M:%S %Y")
