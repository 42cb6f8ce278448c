"""Preflight checks for the host running the erase."""

import os
import platform
import shutil
from typing import List

from .config import Settings
from .errors import PrerequisiteError


REQUIRED_TOOLS = {
    "diskutil": "diskutil ships with macOS; check your PATH.",
    "smartctl": "Install with: brew install smartmontools",
}


def extend_path(extra_path: List[str]) -> None:
    """Prepend Homebrew style bin directories to PATH."""
    current = os.environ.get("PATH", "")
    existing = current.split(os.pathsep) if current else []
    prefix = [p for p in extra_path if p not in existing]
    os.environ["PATH"] = os.pathsep.join(prefix + existing)


def check_environment(settings: Settings, pretend: bool = False) -> None:
    """Raise PrerequisiteError unless this host can run a secure erase."""
    if platform.system() != "Darwin":
        raise PrerequisiteError("This tool is for macOS only.")

    extend_path(settings.extra_path)

    for tool, hint in REQUIRED_TOOLS.items():
        if shutil.which(tool) is None:
            raise PrerequisiteError(f"{tool} not installed. {hint}")

    # A pretend run never touches the disk, so it may run unprivileged
    if not pretend and os.geteuid() != 0:
        raise PrerequisiteError("This tool must be run with sudo or as root.")
