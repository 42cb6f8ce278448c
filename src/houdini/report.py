"""Report phase - append the audit trail of an erase run to a log file."""

import os
from datetime import datetime
from pathlib import Path
from typing import Optional, Tuple

from .config import Settings
from .errors import PrerequisiteError
from .models import EraseRequest
from .utils import log_file_name


def invoking_owner() -> Optional[Tuple[int, int]]:
    """uid/gid of the user behind sudo, if any."""
    uid = os.getenv("SUDO_UID")
    gid = os.getenv("SUDO_GID")
    if uid and gid and uid.isdigit() and gid.isdigit():
        return int(uid), int(gid)
    return None


class AuditLogger:
    """Writes one append-only log file per erase run.

    A logger without a path is disabled: ``record`` does nothing and
    ``announce`` only prints.
    """

    def __init__(self, path: Optional[Path] = None, owner: Optional[Tuple[int, int]] = None):
        self.path = path
        self.owner = owner

    @classmethod
    def for_request(cls, request: EraseRequest, settings: Settings,
                    when: Optional[datetime] = None) -> "AuditLogger":
        """Create the logger for a run; disabled for pretend and --nolog runs."""
        if request.pretend or request.no_log:
            return cls()

        when = when or datetime.now()
        owner = invoking_owner()
        log_dir = Path(settings.log_dir)
        serial = request.serial if request.has_serial else None
        path = log_dir / log_file_name(request.model, serial, request.label, when)

        try:
            log_dir.mkdir(parents=True, exist_ok=True)
            path.touch()
        except OSError as e:
            raise PrerequisiteError(f"Could not create log file in {log_dir}: {e}") from e

        logger = cls(path, owner)
        logger._chown(log_dir)
        logger._chown(path)
        return logger

    @property
    def enabled(self) -> bool:
        return self.path is not None

    def record(self, line: str) -> None:
        """Append a line to the log file."""
        if not self.enabled:
            return
        with open(self.path, 'a') as f:
            f.write(line + "\n")

    def announce(self, line: str) -> None:
        """Print a line and append it to the log file."""
        print(line)
        self.record(line)

    def write_header(self, request: EraseRequest) -> None:
        """Log the disk metadata ahead of the erase."""
        self.record(f"Model:\t\t{request.model}")
        self.record(f"Serial Number:\t{request.serial}")
        if request.label:
            self.record(f"Label:\t\t{request.label}")
        self.record(f"Size:\t\t{request.size}")
        self.record(f"Erase level:\t{request.erase_level} ({request.level_description})")

    def _chown(self, path: Path) -> None:
        # Files created under sudo belong to root otherwise
        if self.owner is None:
            return
        try:
            os.chown(path, *self.owner)
        except OSError as e:
            print(f"⚠️  Could not change owner of {path}: {e}")
