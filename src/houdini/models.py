"""Data models for disk information and secure erase operations."""

from datetime import datetime
from typing import Optional, List, Dict
from pydantic import BaseModel, ConfigDict, Field

from .errors import InvalidEraseLevelError


# Sentinel used when a model or serial number cannot be detected
UNKNOWN = "none"

ERASE_LEVELS: Dict[int, str] = {
    0: "Single-pass zero fill erase",
    1: "Single-pass random fill erase",
    2: "Seven-pass erase, consisting of zero fills and all-ones fills plus a final random fill",
    3: "Gutmann algorithm 35-pass erase",
    4: "Three-pass erase, consisting of two random fills plus a final zero fill",
}


def describe_level(level: int) -> str:
    """Return the fixed description for an erase level."""
    # bool is an int subclass; True must not pass as level 1
    if isinstance(level, bool) or not isinstance(level, int) or level not in ERASE_LEVELS:
        raise InvalidEraseLevelError(level)
    return ERASE_LEVELS[level]


class CommandResult(BaseModel):
    """Outcome of an external command."""
    args: List[str]
    returncode: int
    stdout: str = ""
    stderr: str = ""

    @property
    def success(self) -> bool:
        return self.returncode == 0


class DiskInfo(BaseModel):
    """Disk information reported by diskutil and smartctl."""
    device_path: str
    whole_disk: str
    model: str = UNKNOWN
    serial: Optional[str] = None
    size: str = "Unknown"


class EraseRequest(BaseModel):
    """Fully resolved parameters of one secure erase run.

    Instances are frozen: once built by the resolver nothing can change
    between the confirmation prompt and the erase itself.
    """
    model_config = ConfigDict(frozen=True)

    device_path: str
    erase_level: int = Field(ge=0, le=4)
    pretend: bool = False
    skip_confirmation: bool = False
    no_log: bool = False
    label: Optional[str] = None
    model: str = UNKNOWN
    serial: str = UNKNOWN
    size: str = "Unknown"

    @property
    def level_description(self) -> str:
        return describe_level(self.erase_level)

    @property
    def has_serial(self) -> bool:
        return self.serial != UNKNOWN


class EraseOperation(BaseModel):
    """Erase operation details."""
    method: str  # "secureErase <level>"
    start_time: Optional[datetime] = None
    end_time: Optional[datetime] = None
    duration: Optional[float] = None  # in seconds
    status: str = "pending"  # pending, running, completed, failed
    error_message: Optional[str] = None
    exit_code: Optional[int] = None
    pretend: bool = False

    @property
    def succeeded(self) -> bool:
        return self.status == "completed"
