"""Collect disk information from diskutil and smartctl."""

import plistlib
import re
from xml.parsers.expat import ExpatError
from pathlib import Path
from typing import Any, Dict, List, Optional

from .commands import CommandRunner
from .errors import PrerequisiteError
from .models import DiskInfo, UNKNOWN
from .utils import format_size, whole_disk_identifier


class DiskInfoProvider:
    """Looks up disk details through the macOS disk tools."""

    def __init__(self, runner: CommandRunner):
        self.runner = runner

    def device_exists(self, device_path: str) -> bool:
        """Check that the device node exists."""
        return Path(device_path).exists()

    def list_disks(self) -> str:
        """Return the `diskutil list` overview of connected disks."""
        result = self.runner.run(["diskutil", "list"])
        return result.stdout if result.success else ""

    def partition_layout(self, device_path: str) -> str:
        """Return the current partition map for a disk."""
        result = self.runner.run(["diskutil", "list", device_path])
        if not result.success:
            return f"(partition map unavailable: {result.stderr.strip() or 'diskutil failed'})"
        return result.stdout

    def boot_disks(self) -> List[str]:
        """Return the whole disk identifiers backing the running system.

        This is the disk holding ``/`` plus, for APFS containers, the
        physical stores the container lives on.
        """
        info = self._diskutil_info("/")
        if not info or not info.get("ParentWholeDisk"):
            raise PrerequisiteError("Could not determine the boot disk.")

        disks = [info["ParentWholeDisk"]]
        for store in info.get("APFSPhysicalStores", []):
            identifier = whole_disk_identifier(store.get("APFSPhysicalStore", ""))
            if identifier and identifier not in disks:
                disks.append(identifier)
        return disks

    def disk_info(self, device_path: str) -> DiskInfo:
        """Get model, serial number and size of a disk."""
        whole_disk = whole_disk_identifier(device_path) or device_path
        info = self._diskutil_info(device_path) or {}

        model = info.get("MediaName") or info.get("IORegistryEntryName") or UNKNOWN
        size_bytes = info.get("Size", info.get("TotalSize"))

        return DiskInfo(
            device_path=device_path,
            whole_disk=info.get("ParentWholeDisk", whole_disk),
            model=model.strip() or UNKNOWN,
            serial=self.serial_number(device_path),
            size=format_size(size_bytes) if isinstance(size_bytes, int) else "Unknown"
        )

    def serial_number(self, device_path: str) -> Optional[str]:
        """Read the serial number via smartctl, or None when unavailable."""
        result = self.runner.run(["smartctl", "-i", device_path])
        if not result.success:
            return None

        match = re.search(r"^\s*Serial Number:\s*(.+)$", result.stdout, re.MULTILINE)
        return match.group(1).strip() if match else None

    def _diskutil_info(self, target: str) -> Optional[Dict[str, Any]]:
        """Run `diskutil info -plist` and parse the property list."""
        result = self.runner.run(["diskutil", "info", "-plist", target])
        if not result.success:
            return None

        try:
            return plistlib.loads(result.stdout.encode("utf-8"))
        except (plistlib.InvalidFileException, ExpatError, ValueError) as e:
            print(f"⚠️  Could not parse diskutil output for {target}: {e}")
            return None
