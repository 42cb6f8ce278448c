"""Plan phase - resolve flags and prompts into an erase request."""

import re
from typing import Callable, List, Optional

from .cli import CliOptions
from .collect import DiskInfoProvider
from .errors import BootDiskError, DeviceNotFoundError, InvalidEraseLevelError
from .models import ERASE_LEVELS, EraseRequest, UNKNOWN
from .utils import normalize_device_path, whole_disk_identifier


_LEVEL_RE = re.compile(r"[0-4]")


def parse_level(value: str) -> int:
    """Validate an erase level given as text, flag or prompt alike."""
    text = value.strip() if isinstance(value, str) else value
    if not isinstance(text, str) or not _LEVEL_RE.fullmatch(text):
        raise InvalidEraseLevelError(value)
    return int(text)


class ParameterResolver:
    """Builds a validated EraseRequest from command line options.

    Required values missing from the command line are prompted for, disk
    before level. Model, serial and size come from the disk tools unless
    overridden, and fall back to a sentinel when detection fails.
    """

    def __init__(self, provider: DiskInfoProvider,
                 input_func: Callable[[str], str] = input):
        self.provider = provider
        self.input_func = input_func
        self._boot_disks: Optional[List[str]] = None

    def resolve(self, options: CliOptions) -> EraseRequest:
        """Resolve every field of the erase request."""
        if options.disk is not None:
            device_path = options.disk
        else:
            device_path = self.prompt_disk()
        self.validate_device(device_path)

        if options.level is not None:
            erase_level = parse_level(options.level)
        else:
            erase_level = self.prompt_level()

        model, serial, size = self._detect(device_path, options)

        return EraseRequest(
            device_path=device_path,
            erase_level=erase_level,
            pretend=options.pretend,
            skip_confirmation=options.skip,
            no_log=options.nolog,
            label=options.label or None,
            model=model,
            serial=serial,
            size=size
        )

    def boot_disks(self) -> List[str]:
        if self._boot_disks is None:
            self._boot_disks = self.provider.boot_disks()
        return self._boot_disks

    def validate_device(self, device_path: str) -> None:
        """Reject missing device nodes and the boot disk."""
        if not device_path or not self.provider.device_exists(device_path):
            raise DeviceNotFoundError(device_path)

        # Compare whole disks so that rdiskN and slices of the boot disk are caught too
        target = whole_disk_identifier(device_path)
        boot_disks = self.boot_disks()
        if target in boot_disks:
            raise BootDiskError(target)

        # Unrecognised names are resolved through diskutil before comparing
        if target is None:
            whole_disk = self.provider.disk_info(device_path).whole_disk
            if whole_disk in boot_disks:
                raise BootDiskError(whole_disk)

    def prompt_disk(self) -> str:
        """Show connected disks and ask which one to erase."""
        listing = self.provider.list_disks()
        if listing:
            print(listing)
        answer = self.input_func("Enter disk number: ")
        return normalize_device_path(answer)

    def prompt_level(self) -> int:
        """Show the erase levels and ask for one."""
        print("\nErase levels:")
        for level, description in ERASE_LEVELS.items():
            print(f"{level} - {description}.")
        return parse_level(self.input_func("Enter erase level [0 - 4]: "))

    def _detect(self, device_path: str, options: CliOptions):
        """Fill model, serial and size, preferring explicit overrides."""
        info = self.provider.disk_info(device_path)

        model = options.model if options.model is not None else info.model
        serial = options.serial if options.serial is not None else (info.serial or UNKNOWN)
        return model, serial, info.size
