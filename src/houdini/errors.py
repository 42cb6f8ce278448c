"""Error types raised by the secure erase workflow."""


class HoudiniError(Exception):
    """Base class for every error that stops a run."""

    exit_code = 1


class PrerequisiteError(HoudiniError):
    """Wrong OS, missing external tool or insufficient privilege."""


class UsageError(HoudiniError):
    """Malformed, duplicate or unknown command line options."""


class RequestValidationError(HoudiniError):
    """A supplied or prompted parameter failed validation."""


class DeviceNotFoundError(RequestValidationError):
    def __init__(self, device_path: str):
        super().__init__(f"{device_path} device node does not exist.")
        self.device_path = device_path


class BootDiskError(RequestValidationError):
    def __init__(self, boot_disk: str):
        super().__init__(f"Cannot securely erase the boot disk ({boot_disk}).")
        self.boot_disk = boot_disk


class InvalidEraseLevelError(RequestValidationError):
    def __init__(self, value):
        super().__init__(f"Invalid erase level: {value!r}. Expected 0 - 4.")
        self.value = value


class OperationError(HoudiniError):
    """An external command reported failure after confirmation."""


class UnmountError(OperationError):
    def __init__(self, device_path: str, detail: str = ""):
        message = f"Could not unmount {device_path}."
        if detail:
            message = f"{message} {detail}"
        super().__init__(message)
        self.device_path = device_path
