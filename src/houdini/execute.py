"""Execute phase - unmount the disk and run diskutil secureErase."""

import time
from datetime import datetime

from .commands import CommandRunner
from .errors import UnmountError
from .models import CommandResult, EraseOperation, EraseRequest
from .report import AuditLogger
from .utils import format_date, format_elapsed


class EraseExecutor:
    """Runs (or simulates) the unmount and secure erase of a disk."""

    def __init__(self, runner: CommandRunner, pretend_delay: float = 0.0):
        self.runner = runner
        self.pretend_delay = pretend_delay

    def unmount(self, request: EraseRequest) -> CommandResult:
        """Unmount every volume on the disk."""
        args = ["diskutil", "unmountDisk", request.device_path]
        if request.pretend:
            print(f"-> PRETENDING TO UNMOUNT {request.device_path} <-")
            return CommandResult(args=args, returncode=0)

        return self.runner.run(args)

    def erase(self, request: EraseRequest) -> EraseOperation:
        """Erase the disk and return the timed operation record."""
        args = ["diskutil", "secureErase", str(request.erase_level), request.device_path]
        erase_operation = EraseOperation(
            method=f"secureErase {request.erase_level}",
            start_time=datetime.now(),
            status="running",
            pretend=request.pretend
        )

        if request.pretend:
            print(f"-> PRETENDING TO ERASE {request.device_path} <-")
            if self.pretend_delay > 0:
                time.sleep(self.pretend_delay)
            result = CommandResult(args=args, returncode=0)
        else:
            # Progress output goes straight to the terminal
            result = self.runner.run(args, capture=False)

        erase_operation.end_time = datetime.now()
        erase_operation.duration = (erase_operation.end_time - erase_operation.start_time).total_seconds()
        erase_operation.exit_code = result.returncode

        if result.success:
            erase_operation.status = "completed"
        else:
            erase_operation.status = "failed"
            erase_operation.error_message = (
                result.stderr.strip() or f"Command failed with return code {result.returncode}"
            )
        return erase_operation


def run_execute_phase(executor: EraseExecutor, request: EraseRequest,
                      logger: AuditLogger) -> EraseOperation:
    """Unmount and erase a confirmed request, writing the audit trail.

    Raises UnmountError after logging when the disk cannot be unmounted.
    An interrupted erase is logged before KeyboardInterrupt propagates.
    """
    logger.write_header(request)

    started = datetime.now()
    logger.announce(f"\nStarting secure erase on {format_date(started)}")

    unmount_result = executor.unmount(request)
    if not unmount_result.success:
        ended = datetime.now()
        logger.announce(
            f"Unmount failed (exit code: {unmount_result.returncode}) on {format_date(ended)}"
        )
        logger.announce(f"Elapsed time: {format_elapsed((ended - started).total_seconds())}")
        raise UnmountError(request.device_path, unmount_result.stderr.strip())

    try:
        operation = executor.erase(request)
    except KeyboardInterrupt:
        ended = datetime.now()
        logger.announce(f"\nSecure erase interrupted on {format_date(ended)}")
        logger.announce(f"Elapsed time: {format_elapsed((ended - started).total_seconds())}")
        raise

    ended = operation.end_time or datetime.now()

    if operation.succeeded:
        logger.announce(f"Secure erase completed successfully on {format_date(ended)}")
    else:
        logger.announce(f"Secure erase failed (exit code: {operation.exit_code}) on {format_date(ended)}")
    logger.announce(f"Elapsed time: {format_elapsed((ended - started).total_seconds())}")

    return operation
