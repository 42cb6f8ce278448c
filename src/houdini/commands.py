"""Run external commands and report their outcome as a CommandResult."""

import subprocess
from typing import List, Optional

from .models import CommandResult


# Shell convention for "command not found"
NOT_FOUND = 127


class CommandRunner:
    """Runs diskutil, smartctl and friends as external processes."""

    def __init__(self, timeout: Optional[float] = None):
        self.timeout = timeout

    def run(self, args: List[str], capture: bool = True,
            timeout: Optional[float] = None) -> CommandResult:
        """Run a command and return its status and output.

        With ``capture=False`` the command writes straight to the terminal,
        which is what long running commands with progress output need.
        """
        if timeout is None and capture:
            timeout = self.timeout

        try:
            result = subprocess.run(
                args,
                capture_output=capture,
                text=True,
                timeout=timeout
            )
        except FileNotFoundError:
            return CommandResult(
                args=args,
                returncode=NOT_FOUND,
                stderr=f"Command not found: {args[0]}"
            )
        except subprocess.TimeoutExpired:
            return CommandResult(
                args=args,
                returncode=-1,
                stderr=f"Command timed out after {timeout} seconds"
            )

        return CommandResult(
            args=args,
            returncode=result.returncode,
            stdout=result.stdout or "",
            stderr=result.stderr or ""
        )
