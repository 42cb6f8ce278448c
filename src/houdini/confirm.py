"""Confirmation gate shown before any destructive call."""

from enum import Enum
from typing import Callable, List

from .collect import DiskInfoProvider
from .models import EraseRequest


CONFIRMATION_TOKEN = "tak"


class GateState(Enum):
    RENDERING = "rendering"
    AWAITING_INPUT = "awaiting_input"
    CONFIRMED = "confirmed"
    REJECTED = "rejected"


def render_summary(request: EraseRequest, partition_layout: str = "") -> str:
    """Render the parameters of an erase request for review."""
    lines: List[str] = [
        "",
        "The secure erase will proceed with the following parameters:",
        f"Disk:\t\t{request.device_path}",
        f"Model:\t\t{request.model}",
    ]
    if request.has_serial:
        lines.append(f"Serial Number:\t{request.serial}")
    if request.label:
        lines.append(f"Label:\t\t{request.label}")
    lines.append(f"Size:\t\t{request.size}")
    lines.append(f"Erase level:\t{request.erase_level} ({request.level_description})")
    if request.pretend:
        lines.append("Pretend mode:\tno data will be changed")

    if partition_layout:
        lines.append(f"Current partition map for {request.device_path}:")
        lines.append(partition_layout.rstrip("\n"))
    return "\n".join(lines)


class ConfirmationGate:
    """Shows the summary and waits for the literal confirmation token.

    A single wrong answer rejects the run; there is no retry.
    """

    def __init__(self, provider: DiskInfoProvider,
                 input_func: Callable[[str], str] = input):
        self.provider = provider
        self.input_func = input_func
        self.state = GateState.RENDERING

    def confirm(self, request: EraseRequest) -> GateState:
        """Return CONFIRMED or REJECTED for this request."""
        self.state = GateState.RENDERING
        layout = self.provider.partition_layout(request.device_path)
        print(render_summary(request, layout))

        if request.skip_confirmation:
            self.state = GateState.CONFIRMED
            return self.state

        self.state = GateState.AWAITING_INPUT
        try:
            answer = self.input_func(f"Type '{CONFIRMATION_TOKEN}' and press enter to start erasing: ")
        except EOFError:
            answer = None

        self.state = GateState.CONFIRMED if answer == CONFIRMATION_TOKEN else GateState.REJECTED
        return self.state
