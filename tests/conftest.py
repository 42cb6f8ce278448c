"""Shared fakes for the houdini tests."""

from pathlib import Path
from typing import Dict, List, Optional, Tuple

import pytest

from houdini.collect import DiskInfoProvider
from houdini.config import Settings
from houdini.models import CommandResult, DiskInfo


class FakeRunner:
    """CommandRunner stand-in that records calls and replays scripted results."""

    def __init__(self, responses: Optional[Dict[Tuple[str, ...], CommandResult]] = None):
        self.responses = responses or {}
        self.calls: List[List[str]] = []

    def run(self, args, capture=True, timeout=None):
        self.calls.append(list(args))
        result = self.responses.get(tuple(args))
        if result is None:
            return CommandResult(args=list(args), returncode=0)
        return result

    def commands(self) -> List[str]:
        return [" ".join(call) for call in self.calls]


class FakeProvider(DiskInfoProvider):
    """Disk info provider with a fixed set of disks."""

    def __init__(self, existing=("/dev/disk0", "/dev/disk4", "/dev/disk9"),
                 boot=("disk0",), model="Samsung SSD 870", serial="S5Y1NX0R",
                 size="500.1 GB"):
        super().__init__(FakeRunner())
        self.existing = set(existing)
        self.boot = list(boot)
        self.model = model
        self.serial = serial
        self.size = size
        self.lookups: List[str] = []

    def device_exists(self, device_path):
        return device_path in self.existing

    def list_disks(self):
        return "/dev/disk0 (internal, physical):\n/dev/disk4 (external, physical):"

    def partition_layout(self, device_path):
        return f"{device_path} (external, physical):\n   0: GUID_partition_scheme"

    def boot_disks(self):
        return self.boot

    def disk_info(self, device_path):
        self.lookups.append(device_path)
        return DiskInfo(
            device_path=device_path,
            whole_disk=device_path.rsplit("/", 1)[-1],
            model=self.model,
            serial=self.serial,
            size=self.size
        )


class ScriptedInput:
    """input() replacement answering prompts in order."""

    def __init__(self, *answers):
        self.answers = list(answers)
        self.prompts: List[str] = []

    def __call__(self, prompt=""):
        self.prompts.append(prompt)
        if not self.answers:
            raise EOFError
        return self.answers.pop(0)


@pytest.fixture
def runner():
    return FakeRunner()


@pytest.fixture
def provider():
    return FakeProvider()


@pytest.fixture
def settings(tmp_path) -> Settings:
    return Settings(log_dir=Path(tmp_path) / "Format Logs", extra_path=[])


@pytest.fixture(autouse=True)
def no_sudo(monkeypatch):
    monkeypatch.delenv("SUDO_UID", raising=False)
    monkeypatch.delenv("SUDO_GID", raising=False)
    monkeypatch.delenv("SUDO_USER", raising=False)
