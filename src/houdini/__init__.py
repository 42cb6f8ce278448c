"""Guided secure-erase workflow for macOS disks."""

__version__ = "0.1.0"
