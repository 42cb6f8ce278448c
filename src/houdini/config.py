"""Configuration loaded from the environment and an optional .env file."""

import os
import pwd
from pathlib import Path
from typing import List, Optional

from dotenv import load_dotenv
from pydantic import BaseModel


DEFAULT_EXTRA_PATH = "/opt/homebrew/bin:/usr/local/bin"
LOG_DIR_NAME = "Format Logs"


class Settings(BaseModel):
    """Runtime settings for a houdini run."""
    log_dir: Path
    extra_path: List[str]
    pretend_delay: float = 0.0
    command_timeout: float = 60.0


def invoking_user_home() -> Path:
    """Home directory of the user who ran the tool, looking through sudo."""
    sudo_user = os.getenv("SUDO_USER")
    if sudo_user:
        try:
            return Path(pwd.getpwnam(sudo_user).pw_dir)
        except KeyError:
            pass
    return Path.home()


def _float_env(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return float(raw)
    except ValueError:
        print(f"⚠️  Ignoring invalid {name}={raw!r}, using {default}")
        return default


def load_settings(env_file: Optional[str] = None) -> Settings:
    """Load settings from environment variables."""
    load_dotenv(env_file)

    log_dir = os.getenv("HOUDINI_LOG_DIR")
    extra_path = os.getenv("HOUDINI_EXTRA_PATH", DEFAULT_EXTRA_PATH)

    return Settings(
        log_dir=Path(log_dir).expanduser() if log_dir else invoking_user_home() / LOG_DIR_NAME,
        extra_path=[p for p in extra_path.split(":") if p],
        pretend_delay=_float_env("HOUDINI_PRETEND_DELAY", 0.0),
        command_timeout=_float_env("HOUDINI_COMMAND_TIMEOUT", 60.0),
    )
