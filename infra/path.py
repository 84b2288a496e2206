# infra/path.py
from __future__ import annotations
import os
import sys
from pathlib import Path

APP_NAME = "HybridScheduler"
COMPANY_NAME = "TECHASH"

DATA_DIR_ENV = "PM_DATA_DIR"


def _platform_base() -> Path:
    if sys.platform.startswith("win"):
        return Path(os.getenv("APPDATA", Path.home() / "AppData" / "Roaming"))
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support"
    return Path(os.getenv("XDG_DATA_HOME", Path.home() / ".local" / "share"))


def user_data_dir() -> Path:
    """
    Per-user directory holding the scheduler database and logs.

    ``PM_DATA_DIR`` wins when set; otherwise ``<platform base>/TECHASH/HybridScheduler``
    (APPDATA on Windows, Application Support on macOS, XDG_DATA_HOME on Linux).
    Falls back to ``~/.HybridScheduler`` when the preferred location cannot be created.
    """
    override = os.getenv(DATA_DIR_ENV)
    path = Path(override) if override else _platform_base() / COMPANY_NAME / APP_NAME
    try:
        path.mkdir(parents=True, exist_ok=True)
        return path
    except OSError:
        fallback = Path.home() / f".{APP_NAME}"
        fallback.mkdir(parents=True, exist_ok=True)
        return fallback


def default_db_path() -> Path:
    return user_data_dir() / "scheduler.db"
