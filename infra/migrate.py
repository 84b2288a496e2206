# infra/migrate.py
from __future__ import annotations
import sys
from pathlib import Path

from alembic import command
from alembic.config import Config


def _app_dir() -> Path:
    """
    Returns the directory where the running app lives.
    - Frozen builds: the unpacked resource dir, else the executable's folder.
    - In dev: the project root (infra -> project root).
    """
    if getattr(sys, "frozen", False):
        meipass = getattr(sys, "_MEIPASS", None)
        if meipass:
            return Path(meipass).resolve()
        return Path(sys.executable).resolve().parent
    return Path(__file__).resolve().parents[1]


def migration_dir() -> Path:
    app_dir = _app_dir()
    candidates = [app_dir / "migration", app_dir / "_internal" / "migration"]
    for candidate in candidates:
        if (candidate / "env.py").exists():
            return candidate
    raise RuntimeError(
        "Alembic script_location missing. Tried the following locations: "
        + ", ".join(str(p) for p in candidates)
    )


def run_migrations(db_url: str, revision: str = "head") -> None:
    cfg = Config()
    cfg.set_main_option("script_location", str(migration_dir()))
    cfg.set_main_option("sqlalchemy.url", db_url)
    command.upgrade(cfg, revision)
