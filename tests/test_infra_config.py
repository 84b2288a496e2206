import logging
from logging.handlers import RotatingFileHandler

import pytest
from sqlalchemy import create_engine, inspect

from infra.db import base as db_base
from infra.logging_config import setup_logging
from infra.migrate import migration_dir, run_migrations
from infra.path import default_db_path, user_data_dir
from infra.services import ServiceGraph, build_services
from core.services.scheduling import SchedulingService
from core.services.task import TaskService


def test_user_data_dir_honours_override(tmp_path, monkeypatch):
    target = tmp_path / "data"
    monkeypatch.setenv("PM_DATA_DIR", str(target))

    assert user_data_dir() == target
    assert target.is_dir()
    assert default_db_path() == target / "scheduler.db"


def test_db_url_prefers_environment(tmp_path, monkeypatch):
    monkeypatch.setenv("PM_DATA_DIR", str(tmp_path))
    monkeypatch.delenv("PM_DB_URL", raising=False)
    assert db_base.db_url() == f"sqlite:///{(tmp_path / 'scheduler.db').as_posix()}"

    monkeypatch.setenv("PM_DB_URL", "sqlite:///:memory:")
    assert db_base.db_url() == "sqlite:///:memory:"


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    for handler in list(root.handlers):
        root.removeHandler(handler)
        handler.close()
    for handler in handlers:
        root.addHandler(handler)
    root.setLevel(level)


def test_setup_logging_installs_rotating_file_and_console(tmp_path, monkeypatch, restore_root_logger):
    monkeypatch.setenv("PM_LOG_LEVEL", "debug")

    log_file = setup_logging(tmp_path)
    setup_logging(tmp_path)

    root = logging.getLogger()
    file_handlers = [h for h in root.handlers if isinstance(h, RotatingFileHandler)]
    assert log_file == tmp_path / "scheduler.log"
    assert len(file_handlers) == 1
    assert file_handlers[0].maxBytes == 1_000_000
    assert file_handlers[0].backupCount == 5
    assert len(root.handlers) == 2
    assert root.level == logging.DEBUG

    logging.getLogger("core.services.scheduling.engine").debug("file handler message")
    file_handlers[0].flush()
    assert "file handler message" in log_file.read_text(encoding="utf-8")


def test_setup_logging_falls_back_to_info_for_unknown_level(tmp_path, monkeypatch, restore_root_logger):
    monkeypatch.setenv("PM_LOG_LEVEL", "chatty")

    setup_logging(tmp_path)

    assert logging.getLogger().level == logging.INFO


def test_migrations_create_scheduling_schema(tmp_path):
    url = f"sqlite:///{(tmp_path / 'migrated.db').as_posix()}"

    run_migrations(url)

    engine = create_engine(url, future=True)
    try:
        inspector = inspect(engine)
        assert {"projects", "tasks", "task_dependencies", "alembic_version"} <= set(inspector.get_table_names())
        task_columns = {col["name"] for col in inspector.get_columns("tasks")}
        assert {"parent_task_id", "planned_duration", "early_start", "slack", "is_critical"} <= task_columns
    finally:
        engine.dispose()


def test_migration_dir_points_at_env_script():
    assert (migration_dir() / "env.py").exists()


def test_build_services_wires_scheduling(session):
    graph = build_services(session)

    assert isinstance(graph, ServiceGraph)
    assert isinstance(graph.scheduling_service, SchedulingService)
    assert isinstance(graph.task_service, TaskService)

    as_dict = graph.as_dict()
    assert as_dict["session"] is session
    assert as_dict["scheduling_service"] is graph.scheduling_service
    assert as_dict["task_repo"] is graph.task_repo
    assert as_dict["task_service"] is graph.task_service
