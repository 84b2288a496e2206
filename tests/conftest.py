# tests/conftest.py
import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from core.events.domain_events import domain_events
from infra.db.base import Base
import infra.db.models  # noqa: F401
from infra.services import build_service_dict


@pytest.fixture
def session():
    # separate in-memory DB for tests
    engine = create_engine("sqlite:///:memory:", future=True)
    TestingSessionLocal = sessionmaker(bind=engine, autoflush=False, autocommit=False, future=True)
    Base.metadata.create_all(bind=engine)
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()
        engine.dispose()


@pytest.fixture
def services(session):
    return build_service_dict(session)


@pytest.fixture
def schedule_events():
    seen: list[str] = []

    def _on_schedule_changed(project_id: str) -> None:
        seen.append(project_id)

    domain_events.schedule_changed.connect(_on_schedule_changed)
    try:
        yield seen
    finally:
        domain_events.schedule_changed.disconnect(_on_schedule_changed)
