from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from sqlalchemy.orm import Session

from core.interfaces import DependencyRepository, ProjectRepository, TaskRepository
from core.services.scheduling import SchedulingService
from core.services.task import TaskService
from infra.db.repositories import (
    SqlAlchemyDependencyRepository,
    SqlAlchemyProjectRepository,
    SqlAlchemyTaskRepository,
)


@dataclass(frozen=True)
class ServiceGraph:
    session: Session
    project_repo: ProjectRepository
    task_repo: TaskRepository
    dependency_repo: DependencyRepository
    scheduling_service: SchedulingService
    task_service: TaskService

    def as_dict(self) -> dict[str, Any]:
        return {
            "session": self.session,
            "project_repo": self.project_repo,
            "task_repo": self.task_repo,
            "dependency_repo": self.dependency_repo,
            "scheduling_service": self.scheduling_service,
            "task_service": self.task_service,
        }


def build_services(session: Session) -> ServiceGraph:
    project_repo = SqlAlchemyProjectRepository(session)
    task_repo = SqlAlchemyTaskRepository(session)
    dependency_repo = SqlAlchemyDependencyRepository(session)

    scheduling_service = SchedulingService(
        session,
        project_repo,
        task_repo,
        dependency_repo,
    )
    task_service = TaskService(session, task_repo, dependency_repo)

    return ServiceGraph(
        session=session,
        project_repo=project_repo,
        task_repo=task_repo,
        dependency_repo=dependency_repo,
        scheduling_service=scheduling_service,
        task_service=task_service,
    )


def build_service_dict(session: Session) -> dict[str, Any]:
    return build_services(session).as_dict()
