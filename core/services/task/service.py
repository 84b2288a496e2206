from __future__ import annotations

from sqlalchemy.orm import Session

from core.interfaces import DependencyRepository, TaskRepository
from core.services.task.dependency import TaskDependencyMixin


class TaskService(TaskDependencyMixin):
    def __init__(
        self,
        session: Session,
        task_repo: TaskRepository,
        dependency_repo: DependencyRepository,
    ):
        self._session: Session = session
        self._task_repo: TaskRepository = task_repo
        self._dependency_repo: DependencyRepository = dependency_repo


__all__ = ["TaskService"]
