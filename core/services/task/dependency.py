from __future__ import annotations

import logging
from typing import List

from sqlalchemy.orm import Session

from core.events.domain_events import domain_events
from core.exceptions import BusinessRuleError, NotFoundError, ValidationError
from core.interfaces import DependencyRepository, TaskRepository
from core.models import DependencyType, TaskDependency
from core.services.scheduling.graph import build_dependency_graph, would_create_cycle

logger = logging.getLogger(__name__)


class TaskDependencyMixin:
    _session: Session
    _task_repo: TaskRepository
    _dependency_repo: DependencyRepository

    def add_dependency(
        self,
        predecessor_id: str,
        successor_id: str,
        dependency_type: DependencyType = DependencyType.FINISH_TO_START,
        lag_days: int = 0,
    ) -> TaskDependency:
        """
        Link two tasks of the same project. Edges that would close a loop
        are rejected before anything is written.
        """
        if predecessor_id == successor_id:
            raise BusinessRuleError(
                "A task cannot depend on itself.", code="DEPENDENCY_CYCLE"
            )

        pred = self._task_repo.get(predecessor_id)
        if not pred:
            raise NotFoundError("Predecessor task not found.", code="TASK_NOT_FOUND")
        succ = self._task_repo.get(successor_id)
        if not succ:
            raise NotFoundError("Successor task not found.", code="TASK_NOT_FOUND")
        if pred.project_id != succ.project_id:
            raise ValidationError(
                "Dependencies must link tasks of the same project.",
                code="DEPENDENCY_CROSS_PROJECT",
            )

        existing = self._dependency_repo.list_by_project(pred.project_id)
        if any(
            dep.predecessor_id == predecessor_id and dep.successor_id == successor_id
            for dep in existing
        ):
            raise ValidationError("This dependency already exists.", code="DEPENDENCY_DUPLICATE")

        task_ids = [task.id for task in self._task_repo.list_by_project(pred.project_id)]
        graph = build_dependency_graph(task_ids, existing)
        if would_create_cycle(graph, predecessor_id, successor_id):
            raise BusinessRuleError(
                f"Linking '{pred.name}' -> '{succ.name}' would create a dependency cycle.",
                code="DEPENDENCY_CYCLE",
            )

        dep = TaskDependency.create(predecessor_id, successor_id, DependencyType(dependency_type), lag_days)
        try:
            self._dependency_repo.add(dep)
            self._session.commit()
        except Exception:
            self._session.rollback()
            raise

        logger.info("Added dependency %s: %s -> %s", dep.id, predecessor_id, successor_id)
        domain_events.tasks_changed.emit(pred.project_id)
        return dep

    def remove_dependency(self, dep_id: str) -> None:
        dep = self._dependency_repo.get(dep_id)
        if not dep:
            raise NotFoundError("Dependency not found.", code="DEPENDENCY_NOT_FOUND")
        pred = self._task_repo.get(dep.predecessor_id)
        succ = self._task_repo.get(dep.successor_id)
        try:
            self._dependency_repo.delete(dep_id)
            self._session.commit()
        except Exception:
            self._session.rollback()
            raise

        project_id = pred.project_id if pred else (succ.project_id if succ else None)
        if project_id:
            domain_events.tasks_changed.emit(project_id)

    def list_dependencies_for_task(self, task_id: str) -> List[TaskDependency]:
        return self._dependency_repo.list_by_task(task_id)


__all__ = ["TaskDependencyMixin"]
