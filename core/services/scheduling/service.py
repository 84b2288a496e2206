from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from typing import List, Optional

from sqlalchemy.orm import Session

from core.events.domain_events import domain_events
from core.exceptions import NotFoundError
from core.interfaces import DependencyRepository, ProjectRepository, TaskRepository
from core.models import Task
from core.services.scheduling.engine import calculate_critical_path
from core.services.scheduling.models import CriticalPathResult
from core.services.scheduling.projection import apply_critical_path_to_tasks, cpm_days_to_date

logger = logging.getLogger(__name__)


@dataclass
class ScheduleSnapshot:
    project_id: str
    project_start: date
    result: CriticalPathResult
    tasks: List[Task]
    updated_count: int = 0

    @property
    def project_finish(self) -> date:
        return cpm_days_to_date(self.project_start, self.result.project_duration)

    @property
    def critical_tasks(self) -> List[Task]:
        return [task for task in self.tasks if self.result.is_critical(task.id)]


class SchedulingService:
    """
    Runs CPM over a stored project:
    - preview: compute and project dates, nothing written
    - recalculate: same, then persist early/late dates, slack and criticality
    """

    def __init__(
        self,
        session: Session,
        project_repo: ProjectRepository,
        task_repo: TaskRepository,
        dependency_repo: DependencyRepository,
    ):
        self._session: Session = session
        self._project_repo: ProjectRepository = project_repo
        self._task_repo: TaskRepository = task_repo
        self._dependency_repo: DependencyRepository = dependency_repo

    def preview_project_schedule(
        self,
        project_id: str,
        project_start: Optional[date] = None,
    ) -> ScheduleSnapshot:
        return self._compute(project_id, project_start, strict=False)

    def recalculate_project_schedule(
        self,
        project_id: str,
        project_start: Optional[date] = None,
    ) -> ScheduleSnapshot:
        """
        Strict CPM run; a dependency cycle raises CycleDetectedError before
        anything is written.
        """
        snapshot = self._compute(project_id, project_start, strict=True)

        scheduled = [task for task in snapshot.tasks if task.id in snapshot.result.tasks]
        try:
            for task in scheduled:
                self._task_repo.update(task)
            self._session.commit()
        except Exception:
            self._session.rollback()
            raise

        snapshot.updated_count = len(scheduled)
        logger.info(
            "Recalculated schedule for project %s: %d task(s) updated, duration %d day(s)",
            project_id,
            snapshot.updated_count,
            snapshot.result.project_duration,
        )
        domain_events.schedule_changed.emit(project_id)
        return snapshot

    def _compute(
        self,
        project_id: str,
        project_start: Optional[date],
        *,
        strict: bool,
    ) -> ScheduleSnapshot:
        project = self._project_repo.get(project_id)
        if not project:
            raise NotFoundError("Project not found.", code="PROJECT_NOT_FOUND")

        start = project_start or project.start_date or date.today()
        tasks = self._task_repo.list_by_project(project_id)
        deps = self._dependency_repo.list_by_project(project_id)

        result = calculate_critical_path(tasks, deps, strict=strict)
        projected = apply_critical_path_to_tasks(tasks, result, start)
        return ScheduleSnapshot(
            project_id=project_id,
            project_start=start,
            result=result,
            tasks=projected,
        )


__all__ = ["SchedulingService", "ScheduleSnapshot"]
