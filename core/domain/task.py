from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional

from core.domain.enums import DependencyType, TaskStatus, TaskType
from core.domain.identifiers import generate_id


@dataclass
class Task:
    id: str
    project_id: str
    name: str
    description: str = ""
    parent_task_id: Optional[str] = None
    wbs_code: Optional[str] = None
    task_type: TaskType = TaskType.TASK
    is_summary: bool = False
    order_index: int = 0
    status: TaskStatus = TaskStatus.TODO
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    planned_duration: Optional[int] = None
    percent_complete: float = 0.0

    # Written back by the schedule projector
    early_start: Optional[date] = None
    early_finish: Optional[date] = None
    late_start: Optional[date] = None
    late_finish: Optional[date] = None
    slack: Optional[int] = None
    is_critical: bool = False

    @property
    def is_milestone(self) -> bool:
        return self.task_type == TaskType.MILESTONE

    @staticmethod
    def create(project_id: str, name: str, description: str = "", **extra) -> "Task":
        return Task(
            id=generate_id(),
            project_id=project_id,
            name=name,
            description=description,
            **extra,
        )


@dataclass
class TaskDependency:
    id: str
    predecessor_id: str
    successor_id: str
    dependency_type: DependencyType = DependencyType.FINISH_TO_START
    lag_days: int = 0  # negative = lead

    @staticmethod
    def create(
        predecessor_id: str,
        successor_id: str,
        dependency_type: DependencyType = DependencyType.FINISH_TO_START,
        lag_days: int = 0,
    ) -> "TaskDependency":
        return TaskDependency(
            id=generate_id(),
            predecessor_id=predecessor_id,
            successor_id=successor_id,
            dependency_type=dependency_type,
            lag_days=lag_days,
        )


__all__ = ["Task", "TaskDependency"]
