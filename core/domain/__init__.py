from core.domain.enums import (
    DependencyType,
    GanttZoomLevel,
    Methodology,
    ProjectStatus,
    TaskStatus,
    TaskType,
)
from core.domain.identifiers import generate_id
from core.domain.project import Project
from core.domain.task import Task, TaskDependency

__all__ = [
    "generate_id",
    "ProjectStatus",
    "Methodology",
    "TaskStatus",
    "TaskType",
    "DependencyType",
    "GanttZoomLevel",
    "Project",
    "Task",
    "TaskDependency",
]
