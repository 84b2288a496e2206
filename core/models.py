from core.domain import (
    DependencyType,
    GanttZoomLevel,
    Methodology,
    Project,
    ProjectStatus,
    Task,
    TaskDependency,
    TaskStatus,
    TaskType,
    generate_id,
)

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
