from __future__ import annotations

from enum import Enum


class ProjectStatus(str, Enum):
    PLANNED = "PLANNED"
    ACTIVE = "ACTIVE"
    ON_HOLD = "ON_HOLD"
    COMPLETED = "COMPLETED"


class Methodology(str, Enum):
    AGILE = "agile"
    PREDICTIVE = "predictive"
    HYBRID = "hybrid"


class TaskStatus(str, Enum):
    TODO = "todo"
    IN_PROGRESS = "in-progress"
    REVIEW = "review"
    DONE = "done"
    BLOCKED = "blocked"


class TaskType(str, Enum):
    TASK = "task"
    MILESTONE = "milestone"
    PHASE = "phase"
    SUMMARY = "summary"


class DependencyType(str, Enum):
    FINISH_TO_START = "FS"
    FINISH_TO_FINISH = "FF"
    START_TO_START = "SS"
    START_TO_FINISH = "SF"


class GanttZoomLevel(str, Enum):
    DAY = "day"
    WEEK = "week"
    MONTH = "month"
    QUARTER = "quarter"
    YEAR = "year"


__all__ = [
    "ProjectStatus",
    "Methodology",
    "TaskStatus",
    "TaskType",
    "DependencyType",
    "GanttZoomLevel",
]
