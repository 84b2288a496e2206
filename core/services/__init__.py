from .scheduling import (
    CPMTask,
    CriticalPathResult,
    CycleReport,
    ScheduleSnapshot,
    SchedulingService,
    apply_critical_path_to_tasks,
    calculate_critical_path,
)
from .task import TaskService, build_task_tree, build_wbs_tree, flatten_task_tree

__all__ = [
    "CPMTask",
    "CriticalPathResult",
    "CycleReport",
    "ScheduleSnapshot",
    "SchedulingService",
    "TaskService",
    "apply_critical_path_to_tasks",
    "calculate_critical_path",
    "build_task_tree",
    "build_wbs_tree",
    "flatten_task_tree",
]
