from .constraints import resolve_constraint
from .engine import calculate_critical_path
from .graph import (
    DependencyGraph,
    Edge,
    build_dependency_graph,
    topological_order,
    would_create_cycle,
)
from .models import CPMTask, CriticalPathResult, CycleReport
from .projection import apply_critical_path_to_tasks, cpm_days_to_date
from .service import ScheduleSnapshot, SchedulingService

__all__ = [
    "resolve_constraint",
    "calculate_critical_path",
    "DependencyGraph",
    "Edge",
    "build_dependency_graph",
    "topological_order",
    "would_create_cycle",
    "CPMTask",
    "CriticalPathResult",
    "CycleReport",
    "apply_critical_path_to_tasks",
    "cpm_days_to_date",
    "ScheduleSnapshot",
    "SchedulingService",
]
