from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional


@dataclass
class CPMTask:
    """One schedulable node; all offsets are whole days from project day 0."""
    id: str
    duration: int
    predecessors: List[str] = field(default_factory=list)
    early_start: int = 0
    early_finish: int = 0
    late_start: int = 0
    late_finish: int = 0
    slack: int = 0
    is_critical: bool = False


@dataclass(frozen=True)
class CycleReport:
    unresolved_ids: tuple[str, ...]
    # Closed walk through the cycle, first id repeated at the end.
    cycle_path: tuple[str, ...] = ()

    def describe(self) -> str:
        return " -> ".join(self.cycle_path)


@dataclass
class CriticalPathResult:
    tasks: Dict[str, CPMTask]
    critical_path: List[str]
    project_duration: int
    topological_order: List[str] = field(default_factory=list)
    cycle: Optional[CycleReport] = None

    @property
    def has_cycle(self) -> bool:
        return self.cycle is not None

    def is_critical(self, task_id: str) -> bool:
        node = self.tasks.get(task_id)
        return bool(node and node.is_critical)

    def get(self, task_id: str) -> Optional[CPMTask]:
        return self.tasks.get(task_id)


__all__ = ["CPMTask", "CycleReport", "CriticalPathResult"]
