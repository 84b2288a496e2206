from __future__ import annotations

from core.models import DependencyType
from core.services.scheduling.graph import Edge
from core.services.scheduling.models import CPMTask


def resolve_constraint(
    dependency_type: DependencyType,
    lag_days: int,
    predecessor: CPMTask,
    successor: CPMTask,
    *,
    backward: bool = False,
) -> int:
    """
    Day offset one dependency imposes.

    Forward: the earliest start the successor may take.
    Backward: the latest finish the predecessor may take.
    """
    dependency_type = DependencyType(dependency_type)

    if not backward:
        if dependency_type == DependencyType.FINISH_TO_START:
            return predecessor.early_finish + lag_days
        if dependency_type == DependencyType.START_TO_START:
            return predecessor.early_start + lag_days
        if dependency_type == DependencyType.FINISH_TO_FINISH:
            # EF_s >= EF_p + lag
            return predecessor.early_finish + lag_days - successor.duration
        # SF: EF_s >= ES_p + lag
        return predecessor.early_start + lag_days - successor.duration

    if dependency_type == DependencyType.FINISH_TO_START:
        return successor.late_start - lag_days
    if dependency_type == DependencyType.START_TO_START:
        # LS_p <= LS_s - lag
        return successor.late_start - lag_days + predecessor.duration
    if dependency_type == DependencyType.FINISH_TO_FINISH:
        return successor.late_finish - lag_days
    # SF: LS_p <= LF_s - lag
    return successor.late_finish - lag_days + predecessor.duration


def resolve_forward(edge: Edge, predecessor: CPMTask, successor: CPMTask) -> int:
    return resolve_constraint(edge.dependency_type, edge.lag_days, predecessor, successor)


def resolve_backward(edge: Edge, predecessor: CPMTask, successor: CPMTask) -> int:
    return resolve_constraint(
        edge.dependency_type, edge.lag_days, predecessor, successor, backward=True
    )


__all__ = ["resolve_constraint", "resolve_forward", "resolve_backward"]
