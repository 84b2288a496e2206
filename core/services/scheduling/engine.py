from __future__ import annotations

import logging
from typing import Dict, Iterable

from core.exceptions import CycleDetectedError
from core.models import Task, TaskDependency
from core.services.scheduling.graph import build_dependency_graph, topological_order
from core.services.scheduling.models import CPMTask, CriticalPathResult
from core.services.scheduling.passes import mark_critical, run_backward_pass, run_forward_pass

logger = logging.getLogger(__name__)

DEFAULT_DURATION_DAYS = 1


def task_duration(task: Task) -> int:
    """Planned duration in days; milestones and missing or non-positive values count as one day."""
    if task.is_milestone:
        return DEFAULT_DURATION_DAYS
    duration = task.planned_duration
    if not duration or duration <= 0:
        return DEFAULT_DURATION_DAYS
    return int(duration)


def calculate_critical_path(
    tasks: Iterable[Task],
    dependencies: Iterable[TaskDependency],
    *,
    strict: bool = False,
) -> CriticalPathResult:
    """
    CPM over the non-summary tasks:
    - forward pass: ES/EF from day 0
    - backward pass: LS/LF from the project duration
    - FS, SS, FF, SF with lag_days (negative = lead)

    Tasks caught in a dependency cycle are left out of the result and reported
    on ``result.cycle``; with ``strict=True`` a CycleDetectedError is raised
    instead.
    """
    nodes: Dict[str, CPMTask] = {}
    for task in tasks:
        if task.is_summary:
            continue
        nodes[task.id] = CPMTask(id=task.id, duration=task_duration(task))

    graph = build_dependency_graph(nodes.keys(), dependencies)
    for task_id, node in nodes.items():
        node.predecessors = [edge.predecessor_id for edge in graph.incoming(task_id)]

    topo_order, cycle = topological_order(graph)
    if cycle is not None:
        if strict:
            raise CycleDetectedError(cycle)
        logger.warning(
            "Circular dependency detected; %d task(s) left unscheduled (%s)",
            len(cycle.unresolved_ids),
            cycle.describe(),
        )
        ordered = set(topo_order)
        nodes = {task_id: node for task_id, node in nodes.items() if task_id in ordered}

    project_duration = run_forward_pass(nodes, topo_order, graph)
    run_backward_pass(nodes, topo_order, graph, project_duration)
    critical_path = mark_critical(nodes)

    logger.debug(
        "CPM: %d task(s), %d dependency edge(s), duration %d day(s), %d critical",
        len(nodes),
        graph.edge_count,
        project_duration,
        len(critical_path),
    )

    return CriticalPathResult(
        tasks=nodes,
        critical_path=critical_path,
        project_duration=project_duration,
        topological_order=topo_order,
        cycle=cycle,
    )


__all__ = ["calculate_critical_path", "task_duration", "DEFAULT_DURATION_DAYS"]
