from __future__ import annotations

from typing import Dict, List

from core.models import DependencyType
from core.services.scheduling.constraints import resolve_backward, resolve_forward
from core.services.scheduling.graph import DependencyGraph, Edge
from core.services.scheduling.models import CPMTask


def run_forward_pass(
    nodes: Dict[str, CPMTask],
    topo_order: List[str],
    graph: DependencyGraph,
) -> int:
    """Fill ES/EF in topological order and return the project duration."""
    for task_id in topo_order:
        node = nodes[task_id]
        incoming = [edge for edge in graph.incoming(task_id) if edge.predecessor_id in nodes]
        if incoming:
            candidates = [
                resolve_forward(edge, nodes[edge.predecessor_id], node) for edge in incoming
            ]
            # Leads never pull a task before project start.
            node.early_start = max(0, max(candidates))
        else:
            node.early_start = 0
        node.early_finish = node.early_start + node.duration

    return max((nodes[task_id].early_finish for task_id in topo_order), default=0)


def _late_finish_bound(
    edge: Edge,
    predecessor: CPMTask,
    successor: CPMTask,
    project_duration: int,
) -> int:
    bound = resolve_backward(edge, predecessor, successor)
    if edge.dependency_type == DependencyType.FINISH_TO_START:
        return bound
    # SS/FF/SF bounds are measured from the successor's span and may land past the horizon.
    return min(project_duration, bound)


def run_backward_pass(
    nodes: Dict[str, CPMTask],
    topo_order: List[str],
    graph: DependencyGraph,
    project_duration: int,
) -> None:
    for task_id in reversed(topo_order):
        node = nodes[task_id]
        outgoing = [edge for edge in graph.outgoing(task_id) if edge.successor_id in nodes]
        if outgoing:
            node.late_finish = min(
                _late_finish_bound(edge, node, nodes[edge.successor_id], project_duration)
                for edge in outgoing
            )
        else:
            node.late_finish = project_duration
        node.late_start = node.late_finish - node.duration


def mark_critical(nodes: Dict[str, CPMTask]) -> list[str]:
    """Set slack/criticality and return critical ids ordered by early start."""
    for node in nodes.values():
        node.slack = node.late_start - node.early_start
        node.is_critical = node.slack == 0

    critical = [task_id for task_id, node in nodes.items() if node.is_critical]
    return sorted(critical, key=lambda task_id: nodes[task_id].early_start)


__all__ = ["run_forward_pass", "run_backward_pass", "mark_critical"]
