from __future__ import annotations

import logging
from collections import deque
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional

from core.models import DependencyType, TaskDependency
from core.services.scheduling.models import CycleReport

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Edge:
    predecessor_id: str
    successor_id: str
    dependency_type: DependencyType = DependencyType.FINISH_TO_START
    lag_days: int = 0


@dataclass
class DependencyGraph:
    node_ids: List[str]
    successors: Dict[str, List[Edge]] = field(default_factory=dict)
    predecessors: Dict[str, List[Edge]] = field(default_factory=dict)

    def outgoing(self, node_id: str) -> List[Edge]:
        return self.successors.get(node_id, [])

    def incoming(self, node_id: str) -> List[Edge]:
        return self.predecessors.get(node_id, [])

    @property
    def edge_count(self) -> int:
        return sum(len(edges) for edges in self.successors.values())


def build_dependency_graph(
    node_ids: Iterable[str],
    deps: Iterable[TaskDependency],
) -> DependencyGraph:
    """
    Adjacency in both directions over the given nodes. Dependencies touching
    an id outside ``node_ids`` (unknown or summary tasks) are skipped.
    """
    nodes = list(dict.fromkeys(node_ids))
    known = set(nodes)
    graph = DependencyGraph(node_ids=nodes)

    for dep in deps:
        if dep.predecessor_id not in known or dep.successor_id not in known:
            logger.debug(
                "Skipping dependency %s: %s -> %s is not between schedulable tasks",
                getattr(dep, "id", None),
                dep.predecessor_id,
                dep.successor_id,
            )
            continue
        edge = Edge(
            predecessor_id=dep.predecessor_id,
            successor_id=dep.successor_id,
            dependency_type=DependencyType(dep.dependency_type or DependencyType.FINISH_TO_START),
            lag_days=int(dep.lag_days or 0),
        )
        graph.successors.setdefault(edge.predecessor_id, []).append(edge)
        graph.predecessors.setdefault(edge.successor_id, []).append(edge)

    return graph


def topological_order(graph: DependencyGraph) -> tuple[list[str], Optional[CycleReport]]:
    """
    Kahn's algorithm, seeded and expanded in input order. Returns the order
    and, when some nodes never reach in-degree zero, a report on them.
    """
    indegree: Dict[str, int] = {
        node_id: len(graph.incoming(node_id)) for node_id in graph.node_ids
    }
    queue = deque(node_id for node_id in graph.node_ids if indegree[node_id] == 0)

    order: list[str] = []
    while queue:
        node_id = queue.popleft()
        order.append(node_id)
        for edge in graph.outgoing(node_id):
            indegree[edge.successor_id] -= 1
            if indegree[edge.successor_id] == 0:
                queue.append(edge.successor_id)

    if len(order) == len(graph.node_ids):
        return order, None

    ordered = set(order)
    unresolved = [node_id for node_id in graph.node_ids if node_id not in ordered]
    report = CycleReport(
        unresolved_ids=tuple(unresolved),
        cycle_path=tuple(find_cycle_path(graph, unresolved)),
    )
    return order, report


def find_cycle_path(graph: DependencyGraph, unresolved: List[str]) -> list[str]:
    """
    One closed cycle among ``unresolved``. Every node Kahn's algorithm leaves
    behind has a predecessor that was also left behind, so walking
    predecessors from any of them must revisit a node.
    """
    if not unresolved:
        return []

    pending = set(unresolved)
    position = {node_id: index for index, node_id in enumerate(unresolved)}
    seen_at: Dict[str, int] = {}
    walk: list[str] = []
    current = unresolved[0]
    while current not in seen_at:
        seen_at[current] = len(walk)
        walk.append(current)
        current = next(
            edge.predecessor_id
            for edge in graph.incoming(current)
            if edge.predecessor_id in pending
        )

    loop = walk[seen_at[current]:]
    loop.reverse()
    first = min(range(len(loop)), key=lambda i: position[loop[i]])
    loop = loop[first:] + loop[:first]
    return loop + [loop[0]]


def would_create_cycle(graph: DependencyGraph, predecessor_id: str, successor_id: str) -> bool:
    """True when adding predecessor -> successor would close a loop in ``graph``."""
    if predecessor_id == successor_id:
        return True

    seen = {successor_id}
    stack = [successor_id]
    while stack:
        node_id = stack.pop()
        for edge in graph.outgoing(node_id):
            if edge.successor_id == predecessor_id:
                return True
            if edge.successor_id not in seen:
                seen.add(edge.successor_id)
                stack.append(edge.successor_id)
    return False


__all__ = [
    "Edge",
    "DependencyGraph",
    "build_dependency_graph",
    "topological_order",
    "find_cycle_path",
    "would_create_cycle",
]
