from __future__ import annotations

import math
import re
from collections import deque
from dataclasses import dataclass, field
from datetime import date
from typing import Dict, Iterable, List, Optional

from core.domain.identifiers import WBS_ROOT_ID
from core.models import Task, TaskStatus, TaskType

VIRTUAL_ROOT_ID = WBS_ROOT_ID
VIRTUAL_ROOT_CODE = "0"
VIRTUAL_ROOT_NAME = "Project"

_CODE_PART = re.compile(r"(\d+)")


@dataclass
class WBSNode:
    id: str
    name: str
    wbs_code: str
    task_type: TaskType
    children: List["WBSNode"] = field(default_factory=list)
    progress: float = 0.0
    status: TaskStatus = TaskStatus.TODO
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    is_critical: bool = False


def average_progress(tasks: Iterable[Task]) -> int:
    """Mean percent complete, rounded half-up; 0 for no tasks."""
    values = [task.percent_complete or 0 for task in tasks]
    if not values:
        return 0
    return math.floor(sum(values) / len(values) + 0.5)


def wbs_sort_key(code: str) -> tuple:
    """Natural order for codes like 1.2 / 1.10."""
    return tuple(
        (0, int(part), "") if part.isdigit() else (1, 0, part)
        for part in _CODE_PART.split(code)
        if part
    )


def _sort_children(children: List[Task]) -> List[Task]:
    # Coded siblings are ordered among themselves; uncoded ones keep their slot.
    slots = [index for index, task in enumerate(children) if task.wbs_code]
    coded = sorted((children[index] for index in slots), key=lambda t: wbs_sort_key(t.wbs_code or ""))
    ordered = list(children)
    for index, task in zip(slots, coded):
        ordered[index] = task
    return ordered


def _wbs_node(task: Task) -> WBSNode:
    return WBSNode(
        id=task.id,
        name=task.name,
        wbs_code=task.wbs_code or "",
        task_type=task.task_type,
        progress=task.percent_complete or 0,
        status=task.status,
        start_date=task.start_date,
        end_date=task.end_date,
        is_critical=task.is_critical,
    )


def build_wbs_tree(tasks: Iterable[Task]) -> Optional[WBSNode]:
    tasks = list(tasks)
    roots = [task for task in tasks if not task.parent_task_id]
    if not roots:
        return None

    children_by_parent: Dict[str, List[Task]] = {}
    for task in tasks:
        if task.parent_task_id:
            children_by_parent.setdefault(task.parent_task_id, []).append(task)

    root_nodes = [_wbs_node(root) for root in roots]
    queue = deque(zip(roots, root_nodes))
    while queue:
        task, node = queue.popleft()
        for child in _sort_children(children_by_parent.get(task.id, [])):
            child_node = _wbs_node(child)
            node.children.append(child_node)
            queue.append((child, child_node))

    if len(root_nodes) == 1:
        return root_nodes[0]

    return WBSNode(
        id=VIRTUAL_ROOT_ID,
        name=VIRTUAL_ROOT_NAME,
        wbs_code=VIRTUAL_ROOT_CODE,
        task_type=TaskType.SUMMARY,
        children=root_nodes,
        progress=average_progress(roots),
        status=TaskStatus.IN_PROGRESS,
    )


def flatten_wbs_tree(node: Optional[WBSNode]) -> List[WBSNode]:
    """Pre-order walk, children in their sorted order."""
    if node is None:
        return []
    result: List[WBSNode] = []
    stack = [node]
    while stack:
        current = stack.pop()
        result.append(current)
        stack.extend(reversed(current.children))
    return result


def count_wbs_nodes(node: Optional[WBSNode]) -> int:
    return len(flatten_wbs_tree(node))


def get_wbs_depth(node: Optional[WBSNode]) -> int:
    """Deepest level below ``node``; a lone root has depth 0."""
    if node is None:
        return 0
    depth = 0
    stack = [(node, 0)]
    while stack:
        current, level = stack.pop()
        depth = max(depth, level)
        stack.extend((child, level + 1) for child in current.children)
    return depth


__all__ = [
    "VIRTUAL_ROOT_ID",
    "WBSNode",
    "average_progress",
    "wbs_sort_key",
    "build_wbs_tree",
    "flatten_wbs_tree",
    "count_wbs_nodes",
    "get_wbs_depth",
]
