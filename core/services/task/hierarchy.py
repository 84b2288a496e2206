"""
Parent/child structure behind the task grid and the Gantt task list.

The flat task list is turned into an arena (tasks by id plus ordered child id
lists) first; node trees and display rows are derived from it. Input order is
preserved everywhere, so callers control sibling order by how they sort the
tasks they pass in (normally by ``order_index``).
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import AbstractSet, Dict, Iterable, List, Optional

from core.models import Task

logger = logging.getLogger(__name__)


@dataclass
class TaskForest:
    tasks_by_id: Dict[str, Task] = field(default_factory=dict)
    children_by_id: Dict[str, List[str]] = field(default_factory=dict)
    root_ids: List[str] = field(default_factory=list)
    # Tasks whose parent_task_id points at no known task.
    orphan_ids: List[str] = field(default_factory=list)
    # Tasks promoted to roots to break a parent cycle.
    cycle_break_ids: List[str] = field(default_factory=list)

    def children_of(self, task_id: str) -> List[Task]:
        return [self.tasks_by_id[child_id] for child_id in self.children_by_id.get(task_id, [])]

    def roots(self) -> List[Task]:
        return [self.tasks_by_id[task_id] for task_id in self.root_ids]


@dataclass
class TaskNode:
    task: Task
    children: List["TaskNode"] = field(default_factory=list)

    @property
    def id(self) -> str:
        return self.task.id


@dataclass(frozen=True)
class FlatTaskRow:
    task: Task
    depth: int
    visible: bool
    has_children: bool

    @property
    def id(self) -> str:
        return self.task.id


def _effective_parents(tasks_by_id: Dict[str, Task], forest: TaskForest) -> Dict[str, Optional[str]]:
    parents: Dict[str, Optional[str]] = {}
    for task_id, task in tasks_by_id.items():
        parent_id = task.parent_task_id
        if parent_id is not None and parent_id not in tasks_by_id:
            logger.debug("Task %s references missing parent %s; treating it as a root", task_id, parent_id)
            forest.orphan_ids.append(task_id)
            parent_id = None
        parents[task_id] = parent_id
    return parents


def _break_parent_cycles(parents: Dict[str, Optional[str]], forest: TaskForest) -> None:
    order = {task_id: index for index, task_id in enumerate(parents)}
    done: set[str] = set()

    for start_id in parents:
        path: list[str] = []
        on_path: set[str] = set()
        current = start_id
        while current is not None and current not in done and current not in on_path:
            path.append(current)
            on_path.add(current)
            current = parents[current]

        if current is not None and current in on_path:
            members = path[path.index(current):]
            promoted = min(members, key=order.__getitem__)
            parents[promoted] = None
            forest.cycle_break_ids.append(promoted)
            logger.warning(
                "Parent cycle among tasks %s; promoting %s to a root",
                ", ".join(members),
                promoted,
            )

        done.update(path)


def build_task_forest(tasks: Iterable[Task]) -> TaskForest:
    forest = TaskForest()
    for task in tasks:
        if task.id in forest.tasks_by_id:
            logger.debug("Duplicate task id %s ignored", task.id)
            continue
        forest.tasks_by_id[task.id] = task

    parents = _effective_parents(forest.tasks_by_id, forest)
    _break_parent_cycles(parents, forest)

    for task_id, parent_id in parents.items():
        if parent_id is None:
            forest.root_ids.append(task_id)
        else:
            forest.children_by_id.setdefault(parent_id, []).append(task_id)

    return forest


def build_task_tree(tasks: Iterable[Task]) -> List[TaskNode]:
    forest = build_task_forest(tasks)
    nodes = {task_id: TaskNode(task=task) for task_id, task in forest.tasks_by_id.items()}
    for parent_id, child_ids in forest.children_by_id.items():
        nodes[parent_id].children = [nodes[child_id] for child_id in child_ids]
    return [nodes[task_id] for task_id in forest.root_ids]


def flatten_task_tree(tree: Iterable[TaskNode], expanded_ids: AbstractSet[str]) -> List[FlatTaskRow]:
    """
    Depth-first rows for display. A row is visible only when every ancestor
    is expanded; collapsed subtrees still produce (hidden) rows.
    """
    rows: List[FlatTaskRow] = []
    stack = [(node, 0, True) for node in reversed(list(tree))]
    while stack:
        node, depth, visible = stack.pop()
        rows.append(
            FlatTaskRow(
                task=node.task,
                depth=depth,
                visible=visible,
                has_children=bool(node.children),
            )
        )
        child_visible = visible and node.id in expanded_ids
        for child in reversed(node.children):
            stack.append((child, depth + 1, child_visible))
    return rows


def visible_rows(rows: Iterable[FlatTaskRow]) -> List[FlatTaskRow]:
    return [row for row in rows if row.visible]


__all__ = [
    "TaskForest",
    "TaskNode",
    "FlatTaskRow",
    "build_task_forest",
    "build_task_tree",
    "flatten_task_tree",
    "visible_rows",
]
