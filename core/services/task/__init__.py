from .hierarchy import (
    FlatTaskRow,
    TaskForest,
    TaskNode,
    build_task_forest,
    build_task_tree,
    flatten_task_tree,
    visible_rows,
)
from .dependency import TaskDependencyMixin
from .service import TaskService
from .wbs import (
    WBSNode,
    average_progress,
    build_wbs_tree,
    count_wbs_nodes,
    flatten_wbs_tree,
    get_wbs_depth,
)

__all__ = [
    "TaskDependencyMixin",
    "TaskService",
    "FlatTaskRow",
    "TaskForest",
    "TaskNode",
    "build_task_forest",
    "build_task_tree",
    "flatten_task_tree",
    "visible_rows",
    "WBSNode",
    "average_progress",
    "build_wbs_tree",
    "count_wbs_nodes",
    "flatten_wbs_tree",
    "get_wbs_depth",
]
