from __future__ import annotations

from core.models import Task, TaskDependency
from infra.db.models import TaskDependencyORM, TaskORM


def task_to_orm(task: Task) -> TaskORM:
    return TaskORM(
        id=task.id,
        project_id=task.project_id,
        parent_task_id=task.parent_task_id,
        name=task.name,
        description=task.description,
        wbs_code=task.wbs_code,
        task_type=task.task_type,
        is_summary=task.is_summary,
        order_index=task.order_index,
        status=task.status,
        start_date=task.start_date,
        end_date=task.end_date,
        planned_duration=task.planned_duration,
        percent_complete=task.percent_complete,
        early_start=task.early_start,
        early_finish=task.early_finish,
        late_start=task.late_start,
        late_finish=task.late_finish,
        slack=task.slack,
        is_critical=task.is_critical,
    )


def task_from_orm(obj: TaskORM) -> Task:
    return Task(
        id=obj.id,
        project_id=obj.project_id,
        parent_task_id=obj.parent_task_id,
        name=obj.name,
        description=obj.description,
        wbs_code=obj.wbs_code,
        task_type=obj.task_type,
        is_summary=bool(obj.is_summary),
        order_index=obj.order_index or 0,
        status=obj.status,
        start_date=obj.start_date,
        end_date=obj.end_date,
        planned_duration=obj.planned_duration,
        percent_complete=obj.percent_complete or 0.0,
        early_start=obj.early_start,
        early_finish=obj.early_finish,
        late_start=obj.late_start,
        late_finish=obj.late_finish,
        slack=obj.slack,
        is_critical=bool(obj.is_critical),
    )


def dependency_to_orm(dependency: TaskDependency) -> TaskDependencyORM:
    return TaskDependencyORM(
        id=dependency.id,
        predecessor_task_id=dependency.predecessor_id,
        successor_task_id=dependency.successor_id,
        dependency_type=dependency.dependency_type,
        lag_days=dependency.lag_days,
    )


def dependency_from_orm(obj: TaskDependencyORM) -> TaskDependency:
    return TaskDependency(
        id=obj.id,
        predecessor_id=obj.predecessor_task_id,
        successor_id=obj.successor_task_id,
        dependency_type=obj.dependency_type,
        lag_days=obj.lag_days,
    )


__all__ = [
    "task_to_orm",
    "task_from_orm",
    "dependency_to_orm",
    "dependency_from_orm",
]
