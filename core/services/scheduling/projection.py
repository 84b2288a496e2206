from __future__ import annotations

from dataclasses import replace
from datetime import date
from typing import Iterable

from core.models import Task
from core.services.scheduling.models import CriticalPathResult
from core.services.timeline.dates import add_days


def cpm_days_to_date(project_start: date, days: int) -> date:
    return add_days(project_start, days)


def apply_critical_path_to_tasks(
    tasks: Iterable[Task],
    cpm_result: CriticalPathResult,
    project_start_date: date,
) -> list[Task]:
    """
    Project CPM offsets onto calendar dates. Scheduled tasks come back as
    copies carrying early/late dates, slack and criticality; tasks the engine
    did not schedule (summaries, cycle members) are passed through as is.
    """
    projected: list[Task] = []
    for task in tasks:
        node = cpm_result.get(task.id)
        if node is None:
            projected.append(task)
            continue
        projected.append(
            replace(
                task,
                early_start=cpm_days_to_date(project_start_date, node.early_start),
                early_finish=cpm_days_to_date(project_start_date, node.early_finish),
                late_start=cpm_days_to_date(project_start_date, node.late_start),
                late_finish=cpm_days_to_date(project_start_date, node.late_finish),
                slack=node.slack,
                is_critical=node.is_critical,
            )
        )
    return projected


__all__ = ["cpm_days_to_date", "apply_critical_path_to_tasks"]
