from __future__ import annotations

import logging

import pytest

from core.exceptions import BusinessRuleError, CycleDetectedError
from core.models import DependencyType, Task, TaskDependency
from core.services.scheduling import calculate_critical_path
from core.services.scheduling.engine import task_duration


def _task(task_id: str, duration: int | None = 1, **extra) -> Task:
    return Task(id=task_id, project_id="p-1", name=task_id.upper(), planned_duration=duration, **extra)


def _dep(pred: str, succ: str, dep_type=DependencyType.FINISH_TO_START, lag: int = 0) -> TaskDependency:
    return TaskDependency(
        id=f"{pred}->{succ}",
        predecessor_id=pred,
        successor_id=succ,
        dependency_type=dep_type,
        lag_days=lag,
    )


def test_cpm_three_task_scenario():
    tasks = [_task("a", 3), _task("b", 2), _task("c", 4)]
    deps = [_dep("a", "b"), _dep("a", "c", lag=1)]

    result = calculate_critical_path(tasks, deps)

    a, b, c = result.tasks["a"], result.tasks["b"], result.tasks["c"]
    assert (a.early_start, a.early_finish) == (0, 3)
    assert (b.early_start, b.early_finish) == (3, 5)
    assert (c.early_start, c.early_finish) == (4, 8)
    assert result.project_duration == 8
    assert b.slack == 3
    assert b.late_start == 6 and b.late_finish == 8
    assert a.slack == 0 and c.slack == 0
    assert result.critical_path == ["a", "c"]
    assert result.cycle is None


def test_cpm_single_task():
    result = calculate_critical_path([_task("only", 5)], [])

    assert result.project_duration == 5
    assert result.critical_path == ["only"]
    assert result.tasks["only"].slack == 0
    assert result.is_critical("only")


def test_cpm_empty_input():
    result = calculate_critical_path([], [])

    assert result.tasks == {}
    assert result.critical_path == []
    assert result.project_duration == 0


def test_missing_or_zero_duration_defaults_to_one_day():
    assert task_duration(_task("x", None)) == 1
    assert task_duration(_task("x", 0)) == 1
    assert task_duration(_task("x", 4)) == 4

    result = calculate_critical_path([_task("a", None), _task("b", 0)], [_dep("a", "b")])
    assert result.tasks["a"].duration == 1
    assert result.tasks["b"].early_start == 1
    assert result.project_duration == 2


def test_summary_tasks_are_excluded_and_their_edges_dropped(caplog):
    tasks = [
        _task("phase", 10, is_summary=True),
        _task("a", 2, parent_task_id="phase"),
        _task("b", 3, parent_task_id="phase"),
    ]
    deps = [_dep("phase", "b"), _dep("a", "b")]

    with caplog.at_level(logging.DEBUG, logger="core.services.scheduling.graph"):
        result = calculate_critical_path(tasks, deps)

    assert "phase" not in result.tasks
    assert result.tasks["b"].predecessors == ["a"]
    assert result.tasks["b"].early_start == 2
    assert result.project_duration == 5
    assert "Skipping dependency" in caplog.text


def test_dangling_reference_does_not_block_successor():
    result = calculate_critical_path([_task("a", 2)], [_dep("ghost", "a")])

    assert result.tasks["a"].predecessors == []
    assert result.tasks["a"].early_start == 0
    assert result.topological_order == ["a"]


def test_negative_lag_is_clamped_at_project_start():
    tasks = [_task("a", 2), _task("b", 3)]
    result = calculate_critical_path(tasks, [_dep("a", "b", lag=-5)])

    a, b = result.tasks["a"], result.tasks["b"]
    assert b.early_start == 0
    assert b.early_finish == 3
    assert result.project_duration == 3
    # LF = successor LS - lag, with no horizon cap for finish-to-start
    assert a.late_finish == b.late_start - (-5) == 5
    assert a.slack == 3
    assert result.critical_path == ["b"]


def test_lead_overlaps_predecessor():
    tasks = [_task("a", 4), _task("b", 3)]
    result = calculate_critical_path(tasks, [_dep("a", "b", lag=-2)])

    assert result.tasks["b"].early_start == 2
    assert result.project_duration == 5
    assert result.critical_path == ["a", "b"]


def test_parallel_chains_only_longest_is_critical():
    tasks = [_task("start", 1), _task("long", 5), _task("short", 2), _task("end", 1)]
    deps = [
        _dep("start", "long"),
        _dep("start", "short"),
        _dep("long", "end"),
        _dep("short", "end"),
    ]

    result = calculate_critical_path(tasks, deps)

    assert result.project_duration == 7
    assert result.critical_path == ["start", "long", "end"]
    assert result.tasks["short"].slack == 3
    assert not result.is_critical("short")


def test_independent_tasks_share_project_finish():
    tasks = [_task("a", 2), _task("b", 6)]
    result = calculate_critical_path(tasks, [])

    assert result.project_duration == 6
    assert result.tasks["a"].late_finish == 6
    assert result.tasks["a"].slack == 4
    assert result.critical_path == ["b"]


def test_milestone_gets_nominal_duration():
    tasks = [_task("a", 3), _task("gate", 0, task_type="milestone")]
    result = calculate_critical_path(tasks, [_dep("a", "gate")])

    gate = result.tasks["gate"]
    assert gate.duration == 1
    assert gate.early_start == 3


def test_milestone_duration_ignores_planned_length():
    gate = _task("gate", 4, task_type="milestone")

    assert gate.is_milestone
    assert task_duration(gate) == 1
    assert not _task("a", 4).is_milestone
    assert task_duration(_task("a", 4)) == 4


def test_critical_path_is_ordered_by_early_start_not_input_order():
    tasks = [_task("c", 1), _task("b", 1), _task("a", 1)]
    deps = [_dep("a", "b"), _dep("b", "c")]

    result = calculate_critical_path(tasks, deps)

    assert list(result.tasks) == ["c", "b", "a"]
    assert result.topological_order == ["a", "b", "c"]
    assert result.critical_path == ["a", "b", "c"]


def test_predecessors_are_recorded_per_node():
    tasks = [_task("a"), _task("b"), _task("c")]
    deps = [_dep("a", "c"), _dep("b", "c")]

    result = calculate_critical_path(tasks, deps)

    assert result.get("c").predecessors == ["a", "b"]
    assert result.get("missing") is None


def test_dependency_type_accepts_plain_strings():
    tasks = [_task("a", 2), _task("b", 2)]
    dep = TaskDependency(id="d", predecessor_id="a", successor_id="b", dependency_type="SS", lag_days=1)

    result = calculate_critical_path(tasks, [dep])

    assert result.tasks["b"].early_start == 1


def test_cycle_is_reported_and_members_excluded(caplog):
    tasks = [_task("a", 1), _task("b", 1), _task("c", 2)]
    deps = [_dep("a", "b"), _dep("b", "a")]

    with caplog.at_level(logging.WARNING, logger="core.services.scheduling.engine"):
        result = calculate_critical_path(tasks, deps)

    assert set(result.tasks) == {"c"}
    assert result.has_cycle
    assert result.cycle.unresolved_ids == ("a", "b")
    assert result.cycle.cycle_path == ("a", "b", "a")
    assert result.project_duration == 2
    assert result.critical_path == ["c"]
    assert "Circular dependency detected" in caplog.text


def test_cycle_downstream_tasks_are_unresolved_too():
    tasks = [_task("root"), _task("x"), _task("y"), _task("tail")]
    deps = [_dep("root", "x"), _dep("x", "y"), _dep("y", "x"), _dep("y", "tail")]

    result = calculate_critical_path(tasks, deps)

    assert result.topological_order == ["root"]
    assert result.cycle.unresolved_ids == ("x", "y", "tail")
    assert result.cycle.cycle_path == ("x", "y", "x")
    assert result.tasks["root"].late_finish == result.project_duration == 1


def test_self_dependency_is_a_cycle():
    result = calculate_critical_path([_task("a")], [_dep("a", "a")])

    assert result.tasks == {}
    assert result.cycle.cycle_path == ("a", "a")


def test_strict_mode_raises_cycle_error():
    tasks = [_task("a"), _task("b")]
    deps = [_dep("a", "b"), _dep("b", "a")]

    with pytest.raises(CycleDetectedError) as exc_info:
        calculate_critical_path(tasks, deps, strict=True)

    err = exc_info.value
    assert isinstance(err, BusinessRuleError)
    assert err.code == "SCHEDULE_CYCLE"
    assert err.unresolved_ids == ["a", "b"]
    assert "a -> b -> a" in str(err)


def test_inputs_are_not_mutated():
    tasks = [_task("a", 3), _task("b", 2)]
    deps = [_dep("a", "b")]

    calculate_critical_path(tasks, deps)

    assert tasks[1].early_start is None
    assert tasks[1].slack is None
    assert not tasks[1].is_critical


def test_identical_inputs_give_identical_results():
    tasks = [_task("a", 3), _task("b", 2), _task("c", 4)]
    deps = [_dep("a", "b"), _dep("a", "c", lag=1)]

    first = calculate_critical_path(tasks, deps)
    second = calculate_critical_path(tasks, deps)

    assert first == second
