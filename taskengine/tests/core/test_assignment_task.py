"""Tests for the scheduled assignment task, executed eagerly."""

import pytest

from taskengine.core import celery_app as celery_module
from taskengine.core.tasks import assignment
from taskengine.domain.maintenance.services import DailyAssignmentOptimizer
from taskengine.tests.factories import EngineerFactory, TaskFactory


@pytest.fixture
def optimizer_factory(
    monkeypatch,
    task_repository,
    engineer_repository,
    calendar_repository,
    notification_gateway,
):
    def build() -> DailyAssignmentOptimizer:
        return DailyAssignmentOptimizer(
            task_repository,
            engineer_repository,
            calendar_repository,
            notification_gateway,
        )

    monkeypatch.setattr(assignment, "get_optimizer", build)
    return build


def test_task_returns_json_summary(
    optimizer_factory, task_repository, engineer_repository, notification_gateway
) -> None:
    engineer_repository.engineers = [EngineerFactory.create(name="Sam Patel")]
    task_repository.add(TaskFactory.create(asset_type="Air Handling Unit"))

    result = assignment.run_daily_assignment.apply(
        kwargs={"reference_date": "2024-03-04"}
    ).get()

    assert result["run_date"] == "2024-03-04"
    assert result["candidate_tasks"] == 1
    assert result["outcome"] in {"assigned", "all_skipped"}
    assert notification_gateway.closed


def test_task_closes_gateway_when_idle(optimizer_factory, notification_gateway) -> None:
    result = assignment.run_daily_assignment.apply(
        kwargs={"reference_date": "2024-03-04"}
    ).get()

    assert result["outcome"] == "idle"
    assert result["assigned_count"] == 0
    assert notification_gateway.closed


def test_daily_schedule_is_registered() -> None:
    schedule = celery_module.celery_app.conf.beat_schedule["daily-task-assignment"]

    assert schedule["task"] == assignment.run_daily_assignment.name


def test_task_reports_missing_configuration(unconfigured_settings) -> None:
    result = assignment.run_daily_assignment.apply(
        kwargs={"reference_date": "2024-03-04"}
    ).get()

    assert result["outcome"] == "aborted"
    assert result["errors"]
