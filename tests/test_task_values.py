"""Tests for storing and filtering task values."""

from __future__ import annotations

import pytest

from colstore.entity.dto import ColumnDraft, ColumnType, StandardField
from colstore.errors import InvalidValueError, ProjectNotFoundError, SchemaError
from colstore.repository import task as task_repo
from colstore.service import schema_registry
from colstore.service import task as task_service
from colstore.service.filter_engine import RangeFilter, SelectionFilter, TextFilter
from colstore.service.values import NumberValue, PercentageValue, TextValue


@pytest.fixture
def budget(project):
    return schema_registry.create(ColumnDraft(project_id=project.project_id, name="Budget", type=ColumnType.NUMBER))


def _standard(project, field):
    return next(c for c in schema_registry.list_active(project.project_id) if c.standard_field == field)


class TestValues:
    def test_set_and_get(self, project, budget) -> None:
        task = task_service.create_task(project.project_id, "Buy chairs")
        assert task_service.set_value(task.task_id, budget.column_id, "1200") == NumberValue(1200)
        assert task_service.get_value(task.task_id, budget.column_id) == NumberValue(1200)
        assert task_repo.get_task_value(task.task_id, budget.column_id) == 1200

    def test_absent_is_not_empty(self, project) -> None:
        task = task_service.create_task(project.project_id, "Plan")
        notes = _standard(project, StandardField.DESCRIPTION)
        assert task_service.get_value(task.task_id, notes.column_id) is None
        task_service.set_value(task.task_id, notes.column_id, "")
        assert task_service.get_value(task.task_id, notes.column_id) == TextValue("")
        assert notes.column_id in task_service.get_task(task.task_id).custom_values

    def test_clear(self, project, budget) -> None:
        task = task_service.create_task(project.project_id, "Plan")
        task_service.set_value(task.task_id, budget.column_id, 5)
        assert task_service.clear_value(task.task_id, budget.column_id) is True
        assert task_service.clear_value(task.task_id, budget.column_id) is False
        assert budget.column_id not in task_service.get_task(task.task_id).custom_values

    def test_invalid_value(self, project, budget) -> None:
        task = task_service.create_task(project.project_id, "Plan")
        with pytest.raises(InvalidValueError):
            task_service.set_value(task.task_id, budget.column_id, "a lot")

    def test_deleted_column_keeps_values_but_hides_them(self, project, budget) -> None:
        task = task_service.create_task(project.project_id, "Plan")
        task_service.set_value(task.task_id, budget.column_id, 10)
        schema_registry.soft_delete(budget.column_id)
        assert task_repo.get_task_value(task.task_id, budget.column_id) == 10
        assert task_service.get_value(task.task_id, budget.column_id) is None
        assert budget.column_id not in task_service.get_task(task.task_id).custom_values
        assert budget.column_id not in task_service.list_tasks(project.project_id)[0].custom_values
        with pytest.raises(SchemaError):
            task_service.set_value(task.task_id, budget.column_id, 11)

    def test_task_needs_an_existing_project(self) -> None:
        with pytest.raises(ProjectNotFoundError):
            task_service.create_task("no-such-project", "Orphan")

    def test_column_from_another_project(self, project, bare_project, budget) -> None:
        task = task_service.create_task(bare_project.project_id, "Elsewhere")
        with pytest.raises(SchemaError):
            task_service.set_value(task.task_id, budget.column_id, 1)

    def test_unknown_task_or_column(self, project, budget) -> None:
        assert task_service.set_value("missing", budget.column_id, 1) is None
        task = task_service.create_task(project.project_id, "Plan")
        assert task_service.set_value(task.task_id, "missing", 1) is None

    def test_typed_values(self, project, budget) -> None:
        progress = _standard(project, StandardField.PROGRESS)
        task = task_service.create_task(project.project_id, "Plan")
        task_service.set_value(task.task_id, progress.column_id, 250)
        typed = task_service.typed_values(task_service.get_task(task.task_id), schema_registry.list_active(project.project_id))
        assert typed == {progress.column_id: PercentageValue(100)}


class TestFilterTasks:
    def test_filters_by_column_types(self, project, budget) -> None:
        pid = project.project_id
        status = _standard(project, StandardField.STATUS)
        name = _standard(project, StandardField.NAME)
        chairs = task_service.create_task(pid, "Chairs")
        desks = task_service.create_task(pid, "Desks")
        lamps = task_service.create_task(pid, "Lamps")
        task_service.set_value(chairs.task_id, budget.column_id, 800)
        task_service.set_value(desks.task_id, budget.column_id, 2500)
        task_service.set_value(chairs.task_id, status.column_id, "pending")
        task_service.set_value(desks.task_id, status.column_id, "blocked")
        task_service.set_value(lamps.task_id, name.column_id, "Desk lamps")

        def names(filters):
            return [t.name for t in task_service.filter_tasks(pid, filters)]

        assert names({}) == ["Chairs", "Desks", "Lamps"]
        assert names({budget.column_id: RangeFilter(max=1000)}) == ["Chairs"]
        assert names({status.column_id: SelectionFilter(["pending", "blocked"])}) == ["Chairs", "Desks"]
        assert names({name.column_id: TextFilter("LAMP")}) == ["Lamps"]
        assert names({budget.column_id: RangeFilter(min=100), status.column_id: SelectionFilter(["blocked"])}) == ["Desks"]
