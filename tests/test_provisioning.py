"""Tests for default columns, restoring them, and committing drafts."""

from __future__ import annotations

import pytest

from colstore.entity.dto import ColumnDraft, ColumnState, ColumnType, StandardField
from colstore.errors import DraftCommittedError, InvalidColumnTypeChangeError
from colstore.service import project as project_service
from colstore.service import provisioner, schema_registry
from colstore.service.draft import DraftSchema
from colstore.service.ordering import Direction

EXPECTED = [
    (StandardField.NAME, ColumnType.TEXT),
    (StandardField.DESCRIPTION, ColumnType.TEXT),
    (StandardField.RESPONSIBLE, ColumnType.USER),
    (StandardField.STATUS, ColumnType.LIST),
    (StandardField.PRIORITY, ColumnType.LIST),
    (StandardField.START_DATE, ColumnType.DATE),
    (StandardField.END_DATE, ColumnType.DATE),
    (StandardField.PROGRESS, ColumnType.PERCENTAGE),
]


class TestNewProject:
    def test_eight_default_columns(self, project) -> None:
        columns = schema_registry.list_active(project.project_id)
        assert [c.order for c in columns] == list(range(1, 9))
        assert [(c.standard_field, c.type) for c in columns] == EXPECTED
        assert all(c.active and not c.hidden for c in columns)

    def test_list_defaults_carry_options(self, project) -> None:
        columns = {c.standard_field: c for c in schema_registry.list_active(project.project_id)}
        assert columns[StandardField.STATUS].options == provisioner.TASK_STATUSES
        assert columns[StandardField.PRIORITY].options == provisioner.TASK_PRIORITIES

    def test_pending_columns_follow_defaults(self, bare_project) -> None:
        pid = bare_project.project_id
        pending = [
            ColumnDraft(project_id=None, name="Budget", type=ColumnType.NUMBER),
            ColumnDraft(project_id=None, name="Vendor"),
        ]
        created = provisioner.on_project_created(pid, pending)
        assert len(created) == 10
        tail = schema_registry.list_active(pid)[8:]
        assert [(c.name, c.order) for c in tail] == [("Budget", 9), ("Vendor", 10)]


class TestRestore:
    def test_restores_everything_on_an_empty_project(self, bare_project) -> None:
        result = provisioner.restore_missing_defaults(bare_project.project_id)
        assert len(result.created) == 8
        assert not result.nothing_to_restore

    def test_idempotent(self, bare_project) -> None:
        pid = bare_project.project_id
        provisioner.restore_missing_defaults(pid)
        before = schema_registry.list_all(pid)
        second = provisioner.restore_missing_defaults(pid)
        assert second.nothing_to_restore
        assert second.created == []
        after = schema_registry.list_all(pid)
        assert len(after) == len(before)
        fields = [c.standard_field for c in after if c.standard_field]
        assert len(fields) == len(set(fields))

    def test_nothing_missing_on_a_provisioned_project(self, project) -> None:
        assert provisioner.restore_missing_defaults(project.project_id).nothing_to_restore

    def test_only_missing_ones_appended(self, bare_project) -> None:
        pid = bare_project.project_id
        schema_registry.create(ColumnDraft(project_id=pid, name="Task", standard_field=StandardField.NAME))
        schema_registry.create(ColumnDraft(project_id=pid, name="Budget", type=ColumnType.NUMBER, order=20))
        result = provisioner.restore_missing_defaults(pid)
        assert [c.standard_field for c in result.created] == [f for f, _ in EXPECTED[1:]]
        assert [c.order for c in result.created] == list(range(21, 28))


class TestDrafts:
    def test_draft_order_survives_commit(self) -> None:
        drafts = DraftSchema()
        budget = drafts.add("Budget", ColumnType.NUMBER)
        vendor = drafts.add("Vendor")
        drafts.reorder(vendor.temp_id, budget.temp_id)
        assert [c.name for c in drafts.columns()] == ["Vendor", "Budget"]

        project = project_service.create_project("Office move", drafts=drafts)

        columns = schema_registry.list_active(project.project_id)
        assert len(columns) == 10
        assert [(c.name, c.order) for c in columns[8:]] == [("Vendor", 9), ("Budget", 10)]
        assert all(c.state is ColumnState.COMMITTED for c in columns)

    def test_draft_type_can_change(self) -> None:
        drafts = DraftSchema()
        column = drafts.add("Due", ColumnType.TEXT)
        drafts.update(column.temp_id, type=ColumnType.DATE, name="Due on")
        assert drafts.columns()[0].type is ColumnType.DATE
        assert drafts.columns()[0].state is ColumnState.DRAFT

    def test_move_and_remove(self) -> None:
        drafts = DraftSchema()
        a, b, c = (drafts.add(n) for n in "abc")
        drafts.move(c.temp_id, Direction.UP)
        assert [d.name for d in drafts.columns()] == ["a", "c", "b"]
        assert drafts.remove(a.temp_id) is True
        assert drafts.remove(a.temp_id) is False
        assert [d.name for d in drafts.columns()] == ["c", "b"]

    def test_committed_drafts_are_frozen(self) -> None:
        drafts = DraftSchema()
        column = drafts.add("Budget", ColumnType.NUMBER)
        project = project_service.create_project("Audit", drafts=drafts)
        assert column.state is ColumnState.COMMITTED
        with pytest.raises(DraftCommittedError):
            drafts.add("Late")
        with pytest.raises(DraftCommittedError):
            drafts.update(column.temp_id, type=ColumnType.TEXT)

        saved = schema_registry.list_active(project.project_id)[-1]
        with pytest.raises(InvalidColumnTypeChangeError):
            schema_registry.change_type(saved.column_id, ColumnType.TEXT)
