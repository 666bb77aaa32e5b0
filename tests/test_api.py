"""Tests for the HTTP API."""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from colapi.main import create_app


@pytest.fixture
def client(database_url) -> TestClient:
    return TestClient(create_app(database_url))


@pytest.fixture
def project_id(client) -> str:
    resp = client.post("/api/project", json={
        "name": "Office move",
        "columns": [
            {"name": "Vendor"},
            {"name": "Budget", "type": "number"},
        ],
    })
    assert resp.status_code == 200
    return resp.json()["project_id"]


def _columns(client, project_id):
    return client.get("/api/column/list", params={"project_id": project_id}).json()


def _standard(client, project_id, field):
    return next(c for c in _columns(client, project_id) if c["standard_field"] == field)


def test_create_project_provisions_columns(client, project_id) -> None:
    columns = _columns(client, project_id)
    assert [c["order"] for c in columns] == list(range(1, 11))
    assert [c["name"] for c in columns[8:]] == ["Vendor", "Budget"]
    assert columns[9]["type"] == "number"


def test_create_and_update_column(client, project_id) -> None:
    resp = client.post("/api/column", json={"project_id": project_id, "name": "Size", "type": "list", "options": ["S", "M"]})
    assert resp.status_code == 200
    column = resp.json()
    assert column["order"] == 11

    resp = client.post("/api/column/update", json={"column_id": column["column_id"], "name": "T-shirt size"})
    assert resp.json()["name"] == "T-shirt size"

    resp = client.post("/api/column/update", json={"column_id": column["column_id"], "type": "text"})
    assert resp.status_code == 409

    resp = client.post("/api/column/update", json={"column_id": column["column_id"]})
    assert resp.status_code == 400


def test_duplicate_standard_column_conflicts(client, project_id) -> None:
    resp = client.post("/api/column", json={"project_id": project_id, "name": "Again", "standard_field": "status"})
    assert resp.status_code == 409


def test_delete_and_hide(client, project_id) -> None:
    priority = _standard(client, project_id, "priority")
    resp = client.post("/api/column/delete", json={"column_id": priority["column_id"]})
    assert resp.status_code == 409

    resp = client.post("/api/column/toggle-visibility", json={"column_id": priority["column_id"]})
    assert resp.status_code == 200
    assert resp.json()["hidden"] is True
    assert resp.json()["order"] == priority["order"]

    vendor = _columns(client, project_id)[8]
    assert client.post("/api/column/delete", json={"column_id": vendor["column_id"]}).json()["active"] is False
    assert vendor["column_id"] not in [c["column_id"] for c in _columns(client, project_id)]

    missing = client.post("/api/column/delete", json={"column_id": "nope"})
    assert missing.status_code == 404


def test_reorder_and_move(client, project_id) -> None:
    budget = _columns(client, project_id)[9]
    resp = client.post("/api/column/reorder", json={
        "project_id": project_id, "moved": budget["column_id"], "target": "standard:name",
    })
    assert resp.status_code == 200
    assert resp.json()["failed"] == []
    assert _columns(client, project_id)[0]["column_id"] == budget["column_id"]

    resp = client.post("/api/column/move", json={"project_id": project_id, "column": budget["column_id"], "direction": "down"})
    assert resp.status_code == 200
    assert _columns(client, project_id)[1]["column_id"] == budget["column_id"]

    resp = client.post("/api/column/reorder", json={"project_id": project_id, "moved": "standard:bogus", "target": "x"})
    assert resp.status_code == 400


def test_restore_defaults(client, project_id) -> None:
    resp = client.post("/api/column/restore-defaults", json={"project_id": project_id})
    assert resp.json() == {"nothing_to_restore": True, "created": []}


def test_task_values_and_filter(client, project_id) -> None:
    budget = _columns(client, project_id)[9]
    chairs = client.post("/api/task", json={"project_id": project_id, "name": "Chairs"}).json()
    client.post("/api/task", json={"project_id": project_id, "name": "Desks"})

    resp = client.post("/api/task/value", json={"task_id": chairs["task_id"], "column_id": budget["column_id"], "value": "450"})
    assert resp.json()["value"] == 450

    bad = client.post("/api/task/value", json={"task_id": chairs["task_id"], "column_id": budget["column_id"], "value": "cheap"})
    assert bad.status_code == 400

    resp = client.post("/api/task/filter", json={"project_id": project_id, "filters": {budget["column_id"]: {"min": 100}}})
    body = resp.json()
    assert body["active_filters"] == 1
    assert [t["name"] for t in body["tasks"]] == ["Chairs"]

    resp = client.post("/api/task/filter", json={"project_id": project_id})
    assert len(resp.json()["tasks"]) == 2


def test_phases(client, project_id) -> None:
    first = client.post("/api/phase", json={"project_id": project_id, "name": "Plan"}).json()
    second = client.post("/api/phase", json={"project_id": project_id, "name": "Execute"}).json()
    client.post("/api/phase/move", json={"project_id": project_id, "phase_id": second["phase_id"], "direction": "up"})
    phases = client.get("/api/phase/list", params={"project_id": project_id}).json()
    assert [p["name"] for p in phases] == ["Execute", "Plan"]
    assert first["order"] == 1


def test_non_finite_numbers_are_rejected(client, project_id) -> None:
    progress = next(c for c in _columns(client, project_id) if c["standard_field"] == "progress")
    task = client.post("/api/task", json={"project_id": project_id, "name": "Chairs"}).json()
    for raw in ("inf", "nan"):
        resp = client.post("/api/task/value", json={"task_id": task["task_id"], "column_id": progress["column_id"], "value": raw})
        assert resp.status_code == 400


def test_unknown_project(client) -> None:
    assert client.post("/api/task", json={"project_id": "nope", "name": "Orphan"}).status_code == 404
    assert client.post("/api/phase", json={"project_id": "nope", "name": "Plan"}).status_code == 404
    assert client.post("/api/column", json={"project_id": "nope", "name": "Vendor"}).status_code == 404
    assert client.post("/api/column/restore-defaults", json={"project_id": "nope"}).status_code == 404


def test_deleted_column_values_are_hidden(client, project_id) -> None:
    budget = _columns(client, project_id)[9]
    task = client.post("/api/task", json={"project_id": project_id, "name": "Chairs"}).json()
    client.post("/api/task/value", json={"task_id": task["task_id"], "column_id": budget["column_id"], "value": 10})
    client.post("/api/column/delete", json={"column_id": budget["column_id"]})
    detail = client.get("/api/task/detail", params={"task_id": task["task_id"]}).json()
    assert budget["column_id"] not in detail["custom_values"]


def test_delete_phase(client, project_id) -> None:
    plan = client.post("/api/phase", json={"project_id": project_id, "name": "Plan"}).json()
    client.post("/api/phase", json={"project_id": project_id, "name": "Execute"})
    resp = client.post("/api/phase/delete", json={"phase_id": plan["phase_id"]})
    assert resp.status_code == 200
    phases = client.get("/api/phase/list", params={"project_id": project_id}).json()
    assert [p["name"] for p in phases] == ["Execute"]
    assert client.post("/api/phase/delete", json={"phase_id": plan["phase_id"]}).status_code == 404


def test_delete_project(client, project_id) -> None:
    client.post("/api/task", json={"project_id": project_id, "name": "Chairs"})
    resp = client.post("/api/project/delete", json={"project_id": project_id})
    assert resp.status_code == 200
    assert resp.json()["project_id"] == project_id
    assert client.get("/api/project/detail", params={"project_id": project_id}).status_code == 404
    assert _columns(client, project_id) == []
    filtered = client.post("/api/task/filter", json={"project_id": project_id}).json()
    assert filtered["tasks"] == []
    assert client.post("/api/project/delete", json={"project_id": project_id}).status_code == 404
