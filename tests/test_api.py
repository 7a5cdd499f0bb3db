"""End-to-end tests for the HTTP task routes."""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from daily_schedule.main import app, task_repo


@pytest.fixture(autouse=True)
def _clear_repo():
    """Reset the in-memory schedule before each test."""
    task_repo.clear()
    yield
    task_repo.clear()


@pytest.fixture()
def client():
    return TestClient(app)


def _payload(description: str, start: str, end: str, priority: str = "High") -> dict:
    return {
        "description": description,
        "start_time": start,
        "end_time": end,
        "priority": priority,
    }


@pytest.fixture()
def seeded(client):
    client.post("/tasks", json=_payload("Morning Exercise", "07:00", "08:00"))
    client.post("/tasks", json=_payload("Team Meeting", "09:00", "10:00", "Medium"))
    return client


# ---------------------------------------------------------------------------
# Create
# ---------------------------------------------------------------------------


def test_create_task(client):
    resp = client.post("/tasks", json=_payload("Morning Exercise", "07:00", "08:00"))
    assert resp.status_code == 201
    assert resp.json() == {
        "description": "Morning Exercise",
        "start_time": "07:00",
        "end_time": "08:00",
        "priority": "High",
        "completed": False,
    }
    assert len(task_repo) == 1


def test_create_invalid_time_returns_422(client):
    resp = client.post("/tasks", json=_payload("Broken", "25:99", "26:00"))
    assert resp.status_code == 422
    assert resp.json()["detail"] == "Error: Invalid time format. Please use HH:MM format."
    assert len(task_repo) == 0


def test_create_backwards_range_returns_422(client):
    resp = client.post("/tasks", json=_payload("Backwards", "10:00", "09:00"))
    assert resp.status_code == 422


def test_create_conflict_returns_409(seeded):
    resp = seeded.post("/tasks", json=_payload("Training Session", "09:30", "10:30"))
    assert resp.status_code == 409
    assert len(task_repo) == 2


def test_create_duplicate_returns_409(seeded):
    resp = seeded.post("/tasks", json=_payload("Team Meeting", "15:00", "16:00"))
    assert resp.status_code == 409
    assert "already exists" in resp.json()["detail"]


# ---------------------------------------------------------------------------
# Read
# ---------------------------------------------------------------------------


def test_list_tasks_sorted(client):
    client.post("/tasks", json=_payload("Lunch", "12:00", "13:00", "Low"))
    client.post("/tasks", json=_payload("Breakfast", "07:00", "07:30", "Low"))

    resp = client.get("/tasks")

    assert resp.status_code == 200
    assert [t["description"] for t in resp.json()] == ["Breakfast", "Lunch"]


def test_list_tasks_by_priority(seeded):
    resp = seeded.get("/tasks", params={"priority": "high"})
    assert [t["description"] for t in resp.json()] == ["Morning Exercise"]


def test_get_task_and_404(seeded):
    assert seeded.get("/tasks/Team Meeting").json()["priority"] == "Medium"
    assert seeded.get("/tasks/Nap").status_code == 404


# ---------------------------------------------------------------------------
# Update / complete / delete
# ---------------------------------------------------------------------------


def test_edit_task(seeded):
    resp = seeded.put(
        "/tasks/Morning Exercise",
        json=_payload("Morning Walk", "07:00", "08:00", "Low"),
    )
    assert resp.status_code == 200
    assert resp.json()["description"] == "Morning Walk"
    assert seeded.get("/tasks/Morning Exercise").status_code == 404


def test_edit_errors(seeded):
    assert (
        seeded.put("/tasks/Nap", json=_payload("Nap", "13:00", "14:00")).status_code
        == 404
    )
    assert (
        seeded.put(
            "/tasks/Morning Exercise", json=_payload("Morning Walk", "07:00", "xx")
        ).status_code
        == 422
    )
    assert (
        seeded.put(
            "/tasks/Morning Exercise", json=_payload("Morning Exercise", "09:30", "10:30")
        ).status_code
        == 409
    )
    assert seeded.get("/tasks/Morning Exercise").json()["start_time"] == "07:00"


def test_complete_task(seeded):
    resp = seeded.post("/tasks/Team Meeting/complete")
    assert resp.status_code == 200
    assert resp.json()["completed"] is True
    assert seeded.post("/tasks/Nap/complete").status_code == 404


def test_delete_task(seeded):
    resp = seeded.delete("/tasks/Morning Exercise")
    assert resp.status_code == 200
    assert resp.json() == {"status": "removed"}
    assert len(task_repo) == 1
    assert seeded.delete("/tasks/Morning Exercise").status_code == 404
