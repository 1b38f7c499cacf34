# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Integration tests for task endpoints."""

import uuid


def _create_task(client, **kwargs):
    payload = {"title": "Wipe down machines"}
    payload.update(kwargs)
    response = client.post("/api/v1/tasks", json=payload)
    assert response.status_code == 201
    return response.json()


class TestTaskCreate:
    def test_requires_authentication(self, client):
        response = client.post("/api/v1/tasks", json={"title": "x"})
        assert response.status_code == 401

    def test_create_for_self(self, login, fitness_trainer):
        client = login(fitness_trainer)
        task = _create_task(client)
        assert task["assigned_to_id"] == str(fitness_trainer.id)
        assert task["department"] == "fitness"
        assert task["status"] == "pending"

    def test_assigning_others_requires_tasks_assign(
        self, login, fitness_trainer, fitness_lead
    ):
        client = login(fitness_trainer)
        response = client.post(
            "/api/v1/tasks",
            json={"title": "Cover my shift", "assigned_to_id": str(fitness_lead.id)},
        )
        assert response.status_code == 403
        assert response.json()["detail"] == "Permission denied: tasks.assign"

    def test_admin_assigns_to_staff(self, login, admin_staff, fitness_trainer):
        client = login(admin_staff)
        task = _create_task(client, assigned_to_id=str(fitness_trainer.id))
        assert task["assigned_to_id"] == str(fitness_trainer.id)

    def test_unknown_assignee(self, login, admin_staff):
        client = login(admin_staff)
        response = client.post(
            "/api/v1/tasks", json={"title": "Ghost", "assigned_to_id": str(uuid.uuid4())}
        )
        assert response.status_code == 400


class TestTaskVisibility:
    def test_department_scope(self, login, fitness_trainer, fitness_lead, tennis_coach):
        _create_task(login(fitness_lead), title="Fitness task")
        _create_task(login(tennis_coach), title="Tennis task")

        client = login(fitness_trainer)
        titles = [t["title"] for t in client.get("/api/v1/tasks").json()]
        assert titles == ["Fitness task"]

    def test_out_of_scope_task_is_not_found(self, login, fitness_trainer, tennis_coach):
        task = _create_task(login(tennis_coach), title="Tennis task")
        client = login(fitness_trainer)
        assert client.get(f"/api/v1/tasks/{task['id']}").status_code == 404
        response = client.put(f"/api/v1/tasks/{task['id']}", json={"status": "completed"})
        assert response.status_code == 404

    def test_missing_task(self, login, fitness_trainer):
        client = login(fitness_trainer)
        assert client.get(f"/api/v1/tasks/{uuid.uuid4()}").status_code == 404

    def test_status_filter(self, login, fitness_trainer):
        client = login(fitness_trainer)
        task = _create_task(client, title="Done soon")
        _create_task(client, title="Later")
        client.put(f"/api/v1/tasks/{task['id']}", json={"status": "completed"})

        data = client.get("/api/v1/tasks", params={"status": "completed"}).json()
        assert [t["title"] for t in data] == ["Done soon"]
        assert data[0]["completed_at"] is not None


class TestTaskActions:
    def test_comment_on_task(self, login, fitness_trainer, fitness_lead):
        task = _create_task(login(fitness_lead), title="Check inventory")
        client = login(fitness_trainer)
        response = client.post(
            f"/api/v1/tasks/{task['id']}/comments", json={"content": "On it"}
        )
        assert response.status_code == 201
        detail = client.get(f"/api/v1/tasks/{task['id']}").json()
        assert [c["content"] for c in detail["comments"]] == ["On it"]

    def test_reassign_requires_permission(self, login, fitness_trainer, fitness_lead):
        client = login(fitness_trainer)
        task = _create_task(client)
        response = client.post(
            f"/api/v1/tasks/{task['id']}/assign",
            json={"assigned_to_id": str(fitness_lead.id)},
        )
        assert response.status_code == 403

    def test_delete_is_admin_only(self, login, fitness_lead, admin_staff):
        task = _create_task(login(fitness_lead))
        response = login(fitness_lead).delete(f"/api/v1/tasks/{task['id']}")
        assert response.status_code == 403

        client = login(admin_staff)
        assert client.delete(f"/api/v1/tasks/{task['id']}").status_code == 204
        assert client.get(f"/api/v1/tasks/{task['id']}").status_code == 404
