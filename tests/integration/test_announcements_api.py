# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Integration tests for announcement and suggestion endpoints."""

from datetime import datetime, timedelta


def _draft(client, title="Pool closed"):
    response = client.post(
        "/api/v1/announcements", json={"title": title, "content": "Maintenance"}
    )
    assert response.status_code == 201
    return response.json()


class TestAnnouncements:
    def test_staff_cannot_create(self, login, fitness_trainer):
        client = login(fitness_trainer)
        response = client.post(
            "/api/v1/announcements", json={"title": "x", "content": "y"}
        )
        assert response.status_code == 403
        assert response.json()["detail"] == "Permission denied: announcements.create"

    def test_drafts_are_hidden_until_published(
        self, login, admin_staff, fitness_trainer
    ):
        announcement = _draft(login(admin_staff))

        client = login(fitness_trainer)
        assert client.get("/api/v1/announcements").json() == []
        assert client.get(f"/api/v1/announcements/{announcement['id']}").status_code == 404

        client = login(admin_staff)
        response = client.post(
            f"/api/v1/announcements/{announcement['id']}/publish",
            json={"is_published": True},
        )
        assert response.status_code == 200

        client = login(fitness_trainer)
        titles = [a["title"] for a in client.get("/api/v1/announcements").json()]
        assert titles == ["Pool closed"]

    def test_expired_announcement_is_hidden_from_readers(
        self, login, admin_staff, fitness_trainer
    ):
        now = datetime.utcnow()
        response = login(admin_staff).post(
            "/api/v1/announcements",
            json={
                "title": "Summer schedule",
                "content": "Pool hours",
                "is_published": True,
                "start_date": (now - timedelta(days=30)).isoformat(),
                "end_date": (now - timedelta(days=1)).isoformat(),
            },
        )
        assert response.status_code == 201
        url = f"/api/v1/announcements/{response.json()['id']}"

        assert login(fitness_trainer).get(url).status_code == 404
        assert login(fitness_trainer).post(f"{url}/read").status_code == 404
        assert login(admin_staff).get(url).status_code == 200

    def test_editors_can_include_drafts(self, login, admin_staff, fitness_trainer):
        _draft(login(admin_staff))
        admin_view = login(admin_staff).get(
            "/api/v1/announcements", params={"include_unpublished": True}
        )
        trainer_view = login(fitness_trainer).get(
            "/api/v1/announcements", params={"include_unpublished": True}
        )
        assert len(admin_view.json()) == 1
        assert trainer_view.json() == []

    def test_mark_read(self, login, admin_staff, fitness_trainer):
        client = login(admin_staff)
        announcement = _draft(client)
        client.post(
            f"/api/v1/announcements/{announcement['id']}/publish",
            json={"is_published": True},
        )

        client = login(fitness_trainer)
        response = client.post(f"/api/v1/announcements/{announcement['id']}/read")
        assert response.status_code == 200
        assert response.json()["read_by"] == [str(fitness_trainer.id)]


class TestSuggestions:
    def test_anonymous_suggestion_hides_author(self, login, fitness_trainer, admin_staff):
        client = login(fitness_trainer)
        response = client.post(
            "/api/v1/suggestions",
            json={"title": "Longer hours", "content": "Open at 5", "is_anonymous": True},
        )
        assert response.status_code == 201
        suggestion = response.json()
        assert suggestion["created_by_id"] is None

        # Still listed for the author
        titles = [s["title"] for s in client.get("/api/v1/suggestions").json()]
        assert titles == ["Longer hours"]

        admin_view = login(admin_staff).get("/api/v1/suggestions").json()
        assert admin_view[0]["created_by_id"] is None

    def test_others_cannot_see_suggestion(self, login, fitness_trainer, tennis_coach):
        suggestion = login(fitness_trainer).post(
            "/api/v1/suggestions", json={"title": "Mats", "content": "More"}
        ).json()
        client = login(tennis_coach)
        assert client.get("/api/v1/suggestions").json() == []
        assert client.get(f"/api/v1/suggestions/{suggestion['id']}").status_code == 404

    def test_only_management_responds(self, login, fitness_trainer, admin_staff):
        client = login(fitness_trainer)
        suggestion = client.post(
            "/api/v1/suggestions", json={"title": "Mats", "content": "More"}
        ).json()
        response = client.post(
            f"/api/v1/suggestions/{suggestion['id']}/respond", json={"reply": "ok"}
        )
        assert response.status_code == 403

        response = login(admin_staff).post(
            f"/api/v1/suggestions/{suggestion['id']}/respond",
            json={"reply": "Ordered", "status": "answered"},
        )
        assert response.status_code == 200
        assert response.json()["status"] == "answered"
        assert response.json()["reply"] == "Ordered"
