# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Integration tests for the SPA catch-all route."""

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from src.main import mount_frontend


@pytest.fixture
def frontend_client(tmp_path):
    static = tmp_path / "static"
    (static / "assets").mkdir(parents=True)
    (static / "index.html").write_text("<html>spa</html>")
    (static / "robots.txt").write_text("User-agent: *")
    (tmp_path / "spodot.db").write_text("session tokens")

    app = FastAPI()
    mount_frontend(app, static)
    return TestClient(app)


class TestServeSpa:
    def test_serves_existing_file(self, frontend_client):
        response = frontend_client.get("/robots.txt")
        assert response.status_code == 200
        assert response.text == "User-agent: *"

    def test_client_route_falls_back_to_index(self, frontend_client):
        response = frontend_client.get("/dashboard/my-tasks")
        assert response.status_code == 200
        assert response.text == "<html>spa</html>"

    def test_encoded_parent_segment_does_not_escape(self, frontend_client):
        response = frontend_client.get("/..%2Fspodot.db")
        assert response.status_code == 200
        assert "session tokens" not in response.text
        assert response.text == "<html>spa</html>"
