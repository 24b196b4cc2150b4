"""Tests for admin metrics, reset, health check and the file server counter."""

from fastapi import status
from sqlalchemy import func, select

from chirpy.config.settings import settings
from chirpy.features.admin.metrics import ApiMetrics
from chirpy.features.auth.models import RefreshToken
from chirpy.features.chirp.models import Chirp
from chirpy.features.user.models import User


class TestApiMetrics:
    def test_record_and_reset(self):
        metrics = ApiMetrics()
        metrics.record_hit()
        metrics.record_hit()
        assert metrics.fileserver_hits == 2
        metrics.reset()
        assert metrics.fileserver_hits == 0


class TestHealthz:
    async def test_healthz(self, client):
        response = await client.get(f"{settings.api_prefix}/healthz")
        assert response.status_code == status.HTTP_200_OK
        assert response.text == "OK"
        assert response.headers["content-type"].startswith("text/plain")


class TestFileServerMetrics:
    async def test_static_requests_are_counted(self, client, fresh_metrics):
        first = await client.get("/app/")
        await client.get("/app/")

        assert first.status_code == status.HTTP_200_OK
        assert "Welcome to Chirpy" in first.text
        assert fresh_metrics.fileserver_hits == 2

    async def test_api_requests_are_not_counted(self, client, fresh_metrics):
        await client.get(f"{settings.api_prefix}/healthz")
        assert fresh_metrics.fileserver_hits == 0

    async def test_metrics_page_shows_hits(self, client):
        for _ in range(3):
            await client.get("/app/")

        response = await client.get("/admin/metrics")

        assert response.status_code == status.HTTP_200_OK
        assert response.headers["content-type"].startswith("text/html")
        assert "Chirpy has been visited 3 times!" in response.text


class TestReset:
    async def test_reset_clears_hits_and_users(self, session, client, make_user, fresh_metrics):
        await make_user(email="gone@example.com", password="pw")
        login = await client.post(f"{settings.api_prefix}/login", json={"email": "gone@example.com", "password": "pw"})
        await client.post(
            f"{settings.api_prefix}/chirps",
            json={"body": "soon deleted"},
            headers={"Authorization": f"Bearer {login.json()['token']}"},
        )
        await client.get("/app/")

        response = await client.post("/admin/reset")

        assert response.status_code == status.HTTP_200_OK
        assert fresh_metrics.fileserver_hits == 0
        for model in (User, Chirp, RefreshToken):
            count = await session.scalar(select(func.count()).select_from(model))
            assert count == 0

    async def test_reset_forbidden_outside_development(self, client, make_user, monkeypatch, fresh_metrics):
        monkeypatch.setattr(settings, "environment", "production")
        await make_user()
        await client.get("/app/")

        response = await client.post("/admin/reset")

        assert response.status_code == status.HTTP_403_FORBIDDEN
        assert fresh_metrics.fileserver_hits == 1
