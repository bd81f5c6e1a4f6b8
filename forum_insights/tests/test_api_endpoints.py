"""
Unit tests for API endpoints.

Tests the FastAPI insights and health endpoints with the database replaced by
the in-memory repository.
"""

import pytest
from datetime import timedelta
from unittest.mock import AsyncMock

from fastapi.testclient import TestClient
from pytest_mock import MockerFixture

from forum_insights.api.dependencies import (
    get_clock,
    get_current_user_id,
    get_forum_repository,
    get_insights_service,
)
from forum_insights.api.main import app, run
from forum_insights.core.exceptions import DataAccessFailure
from forum_insights.tests.stubs.in_memory_repository import OTHER_ID, OWNER_ID


@pytest.fixture
def client(repository, fixed_clock):
    app.dependency_overrides[get_forum_repository] = lambda: repository
    app.dependency_overrides[get_clock] = lambda: fixed_clock
    yield TestClient(app)
    app.dependency_overrides.clear()


class TestInsightsEndpoint:
    """Test cases for GET /api/v1/insights."""

    def test_returns_snapshot_for_user(self, client, repository, fixed_now):
        topic = repository.add_topic(OWNER_ID, fixed_now - timedelta(days=2), title="Hello")
        repository.add_comment(topic, OTHER_ID, fixed_now)
        repository.add_like(topic, OTHER_ID, fixed_now)

        response = client.get("/api/v1/insights", headers={"X-User-Id": str(OWNER_ID)})

        assert response.status_code == 200
        body = response.json()
        assert body["totals"] == {
            "total_topics": 1,
            "total_comments": 1,
            "total_likes": 1,
            "avg_comments_per_topic": 1.0,
            "avg_likes_per_topic": 1.0,
        }
        assert body["topics"] == [
            {
                "id": topic.id,
                "title": "Hello",
                "comment_count": 1,
                "like_count": 1,
                "created_age_label": "2 days ago",
            }
        ]
        assert len(body["daily"]) == 14
        assert body["daily"][0] == {"date": "2026-10-06", "topic_count": 0, "like_count": 0}
        assert body["daily"][-1] == {"date": "2026-10-19", "topic_count": 0, "like_count": 1}
        assert body["daily"][-3]["topic_count"] == 1
        assert body["activity"][0] == {"label": "Total topics", "value": "1"}

    def test_empty_user_gets_zero_filled_snapshot(self, client):
        response = client.get("/api/v1/insights", headers={"X-User-Id": str(OTHER_ID)})

        assert response.status_code == 200
        body = response.json()
        assert body["topics"] == []
        assert body["totals"]["avg_comments_per_topic"] == 0.0
        assert [d["topic_count"] + d["like_count"] for d in body["daily"]] == [0] * 14

    def test_missing_identity_is_unauthorized(self, client):
        response = client.get("/api/v1/insights")
        assert response.status_code == 401

    def test_malformed_identity_is_unauthorized(self, client):
        response = client.get("/api/v1/insights", headers={"X-User-Id": "abc"})
        assert response.status_code == 401

    def test_unknown_user_is_not_found(self, client):
        response = client.get("/api/v1/insights", headers={"X-User-Id": "999"})
        assert response.status_code == 404

    def test_user_lookup_failure_is_service_unavailable(self, client, repository):
        repository.user_exists = AsyncMock(side_effect=DataAccessFailure("user_exists"))

        response = client.get("/api/v1/insights", headers={"X-User-Id": str(OWNER_ID)})

        assert response.status_code == 503

    def test_data_access_failure_is_service_unavailable(self, client):
        failing_service = AsyncMock()
        failing_service.get_insights_snapshot.side_effect = DataAccessFailure(
            "count_comments", Exception("connection refused")
        )
        app.dependency_overrides[get_current_user_id] = lambda: OWNER_ID
        app.dependency_overrides[get_insights_service] = lambda: failing_service

        response = client.get("/api/v1/insights")

        assert response.status_code == 503
        detail = response.json()["detail"]
        assert "Insights unavailable" in detail
        assert "count_comments" in detail
        failing_service.get_insights_snapshot.assert_awaited_once_with(OWNER_ID)


class TestHealthEndpoint:
    """Test cases for GET /health."""

    def test_healthy(self, client, mocker: MockerFixture):
        mocker.patch("forum_insights.api.main.check_db_connection", AsyncMock(return_value=True))

        response = client.get("/health")

        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "healthy"
        assert body["database"] == "ok"

    def test_degraded_when_database_unreachable(self, client, mocker: MockerFixture):
        mocker.patch("forum_insights.api.main.check_db_connection", AsyncMock(return_value=False))

        response = client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "degraded"


def test_run_serves_app_with_configured_host_and_port(mocker: MockerFixture):
    uvicorn_run = mocker.patch("forum_insights.api.main.uvicorn.run")
    mocker.patch("forum_insights.api.main.settings.API_HOST", "127.0.0.1")
    mocker.patch("forum_insights.api.main.settings.API_PORT", 9100)

    run()

    uvicorn_run.assert_called_once()
    args, kwargs = uvicorn_run.call_args
    assert args == ("forum_insights.api.main:app",)
    assert kwargs["host"] == "127.0.0.1"
    assert kwargs["port"] == 9100
