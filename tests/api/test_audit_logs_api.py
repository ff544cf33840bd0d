"""API tests for the audit log endpoints.

Tokens are issued by the real token service; the audit store is replaced
with an AsyncMock through dependency overrides.
"""

from datetime import UTC, datetime
from unittest.mock import AsyncMock

import pytest
from fastapi.testclient import TestClient

from firedesk.core.container import get_audit, get_token_service
from firedesk.core.enums import ErrorCode
from firedesk.core.result import Failure, Success
from firedesk.domain.enums import UserRole
from firedesk.domain.errors import AuditError
from firedesk.domain.value_objects import Actor
from firedesk.main import app

ENTRY = {
    "id": "log-1",
    "user_id": "admin-1",
    "user_name": "Ada Admin",
    "user_email": "ada@example.com",
    "user_role": "ADMIN",
    "action_id": "a-1",
    "action_name": "EKLE",
    "table_id": "t-1",
    "table_name": "Devices",
    "ip": "10.0.0.1",
    "date": "2026-03-14T09:30:00+00:00",
}


def auth_headers(role: UserRole | None, user_id: str = "u1") -> dict[str, str]:
    token = get_token_service().issue_token(
        Actor(role=role, user_id=user_id, institution_id="ins-1")
    )
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def audit_store():
    store = AsyncMock()
    store.query.return_value = Success(value=([ENTRY], 1))
    store.list_filter_options.return_value = Success(
        value={
            "actions": [{"id": "a-1", "name": "EKLE"}],
            "tables": [{"id": "t-1", "name": "Devices"}],
        }
    )
    store.activity_by_month.return_value = Success(
        value=[
            {"month": m, "customer": 0, "provider": 0, "admin": 1 if m == 3 else 0}
            for m in range(1, 13)
        ]
    )
    return store


@pytest.fixture
def client(audit_store):
    app.dependency_overrides[get_audit] = lambda: audit_store
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.mark.api
class TestListAuditLogs:
    def test_requires_token(self, client):
        response = client.get("/api/v1/audit-logs")
        assert response.status_code == 401

    def test_rejects_garbage_token(self, client):
        response = client.get(
            "/api/v1/audit-logs", headers={"Authorization": "Bearer not-a-jwt"}
        )
        assert response.status_code == 401

    @pytest.mark.parametrize(
        "role",
        [UserRole.MUSTERI_SEVIYE1, UserRole.HIZMETSAGLAYICI_SEVIYE2, UserRole.GUEST, None],
    )
    def test_non_admin_forbidden(self, client, audit_store, role):
        response = client.get("/api/v1/audit-logs", headers=auth_headers(role))

        assert response.status_code == 403
        assert response.json()["detail"] == "Permission denied: Logs:view"
        audit_store.query.assert_not_awaited()

    def test_admin_gets_page(self, client, audit_store):
        response = client.get(
            "/api/v1/audit-logs",
            params={"page": 2, "page_size": 5, "search": "dev", "sort_by": "user"},
            headers=auth_headers(UserRole.ADMIN, "admin-1"),
        )

        assert response.status_code == 200
        body = response.json()
        assert body["total"] == 1
        assert body["page"] == 2
        assert body["page_size"] == 5
        assert body["items"][0]["table_name"] == "Devices"

        kwargs = audit_store.query.await_args.kwargs
        assert kwargs["limit"] == 5
        assert kwargs["offset"] == 5
        assert kwargs["search"] == "dev"
        assert kwargs["sort_by"] == "user"
        assert kwargs["sort_order"] == "desc"

    def test_date_range_covers_whole_days(self, client, audit_store):
        response = client.get(
            "/api/v1/audit-logs",
            params={"date_from": "2026-02-01", "date_to": "2026-02-28"},
            headers=auth_headers(UserRole.ADMIN),
        )

        assert response.status_code == 200
        kwargs = audit_store.query.await_args.kwargs
        assert kwargs["date_from"] == datetime(2026, 2, 1, tzinfo=UTC)
        assert kwargs["date_to"].date() == datetime(2026, 2, 28).date()
        assert kwargs["date_to"].hour == 23

    def test_inverted_date_range_rejected(self, client, audit_store):
        response = client.get(
            "/api/v1/audit-logs",
            params={"date_from": "2026-03-01", "date_to": "2026-02-01"},
            headers=auth_headers(UserRole.ADMIN),
        )

        assert response.status_code == 400
        audit_store.query.assert_not_awaited()

    def test_invalid_sort_rejected(self, client):
        response = client.get(
            "/api/v1/audit-logs",
            params={"sort_by": "password"},
            headers=auth_headers(UserRole.ADMIN),
        )
        assert response.status_code == 422

    def test_store_failure_is_503(self, client, audit_store):
        audit_store.query.return_value = Failure(
            error=AuditError(code=ErrorCode.AUDIT_QUERY_FAILED, message="db down")
        )

        response = client.get("/api/v1/audit-logs", headers=auth_headers(UserRole.ADMIN))

        assert response.status_code == 503


@pytest.mark.api
class TestFiltersAndActivity:
    def test_filters(self, client):
        response = client.get(
            "/api/v1/audit-logs/filters", headers=auth_headers(UserRole.ADMIN)
        )

        assert response.status_code == 200
        assert response.json()["actions"] == [{"id": "a-1", "name": "EKLE"}]

    def test_filters_forbidden_for_customer(self, client):
        response = client.get(
            "/api/v1/audit-logs/filters",
            headers=auth_headers(UserRole.MUSTERI_SEVIYE2),
        )
        assert response.status_code == 403

    def test_activity_for_year(self, client, audit_store):
        response = client.get(
            "/api/v1/audit-logs/activity",
            params={"year": 2026},
            headers=auth_headers(UserRole.ADMIN),
        )

        assert response.status_code == 200
        body = response.json()
        assert body["year"] == 2026
        assert len(body["months"]) == 12
        assert body["months"][2]["admin"] == 1
        audit_store.activity_by_month.assert_awaited_once_with(2026)
