"""Tests for API endpoints."""

import uuid

import pytest
from sqlalchemy import text


def headers_for(user):
    return {"X-User-Id": str(user.id)}


@pytest.mark.asyncio
async def test_health_check(api_client):
    """Test health check endpoint."""
    response = await api_client.get("/api/health")

    assert response.status_code == 200
    assert response.json()["status"] == "healthy"


@pytest.mark.asyncio
async def test_database_health(api_client):
    response = await api_client.get("/api/health/db")

    assert response.status_code == 200
    assert response.json() == {"status": "healthy", "database": "connected"}


@pytest.mark.asyncio
async def test_applications_require_authentication(api_client):
    response = await api_client.get("/api/applications")

    assert response.status_code == 401
    assert response.json() == {"error": "Authentication required"}


@pytest.mark.asyncio
async def test_malformed_user_id_rejected(api_client):
    response = await api_client.get("/api/applications", headers={"X-User-Id": "not-a-uuid"})

    assert response.status_code == 401


@pytest.mark.asyncio
async def test_unknown_user_rejected(api_client):
    response = await api_client.get("/api/applications", headers={"X-User-Id": str(uuid.uuid4())})

    assert response.status_code == 401
    assert response.json() == {"error": "User not found"}


@pytest.mark.asyncio
async def test_clients_cannot_create_applications(api_client, client_user, application_payload):
    response = await api_client.post(
        "/api/applications",
        json={**application_payload, "client_id": str(client_user.id)},
        headers=headers_for(client_user),
    )

    assert response.status_code == 403


@pytest.mark.asyncio
async def test_create_application_validation_error(api_client, admin_user):
    response = await api_client.post(
        "/api/applications",
        json={"client_id": "nope", "job_title": "X", "company": "Acme Corp"},
        headers=headers_for(admin_user),
    )

    assert response.status_code == 400
    body = response.json()
    assert body["error"] == "Validation failed"
    assert body["type"] == "VALIDATION_ERROR"
    assert {detail["field"] for detail in body["details"]} == {"client_id", "job_title"}


@pytest.mark.asyncio
async def test_application_lifecycle(api_client, client_user, admin_user, application_payload):
    response = await api_client.post(
        "/api/applications",
        json={**application_payload, "client_id": str(client_user.id), "internal_flag": True},
        headers=headers_for(admin_user),
    )
    assert response.status_code == 201
    created = response.json()
    assert created["message"] == "Application created successfully"
    application = created["application"]
    assert application["company_name"] == "Acme Corp"
    assert application["status"] == "applied"
    assert application["admin_notes"] == "Created by admin: admin@applybureau.com"

    response = await api_client.patch(
        f"/api/applications/{application['id']}/status",
        json={"status": "interview_scheduled", "interview_type": "video"},
        headers=headers_for(admin_user),
    )
    assert response.status_code == 200
    assert response.json()["application"]["status"] == "interview_scheduled"

    response = await api_client.get("/api/applications", headers=headers_for(client_user))
    assert response.status_code == 200
    body = response.json()
    assert body["total"] == 1
    assert body["applications"][0]["interview_type"] == "video"
    assert "admin_notes" not in body["applications"][0]
    assert body["stats"]["total_applications"] == 1
    assert body["stats"]["status_breakdown"]["interviewing"] == 1
    assert body["stats"]["response_rate"] == 100


@pytest.mark.asyncio
async def test_get_stats(api_client, unlocked_client):
    response = await api_client.get("/api/applications/stats", headers=headers_for(unlocked_client))

    assert response.status_code == 200
    assert response.json() == {
        "tier": "Tier 1",
        "weekly_target": 17,
        "total_applications": 0,
        "applications_this_week": 0,
        "weekly_progress": 0,
        "status_breakdown": {"applied": 0, "interviewing": 0, "offer": 0, "rejected": 0, "withdrawn": 0},
        "response_rate": 0,
        "offer_rate": 0,
    }


@pytest.mark.asyncio
async def test_weekly_applications_bounds(api_client, unlocked_client):
    response = await api_client.get(
        "/api/applications/weekly", params={"weeks_back": 0}, headers=headers_for(unlocked_client)
    )

    assert response.status_code == 400
    assert response.json()["type"] == "VALIDATION_ERROR"


@pytest.mark.asyncio
@pytest.mark.parametrize("path", ["/api/applications/stats", "/api/applications/weekly"])
async def test_locked_client_cannot_open_tracker(api_client, client_user, path):
    response = await api_client.get(path, headers=headers_for(client_user))

    assert response.status_code == 403
    assert response.json()["code"] == "PROFILE_LOCKED"


@pytest.mark.asyncio
async def test_tracker_opens_after_approval(api_client, client_user, admin_user, onboarding_payload):
    response = await api_client.post(
        "/api/onboarding", json=onboarding_payload, headers=headers_for(client_user)
    )
    onboarding_id = response.json()["data"]["id"]

    response = await api_client.get("/api/applications/weekly", headers=headers_for(client_user))
    assert response.status_code == 403

    await api_client.post(f"/api/onboarding/{onboarding_id}/approve", headers=headers_for(admin_user))

    response = await api_client.get("/api/applications/weekly", headers=headers_for(client_user))
    assert response.status_code == 200
    assert response.json() == {"weekly_applications": [], "total_weeks": 0}


@pytest.mark.asyncio
async def test_staff_stats_cover_all_clients(api_client, client_user, unlocked_client, admin_user, application_payload):
    for client in (client_user, unlocked_client):
        response = await api_client.post(
            "/api/applications",
            json={**application_payload, "client_id": str(client.id)},
            headers=headers_for(admin_user),
        )
        assert response.status_code == 201

    response = await api_client.get("/api/applications/stats", headers=headers_for(admin_user))

    assert response.status_code == 200
    assert response.json() == {
        "user_type": "admin",
        "total_applications": 2,
        "total_clients": 2,
        "status_breakdown": {"applied": 2, "interviewing": 0, "offer": 0, "rejected": 0, "withdrawn": 0},
        "overall_response_rate": 0,
        "overall_offer_rate": 0,
    }


@pytest.mark.asyncio
async def test_create_application_database_failure(api_client, db_session, client_user, admin_user, application_payload):
    """Persistence errors become a generic 500 without driver detail."""
    await db_session.execute(text("DROP TABLE notifications"))

    response = await api_client.post(
        "/api/applications",
        json={**application_payload, "client_id": str(client_user.id)},
        headers=headers_for(admin_user),
    )

    assert response.status_code == 500
    assert response.json() == {"error": "Failed to create application"}
    assert "no such table" not in response.text
    assert "notifications" not in response.text


@pytest.mark.asyncio
async def test_invalid_status_filter(api_client, client_user):
    response = await api_client.get(
        "/api/applications", params={"status": "ghosted"}, headers=headers_for(client_user)
    )

    assert response.status_code == 400
    assert response.json()["details"][0]["field"] == "query.status"


@pytest.mark.asyncio
async def test_update_unknown_application(api_client, admin_user):
    response = await api_client.patch(
        f"/api/applications/{uuid.uuid4()}",
        json={"notes": "Checked in"},
        headers=headers_for(admin_user),
    )

    assert response.status_code == 404
    assert response.json() == {"error": "Application not found"}


@pytest.mark.asyncio
async def test_onboarding_flow(api_client, client_user, admin_user, onboarding_payload):
    response = await api_client.post(
        "/api/onboarding", json=onboarding_payload, headers=headers_for(client_user)
    )
    assert response.status_code == 201
    submission = response.json()["data"]
    assert submission["execution_status"] == "pending_approval"
    assert submission["requires_approval"] is True

    response = await api_client.get("/api/onboarding/status", headers=headers_for(client_user))
    assert response.json()["status"] == "pending_review"
    assert response.json()["can_access_tracker"] is False

    response = await api_client.post(
        f"/api/onboarding/{submission['id']}/approve", headers=headers_for(admin_user)
    )
    assert response.status_code == 200
    assert response.json()["data"]["execution_status"] == "active"

    response = await api_client.get("/api/onboarding/status", headers=headers_for(client_user))
    assert response.json()["status"] == "approved"
    assert response.json()["profile"]["profile_unlocked"] is True

    response = await api_client.post(
        "/api/onboarding", json=onboarding_payload, headers=headers_for(client_user)
    )
    assert response.status_code == 409
    assert response.json() == {
        "error": "Onboarding already completed and approved",
        "code": "ALREADY_COMPLETED",
    }


@pytest.mark.asyncio
async def test_onboarding_validation_error(api_client, client_user, onboarding_payload):
    onboarding_payload["target_job_titles"] = []

    response = await api_client.post(
        "/api/onboarding", json=onboarding_payload, headers=headers_for(client_user)
    )

    assert response.status_code == 400
    assert [detail["field"] for detail in response.json()["details"]] == ["target_job_titles"]


@pytest.mark.asyncio
async def test_questionnaire_not_found(api_client, client_user):
    response = await api_client.get("/api/onboarding/questionnaire", headers=headers_for(client_user))

    assert response.status_code == 404


@pytest.mark.asyncio
async def test_staff_cannot_submit_onboarding(api_client, admin_user, onboarding_payload):
    response = await api_client.post(
        "/api/onboarding", json=onboarding_payload, headers=headers_for(admin_user)
    )

    assert response.status_code == 403


@pytest.mark.asyncio
async def test_book_consultation_anonymously(api_client):
    response = await api_client.post(
        "/api/consultations",
        json={
            "name": "Sam Lee",
            "email": "Sam@Example.com",
            "reason": "Exploring a career change into data.",
            "preferred_date": "2024-03-21T15:00:00Z",
            "preferred_time": "15:00",
            "package_interest": "essential",
            "timeline": "flexible",
        },
    )

    assert response.status_code == 201
    data = response.json()["data"]
    assert data["email"] == "sam@example.com"
    assert data["status"] == "pending"
