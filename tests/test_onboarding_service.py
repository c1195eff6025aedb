"""Tests for onboarding and consultation services."""

import uuid

import pytest
from sqlalchemy import select

from applybureau.models import ConsultationRequest, Notification
from applybureau.schemas.consultation import ConsultationBooking
from applybureau.schemas.onboarding import OnboardingQuestionnaire
from applybureau.services.application_service import ApplicationService
from applybureau.services.consultation_service import ConsultationService
from applybureau.services.email_service import EmailService
from applybureau.services.exceptions import ConflictError, NotFoundError, PermissionDeniedError
from applybureau.services.onboarding_service import OnboardingService


class RecordingEmailService(EmailService):
    """Captures outgoing mail instead of calling the email API."""

    def __init__(self):
        super().__init__()
        self.sent = []

    async def send(self, to, subject, text):
        self.sent.append((to, subject))
        return True


@pytest.fixture
def email_service():
    return RecordingEmailService()


@pytest.fixture
def questionnaire(onboarding_payload):
    return OnboardingQuestionnaire.model_validate(onboarding_payload)


async def admin_notifications(db_session, type):
    result = await db_session.execute(
        select(Notification).where(Notification.user_type == "admin", Notification.type == type)
    )
    return list(result.scalars().all())


@pytest.mark.asyncio
async def test_submit_onboarding(db_session, client_user, questionnaire, email_service):
    """Test submitting the questionnaire."""
    onboarding_service = OnboardingService(db_session, email_service=email_service)

    onboarding = await onboarding_service.submit(client_user, questionnaire)

    assert onboarding.id is not None
    assert onboarding.user_id == client_user.id
    assert onboarding.execution_status == "pending_approval"
    assert onboarding.completed_at is not None
    assert onboarding.target_job_titles == ["Product Manager", "Senior Product Manager"]
    assert onboarding.remote_work_preference == "hybrid"
    assert client_user.onboarding_submitted is True
    assert client_user.profile_unlocked is False


@pytest.mark.asyncio
async def test_submit_notifies_staff(db_session, client_user, questionnaire, email_service):
    await OnboardingService(db_session, email_service=email_service).submit(client_user, questionnaire)

    notifications = await admin_notifications(db_session, "onboarding_needs_approval")

    assert len(notifications) == 1
    assert notifications[0].user_id is None
    assert client_user.email in notifications[0].message
    assert [to for to, _ in email_service.sent] == [client_user.email, "admin@applybureau.com"]


@pytest.mark.asyncio
async def test_resubmit_while_pending_replaces_answers(db_session, client_user, onboarding_payload, email_service):
    onboarding_service = OnboardingService(db_session, email_service=email_service)
    first = await onboarding_service.submit(
        client_user, OnboardingQuestionnaire.model_validate(onboarding_payload)
    )

    onboarding_payload["target_industries"] = ["Healthcare", "Insurance"]
    second = await onboarding_service.submit(
        client_user, OnboardingQuestionnaire.model_validate(onboarding_payload)
    )

    assert second.id == first.id
    assert second.target_industries == ["Healthcare", "Insurance"]


@pytest.mark.asyncio
async def test_status_not_started(db_session, client_user, email_service):
    status = await OnboardingService(db_session, email_service=email_service).get_status(client_user)

    assert status["status"] == "not_started"
    assert status["onboarding"] is None
    assert status["can_access_tracker"] is False


@pytest.mark.asyncio
async def test_approval_flow(db_session, client_user, admin_user, questionnaire, email_service):
    onboarding_service = OnboardingService(db_session, email_service=email_service)
    onboarding = await onboarding_service.submit(client_user, questionnaire)

    status = await onboarding_service.get_status(client_user)
    assert status["status"] == "pending_review"
    assert status["can_access_tracker"] is False

    approved = await onboarding_service.approve(onboarding.id, admin_user)
    assert approved.execution_status == "active"
    assert approved.approved_by == admin_user.id
    assert approved.approved_at is not None

    status = await onboarding_service.get_status(client_user)
    assert status["status"] == "approved"
    assert status["can_access_tracker"] is True
    assert client_user.profile_unlocked is True


@pytest.mark.asyncio
async def test_submit_after_approval_conflicts(db_session, client_user, admin_user, questionnaire, email_service):
    onboarding_service = OnboardingService(db_session, email_service=email_service)
    onboarding = await onboarding_service.submit(client_user, questionnaire)
    await onboarding_service.approve(onboarding.id, admin_user)

    with pytest.raises(ConflictError) as exc_info:
        await onboarding_service.submit(client_user, questionnaire)

    assert exc_info.value.code == "ALREADY_COMPLETED"
    assert exc_info.value.status_code == 409


@pytest.mark.asyncio
async def test_approve_twice_conflicts(db_session, client_user, admin_user, questionnaire, email_service):
    onboarding_service = OnboardingService(db_session, email_service=email_service)
    onboarding = await onboarding_service.submit(client_user, questionnaire)
    await onboarding_service.approve(onboarding.id, admin_user)

    with pytest.raises(ConflictError):
        await onboarding_service.approve(onboarding.id, admin_user)


@pytest.mark.asyncio
async def test_approve_unknown_submission(db_session, admin_user, email_service):
    with pytest.raises(NotFoundError):
        await OnboardingService(db_session, email_service=email_service).approve(uuid.uuid4(), admin_user)


@pytest.mark.asyncio
async def test_email_disabled_without_api_key():
    assert await EmailService().send("jane@example.com", "Hello", "Hi Jane") is False


@pytest.mark.asyncio
async def test_book_consultation_links_account_by_email(db_session, client_user, email_service):
    booking = ConsultationBooking.model_validate(
        {
            "name": "Jane Doe",
            "email": "JANE.DOE@example.com",
            "reason": "I want a structured job search with weekly targets.",
            "preferred_date": "2024-03-20T10:00:00Z",
            "preferred_time": "10:30",
            "package_interest": "executive",
            "timeline": "immediate",
        }
    )

    consultation = await ConsultationService(db_session, email_service=email_service).book(booking)

    assert consultation.user_id == client_user.id
    assert consultation.email == "jane.doe@example.com"
    assert consultation.status == "pending"
    assert email_service.sent == [("jane.doe@example.com", "Consultation request received")]
    assert len(await admin_notifications(db_session, "consultation_requested")) == 1
    assert await ApplicationService(db_session).get_client_tier(client_user.id) == "Tier 3"


@pytest.mark.asyncio
async def test_book_consultation_without_account(db_session, email_service):
    booking = ConsultationBooking.model_validate(
        {
            "name": "Sam Lee",
            "email": "sam@example.com",
            "reason": "Exploring a career change into data.",
            "preferred_date": "2024-03-21T15:00:00Z",
            "preferred_time": "15:00",
            "package_interest": "not_sure",
            "timeline": "flexible",
        }
    )

    consultation = await ConsultationService(db_session, email_service=email_service).book(booking)

    result = await db_session.execute(select(ConsultationRequest))
    assert result.scalars().all() == [consultation]
    assert consultation.user_id is None


@pytest.mark.asyncio
async def test_tracker_locked_until_approved(db_session, client_user, admin_user, questionnaire, email_service):
    onboarding_service = OnboardingService(db_session, email_service=email_service)

    with pytest.raises(PermissionDeniedError) as exc_info:
        await onboarding_service.ensure_tracker_access(client_user)
    assert exc_info.value.code == "PROFILE_LOCKED"
    assert exc_info.value.status_code == 403

    onboarding = await onboarding_service.submit(client_user, questionnaire)
    with pytest.raises(PermissionDeniedError):
        await onboarding_service.ensure_tracker_access(client_user)

    await onboarding_service.approve(onboarding.id, admin_user)
    await onboarding_service.ensure_tracker_access(client_user)


@pytest.mark.asyncio
async def test_tracker_blocked_while_onboarding_not_active(db_session, client_user, questionnaire, email_service):
    """An unlocked profile is not enough while the questionnaire is under review."""
    onboarding_service = OnboardingService(db_session, email_service=email_service)
    await onboarding_service.submit(client_user, questionnaire)
    client_user.profile_unlocked = True

    with pytest.raises(PermissionDeniedError) as exc_info:
        await onboarding_service.ensure_tracker_access(client_user)

    assert exc_info.value.code == "PROFILE_NOT_ACTIVE"


@pytest.mark.asyncio
async def test_tracker_open_for_unlocked_client_without_questionnaire(db_session, client_user, email_service):
    client_user.profile_unlocked = True

    await OnboardingService(db_session, email_service=email_service).ensure_tracker_access(client_user)
