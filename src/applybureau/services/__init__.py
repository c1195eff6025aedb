"""Business logic services."""

from applybureau.services.client_service import ClientService
from applybureau.services.email_service import EmailService
from applybureau.services.notification_service import NotificationService
from applybureau.services.application_service import ApplicationService
from applybureau.services.onboarding_service import OnboardingService
from applybureau.services.consultation_service import ConsultationService

__all__ = [
    "ClientService",
    "EmailService",
    "NotificationService",
    "ApplicationService",
    "OnboardingService",
    "ConsultationService",
]
