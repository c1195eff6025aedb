"""Database models."""

from applybureau.models.base import Base
from applybureau.models.client import Client, ClientRole
from applybureau.models.application import Application, ApplicationStatus
from applybureau.models.consultation import ConsultationRequest
from applybureau.models.notification import Notification
from applybureau.models.onboarding import ClientOnboarding, ExecutionStatus

__all__ = [
    "Base",
    "Client",
    "ClientRole",
    "Application",
    "ApplicationStatus",
    "ConsultationRequest",
    "Notification",
    "ClientOnboarding",
    "ExecutionStatus",
]
