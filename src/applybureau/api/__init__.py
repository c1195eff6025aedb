"""API routes."""

from fastapi import APIRouter

from applybureau.api.routes import applications, consultations, health, onboarding

api_router = APIRouter()

api_router.include_router(health.router, tags=["health"])
api_router.include_router(applications.router, prefix="/applications", tags=["applications"])
api_router.include_router(onboarding.router, prefix="/onboarding", tags=["onboarding"])
api_router.include_router(consultations.router, prefix="/consultations", tags=["consultations"])
