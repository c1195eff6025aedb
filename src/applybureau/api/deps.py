"""API dependencies."""

import uuid
from typing import Annotated

from fastapi import Depends, Header, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from applybureau.database import get_db
from applybureau.models.client import Client, ClientRole
from applybureau.services.client_service import ClientService
from applybureau.services.onboarding_service import OnboardingService


async def get_optional_user(
    db: Annotated[AsyncSession, Depends(get_db)],
    x_user_id: Annotated[str | None, Header()] = None,
) -> Client | None:
    """Resolve the caller from the X-User-Id header, if one is sent."""
    if not x_user_id:
        return None

    try:
        user_id = uuid.UUID(x_user_id)
    except ValueError:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid user id",
        )

    user = await ClientService(db).get_by_id(user_id)
    if not user:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="User not found",
        )
    return user


async def get_current_user(
    user: Annotated[Client | None, Depends(get_optional_user)],
) -> Client:
    """Require an authenticated caller."""
    if user is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authentication required",
        )
    return user


async def require_staff(user: Annotated[Client, Depends(get_current_user)]) -> Client:
    if not user.is_staff:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Access denied. Admin role required.",
        )
    return user


async def require_client(user: Annotated[Client, Depends(get_current_user)]) -> Client:
    if user.role != ClientRole.CLIENT:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Access denied. Client role required.",
        )
    return user


async def require_tracker_access(
    user: Annotated[Client, Depends(get_current_user)],
    db: Annotated[AsyncSession, Depends(get_db)],
) -> Client:
    """Staff always pass; clients need an unlocked profile and approved onboarding."""
    if not user.is_staff:
        await OnboardingService(db).ensure_tracker_access(user)
    return user


# Type aliases for dependency injection
DbSession = Annotated[AsyncSession, Depends(get_db)]
OptionalUser = Annotated[Client | None, Depends(get_optional_user)]
CurrentUser = Annotated[Client, Depends(get_current_user)]
StaffUser = Annotated[Client, Depends(require_staff)]
ClientUser = Annotated[Client, Depends(require_client)]
TrackerUser = Annotated[Client, Depends(require_tracker_access)]
