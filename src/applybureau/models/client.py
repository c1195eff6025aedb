"""Client account database models."""

from datetime import datetime
from enum import Enum
from typing import TYPE_CHECKING

from sqlalchemy import Boolean, DateTime, Enum as SQLEnum, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from applybureau.models.base import Base, UUIDPrimaryKeyMixin

if TYPE_CHECKING:
    from applybureau.models.application import Application
    from applybureau.models.onboarding import ClientOnboarding


class ClientRole(str, Enum):
    """Account role."""

    CLIENT = "client"
    ADMIN = "admin"


class Client(UUIDPrimaryKeyMixin, Base):
    """Registered account - either a concierge client or a staff member."""

    __tablename__ = "clients"

    email: Mapped[str] = mapped_column(String(255), unique=True, index=True)
    full_name: Mapped[str | None] = mapped_column(String(255))
    role: Mapped[ClientRole] = mapped_column(
        SQLEnum(ClientRole, values_callable=lambda obj: [e.value for e in obj]),
        default=ClientRole.CLIENT,
    )

    # Concierge gating
    profile_unlocked: Mapped[bool] = mapped_column(Boolean, default=False)
    onboarding_submitted: Mapped[bool] = mapped_column(Boolean, default=False)
    onboarding_submitted_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True))

    # Relationships
    applications: Mapped[list["Application"]] = relationship(
        back_populates="client", cascade="all, delete-orphan"
    )
    onboarding: Mapped["ClientOnboarding | None"] = relationship(
        back_populates="client", uselist=False, cascade="all, delete-orphan"
    )

    @property
    def is_staff(self) -> bool:
        return self.role == ClientRole.ADMIN
