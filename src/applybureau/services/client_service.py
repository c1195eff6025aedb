"""Client account lookups."""

import uuid

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from applybureau.models.client import Client


class ClientService:
    """Service for client account operations."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def get_by_id(self, client_id: uuid.UUID) -> Client | None:
        """Get a client by ID."""
        return await self.db.get(Client, client_id)

    async def get_by_email(self, email: str) -> Client | None:
        result = await self.db.execute(select(Client).where(Client.email == email.lower()))
        return result.scalar_one_or_none()
