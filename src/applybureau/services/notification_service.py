"""In-app notifications."""

import uuid

import structlog
from sqlalchemy.ext.asyncio import AsyncSession

from applybureau.models.notification import Notification

logger = structlog.get_logger()


class NotificationService:
    """Writes dashboard notifications for clients and staff."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def create(
        self,
        user_id: uuid.UUID | None,
        user_type: str,
        type: str,
        title: str,
        message: str,
    ) -> Notification:
        notification = Notification(
            user_id=user_id,
            user_type=user_type,
            type=type,
            title=title,
            message=message,
            is_read=False,
        )
        self.db.add(notification)
        await self.db.flush()

        logger.debug("notification_created", user_id=str(user_id), type=type)
        return notification

    async def notify_client(self, client_id: uuid.UUID, type: str, title: str, message: str) -> Notification:
        return await self.create(client_id, "client", type, title, message)

    async def notify_admins(self, type: str, title: str, message: str) -> Notification:
        """Broadcast to the staff dashboard (no single recipient)."""
        return await self.create(None, "admin", type, title, message)
