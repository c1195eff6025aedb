"""Outbound email through the Resend HTTP API."""

import httpx
import structlog
from tenacity import retry, stop_after_attempt, wait_exponential

from applybureau.config import Settings, get_settings

logger = structlog.get_logger()


class EmailService:
    """Sends plain-text transactional email.

    Delivery is disabled when no API key is configured; ``send`` then logs
    the message and returns False.
    """

    def __init__(self, settings: Settings | None = None):
        self.settings = settings or get_settings()

    async def send(self, to: str, subject: str, text: str) -> bool:
        if not self.settings.email_enabled:
            logger.info("email_delivery_disabled", to=to, subject=subject)
            return False

        await self._post(
            {
                "from": self.settings.email_from,
                "to": [to],
                "subject": subject,
                "text": text,
            }
        )
        logger.info("email_sent", to=to, subject=subject)
        return True

    @retry(
        stop=stop_after_attempt(3),
        wait=wait_exponential(multiplier=1, min=2, max=10),
        reraise=True,
    )
    async def _post(self, payload: dict) -> httpx.Response:
        async with httpx.AsyncClient(timeout=15.0) as client:
            response = await client.post(
                self.settings.resend_api_url,
                json=payload,
                headers={"Authorization": f"Bearer {self.settings.resend_api_key}"},
            )
            response.raise_for_status()
            return response
