"""Notification Service Implementations

Provides concrete implementations for sending account emails.
"""

import logging
from typing import Optional
import httpx
from src.app.services.notification_service import NotificationService

logger = logging.getLogger(__name__)


class LoggingNotificationService(NotificationService):
    """
    Notification service that logs emails instead of sending them

    Useful for development and testing, or as a fallback.
    """

    async def send_email(self, to: str, subject: str, html: str) -> bool:
        """
        Log the email

        Returns:
            Always True (logging never fails)
        """
        logger.info(f"[EMAIL] To: {to}, Subject: {subject}")
        return True


class EmailRelayNotificationService(NotificationService):
    """
    Notification service that hands emails to an HTTP email relay

    POSTs a JSON body {to, subject, html} to the configured relay URL.
    """

    def __init__(self, relay_url: str, timeout: float = 10.0):
        """
        Initialize relay notification service

        Args:
            relay_url: URL of the email relay endpoint
            timeout: Request timeout in seconds
        """
        self.relay_url = relay_url
        self.timeout = timeout

    async def send_email(self, to: str, subject: str, html: str) -> bool:
        """
        Send email via the relay

        Returns:
            True if the relay accepted the email, False otherwise
        """
        payload = {"to": to, "subject": subject, "html": html}

        try:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                response = await client.post(
                    self.relay_url,
                    json=payload,
                    headers={"Content-Type": "application/json"},
                )
                response.raise_for_status()
                logger.info(f"Email '{subject}' sent to {to} via {self.relay_url}")
                return True
        except httpx.HTTPError as e:
            logger.error(f"Failed to send email '{subject}' to {to}: {e}")
            return False
        except Exception as e:
            logger.error(f"Unexpected error sending email '{subject}' to {to}: {e}")
            return False


class CompositeNotificationService(NotificationService):
    """
    Notification service that delegates to multiple services

    Useful for sending to multiple channels (e.g., log + relay).
    """

    def __init__(self, services: list[NotificationService]):
        self.services = services

    async def send_email(self, to: str, subject: str, html: str) -> bool:
        """
        Send the email through all configured services

        Returns:
            True if at least one service succeeded, False otherwise
        """
        success = False
        for service in self.services:
            try:
                if await service.send_email(to, subject, html):
                    success = True
            except Exception as e:
                logger.error(f"Notification service {type(service).__name__} failed: {e}")
        return success


def create_notification_service(relay_url: Optional[str] = None) -> NotificationService:
    """
    Factory function to create appropriate notification service

    Args:
        relay_url: Optional email relay URL. If provided, creates composite
                   service with logging + relay. Otherwise, just logging.

    Returns:
        Configured NotificationService
    """
    services: list[NotificationService] = [LoggingNotificationService()]

    if relay_url:
        services.append(EmailRelayNotificationService(relay_url))

    if len(services) == 1:
        return services[0]

    return CompositeNotificationService(services)
