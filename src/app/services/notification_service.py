"""Notification Service Interface

Defines the contract for outbound notifications (account emails).
Notifications are fire-and-forget: implementations report failure through
the return value and never raise into the caller.
"""

from abc import ABC, abstractmethod
from src.domain.tenant_account import TenantAccount


class NotificationService(ABC):
    """
    Abstract notification service for tenant account events

    Implementations can send notifications via:
    - Logging
    - HTTP email relay
    """

    @abstractmethod
    async def send_email(self, to: str, subject: str, html: str) -> bool:
        """
        Send an email

        Returns:
            True if the notification was accepted, False otherwise
        """
        pass

    async def send_account_created(self, account: TenantAccount, bonus_credits: str) -> bool:
        """Welcome email sent after registration"""
        html = (
            '<div style="font-family: sans-serif; padding: 20px; color: #333;">'
            f'<h1>Welcome, {account.name}!</h1>'
            f"<p>We've credited your account with <strong>{bonus_credits} free credits</strong> "
            "to get you started as soon as you're approved.</p>"
            "<p>You will receive another email once your account has been approved.</p>"
            "</div>"
        )
        return await self.send_email(account.email, "Your Cawash Account is Pending Approval", html)

    async def send_account_approved(self, account: TenantAccount, login_url: str) -> bool:
        """Approval email sent after the super-admin approves a tenant"""
        html = (
            '<div style="font-family: sans-serif; padding: 20px; color: #333;">'
            f'<h1>Congratulations, {account.name}!</h1>'
            "<p>We are thrilled to inform you that your carwash account has been approved.</p>"
            "<p>You can now log in to your dashboard to set up your services, add your team, "
            "and start managing your jobs.</p>"
            f'<a href="{login_url}">Login to Your Dashboard</a>'
            "<p>Welcome aboard,<br>The Cawash Team</p>"
            "</div>"
        )
        return await self.send_email(account.email, "Your Cawash Account is Approved!", html)
