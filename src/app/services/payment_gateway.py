"""Payment Gateway Interface

Defines the contract for talking to the external payment provider.
Only values returned by verify() are trusted when crediting a tenant.
"""

import re
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Dict, Optional

# One URL path segment; never ".", ".." or anything carrying "/", "?" or "#"
REFERENCE_PATTERN = r"^[A-Za-z0-9][A-Za-z0-9_.=-]*$"

_reference_re = re.compile(REFERENCE_PATTERN)


def is_valid_reference(reference: str) -> bool:
    return bool(reference) and len(reference) <= 100 and _reference_re.fullmatch(reference) is not None


class PaymentGatewayError(Exception):
    """Raised when the gateway cannot be reached or answers unexpectedly"""
    pass


@dataclass(frozen=True)
class VerifiedPayment:
    """
    Payment facts as reported by the gateway's verification endpoint

    reference is the reference the gateway echoed back, not the one asked
    for; tenant_id comes from the checkout metadata when present.
    """

    reference: str
    successful: bool
    amount_minor: int
    currency: str
    gateway_status: Optional[str] = None
    tenant_id: Optional[str] = None


@dataclass(frozen=True)
class PaymentInitialization:
    reference: str
    authorization_url: str
    access_code: Optional[str] = None


class PaymentGateway(ABC):

    @abstractmethod
    async def verify(self, reference: str) -> VerifiedPayment:
        """
        Verify a payment with the gateway using the server-held secret

        Args:
            reference: Gateway payment reference

        Returns:
            VerifiedPayment with gateway-reported status, amount and currency

        Raises:
            PaymentGatewayError: On transport failure or malformed response
        """
        pass

    @abstractmethod
    async def initialize(
        self,
        email: str,
        amount_minor: int,
        reference: str,
        metadata: Optional[Dict[str, Any]] = None,
    ) -> PaymentInitialization:
        """
        Start a checkout session with the gateway

        Raises:
            PaymentGatewayError: On transport failure or rejection
        """
        pass
