"""Paystack Payment Gateway

httpx client for the Paystack transaction API. The secret key stays on the
server; callers only ever see the verified fields.
"""

import logging
from typing import Any, Dict, Optional
from urllib.parse import quote
import httpx
from src.app.services.payment_gateway import (
    PaymentGateway,
    PaymentGatewayError,
    PaymentInitialization,
    VerifiedPayment,
    is_valid_reference,
)

logger = logging.getLogger(__name__)


class PaystackPaymentGateway(PaymentGateway):
    """
    Paystack implementation of PaymentGateway

    Endpoints:
    - GET  /transaction/verify/{reference}
    - POST /transaction/initialize
    """

    def __init__(
        self,
        secret_key: str,
        base_url: str = "https://api.paystack.co",
        timeout: float = 25.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Initialize the gateway client

        Args:
            secret_key: Paystack secret key (server-side only)
            base_url: API base URL
            timeout: Request timeout in seconds
            transport: Optional httpx transport (used by tests)
        """
        self.secret_key = secret_key
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.transport = transport

    def _headers(self) -> Dict[str, str]:
        return {
            "Authorization": f"Bearer {self.secret_key}",
            "Content-Type": "application/json",
        }

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            base_url=self.base_url,
            timeout=self.timeout,
            headers=self._headers(),
            transport=self.transport,
        )

    async def verify(self, reference: str) -> VerifiedPayment:
        """
        Verify a transaction by reference

        Returns:
            VerifiedPayment; successful is True only when Paystack reports
            both a true top-level status and a "success" transaction status.
            reference is the one Paystack echoed back.

        Raises:
            PaymentGatewayError: Malformed reference, transport failure or a
            response body that is not the documented shape
        """
        if not is_valid_reference(reference):
            raise PaymentGatewayError(f"invalid payment reference: {reference!r}")

        try:
            async with self._client() as client:
                response = await client.get(f"/transaction/verify/{quote(reference, safe='')}")
                body = response.json()
        except httpx.HTTPError as e:
            logger.error(f"Paystack verify request failed for {reference}: {e}")
            raise PaymentGatewayError(f"verify request failed: {e}") from e
        except ValueError as e:
            raise PaymentGatewayError("verify response is not JSON") from e

        if not isinstance(body, dict):
            raise PaymentGatewayError(f"unexpected verify response: {type(body).__name__}")
        data = body.get("data")
        if data is None:
            data = {}
        elif not isinstance(data, dict):
            raise PaymentGatewayError(f"unexpected verify data: {type(data).__name__}")

        gateway_status = data.get("status")
        successful = (
            response.status_code == 200
            and body.get("status") is True
            and gateway_status == "success"
        )

        try:
            amount_minor = int(data.get("amount") or 0)
        except (TypeError, ValueError) as e:
            raise PaymentGatewayError(f"unexpected amount in verify response: {data.get('amount')!r}") from e

        metadata = data.get("metadata")
        tenant_id = metadata.get("tenant_id") if isinstance(metadata, dict) else None

        logger.info(
            f"Paystack verify {reference}: http={response.status_code}, "
            f"status={gateway_status}, amount={amount_minor}, currency={data.get('currency')}"
        )

        return VerifiedPayment(
            reference=str(data.get("reference") or ""),
            successful=successful,
            amount_minor=amount_minor,
            currency=str(data.get("currency") or ""),
            gateway_status=gateway_status if isinstance(gateway_status, str) else None,
            tenant_id=str(tenant_id) if tenant_id is not None else None,
        )

    async def initialize(
        self,
        email: str,
        amount_minor: int,
        reference: str,
        metadata: Optional[Dict[str, Any]] = None,
    ) -> PaymentInitialization:
        payload: Dict[str, Any] = {
            "email": email,
            "amount": amount_minor,
            "reference": reference,
        }
        if metadata:
            payload["metadata"] = metadata

        try:
            async with self._client() as client:
                response = await client.post("/transaction/initialize", json=payload)
                body = response.json()
        except httpx.HTTPError as e:
            logger.error(f"Paystack initialize request failed for {reference}: {e}")
            raise PaymentGatewayError(f"initialize request failed: {e}") from e
        except ValueError as e:
            raise PaymentGatewayError("initialize response is not JSON") from e

        if not isinstance(body, dict) or not isinstance(body.get("data") or {}, dict):
            raise PaymentGatewayError(f"unexpected initialize response: http={response.status_code}")
        data = body.get("data") or {}
        if response.status_code != 200 or not body.get("status") or not data.get("authorization_url"):
            raise PaymentGatewayError(
                f"initialize rejected: http={response.status_code}, message={body.get('message')}"
            )

        return PaymentInitialization(
            reference=data.get("reference") or reference,
            authorization_url=data["authorization_url"],
            access_code=data.get("access_code"),
        )
