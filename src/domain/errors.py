"""Ledger Errors

Typed failures raised inside a ledger transaction to abort it. Use cases
catch them at their boundary and turn them into Result errors.
"""

from decimal import Decimal
from typing import Any, Dict, Optional
from libs.result import Error


class LedgerError(Exception):
    """Base class for expected business failures"""

    code = "LEDGER_ERROR"

    def __init__(self, message: str, reason: Optional[str] = None, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.reason = reason
        self.details = details or {}

    def to_error(self) -> Error:
        return Error(code=self.code, message=self.message, reason=self.reason, details=self.details)


class ConfigurationMissing(LedgerError):
    code = "CONFIGURATION_MISSING"

    def __init__(self):
        super().__init__(
            message="Global settings not found. Please contact support.",
            reason="pricing configuration record does not exist",
        )


class TenantNotFound(LedgerError):
    code = "TENANT_NOT_FOUND"

    def __init__(self, tenant_id: str):
        super().__init__(
            message=f"Carwash account {tenant_id} not found",
            details={"tenant_id": tenant_id},
        )


class InsufficientCredits(LedgerError):
    code = "INSUFFICIENT_CREDITS"

    def __init__(self, required: Decimal, available: Decimal, action: str):
        self.required = required
        self.available = available
        super().__init__(
            message=f"Insufficient credits. You need {required.normalize():f} credits to {action}.",
            reason=f"balance={available}, required={required}",
            details={"required": str(required), "available": str(available)},
        )


class PaymentNotVerified(LedgerError):
    code = "PAYMENT_NOT_VERIFIED"

    def __init__(self, reference: str, reason: Optional[str] = None):
        super().__init__(
            message="Payment could not be verified. Please contact support.",
            reason=reason,
            details={"reference": reference},
        )


class InvalidCurrency(LedgerError):
    code = "INVALID_CURRENCY"

    def __init__(self, reference: str, currency: str, expected: str):
        super().__init__(
            message="Invalid currency. Please contact support.",
            reason=f"currency={currency}, expected={expected}",
            details={"reference": reference, "currency": currency, "expected": expected},
        )


class TenantNotApproved(LedgerError):
    code = "TENANT_NOT_APPROVED"

    def __init__(self, tenant_id: str):
        super().__init__(
            message="Your account is pending approval.",
            details={"tenant_id": tenant_id},
        )


class TenantAccessDenied(LedgerError):
    code = "TENANT_ACCESS_DENIED"

    def __init__(self, tenant_id: str):
        super().__init__(
            message="You do not have access to this carwash account.",
            details={"tenant_id": tenant_id},
        )


class TenantAlreadyApproved(LedgerError):
    code = "TENANT_ALREADY_APPROVED"

    def __init__(self, tenant_id: str):
        super().__init__(
            message=f"Carwash account {tenant_id} is already approved",
            details={"tenant_id": tenant_id},
        )


class TenantAlreadyExists(LedgerError):
    code = "TENANT_ALREADY_EXISTS"

    def __init__(self, owner_uid: str):
        super().__init__(
            message="A carwash account already exists for this user",
            details={"owner_uid": owner_uid},
        )


class BelowMinimumPurchase(LedgerError):
    code = "BELOW_MINIMUM_PURCHASE"

    def __init__(self, amount: Decimal, minimum: Decimal):
        super().__init__(
            message=f"Minimum purchase is {minimum.normalize():f}",
            reason=f"amount={amount}, minimum={minimum}",
            details={"amount": str(amount), "minimum": str(minimum)},
        )


class TransactionConflict(LedgerError):
    code = "TRANSACTION_CONFLICT"

    def __init__(self, attempts: int, reason: Optional[str] = None):
        super().__init__(
            message="The request could not be completed. Please try again.",
            reason=reason,
            details={"attempts": attempts},
        )
