"""API error type and handlers

Use case errors reach the client as {"error": {code, message, reason, details}}.
"""

import logging
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from libs.result import Error

logger = logging.getLogger(__name__)

STATUS_BY_CODE = {
    "INSUFFICIENT_CREDITS": status.HTTP_402_PAYMENT_REQUIRED,
    "BELOW_MINIMUM_PURCHASE": status.HTTP_400_BAD_REQUEST,
    "TENANT_NOT_FOUND": status.HTTP_404_NOT_FOUND,
    "TENANT_NOT_APPROVED": status.HTTP_403_FORBIDDEN,
    "TENANT_ACCESS_DENIED": status.HTTP_403_FORBIDDEN,
    "TENANT_ALREADY_APPROVED": status.HTTP_409_CONFLICT,
    "TENANT_ALREADY_EXISTS": status.HTTP_409_CONFLICT,
    "CONFIGURATION_MISSING": status.HTTP_503_SERVICE_UNAVAILABLE,
    "PAYMENT_NOT_VERIFIED": status.HTTP_400_BAD_REQUEST,
    "INVALID_CURRENCY": status.HTTP_400_BAD_REQUEST,
    "TRANSACTION_CONFLICT": status.HTTP_409_CONFLICT,
    "UNAUTHENTICATED": status.HTTP_401_UNAUTHORIZED,
    "FORBIDDEN": status.HTTP_403_FORBIDDEN,
}


class ClientError(Exception):
    def __init__(self, error: Error, status_code: int = status.HTTP_400_BAD_REQUEST):
        super().__init__(error.message)
        self.error = error
        self.status_code = status_code

    @classmethod
    def from_error(cls, error: Error) -> "ClientError":
        """Build a ClientError with the HTTP status mapped from the error code"""
        return cls(error, status_code=STATUS_BY_CODE.get(error.code, status.HTTP_400_BAD_REQUEST))

    def to_dict(self) -> dict:
        return {
            "error": {
                "code": self.error.code,
                "message": self.error.message,
                "reason": self.error.reason,
                "details": self.error.details,
            }
        }


async def client_error_handler(request: Request, exc: ClientError) -> JSONResponse:
    log = logger.warning if exc.status_code >= 500 else logger.info
    log(f"{request.method} {request.url.path} -> {exc.status_code} {exc.error.code}")
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = [
        {"loc": [str(part) for part in err.get("loc", ())], "msg": err.get("msg")}
        for err in exc.errors()
    ]
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={
            "error": {
                "code": "VALIDATION_ERROR",
                "message": "Invalid request parameters",
                "reason": None,
                "details": {"errors": errors},
            }
        },
    )


def setup_exception_handlers(app: FastAPI):
    app.add_exception_handler(ClientError, client_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
