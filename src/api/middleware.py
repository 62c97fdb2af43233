"""Request logging middleware"""

import logging
import time
from typing import Callable
from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

logger = logging.getLogger(__name__)


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        start_time = time.time()
        try:
            response = await call_next(request)
        except Exception:
            logger.error(
                f"{request.method} {request.url.path} failed after {time.time() - start_time:.4f}s",
                exc_info=True,
            )
            raise

        duration = time.time() - start_time
        log = logger.info if response.status_code < 400 else logger.warning
        log(f"{request.method} {request.url.path} -> {response.status_code} ({duration:.4f}s)")
        return response
