# 📄 File: sportclub/api/middleware/logging.py
# 🧭 Purpose (Layman Explanation):
# Keeps a diary of every request made to the club API: what was asked for, how it ended and how
# long it took, each entry tagged with a reference number.
# 🧪 Purpose (Technical Summary):
# Request logging middleware assigning a request id (or reusing X-Request-ID), binding it into the
# logging context for the duration of the request and logging method, path, status and duration.
# 🔗 Dependencies:
# FastAPI, starlette, sportclub.shared.utils.logging
# 🔄 Connected Modules / Calls From:
# sportclub.main (middleware registration)

import logging
import time
from typing import Set

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.types import ASGIApp

from sportclub.shared.utils.logging import log_context

logger = logging.getLogger(__name__)

REQUEST_ID_HEADER = "X-Request-ID"


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """
    Request logging middleware

    Every log line emitted while a request is processed carries its
    request id, which is also returned in the X-Request-ID header.
    """

    def __init__(self, app: ASGIApp, excluded_paths: Set[str] = None):
        super().__init__(app)
        self.excluded_paths = excluded_paths or {"/api/v1/health", "/favicon.ico"}

    async def dispatch(self, request: Request, call_next) -> Response:
        incoming_id = request.headers.get(REQUEST_ID_HEADER) or None

        with log_context(incoming_id) as request_id:
            request.state.request_id = request_id
            start_time = time.perf_counter()

            response = await call_next(request)

            duration_ms = (time.perf_counter() - start_time) * 1000
            response.headers[REQUEST_ID_HEADER] = request_id
            response.headers["X-Response-Time"] = f"{duration_ms:.1f}ms"

            if request.url.path not in self.excluded_paths:
                self._log_response(request, response.status_code, duration_ms)

            return response

    def _log_response(self, request: Request, status_code: int, duration_ms: float) -> None:
        message = f"{request.method} {request.url.path} -> {status_code} ({duration_ms:.1f}ms)"
        extra = {
            "method": request.method,
            "path": request.url.path,
            "status_code": status_code,
            "duration_ms": round(duration_ms, 1),
        }

        if status_code >= 500:
            logger.error(message, extra=extra)
        elif status_code >= 400:
            logger.warning(message, extra=extra)
        else:
            logger.info(message, extra=extra)
