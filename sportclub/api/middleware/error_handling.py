# 📄 File: sportclub/api/middleware/error_handling.py
# 🧭 Purpose (Layman Explanation):
# Catches any error that slips through the rest of the app and turns it into a tidy error message
# instead of a crash, always with a reference number for finding it in the logs.
# 🧪 Purpose (Technical Summary):
# Global error handling middleware converting unhandled exceptions into the standard JSON error
# envelope with request correlation; domain exceptions keep their status code and error code.
# 🔗 Dependencies:
# FastAPI, starlette, sportclub.shared.core.exceptions, sportclub.shared.utils.logging
# 🔄 Connected Modules / Calls From:
# sportclub.main (middleware registration)

import logging
import traceback
from datetime import datetime, timezone
from typing import Any, Dict, Tuple

from fastapi import Request, Response
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.types import ASGIApp

from sportclub.shared.config.settings import get_settings
from sportclub.shared.core.exceptions import (
    SportClubException,
    exception_to_dict,
    is_client_error,
)
from sportclub.shared.utils.logging import get_request_id

logger = logging.getLogger(__name__)


class ErrorHandlingMiddleware(BaseHTTPMiddleware):
    """
    Global error handling middleware for the Sport Club API

    Exceptions handled by the application's exception handlers never reach
    this middleware; it only sees what escaped them (unexpected errors and
    failures raised while closing the request's database session).
    """

    def __init__(self, app: ASGIApp):
        super().__init__(app)
        self.settings = get_settings()

    async def dispatch(self, request: Request, call_next) -> Response:
        try:
            return await call_next(request)
        except Exception as exc:
            return self._handle_exception(request, exc)

    def _handle_exception(self, request: Request, exc: Exception) -> JSONResponse:
        request_id = getattr(request.state, "request_id", None) or get_request_id() or None
        status_code, error = self._get_error_info(exc)

        if is_client_error(exc):
            logger.warning(f"{request.method} {request.url.path} failed: {error['message']}")
        else:
            logger.error(
                f"Unhandled error on {request.method} {request.url.path}: {exc}",
                exc_info=True
            )

        error_response = {
            "error": {
                "code": error["code"],
                "message": error["message"],
                "details": error["details"],
                "timestamp": datetime.now(timezone.utc).isoformat(),
                "request_id": request_id,
            }
        }

        # Add debug information in development
        if self.settings.DEBUG and self.settings.is_development:
            error_response["error"]["debug"] = {
                "exception_type": type(exc).__name__,
                "traceback": traceback.format_exc().split("\n"),
            }

        response = JSONResponse(status_code=status_code, content=error_response)
        if request_id:
            response.headers["X-Request-ID"] = request_id
        response.headers["X-Error-Code"] = error["code"]
        return response

    def _get_error_info(self, exc: Exception) -> Tuple[int, Dict[str, Any]]:
        """
        Map an exception to its status code and error body.

        Unknown exceptions are reported as a generic 500 without their message.
        """
        if isinstance(exc, SportClubException):
            return exc.status_code, exception_to_dict(exc)["error"]

        return 500, {
            "code": "INTERNAL_SERVER_ERROR",
            "message": "An internal server error occurred",
            "details": {},
        }
