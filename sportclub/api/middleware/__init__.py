# 📄 File: sportclub/api/middleware/__init__.py
# 🧭 Purpose (Layman Explanation):
# Helpers that wrap every request: one writes it in the log with a reference number, the other
# turns unexpected failures into tidy error messages.
# 🧪 Purpose (Technical Summary):
# Package initialization for HTTP middleware components.
# 🔗 Dependencies:
# starlette BaseHTTPMiddleware
# 🔄 Connected Modules / Calls From:
# sportclub.main (middleware registration)

"""
Middleware Stack Order (outermost first):
    1. RequestLoggingMiddleware (assigns request id, logs every request)
    2. ErrorHandlingMiddleware (turns escaped errors into JSON envelopes)
    3. Application routes
"""

from .error_handling import ErrorHandlingMiddleware
from .logging import RequestLoggingMiddleware

__all__ = ["ErrorHandlingMiddleware", "RequestLoggingMiddleware"]
