# 📄 File: sportclub/shared/utils/__init__.py

# 🧭 Purpose (Layman Explanation):
# A small toolbox used across the club backend for writing logs and checking input values.

# 🧪 Purpose (Technical Summary):
# Initializes the utilities package and re-exports structured logging setup and the
# field validators used by the request schemas.

# 🔗 Dependencies:
# - logging: Structured JSON logging utilities
# - validators: Name, price and birthdate validation

# 🔄 Connected Modules / Calls From:
# Used by: sportclub.main, API schemas, middleware

"""
Shared Utilities Package

- Structured logging with JSON formatting and request id context
- Data validation functions for request payloads
"""

from .logging import get_logger, get_request_id, log_context, setup_logging
from .validators import (
    ValidationResult,
    ensure_valid,
    validate_birthdate,
    validate_decimal,
    validate_name,
    validate_price,
)

__all__ = [
    "get_logger",
    "get_request_id",
    "log_context",
    "setup_logging",
    "ValidationResult",
    "ensure_valid",
    "validate_birthdate",
    "validate_decimal",
    "validate_name",
    "validate_price",
]
