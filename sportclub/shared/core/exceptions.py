# 📄 File: sportclub/shared/core/exceptions.py
# 🧭 Purpose (Layman Explanation):
# This file defines all the special error types the sport club backend uses to communicate
# what went wrong in a clear, organized way instead of generic error messages.
# 🧪 Purpose (Technical Summary):
# Custom exception hierarchy providing specific error types with HTTP status codes,
# error details, and proper serialization for API responses and error handling.
# 🔗 Dependencies:
# FastAPI HTTPException, typing, HTTP status constants
# 🔄 Connected Modules / Calls From:
# Domain services, repository implementations, middleware, application exception handler

from typing import Any, Dict, Optional
from fastapi import HTTPException, status


class SportClubException(Exception):
    """
    Base exception class for the Sport Club application.
    All custom exceptions should inherit from this class.
    """

    def __init__(
        self,
        message: str,
        status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR,
        details: Optional[Dict[str, Any]] = None,
        error_code: Optional[str] = None
    ):
        self.message = message
        self.status_code = status_code
        self.details = details or {}
        self.error_code = error_code or self.__class__.__name__.upper()
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary format."""
        return {
            "error": {
                "code": self.error_code,
                "message": self.message,
                "details": self.details,
                "status_code": self.status_code
            }
        }


# =============================================================================
# LOOKUP EXCEPTIONS
# =============================================================================

class NotFoundError(SportClubException):
    """
    Exception raised when the target resource of a read, update or delete
    does not exist.
    """

    def __init__(
        self,
        message: str = "Resource not found",
        resource_type: Optional[str] = None,
        resource_id: Optional[Any] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        if not details:
            details = {}

        if resource_type:
            details["resource_type"] = resource_type
        if resource_id is not None:
            details["resource_id"] = resource_id

        super().__init__(
            message=message,
            status_code=status.HTTP_404_NOT_FOUND,
            details=details,
            error_code="NOT_FOUND"
        )


class ReferenceNotFoundError(SportClubException):
    """
    Exception raised when a request references another record that does not exist,
    e.g. a family head id pointing at no member.
    """

    def __init__(
        self,
        message: str = "Referenced resource not found",
        field: Optional[str] = None,
        reference_id: Optional[Any] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        if not details:
            details = {}

        if field:
            details["field"] = field
        if reference_id is not None:
            details["reference_id"] = reference_id

        super().__init__(
            message=message,
            status_code=status.HTTP_400_BAD_REQUEST,
            details=details,
            error_code="REFERENCE_NOT_FOUND"
        )


class DuplicateResourceError(SportClubException):
    """
    Exception raised when attempting to create duplicate resources.
    Used for unique constraint violations, duplicate entries, etc.
    """

    def __init__(
        self,
        message: str = "Resource already exists",
        resource_type: Optional[str] = None,
        field: Optional[str] = None,
        value: Optional[Any] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        if not details:
            details = {}

        if resource_type:
            details["resource_type"] = resource_type
        if field:
            details["field"] = field
        if value is not None:
            details["value"] = str(value)

        super().__init__(
            message=message,
            status_code=status.HTTP_409_CONFLICT,
            details=details,
            error_code="DUPLICATE_RESOURCE"
        )


# =============================================================================
# BUSINESS LOGIC EXCEPTIONS
# =============================================================================

class BusinessRuleViolationError(SportClubException):
    """
    Exception raised when business rules are violated.
    Used for domain-specific rule enforcement.
    """

    def __init__(
        self,
        message: str = "Business rule violation",
        rule: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
        details: Optional[Dict[str, Any]] = None,
        error_code: str = "BUSINESS_RULE_VIOLATION"
    ):
        if not details:
            details = {}

        if rule:
            details["rule"] = rule
        if context:
            details["context"] = context

        super().__init__(
            message=message,
            status_code=status.HTTP_400_BAD_REQUEST,
            details=details,
            error_code=error_code
        )


class CyclicHierarchyError(BusinessRuleViolationError):
    """
    Exception raised when a family head assignment would make a member
    its own ancestor.
    """

    def __init__(
        self,
        member_id: Any,
        family_head_id: Any,
        message: Optional[str] = None
    ):
        if not message:
            message = (
                "Cannot set family head: this would create a circular dependency "
                "in the family hierarchy"
            )

        super().__init__(
            message=message,
            rule="family_hierarchy_acyclic",
            details={"member_id": member_id, "family_head_id": family_head_id},
            error_code="CYCLIC_HIERARCHY"
        )


# =============================================================================
# DATABASE & INFRASTRUCTURE EXCEPTIONS
# =============================================================================

class DatabaseError(SportClubException):
    """
    Exception raised for database operation failures.
    Used for connection issues, query failures, etc.
    """

    def __init__(
        self,
        message: str = "Database error",
        operation: Optional[str] = None,
        table: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
        status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR,
        error_code: str = "DATABASE_ERROR"
    ):
        if not details:
            details = {}

        if operation:
            details["operation"] = operation
        if table:
            details["table"] = table

        super().__init__(
            message=message,
            status_code=status_code,
            details=details,
            error_code=error_code
        )


class StoreUnavailableError(DatabaseError):
    """
    Exception raised when the backing store fails for reasons unrelated to
    business rules (connectivity, driver errors, call timeouts).
    Callers may retry; the core never does.
    """

    def __init__(
        self,
        message: str = "Backing store unavailable",
        operation: Optional[str] = None,
        table: Optional[str] = None,
        timed_out: bool = False,
        details: Optional[Dict[str, Any]] = None
    ):
        if not details:
            details = {}
        if timed_out:
            details["timed_out"] = True

        super().__init__(
            message=message,
            operation=operation,
            table=table,
            details=details,
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            error_code="STORE_UNAVAILABLE"
        )


# =============================================================================
# EXCEPTION UTILITIES
# =============================================================================

def exception_to_dict(exception: Exception) -> Dict[str, Any]:
    """
    Convert any exception to dictionary format.

    Args:
        exception: Exception to convert

    Returns:
        Dict: Exception data as dictionary
    """
    if isinstance(exception, SportClubException):
        return exception.to_dict()

    return {
        "error": {
            "code": exception.__class__.__name__.upper(),
            "message": str(exception),
            "details": {},
            "status_code": 500
        }
    }


def is_client_error(exception: Exception) -> bool:
    """
    Check if exception represents a client error (4xx).

    Args:
        exception: Exception to check

    Returns:
        bool: True if client error, False otherwise
    """
    if isinstance(exception, (SportClubException, HTTPException)):
        return 400 <= exception.status_code < 500

    return False
