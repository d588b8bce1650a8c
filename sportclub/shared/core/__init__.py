"""
Core package for the Sport Club application.
Provides the domain exception hierarchy and base API schemas.
"""

from .exceptions import (
    SportClubException,
    NotFoundError,
    ReferenceNotFoundError,
    DuplicateResourceError,
    BusinessRuleViolationError,
    CyclicHierarchyError,
    DatabaseError,
    StoreUnavailableError,
    exception_to_dict,
    is_client_error,
)

__all__ = [
    "SportClubException",
    "NotFoundError",
    "ReferenceNotFoundError",
    "DuplicateResourceError",
    "BusinessRuleViolationError",
    "CyclicHierarchyError",
    "DatabaseError",
    "StoreUnavailableError",
    "exception_to_dict",
    "is_client_error",
]
