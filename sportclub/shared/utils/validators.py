# 📄 File: sportclub/shared/utils/validators.py
# 🧭 Purpose (Layman Explanation):
# Small checkers that make sure the data typed into the club forms makes sense, like names that
# are not blank, prices that are positive with cents at most, and birthdates that are not in the future.
# 🧪 Purpose (Technical Summary):
# Reusable validation functions returning ValidationResult objects, plus a helper that turns a
# failed result into the ValueError pydantic field validators expect.
# 🔗 Dependencies:
# typing, datetime, decimal
# 🔄 Connected Modules / Calls From:
# Member and sport API schemas

from datetime import date
from decimal import Decimal, InvalidOperation
from typing import Any, List, Union

NAME_MAX_LENGTH = 100
PRICE_DECIMAL_PLACES = 2


class ValidationResult:
    """Result object for validation operations"""
    def __init__(self, is_valid: bool, errors: List[str] = None):
        self.is_valid = is_valid
        self.errors = errors or []

    def add_error(self, error: str):
        """Add validation error"""
        self.errors.append(error)
        self.is_valid = False


def ensure_valid(result: ValidationResult, value: Any) -> Any:
    """Return ``value`` when valid, otherwise raise ValueError with the first error."""
    if not result.is_valid:
        raise ValueError(result.errors[0])
    return value


# ==============================================================================
# TEXT VALIDATION
# ==============================================================================

def validate_name(name: str, label: str = "Name", max_length: int = NAME_MAX_LENGTH) -> ValidationResult:
    """
    Validate a person or sport name.

    Args:
        name: Text to validate (already stripped)
        label: Field label used in error messages
        max_length: Maximum allowed length

    Returns:
        ValidationResult with validation status and errors
    """
    result = ValidationResult(True)

    if not name or not name.strip():
        result.add_error(f"{label} must not be empty")
        return result

    if len(name) > max_length:
        result.add_error(f"{label} is too long (max {max_length} characters)")

    return result


# ==============================================================================
# NUMERIC VALIDATION
# ==============================================================================

def validate_decimal(value: Union[str, int, float, Decimal], min_value: Decimal = None,
                     exclusive_min: bool = False, decimal_places: int = 2) -> ValidationResult:
    """
    Validate decimal/numeric values

    Args:
        value: Value to validate
        min_value: Minimum allowed value
        exclusive_min: Treat min_value as a strict lower bound
        decimal_places: Maximum decimal places allowed

    Returns:
        ValidationResult with validation status and errors
    """
    result = ValidationResult(True)

    if value is None:
        result.add_error("Numeric value is required")
        return result

    try:
        decimal_value = Decimal(str(value))
    except (InvalidOperation, ValueError):
        result.add_error("Invalid numeric format")
        return result

    if not decimal_value.is_finite():
        result.add_error("Invalid numeric format")
        return result

    if min_value is not None:
        if exclusive_min and decimal_value <= min_value:
            result.add_error(f"Value must be greater than {min_value}")
        elif not exclusive_min and decimal_value < min_value:
            result.add_error(f"Value must be at least {min_value}")

    if decimal_places is not None:
        scale = decimal_value.normalize().as_tuple().exponent
        if scale < -decimal_places:
            result.add_error(f"Value cannot have more than {decimal_places} decimal places")

    return result


def validate_price(value: Union[str, int, float, Decimal]) -> ValidationResult:
    """Prices are strictly positive with at most two decimal places."""
    return validate_decimal(
        value,
        min_value=Decimal("0"),
        exclusive_min=True,
        decimal_places=PRICE_DECIMAL_PLACES
    )


# ==============================================================================
# DATE VALIDATION
# ==============================================================================

def validate_birthdate(value: date, today: date = None) -> ValidationResult:
    """
    Validate a birthdate: a calendar date that is not in the future.
    """
    result = ValidationResult(True)
    today = today or date.today()

    if value > today:
        result.add_error("Birthdate cannot be in the future")

    return result
