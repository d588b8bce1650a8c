"""
Field validators used by the request schemas.
"""

from datetime import date
from decimal import Decimal

import pytest

from sportclub.shared.utils.validators import (
    ensure_valid,
    validate_birthdate,
    validate_name,
    validate_price,
)


class TestValidateName:

    def test_valid_name(self):
        assert validate_name("Ada").is_valid

    @pytest.mark.parametrize("name", ["", "   "])
    def test_blank_name(self, name):
        result = validate_name(name, label="first_name")

        assert not result.is_valid
        assert "first_name" in result.errors[0]

    def test_too_long(self):
        assert not validate_name("x" * 101).is_valid


class TestValidatePrice:

    @pytest.mark.parametrize("value", ["10", "10.5", "0.01", Decimal("99.99"), 49.99])
    def test_valid_prices(self, value):
        assert validate_price(value).is_valid

    @pytest.mark.parametrize("value", ["0", "-1", "-0.01"])
    def test_price_must_be_positive(self, value):
        assert not validate_price(value).is_valid

    def test_at_most_two_decimal_places(self):
        result = validate_price("10.123")

        assert not result.is_valid
        assert "decimal places" in result.errors[0]

    @pytest.mark.parametrize("value", ["abc", "NaN", "Infinity"])
    def test_not_a_number(self, value):
        assert not validate_price(value).is_valid


class TestValidateBirthdate:

    def test_past_date(self):
        assert validate_birthdate(date(1990, 1, 1), today=date(2024, 1, 1)).is_valid

    def test_today_is_allowed(self):
        assert validate_birthdate(date(2024, 1, 1), today=date(2024, 1, 1)).is_valid

    def test_future_date(self):
        assert not validate_birthdate(date(2024, 1, 2), today=date(2024, 1, 1)).is_valid


def test_ensure_valid_raises_first_error():
    with pytest.raises(ValueError, match="must not be empty"):
        ensure_valid(validate_name(""), "")

    assert ensure_valid(validate_name("Bob"), "Bob") == "Bob"
