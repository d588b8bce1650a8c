# 📄 File: sportclub/modules/sports/presentation/api/schemas/sport_schemas.py
# 🧭 Purpose (Layman Explanation):
# Defines what sport data the API accepts and returns.
#
# 🧪 Purpose (Technical Summary):
# Pydantic request/response schemas for the /sports endpoints with camelCase keys, price
# validation (positive, at most two decimals) and strict request bodies.
#
# 🔗 Dependencies:
# - pydantic
# - sportclub.shared.core.schemas, sportclub.shared.utils.validators
#
# 🔄 Connected Modules / Calls From:
# - sportclub.modules.sports.presentation.api.v1.sports
# - sportclub.modules.subscriptions.presentation.api.schemas (nested sport)

from decimal import Decimal
from typing import Optional

from pydantic import Field, field_serializer, field_validator, model_validator

from sportclub.modules.sports.domain.models.sport import AllowedGender, Sport
from sportclub.shared.core.schemas import CamelModel, RequestModel
from sportclub.shared.utils.validators import ensure_valid, validate_name, validate_price


class SportCreateRequest(RequestModel):
    """Sport creation payload."""

    name: str = Field(..., min_length=1, max_length=100)
    subscription_price: Decimal = Field(..., description="Positive, at most two decimal places")
    allowed_gender: AllowedGender

    @field_validator("name")
    @classmethod
    def check_name(cls, v):
        return ensure_valid(validate_name(v, label="name"), v)

    @field_validator("subscription_price")
    @classmethod
    def check_price(cls, v):
        return ensure_valid(validate_price(v), v)


class SportUpdateRequest(RequestModel):
    """Partial sport update; only keys present in the body are applied."""

    name: Optional[str] = Field(None, min_length=1, max_length=100)
    subscription_price: Optional[Decimal] = None
    allowed_gender: Optional[AllowedGender] = None

    @field_validator("name")
    @classmethod
    def check_name(cls, v):
        if v is None:
            return v
        return ensure_valid(validate_name(v, label="name"), v)

    @field_validator("subscription_price")
    @classmethod
    def check_price(cls, v):
        if v is None:
            return v
        return ensure_valid(validate_price(v), v)

    @model_validator(mode="after")
    def reject_nulls(self):
        for name in self.model_fields_set:
            if getattr(self, name) is None:
                raise ValueError(f"{name} cannot be null")
        return self

    def to_changes(self) -> dict:
        return self.model_dump(exclude_unset=True)


class SportResponse(CamelModel):
    """Sport information."""

    id: int
    name: str
    subscription_price: Decimal
    allowed_gender: AllowedGender

    @field_serializer("subscription_price")
    def serialize_price(self, value: Decimal) -> float:
        return float(value)

    @classmethod
    def from_domain(cls, sport: Sport) -> "SportResponse":
        return cls.model_validate(sport)
