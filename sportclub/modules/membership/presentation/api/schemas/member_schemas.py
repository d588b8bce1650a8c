# 📄 File: sportclub/modules/membership/presentation/api/schemas/member_schemas.py
# 🧭 Purpose (Layman Explanation):
# Defines what member data the API accepts and what it sends back, including a member's
# family head and dependents.
#
# 🧪 Purpose (Technical Summary):
# Pydantic request/response schemas for the /members endpoints with camelCase JSON keys,
# strict request bodies and conversion from the member domain read models.
#
# 🔗 Dependencies:
# - pydantic for schema validation and serialization
# - sportclub.shared.core.schemas (CamelModel, RequestModel)
# - sportclub.shared.utils.validators
#
# 🔄 Connected Modules / Calls From:
# - sportclub.modules.membership.presentation.api.v1.members

"""
Member API Schemas

Request Schemas:
- MemberCreateRequest: New member with optional family head
- MemberUpdateRequest: Partial update; familyHeadId null detaches the member

Response Schemas:
- MemberResponse: Member fields
- MemberDetailResponse: Member with resolved family head and family members
- MemberRemovalResponse: Removed member and number of reassigned dependents
- MemberHierarchyResponse: Ancestor chain
- RemovalPreviewResponse: What a removal would change
"""

from datetime import date, datetime
from typing import List, Optional

from pydantic import Field, field_validator, model_validator

from sportclub.modules.membership.domain.models.member import (
    FamilyChain,
    Gender,
    Member,
    MemberDetails,
    RemovalPreview,
    RemovalResult,
)
from sportclub.shared.core.schemas import CamelModel, RequestModel
from sportclub.shared.utils.validators import (
    ensure_valid,
    validate_birthdate,
    validate_name,
)


# =============================================================================
# REQUEST SCHEMAS
# =============================================================================

class MemberCreateRequest(RequestModel):
    """Member creation payload."""

    first_name: str = Field(..., min_length=1, max_length=100, description="First name")
    last_name: str = Field(..., min_length=1, max_length=100, description="Last name")
    gender: Gender = Field(..., description="male or female")
    birthdate: date = Field(..., description="Date of birth (YYYY-MM-DD)")
    family_head_id: Optional[int] = Field(None, gt=0, description="Family head member id")

    @field_validator("first_name", "last_name")
    @classmethod
    def check_names(cls, v, info):
        return ensure_valid(validate_name(v, label=info.field_name), v)

    @field_validator("birthdate")
    @classmethod
    def check_birthdate(cls, v):
        return ensure_valid(validate_birthdate(v), v)


class MemberUpdateRequest(RequestModel):
    """
    Partial member update.

    Only keys present in the body are applied. ``familyHeadId: null`` removes
    the family head; the other fields cannot be null.
    """

    first_name: Optional[str] = Field(None, min_length=1, max_length=100)
    last_name: Optional[str] = Field(None, min_length=1, max_length=100)
    gender: Optional[Gender] = None
    birthdate: Optional[date] = None
    family_head_id: Optional[int] = Field(None, gt=0)

    @field_validator("first_name", "last_name")
    @classmethod
    def check_names(cls, v, info):
        if v is None:
            return v
        return ensure_valid(validate_name(v, label=info.field_name), v)

    @field_validator("birthdate")
    @classmethod
    def check_birthdate(cls, v):
        if v is None:
            return v
        return ensure_valid(validate_birthdate(v), v)

    @model_validator(mode="after")
    def reject_null_required_fields(self):
        for name in ("first_name", "last_name", "gender", "birthdate"):
            if name in self.model_fields_set and getattr(self, name) is None:
                raise ValueError(f"{name} cannot be null")
        return self

    def to_changes(self) -> dict:
        """Fields explicitly sent by the client, keyed by domain field name."""
        return self.model_dump(exclude_unset=True)


# =============================================================================
# RESPONSE SCHEMAS
# =============================================================================

class MemberSummary(CamelModel):
    """Minimal member reference."""

    id: int
    first_name: str
    last_name: str


class MemberResponse(CamelModel):
    """Member information."""

    id: int
    first_name: str
    last_name: str
    gender: Gender
    birthdate: date
    subscription_date: datetime
    family_head_id: Optional[int] = None

    @classmethod
    def from_domain(cls, member: Member) -> "MemberResponse":
        return cls.model_validate(member.model_dump())


class MemberDetailResponse(MemberResponse):
    """Member with its family head and dependents."""

    family_head: Optional[MemberResponse] = None
    family_members: List[MemberResponse] = Field(default_factory=list)

    @classmethod
    def from_details(cls, details: MemberDetails) -> "MemberDetailResponse":
        return cls(
            **details.member.model_dump(),
            family_head=(
                MemberResponse.from_domain(details.family_head) if details.family_head else None
            ),
            family_members=[MemberResponse.from_domain(m) for m in details.family_members],
        )


class MemberRemovalResponse(CamelModel):
    """Removed member and how many dependents were handed to its family head."""

    member: MemberResponse
    reassigned_count: int

    @classmethod
    def from_result(cls, result: RemovalResult) -> "MemberRemovalResponse":
        return cls(
            member=MemberResponse.from_domain(result.member),
            reassigned_count=result.reassigned_count,
        )


class MemberHierarchyResponse(CamelModel):
    """
    Ancestor chain from the member up to the root of its family tree.

    ``root_id`` is null when the stored chain never reaches a member without
    a family head.
    """

    member_id: int
    chain: List[int]
    root_id: Optional[int] = None
    depth: int

    @classmethod
    def from_family_chain(cls, family_chain: FamilyChain) -> "MemberHierarchyResponse":
        return cls(
            member_id=family_chain.member_id,
            chain=family_chain.chain,
            root_id=family_chain.root_id,
            depth=family_chain.depth,
        )


class RemovalPreviewResponse(CamelModel):
    """Read-only impact of removing a member."""

    member: MemberSummary
    dependents: List[MemberSummary]
    new_family_head_id: Optional[int] = None
    reassigned_count: int

    @classmethod
    def from_preview(cls, preview: RemovalPreview) -> "RemovalPreviewResponse":
        return cls(
            member=MemberSummary.model_validate(preview.member),
            dependents=[MemberSummary.model_validate(d) for d in preview.dependents],
            new_family_head_id=preview.new_family_head_id,
            reassigned_count=preview.reassigned_count,
        )
