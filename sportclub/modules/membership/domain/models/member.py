# 📄 File: sportclub/modules/membership/domain/models/member.py
# 🧭 Purpose (Layman Explanation):
# Describes what a club member is (name, gender, birthdate, when they joined) and who their
# family head is, plus the shapes of the answers we give when looking up or removing members.
# 🧪 Purpose (Technical Summary):
# Pydantic domain models for the Member entity and the composite read models returned by the
# member service (details with resolved family links, removal result, removal preview).
# 🔗 Dependencies:
# pydantic, datetime, typing, enum
# 🔄 Connected Modules / Calls From:
# member_repository.py, hierarchy services, member_repository_impl.py, member API schemas

from datetime import date, datetime
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class Gender(str, Enum):
    """Member gender enumeration"""
    MALE = "male"
    FEMALE = "female"


class Member(BaseModel):
    """
    Member domain model.

    A member optionally points at another member through ``family_head_id``.
    These pointers form a forest: every member has at most one family head and
    any number of dependents. Dependents are never stored on the member, they
    are found by looking up who points at it.
    """

    model_config = ConfigDict(from_attributes=True, validate_assignment=True)

    # Identity, assigned by the store
    id: int

    first_name: str = Field(..., min_length=1)
    last_name: str = Field(..., min_length=1)
    gender: Gender
    birthdate: date

    # Set once on creation
    subscription_date: datetime

    # Parent pointer in the family forest
    family_head_id: Optional[int] = None

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"

    def is_family_root(self) -> bool:
        """True when the member has no family head."""
        return self.family_head_id is None


class MemberDetails(BaseModel):
    """A member with its family head and dependents resolved."""

    member: Member
    family_head: Optional[Member] = None
    family_members: List[Member] = Field(default_factory=list)


class RemovalResult(BaseModel):
    """Outcome of removing a member."""

    member: Member
    reassigned_count: int = 0


class RemovalPreview(BaseModel):
    """Read-only view of what removing a member would change."""

    member: Member
    dependents: List[Member] = Field(default_factory=list)
    new_family_head_id: Optional[int] = None

    @property
    def reassigned_count(self) -> int:
        return len(self.dependents)


class FamilyChain(BaseModel):
    """
    Ancestor ids of a member, nearest first.

    ``root_id`` is only set when the walk ended on a member without a family
    head. A walk cut short by a revisited id or a dangling pointer leaves it
    unset.
    """

    member_id: int
    chain: List[int] = Field(default_factory=list)
    root_id: Optional[int] = None

    @property
    def depth(self) -> int:
        return max(len(self.chain) - 1, 0)
