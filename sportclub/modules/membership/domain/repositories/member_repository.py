# 📄 File: sportclub/modules/membership/domain/repositories/member_repository.py
# 🧭 Purpose (Layman Explanation):
# Lists the things we can ask of the member storage: find a member, read a few of their details,
# find everyone with a given family head, add, change and remove members.
# 🧪 Purpose (Technical Summary):
# Abstract repository interface for the Member Store. Implementations raise no business-rule
# errors; I/O failures and call timeouts surface as StoreUnavailableError.
# 🔗 Dependencies:
# - abc (Abstract Base Classes)
# - Member domain model
# 🔄 Connected Modules / Calls From:
# - HierarchyValidator, FamilyHierarchyService, MemberService (business logic)
# - SubscriptionService (member existence checks)
# - MemberRepositoryImpl (concrete implementation)

from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional, Sequence

from sportclub.modules.membership.domain.models.member import Member


class MemberRepository(ABC):
    """
    Abstract repository interface for member data access operations.

    Every navigation between members (family head and dependents) goes
    through these lookups; members never hold references to each other.
    """

    @abstractmethod
    async def get_by_id(self, member_id: int) -> Optional[Member]:
        """Get member by ID, or None when absent."""
        pass

    @abstractmethod
    async def get_fields(self, member_id: int, fields: Sequence[str]) -> Optional[Dict[str, Any]]:
        """
        Get a subset of a member's fields.

        Used by chain walks that only need ``family_head_id``.

        Returns:
            Dict of the requested fields, or None when the member is absent
        """
        pass

    @abstractmethod
    async def find_by_field(self, field_name: str, value: Any) -> List[Member]:
        """Get all members whose ``field_name`` equals ``value`` (None matches unset)."""
        pass

    @abstractmethod
    async def create(self, fields: Dict[str, Any]) -> Member:
        """Insert a member; the store assigns ``id`` and ``subscription_date``."""
        pass

    @abstractmethod
    async def update_fields(self, member_id: int, fields: Dict[str, Any]) -> None:
        """Update the given fields. Does nothing when the member is absent."""
        pass

    @abstractmethod
    async def delete(self, member_id: int) -> None:
        """Delete a member record."""
        pass
