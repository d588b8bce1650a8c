# 📄 File: sportclub/modules/membership/domain/services/member_service.py
# 🧭 Purpose (Layman Explanation):
# The single entry point the website talks to for members: add a member, look one up with their
# family, change details, or remove them.
# 🧪 Purpose (Technical Summary):
# Member Service facade composing the MemberRepository, HierarchyValidator and
# FamilyHierarchyService. Resolves family links for reads and routes family head changes through
# full validation before any other field is written.
# 🔗 Dependencies:
# Domain models, MemberRepository, hierarchy services, shared exceptions
# 🔄 Connected Modules / Calls From:
# sportclub.modules.membership.presentation.api.v1.members

import logging
from typing import Any, Dict

from sportclub.shared.core.exceptions import BusinessRuleViolationError, NotFoundError

from ..models.member import FamilyChain, Member, MemberDetails, RemovalPreview, RemovalResult
from ..repositories.member_repository import MemberRepository
from .family_hierarchy import FamilyHierarchyService
from .hierarchy_validator import HierarchyValidator

logger = logging.getLogger(__name__)

# Set by the store on creation, never changed afterwards
IMMUTABLE_FIELDS = frozenset({"id", "subscription_date"})


class MemberService:
    """
    Domain service exposing the member operations used by the API layer.

    - create / find_one / update / remove
    - get_hierarchy: ancestor chain of a member
    - get_removal_preview: read-only impact of a removal
    """

    def __init__(self, member_repository: MemberRepository):
        self.member_repository = member_repository
        self.validator = HierarchyValidator(member_repository)
        self.family_hierarchy = FamilyHierarchyService(member_repository, self.validator)

    async def _get_member_or_404(self, member_id: int) -> Member:
        member = await self.member_repository.get_by_id(member_id)
        if member is None:
            raise NotFoundError(
                f"Member with ID {member_id} not found",
                resource_type="member",
                resource_id=member_id
            )
        return member

    async def create(self, fields: Dict[str, Any]) -> Member:
        """
        Create a new member.

        Raises:
            ReferenceNotFoundError: If family_head_id points at no member
        """
        logger.info(f"Creating member: {fields.get('first_name')} {fields.get('last_name')}")
        return await self.family_hierarchy.create(fields)

    async def find_one(self, member_id: int) -> MemberDetails:
        """
        Get a member with its family head and dependents.

        Raises:
            NotFoundError: If the member does not exist
        """
        member = await self._get_member_or_404(member_id)

        family_head = None
        if member.family_head_id is not None:
            family_head = await self.member_repository.get_by_id(member.family_head_id)

        family_members = await self.member_repository.find_by_field("family_head_id", member_id)

        return MemberDetails(
            member=member,
            family_head=family_head,
            family_members=family_members
        )

    async def update(self, member_id: int, fields: Dict[str, Any]) -> MemberDetails:
        """
        Update a member.

        A family head change is validated and written first; the remaining
        fields are applied only after it succeeds.

        Raises:
            NotFoundError: If the member does not exist
            ReferenceNotFoundError: If the new family head does not exist
            CyclicHierarchyError: If the new family head descends from the member
            BusinessRuleViolationError: If an immutable field is included
        """
        # 1. Member must exist
        await self._get_member_or_404(member_id)

        changes = dict(fields)
        blocked = IMMUTABLE_FIELDS.intersection(changes)
        if blocked:
            raise BusinessRuleViolationError(
                f"Fields cannot be updated: {', '.join(sorted(blocked))}",
                rule="immutable_member_fields",
                context={"fields": sorted(blocked)}
            )

        # 2. Family head goes through full validation before anything else
        if "family_head_id" in changes:
            await self.family_hierarchy.set_parent(member_id, changes.pop("family_head_id"))

        # 3. Remaining fields apply unconditionally
        if changes:
            await self.member_repository.update_fields(member_id, changes)
            logger.info(f"Updated member {member_id}: {sorted(changes)}")

        return await self.find_one(member_id)

    async def remove(self, member_id: int) -> RemovalResult:
        """
        Remove a member, handing its dependents to its own family head.

        Raises:
            NotFoundError: If the member does not exist
        """
        member = await self._get_member_or_404(member_id)
        reassigned = await self.family_hierarchy.delete(member_id)
        return RemovalResult(member=member, reassigned_count=reassigned)

    async def get_hierarchy(self, member_id: int) -> FamilyChain:
        """Get the ids from a member up to the root of its family tree."""
        await self._get_member_or_404(member_id)
        return await self.validator.family_chain(member_id)

    async def get_removal_preview(self, member_id: int) -> RemovalPreview:
        return await self.family_hierarchy.preview_removal(member_id)
