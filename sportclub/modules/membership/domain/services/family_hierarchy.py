# 📄 File: sportclub/modules/membership/domain/services/family_hierarchy.py
# 🧭 Purpose (Layman Explanation):
# Makes every change to family links: adding a member under a family head, moving a member to
# another family head, and removing a member while handing their dependents to the next head up.
# 🧪 Purpose (Technical Summary):
# Hierarchy mutator over the parent-pointer forest. Validates references and cycles before any
# write, performs cascading reassignment of dependents on delete and offers a read-only preview.
# 🔗 Dependencies:
# MemberRepository, HierarchyValidator, shared exceptions
# 🔄 Connected Modules / Calls From:
# MemberService (facade)

import logging
from typing import Any, Dict, Optional

from sportclub.shared.core.exceptions import (
    CyclicHierarchyError,
    NotFoundError,
    ReferenceNotFoundError,
)

from ..models.member import Member, RemovalPreview
from ..repositories.member_repository import MemberRepository
from .hierarchy_validator import HierarchyValidator

logger = logging.getLogger(__name__)


class FamilyHierarchyService:
    """
    Domain service for every operation that touches family head links.

    All checks run before the first write of an operation. The cascading
    delete writes twice (reassign dependents, then delete) and relies on the
    request transaction to make both steps a single unit.
    """

    def __init__(
        self,
        member_repository: MemberRepository,
        validator: Optional[HierarchyValidator] = None
    ):
        self.member_repository = member_repository
        self.validator = validator or HierarchyValidator(member_repository)

    async def _require_family_head(self, family_head_id: int) -> Member:
        family_head = await self.member_repository.get_by_id(family_head_id)
        if family_head is None:
            raise ReferenceNotFoundError(
                f"Family head with ID {family_head_id} not found",
                field="family_head_id",
                reference_id=family_head_id
            )
        return family_head

    async def _require_member(self, member_id: int) -> Member:
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
        Create a member, optionally under an existing family head.

        A new id cannot be anybody's ancestor yet, so no cycle check is needed.

        Raises:
            ReferenceNotFoundError: If family_head_id points at no member
        """
        family_head_id = fields.get("family_head_id")
        if family_head_id is not None:
            await self._require_family_head(family_head_id)

        member = await self.member_repository.create(fields)
        logger.info(f"Created member {member.id} (family head: {member.family_head_id})")
        return member

    async def set_parent(self, member_id: int, proposed_parent_id: Optional[int]) -> None:
        """
        Point a member at a new family head.

        ``None`` detaches the member, making it the root of its own tree.

        Raises:
            ReferenceNotFoundError: If the proposed family head does not exist
            CyclicHierarchyError: If the member would become its own ancestor
        """
        if proposed_parent_id is None:
            await self.member_repository.update_fields(member_id, {"family_head_id": None})
            logger.info(f"Detached member {member_id} from its family head")
            return

        # 1. Reference must exist
        await self._require_family_head(proposed_parent_id)

        # 2. Edge must not close a cycle
        if await self.validator.would_create_cycle(member_id, proposed_parent_id):
            logger.warning(
                f"Rejected family head {proposed_parent_id} for member {member_id}: cycle"
            )
            raise CyclicHierarchyError(member_id=member_id, family_head_id=proposed_parent_id)

        # 3. Write
        await self.member_repository.update_fields(
            member_id, {"family_head_id": proposed_parent_id}
        )
        logger.info(f"Member {member_id} now has family head {proposed_parent_id}")

    async def delete(self, member_id: int) -> int:
        """
        Delete a member and reparent its dependents to the member's own family head.

        Dependents of a root member become roots. Re-running on an already
        deleted id raises NotFoundError without touching anything.

        Returns:
            Number of dependents that were reassigned

        Raises:
            NotFoundError: If the member does not exist
        """
        # 1. Member must exist
        member = await self._require_member(member_id)

        # 2. Reassign dependents to the next head up
        dependents = await self.member_repository.find_by_field("family_head_id", member_id)
        for dependent in dependents:
            await self.member_repository.update_fields(
                dependent.id, {"family_head_id": member.family_head_id}
            )

        # 3. Remove the member itself
        await self.member_repository.delete(member_id)

        logger.info(
            f"Deleted member {member_id}, reassigned {len(dependents)} dependents "
            f"to {member.family_head_id}"
        )
        return len(dependents)

    async def preview_removal(self, member_id: int) -> RemovalPreview:
        """
        Describe what delete() would do without changing anything.

        Raises:
            NotFoundError: If the member does not exist
        """
        member = await self._require_member(member_id)
        dependents = await self.member_repository.find_by_field("family_head_id", member_id)

        return RemovalPreview(
            member=member,
            dependents=dependents,
            new_family_head_id=member.family_head_id
        )
