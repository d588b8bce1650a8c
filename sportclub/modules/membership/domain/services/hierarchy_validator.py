# 📄 File: sportclub/modules/membership/domain/services/hierarchy_validator.py
# 🧭 Purpose (Layman Explanation):
# Checks that a family tree stays a tree: nobody may end up being their own (great-)grandparent
# when we change who their family head is.
# 🧪 Purpose (Technical Summary):
# Pure cycle detection over the parent-pointer forest stored in the MemberRepository. Walks the
# ancestor chain iteratively with a visited set, one projected store read per hop.
# 🔗 Dependencies:
# MemberRepository (get_fields projection)
# 🔄 Connected Modules / Calls From:
# FamilyHierarchyService.set_parent, MemberService.get_hierarchy

import logging
from typing import List, Optional, Set

from ..models.member import FamilyChain
from ..repositories.member_repository import MemberRepository

logger = logging.getLogger(__name__)

_PARENT_FIELD = "family_head_id"


class HierarchyValidator:
    """
    Decides whether a proposed family head assignment would close a cycle.

    Both walks are loops over a visited set, so they terminate after at most
    one read per distinct ancestor even if the stored data already contains a
    cycle. Judging existing corruption is not this class's job; it only
    judges the new edge.
    """

    def __init__(self, member_repository: MemberRepository):
        self.member_repository = member_repository

    async def _parent_of(self, member_id: int) -> Optional[dict]:
        return await self.member_repository.get_fields(member_id, [_PARENT_FIELD])

    async def would_create_cycle(self, member_id: int, proposed_parent_id: int) -> bool:
        """
        Check whether setting ``member_id.family_head_id = proposed_parent_id``
        would make ``member_id`` its own ancestor.

        Args:
            member_id: Member whose family head would change
            proposed_parent_id: Candidate family head

        Returns:
            True if the edge would create a cycle
        """
        # A member can never head itself
        if member_id == proposed_parent_id:
            return True

        visited: Set[int] = set()
        current = proposed_parent_id

        while current is not None and current not in visited:
            visited.add(current)

            row = await self._parent_of(current)
            if row is None:
                # Chain runs into a missing member, nothing above it
                return False

            parent_id = row.get(_PARENT_FIELD)
            if parent_id == member_id:
                logger.debug(
                    f"Family head {proposed_parent_id} descends from member {member_id}, rejecting"
                )
                return True

            current = parent_id

        return False

    async def family_chain(self, member_id: int) -> FamilyChain:
        """
        Walk from ``member_id`` towards the root of its family tree.

        The root is only reported when the walk reaches a member without a
        family head.
        """
        chain: List[int] = []
        visited: Set[int] = set()
        current: Optional[int] = member_id
        root_id: Optional[int] = None

        while current is not None and current not in visited:
            visited.add(current)

            row = await self._parent_of(current)
            if row is None:
                break

            chain.append(current)
            parent_id = row.get(_PARENT_FIELD)
            if parent_id is None:
                root_id = current
            current = parent_id

        if chain and root_id is None:
            logger.warning(f"Ancestor walk from member {member_id} stopped before reaching a root")

        return FamilyChain(member_id=member_id, chain=chain, root_id=root_id)

    async def ancestor_chain(self, member_id: int) -> List[int]:
        """
        Get the ids from ``member_id`` up to the root of its family tree.

        Returns:
            Ordered ids starting with ``member_id``; empty when the member is absent
        """
        return (await self.family_chain(member_id)).chain
