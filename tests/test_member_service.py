"""
Member Service facade over the in-memory store.
"""

from datetime import date

import pytest

from sportclub.modules.membership.domain.models.member import Gender
from sportclub.modules.membership.domain.services.member_service import MemberService
from sportclub.modules.membership.presentation.api.schemas.member_schemas import (
    MemberHierarchyResponse,
)
from sportclub.shared.core.exceptions import (
    BusinessRuleViolationError,
    CyclicHierarchyError,
    NotFoundError,
    ReferenceNotFoundError,
)

from conftest import member_payload


@pytest.fixture
def service(member_repository) -> MemberService:
    return MemberService(member_repository)


class TestMemberLifecycle:

    async def test_create_without_family_head(self, service):
        """John Doe joins as the root of his own family tree."""
        member = await service.create({
            "first_name": "John",
            "last_name": "Doe",
            "gender": Gender.MALE,
            "birthdate": date(1990, 1, 1),
        })

        assert member.id is not None
        assert member.family_head_id is None
        assert member.full_name == "John Doe"
        assert member.subscription_date is not None

    async def test_create_with_missing_head_inserts_nothing(self, service, member_repository):
        with pytest.raises(ReferenceNotFoundError):
            await service.create(member_payload(family_head_id=3))

        assert member_repository.rows == {}

    async def test_find_one_resolves_family(self, service):
        head = await service.create(member_payload(first_name="Head"))
        child = await service.create(member_payload(first_name="Child", family_head_id=head.id))
        other = await service.create(member_payload(first_name="Other", family_head_id=head.id))

        details = await service.find_one(head.id)
        assert details.member.id == head.id
        assert details.family_head is None
        assert [m.id for m in details.family_members] == [child.id, other.id]

        child_details = await service.find_one(child.id)
        assert child_details.family_head.id == head.id
        assert child_details.family_members == []

    async def test_find_one_missing(self, service):
        with pytest.raises(NotFoundError):
            await service.find_one(404)


class TestUpdate:

    async def test_plain_field_update(self, service):
        member = await service.create(member_payload())

        details = await service.update(member.id, {"first_name": "Augusta"})

        assert details.member.first_name == "Augusta"
        assert details.member.last_name == "Lovelace"

    async def test_family_head_change(self, service):
        head = await service.create(member_payload(first_name="Head"))
        member = await service.create(member_payload())

        details = await service.update(member.id, {"family_head_id": head.id})

        assert details.member.family_head_id == head.id
        assert details.family_head.id == head.id

    async def test_cycle_leaves_every_field_unchanged(self, service, member_repository):
        m1 = await service.create(member_payload(first_name="One"))
        m2 = await service.create(member_payload(first_name="Two", family_head_id=m1.id))

        with pytest.raises(CyclicHierarchyError):
            await service.update(m1.id, {"family_head_id": m2.id, "first_name": "Changed"})

        assert member_repository.rows[m1.id]["first_name"] == "One"
        assert member_repository.rows[m1.id]["family_head_id"] is None

    async def test_missing_new_head(self, service):
        member = await service.create(member_payload())

        with pytest.raises(ReferenceNotFoundError):
            await service.update(member.id, {"family_head_id": 999})

    async def test_update_missing_member(self, service):
        with pytest.raises(NotFoundError):
            await service.update(12, {"first_name": "Nobody"})

    @pytest.mark.parametrize("field", ["id", "subscription_date"])
    async def test_immutable_fields(self, service, field):
        member = await service.create(member_payload())

        with pytest.raises(BusinessRuleViolationError):
            await service.update(member.id, {field: 77})


class TestRemove:

    async def test_remove_reports_reassigned_count(self, service, member_repository):
        m1 = await service.create(member_payload())
        m2 = await service.create(member_payload(family_head_id=m1.id))
        await service.create(member_payload(family_head_id=m2.id))
        await service.create(member_payload(family_head_id=m2.id))

        result = await service.remove(m2.id)

        assert result.member.id == m2.id
        assert result.reassigned_count == 2
        assert m2.id not in member_repository.rows

    async def test_remove_twice(self, service):
        member = await service.create(member_payload())
        await service.remove(member.id)

        with pytest.raises(NotFoundError):
            await service.remove(member.id)


class TestFamilyScenario:
    """M1 <- M2 <- M3, then try to put M1 under M3 and remove M2."""

    async def test_cycle_then_cascading_removal(self, service, member_repository):
        m1 = await service.create(member_payload(first_name="M1"))
        m2 = await service.create(member_payload(first_name="M2", family_head_id=m1.id))
        m3 = await service.create(member_payload(first_name="M3", family_head_id=m2.id))

        with pytest.raises(CyclicHierarchyError):
            await service.family_hierarchy.set_parent(m1.id, m3.id)

        assert (await service.get_hierarchy(m3.id)).chain == [m3.id, m2.id, m1.id]

        result = await service.remove(m2.id)
        assert result.reassigned_count == 1

        assert member_repository.rows[m3.id]["family_head_id"] == m1.id
        m1_details = await service.find_one(m1.id)
        assert [m.id for m in m1_details.family_members] == [m3.id]
        assert (await service.get_hierarchy(m3.id)).chain == [m3.id, m1.id]

    async def test_successful_moves_never_create_self_reachability(self, service):
        members = [await service.create(member_payload()) for _ in range(5)]
        ids = [m.id for m in members]

        # Try every ordered pair; whatever succeeds must keep the forest acyclic
        for a in ids:
            for b in ids:
                try:
                    await service.family_hierarchy.set_parent(a, b)
                except CyclicHierarchyError:
                    continue
                chain = (await service.get_hierarchy(a)).chain
                assert chain.count(a) == 1

        for member_id in ids:
            chain = (await service.get_hierarchy(member_id)).chain
            assert len(chain) == len(set(chain))

    async def test_removal_preview_matches_removal(self, service):
        m1 = await service.create(member_payload())
        m2 = await service.create(member_payload(family_head_id=m1.id))
        await service.create(member_payload(family_head_id=m2.id))

        preview = await service.get_removal_preview(m2.id)
        result = await service.remove(m2.id)

        assert preview.reassigned_count == result.reassigned_count
        assert preview.new_family_head_id == m1.id


class TestHierarchyOverCorruptData:

    async def test_cycle_in_stored_rows_reports_no_root(self, service, member_repository):
        member_repository.seed(1, family_head_id=2)
        member_repository.seed(2, family_head_id=1)

        family_chain = await service.get_hierarchy(1)
        body = MemberHierarchyResponse.from_family_chain(family_chain).model_dump(by_alias=True)

        assert body == {"memberId": 1, "chain": [1, 2], "rootId": None, "depth": 1}
