"""
SQLAlchemy repositories against an in-memory SQLite database.
"""

import asyncio
from datetime import date, timedelta
from decimal import Decimal

import pytest
from sqlalchemy.exc import OperationalError

from sportclub.modules.membership.domain.models.member import Gender
from sportclub.modules.membership.infrastructure.database.member_repository_impl import (
    MemberRepositoryImpl,
)
from sportclub.modules.sports.infrastructure.database.sport_repository_impl import SportRepositoryImpl
from sportclub.modules.subscriptions.domain.models.subscription import SubscriptionType
from sportclub.modules.subscriptions.infrastructure.database.subscription_repository_impl import (
    SubscriptionRepositoryImpl,
)
from sportclub.shared.core.exceptions import DuplicateResourceError, StoreUnavailableError

from conftest import member_payload


class TestMemberRepositoryImpl:

    async def test_create_assigns_id_and_subscription_date(self, db_session):
        repository = MemberRepositoryImpl(db_session)

        member = await repository.create(member_payload())

        assert member.id is not None
        assert member.subscription_date is not None
        assert member.gender == Gender.FEMALE
        assert await repository.get_by_id(member.id) == member

    async def test_timestamps_read_back_in_utc(self, db_session):
        repository = MemberRepositoryImpl(db_session)
        member = await repository.create(member_payload())

        db_session.expire_all()
        stored = await repository.get_by_id(member.id)

        assert stored.subscription_date.tzinfo is not None
        assert stored.subscription_date.utcoffset() == timedelta(0)
        assert stored.subscription_date == member.subscription_date

    async def test_get_by_id_absent(self, db_session):
        assert await MemberRepositoryImpl(db_session).get_by_id(123) is None

    async def test_get_fields_projection(self, db_session):
        repository = MemberRepositoryImpl(db_session)
        head = await repository.create(member_payload())
        child = await repository.create(member_payload(family_head_id=head.id))

        assert await repository.get_fields(child.id, ["family_head_id"]) == {"family_head_id": head.id}
        assert await repository.get_fields(head.id, ["family_head_id", "first_name"]) == {
            "family_head_id": None,
            "first_name": "Ada",
        }
        assert await repository.get_fields(999, ["family_head_id"]) is None

    async def test_find_by_field(self, db_session):
        repository = MemberRepositoryImpl(db_session)
        head = await repository.create(member_payload())
        first = await repository.create(member_payload(family_head_id=head.id))
        second = await repository.create(member_payload(family_head_id=head.id))

        dependents = await repository.find_by_field("family_head_id", head.id)
        roots = await repository.find_by_field("family_head_id", None)

        assert [m.id for m in dependents] == [first.id, second.id]
        assert [m.id for m in roots] == [head.id]

    async def test_unknown_field_is_rejected(self, db_session):
        repository = MemberRepositoryImpl(db_session)

        with pytest.raises(ValueError):
            await repository.find_by_field("password", "x")

    async def test_update_fields(self, db_session):
        repository = MemberRepositoryImpl(db_session)
        member = await repository.create(member_payload())

        await repository.update_fields(member.id, {"last_name": "King", "gender": Gender.MALE})

        updated = await repository.get_by_id(member.id)
        assert updated.last_name == "King"
        assert updated.gender == Gender.MALE

    async def test_update_absent_member_is_silent(self, db_session):
        repository = MemberRepositoryImpl(db_session)

        await repository.update_fields(404, {"first_name": "Ghost"})

        assert await repository.get_by_id(404) is None

    async def test_delete(self, db_session):
        repository = MemberRepositoryImpl(db_session)
        member = await repository.create(member_payload())

        await repository.delete(member.id)

        assert await repository.get_by_id(member.id) is None


class TestStoreFailures:

    async def test_timeout_surfaces_as_store_unavailable(self, db_session):
        repository = MemberRepositoryImpl(db_session, timeout=0.01)

        with pytest.raises(StoreUnavailableError) as exc_info:
            await repository._guard("get_by_id", asyncio.sleep(1))

        assert exc_info.value.status_code == 503
        assert exc_info.value.details["timed_out"] is True
        assert exc_info.value.details["table"] == "members"

    async def test_driver_error_surfaces_as_store_unavailable(self):
        class BrokenSession:
            async def execute(self, statement):
                raise OperationalError("SELECT 1", {}, Exception("connection refused"))

        repository = MemberRepositoryImpl(BrokenSession(), timeout=1)

        with pytest.raises(StoreUnavailableError) as exc_info:
            await repository.get_by_id(1)

        assert exc_info.value.error_code == "STORE_UNAVAILABLE"
        assert exc_info.value.details["operation"] == "get_by_id"


class TestSportRepositoryImpl:

    async def test_create_and_list_ordered_by_name(self, db_session):
        repository = SportRepositoryImpl(db_session)
        await repository.create({"name": "Tennis", "subscription_price": Decimal("40.00"), "allowed_gender": "mix"})
        await repository.create({"name": "Boxing", "subscription_price": Decimal("25.50"), "allowed_gender": "male"})

        sports = await repository.list_all()

        assert [s.name for s in sports] == ["Boxing", "Tennis"]
        assert sports[0].subscription_price == Decimal("25.50")

    async def test_unique_name_violation_is_a_duplicate(self, db_session):
        repository = SportRepositoryImpl(db_session)
        await repository.create({"name": "Judo", "subscription_price": Decimal("30"), "allowed_gender": "mix"})

        with pytest.raises(DuplicateResourceError):
            await repository.create({"name": "Judo", "subscription_price": Decimal("35"), "allowed_gender": "mix"})

    async def test_update_and_delete(self, db_session):
        repository = SportRepositoryImpl(db_session)
        sport = await repository.create({"name": "Golf", "subscription_price": Decimal("90"), "allowed_gender": "mix"})

        updated = await repository.update(sport.id, {"subscription_price": Decimal("95.50")})
        assert updated.subscription_price == Decimal("95.50")

        assert await repository.delete(sport.id) is True
        assert await repository.delete(sport.id) is False
        assert await repository.update(sport.id, {"name": "Mini golf"}) is None


class TestSubscriptionRepositoryImpl:

    async def test_create_list_and_delete(self, db_session):
        member = await MemberRepositoryImpl(db_session).create(member_payload())
        sport = await SportRepositoryImpl(db_session).create(
            {"name": "Rowing", "subscription_price": Decimal("60"), "allowed_gender": "mix"}
        )
        repository = SubscriptionRepositoryImpl(db_session)

        created = await repository.create(member.id, sport.id, SubscriptionType.GROUP)
        listed = await repository.list_by_member(member.id)

        assert [s.id for s in listed] == [created.id]
        assert listed[0].sport.name == "Rowing"

        found = await repository.get_by_member_and_sport(member.id, sport.id)
        await repository.delete(found.id)
        assert await repository.get_by_member_and_sport(member.id, sport.id) is None

    async def test_duplicate_pair_is_rejected(self, db_session):
        member = await MemberRepositoryImpl(db_session).create(member_payload())
        sport = await SportRepositoryImpl(db_session).create(
            {"name": "Chess", "subscription_price": Decimal("5"), "allowed_gender": "mix"}
        )
        repository = SubscriptionRepositoryImpl(db_session)
        await repository.create(member.id, sport.id, SubscriptionType.GROUP)

        with pytest.raises(DuplicateResourceError):
            await repository.create(member.id, sport.id, SubscriptionType.PRIVATE)
