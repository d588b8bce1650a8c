# 📄 File: sportclub/modules/subscriptions/domain/services/subscription_service.py
# 🧭 Purpose (Layman Explanation):
# Signs members up for sports and takes them off again, making sure the sport is open to the
# member's gender and that nobody is signed up for the same sport twice.
# 🧪 Purpose (Technical Summary):
# Domain service for subscriptions: existence checks on member and sport, gender eligibility,
# pair uniqueness (pre-check plus unique constraint) and listing with sports resolved.
# 🔗 Dependencies:
# MemberRepository, SportRepository, SubscriptionRepository, shared exceptions
# 🔄 Connected Modules / Calls From:
# sportclub.modules.subscriptions.presentation.api.v1.subscriptions

import logging
from typing import List

from sportclub.modules.membership.domain.repositories.member_repository import MemberRepository
from sportclub.modules.sports.domain.repositories.sport_repository import SportRepository
from sportclub.shared.core.exceptions import (
    BusinessRuleViolationError,
    DuplicateResourceError,
    NotFoundError,
)

from ..models.subscription import Subscription, SubscriptionType
from ..repositories.subscription_repository import SubscriptionRepository

logger = logging.getLogger(__name__)


class SubscriptionService:
    """
    Domain service for subscription business logic.
    """

    def __init__(
        self,
        subscription_repository: SubscriptionRepository,
        member_repository: MemberRepository,
        sport_repository: SportRepository
    ):
        self.subscription_repository = subscription_repository
        self.member_repository = member_repository
        self.sport_repository = sport_repository

    async def subscribe(
        self,
        member_id: int,
        sport_id: int,
        subscription_type: SubscriptionType
    ) -> Subscription:
        """
        Subscribe a member to a sport.

        Raises:
            NotFoundError: If the member or the sport does not exist
            BusinessRuleViolationError: If the sport is not open to the member's gender
            DuplicateResourceError: If the member is already subscribed
        """
        # 1. Member must exist
        member = await self.member_repository.get_by_id(member_id)
        if member is None:
            raise NotFoundError(
                f"Member with ID {member_id} not found",
                resource_type="member",
                resource_id=member_id
            )

        # 2. Sport must exist
        sport = await self.sport_repository.get_by_id(sport_id)
        if sport is None:
            raise NotFoundError(
                f"Sport with ID {sport_id} not found",
                resource_type="sport",
                resource_id=sport_id
            )

        # 3. Gender eligibility
        if not sport.accepts(member.gender):
            raise BusinessRuleViolationError(
                f"Sport {sport.name} is only available for {sport.allowed_gender.value} members",
                rule="sport_gender_eligibility",
                context={"member_gender": member.gender.value, "allowed_gender": sport.allowed_gender.value}
            )

        # 4. No duplicate (the unique constraint catches races)
        existing = await self.subscription_repository.get_by_member_and_sport(member_id, sport_id)
        if existing is not None:
            raise DuplicateResourceError(
                "Member is already subscribed to this sport",
                resource_type="subscription",
                details={"member_id": member_id, "sport_id": sport_id}
            )

        subscription = await self.subscription_repository.create(member_id, sport_id, subscription_type)
        logger.info(f"Member {member_id} subscribed to sport {sport_id} ({subscription_type.value})")
        return subscription.model_copy(update={"sport": sport})

    async def unsubscribe(self, member_id: int, sport_id: int) -> None:
        """
        Raises:
            NotFoundError: If the member is not subscribed to the sport
        """
        subscription = await self.subscription_repository.get_by_member_and_sport(member_id, sport_id)
        if subscription is None:
            raise NotFoundError(
                "Subscription not found",
                resource_type="subscription",
                details={"member_id": member_id, "sport_id": sport_id}
            )

        await self.subscription_repository.delete(subscription.id)
        logger.info(f"Member {member_id} unsubscribed from sport {sport_id}")

    async def get_member_subscriptions(self, member_id: int) -> List[Subscription]:
        """Get a member's subscriptions; empty when there are none."""
        return await self.subscription_repository.list_by_member(member_id)
