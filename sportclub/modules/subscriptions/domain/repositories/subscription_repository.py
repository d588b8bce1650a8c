# 📄 File: sportclub/modules/subscriptions/domain/repositories/subscription_repository.py
# 🧭 Purpose (Layman Explanation):
# Lists what we can do with stored sport enrolments: find one, list a member's, add and remove.
# 🧪 Purpose (Technical Summary):
# Abstract repository interface for member/sport subscriptions.
# 🔗 Dependencies:
# - abc (Abstract Base Classes)
# - Subscription domain model
# 🔄 Connected Modules / Calls From:
# - SubscriptionService
# - SubscriptionRepositoryImpl (concrete implementation)

from abc import ABC, abstractmethod
from typing import List, Optional

from sportclub.modules.subscriptions.domain.models.subscription import Subscription, SubscriptionType


class SubscriptionRepository(ABC):
    """
    Abstract repository interface for subscription data access operations.
    """

    @abstractmethod
    async def get_by_member_and_sport(self, member_id: int, sport_id: int) -> Optional[Subscription]:
        """Get the subscription of a member to a sport."""
        pass

    @abstractmethod
    async def list_by_member(self, member_id: int) -> List[Subscription]:
        """Get a member's subscriptions with the sport resolved."""
        pass

    @abstractmethod
    async def create(
        self,
        member_id: int,
        sport_id: int,
        subscription_type: SubscriptionType
    ) -> Subscription:
        """
        Create a subscription.

        Raises:
            DuplicateResourceError: If the member is already subscribed to the sport
        """
        pass

    @abstractmethod
    async def delete(self, subscription_id: int) -> None:
        """Delete a subscription."""
        pass
