# 📄 File: sportclub/modules/subscriptions/infrastructure/database/subscription_repository_impl.py
# 🧭 Purpose (Layman Explanation):
# Reads and writes sport enrolments in the database.
# 🧪 Purpose (Technical Summary):
# SQLAlchemy async implementation of SubscriptionRepository. Listing joins the sports table so
# each subscription comes back with its sport; unique-pair violations become DuplicateResourceError.
# 🔗 Dependencies:
# SQLAlchemy, SQLAlchemyRepository base, subscription and sport ORM models
# 🔄 Connected Modules / Calls From:
# sportclub.modules.subscriptions.presentation.dependencies

import logging
from typing import List, Optional

from sqlalchemy import delete, select

from sportclub.modules.sports.domain.models.sport import Sport
from sportclub.modules.sports.infrastructure.database.models import SportModel
from sportclub.modules.subscriptions.domain.models.subscription import Subscription, SubscriptionType
from sportclub.modules.subscriptions.domain.repositories.subscription_repository import (
    SubscriptionRepository,
)
from sportclub.modules.subscriptions.infrastructure.database.models import SportSubscriptionModel
from sportclub.shared.core.exceptions import DuplicateResourceError
from sportclub.shared.infrastructure.database.repository import SQLAlchemyRepository

logger = logging.getLogger(__name__)


class SubscriptionRepositoryImpl(SQLAlchemyRepository, SubscriptionRepository):
    """
    SQLAlchemy implementation of the subscription repository.
    """

    table_name = "sport_subscriptions"

    def _model_to_domain(
        self,
        model: SportSubscriptionModel,
        sport: Optional[SportModel] = None
    ) -> Subscription:
        return Subscription(
            id=model.id,
            member_id=model.member_id,
            sport_id=model.sport_id,
            subscription_type=model.subscription_type,
            created_at=model.created_at,
            sport=Sport.model_validate(sport) if sport is not None else None,
        )

    async def get_by_member_and_sport(self, member_id: int, sport_id: int) -> Optional[Subscription]:
        query = select(SportSubscriptionModel).where(
            SportSubscriptionModel.member_id == member_id,
            SportSubscriptionModel.sport_id == sport_id,
        )
        result = await self._execute("get_by_member_and_sport", query)
        model = result.scalar_one_or_none()
        return self._model_to_domain(model) if model else None

    async def list_by_member(self, member_id: int) -> List[Subscription]:
        query = (
            select(SportSubscriptionModel, SportModel)
            .join(SportModel, SportModel.id == SportSubscriptionModel.sport_id)
            .where(SportSubscriptionModel.member_id == member_id)
            .order_by(SportSubscriptionModel.created_at, SportSubscriptionModel.id)
        )
        result = await self._execute("list_by_member", query)
        return [self._model_to_domain(subscription, sport) for subscription, sport in result.all()]

    async def create(
        self,
        member_id: int,
        sport_id: int,
        subscription_type: SubscriptionType
    ) -> Subscription:
        model = SportSubscriptionModel(
            member_id=member_id,
            sport_id=sport_id,
            subscription_type=SubscriptionType(subscription_type).value,
        )
        self.session.add(model)
        await self._flush(
            "create",
            on_conflict=lambda: DuplicateResourceError(
                "Member is already subscribed to this sport",
                resource_type="subscription",
                details={"member_id": member_id, "sport_id": sport_id}
            )
        )
        return self._model_to_domain(model)

    async def delete(self, subscription_id: int) -> None:
        statement = (
            delete(SportSubscriptionModel)
            .where(SportSubscriptionModel.id == subscription_id)
            .execution_options(synchronize_session="fetch")
        )
        await self._execute("delete", statement)
