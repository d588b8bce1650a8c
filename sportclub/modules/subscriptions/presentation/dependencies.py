# 📄 File: sportclub/modules/subscriptions/presentation/dependencies.py
# 🧭 Purpose (Layman Explanation):
# Hands each enrolment request the member, sport and enrolment storage, all sharing one
# database session.
# 🧪 Purpose (Technical Summary):
# FastAPI dependency providers for SubscriptionRepositoryImpl and SubscriptionService. FastAPI
# caches get_db_session per request, so all three repositories use the same transaction.
# 🔗 Dependencies:
# FastAPI Depends, membership and sports dependency providers
# 🔄 Connected Modules / Calls From:
# sportclub.modules.subscriptions.presentation.api.v1.subscriptions

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from sportclub.modules.membership.domain.repositories.member_repository import MemberRepository
from sportclub.modules.membership.presentation.dependencies import get_member_repository
from sportclub.modules.sports.domain.repositories.sport_repository import SportRepository
from sportclub.modules.sports.presentation.dependencies import get_sport_repository
from sportclub.modules.subscriptions.domain.repositories.subscription_repository import (
    SubscriptionRepository,
)
from sportclub.modules.subscriptions.domain.services.subscription_service import SubscriptionService
from sportclub.modules.subscriptions.infrastructure.database.subscription_repository_impl import (
    SubscriptionRepositoryImpl,
)
from sportclub.shared.infrastructure.database.session import get_db_session


def get_subscription_repository(
    session: AsyncSession = Depends(get_db_session)
) -> SubscriptionRepository:
    return SubscriptionRepositoryImpl(session)


def get_subscription_service(
    subscription_repository: SubscriptionRepository = Depends(get_subscription_repository),
    member_repository: MemberRepository = Depends(get_member_repository),
    sport_repository: SportRepository = Depends(get_sport_repository),
) -> SubscriptionService:
    return SubscriptionService(subscription_repository, member_repository, sport_repository)
