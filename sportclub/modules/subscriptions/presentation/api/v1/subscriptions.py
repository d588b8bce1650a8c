# 📄 File: sportclub/modules/subscriptions/presentation/api/v1/subscriptions.py
# 🧭 Purpose (Layman Explanation):
# The web addresses for signing a member up for a sport, taking them off it, and listing what
# they play.
#
# 🧪 Purpose (Technical Summary):
# FastAPI endpoints nested under /members/{member_id} delegating to SubscriptionService.
#
# 🔗 Dependencies:
# - FastAPI router
# - subscription schemas and dependencies
#
# 🔄 Connected Modules / Calls From:
# - sportclub.api.v1.router (router inclusion under /members)

"""
Member Subscription Endpoints

- POST /{member_id}/subscribe: Subscribe to a sport
- DELETE /{member_id}/unsubscribe/{sport_id}: Unsubscribe
- GET /{member_id}/subscriptions: List subscriptions with sports
"""

import logging
from typing import List

from fastapi import APIRouter, Depends, Path, status

from sportclub.modules.subscriptions.domain.services.subscription_service import SubscriptionService
from sportclub.modules.subscriptions.presentation.api.schemas.subscription_schemas import (
    SubscribeRequest,
    SubscriptionResponse,
)
from sportclub.modules.subscriptions.presentation.dependencies import get_subscription_service

logger = logging.getLogger(__name__)

subscriptions_router = APIRouter()


@subscriptions_router.post(
    "/{member_id}/subscribe",
    response_model=SubscriptionResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Subscribe member to sport",
    responses={
        400: {"description": "Sport not available for the member's gender"},
        404: {"description": "Member or sport not found"},
        409: {"description": "Already subscribed"},
    }
)
async def subscribe_member(
    payload: SubscribeRequest,
    member_id: int = Path(..., gt=0),
    subscription_service: SubscriptionService = Depends(get_subscription_service),
) -> SubscriptionResponse:
    subscription = await subscription_service.subscribe(
        member_id, payload.sport_id, payload.subscription_type
    )
    return SubscriptionResponse.from_domain(subscription)


@subscriptions_router.delete(
    "/{member_id}/unsubscribe/{sport_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Unsubscribe member from sport",
    responses={404: {"description": "Subscription not found"}}
)
async def unsubscribe_member(
    member_id: int = Path(..., gt=0),
    sport_id: int = Path(..., gt=0),
    subscription_service: SubscriptionService = Depends(get_subscription_service),
) -> None:
    await subscription_service.unsubscribe(member_id, sport_id)


@subscriptions_router.get(
    "/{member_id}/subscriptions",
    response_model=List[SubscriptionResponse],
    summary="List member subscriptions"
)
async def list_member_subscriptions(
    member_id: int = Path(..., gt=0),
    subscription_service: SubscriptionService = Depends(get_subscription_service),
) -> List[SubscriptionResponse]:
    subscriptions = await subscription_service.get_member_subscriptions(member_id)
    return [SubscriptionResponse.from_domain(s) for s in subscriptions]
