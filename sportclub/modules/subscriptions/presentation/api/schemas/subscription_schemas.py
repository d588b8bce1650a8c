# 📄 File: sportclub/modules/subscriptions/presentation/api/schemas/subscription_schemas.py
# 🧭 Purpose (Layman Explanation):
# Defines what the API accepts when a member signs up for a sport and what it sends back.
#
# 🧪 Purpose (Technical Summary):
# Pydantic request/response schemas for the member subscription endpoints.
#
# 🔗 Dependencies:
# - pydantic
# - sportclub.shared.core.schemas, sport schemas
#
# 🔄 Connected Modules / Calls From:
# - sportclub.modules.subscriptions.presentation.api.v1.subscriptions

from datetime import datetime
from typing import Optional

from pydantic import Field

from sportclub.modules.sports.presentation.api.schemas.sport_schemas import SportResponse
from sportclub.modules.subscriptions.domain.models.subscription import Subscription, SubscriptionType
from sportclub.shared.core.schemas import CamelModel, RequestModel


class SubscribeRequest(RequestModel):
    """Subscription payload; the member comes from the URL."""

    sport_id: int = Field(..., gt=0)
    subscription_type: SubscriptionType


class SubscriptionResponse(CamelModel):
    """Subscription information with the sport when resolved."""

    id: int
    member_id: int
    sport_id: int
    subscription_type: SubscriptionType
    created_at: datetime
    sport: Optional[SportResponse] = None

    @classmethod
    def from_domain(cls, subscription: Subscription) -> "SubscriptionResponse":
        return cls(
            id=subscription.id,
            member_id=subscription.member_id,
            sport_id=subscription.sport_id,
            subscription_type=subscription.subscription_type,
            created_at=subscription.created_at,
            sport=SportResponse.from_domain(subscription.sport) if subscription.sport else None,
        )
