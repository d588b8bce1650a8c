# 📄 File: sportclub/modules/subscriptions/domain/models/subscription.py
# 🧭 Purpose (Layman Explanation):
# Describes a member's enrolment in a sport, and whether it is a group or private enrolment.
# 🧪 Purpose (Technical Summary):
# Pydantic domain models for the Subscription entity and its sport-resolved read model.
# 🔗 Dependencies:
# pydantic, datetime, enum, Sport domain model
# 🔄 Connected Modules / Calls From:
# subscription_repository.py, subscription_service.py, subscription API schemas

from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict

from sportclub.modules.sports.domain.models.sport import Sport


class SubscriptionType(str, Enum):
    """How a member takes part in a sport"""
    GROUP = "group"
    PRIVATE = "private"


class Subscription(BaseModel):
    """
    Subscription domain model. A (member_id, sport_id) pair appears at most once.
    """

    model_config = ConfigDict(from_attributes=True)

    id: int
    member_id: int
    sport_id: int
    subscription_type: SubscriptionType
    created_at: datetime

    # Resolved on listing
    sport: Optional[Sport] = None
