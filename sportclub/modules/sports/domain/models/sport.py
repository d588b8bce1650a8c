# 📄 File: sportclub/modules/sports/domain/models/sport.py
# 🧭 Purpose (Layman Explanation):
# Describes a sport offered by the club: its name, its monthly price and whether it is open to
# men, women or everybody.
# 🧪 Purpose (Technical Summary):
# Pydantic domain model for the Sport entity with the gender eligibility rule used by subscriptions.
# 🔗 Dependencies:
# pydantic, decimal, enum, membership Gender
# 🔄 Connected Modules / Calls From:
# sport_repository.py, sport_service.py, subscription_service.py, sport API schemas

from decimal import Decimal
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from sportclub.modules.membership.domain.models.member import Gender


class AllowedGender(str, Enum):
    """Who may subscribe to a sport"""
    MALE = "male"
    FEMALE = "female"
    MIX = "mix"


class Sport(BaseModel):
    """
    Sport domain model.
    """

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str = Field(..., min_length=1)
    subscription_price: Decimal = Field(..., gt=0, decimal_places=2)
    allowed_gender: AllowedGender

    def accepts(self, gender: Gender) -> bool:
        """Mixed sports accept everybody, the others only the matching gender."""
        if self.allowed_gender == AllowedGender.MIX:
            return True
        return self.allowed_gender.value == Gender(gender).value
