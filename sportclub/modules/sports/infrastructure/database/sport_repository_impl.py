# 📄 File: sportclub/modules/sports/infrastructure/database/sport_repository_impl.py
# 🧭 Purpose (Layman Explanation):
# Reads and writes the sport catalog in the database.
# 🧪 Purpose (Technical Summary):
# SQLAlchemy async implementation of SportRepository. Unique-name violations raised by the
# database become DuplicateResourceError; other failures go through the shared store guard.
# 🔗 Dependencies:
# SQLAlchemy, SQLAlchemyRepository base, SportModel, Sport domain model
# 🔄 Connected Modules / Calls From:
# sportclub.modules.sports.presentation.dependencies, subscriptions dependencies

import logging
from enum import Enum
from typing import Any, Dict, List, Optional

from sqlalchemy import select

from sportclub.modules.sports.domain.models.sport import Sport
from sportclub.modules.sports.domain.repositories.sport_repository import SportRepository
from sportclub.modules.sports.infrastructure.database.models import SportModel
from sportclub.shared.core.exceptions import DuplicateResourceError
from sportclub.shared.infrastructure.database.repository import SQLAlchemyRepository

logger = logging.getLogger(__name__)


class SportRepositoryImpl(SQLAlchemyRepository, SportRepository):
    """
    SQLAlchemy implementation of the sport repository.
    """

    table_name = "sports"

    def _model_to_domain(self, model: SportModel) -> Sport:
        return Sport(
            id=model.id,
            name=model.name,
            subscription_price=model.subscription_price,
            allowed_gender=model.allowed_gender,
        )

    def _apply(self, model: SportModel, data: Dict[str, Any]) -> None:
        for key, value in data.items():
            if not hasattr(SportModel, key) or key == "id":
                raise ValueError(f"Unknown sport field: {key}")
            setattr(model, key, value.value if isinstance(value, Enum) else value)

    def _name_taken(self, name: Optional[str]):
        return lambda: DuplicateResourceError(
            "Sport with this name already exists",
            resource_type="sport",
            field="name",
            value=name
        )

    async def _get_model(self, sport_id: int) -> Optional[SportModel]:
        result = await self._execute("get_by_id", select(SportModel).where(SportModel.id == sport_id))
        return result.scalar_one_or_none()

    async def get_by_id(self, sport_id: int) -> Optional[Sport]:
        model = await self._get_model(sport_id)
        return self._model_to_domain(model) if model else None

    async def get_by_name(self, name: str) -> Optional[Sport]:
        result = await self._execute("get_by_name", select(SportModel).where(SportModel.name == name))
        model = result.scalar_one_or_none()
        return self._model_to_domain(model) if model else None

    async def list_all(self) -> List[Sport]:
        result = await self._execute("list_all", select(SportModel).order_by(SportModel.name))
        return [self._model_to_domain(model) for model in result.scalars().all()]

    async def create(self, sport_data: Dict[str, Any]) -> Sport:
        model = SportModel()
        self._apply(model, sport_data)
        self.session.add(model)
        await self._flush("create", on_conflict=self._name_taken(sport_data.get("name")))
        return self._model_to_domain(model)

    async def update(self, sport_id: int, update_data: Dict[str, Any]) -> Optional[Sport]:
        model = await self._get_model(sport_id)
        if model is None:
            return None

        self._apply(model, update_data)
        await self._flush("update", on_conflict=self._name_taken(update_data.get("name")))
        return self._model_to_domain(model)

    async def delete(self, sport_id: int) -> bool:
        model = await self._get_model(sport_id)
        if model is None:
            return False

        await self._guard("delete", self.session.delete(model))
        await self._flush("delete")
        return True
