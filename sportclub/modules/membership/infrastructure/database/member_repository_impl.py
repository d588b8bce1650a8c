# 📄 File: sportclub/modules/membership/infrastructure/database/member_repository_impl.py
# 🧭 Purpose (Layman Explanation):
# Does the actual reading and writing of members in the database for everything the member
# services ask for.
# 🧪 Purpose (Technical Summary):
# SQLAlchemy async implementation of MemberRepository. Every statement runs through the shared
# timeout guard so driver failures and slow calls surface as StoreUnavailableError.
# 🔗 Dependencies:
# SQLAlchemy, SQLAlchemyRepository base, MemberModel, Member domain model
# 🔄 Connected Modules / Calls From:
# sportclub.modules.membership.presentation.dependencies, subscription services

import logging
from enum import Enum
from typing import Any, Dict, List, Optional, Sequence

from sqlalchemy import delete, select, update

from sportclub.modules.membership.domain.models.member import Member
from sportclub.modules.membership.domain.repositories.member_repository import MemberRepository
from sportclub.modules.membership.infrastructure.database.models import MemberModel
from sportclub.shared.infrastructure.database.repository import SQLAlchemyRepository

logger = logging.getLogger(__name__)

MEMBER_COLUMNS = frozenset(
    {"id", "first_name", "last_name", "gender", "birthdate", "subscription_date", "family_head_id"}
)


class MemberRepositoryImpl(SQLAlchemyRepository, MemberRepository):
    """
    SQLAlchemy implementation of the member repository.
    """

    table_name = "members"

    # =========================================================================
    # Conversion helpers
    # =========================================================================

    def _model_to_domain(self, model: MemberModel) -> Member:
        return Member(
            id=model.id,
            first_name=model.first_name,
            last_name=model.last_name,
            gender=model.gender,
            birthdate=model.birthdate,
            subscription_date=model.subscription_date,
            family_head_id=model.family_head_id,
        )

    def _to_columns(self, fields: Dict[str, Any]) -> Dict[str, Any]:
        unknown = set(fields) - MEMBER_COLUMNS
        if unknown:
            raise ValueError(f"Unknown member fields: {sorted(unknown)}")
        return {
            key: value.value if isinstance(value, Enum) else value
            for key, value in fields.items()
        }

    def _column(self, field_name: str):
        if field_name not in MEMBER_COLUMNS:
            raise ValueError(f"Unknown member field: {field_name}")
        return getattr(MemberModel, field_name)

    # =========================================================================
    # MemberRepository
    # =========================================================================

    async def get_by_id(self, member_id: int) -> Optional[Member]:
        query = select(MemberModel).where(MemberModel.id == member_id)
        result = await self._execute("get_by_id", query)
        model = result.scalar_one_or_none()
        return self._model_to_domain(model) if model else None

    async def get_fields(self, member_id: int, fields: Sequence[str]) -> Optional[Dict[str, Any]]:
        columns = [self._column(name) for name in fields]
        query = select(*columns).where(MemberModel.id == member_id)
        result = await self._execute("get_fields", query)
        row = result.first()
        if row is None:
            return None
        return dict(zip(fields, row))

    async def find_by_field(self, field_name: str, value: Any) -> List[Member]:
        column = self._column(field_name)
        if isinstance(value, Enum):
            value = value.value
        condition = column.is_(None) if value is None else column == value

        query = select(MemberModel).where(condition).order_by(MemberModel.id)
        result = await self._execute("find_by_field", query)
        return [self._model_to_domain(model) for model in result.scalars().all()]

    async def create(self, fields: Dict[str, Any]) -> Member:
        values = self._to_columns(fields)
        values.pop("id", None)

        model = MemberModel(**values)
        self.session.add(model)
        await self._flush("create")

        logger.debug(f"Inserted member row {model.id}")
        return self._model_to_domain(model)

    async def update_fields(self, member_id: int, fields: Dict[str, Any]) -> None:
        if not fields:
            return

        statement = (
            update(MemberModel)
            .where(MemberModel.id == member_id)
            .values(**self._to_columns(fields))
            .execution_options(synchronize_session="fetch")
        )
        await self._execute("update_fields", statement)

    async def delete(self, member_id: int) -> None:
        statement = (
            delete(MemberModel)
            .where(MemberModel.id == member_id)
            .execution_options(synchronize_session="fetch")
        )
        await self._execute("delete", statement)
