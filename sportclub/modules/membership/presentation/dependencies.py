# 📄 File: sportclub/modules/membership/presentation/dependencies.py
# 🧭 Purpose (Layman Explanation):
# Hands each member request the tools it needs: a database session, the member storage
# and the member service built on top of it.
# 🧪 Purpose (Technical Summary):
# FastAPI dependency providers wiring the request-scoped AsyncSession into MemberRepositoryImpl
# and MemberService.
# 🔗 Dependencies:
# FastAPI Depends, sportclub.shared.infrastructure.database.session
# 🔄 Connected Modules / Calls From:
# sportclub.modules.membership.presentation.api.v1.members, subscriptions dependencies

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from sportclub.modules.membership.domain.repositories.member_repository import MemberRepository
from sportclub.modules.membership.domain.services.member_service import MemberService
from sportclub.modules.membership.infrastructure.database.member_repository_impl import (
    MemberRepositoryImpl,
)
from sportclub.shared.infrastructure.database.session import get_db_session


def get_member_repository(
    session: AsyncSession = Depends(get_db_session)
) -> MemberRepository:
    """Member repository bound to the request session."""
    return MemberRepositoryImpl(session)


def get_member_service(
    member_repository: MemberRepository = Depends(get_member_repository)
) -> MemberService:
    return MemberService(member_repository)
