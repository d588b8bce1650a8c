# 📄 File: sportclub/modules/sports/presentation/dependencies.py
# 🧭 Purpose (Layman Explanation):
# Hands each sport request a database-backed sport catalog and the shared sports cache.
# 🧪 Purpose (Technical Summary):
# FastAPI dependency providers for SportRepositoryImpl and SportService.
# 🔗 Dependencies:
# FastAPI Depends, session dependency, sports cache
# 🔄 Connected Modules / Calls From:
# sportclub.modules.sports.presentation.api.v1.sports, subscriptions dependencies

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from sportclub.modules.sports.domain.repositories.sport_repository import SportRepository
from sportclub.modules.sports.domain.services.sport_service import SportService
from sportclub.modules.sports.infrastructure.database.sport_repository_impl import SportRepositoryImpl
from sportclub.shared.infrastructure.cache.memory_cache import InMemoryCache, get_sports_cache
from sportclub.shared.infrastructure.database.session import get_db_session


def get_sport_repository(session: AsyncSession = Depends(get_db_session)) -> SportRepository:
    return SportRepositoryImpl(session)


def get_sport_service(
    sport_repository: SportRepository = Depends(get_sport_repository),
    cache: InMemoryCache = Depends(get_sports_cache),
) -> SportService:
    return SportService(sport_repository, cache)
