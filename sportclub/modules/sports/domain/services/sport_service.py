# 📄 File: sportclub/modules/sports/domain/services/sport_service.py
# 🧭 Purpose (Layman Explanation):
# Manages the club's list of sports. The full list is kept in short-term memory for a few minutes
# and forgotten as soon as any sport is added, changed or removed.
# 🧪 Purpose (Technical Summary):
# Domain service for the sport catalog: CRUD with name uniqueness, not-found handling and a TTL
# cache for the ordered listing, invalidated on every write and again once the write commits.
# 🔗 Dependencies:
# SportRepository, InMemoryCache, shared exceptions
# 🔄 Connected Modules / Calls From:
# sportclub.modules.sports.presentation.api.v1.sports

import logging
from typing import Any, Dict, List

from sportclub.shared.core.exceptions import DuplicateResourceError, NotFoundError
from sportclub.shared.infrastructure.cache.memory_cache import InMemoryCache

from ..models.sport import Sport
from ..repositories.sport_repository import SportRepository

logger = logging.getLogger(__name__)

SPORTS_LIST_CACHE_KEY = "sports:all"


class SportService:
    """
    Domain service for sport catalog business logic.
    """

    def __init__(self, sport_repository: SportRepository, cache: InMemoryCache):
        self.sport_repository = sport_repository
        self.cache = cache

    def _drop_listing(self) -> None:
        if self.cache.invalidate(SPORTS_LIST_CACHE_KEY):
            logger.debug("Sports list cache invalidated")

    def _invalidate_cache(self) -> None:
        self._drop_listing()
        # A listing read before this write commits can still land in the cache
        self.sport_repository.on_commit(self._drop_listing)

    def _duplicate_name(self, name: str) -> DuplicateResourceError:
        return DuplicateResourceError(
            "Sport with this name already exists",
            resource_type="sport",
            field="name",
            value=name
        )

    async def create(self, sport_data: Dict[str, Any]) -> Sport:
        """
        Create a sport.

        Raises:
            DuplicateResourceError: If a sport with the same name exists
        """
        # 1. Name must be unique (the unique index catches races)
        if await self.sport_repository.get_by_name(sport_data["name"]):
            raise self._duplicate_name(sport_data["name"])

        # 2. Save
        sport = await self.sport_repository.create(sport_data)

        # 3. Listing is stale now
        self._invalidate_cache()

        logger.info(f"Created sport {sport.id} ({sport.name})")
        return sport

    async def find_all(self) -> List[Sport]:
        """Get every sport ordered by name, served from cache while fresh."""
        cached = self.cache.get(SPORTS_LIST_CACHE_KEY)
        if cached is not None:
            return list(cached)

        sports = await self.sport_repository.list_all()
        self.cache.set(SPORTS_LIST_CACHE_KEY, sports)
        return list(sports)

    async def find_one(self, sport_id: int) -> Sport:
        """
        Raises:
            NotFoundError: If the sport does not exist
        """
        sport = await self.sport_repository.get_by_id(sport_id)
        if sport is None:
            raise NotFoundError(
                f"Sport with ID {sport_id} not found",
                resource_type="sport",
                resource_id=sport_id
            )
        return sport

    async def update(self, sport_id: int, update_data: Dict[str, Any]) -> Sport:
        """
        Update a sport.

        Raises:
            NotFoundError: If the sport does not exist
            DuplicateResourceError: If the new name belongs to another sport
        """
        await self.find_one(sport_id)

        new_name = update_data.get("name")
        if new_name is not None:
            other = await self.sport_repository.get_by_name(new_name)
            if other is not None and other.id != sport_id:
                raise self._duplicate_name(new_name)

        if not update_data:
            return await self.find_one(sport_id)

        sport = await self.sport_repository.update(sport_id, update_data)
        if sport is None:
            # Removed between the existence check and the write
            raise NotFoundError(
                f"Sport with ID {sport_id} not found",
                resource_type="sport",
                resource_id=sport_id
            )

        self._invalidate_cache()
        logger.info(f"Updated sport {sport_id}: {sorted(update_data)}")
        return sport

    async def remove(self, sport_id: int) -> Sport:
        """
        Remove a sport; its subscriptions go with it.

        Raises:
            NotFoundError: If the sport does not exist
        """
        sport = await self.find_one(sport_id)
        await self.sport_repository.delete(sport_id)

        self._invalidate_cache()
        logger.info(f"Removed sport {sport_id} ({sport.name})")
        return sport
