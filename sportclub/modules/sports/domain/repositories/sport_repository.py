# 📄 File: sportclub/modules/sports/domain/repositories/sport_repository.py
# 🧭 Purpose (Layman Explanation):
# Lists what we can do with the stored sport catalog: find, list, add, change and remove sports.
# 🧪 Purpose (Technical Summary):
# Abstract repository interface for Sport persistence.
# 🔗 Dependencies:
# - abc (Abstract Base Classes)
# - Sport domain model
# 🔄 Connected Modules / Calls From:
# - SportService, SubscriptionService
# - SportRepositoryImpl (concrete implementation)

from abc import ABC, abstractmethod
from typing import Any, Callable, Dict, List, Optional

from sportclub.modules.sports.domain.models.sport import Sport


class SportRepository(ABC):
    """
    Abstract repository interface for sport data access operations.
    """

    @abstractmethod
    async def get_by_id(self, sport_id: int) -> Optional[Sport]:
        """Get sport by ID."""
        pass

    @abstractmethod
    async def get_by_name(self, name: str) -> Optional[Sport]:
        """Get sport by its unique name."""
        pass

    @abstractmethod
    async def list_all(self) -> List[Sport]:
        """Get all sports ordered by name."""
        pass

    @abstractmethod
    async def create(self, sport_data: Dict[str, Any]) -> Sport:
        """
        Create a sport.

        Raises:
            DuplicateResourceError: If the name is already taken
        """
        pass

    @abstractmethod
    async def update(self, sport_id: int, update_data: Dict[str, Any]) -> Optional[Sport]:
        """
        Update a sport; returns None when it does not exist.

        Raises:
            DuplicateResourceError: If the new name is already taken
        """
        pass

    @abstractmethod
    async def delete(self, sport_id: int) -> bool:
        """Delete a sport; returns False when it does not exist."""
        pass

    def on_commit(self, callback: Callable[[], None]) -> None:
        """
        Run ``callback`` after the current unit of work commits.

        Stores without transactions have nothing to wait for and run it
        straight away.
        """
        callback()
