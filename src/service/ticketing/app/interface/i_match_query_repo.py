from abc import ABC, abstractmethod
from typing import List, Optional

from src.service.ticketing.domain.entity.match_entity import Match


class IMatchQueryRepo(ABC):
    """Read side of matches (cached reads are fine here)."""

    @abstractmethod
    async def get_by_id(self, *, match_id: str) -> Optional[Match]:
        pass

    @abstractmethod
    async def list_all(self) -> List[Match]:
        """All matches ordered by kick-off, earliest first."""
        pass

    @abstractmethod
    async def list_upcoming(self, *, limit: int) -> List[Match]:
        pass

    @abstractmethod
    async def get_next_with_tickets(self) -> Optional[Match]:
        pass
