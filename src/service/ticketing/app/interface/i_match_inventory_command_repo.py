"""
Match Inventory Command Repository Interface

Compare-and-swap access to a match's ticketAvailability.
"""

from abc import ABC, abstractmethod
from typing import Optional

from src.service.ticketing.domain.entity.match_entity import Match


class IMatchInventoryCommandRepo(ABC):
    @abstractmethod
    async def get_for_update(self, *, match_id: str) -> Optional[Match]:
        """
        Uncached read of the match including its current revision

        Returns:
            Match with `revision` set, or None if the match does not exist
        """
        pass

    @abstractmethod
    async def decrement_availability(self, *, match: Match, quantity: int) -> Match:
        """
        Write `match.ticket_availability - quantity` only if the stored revision
        still equals `match.revision`

        Returns:
            Match as stored after the write

        Raises:
            DomainError: Snapshot does not cover `quantity` (nothing is written)
            RevisionConflictError: Match changed since it was read
            ContentStoreError: Write rejected for any other reason
        """
        pass

    @abstractmethod
    async def restore_availability(self, *, match_id: str, quantity: int) -> None:
        """Give back tickets claimed by a booking that could not be stored."""
        pass
