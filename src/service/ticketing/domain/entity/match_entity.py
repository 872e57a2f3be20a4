from datetime import datetime
from typing import Optional

import attrs

from src.platform.exception.exceptions import DomainError


@attrs.define
class Match:
    id: str
    home_team: str
    away_team: str
    date: Optional[datetime] = None
    competition: Optional[str] = None
    venue: Optional[str] = None
    event: Optional[str] = None
    has_tickets: bool = False
    ticket_availability: Optional[int] = None
    revision: Optional[str] = None  # CMS _rev at read time; required for compare-and-swap writes

    @property
    def title(self) -> str:
        return f'{self.home_team} vs {self.away_team}'

    @property
    def available_tickets(self) -> int:
        return max(self.ticket_availability or 0, 0)

    def ensure_bookable(self, *, quantity: int) -> None:
        """
        Raises:
            DomainError: Ticketing disabled, or fewer tickets left than requested
        """
        if not self.has_tickets:
            raise DomainError('Tickets are not available for this match')
        if self.available_tickets < quantity:
            raise DomainError(
                f'Only {self.available_tickets} ticket(s) available. You requested {quantity}.'
            )

    def with_tickets_claimed(self, *, quantity: int) -> 'Match':
        self.ensure_bookable(quantity=quantity)
        return attrs.evolve(
            self,
            ticket_availability=self.available_tickets - quantity,
        )
