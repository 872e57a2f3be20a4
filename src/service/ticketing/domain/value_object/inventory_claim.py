from typing import Optional

import attrs

from src.service.ticketing.domain.entity.match_entity import Match


@attrs.frozen
class InventoryClaim:
    """
    Result of taking `quantity` tickets off a match

    `match` is the snapshot the availability check passed against. When the
    decrement could not be written (store error other than a lost race) the
    booking still goes ahead and `write_error` carries the reason.
    """

    match: Match
    quantity: int
    attempts: int
    decremented: bool
    write_error: Optional[str] = None

    @property
    def previous_availability(self) -> int:
        return self.match.available_tickets

    @property
    def remaining_availability(self) -> int:
        if self.decremented:
            return self.previous_availability - self.quantity
        return self.previous_availability
