"""
Booking Command Repository Interface (Ticketing Service)

Bookings are created once and never mutated afterwards.
"""

from abc import ABC, abstractmethod

from src.service.ticketing.domain.entity.booking_entity import Booking


class IBookingCommandRepo(ABC):
    @abstractmethod
    async def create(self, *, booking: Booking) -> Booking:
        """
        Store a new booking document

        Returns:
            Booking with `document_id` set

        Raises:
            ContentStoreError: Store rejected the write (check `is_permission_error`)
        """
        pass
