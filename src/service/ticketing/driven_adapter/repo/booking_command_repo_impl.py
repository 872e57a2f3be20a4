"""
Booking Command Repository Implementation (Ticketing Service)

Stores bookings as `booking` documents referencing their match.
"""

from typing import Any

from src.platform.content_store.content_store_client import ContentStoreClient
from src.platform.content_store.document_utils import reference
from src.platform.logging.loguru_io import Logger
from src.service.ticketing.app.interface.i_booking_command_repo import IBookingCommandRepo
from src.service.ticketing.domain.entity.booking_entity import Booking


class BookingCommandRepoImpl(IBookingCommandRepo):
    def __init__(self, *, content_store: ContentStoreClient) -> None:
        self.content_store = content_store

    @staticmethod
    def _entity_to_document(booking: Booking) -> dict[str, Any]:
        return {
            '_type': 'booking',
            'match': reference(booking.match_id),
            'name': booking.name,
            'email': booking.email,
            'quantity': booking.quantity,
            'bookingId': booking.booking_id,
            'status': booking.status.value,
            'createdAt': booking.created_at.isoformat() if booking.created_at else None,
        }

    @Logger.io
    async def create(self, *, booking: Booking) -> Booking:
        document = await self.content_store.create(self._entity_to_document(booking))
        return booking.stored_as(document_id=document['_id'])
