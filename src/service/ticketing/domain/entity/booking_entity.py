from datetime import datetime, timezone
from typing import Optional

import attrs

from src.platform.exception.exceptions import DomainError
from src.platform.logging.loguru_io import Logger
from src.service.ticketing.domain.enum.booking_status import BookingStatus


@attrs.define
class Booking:
    booking_id: str  # human-readable TKT-... reference, independent of the CMS document id
    match_id: str
    name: str
    email: str
    quantity: int
    status: BookingStatus = BookingStatus.CONFIRMED
    created_at: Optional[datetime] = None
    document_id: Optional[str] = None

    @classmethod
    @Logger.io
    def create(
        cls,
        *,
        booking_id: str,
        match_id: str,
        name: str,
        email: str,
        quantity: int,
    ) -> 'Booking':
        if quantity < 1:
            raise DomainError('quantity must be at least 1')
        if not match_id:
            raise DomainError('matchId is required')

        return cls(
            booking_id=booking_id,
            match_id=match_id,
            name=name,
            email=email,
            quantity=quantity,
            status=BookingStatus.CONFIRMED,
            created_at=datetime.now(timezone.utc),
        )

    def stored_as(self, *, document_id: str) -> 'Booking':
        return attrs.evolve(self, document_id=document_id)
