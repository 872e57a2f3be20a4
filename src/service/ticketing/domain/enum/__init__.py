"""Ticketing Domain Enums"""

from src.service.ticketing.domain.enum.booking_status import BookingStatus

__all__ = ['BookingStatus']
