"""Booking Status Enum"""

from enum import StrEnum


class BookingStatus(StrEnum):
    CONFIRMED = 'confirmed'
    CANCELLED = 'cancelled'  # set by club staff in the CMS; never written here
