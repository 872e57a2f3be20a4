"""Application layer DTOs"""

from src.service.ticketing.app.dto.booking_policy import BookingPolicy
from src.service.ticketing.app.dto.booking_result import BookingResult

__all__ = ['BookingPolicy', 'BookingResult']
