"""Application layer interfaces (Ports)"""

from src.service.ticketing.app.interface.i_booking_command_repo import IBookingCommandRepo
from src.service.ticketing.app.interface.i_booking_notifier import IBookingNotifier
from src.service.ticketing.app.interface.i_match_inventory_command_repo import (
    IMatchInventoryCommandRepo,
)
from src.service.ticketing.app.interface.i_match_query_repo import IMatchQueryRepo

__all__ = [
    'IBookingCommandRepo',
    'IBookingNotifier',
    'IMatchInventoryCommandRepo',
    'IMatchQueryRepo',
]
