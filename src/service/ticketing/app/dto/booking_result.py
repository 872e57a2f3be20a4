"""Booking result DTO."""

import attrs

from src.service.shared_kernel.app.dto.notification_report import NotificationReport
from src.service.ticketing.domain.entity.booking_entity import Booking
from src.service.ticketing.domain.value_object.inventory_claim import InventoryClaim


@attrs.frozen
class BookingResult:
    """
    The booking itself is the core outcome; `claim` tells whether availability
    was actually decremented and `notifications` how each email fared.
    """

    booking: Booking
    claim: InventoryClaim
    notifications: NotificationReport
