from abc import ABC, abstractmethod

from src.service.shared_kernel.app.dto.notification_report import NotificationReport
from src.service.ticketing.domain.entity.booking_entity import Booking
from src.service.ticketing.domain.entity.match_entity import Match


class IBookingNotifier(ABC):
    @abstractmethod
    async def notify_booking_confirmed(
        self, *, booking: Booking, match: Match, remaining_availability: int
    ) -> NotificationReport:
        """
        Customer confirmation + admin notification. Never raises; failures are
        reported per message in the returned report.
        """
        pass
