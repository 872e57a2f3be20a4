from src.platform.logging.loguru_io import Logger
from src.service.shared_kernel.app.best_effort_notifier import BestEffortNotifier
from src.service.shared_kernel.app.dto.email_message import EmailMessage
from src.service.shared_kernel.app.dto.notification_report import NotificationReport
from src.service.shared_kernel.driven_adapter.email.email_template_renderer import (
    EmailTemplateRenderer,
)
from src.service.ticketing.app.interface.i_booking_notifier import IBookingNotifier
from src.service.ticketing.domain.entity.booking_entity import Booking
from src.service.ticketing.domain.entity.match_entity import Match


BOOKING_CUSTOMER = 'booking_customer'
BOOKING_ADMIN = 'booking_admin'


class BookingEmailNotifierImpl(IBookingNotifier):
    def __init__(
        self,
        *,
        notifier: BestEffortNotifier,
        renderer: EmailTemplateRenderer,
        sender_address: str,
        admin_address: str,
    ) -> None:
        self.notifier = notifier
        self.renderer = renderer
        self.sender_address = sender_address
        self.admin_address = admin_address

    def build_messages(
        self, *, booking: Booking, match: Match, remaining_availability: int
    ) -> list[tuple[str, EmailMessage]]:
        customer_message = EmailMessage(
            sender=self.sender_address,
            to=booking.email,
            subject=f'🎫 Ticket Booking Confirmed - {booking.booking_id}',
            html=self.renderer.render('booking_customer.html', booking=booking, match=match),
        )
        admin_message = EmailMessage(
            sender=self.sender_address,
            to=self.admin_address,
            subject=f'🎫 New Ticket Booking - {booking.booking_id}',
            html=self.renderer.render(
                'booking_admin.html',
                booking=booking,
                match=match,
                remaining_availability=remaining_availability,
            ),
        )
        return [(BOOKING_CUSTOMER, customer_message), (BOOKING_ADMIN, admin_message)]

    @Logger.io
    async def notify_booking_confirmed(
        self, *, booking: Booking, match: Match, remaining_availability: int
    ) -> NotificationReport:
        try:
            messages = self.build_messages(
                booking=booking, match=match, remaining_availability=remaining_availability
            )
        except Exception as e:
            Logger.base.opt(exception=e).error(
                f'📧 [EMAIL] Could not render booking emails for {booking.booking_id}'
            )
            return NotificationReport.failed(
                targets=[(BOOKING_CUSTOMER, booking.email), (BOOKING_ADMIN, self.admin_address)],
                error=str(e),
            )
        return await self.notifier.send_all(messages=messages)
