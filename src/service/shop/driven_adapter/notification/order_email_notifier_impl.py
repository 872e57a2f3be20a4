from src.platform.logging.loguru_io import Logger
from src.service.shared_kernel.app.best_effort_notifier import BestEffortNotifier
from src.service.shared_kernel.app.dto.email_message import EmailMessage
from src.service.shared_kernel.app.dto.notification_report import NotificationReport
from src.service.shared_kernel.domain.html_sanitizer import sanitize_text
from src.service.shared_kernel.driven_adapter.email.email_template_renderer import (
    EmailTemplateRenderer,
)
from src.service.shop.app.interface.i_order_notifier import IOrderNotifier
from src.service.shop.domain.entity.order_entity import Order


ORDER_ADMIN = 'order_admin'
ORDER_CUSTOMER = 'order_customer'


class OrderEmailNotifierImpl(IOrderNotifier):
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

    def build_messages(self, *, order: Order) -> list[tuple[str, EmailMessage]]:
        # Subject lines are plain text, but still carry customer input
        customer_name = sanitize_text(order.customer.full_name)
        admin_message = EmailMessage(
            sender=self.sender_address,
            to=self.admin_address,
            subject=f'🛒 New Order #{order.order_id} - {customer_name}',
            html=self.renderer.render('order_admin.html', order=order),
        )
        customer_message = EmailMessage(
            sender=self.sender_address,
            to=order.customer.email,
            subject=f'Order Confirmed! #{order.order_id} - {self.renderer.club_name} Shop',
            html=self.renderer.render('order_customer.html', order=order),
        )
        return [(ORDER_ADMIN, admin_message), (ORDER_CUSTOMER, customer_message)]

    @Logger.io
    async def notify_order_placed(self, *, order: Order) -> NotificationReport:
        try:
            messages = self.build_messages(order=order)
        except Exception as e:
            Logger.base.opt(exception=e).error(
                f'📧 [EMAIL] Could not render order emails for {order.order_id}'
            )
            return NotificationReport.failed(
                targets=[(ORDER_ADMIN, self.admin_address), (ORDER_CUSTOMER, order.customer.email)],
                error=str(e),
            )
        return await self.notifier.send_all(messages=messages)
