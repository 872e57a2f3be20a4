import attrs

from src.service.shared_kernel.app.dto.notification_report import NotificationReport
from src.service.shop.domain.entity.order_entity import Order


@attrs.frozen
class CheckoutResult:
    order: Order
    notifications: NotificationReport
