from abc import ABC, abstractmethod

from src.service.shared_kernel.app.dto.notification_report import NotificationReport
from src.service.shop.domain.entity.order_entity import Order


class IOrderNotifier(ABC):
    @abstractmethod
    async def notify_order_placed(self, *, order: Order) -> NotificationReport:
        """Admin notification, then customer confirmation. Never raises."""
        pass
