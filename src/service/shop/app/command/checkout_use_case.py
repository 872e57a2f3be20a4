from typing import List, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends
from opentelemetry import trace

from src.platform.config.di import Container
from src.platform.logging.loguru_io import Logger
from src.platform.metrics.site_metrics import metrics
from src.service.shared_kernel.domain.value_object.reference_id import generate_order_id
from src.service.shop.app.dto.checkout_policy import CheckoutPolicy
from src.service.shop.app.dto.checkout_result import CheckoutResult
from src.service.shop.app.interface.i_order_notifier import IOrderNotifier
from src.service.shop.domain.entity.order_entity import CartItem, CustomerDetails, Order


class CheckoutUseCase:
    """
    Checkout use case (cash on delivery)

    Flow:
    1. Generate PFC-... order id
    2. total = subtotal + flat shipping fee (item count and weight do not matter)
    3. Send admin + customer emails (best effort)

    No order document is written; the emails are the order record.
    """

    def __init__(self, *, policy: CheckoutPolicy, notifier: IOrderNotifier) -> None:
        self.policy = policy
        self.notifier = notifier
        self.tracer = trace.get_tracer(__name__)

    @classmethod
    @inject
    def depends(
        cls,
        policy: CheckoutPolicy = Depends(Provide[Container.checkout_policy]),
        notifier: IOrderNotifier = Depends(Provide[Container.order_notifier]),
    ) -> Self:
        return cls(policy=policy, notifier=notifier)

    @Logger.io
    async def checkout(
        self,
        *,
        customer: CustomerDetails,
        items: List[CartItem],
        subtotal: float,
        currency: str,
    ) -> CheckoutResult:
        order_id = generate_order_id()
        with self.tracer.start_as_current_span(
            'use_case.checkout',
            attributes={'order.id': order_id, 'order.items': len(items)},
        ):
            order = Order.place(
                order_id=order_id,
                customer=customer,
                items=items,
                subtotal=subtotal,
                shipping=self.policy.shipping_fee,
                currency=currency,
            )
            Logger.base.info(
                f'🛒 [CHECKOUT] {order.order_id}: {len(order.items)} item(s), total {order.total} '
                f'{order.currency}'
            )

            notifications = await self.notifier.notify_order_placed(order=order)
            metrics.record_checkout(result='placed', currency=order.currency)
            return CheckoutResult(order=order, notifications=notifications)
