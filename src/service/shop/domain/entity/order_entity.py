"""
Shop order (cash on delivery)

Orders live only for the duration of a checkout request: they feed the two
emails and the HTTP response and are never stored.
"""

from datetime import datetime, timezone
from typing import List, Optional

import attrs

from src.platform.exception.exceptions import DomainError
from src.platform.logging.loguru_io import Logger


MAX_ORDER_LINES = 50


@attrs.define
class CustomerDetails:
    first_name: str
    last_name: str
    email: str
    phone: str
    address: str
    city: str
    state: str = ''
    zip_code: str = ''
    country: str = 'Bhutan'
    notes: str = ''

    @property
    def full_name(self) -> str:
        return f'{self.first_name} {self.last_name}'


@attrs.define
class CartItem:
    product_id: str
    name: str
    quantity: int
    price: float
    currency: str
    size: str = ''
    sale_price: Optional[float] = None
    slug: Optional[str] = None

    @property
    def unit_price(self) -> float:
        return self.sale_price or self.price

    @property
    def line_total(self) -> float:
        return self.unit_price * self.quantity


@attrs.define
class Order:
    order_id: str
    customer: CustomerDetails
    items: List[CartItem]
    subtotal: float
    shipping: float
    currency: str
    created_at: Optional[datetime] = None

    @property
    def total(self) -> float:
        return self.subtotal + self.shipping

    @classmethod
    @Logger.io
    def place(
        cls,
        *,
        order_id: str,
        customer: CustomerDetails,
        items: List[CartItem],
        subtotal: float,
        shipping: float,
        currency: str,
    ) -> 'Order':
        if not items:
            raise DomainError('Order must contain at least one item')
        if len(items) > MAX_ORDER_LINES:
            raise DomainError(f'Order cannot contain more than {MAX_ORDER_LINES} items')
        if subtotal < 0:
            raise DomainError('subtotal cannot be negative')

        return cls(
            order_id=order_id,
            customer=customer,
            items=list(items),
            subtotal=subtotal,
            shipping=shipping,
            currency=currency.upper(),
            created_at=datetime.now(timezone.utc),
        )
