from typing import Annotated, Any, List, Optional

from pydantic import BaseModel, ConfigDict, EmailStr, Field, StringConstraints
from pydantic.alias_generators import to_camel

from src.service.shop.domain.entity.order_entity import MAX_ORDER_LINES, CartItem, CustomerDetails


RequiredText = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1, max_length=200)]
OptionalText = Annotated[str, StringConstraints(strip_whitespace=True, max_length=200)]
CurrencyCode = Annotated[
    str, StringConstraints(strip_whitespace=True, to_upper=True, pattern=r'^[A-Za-z]{3}$')
]


class CustomerSchema(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    first_name: RequiredText
    last_name: RequiredText
    email: EmailStr
    phone: RequiredText
    address: RequiredText
    city: RequiredText
    state: OptionalText = ''
    zip_code: OptionalText = ''
    country: OptionalText = 'Bhutan'
    notes: Annotated[str, StringConstraints(strip_whitespace=True, max_length=1000)] = ''

    def to_entity(self) -> CustomerDetails:
        return CustomerDetails(
            first_name=self.first_name,
            last_name=self.last_name,
            email=self.email,
            phone=self.phone,
            address=self.address,
            city=self.city,
            state=self.state,
            zip_code=self.zip_code,
            country=self.country or 'Bhutan',
            notes=self.notes,
        )


class CartItemSchema(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    product_id: RequiredText = Field(alias='_id')
    name: RequiredText
    size: OptionalText = ''
    quantity: int = Field(gt=0, le=100, strict=True)
    price: float = Field(gt=0)
    sale_price: Optional[float] = Field(default=None, gt=0)
    currency: CurrencyCode
    slug: Optional[str] = None
    image: Optional[Any] = None  # CMS image object or URL; not used server side
    collection: Optional[str] = None

    def to_entity(self) -> CartItem:
        return CartItem(
            product_id=self.product_id,
            name=self.name,
            size=self.size,
            quantity=self.quantity,
            price=self.price,
            sale_price=self.sale_price,
            currency=self.currency,
            slug=self.slug,
        )


class CheckoutRequest(BaseModel):
    model_config = ConfigDict(
        json_schema_extra={
            'example': {
                'customer': {
                    'firstName': 'Pema',
                    'lastName': 'Lhamo',
                    'email': 'pema@example.com',
                    'phone': '+975 17 123 456',
                    'address': 'Main Street 1',
                    'city': 'Paro',
                },
                'items': [
                    {
                        '_id': 'product-home-jersey',
                        'name': 'Home Jersey 2025',
                        'size': 'M',
                        'quantity': 1,
                        'price': 1000,
                        'currency': 'BTN',
                    }
                ],
                'subtotal': 1000,
                'currency': 'BTN',
            }
        }
    )

    customer: CustomerSchema
    items: List[CartItemSchema] = Field(min_length=1, max_length=MAX_ORDER_LINES)
    subtotal: float = Field(ge=0)
    currency: CurrencyCode


class CheckoutResponse(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    success: bool = True
    order_id: str
    message: str = 'Order placed successfully'
