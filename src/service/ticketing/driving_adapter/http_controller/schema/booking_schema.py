from typing import Annotated, Any

from pydantic import BaseModel, ConfigDict, EmailStr, Field, StringConstraints, field_validator
from pydantic.alias_generators import to_camel


MAX_EMAIL_LENGTH = 255


class BookingCreateRequest(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        json_schema_extra={
            'example': {
                'matchId': 'm1',
                'name': 'Pema Lhamo',
                'email': 'pema@example.com',
                'quantity': 2,
            }
        },
    )

    match_id: Annotated[str, StringConstraints(min_length=1)]
    name: Annotated[str, StringConstraints(strip_whitespace=True, min_length=1, max_length=100)]
    email: EmailStr
    # Any whole JSON number (2 or 2.0); 2.5, "2" and true are rejected
    quantity: int = Field(gt=0, le=100)

    @field_validator('quantity', mode='before')
    @classmethod
    def check_quantity_is_number(cls, v: Any) -> Any:
        if isinstance(v, (bool, str)):
            raise ValueError('quantity must be a whole number')
        return v

    @field_validator('email', mode='before')
    @classmethod
    def check_email_length(cls, v: Any) -> Any:
        if isinstance(v, str) and len(v) > MAX_EMAIL_LENGTH:
            raise ValueError(f'email must be at most {MAX_EMAIL_LENGTH} characters')
        return v


class BookingSummary(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    document_id: str = Field(alias='_id')
    booking_id: str
    name: str
    email: str
    quantity: int
    match_id: str


class BookingResponse(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        json_schema_extra={
            'example': {
                'success': True,
                'bookingId': 'TKT-M8K2Q1ZP-7QX4',
                'booking': {
                    '_id': 'a1b2c3d4-booking',
                    'bookingId': 'TKT-M8K2Q1ZP-7QX4',
                    'name': 'Pema Lhamo',
                    'email': 'pema@example.com',
                    'quantity': 2,
                    'matchId': 'm1',
                },
            }
        },
    )

    success: bool = True
    booking_id: str
    booking: BookingSummary
