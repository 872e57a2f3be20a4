from fastapi import APIRouter, Depends, status
from opentelemetry import trace

from src.platform.exception.exceptions import CustomBaseError, UnexpectedError
from src.platform.logging.loguru_io import Logger
from src.platform.observability.tracing import mark_span_error
from src.service.ticketing.app.command.create_booking_use_case import CreateBookingUseCase
from src.service.ticketing.driving_adapter.http_controller.schema.booking_schema import (
    BookingCreateRequest,
    BookingResponse,
    BookingSummary,
)


router = APIRouter()
tracer = trace.get_tracer(__name__)


@router.post('', status_code=status.HTTP_200_OK)
@Logger.io
async def create_booking(
    request: BookingCreateRequest,
    booking_use_case: CreateBookingUseCase = Depends(CreateBookingUseCase.depends),
) -> BookingResponse:
    with tracer.start_as_current_span('controller.create_booking') as span:
        span.set_attribute('match_id', request.match_id)
        span.set_attribute('quantity', request.quantity)

        try:
            result = await booking_use_case.create_booking(
                match_id=request.match_id,
                name=request.name,
                email=request.email,
                quantity=request.quantity,
            )
        except CustomBaseError:
            raise
        except Exception as e:
            mark_span_error(span, e)
            Logger.base.opt(exception=e).error('Booking error')
            raise UnexpectedError('Failed to process booking. Please try again.') from e

        booking = result.booking
        if booking.document_id is None:
            raise ValueError('Booking document id should not be None after creation.')

        span.set_attribute('booking.id', booking.booking_id)

        return BookingResponse(
            success=True,
            booking_id=booking.booking_id,
            booking=BookingSummary(
                document_id=booking.document_id,
                booking_id=booking.booking_id,
                name=booking.name,
                email=booking.email,
                quantity=booking.quantity,
                match_id=booking.match_id,
            ),
        )
