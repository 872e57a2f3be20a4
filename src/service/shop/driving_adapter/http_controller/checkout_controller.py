from fastapi import APIRouter, Depends, status
from opentelemetry import trace

from src.platform.exception.exceptions import CustomBaseError, UnexpectedError
from src.platform.logging.loguru_io import Logger
from src.platform.metrics.site_metrics import metrics
from src.platform.observability.tracing import mark_span_error
from src.service.shop.app.command.checkout_use_case import CheckoutUseCase
from src.service.shop.driving_adapter.http_controller.schema.checkout_schema import (
    CheckoutRequest,
    CheckoutResponse,
)


router = APIRouter()
tracer = trace.get_tracer(__name__)


@router.post('', status_code=status.HTTP_200_OK)
@Logger.io
async def checkout(
    request: CheckoutRequest,
    checkout_use_case: CheckoutUseCase = Depends(CheckoutUseCase.depends),
) -> CheckoutResponse:
    with tracer.start_as_current_span('controller.checkout') as span:
        span.set_attribute('items', len(request.items))
        span.set_attribute('currency', request.currency)

        try:
            result = await checkout_use_case.checkout(
                customer=request.customer.to_entity(),
                items=[item.to_entity() for item in request.items],
                subtotal=request.subtotal,
                currency=request.currency,
            )
        except CustomBaseError:
            metrics.record_checkout(result='rejected', currency=request.currency)
            raise
        except Exception as e:
            metrics.record_checkout(result='error', currency=request.currency)
            mark_span_error(span, e)
            Logger.base.opt(exception=e).error('Checkout error')
            raise UnexpectedError('Failed to process order') from e

        return CheckoutResponse(order_id=result.order.order_id)
