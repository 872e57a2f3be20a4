from typing import Any, Callable, Coroutine

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import ORJSONResponse
from starlette.responses import Response

from src.platform.exception.exceptions import CustomBaseError
from src.platform.logging.loguru_io import Logger

# Type alias for exception handlers (compatible with Starlette's expected signature)
ExceptionHandler = Callable[[Request, Exception], Coroutine[Any, Any, Response]]


def error_body(message: str, details: list[dict[str, Any]] | None = None) -> dict[str, Any]:
    body: dict[str, Any] = {'error': message}
    if details is not None:
        body['details'] = details
    return body


def validation_details(errors: list[Any]) -> list[dict[str, Any]]:
    """Flatten pydantic errors into a JSON-safe per-field list (ctx may hold exception objects)."""
    details = []
    for error in errors:
        location = [str(part) for part in error.get('loc', ()) if part != 'body']
        details.append(
            {
                'field': '.'.join(location),
                'message': str(error.get('msg', '')),
                'type': str(error.get('type', '')),
            }
        )
    return details


async def custom_error_handler(request: Request, exc: Exception) -> ORJSONResponse:
    error = exc if isinstance(exc, CustomBaseError) else CustomBaseError(str(exc), 500)
    return ORJSONResponse(
        status_code=error.status_code, content=error_body(error.message, error.details)
    )


async def validation_error_handler(request: Request, exc: Exception) -> ORJSONResponse:
    error = exc if isinstance(exc, RequestValidationError) else RequestValidationError([])
    return ORJSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=error_body('Invalid request data', validation_details(list(error.errors()))),
    )


async def general_500_exception_handler(request: Request, exc: Exception) -> ORJSONResponse:
    Logger.base.opt(exception=exc).error(f'Unhandled error on {request.url.path}')
    return ORJSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=error_body('Internal server error'),
    )


# Exception handler mapping
EXCEPTION_HANDLERS: dict[type[Exception], ExceptionHandler] = {
    CustomBaseError: custom_error_handler,
    RequestValidationError: validation_error_handler,
    Exception: general_500_exception_handler,  # Catch-all for unhandled exceptions
}


def register_exception_handlers(app: FastAPI) -> None:
    for exception_class, handler in EXCEPTION_HANDLERS.items():
        app.add_exception_handler(exception_class, handler)
