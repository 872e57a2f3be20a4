"""
Loguru sinks for the site API

Everything ends up in loguru: our own `Logger.base` calls, `@Logger.io` traces,
and stdlib loggers (granian access log, httpx, uvicorn in dev) through
InterceptHandler. Access lines are re-levelled by their HTTP status so a 409
from the inventory or a 502 from the CMS stands out in the stream.
"""

from contextvars import ContextVar
from datetime import datetime, timezone
from enum import StrEnum
import logging
import os
from pathlib import Path
import re
import sys
from typing import TYPE_CHECKING, Optional

from loguru import logger as loguru_logger


if TYPE_CHECKING:
    from loguru import Logger as LoguruLogger

from src.platform.config.core_setting import settings
from src.platform.logging.service_context import get_service_context


# Keys whose values never reach a log line (CMS token, Resend key, auth headers)
SENSITIVE_KEYWORDS = frozenset({'token', 'api_key', 'authorization', 'secret'})

DEPTH_LINE = '│'

chain_start_time_var: ContextVar[float] = ContextVar('chain_start_time_var', default=0)
call_depth_var: ContextVar[int] = ContextVar('call_depth_var', default=0)


class ExtraField(StrEnum):
    SERVICE_CONTEXT = 'service_context'
    CHAIN_START_TIME = 'chain_start_time'
    CALL_TARGET = 'call_target'


# granian: '127.0.0.1 - "POST /api/bookings HTTP/1.1" 200 8.412'
# older '... HTTP/1.1" - 200 - 8ms' lines are accepted as well
_ACCESS_LINE = re.compile(r'"[A-Z]+ \S+ HTTP/[\d.]+"\s+(?:-\s+)?(\d{3})\b')

_STATUS_LEVELS = (
    (500, 'CRITICAL'),
    (400, 'ERROR'),
    (300, 'WARNING'),
    (200, 'SUCCESS'),
)


def access_log_level(message: str) -> Optional[str]:
    """Log level for an HTTP access line, None when the message is not one"""
    found = _ACCESS_LINE.search(message)
    if not found:
        return None
    status_code = int(found.group(1))
    for floor, level in _STATUS_LEVELS:
        if status_code >= floor:
            return level
    return 'INFO'


def _default_extra() -> dict[str, str]:
    return {
        ExtraField.SERVICE_CONTEXT: get_service_context(),
        ExtraField.CHAIN_START_TIME: '',
        ExtraField.CALL_TARGET: '',
    }


class InterceptHandler(logging.Handler):
    # HTTP client chatter for every CMS query and email call
    _QUIET_DEBUG_LOGGERS = ('httpx', 'httpcore', 'asyncio')

    def __init__(self) -> None:
        super().__init__()
        self._bound: Optional['LoguruLogger'] = None

    @property
    def bound_logger(self) -> 'LoguruLogger':
        if self._bound is None:
            self._bound = loguru_logger.bind(**_default_extra())
        return self._bound

    def emit(self, record: logging.LogRecord) -> None:
        if record.levelno <= logging.DEBUG and record.name.startswith(self._QUIET_DEBUG_LOGGERS):
            return

        message = record.getMessage()
        level = access_log_level(message)
        if level is None:
            try:
                level = loguru_logger.level(record.levelname).name
            except ValueError:
                level = record.levelno

        frame, depth = logging.currentframe(), 2
        while frame and frame.f_code.co_filename == logging.__file__:
            frame = frame.f_back  # type: ignore
            depth += 1

        self.bound_logger.opt(depth=depth, exception=record.exc_info).log(level, message)


io_log_format = ' | '.join(
    (
        f'<c>{{extra[{ExtraField.SERVICE_CONTEXT}]}}</>',
        '<lvl>{level:<8}</>',
        f'<c>{{file}}::{{function}}:{{line}}</>=><y>{{extra[{ExtraField.CALL_TARGET}]}}</>',
        '{message}',
        '<lk>{elapsed}</>',
        f'<lk>{{extra[{ExtraField.CHAIN_START_TIME}]:<18}}</>',
    )
)


def resolve_log_dir() -> Path:
    # Test runs write next to the test session, never into the project logs
    return Path(os.environ.get('TEST_LOG_DIR') or settings.LOG_DIR)


def log_file_path(*, now: datetime) -> Path:
    prefix = 'test_' if os.environ.get('TEST_LOG_DIR') else ''
    return resolve_log_dir() / f'{prefix}{settings.SERVICE_NAME}_{now:%Y-%m-%d_%H}.log'


def configure_sinks(base_logger: 'LoguruLogger') -> 'LoguruLogger':
    base_logger.remove()
    bound = base_logger.bind(**_default_extra())
    min_level = 'DEBUG' if settings.DEBUG else 'INFO'

    bound.add(sys.stdout, format=io_log_format, level=min_level, enqueue=True)

    # Production logs go to stdout only
    if settings.DEBUG:
        bound.add(
            str(log_file_path(now=datetime.now(timezone.utc))),
            format=io_log_format,
            rotation='1 hour',
            retention='7 days',
            compression='gz',
            enqueue=True,
            level=min_level,
        )

    logging.basicConfig(handlers=[InterceptHandler()], level=0, force=True)
    return bound


custom_logger = configure_sinks(loguru_logger)
