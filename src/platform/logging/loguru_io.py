from collections.abc import Awaitable, Iterator
from contextlib import contextmanager
from functools import wraps
from inspect import iscoroutinefunction
import types
from typing import TYPE_CHECKING, Any, Callable, ParamSpec, TypeVar, cast, overload


if TYPE_CHECKING:
    from loguru import Logger as LoguruLogger

from src.platform.config.core_setting import settings
from src.platform.exception.exceptions import CustomBaseError, RevisionConflictError
from src.platform.logging.loguru_io_config import ExtraField, custom_logger
from src.platform.logging.loguru_io_utils import (
    build_call_target_func_path,
    enter_call,
    fetch_layer_depth,
    get_chain_start_time,
    leave_call,
    mask_sensitive,
    normalize_args_kwargs,
    should_mask_keyword,
    truncate_content,
)


_F = TypeVar('_F', bound=Callable[..., Any])


def exception_log_level(e: Exception) -> str | None:
    """
    Level for an exception leaving a traced call, None means "log with traceback"

    Client-side rejections (sold out, unknown match, bad cart) are warnings,
    server-side CustomBaseErrors are errors, lost inventory races are expected.
    """
    if isinstance(e, RevisionConflictError):
        return 'WARNING'
    if isinstance(e, CustomBaseError):
        return 'WARNING' if e.status_code < 500 else 'ERROR'
    return None


class LoguruIO:
    def __init__(
        self, custom_logger: 'LoguruLogger', *, reraise: bool = True, truncate_content: bool = False
    ) -> None:
        self._custom_logger = custom_logger
        self.reraise = reraise
        self.truncate_content = truncate_content
        self.extra: dict[str, Any] = {}
        self.depth = 3  # wrapper + _traced_call frames

    def _log(self, level: str, message: str) -> None:
        self._custom_logger.bind(**self.extra).opt(depth=self.depth).log(
            level, f'{fetch_layer_depth()}{message}'
        )

    def log_exception(self, e: Exception) -> None:
        # An exception bubbling through nested traced calls is logged once, where it was raised
        if getattr(e, '_has_logged', False):
            return
        e._has_logged = True  # type: ignore[attr-defined]
        level = exception_log_level(e)
        if level is None:
            self._custom_logger.bind(**self.extra).opt(depth=self.depth).exception(
                f'{type(e).__name__}: {e}'
            )
        else:
            self._log(level, f'{type(e).__name__}: {e}')

    def mask_sensitive(self, data: Any) -> Any:
        if isinstance(data, dict):
            processed = {
                key: self.mask_sensitive(should_mask_keyword(key, value))
                for key, value in data.items()
            }
        elif isinstance(data, list | tuple):
            processed = type(data)(self.mask_sensitive(item) for item in data)
        else:
            processed = mask_sensitive(data)
        return truncate_content(processed) if self.truncate_content else processed

    @contextmanager
    def _traced_call(self, args: tuple[Any, ...], kwargs: dict[str, Any]) -> Iterator[None]:
        enter_call()
        self.extra[ExtraField.CHAIN_START_TIME] = get_chain_start_time()
        # Skip the masking work entirely when DEBUG lines are filtered out
        if settings.DEBUG:
            self._log(
                'DEBUG',
                f'args: {self.mask_sensitive(args)}, kwargs: {self.mask_sensitive(kwargs)}',
            )
        try:
            yield
        except Exception as e:
            self.log_exception(e)
            raise
        finally:
            leave_call()

    def _log_return(self, return_value: Any) -> None:
        if settings.DEBUG:
            self._log('DEBUG', f'return: {self.mask_sensitive(return_value)}')

    def _hide_from_traceback(self, func: Callable[..., Any]) -> Callable[..., Any]:
        func.__code__ = func.__code__.replace(  # type: ignore[attr-defined]
            co_filename=cast(types.FunctionType, self._custom_logger.catch).__code__.co_filename
        )
        return func

    def __call__(self, func: _F) -> _F:
        self.extra[ExtraField.CALL_TARGET] = build_call_target_func_path(func)

        if iscoroutinefunction(func):

            @wraps(func)
            async def async_wrapper(*args: Any, **kwargs: Any) -> Any:
                try:
                    with self._traced_call(args, kwargs):
                        args, kwargs = normalize_args_kwargs(func, *args, **kwargs)
                        return_value = await cast(Awaitable[Any], func(*args, **kwargs))
                        self._log_return(return_value)
                        return return_value
                except Exception:
                    if self.reraise:
                        raise
                    return None

            return cast(_F, self._hide_from_traceback(async_wrapper))

        @wraps(func)
        def sync_wrapper(*args: Any, **kwargs: Any) -> Any:
            try:
                with self._traced_call(args, kwargs):
                    args, kwargs = normalize_args_kwargs(func, *args, **kwargs)
                    return_value = func(*args, **kwargs)
                    self._log_return(return_value)
                    return return_value
            except Exception:
                if self.reraise:
                    raise
                return None

        return cast(_F, self._hide_from_traceback(sync_wrapper))


_P = ParamSpec('_P')
_T = TypeVar('_T')


class Logger:
    """
    Logger.base: the bound loguru logger (service context on every line)
    Logger.io:   decorator tracing args, return values and exceptions of a call
    """

    base = custom_logger

    @overload
    @staticmethod
    def io(func: Callable[_P, _T]) -> Callable[_P, _T]: ...

    @overload
    @staticmethod
    def io(func: None = ..., *, reraise: bool = ..., truncate_content: bool = ...) -> LoguruIO: ...

    @staticmethod
    def io(
        func: Callable[_P, _T] | None = None, *, reraise: bool = True, truncate_content: bool = True
    ) -> Callable[_P, _T] | LoguruIO:
        decorator = LoguruIO(
            custom_logger=custom_logger, reraise=reraise, truncate_content=truncate_content
        )
        return decorator(func) if func else decorator
