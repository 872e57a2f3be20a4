from inspect import FullArgSpec, getfile, getfullargspec, getsourcelines
from os.path import basename
from re import IGNORECASE, compile
from time import time
from typing import Any, Callable

from src.platform.logging.loguru_io_config import (
    DEPTH_LINE,
    SENSITIVE_KEYWORDS,
    call_depth_var,
    chain_start_time_var,
)


MASK = '********'
MAX_CONTENT_LENGTH = 1000

# token='sk_live...' / api_key: "re_..." inside repr() output
_SECRET_PATTERN = compile(
    r'(\w*(?:' + '|'.join(sorted(SENSITIVE_KEYWORDS)) + r')\w*)(\s*[=:]\s*)([\'"]?)[^\'",)\s]+\3',
    IGNORECASE,
)
# Buyer emails show up in booking and order arguments
_EMAIL_PATTERN = compile(r'\b([A-Za-z0-9._%+-])[A-Za-z0-9._%+-]*@([A-Za-z0-9.-]+\.[A-Za-z]{2,})\b')


def get_chain_start_time() -> float:
    if not (start_time := chain_start_time_var.get()):
        start_time = time()
        chain_start_time_var.set(start_time)
    return start_time


def fetch_layer_depth() -> str:
    return DEPTH_LINE * (call_depth_var.get() - 1)


def build_call_target_func_path(func: Callable[..., Any]) -> str:
    try:
        lineno = getsourcelines(func)[1]
    except (OSError, TypeError):
        lineno = 0
    return f'{basename(getfile(getattr(func, "__func__", func)))}::{func.__qualname__}:{lineno}'


def enter_call() -> None:
    call_depth_var.set(call_depth_var.get() + 1)


def leave_call() -> None:
    layer = call_depth_var.get() - 1
    call_depth_var.set(layer)
    if not layer:
        chain_start_time_var.set(0)


def normalize_args_kwargs(
    func: Callable[..., Any], *args: Any, **kwargs: Any
) -> tuple[tuple[Any, ...], dict[Any, Any]]:
    """Drop arguments the wrapped function cannot accept (FastAPI passes extras to depends())"""
    func = getattr(func, '__wrapped__', func)
    spec: FullArgSpec = getfullargspec(func)

    if not spec.varkw:
        accepted = set(spec.args) | set(spec.kwonlyargs)
        kwargs = {k: v for k, v in kwargs.items() if k in accepted}

    if not spec.varargs:
        positional = [name for name in spec.args if name not in kwargs]
        args = args[: len(positional)]

    return args, kwargs


def mask_email(text: str) -> str:
    """'dorji@example.bt' -> 'd***@example.bt'"""
    return _EMAIL_PATTERN.sub(r'\1***@\2', text)


def mask_sensitive(data: Any) -> Any:
    data_str = str(data)
    masked = mask_email(_SECRET_PATTERN.sub(rf'\1\2\3{MASK}\3', data_str))
    return data if data_str == masked else masked


def should_mask_keyword(keyword: Any, value: Any) -> Any:
    if isinstance(keyword, str) and any(word in keyword.lower() for word in SENSITIVE_KEYWORDS):
        return MASK
    return value


def truncate_content(data: Any) -> Any:
    data_str = str(data)
    if len(data_str) <= MAX_CONTENT_LENGTH:
        return data
    return f'{data_str[:MAX_CONTENT_LENGTH]}... ({len(data_str)} chars)'
