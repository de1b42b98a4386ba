"""Function and closure exercises."""

from __future__ import annotations

import functools
import logging
from typing import Any, Callable

from katas.objects import get_json

__all__ = ["logger"]

log = logging.getLogger("katas")


def _format_arg(arg: Any) -> str:
    try:
        return get_json(arg)
    except TypeError:
        # Slotted or builtin objects with no public fields.
        return repr(arg)


def _format_call(name: str, args: tuple[Any, ...], kwargs: dict[str, Any]) -> str:
    rendered = [_format_arg(arg) for arg in args]
    rendered.extend(f"{key}={_format_arg(value)}" for key, value in kwargs.items())
    return f"{name}({','.join(rendered)})"

def logger(
    func: Callable[..., Any], log_func: Callable[[str], Any] | None = None
) -> Callable[..., Any]:
    """Wrap *func* so each call is logged when it starts and when it ends.

    Example:
        cos_logger = logger(math.cos, print)
        cos_logger(math.pi)  # returns -1.0 and prints:
        # cos(3.141592653589793) starts
        # cos(3.141592653589793) ends
    """
    write = log_func or log.info
    name = getattr(func, "__name__", type(func).__name__)

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        call = _format_call(name, args, kwargs)
        write(f"{call} starts")
        result = func(*args, **kwargs)
        write(f"{call} ends")
        return result

    return wrapper
