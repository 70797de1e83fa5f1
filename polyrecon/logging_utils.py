from __future__ import annotations

import inspect
import logging
import reprlib
from functools import wraps
from typing import Any, Callable, Iterable, Mapping, MutableMapping, Optional, Sequence, TypeVar, cast

import numpy as np

F = TypeVar("F", bound=Callable[..., Any])

_repr = reprlib.Repr()
_repr.maxother = 160
_repr.maxlist = 8
_repr.maxtuple = 8


def _is_point(value: Any) -> bool:
    return (
        isinstance(value, tuple)
        and len(value) == 2
        and all(isinstance(item, (int, float)) for item in value)
    )


def _format_point(value: Sequence[float]) -> str:
    return f"({float(value[0]):.6g}, {float(value[1]):.6g})"


def summarize(value: Any, *, max_items: int = 6, max_length: int = 400) -> str:
    """Return a short, log-friendly rendering of ``value``.

    Points print with six significant digits, long vertex sequences are
    elided after ``max_items`` entries and numpy arrays are reduced to their
    shape and range.
    """

    if isinstance(value, np.ndarray):
        parts = [f"ndarray(shape={tuple(value.shape)}, dtype={value.dtype})"]
        if 0 < value.size <= max_items:
            parts.append(f"values={_repr.repr(value.tolist())}")
        elif value.size > max_items:
            parts.append(f"min={float(value.min()):.6g}")
            parts.append(f"max={float(value.max()):.6g}")
        return ", ".join(parts)

    if _is_point(value):
        return _format_point(value)

    if isinstance(value, (list, tuple)):
        open_br, close_br = ("(", ")") if isinstance(value, tuple) else ("[", "]")
        items = [summarize(item, max_items=max_items) for item in value[:max_items]]
        if len(value) > max_items:
            items.append(f"... {len(value) - max_items} more")
        return f"{open_br}{', '.join(items)}{close_br}"

    rendered = _repr.repr(value)
    if len(rendered) > max_length:
        return rendered[:max_length] + "... (truncated)"
    return rendered


def _describe_call(args: Sequence[Any], kwargs: Mapping[str, Any]) -> str:
    described = []
    if args:
        described.append(f"args=[{', '.join(summarize(arg) for arg in args)}]")
    if kwargs:
        pairs = ", ".join(f"{key}={summarize(value)}" for key, value in kwargs.items())
        described.append(f"kwargs={{{pairs}}}")
    return ", ".join(described) or "no-args"


def debug_log_call(logger: logging.Logger) -> Callable[[F], F]:
    """Trace entry, result and failures of the decorated function at DEBUG level."""

    def decorator(func: F) -> F:
        label = func.__name__

        @wraps(func)
        def wrapper(*args: Any, **kwargs: Any):
            if not logger.isEnabledFor(logging.DEBUG):
                return func(*args, **kwargs)
            logger.debug("Entering %s (%s)", label, _describe_call(args, kwargs))
            try:
                result = func(*args, **kwargs)
            except Exception as exc:
                logger.debug("%s raised %s: %s", label, type(exc).__name__, exc)
                raise
            logger.debug("Exiting %s -> %s", label, summarize(result))
            return result

        return cast(F, wrapper)

    return decorator


def apply_debug_logging(
    namespace: MutableMapping[str, Any],
    *,
    logger: Optional[logging.Logger] = None,
    skip: Iterable[str] = (),
) -> None:
    """Trace every plain function defined by the module owning ``namespace``."""

    module_name = namespace["__name__"]
    logger = logger or logging.getLogger(module_name)
    skipped = set(skip)
    for name, value in list(namespace.items()):
        if name in skipped or not inspect.isfunction(value):
            continue
        if value.__module__ == module_name:
            namespace[name] = debug_log_call(logger)(value)
