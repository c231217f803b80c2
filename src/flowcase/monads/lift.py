"""Adapting arbitrary callables into Result producers.

``lift(fn)`` returns a callable that never raises for ordinary failures: the
return value is normalized and any Exception is captured as a Failure. The
one deliberate exception is a caller error. Invoking the lifted callable with
arguments its signature cannot bind raises SignatureMismatch, because no
amount of downstream error handling can fix a wrong call site.

    >>> inc = lift(lambda x: x + 1)
    >>> inc(1)
    Success(2)
    >>> inc("a")
    Failure(TypeError('can only concatenate str (not "int") to str'))
    >>> inc(1, 2)
    Traceback (most recent call last):
    ...
    flowcase.foundation.errors.errors.SignatureMismatch: <lambda>(): too many positional arguments
"""

from __future__ import annotations

import functools
import inspect
import logging
from typing import Any, Callable, TypeVar

from ..foundation.config import get_settings
from ..foundation.errors import SignatureMismatch
from .normalize import normalize
from .result import Failure, Result

logger = logging.getLogger("flowcase.lift")

E = TypeVar("E")

ErrorFn = Callable[[Exception], Any]


def _identity(exc: Exception) -> Exception:
    return exc


def _signature_of(fn: Callable[..., Any]) -> inspect.Signature | None:
    """Signature of fn itself, or None for callables that hide it (some builtins).

    ``__wrapped__`` is not followed: a decorator may accept different arguments
    than the function it wraps, and the decorator is what gets called.
    """
    try:
        return inspect.signature(fn, follow_wrapped=False)
    except (TypeError, ValueError):
        return None


def _name_of(fn: Callable[..., Any]) -> str:
    return getattr(fn, "__qualname__", None) or getattr(fn, "__name__", None) or repr(fn)


def lift(
    fn: Callable[..., Any],
    error_fn: ErrorFn | None = None,
    *,
    fatal: tuple[type[BaseException], ...] = (),
) -> Callable[..., Result[Any, Any]]:
    """Wrap fn so that calling it always yields a Result.

    Args:
        fn: Any callable. Its return value goes through normalize(), so it may
            return a plain value, None, a ``(None, error)`` pair or a Result.
        error_fn: Applied to a captured exception to build the Failure payload.
            Defaults to identity (the exception object itself).
        fatal: Extra exception types to re-raise instead of capturing.

    Returns:
        A callable with fn's metadata that returns a Result.

    Raises:
        SignatureMismatch: From the returned callable when its arguments do not
            bind to fn's signature, or when fn itself lets one escape.

    Exceptions that are not Exception subclasses (KeyboardInterrupt,
    SystemExit) are never captured.
    """
    transform = error_fn or _identity
    passthrough: tuple[type[BaseException], ...] = (SignatureMismatch, *fatal)
    signature = _signature_of(fn) if get_settings().lift.check_signature else None
    name = _name_of(fn)

    # classes: copy name/doc only, not the class namespace
    @functools.wraps(fn, updated=() if isinstance(fn, type) else functools.WRAPPER_UPDATES)
    def lifted(*args: Any, **kwargs: Any) -> Result[Any, Any]:
        if signature is not None:
            try:
                signature.bind(*args, **kwargs)
            except TypeError as exc:
                logger.debug("signature mismatch calling %s: %s", name, exc)
                raise SignatureMismatch(name, str(exc)) from exc
        try:
            raw = fn(*args, **kwargs)
        except passthrough:
            logger.debug("fatal condition in %s, re-raising", name)
            raise
        except Exception as exc:
            logger.debug("captured %s from %s", type(exc).__name__, name)
            return Failure(transform(exc))
        return normalize(raw)

    return lifted


wrap = lift


def try_call(fn: Callable[..., Any], *args: Any, error_fn: ErrorFn | None = None, **kwargs: Any) -> Result[Any, Any]:
    """Lift fn and invoke it immediately.

    Handy as a chain seed, where the first computation may itself fail:

        >>> chain_head(try_call(load_config, "app.toml"), validate)
    """
    return lift(fn, error_fn)(*args, **kwargs)
