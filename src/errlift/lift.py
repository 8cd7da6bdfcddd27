"""
Lift Adapter
Turn a function failing with E1 into one failing with E2

Given a target error type that can absorb the source error:

    class AppError(Exception):
        @classmethod
        def from_error(cls, error: ParseError) -> AppError:
            return cls(error)

a pipeline stage no longer needs an inline error-mapping lambda:

    result.map_error(AppError.from_error).and_then(lift(parse_int, AppError))

instead of:

    result.and_then(lambda s: parse_int(s).map_error(AppError.from_error))
"""
from __future__ import annotations

import functools
from typing import Callable, TypeVar

from errlift.domain.conversion import ConversionTarget, describe_converter, resolve_converter
from errlift.domain.result import Failure, Result
from errlift.infrastructure.observability import get_logger

I = TypeVar("I")
O = TypeVar("O")
E1 = TypeVar("E1")
E2 = TypeVar("E2")

logger = get_logger(__name__)


def lift(
    f: Callable[[I], Result[O, E1]],
    into: ConversionTarget,
) -> Callable[[I], Result[O, E2]]:
    """
    Lift a fallible function that fails with E1 into one that fails with E2.

    The returned function calls ``f`` exactly once per call. A Success is
    returned as is; a Failure has its error converted once. Exceptions from
    ``f`` or from the conversion are not caught.

    Args:
        f: Single-argument function returning a Result
        into: Target error type providing ``from_error``, or any callable
            converting the source error

    Returns:
        The lifted function

    Raises:
        TypeError: If ``f`` is not callable
        ConversionNotDefined: If ``into`` cannot convert errors
    """
    if not callable(f):
        raise TypeError(f"lift() expects a callable, got {type(f).__name__}")
    convert = resolve_converter(into)

    logger.debug(
        "function lifted",
        function=getattr(f, "__qualname__", repr(f)),
        converter=describe_converter(convert),
    )

    # name and docstring only; a callable instance's attributes stay on f
    @functools.wraps(f, updated=())
    def lifted_fn(value: I) -> Result[O, E2]:
        result = f(value)
        if isinstance(result, Failure):
            return Failure(convert(result.error))
        return result

    return lifted_fn


def lifted(into: ConversionTarget) -> Callable[[Callable[[I], Result[O, E1]]], Callable[[I], Result[O, E2]]]:
    """
    Decorator form of lift.

    Usage:
        @lifted(AppError)
        def parse_int(text: str) -> Result[int, ParseError]:
            ...
    """
    convert = resolve_converter(into)

    def decorator(f: Callable[[I], Result[O, E1]]) -> Callable[[I], Result[O, E2]]:
        return lift(f, convert)

    return decorator
