"""
Error Conversion Capability
How a target error type declares that it can be built from a source error
"""
from __future__ import annotations

from typing import Any, Callable, Protocol, TypeVar, Union, runtime_checkable

from errlift.domain.errors import ConversionNotDefined

E1 = TypeVar("E1")
E2 = TypeVar("E2")
E_contra = TypeVar("E_contra", contravariant=True)


@runtime_checkable
class ConvertsFrom(Protocol[E_contra]):
    """
    Target error types that know how to absorb a source error.

    Implement ``from_error`` as a classmethod returning an instance of the
    target type. It must accept every value of the source type.

    Usage:
        class AppError(Exception):
            @classmethod
            def from_error(cls, error: ParseError) -> "AppError":
                return cls(error)
    """

    def from_error(self, error: E_contra) -> Any:
        ...


Converter = Callable[[E1], E2]
ConversionTarget = Union[ConvertsFrom[E1], Callable[[E1], E2]]


def identity(error: E1) -> E1:
    """Conversion used when source and target error types are the same."""
    return error


def resolve_converter(into: ConversionTarget) -> Converter:
    """
    Turn a conversion target into a plain ``E1 -> E2`` callable.

    A ``from_error`` hook wins over calling the target directly, so an
    exception class can provide a dedicated conversion instead of its
    constructor.

    Args:
        into: A ConvertsFrom type, or any callable taking the source error

    Returns:
        The callable that performs the conversion

    Raises:
        ConversionNotDefined: If ``into`` cannot convert anything
    """
    hook = getattr(into, "from_error", None)
    if callable(hook):
        return hook
    if callable(into):
        return into
    raise ConversionNotDefined(into)


def describe_converter(converter: Converter) -> str:
    """Readable name for a resolved converter, used in log fields."""
    return getattr(converter, "__qualname__", None) or repr(converter)
