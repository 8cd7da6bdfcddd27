"""
Result Type for Fallible Functions
Represents success or failure without raising
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Generic, TypeVar

from errlift.domain.errors import UnwrapError

T = TypeVar("T")
E = TypeVar("E")
U = TypeVar("U")
F = TypeVar("F")


@dataclass(frozen=True)
class Success(Generic[T]):
    """
    Represents a successful operation result.

    Attributes:
        value: The successful result value
    """

    value: T

    def is_success(self) -> bool:
        """Always returns True for Success."""
        return True

    def is_failure(self) -> bool:
        """Always returns False for Success."""
        return False

    def map(self, func: Callable[[T], U]) -> Success[U]:
        """
        Transform the success value using the provided function.

        Exceptions raised by func propagate to the caller.

        Args:
            func: Function to transform the value

        Returns:
            New Success with transformed value
        """
        return Success(func(self.value))

    def map_error(self, func: Callable[[Any], Any]) -> Success[T]:
        """Nothing to convert on Success; returns self."""
        return self

    def flat_map(self, func: Callable[[T], Success[U] | Failure[F]]) -> Success[U] | Failure[F]:
        """
        Chain operations that return Results.

        Args:
            func: Function that returns a Result

        Returns:
            Result from applying func to the value
        """
        return func(self.value)

    and_then = flat_map

    def or_else(self, default: Any) -> T:
        """Return the value (ignores default)."""
        return self.value

    def unwrap(self) -> T:
        """Return the value."""
        return self.value

    def unwrap_error(self) -> Any:
        """
        Raise because there is no error to return.

        Raises:
            UnwrapError: Always
        """
        raise UnwrapError(f"Attempted to unwrap_error a Success: {self.value!r}", result=self)


@dataclass(frozen=True)
class Failure(Generic[E]):
    """
    Represents a failed operation result.

    Attributes:
        error: The error value
    """

    error: E

    def is_success(self) -> bool:
        """Always returns False for Failure."""
        return False

    def is_failure(self) -> bool:
        """Always returns True for Failure."""
        return True

    def map(self, func: Callable[[Any], Any]) -> Failure[E]:
        """
        Does nothing for Failure (error propagates).

        Args:
            func: Ignored function

        Returns:
            Self (unchanged)
        """
        return self

    def map_error(self, func: Callable[[E], F]) -> Failure[F]:
        """
        Transform the error value using the provided function.

        Args:
            func: Conversion applied to the error

        Returns:
            New Failure holding the converted error
        """
        return Failure(func(self.error))

    def flat_map(self, func: Callable[[Any], Any]) -> Failure[E]:
        """
        Does nothing for Failure (error propagates).

        Args:
            func: Ignored function

        Returns:
            Self (unchanged)
        """
        return self

    and_then = flat_map

    def or_else(self, default: U) -> U:
        """Return the default value instead of error."""
        return default

    def unwrap(self) -> Any:
        """
        Raise an exception carrying the error.

        Raises:
            UnwrapError: With the error and the failed result attached
        """
        raise UnwrapError(f"Attempted to unwrap a Failure: {self.error!r}", result=self)

    def unwrap_error(self) -> E:
        """Return the error."""
        return self.error


# Type alias for Result
Result = Success[T] | Failure[E]
