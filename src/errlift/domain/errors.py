# src/errlift/domain/errors.py
"""Library exception hierarchy."""

from typing import Any


class ErrliftError(Exception):
    """Base class for all errors raised by errlift itself."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}


class ConversionNotDefined(ErrliftError, TypeError):
    """Raised at lift time when the target cannot convert source errors."""

    def __init__(self, target: Any) -> None:
        super().__init__(
            f"{target!r} is neither callable nor provides from_error()",
            details={"target": repr(target)},
        )
        self.target = target


class UnwrapError(ErrliftError, ValueError):
    """Raised when unwrapping the wrong side of a Result."""

    def __init__(self, message: str, *, result: Any) -> None:
        super().__init__(message, details={"result": repr(result)})
        self.result = result
