"""
errlift Domain Layer
Result type, conversion capability, and library errors; no infrastructure imports
"""
from errlift.domain.conversion import (
    ConversionTarget,
    Converter,
    ConvertsFrom,
    identity,
    resolve_converter,
)
from errlift.domain.errors import ConversionNotDefined, ErrliftError, UnwrapError
from errlift.domain.result import Failure, Result, Success

__all__ = [
    "Result",
    "Success",
    "Failure",
    "ConvertsFrom",
    "ConversionTarget",
    "Converter",
    "identity",
    "resolve_converter",
    "ErrliftError",
    "ConversionNotDefined",
    "UnwrapError",
]
