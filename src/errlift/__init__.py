"""
errlift
Lift fallible functions from one error type into another
"""

from errlift.domain import (
    ConversionNotDefined,
    ConversionTarget,
    Converter,
    ConvertsFrom,
    ErrliftError,
    Failure,
    Result,
    Success,
    UnwrapError,
    identity,
    resolve_converter,
)
from errlift.lift import lift, lifted

__all__ = [
    # Adapter
    "lift",
    "lifted",
    # Result
    "Result",
    "Success",
    "Failure",
    # Conversion
    "ConvertsFrom",
    "ConversionTarget",
    "Converter",
    "identity",
    "resolve_converter",
    # Errors
    "ErrliftError",
    "ConversionNotDefined",
    "UnwrapError",
]

__version__ = "0.1.0"
