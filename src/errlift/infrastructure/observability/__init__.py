"""
errlift Observability
Structured logging
"""
from errlift.infrastructure.observability.logger import configure_logging, get_logger

__all__ = [
    "configure_logging",
    "get_logger",
]
