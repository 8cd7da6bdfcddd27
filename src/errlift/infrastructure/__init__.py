"""
errlift Infrastructure
"""
from errlift.infrastructure.observability import configure_logging, get_logger

__all__ = [
    "configure_logging",
    "get_logger",
]
