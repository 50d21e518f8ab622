"""
Core module for cross-cutting concerns.

This module provides:
- Structured logging configuration
- Common utilities
"""

from core.logging import configure_logging, get_logger
from core.utils import is_hex_color, percentage_of, round_half_up

__all__ = [
    "configure_logging",
    "get_logger",
    "is_hex_color",
    "percentage_of",
    "round_half_up",
]
