"""Utility modules for stonelex.

Provides:
- logger: get_logger for logging
"""

from stonelex.utils.logger import get_logger

__all__ = [
    "get_logger",
]
