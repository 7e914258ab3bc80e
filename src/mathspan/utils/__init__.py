"""Utility modules for mathspan.

Provides:
- logger: get_logger for logging
"""

from mathspan.utils.logger import get_logger

__all__ = [
    "get_logger",
]
