"""Utility modules for bytelex.

Provides:
- logger: get_logger for logging
"""

from bytelex.utils.logger import get_logger

__all__ = ["get_logger"]
