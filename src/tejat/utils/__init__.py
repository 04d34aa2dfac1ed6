"""Utility modules for Tejat.

Provides:
- logger: get_logger for logging
"""

from tejat.utils.logger import get_logger

__all__ = ["get_logger"]
