"""Utility modules for fancylists.

Provides:
- logger: get_logger for logging
"""

from fancylists.utils.logger import get_logger

__all__ = ["get_logger"]
