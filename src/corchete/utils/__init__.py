"""Utility modules for Corchete.

Provides:
- text: collapse_spaces, unescape_backslashes for attribute text
- logger: get_logger for logging
"""

from corchete.utils.logger import get_logger
from corchete.utils.text import collapse_spaces, unescape_backslashes

__all__ = [
    "collapse_spaces",
    "get_logger",
    "unescape_backslashes",
]
