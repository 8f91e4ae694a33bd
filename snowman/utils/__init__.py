"""
Utilities package for snowman.

Exports shared helpers for logging and secret masking. Keep this package
lightweight and free of domain-specific logic.
"""

from snowman.utils.logging import configure_logging, get_logger
from snowman.utils.masking import mask_secret

__all__ = [
    "configure_logging",
    "get_logger",
    "mask_secret",
]
