"""
binned_kfold.utils

Shared helpers: logging and input validation.
"""

from .contract import validate_frame
from .logging import log, setup_logger

__all__ = [
    "log",
    "setup_logger",
    "validate_frame",
]
