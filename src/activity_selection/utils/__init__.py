"""
Miscellaneous utilities shared across activity-selection.
"""

from .logging import configure_logging, logger
from .config import config

__all__ = ["logger", "config", "configure_logging"]
