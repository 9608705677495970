"""Logging micro API for spec2app."""

from .lib import get_logger, setup_logging

__all__ = ["get_logger", "setup_logging"]
