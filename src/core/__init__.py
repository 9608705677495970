"""Core utilities shared across spec2app modules."""

from .log import get_logger, setup_logging

__all__ = ["get_logger", "setup_logging"]
