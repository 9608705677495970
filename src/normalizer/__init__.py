"""Normalizer module: canonical form of Design Contracts."""

from .lib import DEFAULT_VERSION, Normalizer, normalize_contract

__all__ = ["DEFAULT_VERSION", "Normalizer", "normalize_contract"]
