"""Orchestrator module: the validate -> check -> normalize pipeline.

Example:
    >>> from src.orchestrator import Orchestrator
    >>> result = Orchestrator().process(candidate)
"""

from .lib import Orchestrator, ProcessResult, process_contract

__all__ = ["Orchestrator", "ProcessResult", "process_contract"]
