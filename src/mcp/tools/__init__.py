"""MCP tools for spec2app.

Tools:
    - analyze_specification: Natural language to validated Design Contract
    - validate_contract: Validate and normalize an existing contract
"""

from .analyze import analyze_specification, check_specification
from .validate import validate_contract

__all__ = [
    "analyze_specification",
    "check_specification",
    "validate_contract",
]
