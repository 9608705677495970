"""spec2app: natural-language specifications to validated Design Contracts."""

from src.analyst import Analyst
from src.normalizer import Normalizer
from src.orchestrator import Orchestrator, ProcessResult
from src.schema import DesignContract, export_json_schema
from src.validation import ConsistencyChecker, Validator, is_valid

__all__ = [
    # Extraction
    "Analyst",
    # Contract
    "DesignContract",
    "export_json_schema",
    # Pipeline
    "Orchestrator",
    "ProcessResult",
    "Validator",
    "ConsistencyChecker",
    "Normalizer",
    "is_valid",
]
