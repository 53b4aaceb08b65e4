"""Core shared kernel.

This module provides the operation result types used across all layers:
- OperationResult / ModelOperationResult for reporting data operation outcomes
- Field validators returning FieldValidation
- Innermost exception message extraction

The core module has NO dependencies on other application layers.
"""

from src.core.operation_result import (
    ModelOperationResult,
    OperationResult,
    ResultLike,
    get_exception_message,
)
from src.core.validation import FieldValidation, validate_date, validate_string

__all__ = [
    "FieldValidation",
    "ModelOperationResult",
    "OperationResult",
    "ResultLike",
    "get_exception_message",
    "validate_date",
    "validate_string",
]
