"""Output Validator: deterministic checks for AI-generated code.

Usage:
    from failsafe.validators import validate_code, should_allow_override

    result = validate_code(code_text)
    if not result.is_valid and not should_allow_override(result, config):
        # Block the accept action and show result.errors
"""

from failsafe.validators.engine import ValidationEngine, validate_code, validation_engine
from failsafe.validators.models import (
    Category,
    Finding,
    FindingCode,
    Location,
    Severity,
    ValidationResult,
    ValidatorConfig,
)
from failsafe.validators.policy import should_allow_override

__all__ = [
    "ValidationEngine",
    "validation_engine",
    "validate_code",
    "should_allow_override",
    "ValidationResult",
    "ValidatorConfig",
    "Finding",
    "FindingCode",
    "Location",
    "Category",
    "Severity",
]
