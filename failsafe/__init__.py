"""FailSafe: validate AI chat output before it is accepted into a codebase."""

from failsafe.config import Settings, get_settings, load_validator_config
from failsafe.logging_config import configure_logging
from failsafe.validators import (
    Category,
    Finding,
    FindingCode,
    Location,
    Severity,
    ValidationEngine,
    ValidationResult,
    ValidatorConfig,
    should_allow_override,
    validate_code,
)

__all__ = [
    "Settings",
    "get_settings",
    "load_validator_config",
    "configure_logging",
    "validate_code",
    "should_allow_override",
    "ValidationEngine",
    "ValidationResult",
    "ValidatorConfig",
    "Finding",
    "FindingCode",
    "Location",
    "Category",
    "Severity",
]
