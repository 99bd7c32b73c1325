"""Override Policy: decides whether a user may accept content despite findings.

Pure and deterministic. Safety findings are never overridable, and override
is denied whenever the configuration does not explicitly enable it.
"""

from enum import Enum
from typing import Any, Mapping, Optional

import structlog

from failsafe.validators.models import Category, ValidationResult, ValidatorConfig

logger = structlog.get_logger()


def should_allow_override(result: Any, config: Any) -> bool:
    """Decide whether an accept action may proceed despite reported findings.

    Args:
        result: ValidationResult from validate_code, or an equivalent mapping /
            object exposing an ``errors`` sequence
        config: ValidatorConfig, or a mapping with ``allowOverride`` /
            ``allow_override``

    Returns:
        False if any error is a safety finding or override is disabled,
        True otherwise
    """
    errors = _errors_of(result)
    has_safety = any(_category_of(error) == Category.SAFETY.value for error in errors)
    override_enabled = _override_enabled(config)

    if has_safety:
        logger.debug("override_denied", reason="safety_findings")
        return False
    if not override_enabled:
        logger.debug("override_denied", reason="override_disabled")
        return False
    return True


def _override_enabled(config: Any) -> bool:
    if config is None:
        return False
    if isinstance(config, ValidatorConfig):
        return config.allow_override
    if isinstance(config, Mapping):
        value = config.get("allowOverride", config.get("allow_override", False))
    else:
        value = getattr(config, "allow_override", getattr(config, "allowOverride", False))
    return value is True


def _errors_of(result: Any) -> list:
    """Extract the errors list, treating malformed input as 'no errors found'."""
    if isinstance(result, ValidationResult):
        return result.errors

    if isinstance(result, Mapping):
        errors = result.get("errors")
    else:
        errors = getattr(result, "errors", None)

    if isinstance(errors, (list, tuple)):
        return list(errors)

    logger.warning(
        "override_result_malformed",
        result_type=type(result).__name__,
        errors_type=type(errors).__name__,
    )
    return []


def _category_of(error: Any) -> Optional[str]:
    """Read a finding's category; also accepts the legacy ``type`` key."""
    if isinstance(error, Mapping):
        category = error.get("category", error.get("type"))
    else:
        category = getattr(error, "category", getattr(error, "type", None))

    if isinstance(category, Enum):
        return category.value
    return category if isinstance(category, str) else None
