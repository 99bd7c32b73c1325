"""Validation Engine: orchestrates all scanners and produces a ValidationResult.

This is the main entry point for output validation. It runs every registered
scanner against the text and merges their findings in pass order.

Usage:
    engine = ValidationEngine()
    result = engine.validate(code_text)
    if not result.is_valid:
        # Show result.errors before the user accepts the code
"""

import time
from typing import Any, Mapping, Optional, Sequence

import structlog
from pydantic import ValidationError as PydanticValidationError

from failsafe.validators.base import BaseScanner
from failsafe.validators.models import (
    Category,
    Finding,
    FindingCode,
    Severity,
    ValidationResult,
    ValidatorConfig,
)
from failsafe.validators.suggestions import derive_suggestions

# Import all scanners
from failsafe.validators.hallucination_scanner import HallucinationScanner
from failsafe.validators.safety_scanner import SafetyScanner
from failsafe.validators.syntax_scanner import SyntaxScanner
from failsafe.validators.quality_scanner import QualityScanner

logger = structlog.get_logger()


class ValidationEngine:
    """Runs all scanners and produces a unified validation result.

    Design principles:
        - Deterministic: same input → same output
        - Stateless: the scanner chain is an immutable tuple, nothing is cached
        - Never raises: a crashing scanner becomes a single syntax finding
        - Observable: logs every validation run with timing
    """

    def __init__(self, scanners: Optional[Sequence[BaseScanner]] = None):
        """Initialize with default scanners or a custom chain.

        Args:
            scanners: Optional scanners in execution order. If None, uses all defaults.
        """
        self.scanners: tuple[BaseScanner, ...] = tuple(scanners or self._default_scanners())

    @staticmethod
    def _default_scanners() -> list[BaseScanner]:
        """Create the default scanner chain in execution order."""
        return [
            HallucinationScanner(),  # Placeholders, mock data, filler names
            SafetyScanner(),         # Destructive commands, secrets, privileged APIs
            SyntaxScanner(),         # Bracket balance + unfinished declarations
            QualityScanner(),        # Advisory warnings only
        ]

    def validate(self, text: Any, config: Optional[Any] = None) -> ValidationResult:
        """Run all scanners against the text and build the result.

        Args:
            text: Code or chat text. None and bytes are coerced to str.
            config: ValidatorConfig or an equivalent mapping; defaults apply if None

        Returns:
            ValidationResult with errors, warnings and suggestions
        """
        start_time = time.perf_counter()

        text = _coerce_text(text)
        config = _coerce_config(config)

        findings: list[Finding] = []
        scanner_timings: dict[str, float] = {}

        for scanner in self.scanners:
            s_start = time.perf_counter()
            try:
                findings.extend(scanner.scan(text, config))
            except Exception as e:
                logger.error(
                    "scanner_failed",
                    scanner=scanner.name,
                    error=str(e),
                )
                # One broken pass must not suppress the others
                findings.append(Finding(
                    category=Category.SYNTAX,
                    severity=Severity.ERROR,
                    code=FindingCode.SYNTAX_SCANNER_FAILURE,
                    message=f"Scanner '{scanner.name}' failed: {e}",
                ))
            finally:
                s_duration = (time.perf_counter() - s_start) * 1000
                scanner_timings[scanner.name] = round(s_duration, 2)

        try:
            suggestions = derive_suggestions(text)
        except Exception as e:
            logger.error("suggestions_failed", error=str(e))
            suggestions = []

        result = ValidationResult.build(findings, suggestions)

        total_duration = (time.perf_counter() - start_time) * 1000

        logger.info(
            "validation_complete",
            valid=result.is_valid,
            summary=result.summary,
            total_errors=len(result.errors),
            total_warnings=len(result.warnings),
            text_length=len(text),
            duration_ms=round(total_duration, 2),
            scanner_timings=scanner_timings,
        )

        return result


def _coerce_text(text: Any) -> str:
    if text is None:
        return ""
    if isinstance(text, (bytes, bytearray)):
        return bytes(text).decode("utf-8", errors="replace")
    return text if isinstance(text, str) else str(text)


def _coerce_config(config: Any) -> ValidatorConfig:
    if isinstance(config, ValidatorConfig):
        return config
    if config is None:
        return ValidatorConfig()
    if isinstance(config, Mapping):
        try:
            return ValidatorConfig.model_validate(config)
        except PydanticValidationError as e:
            logger.warning("config_invalid", error=str(e))
            return ValidatorConfig()
    logger.warning("config_invalid", config_type=type(config).__name__)
    return ValidatorConfig()


# Module-level default engine
validation_engine = ValidationEngine()


def validate_code(text: Any, config: Optional[Any] = None) -> ValidationResult:
    """Validate a block of AI-generated code or text with the default engine."""
    return validation_engine.validate(text, config)
