"""Validation models: categories, finding codes, findings and the result structure.

All validation is deterministic: same input → same output, no hidden state.
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class Category(str, Enum):
    """What kind of problem a finding describes."""

    # Errors
    HALLUCINATION = "hallucination"  # Placeholder, mock or filler content
    SAFETY = "safety"                # Destructive or credential-leaking; never overridable
    SYNTAX = "syntax"                # Structurally broken or unfinished code

    # Warnings
    PERFORMANCE = "performance"
    QUALITY = "quality"


ERROR_CATEGORIES = frozenset({Category.HALLUCINATION, Category.SAFETY, Category.SYNTAX})


class Severity(str, Enum):
    """Errors block a clean result; warnings are advisory only."""

    ERROR = "error"
    WARNING = "warning"


class FindingCode(str, Enum):
    """Deterministic codes for every detection rule.

    Naming convention: CATEGORY_SPECIFIC_ISSUE
    """

    # Hallucination errors
    HALLUCINATION_PLACEHOLDER_MARKER = "HALLUCINATION_PLACEHOLDER_MARKER"
    HALLUCINATION_PLACEHOLDER_TEXT = "HALLUCINATION_PLACEHOLDER_TEXT"
    HALLUCINATION_MOCK_DATA = "HALLUCINATION_MOCK_DATA"
    HALLUCINATION_FILLER_IDENTIFIER = "HALLUCINATION_FILLER_IDENTIFIER"
    HALLUCINATION_SUSPICIOUS_NUMBER = "HALLUCINATION_SUSPICIOUS_NUMBER"
    HALLUCINATION_UNVERIFIED_CLAIM = "HALLUCINATION_UNVERIFIED_CLAIM"

    # Safety errors
    SAFETY_DESTRUCTIVE_COMMAND = "SAFETY_DESTRUCTIVE_COMMAND"
    SAFETY_DISK_FORMAT = "SAFETY_DISK_FORMAT"
    SAFETY_HARDCODED_SECRET = "SAFETY_HARDCODED_SECRET"
    SAFETY_DYNAMIC_EXECUTION = "SAFETY_DYNAMIC_EXECUTION"
    SAFETY_PRIVILEGED_MODULE = "SAFETY_PRIVILEGED_MODULE"

    # Syntax errors
    SYNTAX_UNMATCHED_BRACKETS = "SYNTAX_UNMATCHED_BRACKETS"
    SYNTAX_INCOMPLETE_CONSTRUCT = "SYNTAX_INCOMPLETE_CONSTRUCT"
    SYNTAX_SCANNER_FAILURE = "SYNTAX_SCANNER_FAILURE"

    # Warnings
    PERFORMANCE_INFINITE_LOOP = "PERFORMANCE_INFINITE_LOOP"
    PERFORMANCE_BLOCKING_CALL = "PERFORMANCE_BLOCKING_CALL"
    QUALITY_SUPPRESSED_CHECK = "QUALITY_SUPPRESSED_CHECK"
    QUALITY_EMPTY_HANDLER = "QUALITY_EMPTY_HANDLER"


class Location(BaseModel):
    """Position of the first match: 1-based line/column, 0-based offset."""

    model_config = ConfigDict(frozen=True)

    line: int
    column: int
    offset: int

    @classmethod
    def from_offset(cls, text: str, offset: int) -> "Location":
        line = text.count("\n", 0, offset) + 1
        line_start = text.rfind("\n", 0, offset) + 1
        return cls(line=line, column=offset - line_start + 1, offset=offset)


class Finding(BaseModel):
    """A single detected issue."""

    model_config = ConfigDict(frozen=True, use_enum_values=True, validate_default=True)

    category: Category
    severity: Severity = Severity.ERROR
    code: FindingCode
    message: str
    location: Optional[Location] = None
    count: int = Field(default=1, ge=1, description="Matches coalesced into this finding")
    evidence: Optional[str] = None  # What text triggered the finding


class ValidatorConfig(BaseModel):
    """Immutable configuration passed explicitly to each call."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    allow_override: bool = Field(default=False, alias="allowOverride")
    allowed_modules: frozenset[str] = Field(default_factory=frozenset, alias="allowedModules")


class ValidationResult(BaseModel):
    """Complete output of one validate_code call."""

    errors: list[Finding] = Field(default_factory=list)
    warnings: list[Finding] = Field(default_factory=list)
    suggestions: list[str] = Field(default_factory=list)
    summary: dict[str, int] = Field(
        default_factory=lambda: {category.value: 0 for category in Category},
        description="Count of findings by category",
    )

    @property
    def is_valid(self) -> bool:
        return not self.errors

    def has_category(self, category: Category) -> bool:
        """True if any error or warning carries the given category."""
        return any(f.category == category for f in (*self.errors, *self.warnings))

    @classmethod
    def build(cls, findings: list[Finding], suggestions: list[str]) -> "ValidationResult":
        """Split findings into errors and warnings, keeping their order."""
        summary = {category.value: 0 for category in Category}
        for finding in findings:
            summary[Category(finding.category).value] += 1

        return cls(
            errors=[f for f in findings if f.severity == Severity.ERROR],
            warnings=[f for f in findings if f.severity == Severity.WARNING],
            suggestions=suggestions,
            summary=summary,
        )
