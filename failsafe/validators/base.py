"""Base scanner: abstract class implementing the Strategy Pattern.

Each scanner is a standalone, independently testable pass over the raw text.
New scanners are added without modifying the engine; new detections are added
as rows in the rule tables without touching control flow.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
import re
from typing import Callable, Optional

from failsafe.validators.models import (
    ERROR_CATEGORIES,
    Category,
    Finding,
    FindingCode,
    Location,
    Severity,
    ValidatorConfig,
)

# Distinct values listed in a coalesced finding's message
MAX_EVIDENCE_VALUES = 5


@dataclass(frozen=True)
class PatternRule:
    """One (pattern, category, message-template) row of a rule table.

    The message template receives ``{evidence}``: the distinct matched values.
    """

    code: FindingCode
    category: Category
    pattern: re.Pattern
    message: str
    group: Optional[str] = None  # Named group used as evidence instead of the whole match
    normalize: Optional[Callable[[str], str]] = None
    accept: Optional[Callable[[str, ValidatorConfig], bool]] = None  # Filter on the evidence value
    split: Optional[Callable[[str], list[str]]] = None  # One match naming several values

    def evidence_of(self, match: re.Match) -> str:
        """Extract the evidence string for a single match."""
        if self.group is not None:
            value = match.group(self.group) or match.group(0)
        else:
            named = [v for v in match.groupdict().values() if v]
            value = named[0] if named else match.group(0)

        return " ".join(value.split())

    def values_of(self, match: re.Match) -> list[str]:
        """Evidence values of a match, split and normalized.

        ``import sys, subprocess`` yields two values, each checked by ``accept``.
        """
        value = self.evidence_of(match)
        pieces = self.split(value) if self.split else [value]
        if self.normalize:
            pieces = [self.normalize(piece) for piece in pieces]
        return pieces


class BaseScanner(ABC):
    """Abstract base for all analysis passes.

    Contract:
        - scan() is deterministic: same input → same output
        - scan() returns a list of Finding (empty = no issues)
        - No I/O, no shared mutable state
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable name for logging."""
        ...

    @abstractmethod
    def scan(self, text: str, config: ValidatorConfig) -> list[Finding]:
        """Run this pass over the text.

        Args:
            text: Raw code or chat text to inspect
            config: Per-call validator configuration

        Returns:
            List of findings, ordered by first match position
        """
        ...

    # ── Helper Methods ──

    def _finding(
        self,
        code: FindingCode,
        category: Category,
        message: str,
        location: Optional[Location] = None,
        count: int = 1,
        evidence: Optional[str] = None,
    ) -> Finding:
        """Convenience method to create a Finding with the category's severity."""
        return Finding(
            category=category,
            severity=Severity.ERROR if category in ERROR_CATEGORIES else Severity.WARNING,
            code=code,
            message=message,
            location=location,
            count=count,
            evidence=evidence,
        )

    def _apply_rules(
        self,
        text: str,
        rules: tuple[PatternRule, ...],
        config: ValidatorConfig,
    ) -> list[Finding]:
        """Evaluate a rule table, coalescing all matches of a rule into one finding."""
        findings: list[tuple[int, Finding]] = []

        for rule in rules:
            first: Optional[re.Match] = None
            values: list[str] = []
            count = 0

            for match in rule.pattern.finditer(text):
                for value in rule.values_of(match):
                    if rule.accept is not None and not rule.accept(value, config):
                        continue
                    if first is None:
                        first = match
                    if value not in values:
                        values.append(value)
                    count += 1

            if first is None:
                continue

            evidence = ", ".join(values[:MAX_EVIDENCE_VALUES])
            if len(values) > MAX_EVIDENCE_VALUES:
                evidence += f" (+{len(values) - MAX_EVIDENCE_VALUES} more)"

            message = rule.message.format(evidence=evidence)
            if count > 1:
                message += f" ({count} occurrences)"

            findings.append((first.start(), self._finding(
                code=rule.code,
                category=rule.category,
                message=message,
                location=Location.from_offset(text, first.start()),
                count=count,
                evidence=evidence,
            )))

        findings.sort(key=lambda item: item[0])
        return [finding for _, finding in findings]
