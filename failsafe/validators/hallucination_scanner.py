"""Hallucination Scanner: detects placeholder, mock and filler content.

These are the tell-tale signs of AI output that looks like an implementation
but is really a stub: TODO markers, lorem ipsum, mockData, `foo`/`bar`
identifiers and `1234`-style numbers.
"""

from failsafe.validators.base import BaseScanner
from failsafe.validators.models import Finding, ValidatorConfig
from failsafe.validators.rules import HALLUCINATION_RULES


class HallucinationScanner(BaseScanner):
    """Flags content that suggests unfinished or fabricated output."""

    @property
    def name(self) -> str:
        return "HallucinationScanner"

    def scan(self, text: str, config: ValidatorConfig) -> list[Finding]:
        return self._apply_rules(text, HALLUCINATION_RULES, config)
