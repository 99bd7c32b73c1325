"""Quality Scanner: advisory performance and maintainability warnings."""

from failsafe.validators.base import BaseScanner
from failsafe.validators.models import Finding, ValidatorConfig
from failsafe.validators.rules import QUALITY_RULES


class QualityScanner(BaseScanner):

    @property
    def name(self) -> str:
        return "QualityScanner"

    def scan(self, text: str, config: ValidatorConfig) -> list[Finding]:
        return self._apply_rules(text, QUALITY_RULES, config)
