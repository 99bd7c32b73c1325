"""Safety Scanner: detects code that is unsafe to execute or commit verbatim.

Findings from this pass represent real-world side effects (data loss,
credential leakage, arbitrary code execution) and are never overridable.
"""

from failsafe.validators.base import BaseScanner
from failsafe.validators.models import Finding, ValidatorConfig
from failsafe.validators.rules import SAFETY_RULES


class SafetyScanner(BaseScanner):
    """Flags destructive commands, hardcoded secrets and privileged APIs.

    Privileged modules listed in ``config.allowed_modules`` are not reported.
    """

    @property
    def name(self) -> str:
        return "SafetyScanner"

    def scan(self, text: str, config: ValidatorConfig) -> list[Finding]:
        return self._apply_rules(text, SAFETY_RULES, config)
