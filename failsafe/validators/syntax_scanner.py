"""Syntax Scanner: detects structurally broken or unfinished code blocks.

Uses token counting rather than a parser so it stays fast and language-agnostic.
The bracket check compares aggregate counts only: misordered but balanced
input such as ")(" is not reported.
"""

from typing import Optional

from failsafe.validators.base import BaseScanner
from failsafe.validators.models import Category, Finding, FindingCode, Location, ValidatorConfig
from failsafe.validators.rules import BRACKET_PAIRS, CONSTRUCT_HEADER


class SyntaxScanner(BaseScanner):
    """Runs the bracket-balance and incomplete-construct checks independently."""

    @property
    def name(self) -> str:
        return "SyntaxScanner"

    def scan(self, text: str, config: ValidatorConfig) -> list[Finding]:
        errors = []

        # ── 1. Bracket balance ──
        unbalanced = self._check_brackets(text)
        if unbalanced is not None:
            errors.append(unbalanced)

        # ── 2. Declarations without a closing brace ──
        incomplete = self._check_constructs(text)
        if incomplete is not None:
            errors.append(incomplete)

        return errors

    def _check_brackets(self, text: str) -> Optional[Finding]:
        problems = []
        evidence = []
        total = 0

        for open_char, close_char, label in BRACKET_PAIRS:
            net = text.count(open_char) - text.count(close_char)
            if net > 0:
                problems.append(f"{net} unclosed '{open_char}' ({label})")
                evidence.append(open_char)
            elif net < 0:
                problems.append(f"{-net} unopened '{close_char}' ({label})")
                evidence.append(close_char)
            total += abs(net)

        if not problems:
            return None

        return self._finding(
            code=FindingCode.SYNTAX_UNMATCHED_BRACKETS,
            category=Category.SYNTAX,
            message=f"Unmatched brackets: {'; '.join(problems)}",
            count=total,
            evidence=", ".join(evidence),
        )

    def _check_constructs(self, text: str) -> Optional[Finding]:
        unclosed = self._unclosed_braces(text)
        if not unclosed:
            return None

        first_offset: Optional[int] = None
        names: list[str] = []
        for match in CONSTRUCT_HEADER.finditer(text):
            if match.end() - 1 not in unclosed:
                continue
            if first_offset is None:
                first_offset = match.start()
            names.append(f"{match.group('keyword')} {match.group('name')}")

        if first_offset is None:
            return None

        return self._finding(
            code=FindingCode.SYNTAX_INCOMPLETE_CONSTRUCT,
            category=Category.SYNTAX,
            message=(
                f"Incomplete function/class: {', '.join(names)} "
                "has no closing brace before end of input"
            ),
            location=Location.from_offset(text, first_offset),
            count=len(names),
            evidence=", ".join(names),
        )

    @staticmethod
    def _unclosed_braces(text: str) -> set[int]:
        """Offsets of '{' that are never closed. Stray '}' are ignored."""
        stack: list[int] = []
        for offset, char in enumerate(text):
            if char == "{":
                stack.append(offset)
            elif char == "}" and stack:
                stack.pop()
        return set(stack)
