"""Suggestion derivation: maps trigger patterns to remediation advice.

Independent of the error list. Suggestions are ordered by where their trigger
first appears in the text, and each one appears at most once.
"""

from failsafe.validators.rules import SUGGESTION_RULES, SuggestionRule


def derive_suggestions(text: str, rules: tuple[SuggestionRule, ...] = SUGGESTION_RULES) -> list[str]:
    """Return the remediation texts whose trigger occurs in ``text``."""
    hits: list[tuple[int, str]] = []
    for rule in rules:
        match = rule.pattern.search(text)
        if match:
            hits.append((match.start(), rule.suggestion))

    suggestions: list[str] = []
    for _, suggestion in sorted(hits, key=lambda hit: hit[0]):
        if suggestion not in suggestions:
            suggestions.append(suggestion)
    return suggestions
