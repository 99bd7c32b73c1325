"""Tests for the bracket-balance and incomplete-construct checks."""

import pytest

from failsafe.validators import Category, FindingCode
from failsafe.validators.syntax_scanner import SyntaxScanner
from tests.conftest import codes

scanner = SyntaxScanner()


def test_unterminated_function_triggers_both_checks(config):
    findings = scanner.scan("function test() { if (true) { return 1; }", config)

    assert codes(findings) == [
        FindingCode.SYNTAX_UNMATCHED_BRACKETS,
        FindingCode.SYNTAX_INCOMPLETE_CONSTRUCT,
    ]
    assert all(f.category == Category.SYNTAX for f in findings)
    assert "1 unclosed '{'" in findings[0].message
    assert findings[1].evidence == "function test"
    assert findings[1].location.line == 1


def test_bare_function_header(config):
    findings = scanner.scan("function foo() {", config)

    assert FindingCode.SYNTAX_INCOMPLETE_CONSTRUCT in codes(findings)


@pytest.mark.parametrize("code", [
    "",
    "()",
    "{[()]}",
    "f(a[0], {b: 1});",
    ")(",
    "}{",
    "class Foo {\n  bar() {\n    return 1;\n  }\n}",
])
def test_count_balanced_input_is_clean(config, code):
    assert scanner.scan(code, config) == []


def test_stray_closing_bracket(config):
    findings = scanner.scan("}", config)

    assert codes(findings) == [FindingCode.SYNTAX_UNMATCHED_BRACKETS]
    assert "1 unopened '}'" in findings[0].message


def test_multiple_unbalanced_types_share_one_finding(config):
    findings = scanner.scan("call(items[1", config)

    assert len(findings) == 1
    assert "unclosed '('" in findings[0].message
    assert "unclosed '['" in findings[0].message
    assert findings[0].count == 2


def test_incomplete_class_with_complete_method(config):
    findings = scanner.scan("class Cache {\n  get(key) {\n    return this.items[key];\n  }\n", config)

    assert findings[1].code == FindingCode.SYNTAX_INCOMPLETE_CONSTRUCT
    assert findings[1].evidence == "class Cache"


def test_unbalanced_without_declaration(config):
    findings = scanner.scan("def build():\n    return {", config)

    assert codes(findings) == [FindingCode.SYNTAX_UNMATCHED_BRACKETS]


def test_identifier_prefixed_with_keyword_is_not_a_header(config):
    findings = scanner.scan("const classNames = {", config)

    assert codes(findings) == [FindingCode.SYNTAX_UNMATCHED_BRACKETS]
