"""Tests for advisory warnings."""

import pytest

from failsafe.validators import Category, FindingCode, Severity
from failsafe.validators.quality_scanner import QualityScanner
from tests.conftest import codes

scanner = QualityScanner()


@pytest.mark.parametrize("code, expected", [
    ("while (true) { poll(); }", FindingCode.PERFORMANCE_INFINITE_LOOP),
    ("for (;;) {}", FindingCode.PERFORMANCE_INFINITE_LOOP),
    ("while True:\n    poll()", FindingCode.PERFORMANCE_INFINITE_LOOP),
    ('const raw = readFileSync("a.txt");', FindingCode.PERFORMANCE_BLOCKING_CALL),
    ("// @ts-ignore\nconst x: number = y;", FindingCode.QUALITY_SUPPRESSED_CHECK),
    ("value = compute()  # type: ignore", FindingCode.QUALITY_SUPPRESSED_CHECK),
    ("try { run(); } catch (e) {}", FindingCode.QUALITY_EMPTY_HANDLER),
    ("try:\n    run()\nexcept Exception:\n    pass\n", FindingCode.QUALITY_EMPTY_HANDLER),
])
def test_warning_rules(config, code, expected):
    findings = scanner.scan(code, config)

    assert expected in codes(findings)
    assert all(f.severity == Severity.WARNING for f in findings)


def test_categories(config):
    findings = scanner.scan("while (true) {}\n// eslint-disable-next-line\n", config)

    assert [f.category for f in findings] == [Category.PERFORMANCE, Category.QUALITY]


def test_handled_exceptions_are_clean(config):
    code = "try {\n  run();\n} catch (e) {\n  logger.error(e);\n}"
    assert scanner.scan(code, config) == []
