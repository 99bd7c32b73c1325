"""Shared fixtures for validator tests."""

import pytest
import structlog

from failsafe.validators import Category, ValidationEngine, ValidatorConfig


@pytest.fixture
def config() -> ValidatorConfig:
    return ValidatorConfig()


@pytest.fixture
def override_config() -> ValidatorConfig:
    return ValidatorConfig(allow_override=True)


@pytest.fixture
def engine() -> ValidationEngine:
    return ValidationEngine()


@pytest.fixture(autouse=True)
def reset_structlog():
    yield
    structlog.reset_defaults()


def codes(findings) -> list[str]:
    return [f.code for f in findings]


def categories(findings) -> list[Category]:
    return [Category(f.category) for f in findings]
