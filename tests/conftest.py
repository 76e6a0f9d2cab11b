"""Shared test fixtures and helpers."""

from __future__ import annotations

import pytest

from titan.scanner import tokenize
from titan.tokens import Token, TokenType


@pytest.fixture
def scan():
    """Return a helper that scans source and returns its tokens."""

    def _scan(source: str) -> list[Token]:
        return tokenize(source, "test.titan")

    return _scan


def assert_types(tokens: list[Token], expected: list[TokenType]) -> None:
    """Assert that the token types match the expected list."""
    actual = [t.type for t in tokens]
    assert actual == expected, f"Expected {expected}, got {actual}"


def assert_values(tokens: list[Token], expected: list[object]) -> None:
    """Assert that the token values match the expected list."""
    actual = [t.value for t in tokens]
    assert actual == expected, f"Expected {expected}, got {actual}"
