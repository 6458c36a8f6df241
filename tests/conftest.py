"""Shared test fixtures: matchers and a small set of realistic names."""

import pytest

from namematch import NameMatcher


@pytest.fixture()
def matcher() -> NameMatcher:
    """A matcher with the default settings."""
    return NameMatcher()


@pytest.fixture()
def strict_matcher() -> NameMatcher:
    """A matcher that forgives at most one edit per token."""
    return NameMatcher(max_edit_distance=1)


@pytest.fixture()
def company_weights():
    """Weight policy that halves the importance of legal suffixes."""
    suffixes = {"inc", "llc", "ltd", "corp"}

    def weight(value: str) -> float:
        return 0.5 if value in suffixes else 1.0

    return weight


@pytest.fixture()
def directory() -> list[str]:
    """Candidate names as they might come out of a customer database."""
    return [
        "Jack Daniels",
        "Jill Danielson",
        "José Álvarez-García",
        "O'Brien & Sons Ltd.",
        "Unrelated Name",
    ]
