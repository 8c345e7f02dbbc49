"""
Pytest Configuration and Fixtures

This module provides shared fixtures and configuration for all tests.
"""

from typing import Callable, List

import pytest

from cacher.cache.evaluator import Evaluator


SAMPLE_CONTENTS = """\
Rust:
safe, fast, productive.
Pick three.
Trust me."""


class CountingComputation:
    """
    Callable wrapper that records every invocation.

    Usage:
        double = CountingComputation(lambda x: x * 2)
        double(3)
        assert double.calls == [3]
    """

    def __init__(self, func: Callable):
        self.func = func
        self.calls: List = []

    def __call__(self, arg):
        self.calls.append(arg)
        return self.func(arg)

    @property
    def count(self) -> int:
        return len(self.calls)


# ============================================================================
# Evaluator Fixtures
# ============================================================================

@pytest.fixture
def counting() -> Callable[[Callable], CountingComputation]:
    """Factory for instrumented computations."""
    return CountingComputation


@pytest.fixture
def identity() -> CountingComputation:
    """Instrumented identity computation."""
    return CountingComputation(lambda x: x)


@pytest.fixture
def evaluator(identity: CountingComputation) -> Evaluator:
    """Create an Evaluator around the instrumented identity."""
    return Evaluator(identity)


# ============================================================================
# Search Fixtures
# ============================================================================

@pytest.fixture
def contents() -> str:
    """Sample text used by the search tests."""
    return SAMPLE_CONTENTS


@pytest.fixture
def poem_file(tmp_path, contents: str):
    """Write the sample text to a file and return its path."""
    path = tmp_path / "poem.txt"
    path.write_text(contents, encoding="utf-8")
    return path

