"""Shared fixtures for the number services test suite."""

from __future__ import annotations

import pytest

from fancy_numbers.calculator_service import app as calculator_app
from fancy_numbers.number_service import app as number_app


class StubNumberSource:
    """Returns a fixed sequence of numbers, or raises what it is given."""

    def __init__(self, *values):
        self.values = list(values)
        self.calls = 0

    async def fetch_random_number(self):
        value = self.values[self.calls]
        self.calls += 1
        if isinstance(value, Exception):
            raise value
        return value


@pytest.fixture
def stub_source_factory():
    return StubNumberSource


@pytest.fixture
def calculator():
    yield calculator_app
    calculator_app.dependency_overrides.clear()


@pytest.fixture
def number_service():
    yield number_app
    number_app.dependency_overrides.clear()
