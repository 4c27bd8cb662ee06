"""Pytest configuration and fixtures."""

import pytest

from tests.fakes import FakeTransport


@pytest.fixture
def transport():
    return FakeTransport()


@pytest.fixture
def five_pages():
    return ["one", "two", "three", "four", "five"]
