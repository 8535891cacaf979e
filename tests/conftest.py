"""Pytest configuration for the reqline tests."""

import pytest

from reqline.errors import NetworkError
from tests.fakes import FakeTransport


@pytest.fixture
def transport() -> FakeTransport:
    return FakeTransport()


@pytest.fixture
def failing_transport() -> FakeTransport:
    return FakeTransport(error=NetworkError("connect ECONNREFUSED 127.0.0.1:9"))
