"""Shared fixtures."""

import pytest

from hother.deltablots import DeltaParser, ParserRegistry


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture
def registry():
    """Registry with the built-in variants."""
    return ParserRegistry.create_default()


@pytest.fixture
def parser(registry):
    """Parser using the built-in variants."""
    return DeltaParser(registry)
