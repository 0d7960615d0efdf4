# tests/conftest.py

"""Shared pytest fixtures for all storefront tests."""

from collections.abc import Generator
from unittest.mock import patch

import pytest

from src.config.settings import Settings


@pytest.fixture(autouse=True)
def no_simulated_delay() -> Generator[None, None, None]:
    """Zero the catalog service's simulated latency so tests run instantly."""
    with (
        patch.object(Settings, "LIST_DELAY", 0.0),
        patch.object(Settings, "SEARCH_DELAY", 0.0),
        patch.object(Settings, "LOOKUP_DELAY", 0.0),
    ):
        yield
