"""Shared fixtures."""

import pytest

from oracle_program.errors import FetchError
from tests.helpers import SETTINGS, FakeFetcher


@pytest.fixture
def settings():
    return SETTINGS


@pytest.fixture
def down_fetcher():
    return FakeFetcher(error=FetchError("connection refused"))
