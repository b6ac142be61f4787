# tests/conftest.py

"""Shared pytest fixtures for all scraper tests."""

from collections.abc import Generator
from unittest.mock import MagicMock, patch

import pytest


@pytest.fixture(autouse=True)
def block_live_http() -> Generator[MagicMock, None, None]:
    """Patch the HTTP session class so no test reaches the network.

    Tests that exercise fetching install their own mocked session.
    """
    with patch(
        "src.scrapers.base_scraper.curl_requests.Session"
    ) as session_cls:
        session_cls.return_value.get.side_effect = AssertionError(
            "unmocked HTTP request"
        )
        yield session_cls
