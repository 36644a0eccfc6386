"""
Pytest configuration and shared fixtures for unit tests.
"""

from pathlib import Path

import pytest

from cflog_serde.config import clear_settings_cache

DEFAULT_TOKENS = {
    "date": "2012-07-01",
    "time": "15:00:00",
    "edge_location": "FRA2",
    "bytes_sent": "1234",
    "client_ip": "192.0.2.1",
    "method": "GET",
    "host": "example.com",
    "request_uri": "/index.html",
    "status_code": "200",
    "referrer": "-",
    "user_agent": "Mozilla/5.0",
    "query_string": "?a=b",
}


@pytest.fixture(autouse=True)
def _clear_settings():
    """Make sure cached settings never leak between tests."""
    clear_settings_cache()
    yield
    clear_settings_cache()


@pytest.fixture
def sample_line() -> str:
    """The canonical line: W3C date/time tokens, double-space separated."""
    return (
        "2012-07-01  15:00:00  FRA2  1234  192.0.2.1  GET  example.com  "
        "/index.html  200  -  Mozilla/5.0  ?a=b"
    )


@pytest.fixture
def sample_clf_line() -> str:
    """Same request with a CLF date token and a UTC offset token."""
    return (
        "01/Jul/2012:15:00:00 +0000 FRA2 1234 192.0.2.1 GET example.com "
        "/index.html 200 - Mozilla/5.0 ?a=b"
    )


@pytest.fixture
def make_line():
    """Factory fixture building a single-space separated line with overrides."""

    def _make(**overrides: str) -> str:
        tokens = dict(DEFAULT_TOKENS)
        tokens.update(overrides)
        return " ".join(tokens.values())

    return _make


@pytest.fixture
def fixtures_dir() -> Path:
    """Return path to test fixtures directory."""
    return Path(__file__).parent.parent / "fixtures" / "cloudfront"
