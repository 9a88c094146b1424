"""Shared fixtures for jobs proxy tests."""

import pytest

SHEETDB_URL = "https://sheetdb.io/api/v1/test123"


@pytest.fixture
def sheetdb_url(monkeypatch):
    """Configure the upstream SheetDB endpoint."""
    monkeypatch.setenv("SHEETDB_API_URL", SHEETDB_URL)
    monkeypatch.delenv("SHEETDB_TIMEOUT", raising=False)
    return SHEETDB_URL


@pytest.fixture
def no_sheetdb_url(monkeypatch):
    """Remove the upstream SheetDB endpoint."""
    monkeypatch.delenv("SHEETDB_API_URL", raising=False)
