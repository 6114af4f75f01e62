"""Pytest configuration for integration tests."""

import os

import pytest

from cali_log.config import Settings


# Mark all tests in this directory as integration tests
def pytest_collection_modifyitems(items):
    """Add integration marker to all tests in this directory."""
    for item in items:
        if "integration_tests" in str(item.fspath):
            item.add_marker(pytest.mark.integration)


@pytest.fixture
def sheets_settings():
    """Settings for a scratch spreadsheet, skipping when none is configured.

    Point CALI_TEST_SHEET_ID at a spreadsheet whose tab (CALI_SHEET_NAME,
    default "Log") may be written to; its rows dated 1999-01-01 are removed.
    """
    settings = Settings.from_env()
    sheet_id = os.environ.get("CALI_TEST_SHEET_ID", "").strip()
    if not sheet_id or not settings.credentials_path:
        pytest.skip("CALI_TEST_SHEET_ID and Google credentials are required")
    return Settings(
        storage=settings.storage,
        sheet_id=sheet_id,
        sheet_name=settings.sheet_name,
        credentials_path=settings.credentials_path,
    )
