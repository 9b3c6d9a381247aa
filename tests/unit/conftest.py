"""Shared test fixtures for KCD search unit tests."""

from unittest.mock import AsyncMock

import pytest


@pytest.fixture
def diabetes_rows():
    """Upstream rows for a "당뇨" lookup, including one unrelated disease."""
    return [
        {
            "strCategoryCode": "E11",
            "strCategoryCodeName": "당뇨병",
            "strCategoryCodeEnglishName": "Diabetes",
        },
        {
            "strCategoryCode": "E10",
            "strCategoryCodeName": "소아당뇨",
            "strCategoryCodeEnglishName": "Juvenile Diabetes",
        },
        {
            "strCategoryCode": "Z99",
            "strCategoryCodeName": "무관한질병",
            "strCategoryCodeEnglishName": "",
        },
    ]


@pytest.fixture
def mock_kcd_client(diabetes_rows):
    """AsyncMock of KCDClient returning the diabetes rows."""
    client = AsyncMock()
    client.fetch_rows.return_value = diabetes_rows
    return client
