# /tests/test_history_service.py

import pytest
from unittest.mock import MagicMock

from app.core.exceptions import InvalidInputError
from app.services import history_service


@pytest.fixture
def mock_db_service():
    """Provides a mock of the DatabaseService for dependency injection."""
    db = MagicMock()
    db.count_generations.return_value = 0
    db.get_generations_page.return_value = []
    return db


@pytest.mark.parametrize(
    "raw, expected",
    [
        (None, 7), ("3", 3), (" 12 ", 12), ("+5", 5), ("-4", -4), ("0", 0),
        ("abc", 7), ("", 7), ("2.5", 7), ("1_0", 7), ("٣", 7), ("--1", 7),
    ],
)
def test_parse_int_param(raw, expected):
    assert history_service.parse_int_param(raw, 7) == expected


@pytest.mark.parametrize(
    "page, limit, total, total_pages, has_next, has_prev",
    [
        (1, 10, 25, 3, True, False),
        (3, 10, 25, 3, False, True),
        (4, 10, 25, 3, False, True),
        (1, 10, 30, 3, True, False),
        (1, 100, 0, 0, False, False),
        (2, 1, 2, 2, False, True),
    ],
)
def test_build_pagination(page, limit, total, total_pages, has_next, has_prev):
    pagination = history_service.build_pagination(page, limit, total)

    assert pagination.total_pages == total_pages
    assert pagination.has_next is has_next
    assert pagination.has_prev is has_prev


def test_get_history_passes_offset_and_filter(mock_db_service):
    mock_db_service.count_generations.return_value = 42

    result = history_service.get_history(mock_db_service, page="3", limit="20", language="TypeScript")

    mock_db_service.count_generations.assert_called_once_with(language="TypeScript")
    mock_db_service.get_generations_page.assert_called_once_with(offset=40, limit=20, language="TypeScript")
    assert result.pagination.total == 42
    assert result.pagination.total_pages == 3


def test_get_history_empty_language_is_no_filter(mock_db_service):
    mock_db_service.count_generations.return_value = 5

    history_service.get_history(mock_db_service, language="")

    mock_db_service.count_generations.assert_called_once_with(language=None)
    mock_db_service.get_generations_page.assert_called_once_with(offset=0, limit=10, language=None)


def test_get_history_skips_page_query_past_the_end(mock_db_service):
    mock_db_service.count_generations.return_value = 3

    result = history_service.get_history(mock_db_service, page="99999999999999999999", limit="10")

    mock_db_service.get_generations_page.assert_not_called()
    assert result.generations == []
    assert result.pagination.total == 3
    assert result.pagination.total_pages == 1
    assert result.pagination.has_next is False
    assert result.pagination.has_prev is True


@pytest.mark.parametrize("page, limit", [("0", "10"), ("1", "0"), ("1", "101")])
def test_get_history_rejects_before_querying(mock_db_service, page, limit):
    with pytest.raises(InvalidInputError):
        history_service.get_history(mock_db_service, page=page, limit=limit)

    mock_db_service.count_generations.assert_not_called()
    mock_db_service.get_generations_page.assert_not_called()
