# /app/services/history_service.py

import math
import re
from typing import Optional

from ..core.exceptions import InvalidInputError
from ..models.history_model import HistoryGeneration, HistoryResponse, Pagination
from .database_service import DatabaseService

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 10
MAX_LIMIT = 100

_INT_PATTERN = re.compile(r"[+-]?[0-9]+")


def parse_int_param(raw: Optional[str], default: int) -> int:
    """
    Parses a query-string integer. Absent or non-numeric values fall back to
    the default instead of failing; range checks happen afterwards.
    """
    if raw is None:
        return default
    value = raw.strip()
    # Plain ASCII digits with an optional sign only; int() alone would also
    # accept "1_0" and non-ASCII digits.
    if not _INT_PATTERN.fullmatch(value):
        return default
    return int(value)


def build_pagination(page: int, limit: int, total: int) -> Pagination:
    total_pages = math.ceil(total / limit)
    return Pagination(
        page=page,
        limit=limit,
        total=total,
        total_pages=total_pages,
        has_next=page < total_pages,
        has_prev=page > 1,
    )


def get_history(
    db: DatabaseService,
    page: Optional[str] = None,
    limit: Optional[str] = None,
    language: Optional[str] = None,
) -> HistoryResponse:
    """
    Returns one page of generations, newest first, with pagination metadata.

    A page past the end is not an error: it comes back empty with accurate
    totals.
    """
    page_number = parse_int_param(page, DEFAULT_PAGE)
    page_size = parse_int_param(limit, DEFAULT_LIMIT)

    if page_number < 1:
        raise InvalidInputError("Page must be greater than 0")
    if page_size < 1 or page_size > MAX_LIMIT:
        raise InvalidInputError(f"Limit must be between 1 and {MAX_LIMIT}")

    language_filter = language or None
    offset = (page_number - 1) * page_size

    total = db.count_generations(language=language_filter)
    # Past the last row there is nothing to fetch; this also keeps huge
    # offsets away from the database driver.
    if offset >= total:
        records = []
    else:
        records = db.get_generations_page(offset=offset, limit=page_size, language=language_filter)

    return HistoryResponse(
        generations=[HistoryGeneration.model_validate(record) for record in records],
        pagination=build_pagination(page_number, page_size, total),
    )
