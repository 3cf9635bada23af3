# /app/models/history_model.py

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel
from typing import List, Optional

from .generation_model import GenerationRecord


class UserSummary(BaseModel):
    """The owner fields shown next to a history entry."""
    model_config = ConfigDict(from_attributes=True)

    id: str
    name: Optional[str] = None
    email: Optional[str] = None


class HistoryGeneration(GenerationRecord):
    user: Optional[UserSummary] = None


class Pagination(BaseModel):
    """
    Describes the window a history page covers. Serialized in camelCase
    (`totalPages`, `hasNext`, `hasPrev`).
    """
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    page: int
    limit: int
    total: int
    total_pages: int
    has_next: bool
    has_prev: bool


class HistoryResponse(BaseModel):
    """Defines the data contract for the GET /api/history response."""
    generations: List[HistoryGeneration]
    pagination: Pagination
