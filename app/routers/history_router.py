# /app/routers/history_router.py

import logging
from typing import Optional

from fastapi import APIRouter, Depends
from sqlalchemy.exc import SQLAlchemyError

from ..core.exceptions import InternalError
from ..models import history_model
from ..services import history_service
from ..services.database_service import DatabaseService, get_db_service

logger = logging.getLogger(__name__)

router = APIRouter()

@router.get(
    "", # Maps to /api/history
    response_model=history_model.HistoryResponse,
    summary="Get Generation History",
    responses={400: {"description": "page or limit out of range"}},
)
def get_generation_history(
    # Received as raw strings: non-numeric values fall back to the defaults.
    page: Optional[str] = None,
    limit: Optional[str] = None,
    language: Optional[str] = None,
    db: DatabaseService = Depends(get_db_service)
):
    """
    Endpoint to retrieve past generations, newest first, one page at a time.
    """
    try:
        return history_service.get_history(db=db, page=page, limit=limit, language=language)
    except SQLAlchemyError:
        logger.exception("Database error while fetching generation history")
        raise InternalError("An error occurred while fetching the generation history.", error="Failed to fetch history")
