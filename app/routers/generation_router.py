# /app/routers/generation_router.py

import logging

from fastapi import APIRouter, Depends
from sqlalchemy.exc import SQLAlchemyError

from ..core.exceptions import InternalError
from ..models import generation_model
from ..services import generation_service
from ..services.database_service import DatabaseService, get_db_service

logger = logging.getLogger(__name__)

router = APIRouter()

@router.post(
    "", # Maps to /api/generate
    response_model=generation_model.GenerationRecord,
    summary="Generate Code from a Prompt",
    description="Asks the model for code in the requested language, stores the result and returns it.",
    responses={
        400: {"description": "Invalid prompt, language or userId"},
        404: {"description": "userId does not match an existing user"},
        401: {"description": "The Gemini API key was rejected"},
        429: {"description": "The Gemini API quota is exhausted"},
        500: {"description": "Empty model output or an unexpected failure"},
    },
)
async def generate_code(
    request: generation_model.GenerateRequest,
    db: DatabaseService = Depends(get_db_service)
):
    """
    Validation, user lookup and upstream errors are raised as AppError
    subclasses and rendered by the application's exception handlers.
    """
    try:
        return await generation_service.generate_code(request=request, db=db)
    except SQLAlchemyError:
        logger.exception("Database error while generating code")
        raise InternalError("Failed to save the generated code.", error="Failed to generate code")
