# /app/services/generation_service.py

import uuid
import logging

from ..core.exceptions import NotFoundError
from ..models.generation_model import GenerateRequest, GenerationRecord
from . import gemini_service, prompt_library
from .database_service import DatabaseService

logger = logging.getLogger(__name__)


def _build_prompt(request: GenerateRequest) -> str:
    return prompt_library.CODE_GENERATION_PROMPT.format(
        language=request.language.value,
        prompt=request.prompt,
    )


async def generate_code(request: GenerateRequest, db: DatabaseService) -> GenerationRecord:
    """
    Runs one generation end to end: checks the optional owner, asks Gemini
    for code once, and persists the result.

    The request has already been validated and its prompt trimmed by the
    `GenerateRequest` model. Nothing is written unless Gemini returns text.
    """
    if request.user_id is not None and db.get_user_by_id(request.user_id) is None:
        raise NotFoundError(f"No user with ID {request.user_id} exists.", error="User not found")

    generated_code = await gemini_service.generate_code_text(_build_prompt(request))

    generation_record_data = {
        "id": f"gen_{uuid.uuid4().hex[:16]}",
        "prompt": request.prompt,
        "language": request.language.value,
        "code": generated_code,
        "user_id": request.user_id,
    }
    new_generation_obj = db.add_generation_record(generation_record_data)
    logger.info("Saved generation %s (%s)", new_generation_obj.id, new_generation_obj.language)

    return GenerationRecord.model_validate(new_generation_obj)
