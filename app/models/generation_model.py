# /app/models/generation_model.py

"""
Pydantic models for the code generation contract.

Request bodies use camelCase on the wire (`userId`) and snake_case in
Python. Field validators raise `invalid_input` errors whose messages are
returned to the client as-is.
"""

from datetime import datetime
from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel
from pydantic_core import PydanticCustomError


class Language(str, Enum):
    PYTHON = "Python"
    JAVASCRIPT = "JavaScript"
    CPP = "C++"
    TYPESCRIPT = "TypeScript"


SUPPORTED_LANGUAGES = [language.value for language in Language]


def _invalid_input(message: str) -> PydanticCustomError:
    return PydanticCustomError("invalid_input", message)


class GenerateRequest(BaseModel):
    """The body of POST /api/generate. Unknown keys, snake_case spellings included, are rejected."""
    model_config = ConfigDict(alias_generator=to_camel, extra="forbid")

    prompt: str = Field(default=None, validate_default=True)
    language: Language = Field(default=None, validate_default=True)
    user_id: Optional[str] = None

    @field_validator("prompt", mode="before")
    @classmethod
    def _prompt_must_have_text(cls, value: Any) -> str:
        if not isinstance(value, str) or not value.strip():
            raise _invalid_input("Prompt is required and must be a non-empty string")
        return value.strip()

    @field_validator("language", mode="before")
    @classmethod
    def _language_must_be_supported(cls, value: Any) -> str:
        if not isinstance(value, str) or not value:
            raise _invalid_input("Language is required and must be a string")
        if value not in SUPPORTED_LANGUAGES:
            raise _invalid_input(f"Language must be one of: {', '.join(SUPPORTED_LANGUAGES)}")
        return value

    @field_validator("user_id", mode="before")
    @classmethod
    def _user_id_must_be_string(cls, value: Any) -> Optional[str]:
        # An empty userId is treated the same as an absent one.
        if value is None or value == "":
            return None
        if not isinstance(value, str):
            raise _invalid_input("userId must be a string if provided")
        return value


class GenerationRecord(BaseModel):
    """A persisted generation, as returned by POST /api/generate."""
    model_config = ConfigDict(from_attributes=True, alias_generator=to_camel, populate_by_name=True)

    id: str
    prompt: str
    language: str
    code: str
    user_id: Optional[str] = None
    created_at: datetime
