# /app/services/database_service.py

from typing import List, Dict, Optional, Generator
from sqlalchemy.orm import Session
from fastapi import Depends

# --- Core Database Setup ---
from app.db.database import get_db
from app.db.models.generation_models import Generation
from app.db.models.user_models import User

# --- Repository Imports ---
from .database_helpers.generation_repository_sql import GenerationRepositorySQL
from .database_helpers.user_repository_sql import UserRepositorySQL


class DatabaseService:
    def __init__(self, db_session: Session):
        """
        Initializes the DatabaseService as a thin facade over the SQL
        repositories. Services talk to this class, never to a Session directly.
        """
        if db_session is None:
            raise ValueError("A database session is required.")
        self.user_repo = UserRepositorySQL(db_session)
        self.generation_repo = GenerationRepositorySQL(db_session)

    # --- USER METHODS (DELEGATED) ---
    def get_user_by_id(self, user_id: str) -> Optional[User]: return self.user_repo.get_user_by_id(user_id)

    # --- GENERATION METHODS (DELEGATED) ---
    def add_generation_record(self, generation_record: Dict) -> Generation: return self.generation_repo.add_generation_record(generation_record)
    def count_generations(self, language: Optional[str] = None) -> int: return self.generation_repo.count_generations(language)
    def get_generations_page(self, offset: int, limit: int, language: Optional[str] = None) -> List[Generation]:
        return self.generation_repo.get_generations_page(offset=offset, limit=limit, language=language)


def get_db_service(db: Session = Depends(get_db)) -> Generator[DatabaseService, None, None]:
    """FastAPI dependency that provides a DatabaseService bound to the request's session."""
    yield DatabaseService(db_session=db)
