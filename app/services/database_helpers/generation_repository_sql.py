# /app/services/database_helpers/generation_repository_sql.py

from typing import List, Dict, Optional
from sqlalchemy.orm import Session, Query, joinedload
from app.db.models.generation_models import Generation

class GenerationRepositorySQL:
    def __init__(self, db_session: Session):
        self.db = db_session

    def add_generation_record(self, record: Dict) -> Generation:
        """Creates a new Generation record in the database from a dictionary."""
        new_generation = Generation(**record)
        self.db.add(new_generation)
        try:
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise
        self.db.refresh(new_generation)
        return new_generation

    def _filtered(self, language: Optional[str]) -> Query:
        query = self.db.query(Generation)
        if language:
            query = query.filter(Generation.language == language)
        return query

    def count_generations(self, language: Optional[str] = None) -> int:
        """Counts the generation records matching the optional language filter."""
        return self._filtered(language).count()

    def get_generations_page(self, offset: int, limit: int, language: Optional[str] = None) -> List[Generation]:
        """
        Retrieves one page of generation records, most recent first, with the
        owning user loaded in the same query.
        """
        return (
            self._filtered(language)
            .options(joinedload(Generation.user))
            .order_by(Generation.created_at.desc(), Generation.id.desc())
            .offset(offset)
            .limit(limit)
            .all()
        )
