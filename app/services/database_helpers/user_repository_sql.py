# /app/services/database_helpers/user_repository_sql.py

from typing import Optional
from sqlalchemy.orm import Session
from app.db.models.user_models import User

class UserRepositorySQL:
    """Read-only access to users; registration lives outside this service."""

    def __init__(self, db_session: Session):
        self.db = db_session

    def get_user_by_id(self, user_id: str) -> Optional[User]:
        return self.db.query(User).filter(User.id == user_id).first()
