# /app/db/base.py

# This file acts as a central registry for all our SQLAlchemy models.
# By importing them all here, we ensure that the Base class knows about them
# when Alembic (or init_db) reads the metadata.

from .base_class import Base

from .models.user_models import User
from .models.generation_models import Generation
