# backend/app/db/__init__.py

"""
Database Module

Case/user ORM models, API schemas, and the session factory.
"""

from app.db.database import Base, engine, SessionLocal, get_db, init_db
from app.db import models, schemas

__all__ = [
    'Base',
    'engine',
    'SessionLocal',
    'get_db',
    'init_db',
    'models',
    'schemas'
]
