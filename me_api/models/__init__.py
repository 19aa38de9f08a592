"""ORM models for the profile store."""

from .base import Base, create_db_engine, create_session_factory, init_db
from .profile_record import ProfileRecord

__all__ = [
    "Base",
    "create_db_engine",
    "create_session_factory",
    "init_db",
    "ProfileRecord",
]
