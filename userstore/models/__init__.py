"""
Database models package.

Contains the SQLAlchemy ORM models for both tables and the combined
record exposed to callers.
"""

from userstore.models.base import Base
from userstore.models.user import User, normalize_username
from userstore.models.profile import Profile
from userstore.models.record import Userdata

__all__ = [
    "Base",
    "User",
    "Profile",
    "Userdata",
    "normalize_username",
]
