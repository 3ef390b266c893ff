"""
userstore: CRUD helpers for a user table and its profile table in SQLite.
"""

from userstore.core.constants import ErrorKind
from userstore.core.exceptions import (
    ConfigurationError,
    DatabaseConnectionError,
    QueryError,
    UserAlreadyExistsError,
    UserNotFoundError,
    UserStoreError,
)
from userstore.models.record import Userdata
from userstore.services.user_store import UserStore, get_user_store

__version__ = "0.1.0"

__all__ = [
    "ErrorKind",
    "ConfigurationError",
    "DatabaseConnectionError",
    "QueryError",
    "UserAlreadyExistsError",
    "UserNotFoundError",
    "UserStoreError",
    "Userdata",
    "UserStore",
    "get_user_store",
]
