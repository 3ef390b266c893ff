"""
Exception hierarchy for userstore.

Exception Hierarchy:
    UserStoreError (base)
    ├── ConfigurationError
    ├── DatabaseConnectionError
    ├── QueryError
    ├── UserNotFoundError
    └── UserAlreadyExistsError

Usage:
    from userstore.core.exceptions import UserNotFoundError

    try:
        store.delete_user(42)
    except UserNotFoundError as e:
        logger.warning(f"Nothing to delete: {e}")
"""

from typing import Any, Dict, Optional

from userstore.core.constants import ErrorKind


class UserStoreError(Exception):
    """Base exception for all userstore errors."""

    kind: ErrorKind = ErrorKind.QUERY_FAILURE

    def __init__(
        self,
        message: str,
        details: Optional[Dict[str, Any]] = None,
        cause: Optional[Exception] = None
    ):
        super().__init__(message)
        self.message = message
        self.details = details or {}
        self.cause = cause

    def __str__(self) -> str:
        if self.cause:
            return f"{self.message} (caused by: {type(self.cause).__name__}: {self.cause})"
        return self.message


class ConfigurationError(UserStoreError):
    """The store has no database path to open."""

    kind = ErrorKind.CONFIGURATION


class DatabaseConnectionError(UserStoreError):
    """The database file could not be opened."""

    kind = ErrorKind.CONNECTION_FAILURE


class QueryError(UserStoreError):
    """A statement failed while being executed."""

    kind = ErrorKind.QUERY_FAILURE


class UserNotFoundError(UserStoreError):
    """No user matches the given username or id."""

    kind = ErrorKind.NOT_FOUND


class UserAlreadyExistsError(UserStoreError):
    """A user with the same (case-folded) username already exists."""

    kind = ErrorKind.ALREADY_EXISTS
