"""
Package-wide constants.

Table and column names of the fixed schema, plus the error kinds
every UserStoreError is tagged with.
"""

from enum import Enum


# ========================================
# Schema
# ========================================

USERS_TABLE = "Users"
USERDATA_TABLE = "Userdata"


# ========================================
# Error Kinds
# ========================================

class ErrorKind(str, Enum):
    """
    Categories of failure surfaced by the store.

    Usage:
        try:
            store.add_user(record)
        except UserStoreError as e:
            if e.kind == ErrorKind.ALREADY_EXISTS:
                ...
    """

    CONFIGURATION = "CONFIGURATION"
    """No database path was configured."""

    CONNECTION_FAILURE = "CONNECTION_FAILURE"
    """The database file could not be opened."""

    QUERY_FAILURE = "QUERY_FAILURE"
    """A statement failed inside the engine."""

    NOT_FOUND = "NOT_FOUND"
    """No row matches the given username or id."""

    ALREADY_EXISTS = "ALREADY_EXISTS"
    """The username is already taken."""
