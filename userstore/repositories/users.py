"""
Lookup queries for the Users table.

These helpers run inside a caller-managed session and never commit.
"Not found" is reported as ``None``; engine failures raise QueryError.
"""

import logging
from typing import Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from userstore.core.exceptions import QueryError
from userstore.models.user import User, normalize_username

logger = logging.getLogger(__name__)


def lookup_id_by_username(db: Session, username: str) -> Optional[int]:
    """
    Get the id of a user by username.

    Args:
        db: Database session
        username: Username in any casing

    Returns:
        The user's id, or None if no user has that username

    Raises:
        QueryError: If the lookup itself fails
    """
    username = normalize_username(username)
    try:
        user = db.query(User).filter_by(username=username).first()
    except SQLAlchemyError as e:
        logger.error(f"Lookup of username '{username}' failed: {e}")
        raise QueryError(
            "Failed to look up username",
            details={"username": username},
            cause=e
        ) from e
    return user.id if user else None


def lookup_username_by_id(db: Session, user_id: int) -> Optional[str]:
    """Get the stored username for an id, or None if the id is unknown."""
    try:
        user = db.get(User, user_id)
    except SQLAlchemyError as e:
        logger.error(f"Lookup of user id {user_id} failed: {e}")
        raise QueryError(
            "Failed to look up user id",
            details={"user_id": user_id},
            cause=e
        ) from e
    return user.username if user else None

