"""
User store service.

CRUD operations over the Users and Userdata tables. A UserStore is bound
to one SQLite database file; each public call opens its own connection,
runs in a single transaction and closes the connection before returning.

Usage:
    from userstore import UserStore, Userdata

    store = UserStore("data/users.db")
    new_id = store.add_user(Userdata(username="Alice", name="Alice"))
    for record in store.list_users():
        print(record.id, record.username)
"""

import logging
from contextlib import contextmanager
from typing import Generator, List, Optional

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from userstore.config import settings
from userstore.core.exceptions import (
    ConfigurationError,
    UserAlreadyExistsError,
    UserNotFoundError,
)
from userstore.database.session import (
    create_all_tables,
    create_db_engine,
    create_session_factory,
    session_scope,
)
from userstore.models.profile import Profile
from userstore.models.record import Userdata
from userstore.models.user import User, normalize_username
from userstore.repositories.users import (
    lookup_id_by_username,
    lookup_username_by_id,
)

logger = logging.getLogger(__name__)


class UserStore:
    """
    Data access for combined user records.

    Handles:
    - Creating a user and its profile together
    - Listing every user that has a profile
    - Updating profile fields by username
    - Deleting a user and its profile together
    """

    def __init__(self, database_path: Optional[str] = None, echo: Optional[bool] = None):
        """
        Initialize the store.

        Args:
            database_path: SQLite file to operate on. Falls back to
                ``settings.database_path`` when omitted.
            echo: Log emitted SQL. Falls back to ``settings.app_debug``.

        Raises:
            ConfigurationError: If no database path is available
        """
        database_path = database_path or settings.database_path
        if not database_path:
            raise ConfigurationError(
                "No database path configured; pass one to UserStore or set USERSTORE_DATABASE_PATH"
            )
        if echo is None:
            echo = settings.app_debug

        self.database_path = database_path
        self.engine = create_db_engine(database_path, echo=echo)
        self._session_factory = create_session_factory(self.engine)

    @contextmanager
    def _open_connection(self) -> Generator[Session, None, None]:
        """Open a connection to the store's database for one transaction."""
        with session_scope(self._session_factory) as db:
            yield db

    def create_schema(self) -> None:
        """Create the Users and Userdata tables if they are missing."""
        create_all_tables(self.engine)
        logger.info(f"Schema ensured in {self.database_path}")

    # ========================================
    # Operations
    # ========================================

    def add_user(self, record: Userdata) -> int:
        """
        Add a user and its profile.

        Args:
            record: Combined record; ``record.id`` is ignored

        Returns:
            The id assigned to the new user

        Raises:
            UserAlreadyExistsError: If the username is taken (any casing)
        """
        username = normalize_username(record.username)

        with self._open_connection() as db:
            if lookup_id_by_username(db, username) is not None:
                logger.warning(f"User already exists: {username}")
                raise UserAlreadyExistsError(
                    f"User already exists: {username}",
                    details={"username": username}
                )

            user = User(username=username)
            db.add(user)
            try:
                db.flush()
            except IntegrityError as e:
                logger.warning(f"User already exists: {username}")
                raise UserAlreadyExistsError(
                    f"User already exists: {username}",
                    details={"username": username},
                    cause=e
                ) from e

            db.add(Profile(
                user_id=user.id,
                name=record.name,
                surname=record.surname,
                description=record.description,
            ))
            db.flush()
            user_id = user.id

        logger.info(f"Added user {username} with id {user_id}")
        return user_id

    def delete_user(self, user_id: int) -> None:
        """
        Delete a user and its profile.

        The username stored for ``user_id`` must resolve back to the same id,
        otherwise the user is treated as missing.

        Raises:
            UserNotFoundError: If no user has that id
        """
        with self._open_connection() as db:
            username = lookup_username_by_id(db, user_id)
            if username is None or lookup_id_by_username(db, username) != user_id:
                logger.warning(f"Cannot delete: user with ID {user_id} does not exist")
                raise UserNotFoundError(
                    f"User with ID {user_id} does not exist",
                    details={"user_id": user_id}
                )

            # Profile first so a user row never outlives its profile
            db.query(Profile).filter_by(user_id=user_id).delete()
            db.query(User).filter_by(id=user_id).delete()

        logger.info(f"Deleted user {username} with id {user_id}")

    def list_users(self) -> List[Userdata]:
        """
        List every user that has a profile.

        Returns:
            One combined record per joined user and profile row, ordered
            by id. Users without a profile row are left out.
        """
        with self._open_connection() as db:
            # Plain columns: the profile table may hold several rows per user
            statement = (
                select(
                    User.id.label("id"),
                    User.username.label("username"),
                    Profile.name.label("name"),
                    Profile.surname.label("surname"),
                    Profile.description.label("description"),
                )
                .join(Profile, Profile.user_id == User.id)
                .order_by(User.id)
            )
            return [Userdata.from_row(row) for row in db.execute(statement).all()]

    def update_user(self, record: Userdata) -> None:
        """
        Overwrite the profile fields of an existing user.

        The target is resolved from ``record.username``; ``record.id`` is
        ignored. Username and id never change.

        Raises:
            UserNotFoundError: If the username is unknown
        """
        with self._open_connection() as db:
            user_id = lookup_id_by_username(db, record.username)
            if user_id is None:
                logger.warning(f"Cannot update: user {record.username} does not exist")
                raise UserNotFoundError(
                    f"The user {record.username} does not exist",
                    details={"username": normalize_username(record.username)}
                )

            updated = (
                db.query(Profile)
                .filter_by(user_id=user_id)
                .update({
                    Profile.name: record.name,
                    Profile.surname: record.surname,
                    Profile.description: record.description,
                })
            )

        if updated == 0:
            logger.warning(f"User {record.username} (id {user_id}) has no profile row to update")
        else:
            logger.info(f"Updated profile of user id {user_id}")


# ========================================
# Convenience Functions
# ========================================

def get_user_store() -> UserStore:
    """
    Factory function for a store bound to the process settings.

    Usage:
        # USERSTORE_DATABASE_PATH=data/users.db
        store = get_user_store()
        users = store.list_users()
    """
    return UserStore()
