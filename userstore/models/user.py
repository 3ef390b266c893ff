"""
User model for the identity table.

A User holds nothing but an id and a username. Usernames are stored
lowercased so uniqueness is effectively case-insensitive.
"""

from sqlalchemy import Integer, Text
from sqlalchemy.orm import Mapped, mapped_column

from userstore.core.constants import USERS_TABLE
from userstore.models.base import Base


class User(Base):
    """
    Row of the ``Users`` table.

    Attributes:
        id: Integer primary key (column ``ID``)
        username: Lowercased unique username (column ``Username``)
    """

    __tablename__ = USERS_TABLE

    id: Mapped[int] = mapped_column(
        "ID",
        Integer,
        primary_key=True
    )

    username: Mapped[str] = mapped_column(
        "Username",
        Text,
        unique=True
    )

    def __repr__(self) -> str:
        return f"<User(id={self.id}, username='{self.username}')>"


def normalize_username(username: str) -> str:
    """Case-fold a username for storage and lookup."""
    return username.lower()
