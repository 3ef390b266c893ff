"""
Profile model for the ``Userdata`` table.

The table has no primary key of its own; ``UserID`` identifies the row
for the ORM since every user owns at most one profile.
"""

from typing import Optional

from sqlalchemy import ForeignKey, Integer, Text
from sqlalchemy.orm import Mapped, mapped_column

from userstore.core.constants import USERDATA_TABLE, USERS_TABLE
from userstore.models.base import Base


class Profile(Base):
    """
    Row of the ``Userdata`` table.

    Attributes:
        user_id: References ``Users.ID`` (column ``UserID``)
        name: First name (column ``Name``)
        surname: Last name (column ``Surname``)
        description: Free text (column ``Description``)
    """

    __tablename__ = USERDATA_TABLE

    # No ON DELETE CASCADE: the store removes both rows itself.
    user_id: Mapped[int] = mapped_column(
        "UserID",
        Integer,
        ForeignKey(f"{USERS_TABLE}.ID"),
        primary_key=True,
        autoincrement=False,
        nullable=False
    )

    name: Mapped[Optional[str]] = mapped_column("Name", Text)
    surname: Mapped[Optional[str]] = mapped_column("Surname", Text)
    description: Mapped[Optional[str]] = mapped_column("Description", Text)

    def __repr__(self) -> str:
        return (
            f"<Profile(user_id={self.user_id}, name='{self.name}', "
            f"surname='{self.surname}')>"
        )
