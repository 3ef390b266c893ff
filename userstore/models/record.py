"""
Combined user record.

``Userdata`` is the flat join of a User and its Profile and the only
shape handed to or returned from the store.
"""

from pydantic import BaseModel, ConfigDict, Field
from sqlalchemy.engine import Row


class Userdata(BaseModel):
    """
    One user with its profile fields.

    ``id`` is ignored by ``add_user`` and ``update_user``; it is filled in
    when records are read back from the database.

    Example:
        record = Userdata(username="Alice", name="Alice", surname="Liddell")
        new_id = store.add_user(record)
    """

    model_config = ConfigDict(validate_assignment=True)

    id: int = Field(default=0)
    username: str
    name: str = Field(default="")
    surname: str = Field(default="")
    description: str = Field(default="")

    @classmethod
    def from_row(cls, row: Row) -> "Userdata":
        """Build a combined record from one joined result row."""
        return cls(
            id=row.id,
            username=row.username,
            name=row.name or "",
            surname=row.surname or "",
            description=row.description or "",
        )
