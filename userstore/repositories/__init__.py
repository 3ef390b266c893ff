"""
Data access layer (Repository pattern).

Repositories handle the lookup queries shared by the store's
operations, isolating them from transaction handling.
"""

from userstore.repositories.users import (
    lookup_id_by_username,
    lookup_username_by_id,
)

__all__ = [
    "lookup_id_by_username",
    "lookup_username_by_id",
]
