"""
Base Model
==========

Declarative base shared by the Users and Userdata tables.
"""

from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    """Base class for all SQLAlchemy models."""
    pass
