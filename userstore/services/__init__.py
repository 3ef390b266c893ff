"""
Services Package
================

Available services:
- UserStore: CRUD over the Users and Userdata tables
"""

from userstore.services.user_store import UserStore, get_user_store

__all__ = [
    "UserStore",
    "get_user_store",
]
