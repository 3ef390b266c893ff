import sqlite3

import pytest

from userstore import UserStore


@pytest.fixture
def db_path(tmp_path):
    """Path of a fresh database file."""
    return str(tmp_path / "users.db")


@pytest.fixture
def store(db_path):
    """A store with both tables created."""
    s = UserStore(db_path, echo=False)
    s.create_schema()
    return s


FIXED_SCHEMA = """
CREATE TABLE Users (ID INTEGER PRIMARY KEY, Username TEXT);
CREATE TABLE Userdata (UserID INTEGER NOT NULL, Name TEXT, Surname TEXT, Description TEXT);
"""


@pytest.fixture
def plain_db(db_path):
    """Raw sqlite3 connection to a database holding only the fixed schema."""
    conn = sqlite3.connect(db_path)
    conn.executescript(FIXED_SCHEMA)
    conn.commit()
    yield conn
    conn.close()


@pytest.fixture
def plain_store(plain_db, db_path):
    """A store over a database it did not create."""
    return UserStore(db_path, echo=False)
