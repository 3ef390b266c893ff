"""UserStore against a database created from the plain two-table schema.

That schema has no UNIQUE username, no key on Userdata and no foreign key.
"""

import pytest

from userstore import UserAlreadyExistsError, UserNotFoundError, Userdata


def _rows(conn, sql):
    return conn.execute(sql).fetchall()


class TestListUsers:
    def test_every_profile_row_is_returned(self, plain_db, plain_store):
        plain_db.execute("INSERT INTO Users VALUES (1, 'ann')")
        plain_db.execute("INSERT INTO Userdata VALUES (1, 'first', 'A', 'one')")
        plain_db.execute("INSERT INTO Userdata VALUES (1, 'second', 'B', 'two')")
        plain_db.commit()

        users = plain_store.list_users()
        assert sorted(u.name for u in users) == ["first", "second"]
        assert {(u.id, u.username) for u in users} == {(1, "ann")}

    def test_null_profile_fields_become_empty(self, plain_db, plain_store):
        plain_db.execute("INSERT INTO Users VALUES (4, 'bea')")
        plain_db.execute("INSERT INTO Userdata (UserID) VALUES (4)")
        plain_db.commit()

        assert plain_store.list_users() == [Userdata(id=4, username="bea")]


class TestCrud:
    def test_add_and_list(self, plain_db, plain_store):
        new_id = plain_store.add_user(Userdata(username="Cleo", name="Cleo", surname="Patra"))
        assert plain_store.list_users() == [
            Userdata(id=new_id, username="cleo", name="Cleo", surname="Patra")
        ]
        assert _rows(plain_db, "SELECT ID, Username FROM Users") == [(new_id, "cleo")]
        assert _rows(plain_db, "SELECT UserID, Name FROM Userdata") == [(new_id, "Cleo")]

    def test_duplicate_username_rejected(self, plain_db, plain_store):
        plain_store.add_user(Userdata(username="dan"))
        with pytest.raises(UserAlreadyExistsError):
            plain_store.add_user(Userdata(username="DAN"))
        assert _rows(plain_db, "SELECT COUNT(*) FROM Users") == [(1,)]
        assert _rows(plain_db, "SELECT COUNT(*) FROM Userdata") == [(1,)]

    def test_update_overwrites_every_profile_row(self, plain_db, plain_store):
        plain_db.execute("INSERT INTO Users VALUES (7, 'eve')")
        plain_db.execute("INSERT INTO Userdata VALUES (7, 'x', 'x', 'x')")
        plain_db.execute("INSERT INTO Userdata VALUES (7, 'y', 'y', 'y')")
        plain_db.commit()

        plain_store.update_user(Userdata(username="Eve", name="Eve", surname="S", description="d"))
        assert _rows(plain_db, "SELECT Name, Surname, Description FROM Userdata") == [
            ("Eve", "S", "d"),
            ("Eve", "S", "d"),
        ]

    def test_update_unknown_username(self, plain_db, plain_store):
        plain_store.add_user(Userdata(username="fay", name="Fay"))
        with pytest.raises(UserNotFoundError):
            plain_store.update_user(Userdata(username="ghost", name="X"))
        assert _rows(plain_db, "SELECT Name FROM Userdata") == [("Fay",)]

    def test_delete_removes_all_rows_of_user(self, plain_db, plain_store):
        keep = plain_store.add_user(Userdata(username="gus"))
        plain_db.execute("INSERT INTO Users VALUES (9, 'hal')")
        plain_db.execute("INSERT INTO Userdata VALUES (9, 'a', '', '')")
        plain_db.execute("INSERT INTO Userdata VALUES (9, 'b', '', '')")
        plain_db.commit()

        plain_store.delete_user(9)
        assert _rows(plain_db, "SELECT ID FROM Users") == [(keep,)]
        assert _rows(plain_db, "SELECT UserID FROM Userdata") == [(keep,)]

    def test_delete_unknown_id(self, plain_db, plain_store):
        plain_store.add_user(Userdata(username="ida"))
        with pytest.raises(UserNotFoundError):
            plain_store.delete_user(404)
        assert _rows(plain_db, "SELECT COUNT(*) FROM Users") == [(1,)]
        assert _rows(plain_db, "SELECT COUNT(*) FROM Userdata") == [(1,)]
