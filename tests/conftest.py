from unittest import mock

import pytest

from db.connection import Database


@pytest.fixture()
def cursor() -> mock.MagicMock:
    cur = mock.MagicMock(name="cursor")
    cur.fetchone.return_value = None
    cur.fetchall.return_value = []
    return cur


@pytest.fixture()
def conn(cursor: mock.MagicMock) -> mock.MagicMock:
    connection = mock.MagicMock(name="connection")
    connection.cursor.return_value.__enter__.return_value = cursor
    return connection


@pytest.fixture()
def pool(conn: mock.MagicMock) -> mock.MagicMock:
    fake_pool = mock.MagicMock(name="pool")
    fake_pool.getconn.return_value = conn
    return fake_pool


@pytest.fixture()
def db(monkeypatch, pool: mock.MagicMock) -> Database:
    monkeypatch.setattr("db.connection.pool.SimpleConnectionPool", mock.Mock(return_value=pool))
    database = Database("postgresql://unittest@localhost/unittest")
    database.open()
    yield database
    database.close()
