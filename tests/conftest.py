"""Shared fixtures: a fake psycopg2 connection so repositories run without a server."""

import pytest

from db import connection as db_connection
from db.connection import ConnectionConfig
from repositories.item_repo import ItemRepository


class FakeCursor:
    def __init__(self, conn):
        self.conn = conn
        self.rowcount = conn.rowcount

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        return False

    def execute(self, sql, params=None):
        self.conn.executed.append((sql, params))
        if self.conn.execute_error is not None:
            raise self.conn.execute_error

    def fetchone(self):
        return self.conn.rows[0] if self.conn.rows else None

    def fetchall(self):
        return list(self.conn.rows)


class FakeConnection:
    def __init__(self):
        self.rows = []
        self.rowcount = 0
        self.execute_error = None
        self.executed = []
        self.commits = 0
        self.rollbacks = 0
        self.closed = False

    def cursor(self):
        return FakeCursor(self)

    def commit(self):
        self.commits += 1

    def rollback(self):
        self.rollbacks += 1

    def close(self):
        self.closed = True


@pytest.fixture
def fake_conn(monkeypatch):
    """Replace psycopg2.connect with a factory returning one FakeConnection."""
    conn = FakeConnection()
    calls = []

    def _connect(dsn, **kwargs):
        calls.append((dsn, kwargs))
        return conn

    monkeypatch.setattr(db_connection.psycopg2, "connect", _connect)
    conn.connect_calls = calls
    return conn


@pytest.fixture
def db_config():
    return ConnectionConfig("postgresql://localhost:5432/catalog?user=u&password=p")


@pytest.fixture
def repo(db_config):
    return ItemRepository(db_config)
