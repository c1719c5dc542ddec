"""Unit tests for the connection descriptor and connection acquisition."""

import dataclasses

import psycopg2
import pytest

from db import connection as db_connection
from db.connection import (
    ConnectionConfig,
    build_connection_config,
    get_connection,
    release_connection,
)
from utils.exceptions import ConfigurationError, StorageError


class TestBuildConnectionConfig:

    def test_normalizes_url(self):
        config = build_connection_config("postgres://u:p@host:5432/db")
        assert config.dsn == "postgresql://host:5432/db?user=u&password=p"
        assert config.is_configured

    @pytest.mark.parametrize("url", [None, "", "   "])
    def test_absent_url_reports_unconfigured(self, url):
        config = build_connection_config(url)
        assert config.dsn is None
        assert not config.is_configured

    def test_timeouts_are_carried(self):
        config = build_connection_config("postgresql://host/db", connect_timeout=2,
                                         statement_timeout_ms=1500)
        assert config.connect_timeout == 2
        assert config.statement_timeout_ms == 1500

    def test_config_is_immutable(self):
        config = build_connection_config("postgresql://host/db")
        with pytest.raises(dataclasses.FrozenInstanceError):
            config.dsn = "postgresql://other/db"


class TestGetConnection:

    def test_unconfigured_raises_configuration_error(self, fake_conn):
        with pytest.raises(ConfigurationError):
            get_connection(ConnectionConfig(None))
        assert fake_conn.connect_calls == []

    def test_passes_dsn_and_timeouts(self, fake_conn):
        config = ConnectionConfig("postgresql://host/db", connect_timeout=3,
                                  statement_timeout_ms=2000)
        conn = get_connection(config)

        assert conn is fake_conn
        dsn, kwargs = fake_conn.connect_calls[0]
        assert dsn == "postgresql://host/db"
        assert kwargs["connect_timeout"] == 3
        assert kwargs["options"] == "-c statement_timeout=2000"

    def test_driver_error_becomes_storage_error(self, monkeypatch):
        def _refuse(dsn, **kwargs):
            raise psycopg2.OperationalError("connection refused")

        monkeypatch.setattr(db_connection.psycopg2, "connect", _refuse)
        with pytest.raises(StorageError, match="connection refused") as exc_info:
            get_connection(ConnectionConfig("postgresql://host/db"))
        assert isinstance(exc_info.value.__cause__, psycopg2.OperationalError)


def test_release_connection_closes(fake_conn):
    release_connection(fake_conn)
    assert fake_conn.closed
