"""
Tests for lookup store connection handling.

pymssql.connect is patched, no SQL Server is needed.
"""

import logging

import pymssql
import pytest

from config import settings
from errors import ConfigurationError, StoreConnectionError
from storage import database
from conftest import FakeConnection, FakeCursor


@pytest.fixture
def configured(monkeypatch):
    monkeypatch.setattr(settings, "db_host", "uim-db.example.net")
    monkeypatch.setattr(settings, "db_user", "uim_reader")


class TestGetConnection:
    def test_unconfigured_raises_before_connecting(self, monkeypatch):
        monkeypatch.setattr(settings, "db_user", "")
        calls = []
        monkeypatch.setattr(database.pymssql, "connect", lambda **kw: calls.append(kw))
        with pytest.raises(ConfigurationError):
            database.get_connection()
        assert calls == []

    def test_connects_with_settings(self, configured, monkeypatch):
        calls = []
        conn = FakeConnection(FakeCursor())

        def fake_connect(**kwargs):
            calls.append(kwargs)
            return conn

        monkeypatch.setattr(database.pymssql, "connect", fake_connect)
        assert database.get_connection() is conn
        assert calls[0]["server"] == "uim-db.example.net"
        assert calls[0]["port"] == "1433"
        assert calls[0]["database"] == "CA_UIM"
        assert calls[0]["user"] == "uim_reader"

    def test_logs_connection_progress(self, configured, monkeypatch, caplog):
        monkeypatch.setattr(database.pymssql, "connect", lambda **kw: FakeConnection(FakeCursor()))
        with caplog.at_level(logging.INFO):
            database.get_connection()
        messages = [r.getMessage() for r in caplog.records]
        assert "About to connect..." in messages
        assert "Connection good to uim-db.example.net:1433" in messages

    def test_driver_error_becomes_store_connection_error(self, configured, monkeypatch):
        def refuse(**kwargs):
            raise pymssql.OperationalError("Login failed for user 'uim_reader'")

        monkeypatch.setattr(database.pymssql, "connect", refuse)
        with pytest.raises(StoreConnectionError):
            database.get_connection()


class TestLookupCursor:
    def test_closes_connection_on_error(self):
        conn = FakeConnection(FakeCursor())
        with pytest.raises(RuntimeError):
            with database.lookup_cursor(lambda log: conn):
                raise RuntimeError("boom")
        assert conn.closed

    def test_yields_dict_cursor(self):
        cursor = FakeCursor()
        conn = FakeConnection(cursor)
        with database.lookup_cursor(lambda log: conn) as yielded:
            assert yielded is cursor
        assert conn.cursor_kwargs == {"as_dict": True}
        assert conn.closed


class TestCheckStoreConnection:
    def test_reachable(self):
        cursor = FakeCursor()
        assert database.check_store_connection(lambda log: FakeConnection(cursor)) is True
        assert cursor.executed == [("SELECT 1", None)]

    def test_unreachable(self):
        def refuse(log):
            raise StoreConnectionError("unreachable")

        assert database.check_store_connection(refuse) is False
