"""
Shared pytest fixtures and configuration.

conftest.py is auto-loaded by pytest — fixtures defined here are available
to all test files without explicit imports.
"""

import os
import sys

import pytest

# Add the service directory to the path so tests can import service modules
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "service"))

from models import MonitoringRecord  # noqa: E402


class FakeCursor:
    """Stands in for a pymssql as_dict cursor: records execute() calls, yields canned rows."""

    def __init__(self, rows=None, error=None):
        self.rows = list(rows or [])
        self.error = error
        self.executed = []

    def execute(self, sql, params=None):
        self.executed.append((sql, params))
        if self.error is not None:
            raise self.error

    def __iter__(self):
        return iter(self.rows)


class FakeConnection:
    def __init__(self, cursor):
        self._cursor = cursor
        self.closed = False
        self.cursor_kwargs = None

    def cursor(self, **kwargs):
        self.cursor_kwargs = kwargs
        return self._cursor

    def close(self):
        self.closed = True


class FakeStore:
    """Connection factory with the same call shape as storage.database.get_connection."""

    def __init__(self, rows=None, error=None, connect_error=None):
        self.cursor = FakeCursor(rows, error)
        self.connection = FakeConnection(self.cursor)
        self.connect_error = connect_error
        self.connect_calls = 0

    def __call__(self, log):
        self.connect_calls += 1
        if self.connect_error is not None:
            raise self.connect_error
        return self.connection


@pytest.fixture
def fake_store():
    return FakeStore


@pytest.fixture
def vmware_record():
    return MonitoringRecord(
        probe="vmware",
        source="vm-app01",
        target="CPU Usage",
        qos="QOS_CPU_USAGE",
        robot="ohos-vc01",
        origin="hub-oh",
    )


@pytest.fixture
def snmp_record():
    return MonitoringRecord(
        probe="pollagent",
        source="C1-AB",
        target="ifInOctets",
        qos="QOS_INTERFACE_TRAFFIC",
        robot="ohos-snmp01",
        origin="hub-oh",
    )
