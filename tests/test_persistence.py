"""Tests for preference persistence"""
import sqlite3

import pytest

from mappia import persistence


def test_bootstrap_creates_file(db_path):
    assert db_path.is_file()


def test_bootstrap_is_idempotent(db_path):
    persistence.bootstrap_schema()
    persistence.bootstrap_schema()
    assert persistence.get_preference("missing") is None


def test_onboarding_defaults_to_incomplete(db_path):
    assert persistence.is_onboarding_complete() is False


def test_mark_onboarding_complete(db_path):
    persistence.mark_onboarding_complete()
    assert persistence.is_onboarding_complete() is True

    persistence.mark_onboarding_complete()
    with sqlite3.connect(db_path) as conn:
        rows = conn.execute("SELECT COUNT(*) FROM preferences").fetchone()[0]
    assert rows == 1


def test_set_preference_overwrites(db_path):
    persistence.set_preference("theme", "dark")
    persistence.set_preference("theme", "light")
    assert persistence.get_preference("theme") == "light"


def test_get_preference_default(db_path):
    assert persistence.get_preference("theme", "system") == "system"


def test_connections_are_closed(db_path, monkeypatch):
    """Test every read and write releases its SQLite connection."""
    opened = []
    connect = persistence._connect

    def tracking_connect():
        conn = connect()
        opened.append(conn)
        return conn

    monkeypatch.setattr(persistence, "_connect", tracking_connect)

    persistence.bootstrap_schema()
    persistence.set_preference("theme", "dark")
    assert persistence.get_preference("theme") == "dark"

    assert len(opened) == 3
    for conn in opened:
        with pytest.raises(sqlite3.ProgrammingError):
            conn.execute("SELECT 1")
