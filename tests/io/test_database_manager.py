from datetime import date

import pytest

from pinata.io import DatabaseManager


@pytest.fixture
def manager(tmp_path):
    db_path = tmp_path / "pinata.db"
    db_manager = DatabaseManager(db_path)
    db_manager.ensure_schema()
    yield db_manager
    db_manager.close()


def test_schema_created(manager):
    cur = manager.connection.cursor()
    cur.execute("SELECT name FROM sqlite_master WHERE type='table'")
    table_names = {row["name"] for row in cur.fetchall()}
    assert "daily_usage" in table_names


def test_ensure_schema_is_idempotent(manager):
    manager.ensure_schema()
    assert manager.list_usage() == []


def test_creates_missing_parent_directory(tmp_path):
    db_manager = DatabaseManager(tmp_path / "nested" / "dir" / "pinata.db")
    try:
        assert (tmp_path / "nested" / "dir").is_dir()
    finally:
        db_manager.close()


def test_usage_count_defaults_to_zero(manager):
    assert manager.get_usage_count(date(2026, 1, 19)) == 0


def test_increment_usage_counts_per_day(manager):
    monday = date(2026, 1, 19)
    tuesday = date(2026, 1, 20)

    assert manager.increment_usage(monday) == 1
    assert manager.increment_usage(monday) == 2
    assert manager.increment_usage(tuesday) == 1

    assert manager.get_usage_count(monday) == 2
    assert manager.list_usage() == [("2026-01-20", 1), ("2026-01-19", 2)]


def test_usage_persists_across_connections(tmp_path):
    db_path = tmp_path / "pinata.db"
    day = date(2026, 1, 19)

    first = DatabaseManager(db_path)
    first.ensure_schema()
    first.increment_usage(day)
    first.close()

    second = DatabaseManager(db_path)
    second.ensure_schema()
    try:
        assert second.get_usage_count(day) == 1
    finally:
        second.close()
