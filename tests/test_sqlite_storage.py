from __future__ import annotations

import pytest

from craftref import client, settings
from craftref.adapters.sqlite_storage import SQLiteKeyValueStorage
from craftref.core.errors import PersistenceError
from craftref.core.history import HistoryStore


def test_missing_key_reads_none(tmp_path) -> None:
    storage = SQLiteKeyValueStorage(str(tmp_path / "craftref.db"))
    storage.init_db()

    assert storage.read("mc_command_search_history") is None


def test_write_upserts_value(tmp_path) -> None:
    storage = SQLiteKeyValueStorage(str(tmp_path / "craftref.db"))
    storage.init_db()

    storage.write("key", "first")
    storage.write("key", "second")

    assert storage.read("key") == "second"


def test_history_survives_reopen(tmp_path) -> None:
    db_path = str(tmp_path / "craftref.db")
    storage = SQLiteKeyValueStorage(db_path)
    storage.init_db()
    HistoryStore(storage).record("钻石")

    reopened = HistoryStore(SQLiteKeyValueStorage(db_path))

    assert reopened.load() == ("钻石",)


def test_missing_table_raises_persistence_error(tmp_path) -> None:
    storage = SQLiteKeyValueStorage(str(tmp_path / "craftref.db"))

    with pytest.raises(PersistenceError):
        storage.read("key")


def test_unopenable_database_starts_with_empty_history(tmp_path, monkeypatch) -> None:
    monkeypatch.setattr(settings, "HISTORY_DB_PATH", str(tmp_path / "missing" / "dir" / "craftref.db"))

    history = client.build_history()

    assert history.entries == ()
    assert history.record("diamond") == ("diamond",)
