import pytest

from easy_doctor.services.session import InMemoryKeyValueStore, SQLiteKeyValueStore


@pytest.mark.asyncio
async def test_sqlite_get_set_delete(tmp_path):
    store = SQLiteKeyValueStore(str(tmp_path / "kv.db"))

    assert await store.get("doctorEmail") is None

    await store.set("doctorEmail", "a@x.com")
    assert await store.get("doctorEmail") == "a@x.com"

    await store.set("doctorEmail", "b@x.com")
    assert await store.get("doctorEmail") == "b@x.com"

    await store.delete("doctorEmail")
    assert await store.get("doctorEmail") is None


@pytest.mark.asyncio
async def test_sqlite_set_many_persists_across_instances(tmp_path):
    db_path = str(tmp_path / "kv.db")
    await SQLiteKeyValueStore(db_path).set_many(
        {"lastLoginTime": "1700000000000", "doctorEmail": "a@x.com"}
    )

    reopened = SQLiteKeyValueStore(db_path)
    assert await reopened.get("lastLoginTime") == "1700000000000"
    assert await reopened.get("doctorEmail") == "a@x.com"


@pytest.mark.asyncio
async def test_sqlite_delete_missing_key_is_noop(tmp_path):
    store = SQLiteKeyValueStore(str(tmp_path / "kv.db"))
    await store.delete("nothing")
    assert await store.get("nothing") is None


@pytest.mark.asyncio
async def test_in_memory_store():
    store = InMemoryKeyValueStore({"a": "1"})
    await store.set_many({"b": "2", "c": "3"})
    await store.delete("a")
    await store.delete("missing")

    assert store.snapshot() == {"b": "2", "c": "3"}
    assert await store.get("b") == "2"
