"""Tests for identity pools and their persistence."""

import json
import random
import threading

import pytest

from aml_synth.errors import PoolExhaustedError, PoolStorageError
from aml_synth.pool import (
    ACCOUNT_POOL_EMPTY,
    CUSTOMER_POOL_EMPTY,
    AccountPool,
    CustomerPool,
    JsonFileStorage,
    MemoryStorage,
    _Pool,
)
from aml_synth.schemas import CustomerPoolEntry


def test_round_trip_through_json_file(tmp_path, bd_customer: CustomerPoolEntry) -> None:
    """Upsert, persist, reload into a fresh pool, draw: same entry comes back unchanged."""
    path = tmp_path / "pools" / "customers.json"
    pool = CustomerPool(JsonFileStorage(path), random.Random(1))
    pool.upsert(bd_customer)

    on_disk = json.loads(path.read_text(encoding="utf-8"))
    assert on_disk == [bd_customer.to_json_dict()]
    assert on_disk[0]["customerNameBen"] == "রহিম উদ্দিন"

    fresh = CustomerPool(JsonFileStorage(path), random.Random(2))
    assert fresh.load() == 1
    assert fresh.draw_random() == bd_customer
    assert fresh.get(500123) == bd_customer


def test_failed_write_keeps_snapshot_and_leaves_no_temp_file(tmp_path) -> None:
    path = tmp_path / "accounts.json"
    storage = JsonFileStorage(path)
    storage.write(["12345678"])
    with pytest.raises(TypeError):
        storage.write([object()])
    assert sorted(p.name for p in tmp_path.iterdir()) == ["accounts.json"]
    assert storage.read() == ["12345678"]


def test_missing_file_loads_empty(tmp_path) -> None:
    pool = CustomerPool(JsonFileStorage(tmp_path / "absent.json"))
    assert pool.load() == 0
    assert pool.is_empty()


def test_corrupt_file_raises(tmp_path) -> None:
    path = tmp_path / "customers.json"
    path.write_text("{broken", encoding="utf-8")
    with pytest.raises(PoolStorageError, match="Cannot read pool snapshot"):
        CustomerPool(JsonFileStorage(path)).load()
    path.write_text('{"customerId": 1}', encoding="utf-8")
    with pytest.raises(PoolStorageError, match="must be a JSON array"):
        CustomerPool(JsonFileStorage(path)).load()


def test_invalid_entries_raise() -> None:
    with pytest.raises(PoolStorageError, match="Invalid customer pool entry"):
        CustomerPool(MemoryStorage([{"customerName": "no id"}])).load()
    with pytest.raises(PoolStorageError, match="Invalid account pool entry"):
        AccountPool(MemoryStorage([{"accountNumber": "1"}])).load()


def test_customer_upsert_overwrites_same_id(customer_pool: CustomerPool) -> None:
    customer_pool.upsert(CustomerPoolEntry(customer_id=1, customer_name_eng="First"))
    size = customer_pool.upsert(
        [
            CustomerPoolEntry(customer_id=1, customer_name_eng="Second"),
            CustomerPoolEntry(customer_id=2, customer_name_eng="Other"),
        ]
    )
    assert size == 2
    assert customer_pool.get(1).customer_name_eng == "Second"  # type: ignore[union-attr]


def test_account_pool_is_a_set(account_pool: AccountPool) -> None:
    account_pool.upsert("11111111")
    account_pool.upsert(["11111111", "22222222"])
    assert account_pool.size() == 2
    assert account_pool.values() == ["11111111", "22222222"]
    assert "22222222" in account_pool


def test_every_mutation_persists() -> None:
    storage = MemoryStorage()
    pool = AccountPool(storage)
    pool.upsert("11111111")
    pool.upsert("22222222")
    assert storage.writes == 2
    assert storage.items == ["11111111", "22222222"]
    pool.clear()
    assert storage.writes == 3
    assert storage.items == []


def test_clear_then_draw_fails(seeded_pools) -> None:
    customers, accounts = seeded_pools
    customers.clear()
    accounts.clear()
    assert customers.is_empty()
    assert accounts.is_empty()
    with pytest.raises(PoolExhaustedError, match=CUSTOMER_POOL_EMPTY) as exc:
        customers.draw_id()
    assert exc.value.pool_name == "customer"
    with pytest.raises(PoolExhaustedError, match=ACCOUNT_POOL_EMPTY) as exc:
        accounts.draw_random()
    assert exc.value.pool_name == "account"


def test_clear_is_idempotent(customer_pool: CustomerPool) -> None:
    customer_pool.clear()
    customer_pool.clear()
    assert customer_pool.is_empty()
    assert customer_pool.size() == 0


def test_load_replaces_contents() -> None:
    storage = MemoryStorage(["11111111"])
    pool = AccountPool(storage)
    pool.load()
    pool.upsert("22222222")
    storage.items = ["33333333"]
    assert pool.load() == 1
    assert pool.values() == ["33333333"]


def test_integer_account_ids_are_stringified() -> None:
    pool = AccountPool(MemoryStorage([12345678]))
    pool.load()
    assert pool.values() == ["12345678"]


def test_concurrent_upserts_are_all_kept() -> None:
    storage = MemoryStorage()
    pool = AccountPool(storage)

    def worker(start: int) -> None:
        for i in range(start, start + 50):
            pool.upsert(str(i))

    threads = [threading.Thread(target=worker, args=(n * 1000,)) for n in range(4)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()
    assert pool.size() == 200
    assert len(storage.items or []) == 200


def test_base_pool_is_abstract() -> None:
    with pytest.raises(TypeError, match="abstract"):
        _Pool(MemoryStorage())  # type: ignore[abstract]
