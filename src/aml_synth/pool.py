"""Identity pools: durable customer and account identities for cross-entity references.

Pools are explicit objects with a load()/save() lifecycle. Persistence goes through
an injected storage object (JSON file in production, memory in tests); every
mutating call writes a snapshot while holding the pool's lock.
"""

from __future__ import annotations

import json
import os
import random
import tempfile
import threading
from abc import ABC, abstractmethod
from collections.abc import Iterable
from pathlib import Path
from typing import Any, Generic, Protocol, TypeVar

from pydantic import ValidationError

from aml_synth.errors import PoolExhaustedError, PoolStorageError
from aml_synth.logging_config import get_logger
from aml_synth.schemas import CustomerPoolEntry

logger = get_logger(__name__)

CUSTOMER_POOL_EMPTY = "No customers available. Please generate customers first."
ACCOUNT_POOL_EMPTY = "No accounts available. Please generate accounts first."

K = TypeVar("K")
V = TypeVar("V")


class PoolStorage(Protocol):
    """Read/write target for a pool snapshot (a JSON-compatible list)."""

    def read(self) -> list[Any] | None: ...

    def write(self, items: list[Any]) -> None: ...


class JsonFileStorage:
    """Pool snapshot as a JSON array on local disk. Missing file reads as None."""

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)

    def read(self) -> list[Any] | None:
        if not self.path.exists():
            return None
        try:
            with open(self.path, encoding="utf-8") as f:
                data = json.load(f)
        except (json.JSONDecodeError, OSError) as e:
            raise PoolStorageError(f"Cannot read pool snapshot {self.path}: {e}") from e
        if not isinstance(data, list):
            raise PoolStorageError(f"Pool snapshot {self.path} must be a JSON array")
        return data

    def write(self, items: list[Any]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with tempfile.NamedTemporaryFile(
            mode="w", suffix=".tmp", dir=self.path.parent, delete=False, encoding="utf-8"
        ) as tmp:
            tmp_path = tmp.name
            try:
                json.dump(items, tmp, indent=2, ensure_ascii=False)
            except Exception:
                tmp.close()
                os.unlink(tmp_path)
                raise
        os.replace(tmp_path, self.path)


class MemoryStorage:
    """In-process snapshot target; counts writes so tests can assert persistence."""

    def __init__(self, items: list[Any] | None = None) -> None:
        self.items = items
        self.writes = 0

    def read(self) -> list[Any] | None:
        return None if self.items is None else list(self.items)

    def write(self, items: list[Any]) -> None:
        self.items = list(items)
        self.writes += 1


class _Pool(ABC, Generic[K, V]):
    """Ordered keyed store with lock-guarded upsert + persist."""

    pool_name = "pool"
    empty_message = "Pool is empty."

    def __init__(self, storage: PoolStorage, rng: random.Random | None = None) -> None:
        self._storage = storage
        self._rng = rng or random.Random()
        self._items: dict[K, V] = {}
        self._lock = threading.Lock()

    @abstractmethod
    def _key(self, item: V) -> K:
        """Identity of an entry; upsert overwrites on equal keys."""

    @abstractmethod
    def _decode(self, raw: Any) -> V:
        """Snapshot element to entry; PoolStorageError if invalid."""

    @abstractmethod
    def _encode(self, item: V) -> Any: ...

    def load(self) -> int:
        """Replace in-memory contents with the persisted snapshot; return the size."""
        raw = self._storage.read()
        with self._lock:
            self._items = {}
            for entry in raw or []:
                item = self._decode(entry)
                self._items[self._key(item)] = item
            size = len(self._items)
        logger.info("Loaded %d entries into %s pool", size, self.pool_name)
        return size

    def save(self) -> None:
        with self._lock:
            self._persist()

    def _persist(self) -> None:
        self._storage.write([self._encode(v) for v in self._items.values()])
        logger.debug("Persisted %s pool (%d entries)", self.pool_name, len(self._items))

    def upsert(self, items: V | Iterable[V]) -> int:
        """Add one or many entries (last write wins per key) and persist. Returns new size."""
        batch = [items] if self._is_single(items) else list(items)  # type: ignore[arg-type]
        with self._lock:
            for item in batch:
                self._items[self._key(item)] = item
            self._persist()
            return len(self._items)

    @abstractmethod
    def _is_single(self, items: Any) -> bool:
        """True when upsert got one entry rather than an iterable of them."""

    def clear(self) -> None:
        with self._lock:
            self._items = {}
            self._persist()

    def is_empty(self) -> bool:
        return not self._items

    def size(self) -> int:
        return len(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, key: object) -> bool:
        return key in self._items

    def values(self) -> list[V]:
        return list(self._items.values())

    def draw_random(self) -> V:
        """Uniform draw; raises PoolExhaustedError when empty."""
        with self._lock:
            if not self._items:
                logger.warning("%s pool is empty", self.pool_name)
                raise PoolExhaustedError(self.pool_name, self.empty_message)
            return self._rng.choice(list(self._items.values()))


class CustomerPool(_Pool[int, CustomerPoolEntry]):
    """Customers keyed by customer_id; re-adding an id overwrites the entry."""

    pool_name = "customer"
    empty_message = CUSTOMER_POOL_EMPTY

    def _key(self, item: CustomerPoolEntry) -> int:
        return item.customer_id

    def _decode(self, raw: Any) -> CustomerPoolEntry:
        try:
            return CustomerPoolEntry.model_validate(raw)
        except ValidationError as e:
            raise PoolStorageError(f"Invalid customer pool entry: {e}") from e

    def _encode(self, item: CustomerPoolEntry) -> Any:
        return item.to_json_dict()

    def _is_single(self, items: Any) -> bool:
        return isinstance(items, CustomerPoolEntry)

    def get(self, customer_id: int) -> CustomerPoolEntry | None:
        return self._items.get(customer_id)

    def draw_id(self) -> int:
        return self.draw_random().customer_id


class AccountPool(_Pool[str, str]):
    """Account identifiers as an ordered set; re-adding is a no-op."""

    pool_name = "account"
    empty_message = ACCOUNT_POOL_EMPTY

    def _key(self, item: str) -> str:
        return item

    def _decode(self, raw: Any) -> str:
        if not isinstance(raw, str | int):
            raise PoolStorageError(f"Invalid account pool entry: {raw!r}")
        return str(raw)

    def _encode(self, item: str) -> Any:
        return item

    def _is_single(self, items: Any) -> bool:
        return isinstance(items, str)
