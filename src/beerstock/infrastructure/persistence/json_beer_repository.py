"""JSON-file-backed implementation of BeerRepository."""

from __future__ import annotations

import json
import os
import tempfile
import threading
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path

from filelock import FileLock, Timeout

from beerstock.domain.exceptions import StoreError
from beerstock.domain.model.beer import Beer, BeerType
from beerstock.domain.repository.beer_repository import BeerRepository

LOCK_TIMEOUT_SECONDS = 10.0


class JsonBeerRepository(BeerRepository):
    """Stores all beers in one JSON document.

    The document is ``{"next_id": n, "beers": [...]}``. ``next_id`` only
    ever grows, so the id of a deleted beer is never handed out again.

    Writes, and every ``transaction()`` block, run under an exclusive lock
    on ``<file>.lock`` that every process using the same file honours.
    Writes land in a temporary file that is then moved over the original,
    so a reader sees either the old or the new file, never a half-written
    one.
    """

    def __init__(self, file_path: Path, lock_timeout: float = LOCK_TIMEOUT_SECONDS) -> None:
        self._file_path = file_path
        self._lock = threading.RLock()
        self._file_lock = FileLock(f"{file_path}.lock", timeout=lock_timeout)
        self._depth = 0
        self._ensure_file()

    # --- BeerRepository interface ---------------------------------------------

    @contextmanager
    def transaction(self) -> Iterator[None]:
        with self._lock:
            if self._depth == 0:
                self._acquire_file_lock()
            self._depth += 1
            try:
                yield
            finally:
                self._depth -= 1
                if self._depth == 0:
                    self._file_lock.release()

    def find_by_name(self, name: str) -> Beer | None:
        for raw in self._load_doc()["beers"]:
            if raw["name"] == name:
                return self._to_domain(raw)
        return None

    def find_by_id(self, beer_id: int) -> Beer | None:
        for raw in self._load_doc()["beers"]:
            if raw["id"] == beer_id:
                return self._to_domain(raw)
        return None

    def find_all(self) -> list[Beer]:
        return [self._to_domain(raw) for raw in self._load_doc()["beers"]]

    def insert(self, beer: Beer) -> Beer:
        with self.transaction():
            doc = self._load_doc()
            stored = beer.with_id(doc["next_id"])
            doc["next_id"] += 1
            doc["beers"].append(self._to_raw(stored))
            self._persist_doc(doc)
        return stored

    def save(self, beer: Beer) -> Beer:
        if beer.id is None:
            return self.insert(beer)

        with self.transaction():
            doc = self._load_doc()
            records = doc["beers"]
            for i, raw in enumerate(records):
                if raw["id"] == beer.id:
                    records[i] = self._to_raw(beer)
                    break
            else:
                records.append(self._to_raw(beer))
                doc["next_id"] = max(doc["next_id"], beer.id + 1)
            self._persist_doc(doc)
        return beer

    def delete(self, beer: Beer) -> None:
        with self.transaction():
            doc = self._load_doc()
            doc["beers"] = [raw for raw in doc["beers"] if raw["id"] != beer.id]
            self._persist_doc(doc)

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(beer: Beer) -> dict:
        return {
            "id": beer.id,
            "name": beer.name,
            "brand": beer.brand,
            "type": beer.type.name,
            "max": beer.max,
            "quantity": beer.quantity,
        }

    @staticmethod
    def _to_domain(raw: dict) -> Beer:
        return Beer(
            id=raw["id"],
            name=raw["name"],
            brand=raw["brand"],
            type=BeerType[raw["type"]],
            max=raw["max"],
            quantity=raw["quantity"],
        )

    # --- File helpers ---------------------------------------------------------

    def _acquire_file_lock(self) -> None:
        try:
            self._file_lock.acquire()
        except Timeout as exc:
            raise StoreError(f"Beer store {self._file_path} is locked by another process") from exc
        except OSError as exc:
            raise StoreError(f"Cannot lock {self._file_path}: {exc}") from exc

    def _load_doc(self) -> dict:
        try:
            raw = json.loads(self._file_path.read_text(encoding="utf-8"))
        except OSError as exc:
            raise StoreError(f"Cannot read {self._file_path}: {exc}") from exc
        except ValueError as exc:
            raise StoreError(f"Corrupt beer store {self._file_path}: {exc}") from exc

        # Plain arrays predate next_id.
        if isinstance(raw, list):
            return {"next_id": max((r["id"] for r in raw), default=0) + 1, "beers": raw}
        if not isinstance(raw, dict) or "beers" not in raw or "next_id" not in raw:
            raise StoreError(f"Corrupt beer store {self._file_path}: unexpected layout")
        return raw

    def _persist_doc(self, doc: dict) -> None:
        payload = json.dumps(doc, indent=2) + "\n"
        try:
            fd, tmp_name = tempfile.mkstemp(
                dir=self._file_path.parent, prefix=".beers-", suffix=".tmp"
            )
        except OSError as exc:
            raise StoreError(f"Cannot write {self._file_path}: {exc}") from exc

        try:
            with os.fdopen(fd, "w", encoding="utf-8") as fh:
                fh.write(payload)
            os.replace(tmp_name, self._file_path)
        except OSError as exc:
            Path(tmp_name).unlink(missing_ok=True)
            raise StoreError(f"Cannot write {self._file_path}: {exc}") from exc

    def _ensure_file(self) -> None:
        try:
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise StoreError(f"Cannot create {self._file_path.parent}: {exc}") from exc

        with self.transaction():
            if not self._file_path.exists():
                self._persist_doc({"next_id": 1, "beers": []})
