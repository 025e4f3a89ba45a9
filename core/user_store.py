# =============================================================================
# core/user_store.py  —  User Record Storage & Retrieval
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Persists the user collection and answers the three questions the handlers
#   ask of it: "add this user", "give me everyone", "give me user N".
#
# TWO LAYERS:
#   - A REPOSITORY knows how to load() and save() the WHOLE collection.
#     JsonFileRepository keeps it in one JSON array on disk;
#     InMemoryRepository keeps it in a list (tests, throwaway runs).
#   - UserStore implements the directory operations on top of any repository.
#     Handlers only ever see UserStore, so swapping the backing medium never
#     touches handler logic.
#
# NO CACHING:
#   Every operation reloads the full collection.  Two concurrent appends can
#   therefore both read N records and both write N+1 with the same id (last
#   writer wins).  That is a known limitation of the read-modify-write scheme.
#   Pass serialize_writes=True to put appends behind an asyncio.Lock when a
#   single process must not hand out duplicate ids.
# =============================================================================

import asyncio
import copy
import json
import logging
from pathlib import Path
from typing import Any, Protocol

from core.errors import StorageError
from core.models import UserRecord

logger = logging.getLogger(__name__)


class UserRepository(Protocol):
    """Whole-collection persistence."""

    async def load(self) -> list[UserRecord]: ...

    async def save(self, records: list[UserRecord]) -> None: ...


# -----------------------------------------------------------------------------
# JSON file repository
# -----------------------------------------------------------------------------
class JsonFileRepository:
    """One JSON array in one file, rewritten in full on every save.

    A missing file reads as an empty collection, so a fresh install needs no
    seeding.  Anything else that prevents reading or writing (permissions,
    invalid JSON, a document that is not an array) is a StorageError.
    """

    def __init__(self, path: Path | str):
        self.path = Path(path)

    async def load(self) -> list[UserRecord]:
        return await asyncio.to_thread(self._read)

    async def save(self, records: list[UserRecord]) -> None:
        await asyncio.to_thread(self._write, records)

    def _read(self) -> list[UserRecord]:
        try:
            raw = self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return []
        except OSError as e:
            raise StorageError(f"cannot read {self.path}: {e}") from e

        try:
            data = json.loads(raw)
        except json.JSONDecodeError as e:
            raise StorageError(f"{self.path} is not valid JSON: {e}") from e

        if not isinstance(data, list):
            raise StorageError(f"{self.path} does not contain a JSON array")
        return data

    def _write(self, records: list[UserRecord]) -> None:
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(json.dumps(records, indent=2), encoding="utf-8")
        except (OSError, TypeError, ValueError) as e:
            raise StorageError(f"cannot write {self.path}: {e}") from e


class InMemoryRepository:
    def __init__(self, records: list[UserRecord] | None = None):
        self._records: list[UserRecord] = copy.deepcopy(records or [])

    async def load(self) -> list[UserRecord]:
        return copy.deepcopy(self._records)

    async def save(self, records: list[UserRecord]) -> None:
        self._records = copy.deepcopy(records)


# -----------------------------------------------------------------------------
# UserStore — the directory operations
# -----------------------------------------------------------------------------
class UserStore:
    """Append-with-generated-id and full-scan reads over a repository."""

    def __init__(self, repository: UserRepository, serialize_writes: bool = False):
        self.repository = repository
        self._write_lock = asyncio.Lock() if serialize_writes else None

    async def append(self, candidate: dict[str, Any]) -> int:
        """Store a new user and return the id it was given.

        The id is len(collection) + 1.  Raises StorageError when the
        collection cannot be read or written back; a failed write may leave
        the backing medium partially written.
        """
        if self._write_lock is None:
            return await self._append(candidate)
        async with self._write_lock:
            return await self._append(candidate)

    async def _append(self, candidate: dict[str, Any]) -> int:
        records = await self.repository.load()
        user_id = len(records) + 1
        records.append({"id": user_id, **candidate})
        await self.repository.save(records)
        logger.debug("Stored user %d (%d records)", user_id, len(records))
        return user_id

    async def list_all(self) -> list[UserRecord]:
        return await self.repository.load()

    async def find_by_id(self, user_id: int) -> UserRecord | None:
        """Return the first record with this id, or None when there is none."""
        for record in await self.list_all():
            if record.get("id") == user_id:
                return record
        return None
