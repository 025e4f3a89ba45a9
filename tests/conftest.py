import asyncio

import pytest

from core.errors import StorageError
from core.user_store import InMemoryRepository, JsonFileRepository, UserStore

ADA = {
    "name": "Ada Lovelace",
    "email": "ada@lovelace.dev",
    "address": "12 St James's Square, London",
    "phone": "+44 20 7946 0018",
}
ALAN = {
    "name": "Alan Turing",
    "email": "alan@turing.org",
    "address": "Bletchley Park, Milton Keynes",
    "phone": "+44 1908 640404",
}


class ScriptedSampler:
    """SamplingClient that replays a fixed completion and records requests."""

    def __init__(self, text: str = "", error: Exception | None = None):
        self.text = text
        self.error = error
        self.requests: list[tuple[str, int]] = []

    async def generate(self, instruction: str, max_tokens: int) -> str:
        self.requests.append((instruction, max_tokens))
        if self.error is not None:
            raise self.error
        return self.text


class BrokenRepository:
    """Repository whose backing medium is gone."""

    async def load(self):
        raise StorageError("disk on fire")

    async def save(self, records):
        raise StorageError("disk on fire")


class ReadOnlyRepository(InMemoryRepository):
    async def save(self, records):
        raise StorageError("read-only medium")


class SlowRepository(InMemoryRepository):
    """Yields to the event loop between reading and returning the collection."""

    async def load(self):
        records = await super().load()
        await asyncio.sleep(0)
        return records


@pytest.fixture
def store():
    return UserStore(InMemoryRepository())


@pytest.fixture
def db_path(tmp_path):
    return tmp_path / "data" / "users.json"


@pytest.fixture
def file_store(db_path):
    return UserStore(JsonFileRepository(db_path))


@pytest.fixture
def broken_store():
    return UserStore(BrokenRepository())
