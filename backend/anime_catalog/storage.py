import copy
import json
from pathlib import Path
from typing import Optional, Protocol

from starlette.concurrency import run_in_threadpool

from anime_catalog.core.exceptions import StorageParseError, StorageReadError, StorageWriteError
from anime_catalog.core.logging import get_logger
from anime_catalog.schemas.anime import AnimeCollection

logger = get_logger("storage")


class CatalogStorage(Protocol):
    """
    Storage interface for the whole anime collection.

    ``load`` returns a fresh copy of the collection on every call and
    ``save`` replaces the stored collection wholesale.
    """
    async def load(self) -> AnimeCollection:
        ...
    async def save(self, collection: AnimeCollection) -> None:
        ...


class JsonFileStorage:
    """
    Collection kept as one JSON object in a file, read and rewritten whole.
    """
    def __init__(self, path: Path, indent: int = 4):
        self.path = Path(path)
        self.indent = indent

    def _read(self) -> AnimeCollection:
        try:
            raw = self.path.read_text(encoding="utf-8")
        except OSError as e:
            logger.error(f"Could not read {self.path}: {e}")
            raise StorageReadError() from e
        try:
            collection = json.loads(raw)
        except json.JSONDecodeError as e:
            logger.error(f"Could not parse {self.path}: {e}")
            raise StorageParseError() from e
        if not isinstance(collection, dict):
            logger.error(f"{self.path} does not hold a JSON object")
            raise StorageParseError()
        return collection

    def _write(self, collection: AnimeCollection) -> None:
        text = json.dumps(collection, indent=self.indent, ensure_ascii=False)
        try:
            self.path.write_text(text, encoding="utf-8")
        except OSError as e:
            logger.error(f"Could not write {self.path}: {e}")
            raise StorageWriteError() from e

    async def load(self) -> AnimeCollection:
        return await run_in_threadpool(self._read)

    async def save(self, collection: AnimeCollection) -> None:
        await run_in_threadpool(self._write, collection)


class InMemoryStorage:
    """
    Dict-based in-memory storage, isolated from callers by deep copies.
    """
    def __init__(self, initial: Optional[AnimeCollection] = None):
        self._collection: AnimeCollection = copy.deepcopy(initial or {})

    async def load(self) -> AnimeCollection:
        return copy.deepcopy(self._collection)

    async def save(self, collection: AnimeCollection) -> None:
        self._collection = copy.deepcopy(collection)
