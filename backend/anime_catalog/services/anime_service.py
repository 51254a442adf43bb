"""Anime catalog service: lookups, batch creation, merge updates and renumbering deletes."""
import asyncio
from contextlib import nullcontext
from typing import Any, Optional, Sequence, Union

from anime_catalog.core.exceptions import (
    SAVE_CHANGES_MESSAGE,
    UPDATE_BODY_MESSAGE,
    BadRequestError,
    NotFoundError,
    StorageWriteError,
)
from anime_catalog.core.logging import get_logger
from anime_catalog.schemas.anime import AnimeCollection, AnimeDocument, AnimeEntry
from anime_catalog.storage import CatalogStorage

logger = get_logger("services.anime")


def _is_index_key(key: str) -> bool:
    """Whether ``key`` is a canonical non-negative integer ("7", not "07")."""
    return key.isascii() and key.isdigit() and str(int(key)) == key


def iteration_order(collection: AnimeCollection) -> AnimeCollection:
    """
    Return the collection in the order its keys are walked.

    Integer keys come first in ascending numeric order, any other key
    follows in insertion order. This is how the stored JSON object has
    always been traversed, whatever order the keys appear in the file.
    """
    index_keys = sorted((key for key in collection if _is_index_key(key)), key=int)
    other_keys = [key for key in collection if not _is_index_key(key)]
    return {key: collection[key] for key in index_keys + other_keys}


def _as_entry(changes: Union[AnimeEntry, dict[str, Any], None]) -> AnimeEntry:
    """Read an update body; no body means no changes."""
    if changes is None:
        return AnimeEntry()
    if isinstance(changes, AnimeEntry):
        return changes
    if not isinstance(changes, dict):
        raise BadRequestError(UPDATE_BODY_MESSAGE)
    return AnimeEntry.model_validate(changes)


def renumber(collection: AnimeCollection) -> AnimeCollection:
    """Re-key every entry as 1..N in iteration order, dropping the old ids."""
    return {
        str(new_id): anime
        for new_id, anime in enumerate(iteration_order(collection).values(), start=1)
    }


class CatalogService:
    """Service for anime catalog operations.

    Every call loads the whole collection from storage, works on it in
    memory and, for writes, saves the whole collection back. Nothing is
    cached between calls.
    """

    def __init__(self, storage: CatalogStorage, serialize_writes: bool = False):
        self._storage = storage
        self._lock: Optional[asyncio.Lock] = asyncio.Lock() if serialize_writes else None

    def _guard(self):
        """Lock held around a load/save cycle, or a no-op when unserialized."""
        return self._lock if self._lock is not None else nullcontext()

    async def _save_changes(self, collection: AnimeCollection) -> None:
        """Save an edited collection, reporting failures as unsaved changes."""
        try:
            await self._storage.save(collection)
        except StorageWriteError as e:
            raise StorageWriteError(SAVE_CHANGES_MESSAGE) from e

    async def get_by_id(self, anime_id: str) -> AnimeDocument:
        """Get an entry by its literal id, merged with that id."""
        async with self._guard():
            collection = await self._storage.load()
        anime = collection.get(anime_id)
        if anime is None:
            logger.debug(f"No anime with id {anime_id}")
            raise NotFoundError("ID", anime_id)
        return {"id": anime_id, **anime}

    async def get_by_name(self, nombre: str) -> AnimeDocument:
        """Get the first entry whose name matches ``nombre`` ignoring case."""
        async with self._guard():
            collection = await self._storage.load()
        wanted = nombre.lower()
        for anime_id, anime in iteration_order(collection).items():
            stored = anime.get("nombre") if isinstance(anime, dict) else None
            if isinstance(stored, str) and stored.lower() == wanted:
                return {"id": anime_id, **anime}
        logger.debug(f"No anime named {nombre!r}")
        raise NotFoundError("nombre", nombre)

    async def list_all(self) -> AnimeCollection:
        """List the whole collection."""
        async with self._guard():
            collection = await self._storage.load()
        return iteration_order(collection)

    async def create(
        self,
        payload: Union[AnimeEntry, Sequence[AnimeEntry]],
    ) -> list[AnimeDocument]:
        """
        Add one entry or a batch of entries.

        The batch is all-or-nothing: if any entry lacks a required field
        nothing is written. New ids continue from the collection size, in
        payload order.
        """
        entries = [payload] if isinstance(payload, AnimeEntry) else list(payload)
        async with self._guard():
            collection = await self._storage.load()
            if any(entry.missing_fields() for entry in entries):
                raise BadRequestError()

            documents = [entry.to_document() for entry in entries]
            next_id = len(collection) + 1
            for offset, document in enumerate(documents):
                collection[str(next_id + offset)] = document
            await self._storage.save(collection)

        logger.info(f"Created {len(documents)} anime(s) starting at id {next_id}")
        return documents

    async def update(
        self,
        anime_id: str,
        changes: Union[AnimeEntry, dict[str, Any], None] = None,
    ) -> AnimeDocument:
        """
        Shallow-merge ``changes`` over an existing entry.

        The id is checked before the body: a missing entry is a 404 whatever
        was sent. No body at all merges nothing.
        """
        async with self._guard():
            collection = await self._storage.load()
            if collection.get(anime_id) is None:
                logger.debug(f"No anime with id {anime_id} to update")
                raise NotFoundError("ID", anime_id)

            merged = {**collection[anime_id], **_as_entry(changes).to_document()}
            collection[anime_id] = merged
            await self._save_changes(collection)

        logger.info(f"Updated anime {anime_id}")
        return merged

    async def delete(self, anime_id: str) -> AnimeCollection:
        """Delete an entry and renumber the rest as 1..N."""
        async with self._guard():
            collection = await self._storage.load()
            if collection.get(anime_id) is None:
                logger.debug(f"No anime with id {anime_id} to delete")
                raise NotFoundError("ID", anime_id)

            del collection[anime_id]
            renumbered = renumber(collection)
            await self._save_changes(renumbered)

        logger.info(f"Deleted anime {anime_id}, {len(renumbered)} remaining")
        return renumbered
