"""Shared test fixtures."""
import json
from pathlib import Path

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from anime_catalog.dependencies import get_catalog_service
from anime_catalog.main import app
from anime_catalog.services.anime_service import CatalogService
from anime_catalog.storage import JsonFileStorage

NARUTO = {"nombre": "Naruto", "genero": "Shonen", "año": 2002, "autor": "Masashi Kishimoto"}
DEATH_NOTE = {"nombre": "Death Note", "genero": "Misterio", "año": "2006", "autor": "Tsugumi Ohba"}
MONSTER = {"nombre": "Monster", "genero": "Thriller", "año": 2004, "autor": "Naoki Urasawa"}

SEED = {"1": NARUTO, "2": DEATH_NOTE, "3": MONSTER}


def write_collection(path: Path, collection) -> None:
    """Write a collection the way the service stores it."""
    path.write_text(json.dumps(collection, indent=4, ensure_ascii=False), encoding="utf-8")


def read_collection(path: Path) -> dict:
    """Read the collection currently on disk."""
    return json.loads(path.read_text(encoding="utf-8"))


@pytest.fixture
def anime_file(tmp_path: Path) -> Path:
    """Temporary catalog file holding the seed collection."""
    path = tmp_path / "anime.json"
    write_collection(path, SEED)
    return path


@pytest.fixture
def service(anime_file: Path) -> CatalogService:
    """Catalog service over the temporary file."""
    return CatalogService(JsonFileStorage(anime_file))


@pytest_asyncio.fixture
async def client(service: CatalogService):
    """Create test client."""
    app.dependency_overrides[get_catalog_service] = lambda: service
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()
