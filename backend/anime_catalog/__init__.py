"""Anime Catalog API: a JSON-file backed CRUD service."""

__version__ = "1.0.0"
