"""Anime entry schemas."""
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, PrivateAttr, model_validator

AnimeDocument = dict[str, Any]
AnimeCollection = dict[str, AnimeDocument]

REQUIRED_FIELDS = ("nombre", "genero", "año", "autor")


class AnimeEntry(BaseModel):
    """A catalog entry as sent by clients.

    The four named fields are the ones every created entry must carry.
    Their values are stored as given, so none of them is type-checked;
    any other key is kept in the model's extra map and written back
    verbatim, in the order the client sent it.
    """

    model_config = ConfigDict(extra="allow")

    nombre: Any = None
    genero: Any = None
    anio: Any = Field(default=None, alias="año")
    autor: Any = None

    _key_order: list[str] = PrivateAttr(default_factory=list)

    @model_validator(mode="wrap")
    @classmethod
    def remember_key_order(cls, data: Any, handler):
        entry = handler(data)
        if isinstance(data, dict):
            entry._key_order = list(data)
        return entry

    def missing_fields(self) -> list[str]:
        """Return the required fields that are absent or empty."""
        document = self.to_document()
        return [field for field in REQUIRED_FIELDS if not document.get(field)]

    def to_document(self) -> AnimeDocument:
        """Return the fields the client actually sent, keyed as stored."""
        sent: AnimeDocument = {}
        for name, field in type(self).model_fields.items():
            if name in self.model_fields_set:
                sent[field.alias or name] = getattr(self, name)
        sent.update(self.model_extra or {})

        document = {key: sent[key] for key in self._key_order if key in sent}
        document.update((key, value) for key, value in sent.items() if key not in document)
        return document


class AnimesCreatedResponse(BaseModel):
    """Response for a successful create."""

    message: str
    animes: list[AnimeDocument]


class AnimeUpdatedResponse(BaseModel):
    """Response for a successful update."""

    mensaje: str
    anime: AnimeDocument


class AnimeDeletedResponse(BaseModel):
    """Response for a successful delete, with the renumbered collection."""

    mensaje: str
    animes: AnimeCollection
