"""
Base repositories on the key-value store.

A collection repository owns one key holding a JSON list of records.
Records are kept in their persisted camelCase form and parsed into
entities at the boundary, so every read returns an independent copy.

Semantics shared by all collections:

- insertion order is preserved and is the default iteration order
- ``add`` appends without checking for duplicate identifiers
- ``update`` is a shallow field-level merge; unknown ids are a no-op
- ``delete`` of an unknown id is a no-op
- a stored record that no longer validates is skipped on read but kept
  on write
"""

from __future__ import annotations

import datetime
import logging
from typing import Any, Callable, Generic, Mapping, Optional, TypeVar, Union

from pydantic import BaseModel, ValidationError
from pydantic_core import to_jsonable_python

from dreamweaver.db.kv_store import KeyValueStore
from dreamweaver.schemas.base import CamelModel, as_utc

logger = logging.getLogger(__name__)

EntityT = TypeVar("EntityT", bound=CamelModel)

Updates = Union[BaseModel, Mapping[str, Any]]


def storage_fields(model: type[CamelModel], updates: Updates) -> dict[str, Any]:
    """Translate a partial update into persisted (camelCase, JSON) fields.

    Pydantic update schemas contribute only the fields that were set.
    Plain mappings may use attribute names or aliases.
    """
    if isinstance(updates, BaseModel):
        return updates.model_dump(mode="json", by_alias=True, exclude_unset=True)

    fields = {}
    for name, value in updates.items():
        field = model.model_fields.get(name)
        key = field.alias if field is not None and field.alias else name
        fields[key] = to_jsonable_python(value)
    return fields


class CollectionRepository(Generic[EntityT]):
    """Typed CRUD collection stored under a single key."""

    key: str
    model: type[EntityT]
    id_field: str

    def __init__(self, store: KeyValueStore):
        self.store = store

    # ------------------------------------------------------------------
    # Persistence helpers
    # ------------------------------------------------------------------

    @property
    def _id_key(self) -> str:
        return self.model.model_fields[self.id_field].alias or self.id_field

    def _load(self) -> list[dict[str, Any]]:
        raw = self.store.get(self.key)
        if raw is None:
            return []
        if not isinstance(raw, list):
            logger.error("Expected a list under %s, found %s", self.key, type(raw).__name__)
            return []
        return [record for record in raw if isinstance(record, dict)]

    def _save(self, records: list[dict[str, Any]]) -> None:
        self.store.set(self.key, records)

    def _parse(self, record: dict[str, Any]) -> Optional[EntityT]:
        try:
            return self.model.model_validate(record)
        except ValidationError:
            logger.warning("Skipping invalid %s record %r", self.model.__name__, record.get(self._id_key))
            return None

    def _filter(self, predicate: Callable[[EntityT], bool]) -> list[EntityT]:
        return [entity for entity in self.get_all() if predicate(entity)]

    # ------------------------------------------------------------------
    # CRUD
    # ------------------------------------------------------------------

    def get_all(self) -> list[EntityT]:
        entities = (self._parse(record) for record in self._load())
        return [entity for entity in entities if entity is not None]

    def get_by_id(self, entity_id: str) -> Optional[EntityT]:
        """First valid record with *entity_id*; invalid duplicates are skipped."""
        id_key = self._id_key
        for record in self._load():
            if record.get(id_key) != entity_id:
                continue
            entity = self._parse(record)
            if entity is not None:
                return entity
        return None

    def add(self, entity: EntityT) -> None:
        records = self._load()
        records.append(entity.to_storage())
        self._save(records)

    def update(self, entity_id: str, updates: Updates) -> Optional[EntityT]:
        """Shallow-merge *updates* onto the record with *entity_id*.

        Returns the updated entity, or ``None`` when no record matches.
        Raises :class:`ValidationError` if the merged record is invalid;
        the stored record is left untouched in that case.
        """
        id_key = self._id_key
        records = self._load()
        for index, record in enumerate(records):
            if record.get(id_key) != entity_id:
                continue
            entity = self.model.model_validate({**record, **storage_fields(self.model, updates)})
            records[index] = entity.to_storage()
            self._save(records)
            return entity
        return None

    def delete(self, entity_id: str) -> None:
        id_key = self._id_key
        records = self._load()
        remaining = [record for record in records if record.get(id_key) != entity_id]
        if len(remaining) != len(records):
            self._save(remaining)

    def replace_all(self, entities: list[EntityT]) -> None:
        """Overwrite the whole collection."""
        self._save([entity.to_storage() for entity in entities])

    def clear(self) -> None:
        self.store.remove(self.key)

    def count(self) -> int:
        return len(self.get_all())

    # ------------------------------------------------------------------
    # Finders shared by all collections
    # ------------------------------------------------------------------

    def get_by_user_id(self, user_id: str) -> list[EntityT]:
        return self._filter(lambda entity: entity.user_id == user_id)


def in_range(value: datetime.datetime, start: datetime.datetime, end: datetime.datetime) -> bool:
    """Inclusive on both ends.  Naive datetimes are taken as UTC."""
    return as_utc(start) <= as_utc(value) <= as_utc(end)


class SingleRecordStore(Generic[EntityT]):
    """A configuration record that always resolves to a complete value.

    Stored data is merged over the defaults, so a missing or partial
    record is indistinguishable from "use defaults".
    """

    key: str
    model: type[EntityT]

    def __init__(self, store: KeyValueStore):
        self.store = store

    def defaults(self) -> EntityT:
        return self.model()

    def get(self) -> EntityT:
        default = self.defaults()
        raw = self.store.get(self.key)
        if not isinstance(raw, dict):
            return default
        try:
            return self.model.model_validate({**default.to_storage(), **raw})
        except ValidationError:
            logger.warning("Stored %s is invalid, using defaults", self.model.__name__)
            return default

    def set(self, record: EntityT) -> None:
        self.store.set(self.key, record.to_storage())

    def update(self, updates: Updates) -> EntityT:
        current = self.get().to_storage()
        record = self.model.model_validate({**current, **storage_fields(self.model, updates)})
        self.set(record)
        return record
