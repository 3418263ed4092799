"""
Shared schema building blocks.

Entities are exposed to Python with snake_case attributes and persisted /
exported with the camelCase field names of the storage layout.
"""

import datetime
import uuid
from typing import Annotated

from pydantic import AfterValidator, BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


def as_utc(value: datetime.datetime) -> datetime.datetime:
    """Interpret naive timestamps as UTC so all instants are comparable."""
    if value.tzinfo is None:
        return value.replace(tzinfo=datetime.timezone.utc)
    return value


Instant = Annotated[datetime.datetime, AfterValidator(as_utc)]


def utcnow() -> datetime.datetime:
    return datetime.datetime.now(datetime.timezone.utc)


def new_id() -> str:
    return uuid.uuid4().hex


class CamelModel(BaseModel):
    """Base model accepting both attribute names and camelCase aliases."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def to_storage(self) -> dict:
        """Serialize to the JSON-compatible camelCase form that is persisted."""
        return self.model_dump(mode="json", by_alias=True)
