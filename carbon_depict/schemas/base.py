"""Shared pydantic bases for calculation records."""

import uuid

from pydantic import BaseModel, ConfigDict, Field


class RecordModel(BaseModel):
    """Base for records and their nested groups.

    ``from_attributes`` lets the persistence layer validate ORM rows directly;
    ``use_enum_values`` keeps ordinals as plain strings so the engines can look
    them up in their tables, defaults included (``validate_default``).
    """

    model_config = ConfigDict(from_attributes=True, use_enum_values=True, validate_default=True)


class TenantRecord(RecordModel):
    id: uuid.UUID = Field(default_factory=uuid.uuid4)
    org_id: uuid.UUID | None = None
