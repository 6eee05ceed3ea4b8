"""ESG target: pydantic schemas."""

from __future__ import annotations

from pydantic import Field, model_validator

from carbon_depict.models.enums import TargetStatus, TargetType, TopicCategory
from carbon_depict.schemas.base import TenantRecord


class ESGTarget(TenantRecord):
    name: str
    target_type: TargetType
    category: TopicCategory
    topic: str
    unit: str

    baseline_year: int
    baseline_value: float
    target_year: int
    target_value: float

    # Latest measurement; progress is only derived once it is reported
    current_value: float | None = None
    current_year: int | None = None

    # Derived (progress is entered by hand for qualitative targets)
    progress: float = Field(default=0.0, ge=0, le=100)
    status: TargetStatus = TargetStatus.ON_TRACK
    reduction_percentage: float | None = None

    @model_validator(mode="after")
    def _target_not_before_baseline(self) -> "ESGTarget":
        if self.target_year < self.baseline_year:
            raise ValueError("target_year must not be earlier than baseline_year")
        return self
