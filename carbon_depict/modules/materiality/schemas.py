"""Double materiality assessment: pydantic schemas."""

from __future__ import annotations

import uuid

from pydantic import Field

from carbon_depict.models.enums import (
    AssessmentStatus,
    MaterialityMethodology,
    StakeholderConcern,
    TopicCategory,
)
from carbon_depict.schemas.base import RecordModel, TenantRecord


class MaterialTopic(RecordModel):
    id: uuid.UUID = Field(default_factory=uuid.uuid4)
    name: str
    category: TopicCategory
    subcategory: str | None = None

    # Double materiality scoring
    impact_score: float = Field(ge=1, le=10)     # impact on people / environment
    financial_score: float = Field(ge=1, le=10)  # impact on enterprise value

    stakeholder_concern: StakeholderConcern = StakeholderConcern.MEDIUM
    is_material: bool = False
    frameworks: list[str] = Field(default_factory=list)  # "GRI", "ESRS", "TCFD", ...


class MaterialityMatrix(RecordModel):
    high_priority: list[uuid.UUID] = Field(default_factory=list)
    medium_priority: list[uuid.UUID] = Field(default_factory=list)
    low_priority: list[uuid.UUID] = Field(default_factory=list)


class MaterialityAssessment(TenantRecord):
    assessment_year: str = Field(pattern=r"^\d{4}$")
    methodology: MaterialityMethodology = MaterialityMethodology.DOUBLE

    material_topics: list[MaterialTopic] = Field(default_factory=list)
    materiality_matrix: MaterialityMatrix = Field(default_factory=MaterialityMatrix)

    status: AssessmentStatus = AssessmentStatus.DRAFT

    @property
    def material_topics_count(self) -> int:
        return sum(1 for topic in self.material_topics if topic.is_material)

    @property
    def total_topics_count(self) -> int:
        return len(self.material_topics)
