"""Risk register: pydantic schemas."""

from __future__ import annotations

import uuid

from pydantic import BaseModel, Field

from carbon_depict.models.enums import (
    ControlEffectiveness,
    ControlType,
    Impact,
    ImplementationStatus,
    Likelihood,
    RiskCategory,
    RiskStatus,
    RiskType,
    TimeHorizon,
)
from carbon_depict.schemas.base import RecordModel, TenantRecord


class Control(RecordModel):
    id: uuid.UUID = Field(default_factory=uuid.uuid4)
    control_name: str
    control_type: ControlType
    effectiveness: ControlEffectiveness = ControlEffectiveness.PARTIALLY_EFFECTIVE
    implementation_status: ImplementationStatus = ImplementationStatus.PLANNED


class RiskRegisterEntry(TenantRecord):
    risk_id: str
    risk_name: str
    risk_type: RiskType
    category: RiskCategory
    description: str = ""

    # Assessment inputs
    likelihood: Likelihood
    impact: Impact
    controls: list[Control] = Field(default_factory=list)
    # Assessor-supplied residual score; wins over the control-based estimate,
    # capped at the inherent score
    residual_risk_override: int | None = Field(default=None, ge=1, le=25)

    # Derived
    likelihood_score: int | None = Field(default=None, ge=1, le=5)
    impact_score: int | None = Field(default=None, ge=1, le=5)
    inherent_risk_score: int | None = Field(default=None, ge=1, le=25)
    residual_risk_score: int | None = Field(default=None, ge=1, le=25)

    time_horizon: TimeHorizon = TimeHorizon.MEDIUM
    status: RiskStatus = RiskStatus.IDENTIFIED


# ── Risk matrix ──────────────────────────────────────────────────────────────


class RiskMatrixRow(BaseModel):
    id: uuid.UUID
    risk_name: str
    risk_type: str
    category: str
    likelihood_score: int | None
    impact_score: int | None
    inherent_risk_score: int | None
    residual_risk_score: int | None


class RiskMatrix(BaseModel):
    rows: list[RiskMatrixRow]
    # heatmap[likelihood_score - 1][impact_score - 1] = number of open risks
    heatmap: list[list[int]]
