"""SBTi target commitment: pydantic schemas."""

from __future__ import annotations

from pydantic import BaseModel, Field

from carbon_depict.models.enums import SubmissionStatus, TemperatureAlignment
from carbon_depict.schemas.base import RecordModel, TenantRecord


class ScopeTarget(RecordModel):
    reduction: float | None = Field(default=None, ge=0, le=100)
    base_year: int | None = None
    baseline_emissions: float | None = None
    target_year: int | None = None
    target_emissions: float | None = None


class Scope3Target(RecordModel):
    included: bool = False
    reduction: float | None = Field(default=None, ge=0, le=100)
    categories: list[str] = Field(default_factory=list)
    # Derived from scope3_screening
    coverage_percentage: float | None = None


class NearTermTarget(RecordModel):
    """5-10 years from the base year."""

    scope1: ScopeTarget | None = None
    scope2: ScopeTarget | None = None
    scope3: Scope3Target = Field(default_factory=Scope3Target)
    base_year: int
    target_year: int
    temperature_alignment: TemperatureAlignment = TemperatureAlignment.ONE_POINT_FIVE


class LongTermTarget(RecordModel):
    # No range constraint: a year past 2050 must reach the validator
    net_zero_year: int | None = None
    scope1_reduction: float | None = None
    scope2_reduction: float | None = None
    scope3_reduction: float | None = None
    residual_emissions: float | None = None
    neutralization_plan: str | None = None


class Scope3Category(RecordModel):
    category: str
    category_number: int | None = Field(default=None, ge=1, le=15)
    emissions: float | None = None
    percentage: float | None = None  # share of total scope 3
    included: bool = False
    exclusion_reason: str | None = None


class Scope3Screening(RecordModel):
    completed: bool = False
    total_scope3: float | None = None  # scope 3 as % of total emissions
    categories_assessed: list[Scope3Category] = Field(default_factory=list)


class SBTiTarget(TenantRecord):
    submission_status: SubmissionStatus = SubmissionStatus.DRAFT
    sector: str
    near_term: NearTermTarget | None = None
    long_term: LongTermTarget | None = None
    scope3_screening: Scope3Screening | None = None
    validation_comments: list[str] = Field(default_factory=list)


# ── Validation result ────────────────────────────────────────────────────────


class RuleViolation(BaseModel):
    code: str
    message: str


class ValidationResult(BaseModel):
    valid: bool
    errors: list[str] = Field(default_factory=list)
    violations: list[RuleViolation] = Field(default_factory=list)
