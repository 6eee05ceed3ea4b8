"""PCAF financed-emissions assessment: pydantic schemas."""

from __future__ import annotations

from pydantic import BaseModel, Field

from carbon_depict.models.enums import (
    AssessmentWorkflowStatus,
    AssetClass,
    CompanyValueType,
    PortfolioType,
)
from carbon_depict.schemas.base import RecordModel, TenantRecord


class Asset(RecordModel):
    asset_id: str | None = None
    asset_class: AssetClass

    # Borrower / investee
    client_name: str | None = None
    sector: str | None = None
    geography: str | None = None

    # Attribution inputs
    outstanding_amount: float = Field(ge=0, allow_inf_nan=False)
    currency: str = "USD"
    company_value: float = Field(gt=0, allow_inf_nan=False)
    company_value_type: CompanyValueType = CompanyValueType.EVIC
    borrower_emissions: float = Field(ge=0, allow_inf_nan=False)  # tCO2e

    # 1 = audited reported emissions ... 5 = sector-average estimate
    data_quality_score: int = Field(ge=1, le=5)

    # Derived
    attribution_factor: float | None = None
    attributed_emissions: float | None = None
    attribution_clamped: bool = False


class PortfolioTotals(RecordModel):
    total_financed_emissions: float = 0.0
    total_attributed_emissions: float = 0.0
    # Unweighted mean of asset data-quality scores (PCAF reporting label kept)
    weighted_average_data_quality: float = 0.0
    asset_count: int = 0


class BreakdownEntry(RecordModel):
    emissions: float = 0.0
    asset_count: int = 0
    exposure: float = 0.0


class AssetClassBreakdownEntry(BreakdownEntry):
    avg_data_quality: float = 0.0


class DataQualityDistribution(RecordModel):
    score1: int = 0
    score2: int = 0
    score3: int = 0
    score4: int = 0
    score5: int = 0


class PCAFAssessment(TenantRecord):
    reporting_period: str = Field(pattern=r"^\d{4}$")
    portfolio_type: PortfolioType
    portfolio_name: str | None = None
    total_exposure: float = 0.0
    currency: str = "USD"

    assets: list[Asset] = Field(default_factory=list)

    # Derived (never edited directly)
    totals: PortfolioTotals = Field(default_factory=PortfolioTotals)
    breakdown_by_asset_class: dict[str, AssetClassBreakdownEntry] = Field(default_factory=dict)
    breakdown_by_sector: dict[str, BreakdownEntry] = Field(default_factory=dict)
    breakdown_by_geography: dict[str, BreakdownEntry] = Field(default_factory=dict)
    data_quality_distribution: DataQualityDistribution = Field(
        default_factory=DataQualityDistribution
    )

    status: AssessmentWorkflowStatus = AssessmentWorkflowStatus.DRAFT


class EmissionsTrendPoint(BaseModel):
    reporting_period: str
    total_emissions: float
    avg_data_quality: float
    assessment_count: int
