"""CSRD disclosure record: pydantic schemas."""

from __future__ import annotations

from pydantic import Field

from carbon_depict.models.enums import DisclosureStatus
from carbon_depict.schemas.base import RecordModel, TenantRecord


class DisclosureItem(RecordModel):
    disclosure_id: str
    content: str = ""
    completed: bool = False
    notes: str | None = None


# ── ESRS sections ────────────────────────────────────────────────────────────


class GeneralDisclosures(RecordModel):
    """ESRS 2."""

    strategy: list[DisclosureItem] = Field(default_factory=list)
    governance: list[DisclosureItem] = Field(default_factory=list)


class EnvironmentalDisclosures(RecordModel):
    """E1 to E5."""

    climate_change: list[DisclosureItem] = Field(default_factory=list)
    pollution: list[DisclosureItem] = Field(default_factory=list)
    water: list[DisclosureItem] = Field(default_factory=list)
    biodiversity: list[DisclosureItem] = Field(default_factory=list)
    circular_economy: list[DisclosureItem] = Field(default_factory=list)


class SocialDisclosures(RecordModel):
    """S1 to S4."""

    own_workforce: list[DisclosureItem] = Field(default_factory=list)
    value_chain_workers: list[DisclosureItem] = Field(default_factory=list)
    communities: list[DisclosureItem] = Field(default_factory=list)
    consumers: list[DisclosureItem] = Field(default_factory=list)


class GovernanceDisclosures(RecordModel):
    """G1."""

    business_conduct: list[DisclosureItem] = Field(default_factory=list)


# ── Derived ──────────────────────────────────────────────────────────────────


class CompletionStatus(RecordModel):
    overall: int = Field(default=0, ge=0, le=100)
    by_module: dict[str, int] = Field(default_factory=dict)
    total_disclosures: int = 0
    completed_disclosures: int = 0


# ── Record ───────────────────────────────────────────────────────────────────


class CSRDDisclosure(TenantRecord):
    reporting_period: str = Field(pattern=r"^\d{4}$")  # "2024"

    general_disclosures: GeneralDisclosures | None = Field(default_factory=GeneralDisclosures)
    environmental: EnvironmentalDisclosures | None = Field(default_factory=EnvironmentalDisclosures)
    social: SocialDisclosures | None = Field(default_factory=SocialDisclosures)
    governance: GovernanceDisclosures | None = Field(default_factory=GovernanceDisclosures)

    completion_status: CompletionStatus = Field(default_factory=CompletionStatus)
    status: DisclosureStatus = DisclosureStatus.DRAFT
