"""Shared fixtures: record builders for every calculation."""

from __future__ import annotations

import uuid

import pytest

from carbon_depict.modules.disclosure.schemas import (
    CSRDDisclosure,
    DisclosureItem,
    EnvironmentalDisclosures,
    GeneralDisclosures,
)
from carbon_depict.modules.materiality.schemas import MaterialityAssessment, MaterialTopic
from carbon_depict.modules.pcaf.schemas import Asset, PCAFAssessment
from carbon_depict.modules.risk.schemas import Control, RiskRegisterEntry
from carbon_depict.modules.sbti.schemas import (
    LongTermTarget,
    NearTermTarget,
    SBTiTarget,
    Scope3Category,
    Scope3Screening,
    Scope3Target,
)
from carbon_depict.modules.targets.schemas import ESGTarget

# ── Test Data ────────────────────────────────────────────────────────────────

ORG_ID = uuid.UUID("00000000-0000-0000-0000-000000000001")


def item(disclosure_id: str, completed: bool) -> DisclosureItem:
    return DisclosureItem(disclosure_id=disclosure_id, content="...", completed=completed)


# ── Fixtures ─────────────────────────────────────────────────────────────────


@pytest.fixture
def disclosure() -> CSRDDisclosure:
    """E1 fully done, E2 not started, ESRS 2 strategy half done."""
    return CSRDDisclosure(
        org_id=ORG_ID,
        reporting_period="2024",
        general_disclosures=GeneralDisclosures(
            strategy=[item("SBM-1", True), item("SBM-2", False)],
        ),
        environmental=EnvironmentalDisclosures(
            climate_change=[item("E1-1", True), item("E1-6", True)],
            pollution=[item("E2-4", False)],
        ),
    )


@pytest.fixture
def assessment() -> MaterialityAssessment:
    return MaterialityAssessment(
        org_id=ORG_ID,
        assessment_year="2024",
        material_topics=[
            MaterialTopic(
                name="Climate change mitigation",
                category="environmental",
                impact_score=8,
                financial_score=3,
                is_material=True,
            ),
            MaterialTopic(
                name="Water withdrawal",
                category="environmental",
                impact_score=5,
                financial_score=4,
                is_material=True,
            ),
            MaterialTopic(
                name="Community engagement",
                category="social",
                impact_score=2,
                financial_score=3,
                is_material=True,
            ),
            MaterialTopic(
                name="Board diversity",
                category="governance",
                impact_score=9,
                financial_score=9,
                is_material=False,
            ),
        ],
    )


@pytest.fixture
def risk_entry() -> RiskRegisterEntry:
    return RiskRegisterEntry(
        org_id=ORG_ID,
        risk_id="CR-001",
        risk_name="Coastal flooding at Rotterdam plant",
        risk_type="physical",
        category="climate",
        likelihood="likely",
        impact="major",
        controls=[
            Control(control_name="Flood barriers", control_type="preventive", effectiveness="effective"),
        ],
    )


@pytest.fixture
def make_asset():
    def _make(**overrides) -> Asset:
        fields = {
            "asset_id": "A-1",
            "asset_class": "listed_equity",
            "sector": "Energy",
            "geography": "DE",
            "outstanding_amount": 100.0,
            "company_value": 1000.0,
            "borrower_emissions": 500.0,
            "data_quality_score": 2,
        }
        fields.update(overrides)
        return Asset(**fields)

    return _make


@pytest.fixture
def portfolio(make_asset) -> PCAFAssessment:
    """Three assets: attributed emissions 50, 200 and 30."""
    return PCAFAssessment(
        org_id=ORG_ID,
        reporting_period="2024",
        portfolio_type="loans",
        portfolio_name="Corporate book",
        assets=[
            make_asset(),
            make_asset(
                asset_id="A-2",
                sector="Utilities",
                outstanding_amount=200.0,
                borrower_emissions=1000.0,
                data_quality_score=4,
            ),
            make_asset(
                asset_id="A-3",
                asset_class="business_loans",
                geography=None,
                outstanding_amount=50.0,
                company_value=500.0,
                borrower_emissions=300.0,
                data_quality_score=3,
            ),
        ],
    )


@pytest.fixture
def make_target():
    def _make(**overrides) -> ESGTarget:
        fields = {
            "org_id": ORG_ID,
            "name": "Halve scope 1 emissions",
            "target_type": "absolute",
            "category": "environmental",
            "topic": "GHG emissions",
            "unit": "tCO2e",
            "baseline_year": 2020,
            "baseline_value": 100.0,
            "target_year": 2030,
            "target_value": 50.0,
            "current_year": 2025,
        }
        fields.update(overrides)
        return ESGTarget(**fields)

    return _make


@pytest.fixture
def sbti_target() -> SBTiTarget:
    """Passes every criterion: 8-year near term, 70% scope 3 coverage, net zero 2050."""
    return SBTiTarget(
        org_id=ORG_ID,
        sector="Manufacturing",
        near_term=NearTermTarget(
            base_year=2020,
            target_year=2028,
            scope3=Scope3Target(included=True, reduction=25),
        ),
        long_term=LongTermTarget(net_zero_year=2050),
        scope3_screening=Scope3Screening(
            completed=True,
            total_scope3=65.0,
            categories_assessed=[
                Scope3Category(category="Purchased goods", category_number=1, percentage=40.0, included=True),
                Scope3Category(category="Use of sold products", category_number=11, percentage=30.0, included=True),
                Scope3Category(
                    category="Business travel",
                    category_number=6,
                    percentage=20.0,
                    included=False,
                    exclusion_reason="No supplier data yet",
                ),
            ],
        ),
    )
