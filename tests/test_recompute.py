"""Tests for the recompute registry, dispatcher and write helper."""

from __future__ import annotations

import pytest
from pydantic import BaseModel
from structlog.testing import capture_logs

from carbon_depict import recompute as registry
from carbon_depict.core.errors import ConfigurationError, InvalidRecordError
from carbon_depict.modules.disclosure.schemas import CSRDDisclosure
from carbon_depict.modules.pcaf.schemas import PCAFAssessment
from carbon_depict.modules.risk.schemas import RiskRegisterEntry
from carbon_depict.modules.targets.schemas import ESGTarget


class Unregistered(BaseModel):
    name: str = "orphan"


class TestRegistry:
    def test_every_record_type_registered(self):
        assert {calc.name for calc in registry.CALCULATIONS.values()} == {
            "completion_rollup",
            "materiality_classifier",
            "risk_scoring",
            "pcaf_attribution",
            "target_progress",
            "sbti_coverage",
        }

    def test_declared_fields_exist_on_records(self):
        for calc in registry.CALCULATIONS.values():
            fields = set(calc.record_type.model_fields)
            assert calc.source_fields <= fields, calc.name
            assert calc.derived_fields <= fields, calc.name
            assert not calc.source_fields & calc.derived_fields, calc.name

    def test_calculation_for_instance_and_type(self, risk_entry):
        assert registry.calculation_for(risk_entry).name == "risk_scoring"
        assert registry.calculation_for(PCAFAssessment).name == "pcaf_attribution"

    def test_subclass_uses_parent_calculation(self):
        class AuditedDisclosure(CSRDDisclosure):
            auditor: str | None = None

        assert registry.calculation_for(AuditedDisclosure).name == "completion_rollup"

    def test_unregistered_type(self):
        with pytest.raises(ConfigurationError, match="Unregistered"):
            registry.calculation_for(Unregistered())

    def test_needs_recompute(self):
        assert registry.needs_recompute(RiskRegisterEntry, ["controls"]) is True
        assert registry.needs_recompute(RiskRegisterEntry, ["description", "status"]) is False
        assert registry.needs_recompute(ESGTarget, {"current_value"}) is True
        assert registry.needs_recompute(CSRDDisclosure, []) is False


class TestDispatch:
    def test_recompute_dispatches(self, risk_entry, portfolio):
        assert registry.recompute(risk_entry).inherent_risk_score == 16
        assert registry.recompute(portfolio).totals.asset_count == 3

    def test_options_forwarded(self, make_target):
        target = make_target(current_value=75.0)
        assert registry.recompute(target, as_of_year=2028).status == "off_track"

    def test_failure_logged_and_reraised(self, risk_entry):
        risk_entry.likelihood = "sometimes"
        with capture_logs() as logs, pytest.raises(ConfigurationError):
            registry.recompute(risk_entry)

        event = next(e for e in logs if e["event"] == "recompute_failed")
        assert event["log_level"] == "error"
        assert event["calculation"] == "risk_scoring"
        assert event["record_id"] == str(risk_entry.id)

    def test_failure_context_filled_in(self, portfolio):
        portfolio.assets[0].company_value = -1
        with pytest.raises(InvalidRecordError) as exc_info:
            registry.recompute(portfolio)
        assert exc_info.value.record_type == "PCAFAssessment"
        assert exc_info.value.record_id == portfolio.id


class TestApplyUpdate:
    def test_source_change_triggers_recompute(self, risk_entry):
        registry.recompute(risk_entry)
        updated = registry.apply_update(risk_entry, {"likelihood": "almost_certain"})

        assert updated is not risk_entry
        assert updated.inherent_risk_score == 20
        assert risk_entry.inherent_risk_score == 16
        assert risk_entry.likelihood == "likely"

    def test_derived_fields_dropped(self, risk_entry):
        registry.recompute(risk_entry)
        with capture_logs() as logs:
            updated = registry.apply_update(risk_entry, {"inherent_risk_score": 1})

        assert updated.inherent_risk_score == 16
        event = next(e for e in logs if e["event"] == "derived_fields_ignored")
        assert event["fields"] == ["inherent_risk_score"]
        assert event["log_level"] == "warning"

    def test_derived_overwritten_when_sent_with_source(self, risk_entry):
        updated = registry.apply_update(
            risk_entry, {"impact": "minor", "inherent_risk_score": 25, "residual_risk_score": 25}
        )
        assert updated.inherent_risk_score == 8
        assert updated.residual_risk_score == 3

    def test_non_source_change_skips_recompute(self, risk_entry):
        with capture_logs() as logs:
            updated = registry.apply_update(risk_entry, {"description": "Storm surge"})

        assert updated.description == "Storm surge"
        assert updated.inherent_risk_score is None
        assert not any(e["event"] == "risk_scores_recomputed" for e in logs)

    def test_nested_update_validated(self, portfolio):
        assets = [a.model_dump() for a in portfolio.assets[:1]]
        updated = registry.apply_update(portfolio, {"assets": assets})
        assert updated.totals.asset_count == 1
        assert updated.totals.total_financed_emissions == pytest.approx(50)

    def test_options_forwarded(self, portfolio, make_asset):
        oversized = make_asset(asset_id="A-9", outstanding_amount=5000.0)
        with pytest.raises(InvalidRecordError):
            registry.apply_update(
                portfolio, {"assets": [*portfolio.assets, oversized]}, policy="reject"
            )

    def test_unknown_field_rejected(self, risk_entry):
        registry.recompute(risk_entry)
        with pytest.raises(InvalidRecordError, match="likelyhood") as exc_info:
            registry.apply_update(risk_entry, {"likelyhood": "rare"})

        assert exc_info.value.detail == {"fields": ["likelyhood"]}
        assert exc_info.value.record_id == risk_entry.id
        assert risk_entry.likelihood == "likely"
        assert risk_entry.inherent_risk_score == 16
