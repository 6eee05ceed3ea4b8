"""Recompute-on-write registry.

The persistence layer loads a record, applies a partial update and calls
``recompute`` (or ``apply_update``) before committing. Each record type maps
to exactly one calculation with the source fields that trigger it and the
derived fields it owns.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass
from typing import Any, TypeVar

import structlog
from pydantic import BaseModel

from carbon_depict.core.errors import CalculationError, ConfigurationError, InvalidRecordError
from carbon_depict.modules.disclosure import service as disclosure_service
from carbon_depict.modules.disclosure.schemas import CSRDDisclosure
from carbon_depict.modules.materiality import service as materiality_service
from carbon_depict.modules.materiality.schemas import MaterialityAssessment
from carbon_depict.modules.pcaf import service as pcaf_service
from carbon_depict.modules.pcaf.schemas import PCAFAssessment
from carbon_depict.modules.risk import service as risk_service
from carbon_depict.modules.risk.schemas import RiskRegisterEntry
from carbon_depict.modules.sbti import service as sbti_service
from carbon_depict.modules.sbti.schemas import SBTiTarget
from carbon_depict.modules.targets import service as targets_service
from carbon_depict.modules.targets.schemas import ESGTarget

logger = structlog.get_logger()

RecordT = TypeVar("RecordT", bound=BaseModel)


@dataclass(frozen=True)
class Calculation:
    name: str
    record_type: type[BaseModel]
    source_fields: frozenset[str]
    derived_fields: frozenset[str]
    recompute: Callable[..., Any]


CALCULATIONS: dict[type[BaseModel], Calculation] = {
    calc.record_type: calc
    for calc in (
        Calculation(
            name="completion_rollup",
            record_type=CSRDDisclosure,
            source_fields=frozenset({"general_disclosures", "environmental", "social", "governance"}),
            derived_fields=frozenset({"completion_status"}),
            recompute=disclosure_service.recompute,
        ),
        Calculation(
            name="materiality_classifier",
            record_type=MaterialityAssessment,
            source_fields=frozenset({"material_topics"}),
            derived_fields=frozenset({"materiality_matrix"}),
            recompute=materiality_service.recompute,
        ),
        Calculation(
            name="risk_scoring",
            record_type=RiskRegisterEntry,
            source_fields=frozenset({"likelihood", "impact", "controls", "residual_risk_override"}),
            derived_fields=frozenset({
                "likelihood_score",
                "impact_score",
                "inherent_risk_score",
                "residual_risk_score",
            }),
            recompute=risk_service.recompute,
        ),
        Calculation(
            name="pcaf_attribution",
            record_type=PCAFAssessment,
            source_fields=frozenset({"assets"}),
            derived_fields=frozenset({
                "totals",
                "breakdown_by_asset_class",
                "breakdown_by_sector",
                "breakdown_by_geography",
                "data_quality_distribution",
            }),
            recompute=pcaf_service.recompute,
        ),
        Calculation(
            name="target_progress",
            record_type=ESGTarget,
            source_fields=frozenset({
                "baseline_year",
                "baseline_value",
                "target_year",
                "target_value",
                "current_value",
                "current_year",
                "target_type",
            }),
            # progress stays editable: it is the manual value for qualitative targets
            derived_fields=frozenset({"reduction_percentage"}),
            recompute=targets_service.recompute,
        ),
        Calculation(
            name="sbti_coverage",
            record_type=SBTiTarget,
            source_fields=frozenset({"scope3_screening", "near_term", "long_term"}),
            derived_fields=frozenset(),
            recompute=sbti_service.recompute,
        ),
    )
}


def calculation_for(record_or_type: BaseModel | type[BaseModel]) -> Calculation:
    record_type = record_or_type if isinstance(record_or_type, type) else type(record_or_type)
    for cls in record_type.__mro__:
        if cls in CALCULATIONS:
            return CALCULATIONS[cls]
    raise ConfigurationError(
        f"No calculation registered for {record_type.__name__}",
        record_type=record_type.__name__,
    )


def needs_recompute(record_type: type[BaseModel], changed_fields: Iterable[str]) -> bool:
    """Whether a write touching changed_fields must refresh derived fields."""
    return not calculation_for(record_type).source_fields.isdisjoint(changed_fields)


def recompute(record: RecordT, **options: Any) -> RecordT:
    """Run the record's calculation in place and return the record.

    ``options`` are forwarded to the calculation (``policy`` for PCAF,
    ``as_of_year`` for targets, lookup tables for the others).
    """
    calculation = calculation_for(record)
    try:
        return calculation.recompute(record, **options)
    except CalculationError as exc:
        if exc.record_type is None:
            exc.record_type = calculation.record_type.__name__
        if exc.record_id is None:
            exc.record_id = getattr(record, "id", None)
        logger.error(
            "recompute_failed",
            calculation=calculation.name,
            record_type=exc.record_type,
            record_id=str(exc.record_id),
            error=exc.message,
        )
        raise


def apply_update(record: RecordT, changes: Mapping[str, Any], **options: Any) -> RecordT:
    """Validate a partial update into a new record and recompute it if needed.

    Derived fields in ``changes`` are dropped: they are always overwritten
    from source fields and can never be the sole authority for a write.
    The original record is not modified. Keys that are not fields of the
    record raise InvalidRecordError.
    """
    calculation = calculation_for(record)
    unknown = sorted(set(changes).difference(type(record).model_fields))
    if unknown:
        raise InvalidRecordError(
            f"Unknown fields for {type(record).__name__}: {', '.join(unknown)}",
            record_type=type(record).__name__,
            record_id=getattr(record, "id", None),
            detail={"fields": unknown},
        )

    ignored = sorted(calculation.derived_fields.intersection(changes))
    if ignored:
        logger.warning(
            "derived_fields_ignored",
            record_type=calculation.record_type.__name__,
            record_id=str(getattr(record, "id", None)),
            fields=ignored,
        )

    source_changes = {
        key: value for key, value in changes.items() if key not in calculation.derived_fields
    }
    data = record.model_dump()
    data.update(source_changes)
    updated = type(record).model_validate(data)

    if needs_recompute(type(record), source_changes):
        recompute(updated, **options)
    return updated
