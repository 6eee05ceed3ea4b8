"""SBTi target service: scope 3 coverage and criteria validation."""

from __future__ import annotations

from datetime import date

import structlog

from carbon_depict.modules.sbti.engine import (
    SBTI_CRITERIA,
    SBTiCriteria,
    check_near_term_timeframe,
    check_net_zero_year,
    check_scope3_coverage,
    check_scope3_required,
    scope3_coverage,
)
from carbon_depict.modules.sbti.schemas import RuleViolation, SBTiTarget, ValidationResult

logger = structlog.get_logger()


def refresh_scope3_coverage(record: SBTiTarget) -> float | None:
    """Store the screening-based coverage on the near-term scope 3 target.

    Returns None, leaving any stored value alone, when there is no screening.
    """
    screening = record.scope3_screening
    if screening is None:
        return None

    coverage = scope3_coverage(
        (category.percentage, category.included) for category in screening.categories_assessed
    )
    if record.near_term is not None:
        record.near_term.scope3.coverage_percentage = coverage
    return coverage


def recompute(record: SBTiTarget) -> SBTiTarget:
    coverage = refresh_scope3_coverage(record)
    logger.info(
        "sbti_coverage_recomputed",
        record_id=str(record.id),
        coverage_percentage=coverage,
    )
    return record


def validate(record: SBTiTarget, criteria: SBTiCriteria = SBTI_CRITERIA) -> ValidationResult:
    """Check the record against the SBTi criteria.

    Refreshes scope 3 coverage first. Only reports; submission_status and
    validation_comments are left for the caller to act on.
    """
    coverage = refresh_scope3_coverage(record) or 0.0
    checks: list[RuleViolation | None] = []

    near_term = record.near_term
    if near_term is not None:
        scope3_included = near_term.scope3.included
        total_scope3 = record.scope3_screening.total_scope3 if record.scope3_screening else None
        checks.append(check_near_term_timeframe(near_term.base_year, near_term.target_year, criteria))
        checks.append(check_scope3_required(total_scope3, scope3_included, criteria))
        checks.append(check_scope3_coverage(scope3_included, coverage, criteria))

    if record.long_term is not None:
        checks.append(check_net_zero_year(record.long_term.net_zero_year, criteria))

    violations = [violation for violation in checks if violation is not None]
    result = ValidationResult(
        valid=not violations,
        errors=[violation.message for violation in violations],
        violations=violations,
    )

    logger.info(
        "sbti_criteria_validated",
        record_id=str(record.id),
        valid=result.valid,
        violations=[violation.code for violation in violations],
    )
    return result


def years_to_net_zero(record: SBTiTarget, as_of_year: int | None = None) -> int | None:
    if record.long_term is None or record.long_term.net_zero_year is None:
        return None
    year = as_of_year if as_of_year is not None else date.today().year
    return record.long_term.net_zero_year - year
