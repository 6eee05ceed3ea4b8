"""SBTi criteria checks. Violations are collected, never raised."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from carbon_depict.modules.sbti.schemas import RuleViolation


@dataclass(frozen=True)
class SBTiCriteria:
    """Corporate Net-Zero Standard thresholds checked before submission."""

    near_term_min_years: int = 5
    near_term_max_years: int = 10
    scope3_materiality_threshold: float = 40.0  # % of total emissions
    scope3_min_coverage: float = 67.0  # % of scope 3 emissions
    net_zero_latest_year: int = 2050


SBTI_CRITERIA = SBTiCriteria()


def scope3_coverage(categories: Iterable[tuple[float | None, bool]]) -> float:
    """Sum of percentages over included categories; a missing percentage counts as 0."""
    return sum((percentage or 0.0) for percentage, included in categories if included)


def check_near_term_timeframe(
    base_year: int, target_year: int, criteria: SBTiCriteria = SBTI_CRITERIA
) -> RuleViolation | None:
    years = target_year - base_year
    if criteria.near_term_min_years <= years <= criteria.near_term_max_years:
        return None
    return RuleViolation(
        code="near_term_timeframe",
        message=(
            f"Near-term target must be {criteria.near_term_min_years}-"
            f"{criteria.near_term_max_years} years from base year"
        ),
    )


def check_scope3_required(
    total_scope3: float | None, scope3_included: bool, criteria: SBTiCriteria = SBTI_CRITERIA
) -> RuleViolation | None:
    if total_scope3 is None or scope3_included:
        return None
    if total_scope3 > criteria.scope3_materiality_threshold:
        return RuleViolation(
            code="scope3_required",
            message=(
                "Scope 3 must be included if it represents "
                f">{criteria.scope3_materiality_threshold:g}% of total emissions"
            ),
        )
    return None


def check_scope3_coverage(
    scope3_included: bool, coverage: float, criteria: SBTiCriteria = SBTI_CRITERIA
) -> RuleViolation | None:
    if scope3_included and coverage < criteria.scope3_min_coverage:
        return RuleViolation(
            code="scope3_coverage",
            message=(
                "Scope 3 target must cover at least "
                f"{criteria.scope3_min_coverage:g}% of scope 3 emissions"
            ),
        )
    return None


def check_net_zero_year(
    net_zero_year: int | None, criteria: SBTiCriteria = SBTI_CRITERIA
) -> RuleViolation | None:
    if net_zero_year is not None and net_zero_year > criteria.net_zero_latest_year:
        return RuleViolation(
            code="net_zero_year",
            message=f"Net-zero target must be {criteria.net_zero_latest_year} or earlier",
        )
    return None
