"""PCAF financed-emissions service."""

from __future__ import annotations

from collections import defaultdict
from collections.abc import Iterable

import structlog

from carbon_depict.core.config import settings
from carbon_depict.core.errors import CalculationError, ConfigurationError
from carbon_depict.models.enums import AttributionPolicy
from carbon_depict.modules.pcaf.engine import (
    Attribution,
    aggregate,
    attribute,
    check_data_quality,
)
from carbon_depict.modules.pcaf.schemas import EmissionsTrendPoint, PCAFAssessment

logger = structlog.get_logger()


def _resolve_policy(policy: AttributionPolicy | str | None) -> AttributionPolicy:
    value = policy if policy is not None else settings.PCAF_ATTRIBUTION_POLICY
    try:
        return AttributionPolicy(value)
    except ValueError:
        raise ConfigurationError(
            f"Unknown attribution policy {value!r}",
            detail={"policy": value},
        ) from None


def recompute(
    record: PCAFAssessment,
    *,
    policy: AttributionPolicy | str | None = None,
) -> PCAFAssessment:
    """Attribute every asset, then re-aggregate the whole portfolio.

    All assets are checked and attributed before anything is written, so a
    rejected asset leaves the record exactly as it was.
    """
    resolved = _resolve_policy(policy)

    attributions: list[Attribution] = []
    for index, asset in enumerate(record.assets):
        try:
            check_data_quality(asset.data_quality_score)
            attributions.append(
                attribute(
                    asset.outstanding_amount,
                    asset.company_value,
                    asset.borrower_emissions,
                    resolved,
                )
            )
        except CalculationError as exc:
            exc.record_type = type(record).__name__
            exc.record_id = record.id
            exc.detail = {**(exc.detail or {}), "asset_index": index, "asset_id": asset.asset_id}
            raise

    for asset, attribution in zip(record.assets, attributions):
        asset.attribution_factor = attribution.factor
        asset.attributed_emissions = attribution.emissions
        asset.attribution_clamped = attribution.clamped
        if attribution.clamped:
            logger.warning(
                "pcaf_attribution_clamped",
                record_id=str(record.id),
                asset_id=asset.asset_id,
                outstanding_amount=asset.outstanding_amount,
                company_value=asset.company_value,
            )

    aggregates = aggregate(record.assets)
    record.totals = aggregates.totals
    record.breakdown_by_asset_class = aggregates.by_asset_class
    record.breakdown_by_sector = aggregates.by_sector
    record.breakdown_by_geography = aggregates.by_geography
    record.data_quality_distribution = aggregates.data_quality_distribution

    logger.info(
        "pcaf_aggregates_recomputed",
        record_id=str(record.id),
        reporting_period=record.reporting_period,
        asset_count=aggregates.totals.asset_count,
        total_financed_emissions=aggregates.totals.total_financed_emissions,
        policy=resolved.value,
    )
    return record


def emissions_trend(assessments: Iterable[PCAFAssessment]) -> list[EmissionsTrendPoint]:
    """Financed emissions per reporting period, oldest first.

    Periods with several assessments (e.g. one per portfolio) sum their
    emissions and average their data quality.
    """
    grouped: dict[str, list[PCAFAssessment]] = defaultdict(list)
    for assessment in assessments:
        grouped[assessment.reporting_period].append(assessment)

    points = []
    for period in sorted(grouped):
        group = grouped[period]
        points.append(
            EmissionsTrendPoint(
                reporting_period=period,
                total_emissions=sum(a.totals.total_financed_emissions for a in group),
                avg_data_quality=(
                    sum(a.totals.weighted_average_data_quality for a in group) / len(group)
                ),
                assessment_count=len(group),
            )
        )
    return points
