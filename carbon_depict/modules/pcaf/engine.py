"""PCAF attribution and portfolio aggregation. Pure arithmetic, no I/O.

Aggregation always runs over the whole asset list (O(n) per write), so
removing an asset is reflected exactly. Switching to incremental updates
would need per-asset deltas on removal as well as insertion.
"""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass

from carbon_depict.core.errors import ConfigurationError, InvalidRecordError
from carbon_depict.models.enums import AttributionPolicy
from carbon_depict.modules.pcaf.schemas import (
    Asset,
    AssetClassBreakdownEntry,
    BreakdownEntry,
    DataQualityDistribution,
    PortfolioTotals,
)

DATA_QUALITY_SCORES: tuple[int, ...] = (1, 2, 3, 4, 5)


@dataclass(frozen=True)
class Attribution:
    factor: float
    emissions: float
    clamped: bool = False


@dataclass(frozen=True)
class PortfolioAggregates:
    totals: PortfolioTotals
    by_asset_class: dict[str, AssetClassBreakdownEntry]
    by_sector: dict[str, BreakdownEntry]
    by_geography: dict[str, BreakdownEntry]
    data_quality_distribution: DataQualityDistribution


def attribute(
    outstanding_amount: float,
    company_value: float,
    borrower_emissions: float,
    policy: AttributionPolicy | str = AttributionPolicy.CLAMP,
) -> Attribution:
    """Attribution factor (outstanding / company value) and attributed emissions.

    A non-positive or non-finite company value is always rejected, as are
    non-finite amounts and negative or non-finite emissions. A factor
    outside [0, 1] is clamped and flagged under CLAMP, rejected under REJECT.
    """
    if not math.isfinite(company_value) or company_value <= 0:
        raise InvalidRecordError(
            f"company_value must be a positive number, got {company_value!r}",
            detail={"company_value": company_value},
        )
    if not math.isfinite(outstanding_amount):
        raise InvalidRecordError(
            f"outstanding_amount must be a finite number, got {outstanding_amount!r}",
            detail={"outstanding_amount": outstanding_amount},
        )
    if not math.isfinite(borrower_emissions) or borrower_emissions < 0:
        raise InvalidRecordError(
            f"borrower_emissions must be a non-negative number, got {borrower_emissions!r}",
            detail={"borrower_emissions": borrower_emissions},
        )

    factor = outstanding_amount / company_value
    clamped = False
    if not 0.0 <= factor <= 1.0:
        if AttributionPolicy(policy) is AttributionPolicy.REJECT:
            raise InvalidRecordError(
                f"attribution factor {factor:.4f} is outside [0, 1]",
                detail={
                    "outstanding_amount": outstanding_amount,
                    "company_value": company_value,
                },
            )
        factor = min(1.0, max(0.0, factor))
        clamped = True

    return Attribution(factor=factor, emissions=borrower_emissions * factor, clamped=clamped)


def check_data_quality(score: int) -> int:
    if score not in DATA_QUALITY_SCORES:
        raise ConfigurationError(
            f"Unknown data quality score {score!r}; expected one of {list(DATA_QUALITY_SCORES)}",
            detail={"data_quality_score": score},
        )
    return score


def _add(entry: BreakdownEntry, emissions: float, exposure: float) -> None:
    entry.emissions += emissions
    entry.asset_count += 1
    entry.exposure += exposure


def aggregate(assets: Sequence[Asset]) -> PortfolioAggregates:
    """Totals, breakdowns and data-quality histogram over attributed assets.

    Assets without a sector or geography are left out of that breakdown only.
    An empty list yields all-zero aggregates.
    """
    total_emissions = 0.0
    total_quality = 0
    by_asset_class: dict[str, AssetClassBreakdownEntry] = {}
    by_sector: dict[str, BreakdownEntry] = {}
    by_geography: dict[str, BreakdownEntry] = {}
    class_quality: dict[str, int] = {}
    histogram = {score: 0 for score in DATA_QUALITY_SCORES}

    for asset in assets:
        quality = check_data_quality(asset.data_quality_score)
        emissions = asset.attributed_emissions or 0.0

        total_emissions += emissions
        total_quality += quality
        histogram[quality] += 1

        asset_class = getattr(asset.asset_class, "value", asset.asset_class)
        exposure = asset.outstanding_amount
        _add(by_asset_class.setdefault(asset_class, AssetClassBreakdownEntry()), emissions, exposure)
        class_quality[asset_class] = class_quality.get(asset_class, 0) + quality

        if asset.sector:
            _add(by_sector.setdefault(asset.sector, BreakdownEntry()), emissions, exposure)
        if asset.geography:
            _add(by_geography.setdefault(asset.geography, BreakdownEntry()), emissions, exposure)

    for asset_class, entry in by_asset_class.items():
        entry.avg_data_quality = class_quality[asset_class] / entry.asset_count

    count = len(assets)
    totals = PortfolioTotals(
        total_financed_emissions=total_emissions,
        total_attributed_emissions=total_emissions,
        weighted_average_data_quality=total_quality / count if count else 0.0,
        asset_count=count,
    )

    return PortfolioAggregates(
        totals=totals,
        by_asset_class=by_asset_class,
        by_sector=by_sector,
        by_geography=by_geography,
        data_quality_distribution=DataQualityDistribution(
            **{f"score{score}": n for score, n in histogram.items()}
        ),
    )
