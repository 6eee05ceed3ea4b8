"""ESG target progress service."""

from __future__ import annotations

from datetime import date

import structlog

from carbon_depict.core.config import settings
from carbon_depict.models.enums import TargetType
from carbon_depict.modules.targets.engine import (
    DEFAULT_STATUS_BANDS,
    MANUAL_STATUSES,
    StatusBands,
    calculate_progress,
    classify_status,
    expected_progress,
    reduction_percentage,
)
from carbon_depict.modules.targets.schemas import ESGTarget

logger = structlog.get_logger()


def reference_year(record: ESGTarget, as_of_year: int | None = None) -> int:
    """Year the trajectory is judged at: argument, record, settings, then today."""
    if as_of_year is not None:
        return as_of_year
    if record.current_year is not None:
        return record.current_year
    if settings.TARGET_REFERENCE_YEAR is not None:
        return settings.TARGET_REFERENCE_YEAR
    return date.today().year


def recompute(
    record: ESGTarget,
    *,
    as_of_year: int | None = None,
    bands: StatusBands = DEFAULT_STATUS_BANDS,
) -> ESGTarget:
    """Refresh reduction_percentage, progress and status.

    Qualitative targets and targets without a current measurement keep their
    manually entered progress. A baseline equal to the target leaves progress
    and status untouched.
    """
    record.reduction_percentage = reduction_percentage(record.baseline_value, record.target_value)

    if record.target_type == TargetType.QUALITATIVE.value or record.current_value is None:
        logger.debug(
            "target_progress_not_computable",
            record_id=str(record.id),
            target_type=record.target_type,
            has_current_value=record.current_value is not None,
        )
        return record

    progress = calculate_progress(record.baseline_value, record.target_value, record.current_value)
    if progress is None:
        logger.warning(
            "target_progress_degenerate",
            record_id=str(record.id),
            reason="baseline_value equals target_value",
            baseline_value=record.baseline_value,
        )
        return record

    record.progress = progress

    year = reference_year(record, as_of_year)
    expected = expected_progress(record.baseline_year, record.target_year, year)
    if getattr(record.status, "value", record.status) not in MANUAL_STATUSES:
        record.status = classify_status(progress, expected, bands).value

    logger.info(
        "target_progress_recomputed",
        record_id=str(record.id),
        progress=round(progress, 2),
        expected=round(expected, 2),
        status=record.status,
        as_of_year=year,
    )
    return record


def years_remaining(record: ESGTarget, as_of_year: int | None = None) -> int:
    return record.target_year - reference_year(record, as_of_year)
