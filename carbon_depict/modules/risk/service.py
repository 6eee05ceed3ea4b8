"""Risk register scoring service."""

from __future__ import annotations

from collections.abc import Iterable

import structlog

from carbon_depict.core.errors import ConfigurationError
from carbon_depict.models.enums import RiskStatus
from carbon_depict.modules.risk.engine import (
    DEFAULT_RISK_SCALES,
    RiskScales,
    impact_rank,
    likelihood_rank,
    residual_risk_score,
)
from carbon_depict.modules.risk.schemas import RiskMatrix, RiskMatrixRow, RiskRegisterEntry

logger = structlog.get_logger()


def recompute(
    record: RiskRegisterEntry,
    *,
    scales: RiskScales = DEFAULT_RISK_SCALES,
) -> RiskRegisterEntry:
    """Refresh rank scores, inherent score and residual score.

    Raises ConfigurationError, leaving the record untouched, when any
    likelihood, impact or control level is not on the scales.
    """
    try:
        likelihood_score = likelihood_rank(record.likelihood, scales)
        impact_score = impact_rank(record.impact, scales)
        inherent = likelihood_score * impact_score
        computed_residual = residual_risk_score(
            inherent, [control.effectiveness for control in record.controls], scales
        )
    except ConfigurationError as exc:
        exc.record_type = type(record).__name__
        exc.record_id = record.id
        raise

    record.likelihood_score = likelihood_score
    record.impact_score = impact_score
    record.inherent_risk_score = inherent
    if record.residual_risk_override is not None:
        # Controls never make a risk worse than it is inherently
        record.residual_risk_score = min(record.residual_risk_override, inherent)
        if record.residual_risk_override > inherent:
            logger.warning(
                "risk_residual_override_capped",
                record_id=str(record.id),
                risk_id=record.risk_id,
                residual_risk_override=record.residual_risk_override,
                inherent_risk_score=inherent,
            )
    else:
        record.residual_risk_score = computed_residual

    logger.info(
        "risk_scores_recomputed",
        record_id=str(record.id),
        risk_id=record.risk_id,
        inherent_risk_score=inherent,
        residual_risk_score=record.residual_risk_score,
        controls=len(record.controls),
    )
    return record


def build_risk_matrix(
    entries: Iterable[RiskRegisterEntry],
    scales: RiskScales = DEFAULT_RISK_SCALES,
) -> RiskMatrix:
    """Score rows and a likelihood x impact heat map for all open risks.

    Closed risks are excluded. Entries are read as stored; recompute them first.
    Scores beyond scales.max_rank are listed but left off the heat map.
    """
    size = scales.max_rank
    heatmap = [[0] * size for _ in range(size)]
    rows: list[RiskMatrixRow] = []

    for entry in entries:
        if entry.status == RiskStatus.CLOSED.value:
            continue
        rows.append(
            RiskMatrixRow(
                id=entry.id,
                risk_name=entry.risk_name,
                risk_type=entry.risk_type,
                category=entry.category,
                likelihood_score=entry.likelihood_score,
                impact_score=entry.impact_score,
                inherent_risk_score=entry.inherent_risk_score,
                residual_risk_score=entry.residual_risk_score,
            )
        )
        likelihood_score, impact_score = entry.likelihood_score, entry.impact_score
        if not (likelihood_score and impact_score):
            continue
        if likelihood_score > size or impact_score > size:
            logger.warning(
                "risk_matrix_entry_off_scale",
                record_id=str(entry.id),
                likelihood_score=likelihood_score,
                impact_score=impact_score,
                max_rank=size,
            )
            continue
        heatmap[likelihood_score - 1][impact_score - 1] += 1

    return RiskMatrix(rows=rows, heatmap=heatmap)
