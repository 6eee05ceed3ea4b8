"""Materiality matrix service."""

from __future__ import annotations

import structlog

from carbon_depict.models.enums import MaterialityPriority
from carbon_depict.modules.materiality.engine import (
    DOUBLE_MATERIALITY_THRESHOLDS,
    PriorityThresholds,
    categorize_topics,
)
from carbon_depict.modules.materiality.schemas import (
    MaterialityAssessment,
    MaterialityMatrix,
    MaterialTopic,
)

logger = structlog.get_logger()


def recompute(
    record: MaterialityAssessment,
    *,
    thresholds: PriorityThresholds = DOUBLE_MATERIALITY_THRESHOLDS,
) -> MaterialityAssessment:
    """Rebuild the materiality matrix from the record's topics."""
    buckets = categorize_topics(
        (
            (topic.id, topic.impact_score, topic.financial_score, topic.is_material)
            for topic in record.material_topics
        ),
        thresholds,
    )

    record.materiality_matrix = MaterialityMatrix(
        high_priority=buckets[MaterialityPriority.HIGH],
        medium_priority=buckets[MaterialityPriority.MEDIUM],
        low_priority=buckets[MaterialityPriority.LOW],
    )

    logger.info(
        "materiality_matrix_recomputed",
        record_id=str(record.id),
        assessment_year=record.assessment_year,
        material_topics=record.material_topics_count,
        high_priority=len(buckets[MaterialityPriority.HIGH]),
    )
    return record


def material_topics(record: MaterialityAssessment) -> list[MaterialTopic]:
    return [topic for topic in record.material_topics if topic.is_material]
