"""Double-materiality priority classification. Deterministic, per-topic."""

from __future__ import annotations

from collections.abc import Hashable, Iterable
from dataclasses import dataclass

from carbon_depict.models.enums import MaterialityPriority


@dataclass(frozen=True)
class PriorityThresholds:
    """Score cut-offs on the 1-10 impact and financial scales."""

    high_single_axis: float = 7.0
    high_average: float = 7.0
    medium_average: float = 4.0


DOUBLE_MATERIALITY_THRESHOLDS = PriorityThresholds()


def classify_topic(
    impact_score: float,
    financial_score: float,
    thresholds: PriorityThresholds = DOUBLE_MATERIALITY_THRESHOLDS,
) -> MaterialityPriority:
    """Bucket one material topic by its two scores.

    A topic is high priority when either axis alone reaches the single-axis
    cut-off; this is what makes the assessment "double".
    """
    average = (impact_score + financial_score) / 2
    if (
        impact_score >= thresholds.high_single_axis
        or financial_score >= thresholds.high_single_axis
        or average >= thresholds.high_average
    ):
        return MaterialityPriority.HIGH
    if average >= thresholds.medium_average:
        return MaterialityPriority.MEDIUM
    return MaterialityPriority.LOW


def categorize_topics(
    topics: Iterable[tuple[Hashable, float, float, bool]],
    thresholds: PriorityThresholds = DOUBLE_MATERIALITY_THRESHOLDS,
) -> dict[MaterialityPriority, list[Hashable]]:
    """Partition material topic ids into priority buckets.

    ``topics`` yields ``(topic_id, impact_score, financial_score, is_material)``.
    Non-material topics are left out of every bucket. Bucket order follows
    input order.
    """
    buckets: dict[MaterialityPriority, list[Hashable]] = {
        priority: [] for priority in MaterialityPriority
    }
    for topic_id, impact_score, financial_score, is_material in topics:
        if not is_material:
            continue
        buckets[classify_topic(impact_score, financial_score, thresholds)].append(topic_id)
    return buckets
