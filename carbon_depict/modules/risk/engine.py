"""Deterministic inherent / residual risk scoring. No defaults for unknown levels."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from types import MappingProxyType

from carbon_depict.core.errors import ConfigurationError
from carbon_depict.core.rounding import round_half_up


@dataclass(frozen=True)
class RiskScales:
    """Ordinal ranks and control discounts used by the scoring engine."""

    likelihood: Mapping[str, int]
    impact: Mapping[str, int]
    control_discount: Mapping[str, float]
    min_residual: int = 1
    max_rank: int = field(init=False)

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "max_rank", max(*self.likelihood.values(), *self.impact.values())
        )


DEFAULT_RISK_SCALES = RiskScales(
    likelihood=MappingProxyType({
        "rare": 1,
        "unlikely": 2,
        "possible": 3,
        "likely": 4,
        "almost_certain": 5,
    }),
    impact=MappingProxyType({
        "insignificant": 1,
        "minor": 2,
        "moderate": 3,
        "major": 4,
        "catastrophic": 5,
    }),
    control_discount=MappingProxyType({
        "not_effective": 0.0,
        "partially_effective": 0.3,
        "effective": 0.6,
        "highly_effective": 0.9,
    }),
)


def _lookup(table: Mapping, level: str, dimension: str):
    # Enum members hash by name, so look up by value
    level = getattr(level, "value", level)
    try:
        return table[level]
    except (KeyError, TypeError):
        raise ConfigurationError(
            f"Unknown {dimension} level {level!r}; expected one of {sorted(table)}",
            detail={"dimension": dimension, "value": level},
        ) from None


def likelihood_rank(level: str, scales: RiskScales = DEFAULT_RISK_SCALES) -> int:
    return _lookup(scales.likelihood, level, "likelihood")


def impact_rank(level: str, scales: RiskScales = DEFAULT_RISK_SCALES) -> int:
    return _lookup(scales.impact, level, "impact")


def control_discount(effectiveness: str, scales: RiskScales = DEFAULT_RISK_SCALES) -> float:
    return _lookup(scales.control_discount, effectiveness, "control effectiveness")


def inherent_risk_score(
    likelihood: str,
    impact: str,
    scales: RiskScales = DEFAULT_RISK_SCALES,
) -> int:
    """likelihood rank x impact rank (1-25 on the default scales)."""
    return likelihood_rank(likelihood, scales) * impact_rank(impact, scales)


def residual_risk_score(
    inherent: int,
    control_effectiveness: Sequence[str],
    scales: RiskScales = DEFAULT_RISK_SCALES,
) -> int | None:
    """Inherent score discounted by the mean control effectiveness.

    Returns None without controls; the residual is then the assessor's call.
    Every control level is validated even when it would not change the mean.
    """
    if not control_effectiveness:
        return None
    discounts = [control_discount(level, scales) for level in control_effectiveness]
    avg_discount = sum(discounts) / len(discounts)
    return max(scales.min_residual, round_half_up(inherent * (1 - avg_discount)))
