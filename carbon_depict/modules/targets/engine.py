"""Target progress and trajectory status. Deterministic given the reference year."""

from __future__ import annotations

from dataclasses import dataclass

from carbon_depict.models.enums import TargetStatus


@dataclass(frozen=True)
class StatusBands:
    """Tolerances, in percentage points below the expected trajectory."""

    achieved_at: float = 100.0
    on_track_tolerance: float = 10.0
    at_risk_tolerance: float = 25.0


DEFAULT_STATUS_BANDS = StatusBands()

# Set by people, never derived
MANUAL_STATUSES = frozenset({TargetStatus.ABANDONED.value, TargetStatus.REVISED.value})


def _clamp_percent(value: float) -> float:
    return min(100.0, max(0.0, value))


def calculate_progress(
    baseline_value: float,
    target_value: float,
    current_value: float,
) -> float | None:
    """Share of the baseline-to-target distance covered, 0-100.

    Works for reduction goals (baseline > target) and increase goals
    (baseline < target). Returns None when baseline equals target: there is
    no distance to cover.
    """
    if baseline_value == target_value:
        return None
    if baseline_value > target_value:
        covered = (baseline_value - current_value) / (baseline_value - target_value)
    else:
        covered = (current_value - baseline_value) / (target_value - baseline_value)
    return _clamp_percent(covered * 100)


def expected_progress(baseline_year: int, target_year: int, as_of_year: int) -> float:
    """Linear-trajectory progress expected by as_of_year.

    Not capped: past the target year it exceeds 100, so an unfinished target
    drifts towards off_track. A zero-length window expects everything now.
    """
    total_years = target_year - baseline_year
    if total_years <= 0:
        return 100.0
    return 100 * (as_of_year - baseline_year) / total_years


def classify_status(
    progress: float,
    expected: float,
    bands: StatusBands = DEFAULT_STATUS_BANDS,
) -> TargetStatus:
    if progress >= bands.achieved_at:
        return TargetStatus.ACHIEVED
    if progress >= expected - bands.on_track_tolerance:
        return TargetStatus.ON_TRACK
    if progress >= expected - bands.at_risk_tolerance:
        return TargetStatus.AT_RISK
    return TargetStatus.OFF_TRACK


def reduction_percentage(baseline_value: float, target_value: float) -> float | None:
    """Planned change relative to the baseline; negative for increase goals."""
    if baseline_value == 0:
        return None
    return (baseline_value - target_value) / baseline_value * 100
