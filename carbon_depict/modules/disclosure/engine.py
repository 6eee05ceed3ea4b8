"""Hierarchical completion rollup. Pure counting, no I/O."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass

from carbon_depict.core.rounding import percentage


@dataclass(frozen=True)
class DisclosureModule:
    """One reportable group: where its items live on the record and how it is labelled."""

    label: str
    section: str
    field: str


# Labels are the keys of completion_status.by_module.
ESRS_MODULES: tuple[DisclosureModule, ...] = (
    DisclosureModule("ESRS2-Strategy", "general_disclosures", "strategy"),
    DisclosureModule("ESRS2-Governance", "general_disclosures", "governance"),
    DisclosureModule("E1-ClimateChange", "environmental", "climate_change"),
    DisclosureModule("E2-Pollution", "environmental", "pollution"),
    DisclosureModule("E3-Water", "environmental", "water"),
    DisclosureModule("E4-Biodiversity", "environmental", "biodiversity"),
    DisclosureModule("E5-CircularEconomy", "environmental", "circular_economy"),
    DisclosureModule("S1-OwnWorkforce", "social", "own_workforce"),
    DisclosureModule("S2-ValueChain", "social", "value_chain_workers"),
    DisclosureModule("S3-Communities", "social", "communities"),
    DisclosureModule("S4-Consumers", "social", "consumers"),
    DisclosureModule("G1-BusinessConduct", "governance", "business_conduct"),
)


@dataclass(frozen=True)
class CompletionRollup:
    overall: int
    by_module: dict[str, int]
    total: int
    completed: int


def rollup_completion(groups: Mapping[str, Sequence[bool] | None]) -> CompletionRollup:
    """Roll completed flags up per group and overall.

    ``overall`` is computed from item totals across every group, not from
    the average of group scores, so an empty group neither helps nor hurts it.
    A missing or empty group scores 0.
    """
    by_module: dict[str, int] = {}
    total = 0
    completed = 0

    for name, flags in groups.items():
        flags = flags or ()
        group_total = len(flags)
        group_completed = sum(1 for flag in flags if flag)
        by_module[name] = percentage(group_completed, group_total)
        total += group_total
        completed += group_completed

    return CompletionRollup(
        overall=percentage(completed, total),
        by_module=by_module,
        total=total,
        completed=completed,
    )
