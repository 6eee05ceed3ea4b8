"""CSRD disclosure completion service."""

from __future__ import annotations

from collections.abc import Sequence

import structlog

from carbon_depict.modules.disclosure.engine import (
    ESRS_MODULES,
    DisclosureModule,
    rollup_completion,
)
from carbon_depict.modules.disclosure.schemas import (
    CompletionStatus,
    CSRDDisclosure,
    DisclosureItem,
)

logger = structlog.get_logger()


def _module_items(
    record: CSRDDisclosure, module: DisclosureModule
) -> list[DisclosureItem] | None:
    section = getattr(record, module.section, None)
    if section is None:
        return None
    return getattr(section, module.field, None)


def completion_flags(
    record: CSRDDisclosure,
    modules: Sequence[DisclosureModule] = ESRS_MODULES,
) -> dict[str, list[bool] | None]:
    """Completed flags per module label; None for a section the record does not carry."""
    flags: dict[str, list[bool] | None] = {}
    for module in modules:
        items = _module_items(record, module)
        flags[module.label] = None if items is None else [item.completed for item in items]
    return flags


def recompute(
    record: CSRDDisclosure,
    *,
    modules: Sequence[DisclosureModule] = ESRS_MODULES,
) -> CSRDDisclosure:
    """Refresh completion_status from the record's disclosure items."""
    rollup = rollup_completion(completion_flags(record, modules))

    record.completion_status = CompletionStatus(
        overall=rollup.overall,
        by_module=rollup.by_module,
        total_disclosures=rollup.total,
        completed_disclosures=rollup.completed,
    )

    logger.info(
        "disclosure_completion_recomputed",
        record_id=str(record.id),
        reporting_period=record.reporting_period,
        overall=rollup.overall,
        total_disclosures=rollup.total,
    )
    return record


def total_disclosure_count(
    record: CSRDDisclosure,
    modules: Sequence[DisclosureModule] = ESRS_MODULES,
) -> int:
    return sum(len(_module_items(record, module) or ()) for module in modules)
