"""Periodization: split a plan's weeks into base, build, peak and taper."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from core.models import Phase
from core.services.timefmt import round_half_up

logger = logging.getLogger(__name__)

# share of total weeks, minimum weeks
TAPER_SHARE, TAPER_MIN = 0.10, 2
PEAK_SHARE, PEAK_MIN = 0.20, 2
BUILD_SHARE, BUILD_MIN = 0.40, 3
BASE_MIN = 2


@dataclass(frozen=True)
class PhaseAllocation:
    phase: Phase
    weeks: int


def allocate_phases(total_weeks: int) -> list[PhaseAllocation]:
    """Allocate weeks to the four phases, in order.

    Base takes whatever the other three leave, floored at two weeks. For
    plans under ten weeks the floors can make the allocation one week
    longer than ``total_weeks``; the assembler then stays in taper and
    never reaches the surplus week.
    """
    taper = max(TAPER_MIN, round_half_up(total_weeks * TAPER_SHARE))
    peak = max(PEAK_MIN, round_half_up(total_weeks * PEAK_SHARE))
    build = max(BUILD_MIN, round_half_up(total_weeks * BUILD_SHARE))
    base = max(BASE_MIN, total_weeks - taper - peak - build)

    allocation = [
        PhaseAllocation(Phase.BASE, base),
        PhaseAllocation(Phase.BUILD, build),
        PhaseAllocation(Phase.PEAK, peak),
        PhaseAllocation(Phase.TAPER, taper),
    ]
    allocated = sum(a.weeks for a in allocation)
    if allocated != total_weeks:
        logger.warning(
            "phase_allocation_drift",
            extra={"ctx_total_weeks": total_weeks, "ctx_allocated_weeks": allocated},
        )
    return allocation


def phase_for_week(week_index: int, allocation: list[PhaseAllocation]) -> tuple[Phase, int]:
    """Phase and 1-based week-within-phase for a 0-based plan week.

    Weeks past the end of the allocation stay in the last phase.
    """
    remaining = week_index
    for idx, item in enumerate(allocation):
        if remaining < item.weeks or idx == len(allocation) - 1:
            return item.phase, remaining + 1
        remaining -= item.weeks
    raise ValueError("Empty phase allocation")
