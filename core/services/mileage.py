"""Weekly mileage targets across a periodized plan (km)."""

from __future__ import annotations

import logging

from core.models import Phase, RaceDistance
from core.services.phases import PhaseAllocation
from core.services.timefmt import round_half_up

logger = logging.getLogger(__name__)

# Peak weekly km: (floor, ceiling) by race distance
PEAK_MILEAGE_BOUNDS: dict[RaceDistance, tuple[int, int]] = {
    RaceDistance.FIVE_K: (30, 50),
    RaceDistance.TEN_K: (40, 60),
    RaceDistance.HALF: (50, 70),
    RaceDistance.FULL: (60, 80),
}
PEAK_GROWTH = 1.5

BASE_END_FRACTION = 0.70
BUILD_RAMP_FRACTION = 0.30
BUILD_RECOVERY_EVERY = 4
BUILD_RECOVERY_FACTOR = 0.75
PEAK_HOLD_FRACTION = 0.95
PEAK_RECOVERY_EVERY = 3
PEAK_RECOVERY_FRACTION = 0.80
TAPER_START_FRACTION = 0.70
TAPER_DROP_FRACTION = 0.40


def peak_mileage_for(race_distance: RaceDistance, current_mileage: float) -> int:
    """1.5x current volume, bounded by the distance's minimum and ideal peak."""
    minimum, ideal = PEAK_MILEAGE_BOUNDS[RaceDistance(race_distance)]
    return round_half_up(max(minimum, min(current_mileage * PEAK_GROWTH, ideal)))


def _week_mileage(phase: Phase, week: int, weeks: int, current: float, peak: float) -> float:
    """Unrounded km for 1-based ``week`` of a ``weeks``-long phase."""
    phase = Phase(phase)
    progress = week / weeks
    if phase is Phase.BASE:
        return current + (peak * BASE_END_FRACTION - current) * progress
    if phase is Phase.BUILD:
        mileage = peak * BASE_END_FRACTION + peak * BUILD_RAMP_FRACTION * progress
        if week % BUILD_RECOVERY_EVERY == 0:
            mileage *= BUILD_RECOVERY_FACTOR
        return mileage
    if phase is Phase.PEAK:
        if week % PEAK_RECOVERY_EVERY == 0:
            return peak * PEAK_RECOVERY_FRACTION
        return peak * PEAK_HOLD_FRACTION
    if phase is Phase.TAPER:
        return peak * (TAPER_START_FRACTION - TAPER_DROP_FRACTION * progress)
    raise ValueError(f"Unknown phase: {phase}")


def mileage_progression(current_mileage: float, peak_mileage: float, allocation: list[PhaseAllocation]) -> list[int]:
    """One rounded km target per allocated week, in plan order."""
    mileages = [
        round_half_up(_week_mileage(item.phase, week, item.weeks, current_mileage, peak_mileage))
        for item in allocation
        for week in range(1, item.weeks + 1)
    ]
    logger.debug("mileage_progression", extra={"ctx_weeks": len(mileages), "ctx_peak": peak_mileage})
    return mileages
