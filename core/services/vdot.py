"""VDOT-based fitness estimation and pacing, after Jack Daniels' Running Formula.

VDOT is a measure of running ability derived from race performances.
This module estimates VDOT from a recent race (or, without one, from
training volume and history), maps VDOT to the five Daniels training
paces (E, M, T, I, R) and predicts race times.

All lookups go through one bounded linear interpolation over small
calibration tables; nothing is extrapolated past a table's ends.
"""

from __future__ import annotations

import logging
from typing import Optional, Sequence

from core.models import Paces, RaceDistance
from core.services.timefmt import format_pace, format_time, parse_time, round_half_up

logger = logging.getLogger(__name__)

Point = tuple[float, float]

# Race tables: finish time (sec) -> VDOT. Faster time, higher VDOT.
_RACE_TABLES: dict[RaceDistance, tuple[Point, ...]] = {
    RaceDistance.FIVE_K: (
        (840, 85),   # 14:00
        (960, 70),   # 16:00
        (1080, 60),  # 18:00
        (1200, 52),  # 20:00
        (1320, 46),  # 22:00
        (1440, 41),  # 24:00
        (1560, 37),  # 26:00
        (1680, 33),  # 28:00
        (1800, 30),  # 30:00
    ),
    RaceDistance.TEN_K: (
        (1800, 85),  # 30:00
        (2040, 70),  # 34:00
        (2280, 60),  # 38:00
        (2520, 52),  # 42:00
        (2760, 46),  # 46:00
        (3000, 41),  # 50:00
        (3240, 37),  # 54:00
        (3480, 33),  # 58:00
        (3720, 30),  # 62:00
    ),
    RaceDistance.HALF: (
        (3780, 85),  # 1:03:00
        (4320, 70),  # 1:12:00
        (4860, 60),  # 1:21:00
        (5400, 52),  # 1:30:00
        (5940, 46),  # 1:39:00
        (6480, 41),  # 1:48:00
        (7020, 37),  # 1:57:00
        (7560, 33),  # 2:06:00
        (8100, 30),  # 2:15:00
    ),
    RaceDistance.FULL: (
        (7500, 85),   # 2:05:00
        (8700, 70),   # 2:25:00
        (9900, 60),   # 2:45:00
        (11100, 52),  # 3:05:00
        (12300, 46),  # 3:25:00
        (13500, 41),  # 3:45:00
        (14700, 37),  # 4:05:00
        (15900, 33),  # 4:25:00
        (17100, 30),  # 4:45:00
    ),
}

# Pace tables: VDOT -> sec/km, one per training zone.
_PACE_TABLES: dict[str, tuple[Point, ...]] = {
    "easy": ((30, 450), (35, 408), (40, 372), (45, 342), (50, 318), (55, 294), (60, 276), (65, 258), (70, 240)),
    "marathon": ((30, 408), (35, 366), (40, 330), (45, 300), (50, 276), (55, 252), (60, 234), (65, 216), (70, 198)),
    "threshold": ((30, 378), (35, 342), (40, 312), (45, 282), (50, 258), (55, 234), (60, 216), (65, 198), (70, 180)),
    "interval": ((30, 348), (35, 318), (40, 288), (45, 258), (50, 234), (55, 210), (60, 192), (65, 174), (70, 162)),
    "repetition": ((30, 318), (35, 288), (40, 264), (45, 240), (50, 216), (55, 192), (60, 174), (65, 156), (70, 144)),
}

PACE_ZONES = tuple(_PACE_TABLES)
EASY_RANGE_SEC = 30

VDOT_MIN = 30.0
VDOT_MAX = 85.0
MILEAGE_VDOT_CAP = 70

# (threshold, bonus) brackets, checked highest first
_MILEAGE_BONUS = ((80, 20), (60, 15), (40, 10), (20, 5))
_RUNNING_AGE_BONUS = ((60, 10), (36, 7), (12, 3))


def interpolate(x: float, points: Sequence[Point]) -> float:
    """Linear interpolation over (x, y) points, clamped to the end points."""
    ordered = sorted(points)
    if x <= ordered[0][0]:
        return float(ordered[0][1])
    if x >= ordered[-1][0]:
        return float(ordered[-1][1])
    for (x1, y1), (x2, y2) in zip(ordered, ordered[1:]):
        if x1 <= x <= x2:
            return y1 + (x - x1) / (x2 - x1) * (y2 - y1)
    return float(ordered[0][1])


def vdot_from_race(distance: RaceDistance, time: str) -> float:
    """VDOT for a race result, rounded to one decimal.

    A time that does not parse counts as 0 seconds, which lands on the
    fastest calibration point and returns the table's maximum VDOT.
    """
    seconds = parse_time(time)
    if seconds <= 0:
        logger.warning("race_time_unparsed", extra={"ctx_time": time, "ctx_distance": RaceDistance(distance).value})
    vdot = interpolate(seconds, _RACE_TABLES[RaceDistance(distance)])
    return round_half_up(vdot * 10) / 10


def _bracket_bonus(value: float, brackets: Sequence[tuple[float, int]]) -> int:
    for threshold, bonus in brackets:
        if value >= threshold:
            return bonus
    return 0


def estimate_vdot_from_mileage(weekly_mileage: float, running_age_months: float) -> int:
    """Rough VDOT from weekly volume (km) and running history (months), capped at 70."""
    vdot = 30
    vdot += _bracket_bonus(weekly_mileage, _MILEAGE_BONUS)
    vdot += _bracket_bonus(running_age_months, _RUNNING_AGE_BONUS)
    return min(vdot, MILEAGE_VDOT_CAP)


def estimate_fitness(
    weekly_mileage: float,
    running_age_months: float,
    recent_race_time: Optional[str] = None,
    recent_race_distance: Optional[RaceDistance] = None,
) -> float:
    """Race-based VDOT when a recent race is known, mileage heuristic otherwise."""
    if recent_race_time and recent_race_distance:
        return vdot_from_race(recent_race_distance, recent_race_time)
    return float(estimate_vdot_from_mileage(weekly_mileage, running_age_months))


def pace_seconds(vdot: float) -> dict[str, float]:
    """Interpolated sec/km for each zone. For easy this is the fast end of the range."""
    return {zone: interpolate(vdot, table) for zone, table in _PACE_TABLES.items()}


def derive_paces(vdot: float) -> Paces:
    secs = pace_seconds(vdot)
    easy = secs["easy"]
    return Paces(
        easy=f"{format_pace(easy)}-{format_pace(easy + EASY_RANGE_SEC)}",
        marathon=format_pace(secs["marathon"]),
        threshold=format_pace(secs["threshold"]),
        interval=format_pace(secs["interval"]),
        repetition=format_pace(secs["repetition"]),
    )


def predict_race_time(vdot: float, distance: RaceDistance) -> str:
    """Predicted finish time for a distance, read backwards off its race table."""
    inverted = [(v, t) for t, v in _RACE_TABLES[RaceDistance(distance)]]
    return format_time(interpolate(vdot, inverted))
