"""Weekly day-by-day workout types and the split of weekly mileage across them.

Days are indexed 0..6 from Monday; the long run and race fall on Sunday.
"""

from __future__ import annotations

import datetime as dt
from typing import Optional

from core.models import Paces, Phase, RaceDistance, Workout, WorkoutType
from core.services.timefmt import round_half_up
from core.services.workouts import create_workout

MON, TUE, WED, THU, FRI, SAT, SUN = range(7)

LONG_RUN_SHARE = 0.28
QUALITY_SHARE = 0.15
RECOVERY_SHARE_OF_EASY = 0.6

RACE_WEEK_TEMPLATE: dict[int, WorkoutType] = {
    MON: WorkoutType.EASY,
    WED: WorkoutType.RECOVERY,
    FRI: WorkoutType.RECOVERY,
    SUN: WorkoutType.RACE,
}

# Per phase: (minimum days_per_week, {day: type}) layers, applied in order.
PHASE_TEMPLATES: dict[Phase, tuple[tuple[int, dict[int, WorkoutType]], ...]] = {
    Phase.BASE: (
        (3, {TUE: WorkoutType.EASY, THU: WorkoutType.EASY, SUN: WorkoutType.LONG}),
        (4, {SAT: WorkoutType.EASY}),
        (5, {WED: WorkoutType.EASY}),
    ),
    Phase.BUILD: (
        (3, {TUE: WorkoutType.TEMPO, THU: WorkoutType.EASY, SUN: WorkoutType.LONG}),
        (4, {SAT: WorkoutType.EASY}),
        (5, {WED: WorkoutType.RECOVERY}),
        (6, {FRI: WorkoutType.EASY}),
    ),
    Phase.PEAK: (
        (3, {TUE: WorkoutType.INTERVAL, FRI: WorkoutType.TEMPO, SUN: WorkoutType.LONG}),
        (4, {THU: WorkoutType.EASY}),
        (5, {WED: WorkoutType.RECOVERY}),
        (6, {SAT: WorkoutType.EASY}),
    ),
    # Sunday stays easy: the shorter long run comes from the taper mileage.
    Phase.TAPER: (
        (3, {TUE: WorkoutType.EASY, FRI: WorkoutType.TEMPO, SUN: WorkoutType.EASY}),
        (4, {THU: WorkoutType.RECOVERY}),
    ),
}


def workout_schedule(phase: Phase, days_per_week: int, is_race_week: bool = False) -> list[WorkoutType]:
    """Workout type for each day, Monday first. Unassigned days are rest."""
    schedule = [WorkoutType.REST] * 7
    if is_race_week:
        for day, workout_type in RACE_WEEK_TEMPLATE.items():
            schedule[day] = workout_type
        return schedule

    for min_days, layer in PHASE_TEMPLATES[Phase(phase)]:
        if days_per_week < min_days:
            break
        for day, workout_type in layer.items():
            schedule[day] = workout_type
    return schedule


def distribute_mileage(weekly_mileage: float, schedule: list[WorkoutType]) -> list[int]:
    """Whole-km distance per day.

    The long run takes 28% and each quality day 15%; easy days split what
    is left evenly and recovery days get 60% of an easy day's share.
    """
    fixed: dict[int, int] = {}
    for day, workout_type in enumerate(schedule):
        if workout_type is WorkoutType.LONG:
            fixed[day] = round_half_up(weekly_mileage * LONG_RUN_SHARE)
        elif workout_type.is_quality:
            fixed[day] = round_half_up(weekly_mileage * QUALITY_SHARE)

    easy_days = sum(1 for t in schedule if t in (WorkoutType.EASY, WorkoutType.RECOVERY))
    per_easy_day = round_half_up((weekly_mileage - sum(fixed.values())) / easy_days) if easy_days else 0

    def day_km(day: int, workout_type: WorkoutType) -> int:
        if day in fixed:
            return fixed[day]
        if workout_type is WorkoutType.EASY:
            return per_easy_day
        if workout_type is WorkoutType.RECOVERY:
            return round_half_up(per_easy_day * RECOVERY_SHARE_OF_EASY)
        # rest and race days carry no training mileage
        return 0

    return [day_km(day, t) for day, t in enumerate(schedule)]


def build_week_workouts(
    phase: Phase,
    weekly_mileage: float,
    days_per_week: int,
    paces: Paces,
    week_start: dt.date,
    race_distance: Optional[RaceDistance] = None,
    is_race_week: bool = False,
) -> tuple[Workout, ...]:
    schedule = workout_schedule(phase, days_per_week, is_race_week)
    distances = distribute_mileage(weekly_mileage, schedule)
    return tuple(
        create_workout(
            day + 1,
            week_start + dt.timedelta(days=day),
            workout_type,
            distances[day],
            paces,
            race_distance,
        )
        for day, workout_type in enumerate(schedule)
    )
