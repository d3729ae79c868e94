"""Workout content: titles, descriptions, target paces, durations and segments."""

from __future__ import annotations

import datetime as dt
import math
from dataclasses import dataclass
from typing import Optional

from core.models import Paces, RaceDistance, Segment, SegmentType, Workout, WorkoutType
from core.services.timefmt import round_half_up

# Rough display-only duration estimates, minutes per km
MIN_PER_KM = {
    WorkoutType.EASY: 6.5,
    WorkoutType.LONG: 6.5,
    WorkoutType.TEMPO: 5.5,
    WorkoutType.INTERVAL: 5.0,
    WorkoutType.RECOVERY: 7.0,
}

WARMUP_KM = 2
COOLDOWN_KM = 2
TEMPO_SHARE = 0.6
TEMPO_MAX_KM = 8
INTERVAL_REP_KM = 1
INTERVAL_RECOVERY_KM = 0.4
INTERVAL_MAX_REPS = 6


@dataclass(frozen=True)
class WorkoutDetails:
    title: str
    description: str
    target_pace: Optional[str] = None
    duration: Optional[int] = None
    segments: Optional[tuple[Segment, ...]] = None


def _fmt_km(distance: float) -> str:
    return f"{distance:g}"


def _duration(workout_type: WorkoutType, distance: float) -> int:
    return round_half_up(distance * MIN_PER_KM[workout_type])


def synthesize(
    workout_type: WorkoutType,
    distance: float,
    paces: Paces,
    race_distance: Optional[RaceDistance] = None,
) -> WorkoutDetails:
    """Describe one day's session. ``race_distance`` only flavours the race-day text."""
    workout_type = WorkoutType(workout_type)
    km = _fmt_km(distance)

    if workout_type is WorkoutType.EASY:
        return WorkoutDetails(
            title=workout_type.label,
            description=f"Run {km} km at an easy, conversational effort.",
            target_pace=paces.easy,
            duration=_duration(workout_type, distance),
        )

    if workout_type is WorkoutType.LONG:
        return WorkoutDetails(
            title=workout_type.label,
            description=(
                f"This week's long run, {km} km. Keep the first half relaxed; "
                "you may pick up the pace slightly over the second half."
            ),
            target_pace=paces.easy,
            duration=_duration(workout_type, distance),
        )

    if workout_type is WorkoutType.TEMPO:
        tempo_km = min(round_half_up(distance * TEMPO_SHARE), TEMPO_MAX_KM)
        return WorkoutDetails(
            title=workout_type.label,
            description=f"Tempo session: warm-up + {tempo_km} km at threshold pace + cool-down.",
            target_pace=paces.threshold,
            duration=_duration(workout_type, distance),
            segments=(
                Segment(SegmentType.WARMUP, distance=WARMUP_KM, pace=paces.easy),
                Segment(SegmentType.MAIN, distance=tempo_km, pace=paces.threshold),
                Segment(SegmentType.COOLDOWN, distance=COOLDOWN_KM, pace=paces.easy),
            ),
        )

    if workout_type is WorkoutType.INTERVAL:
        reps = min(math.floor(distance / 2), INTERVAL_MAX_REPS)
        return WorkoutDetails(
            title=workout_type.label,
            description=f"Interval session: warm-up + {reps}x1000m at interval pace + cool-down.",
            target_pace=paces.interval,
            duration=_duration(workout_type, distance),
            segments=(
                Segment(SegmentType.WARMUP, distance=WARMUP_KM, pace=paces.easy),
                Segment(SegmentType.MAIN, distance=INTERVAL_REP_KM, pace=paces.interval, repeat=reps),
                Segment(SegmentType.RECOVERY, distance=INTERVAL_RECOVERY_KM, pace=paces.easy, repeat=reps),
                Segment(SegmentType.COOLDOWN, distance=COOLDOWN_KM, pace=paces.easy),
            ),
        )

    if workout_type is WorkoutType.RECOVERY:
        return WorkoutDetails(
            title=workout_type.label,
            description=f"Recovery run, {km} km. Keep the pace very relaxed.",
            target_pace=f"{paces.easy_upper}+",
            duration=_duration(workout_type, distance),
        )

    if workout_type is WorkoutType.REST:
        return WorkoutDetails(
            title=workout_type.label,
            description="Full rest, or easy cross-training (swimming, cycling, yoga).",
        )

    if workout_type is WorkoutType.RACE:
        race = RaceDistance(race_distance).label if race_distance else "race"
        return WorkoutDetails(
            title=workout_type.label,
            description=f"Race day! Run your {race} at the planned pace. Trust your training!",
            target_pace=paces.marathon,
        )

    raise ValueError(f"Unknown workout type: {workout_type}")


def create_workout(
    day_of_week: int,
    date: dt.date,
    workout_type: WorkoutType,
    distance: float,
    paces: Paces,
    race_distance: Optional[RaceDistance] = None,
) -> Workout:
    details = synthesize(workout_type, distance, paces, race_distance)
    return Workout(
        day_of_week=day_of_week,
        date=date,
        type=WorkoutType(workout_type),
        title=details.title,
        description=details.description,
        distance=distance if distance > 0 else None,
        duration=details.duration,
        target_pace=details.target_pace,
        segments=details.segments,
    )
