"""Assemble a full race-specific training plan from a PlanConfig.

The plan is a pure function of the config and the anchor date: fitness
-> paces -> phases -> mileage curve -> weekly schedules -> workouts.
"""

from __future__ import annotations

import logging
from datetime import date, timedelta
from typing import Any, Optional

from core.models import PlanConfig, TrainingParams, TrainingPlan, Week, Workout
from core.services.mileage import mileage_progression, peak_mileage_for
from core.services.phases import allocate_phases, phase_for_week
from core.services.schedule import build_week_workouts
from core.services.vdot import derive_paces, estimate_fitness

logger = logging.getLogger(__name__)

MIN_PLAN_WEEKS = 8


def total_weeks_until(race_date: date, today: date, min_weeks: int = MIN_PLAN_WEEKS) -> int:
    """Whole weeks to the race, never fewer than ``MIN_PLAN_WEEKS`` whatever ``min_weeks`` asks for."""
    return max(MIN_PLAN_WEEKS, min_weeks, (race_date - today).days // 7)


def week_one_start(today: date) -> date:
    """Monday of the week containing ``today``."""
    return today - timedelta(days=today.weekday())


def generate_plan(config: PlanConfig, today: Optional[date] = None, min_weeks: int = MIN_PLAN_WEEKS) -> TrainingPlan:
    today = today or date.today()
    total_weeks = total_weeks_until(config.race_date, today, min_weeks)

    vdot = estimate_fitness(
        config.current_mileage,
        config.running_age_months,
        config.recent_race_time,
        config.recent_race_distance,
    )
    paces = derive_paces(vdot)
    peak_mileage = peak_mileage_for(config.race_distance, config.current_mileage)
    allocation = allocate_phases(total_weeks)
    progression = mileage_progression(config.current_mileage, peak_mileage, allocation)
    start = week_one_start(today)

    weeks: list[Week] = []
    for idx in range(total_weeks):
        phase, phase_week = phase_for_week(idx, allocation)
        mileage = progression[idx]
        weeks.append(
            Week(
                week_number=idx + 1,
                phase=phase,
                phase_week=phase_week,
                total_mileage=mileage,
                workouts=build_week_workouts(
                    phase,
                    mileage,
                    config.days_per_week,
                    paces,
                    start + timedelta(weeks=idx),
                    config.race_distance,
                    is_race_week=idx == total_weeks - 1,
                ),
            )
        )

    logger.info(
        "plan_generated",
        extra={
            "ctx_vdot": vdot,
            "ctx_total_weeks": total_weeks,
            "ctx_peak_mileage": peak_mileage,
            "ctx_phases": {a.phase.value: a.weeks for a in allocation},
        },
    )
    return TrainingPlan(
        training_params=TrainingParams(vdot=vdot, total_weeks=total_weeks, peak_mileage=peak_mileage, paces=paces),
        weeks=tuple(weeks),
    )


def week_for_date(plan: TrainingPlan, day: date) -> Optional[Week]:
    """The plan week whose Monday-Sunday window contains ``day``."""
    for week in plan.weeks:
        if week.start_date <= day <= week.start_date + timedelta(days=6):
            return week
    return None


def _drop_none(values: dict[str, Any]) -> dict[str, Any]:
    return {k: v for k, v in values.items() if v is not None}


def _workout_to_dict(workout: Workout) -> dict[str, Any]:
    row: dict[str, Any] = {
        "dayOfWeek": workout.day_of_week,
        "date": workout.date.isoformat(),
        "type": workout.type.value,
        "title": workout.title,
        "description": workout.description,
        "completed": workout.completed,
    }
    row.update(_drop_none({"distance": workout.distance, "duration": workout.duration, "targetPace": workout.target_pace}))
    if workout.segments is not None:
        row["segments"] = [
            _drop_none({"type": seg.type.value, "distance": seg.distance, "duration": seg.duration, "pace": seg.pace, "repeat": seg.repeat})
            for seg in workout.segments
        ]
    return row


def plan_to_dict(plan: TrainingPlan) -> dict[str, Any]:
    """JSON-ready record of a plan; unset optional fields are omitted."""
    params = plan.training_params
    return {
        "trainingParams": {
            "vdot": params.vdot,
            "totalWeeks": params.total_weeks,
            "peakMileage": params.peak_mileage,
            "paces": {
                "easy": params.paces.easy,
                "marathon": params.paces.marathon,
                "threshold": params.paces.threshold,
                "interval": params.paces.interval,
                "repetition": params.paces.repetition,
            },
        },
        "weeks": [
            {
                "weekNumber": week.week_number,
                "phase": week.phase.value,
                "phaseWeek": week.phase_week,
                "totalMileage": week.total_mileage,
                "workouts": [_workout_to_dict(w) for w in week.workouts],
            }
            for week in plan.weeks
        ],
    }
