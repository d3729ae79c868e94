from dataclasses import replace
from datetime import date, timedelta

from core.models import Phase, PlanConfig, RaceDistance, WorkoutType
from core.services.planning import generate_plan, plan_to_dict, total_weeks_until, week_for_date, week_one_start

TODAY = date(2026, 1, 7)  # a Wednesday


def _config(**overrides) -> PlanConfig:
    base = PlanConfig(
        race_date=TODAY + timedelta(weeks=16),
        race_distance=RaceDistance.HALF,
        current_mileage=30,
        days_per_week=4,
        running_age_months=24,
    )
    return replace(base, **overrides)


def test_total_weeks_floor():
    assert total_weeks_until(TODAY + timedelta(days=10), TODAY) == 8
    assert total_weeks_until(TODAY + timedelta(weeks=20, days=6), TODAY) == 20


def test_week_one_starts_on_monday():
    assert week_one_start(TODAY) == date(2026, 1, 5)
    assert week_one_start(date(2026, 1, 5)) == date(2026, 1, 5)
    assert week_one_start(date(2026, 1, 11)) == date(2026, 1, 5)


def test_plan_shape():
    plan = generate_plan(_config(), today=TODAY)
    assert plan.training_params.total_weeks == 16
    assert len(plan.weeks) == 16
    assert [w.week_number for w in plan.weeks] == list(range(1, 17))
    assert all(len(w.workouts) == 7 for w in plan.weeks)
    assert plan.weeks[-1].workouts[6].type is WorkoutType.RACE
    assert plan.weeks[-1].workouts[6].day_of_week == 7


def test_plan_phases_in_order():
    plan = generate_plan(_config(), today=TODAY)
    phases = [w.phase for w in plan.weeks]
    assert phases == [Phase.BASE] * 5 + [Phase.BUILD] * 6 + [Phase.PEAK] * 3 + [Phase.TAPER] * 2
    assert [w.phase_week for w in plan.weeks[5:11]] == [1, 2, 3, 4, 5, 6]


def test_plan_dates_are_contiguous_from_monday():
    plan = generate_plan(_config(), today=TODAY)
    days = [wo.date for w in plan.weeks for wo in w.workouts]
    assert days[0] == date(2026, 1, 5)
    assert days == [days[0] + timedelta(days=i) for i in range(len(days))]


def test_short_plan_clamped_and_ends_in_taper():
    plan = generate_plan(_config(race_date=TODAY + timedelta(days=10)), today=TODAY)
    assert len(plan.weeks) == 8
    assert [w.phase for w in plan.weeks] == [Phase.BASE] * 2 + [Phase.BUILD] * 3 + [Phase.PEAK] * 2 + [Phase.TAPER]
    assert plan.weeks[-1].workouts[6].type is WorkoutType.RACE


def test_fitness_from_recent_race():
    plan = generate_plan(_config(recent_race_time="20:00", recent_race_distance=RaceDistance.FIVE_K), today=TODAY)
    assert plan.training_params.vdot == 52.0
    assert plan.training_params.paces.easy == "5:08-5:38"


def test_fitness_from_mileage_and_history():
    plan = generate_plan(_config(current_mileage=45), today=TODAY)
    assert plan.training_params.vdot == 43.0


def test_peak_mileage_and_weekly_totals():
    plan = generate_plan(_config(), today=TODAY)
    # half marathon, 30 km/week now: 1.5x = 45, raised to the 50 km floor
    assert plan.training_params.peak_mileage == 50
    assert plan.weeks[4].total_mileage == 35
    assert max(w.total_mileage for w in plan.weeks) == 50


def test_plan_is_deterministic():
    first = generate_plan(_config(), today=TODAY)
    second = generate_plan(_config(), today=TODAY)
    assert first == second
    assert plan_to_dict(first) == plan_to_dict(second)


def test_no_workout_starts_completed():
    plan = generate_plan(_config(), today=TODAY)
    assert not any(wo.completed for w in plan.weeks for wo in w.workouts)


def test_quality_sessions_only_after_base():
    plan = generate_plan(_config(), today=TODAY)
    for week in plan.weeks:
        has_quality = any(wo.type.is_quality for wo in week.workouts)
        assert has_quality == (week.phase is not Phase.BASE and week is not plan.weeks[-1])


def test_week_for_date():
    plan = generate_plan(_config(), today=TODAY)
    assert week_for_date(plan, TODAY).week_number == 1
    assert week_for_date(plan, date(2026, 1, 12)).week_number == 2
    assert week_for_date(plan, date(2026, 1, 4)) is None
    assert week_for_date(plan, date(2026, 12, 31)) is None


def test_plan_to_dict_record():
    record = plan_to_dict(generate_plan(_config(), today=TODAY))
    params = record["trainingParams"]
    assert params["totalWeeks"] == 16
    assert set(params["paces"]) == {"easy", "marathon", "threshold", "interval", "repetition"}
    first_week = record["weeks"][0]
    assert first_week["phase"] == "base"
    monday = first_week["workouts"][0]
    assert monday["type"] == "rest"
    assert monday["date"] == "2026-01-05"
    assert "distance" not in monday and "targetPace" not in monday
    peak_week = next(w for w in record["weeks"] if w["phase"] == "peak")
    interval = next(wo for wo in peak_week["workouts"] if wo["type"] == "interval")
    assert [s["type"] for s in interval["segments"]] == ["warmup", "main", "recovery", "cooldown"]
    assert "repeat" in interval["segments"][1] and "repeat" not in interval["segments"][0]


def test_min_weeks_below_floor_is_ignored():
    assert total_weeks_until(TODAY + timedelta(days=3), TODAY, min_weeks=4) == 8
    assert total_weeks_until(TODAY + timedelta(days=3), TODAY, min_weeks=10) == 10
    plan = generate_plan(_config(race_date=TODAY + timedelta(days=3)), today=TODAY, min_weeks=4)
    assert len(plan.weeks) == 8
    assert [w.phase for w in plan.weeks] == [Phase.BASE] * 2 + [Phase.BUILD] * 3 + [Phase.PEAK] * 2 + [Phase.TAPER]
