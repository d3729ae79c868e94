from __future__ import annotations

from datetime import date
from typing import Optional

from fastapi import APIRouter, HTTPException, Query, status

from api.schemas import FitnessOut, PacesOut, PlanOut, PredictionOut, SimpleStatusResponse
from core.config import get_settings
from core.models import RaceDistance
from core.services.planning import generate_plan, plan_to_dict, total_weeks_until
from core.services.vdot import VDOT_MAX, VDOT_MIN, derive_paces, estimate_fitness, predict_race_time
from core.validators import FitnessInput, PlanCreateInput

settings = get_settings()
router = APIRouter(prefix="/api/v1")


@router.get("/health", response_model=SimpleStatusResponse, tags=["system"])
def health():
    return SimpleStatusResponse(status="ok")


@router.post("/plans", response_model=PlanOut, response_model_exclude_none=True, tags=["plans"])
def create_plan(payload: PlanCreateInput, today: Optional[date] = Query(None)):
    anchor = today or date.today()
    payload.check_race_date(anchor)
    weeks = total_weeks_until(payload.race_date, anchor, settings.min_plan_weeks)
    if weeks > settings.max_plan_weeks:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"race_date is {weeks} weeks away; plans are limited to {settings.max_plan_weeks} weeks",
        )
    plan = generate_plan(payload.to_config(), today=anchor, min_weeks=settings.min_plan_weeks)
    return plan_to_dict(plan)


@router.post("/fitness", response_model=FitnessOut, tags=["fitness"])
def fitness(payload: FitnessInput):
    vdot = estimate_fitness(
        payload.weekly_mileage,
        payload.running_age_months,
        payload.recent_race_time,
        payload.recent_race_distance,
    )
    source = "race" if payload.recent_race_time else "mileage"
    return FitnessOut(vdot=vdot, source=source, paces=PacesOut.model_validate(derive_paces(vdot)))


@router.get("/paces", response_model=PacesOut, tags=["fitness"])
def paces(vdot: float = Query(ge=VDOT_MIN, le=VDOT_MAX)):
    return PacesOut.model_validate(derive_paces(vdot))


@router.get("/predictions", response_model=PredictionOut, tags=["fitness"])
def prediction(vdot: float = Query(ge=VDOT_MIN, le=VDOT_MAX), distance: RaceDistance = Query(...)):
    return PredictionOut(vdot=vdot, distance=distance.value, predicted_time=predict_race_time(vdot, distance))
