from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class _CamelOut(BaseModel):
    model_config = ConfigDict(populate_by_name=True)


class PacesOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    easy: str
    marathon: str
    threshold: str
    interval: str
    repetition: str


class SegmentOut(_CamelOut):
    type: str
    distance: Optional[float] = None
    duration: Optional[int] = None
    pace: Optional[str] = None
    repeat: Optional[int] = None


class WorkoutOut(_CamelOut):
    day_of_week: int = Field(alias="dayOfWeek")
    date: str
    type: str
    title: str
    description: str
    distance: Optional[float] = None
    duration: Optional[int] = None
    target_pace: Optional[str] = Field(default=None, alias="targetPace")
    segments: Optional[list[SegmentOut]] = None
    completed: bool = False


class WeekOut(_CamelOut):
    week_number: int = Field(alias="weekNumber")
    phase: str
    phase_week: int = Field(alias="phaseWeek")
    total_mileage: int = Field(alias="totalMileage")
    workouts: list[WorkoutOut]


class TrainingParamsOut(_CamelOut):
    vdot: float
    total_weeks: int = Field(alias="totalWeeks")
    peak_mileage: int = Field(alias="peakMileage")
    paces: PacesOut


class PlanOut(_CamelOut):
    training_params: TrainingParamsOut = Field(alias="trainingParams")
    weeks: list[WeekOut]


class FitnessOut(BaseModel):
    vdot: float
    source: str
    paces: PacesOut


class PredictionOut(BaseModel):
    vdot: float
    distance: str
    predicted_time: str


class SimpleStatusResponse(BaseModel):
    status: str
