"""Pydantic validation models for plan-generation entry points.

The engine itself never rejects input; these models are the caller-side
guard that keeps it on its documented domain.
"""

from __future__ import annotations

import re
from datetime import date
from typing import Optional

from pydantic import BaseModel, Field, field_validator, model_validator

from core.models import PlanConfig, RaceDistance

TIME_PATTERN = re.compile(r"^\d{1,3}(:[0-5]\d){1,2}$")


class PlanInputError(ValueError):
    """Input that only fails against the plan's anchor date."""


def _check_time(v: Optional[str]) -> Optional[str]:
    if v is None:
        return v
    v = v.strip()
    if not v:
        return None
    if not TIME_PATTERN.match(v):
        raise ValueError("time must be m:ss or h:mm:ss")
    return v


class PlanCreateInput(BaseModel):
    race_date: date
    race_distance: RaceDistance
    target_time: Optional[str] = None
    current_mileage: float = Field(ge=0, le=300)
    days_per_week: int = Field(ge=3, le=7)
    hours_per_session: float = Field(default=1.0, gt=0, le=6)
    recent_race_time: Optional[str] = None
    recent_race_distance: Optional[RaceDistance] = None
    running_age_months: int = Field(default=0, ge=0, le=900)

    @field_validator("target_time", "recent_race_time")
    @classmethod
    def valid_time(cls, v):
        return _check_time(v)

    @model_validator(mode="after")
    def recent_race_pair(self):
        if (self.recent_race_time is None) != (self.recent_race_distance is None):
            raise ValueError("recent_race_time and recent_race_distance must be given together")
        return self

    def check_race_date(self, today: Optional[date] = None) -> None:
        today = today or date.today()
        if self.race_date < today:
            raise PlanInputError(f"race_date {self.race_date.isoformat()} is before {today.isoformat()}")

    def to_config(self) -> PlanConfig:
        return PlanConfig(
            race_date=self.race_date,
            race_distance=self.race_distance,
            current_mileage=self.current_mileage,
            days_per_week=self.days_per_week,
            hours_per_session=self.hours_per_session,
            running_age_months=self.running_age_months,
            target_time=self.target_time,
            recent_race_time=self.recent_race_time,
            recent_race_distance=self.recent_race_distance,
        )


class FitnessInput(BaseModel):
    weekly_mileage: float = Field(default=0, ge=0, le=300)
    running_age_months: int = Field(default=0, ge=0, le=900)
    recent_race_time: Optional[str] = None
    recent_race_distance: Optional[RaceDistance] = None

    @field_validator("recent_race_time")
    @classmethod
    def valid_time(cls, v):
        return _check_time(v)

    @model_validator(mode="after")
    def recent_race_pair(self):
        if (self.recent_race_time is None) != (self.recent_race_distance is None):
            raise ValueError("recent_race_time and recent_race_distance must be given together")
        return self
