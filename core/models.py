from __future__ import annotations

import datetime as dt
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional


class RaceDistance(str, Enum):
    FIVE_K = "5K"
    TEN_K = "10K"
    HALF = "half"
    FULL = "full"

    @property
    def km(self) -> float:
        return _RACE_KM[self]

    @property
    def label(self) -> str:
        return _RACE_LABELS[self]


_RACE_KM = {
    RaceDistance.FIVE_K: 5.0,
    RaceDistance.TEN_K: 10.0,
    RaceDistance.HALF: 21.0975,
    RaceDistance.FULL: 42.195,
}
_RACE_LABELS = {
    RaceDistance.FIVE_K: "5 km",
    RaceDistance.TEN_K: "10 km",
    RaceDistance.HALF: "Half Marathon",
    RaceDistance.FULL: "Marathon",
}


class Phase(str, Enum):
    BASE = "base"
    BUILD = "build"
    PEAK = "peak"
    TAPER = "taper"

    @property
    def label(self) -> str:
        return {
            Phase.BASE: "Base",
            Phase.BUILD: "Build",
            Phase.PEAK: "Peak",
            Phase.TAPER: "Taper",
        }[self]


PHASE_ORDER = (Phase.BASE, Phase.BUILD, Phase.PEAK, Phase.TAPER)


class WorkoutType(str, Enum):
    EASY = "easy"
    LONG = "long"
    TEMPO = "tempo"
    INTERVAL = "interval"
    RECOVERY = "recovery"
    REST = "rest"
    RACE = "race"

    @property
    def label(self) -> str:
        return {
            WorkoutType.EASY: "Easy Run",
            WorkoutType.LONG: "Long Run",
            WorkoutType.TEMPO: "Tempo Run",
            WorkoutType.INTERVAL: "Intervals",
            WorkoutType.RECOVERY: "Recovery Run",
            WorkoutType.REST: "Rest Day",
            WorkoutType.RACE: "Race Day",
        }[self]

    @property
    def is_quality(self) -> bool:
        return self in (WorkoutType.TEMPO, WorkoutType.INTERVAL)


class SegmentType(str, Enum):
    WARMUP = "warmup"
    MAIN = "main"
    COOLDOWN = "cooldown"
    RECOVERY = "recovery"


@dataclass(frozen=True)
class Paces:
    """Formatted training paces, min:sec per km. ``easy`` is a ``lo-hi`` range."""
    easy: str
    marathon: str
    threshold: str
    interval: str
    repetition: str

    @property
    def easy_upper(self) -> str:
        parts = self.easy.split("-")
        return parts[1] if len(parts) == 2 and parts[1] else self.easy


@dataclass(frozen=True)
class Segment:
    type: SegmentType
    distance: Optional[float] = None
    duration: Optional[int] = None
    pace: Optional[str] = None
    repeat: Optional[int] = None


@dataclass(frozen=True)
class Workout:
    day_of_week: int  # 1 = Monday .. 7 = Sunday
    date: dt.date
    type: WorkoutType
    title: str
    description: str
    distance: Optional[float] = None
    duration: Optional[int] = None
    target_pace: Optional[str] = None
    segments: Optional[tuple[Segment, ...]] = None
    completed: bool = False


@dataclass(frozen=True)
class Week:
    week_number: int
    phase: Phase
    phase_week: int
    total_mileage: int
    workouts: tuple[Workout, ...]

    @property
    def start_date(self) -> dt.date:
        return self.workouts[0].date


@dataclass(frozen=True)
class PlanConfig:
    race_date: dt.date
    race_distance: RaceDistance
    current_mileage: float
    days_per_week: int
    hours_per_session: float = 1.0
    running_age_months: int = 0
    target_time: Optional[str] = None
    recent_race_time: Optional[str] = None
    recent_race_distance: Optional[RaceDistance] = None


@dataclass(frozen=True)
class TrainingParams:
    vdot: float
    total_weeks: int
    peak_mileage: int
    paces: Paces


@dataclass(frozen=True)
class TrainingPlan:
    training_params: TrainingParams
    weeks: tuple[Week, ...] = field(default_factory=tuple)
