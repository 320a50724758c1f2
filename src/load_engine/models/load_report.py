"""Aggregated load views produced by load_engine.math.training_load."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from load_engine.models.enums import AcwrBand


@dataclass(frozen=True)
class WeeklyLoadSummary:
    """One calendar week (Monday start) of performed sessions."""

    week_label: str
    week_start: date
    workout_count: int
    avg_rpe: float
    total_duration: float
    total_load: float  # sum of RPE x duration
    total_volume: float  # sum of sets x reps x weight


@dataclass(frozen=True)
class WeeklyAcwrPoint:
    """Week-resolution ACWR: this week's volume over the 4-week mean."""

    week_start: date
    acute_load: float
    chronic_load: float
    acwr: float


@dataclass(frozen=True)
class PlanComparison:
    """Planned vs. actually performed volume for one workout plan."""

    plan_id: str
    plan_name: str
    performed_on: date
    planned_volume: float
    actual_volume: float
    difference: float
    percent_difference: int  # 0 when nothing was planned
    rpe: float
    duration_minutes: float


@dataclass(frozen=True)
class LoadStatus:
    """Rolling load snapshot for one player on one day."""

    as_of: date
    acute_load: float
    chronic_load: float
    acwr: float
    band: AcwrBand


@dataclass(frozen=True)
class LoadSummary:
    """Headline numbers for a player's performed workouts."""

    total_workouts: int
    avg_completion_pct: int
    avg_rpe: float
    current_acwr: float
