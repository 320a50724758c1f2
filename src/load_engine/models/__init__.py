"""Data models for the training load engine."""

from load_engine.models.enums import (
    AcwrBand,
    BaseLift,
    IntensityTuning,
    LoadMetric,
    SessionSlot,
    SessionStatus,
)
from load_engine.models.load_report import (
    LoadStatus,
    LoadSummary,
    PlanComparison,
    WeeklyAcwrPoint,
    WeeklyLoadSummary,
)
from load_engine.models.player import PhysicalData, Player, RMProfile, RMTestRecord
from load_engine.models.practice import PracticeDay, PracticeDrill, PracticeSession, WeekPlan
from load_engine.models.prescription import ExerciseLoadSpec, Prescription
from load_engine.models.workout import (
    ActualPerformance,
    LoadSample,
    PerformedBlock,
    PerformedExercise,
    PlannedExercise,
    WorkoutBlock,
    WorkoutPlan,
)

__all__ = [
    "AcwrBand",
    "ActualPerformance",
    "BaseLift",
    "ExerciseLoadSpec",
    "IntensityTuning",
    "LoadMetric",
    "LoadSample",
    "LoadStatus",
    "LoadSummary",
    "PerformedBlock",
    "PerformedExercise",
    "PhysicalData",
    "PlanComparison",
    "PlannedExercise",
    "Player",
    "PracticeDay",
    "PracticeDrill",
    "PracticeSession",
    "Prescription",
    "RMProfile",
    "RMTestRecord",
    "SessionSlot",
    "SessionStatus",
    "WeekPlan",
    "WeeklyAcwrPoint",
    "WeeklyLoadSummary",
    "WorkoutBlock",
    "WorkoutPlan",
]
