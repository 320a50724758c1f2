"""Workout plans and recorded performances.

A WorkoutPlan groups PlannedExercises into ordered blocks and owns at
most one ActualPerformance. Plans are replaced, not mutated: editing
helpers return a new plan via ``dataclasses.replace``.
"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field
from datetime import date, datetime


@dataclass(frozen=True)
class PlannedExercise:
    """A line item in a workout block.

    ``weight`` is engine-computed when the exercise is added and may be
    overridden by the coach afterwards.
    """

    exercise_id: str
    sets: int
    reps: int
    weight: float
    notes: str = ""

    @property
    def volume(self) -> float:
        return float(max(0, self.sets) * max(0, self.reps)) * max(0.0, self.weight)


@dataclass(frozen=True)
class WorkoutBlock:
    block_id: str
    name: str = ""
    exercises: tuple[PlannedExercise, ...] = field(default_factory=tuple)

    @property
    def planned_volume(self) -> float:
        return sum(ex.volume for ex in self.exercises)


@dataclass(frozen=True)
class PerformedExercise:
    exercise_id: str
    actual_sets: int
    actual_reps: int
    actual_weight: float

    @property
    def volume(self) -> float:
        return (
            float(max(0, self.actual_sets) * max(0, self.actual_reps))
            * max(0.0, self.actual_weight)
        )


@dataclass(frozen=True)
class PerformedBlock:
    block_id: str
    exercises: tuple[PerformedExercise, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class ActualPerformance:
    """What was actually done for a plan. Recorded at most once per plan."""

    date: date
    rpe: float
    duration_minutes: float
    blocks: tuple[PerformedBlock, ...] = field(default_factory=tuple)
    notes: str = ""
    recorded_at: datetime | None = None

    @property
    def volume(self) -> float:
        """Total sets x reps x weight across all blocks."""
        return sum(ex.volume for block in self.blocks for ex in block.exercises)

    @property
    def session_load(self) -> float:
        """Session-RPE load: RPE x duration."""
        return max(0.0, self.rpe) * max(0.0, self.duration_minutes)


@dataclass(frozen=True)
class LoadSample:
    """Per-session volume point used only for aggregation."""

    date: date
    volume: float


@dataclass(frozen=True)
class WorkoutPlan:
    """A player's planned gym session."""

    plan_id: str
    player_id: str
    name: str = ""
    description: str = ""
    target_date: date | None = None
    blocks: tuple[WorkoutBlock, ...] = field(default_factory=tuple)
    actual_performance: ActualPerformance | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @property
    def is_saved(self) -> bool:
        return self.created_at is not None

    @property
    def planned_volume(self) -> float:
        return sum(block.planned_volume for block in self.blocks)

    def get_block(self, block_id: str) -> WorkoutBlock | None:
        for block in self.blocks:
            if block.block_id == block_id:
                return block
        return None

    def with_block(self, block: WorkoutBlock) -> WorkoutPlan:
        """Return a copy with *block* appended, or replaced if its id exists."""
        if self.get_block(block.block_id) is None:
            return dataclasses.replace(self, blocks=self.blocks + (block,))
        blocks = tuple(block if b.block_id == block.block_id else b for b in self.blocks)
        return dataclasses.replace(self, blocks=blocks)

    def without_block(self, block_id: str) -> WorkoutPlan:
        return dataclasses.replace(
            self, blocks=tuple(b for b in self.blocks if b.block_id != block_id)
        )
