"""Shared test fixtures: RM profiles, performed sessions, an in-memory store."""

from __future__ import annotations

from datetime import date, datetime
from typing import Callable

import pytest

from load_engine.models.player import RMProfile
from load_engine.models.workout import ActualPerformance, PerformedBlock, PerformedExercise
from team_store.repository import InMemoryRepository
from team_store.store import TeamStore


@pytest.fixture
def tested_profile() -> RMProfile:
    """Senior forward: bench 100, squat 200, deadlift 180."""
    return RMProfile(bench_press=100.0, squat=200.0, deadlift=180.0)


@pytest.fixture
def empty_profile() -> RMProfile:
    """New signing with no strength testing yet."""
    return RMProfile()


@pytest.fixture
def make_session() -> Callable[..., ActualPerformance]:
    """Build a performed session whose volume is exactly *volume* (one exercise, 1 x 10 reps)."""

    def _make(
        day: date,
        volume: float = 1000.0,
        rpe: float = 7.0,
        duration: float = 60.0,
    ) -> ActualPerformance:
        exercise = PerformedExercise(
            exercise_id="back-squat",
            actual_sets=1,
            actual_reps=10,
            actual_weight=volume / 10,
        )
        return ActualPerformance(
            date=day,
            rpe=rpe,
            duration_minutes=duration,
            blocks=(PerformedBlock(block_id="b1", exercises=(exercise,)),),
        )

    return _make


@pytest.fixture
def fixed_clock() -> Callable[[], datetime]:
    return lambda: datetime(2024, 3, 1, 9, 30)


@pytest.fixture
def repository() -> InMemoryRepository:
    return InMemoryRepository()


@pytest.fixture
def store(repository, fixed_clock) -> TeamStore:
    return TeamStore(repository, increment=2.5, clock=fixed_clock)
