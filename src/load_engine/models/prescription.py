"""Derived prescription records: intensity targets and exercise load specs."""

from __future__ import annotations

from dataclasses import dataclass

from load_engine.models.enums import BaseLift, IntensityTuning


@dataclass(frozen=True)
class Prescription:
    """Targets for one intensity level. Derived on demand, never stored."""

    level: int
    percent_of_1rm: float  # fraction in (0, 1]
    reps_low: int
    reps_high: int
    sets: int
    tuning: IntensityTuning

    @property
    def rep_range(self) -> str:
        return f"{self.reps_low}-{self.reps_high}"


@dataclass(frozen=True)
class ExerciseLoadSpec:
    """How an exercise's working weight relates to a tested base lift.

    ``base_lift=None`` marks an exercise as unmapped: it carries no
    prescribable external load and always resolves to 0 kg.
    """

    exercise_id: str
    base_lift: BaseLift | None
    transfer_coefficient: float = 0.0

    @property
    def is_mapped(self) -> bool:
        return self.base_lift is not None and self.transfer_coefficient > 0
