"""Player records: strength profile, physical data and test history."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date

from load_engine.models.enums import BaseLift


def _positive_or_none(value: object) -> float | None:
    """Coerce a raw RM entry to a positive float, or None when absent/invalid."""
    if value is None or isinstance(value, bool):
        return None
    try:
        number = float(value)  # type: ignore[arg-type]
    except (TypeError, ValueError):
        return None
    if number != number or number <= 0:  # NaN or non-positive
        return None
    return number


@dataclass(frozen=True)
class RMProfile:
    """One-rep-max estimates (kg) for the three base lifts.

    Each value is either a positive number or None. A newly created
    player has no profile data, which is a normal state.
    """

    bench_press: float | None = None
    squat: float | None = None
    deadlift: float | None = None

    @classmethod
    def from_values(
        cls,
        bench_press: object = None,
        squat: object = None,
        deadlift: object = None,
    ) -> RMProfile:
        """Build a profile, normalizing zero/negative/garbage entries to None."""
        return cls(
            bench_press=_positive_or_none(bench_press),
            squat=_positive_or_none(squat),
            deadlift=_positive_or_none(deadlift),
        )

    def get(self, lift: BaseLift) -> float | None:
        if lift == BaseLift.BENCH_PRESS:
            return self.bench_press
        if lift == BaseLift.SQUAT:
            return self.squat
        return self.deadlift

    @property
    def is_empty(self) -> bool:
        return self.bench_press is None and self.squat is None and self.deadlift is None


@dataclass(frozen=True)
class RMTestRecord:
    """A single dated strength test."""

    date: date
    profile: RMProfile


@dataclass(frozen=True)
class PhysicalData:
    """Anthropometrics entered by staff. Validated by load_engine.validation."""

    height_cm: float | None = None
    weight_kg: float | None = None
    body_fat_pct: float | None = None


@dataclass(frozen=True)
class Player:
    """Roster entry for one player."""

    player_id: str
    name: str
    position: str = ""  # PG, SG, SF, PF, C
    jersey_number: int | None = None
    date_of_birth: date | None = None
    physical: PhysicalData = field(default_factory=PhysicalData)
    rm_profile: RMProfile = field(default_factory=RMProfile)
    rm_history: tuple[RMTestRecord, ...] = field(default_factory=tuple)
    active: bool = True
    notes: str = ""

    def age(self, on: date) -> int | None:
        """Age in whole years on *on*, or None without a birth date."""
        if self.date_of_birth is None:
            return None
        dob = self.date_of_birth
        years = on.year - dob.year
        if (on.month, on.day) < (dob.month, dob.day):
            years -= 1
        return years

    def latest_rm_test(self) -> RMTestRecord | None:
        if not self.rm_history:
            return None
        return max(self.rm_history, key=lambda r: r.date)
