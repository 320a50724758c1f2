"""Weekly practice schedule: drills, sessions, days and week plans."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date

from load_engine.models.enums import SessionSlot, SessionStatus


@dataclass(frozen=True)
class PracticeDrill:
    """A court drill inside a practice session. Times are in minutes."""

    name: str
    work_time: float
    total_time: float
    number_of_fields: float = 1.0
    contact: bool = False
    perceived_intensity: float | None = None


@dataclass(frozen=True)
class PracticeSession:
    title: str = ""
    description: str = ""
    duration: float = 0.0
    intensity: float = 0.0
    status: SessionStatus = SessionStatus.PLANNED
    number_of_fields: float = 1.0
    drills: tuple[PracticeDrill, ...] = field(default_factory=tuple)
    sequences: str = ""


@dataclass(frozen=True)
class PracticeDay:
    date: date
    morning: PracticeSession = field(default_factory=PracticeSession)
    evening: PracticeSession = field(default_factory=PracticeSession)

    def session(self, slot: SessionSlot) -> PracticeSession:
        return self.morning if slot == SessionSlot.MORNING else self.evening

    @property
    def sessions(self) -> tuple[PracticeSession, PracticeSession]:
        return (self.morning, self.evening)


@dataclass(frozen=True)
class WeekPlan:
    """Seven practice days, Sunday through Saturday."""

    week_id: str
    title: str
    start_date: date
    days: tuple[PracticeDay, ...] = field(default_factory=tuple)

    @property
    def end_date(self) -> date:
        if self.days:
            return self.days[-1].date
        return self.start_date
