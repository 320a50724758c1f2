"""Planned load for court practice sessions on the weekly schedule.

Drill intensity is a density estimate: the work fraction of the drill,
scaled by how many fields (half-courts) are in use and by a contact
multiplier. Session load adds the coach's session-level intensity x
duration to the drill contributions.
"""

from __future__ import annotations

from datetime import date, timedelta

from load_engine.models.enums import (
    CONTACT_DRILL_MULTIPLIER,
    FIELDS_NORMALIZER,
    NON_CONTACT_DRILL_MULTIPLIER,
)
from load_engine.models.practice import PracticeDrill, PracticeSession, WeekPlan


def drill_planned_intensity(drill: PracticeDrill) -> float:
    """(work / total) x (fields / 2) x contact multiplier, to one decimal.

    A drill without a total time has no defined density and scores 0.
    """
    if not drill.total_time or drill.total_time <= 0:
        return 0.0
    multiplier = CONTACT_DRILL_MULTIPLIER if drill.contact else NON_CONTACT_DRILL_MULTIPLIER
    density = (drill.work_time / drill.total_time) * (drill.number_of_fields / FIELDS_NORMALIZER)
    return round(density * multiplier, 1)


def intensity_difference(planned: float, perceived: float | None) -> float | None:
    """Perceived minus planned intensity; None until players report RPE."""
    if not perceived:
        return None
    return round(perceived - planned, 1)


def session_planned_load(session: PracticeSession) -> float:
    """Session intensity x duration plus each drill's intensity x total time."""
    load = (session.intensity or 0.0) * (session.duration or 0.0)
    for drill in session.drills:
        load += drill_planned_intensity(drill) * (drill.total_time or 0.0)
    return load


def weekly_practice_load(week: WeekPlan) -> float:
    """Total planned load across both sessions of every day in the week."""
    return sum(
        session_planned_load(session)
        for day in week.days
        for session in day.sessions
    )


def week_start_for(day: date) -> date:
    """Sunday on or before *day*; practice weeks run Sunday to Saturday."""
    days_since_sunday = (day.weekday() + 1) % 7
    return day - timedelta(days=days_since_sunday)
