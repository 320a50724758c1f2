"""Dict serialization for players, workout plans and practice weeks.

Shapes use camelCase keys and ISO-8601 date strings so stored files stay
readable by the roster web tools. Readers are lenient: missing keys fall
back to model defaults and RM entries are normalized through
``RMProfile.from_values``.

All functions are pure (no I/O).
"""

from __future__ import annotations

from datetime import date, datetime
from typing import Any

from load_engine.models.enums import SessionStatus
from load_engine.models.player import PhysicalData, Player, RMProfile, RMTestRecord
from load_engine.models.practice import PracticeDay, PracticeDrill, PracticeSession, WeekPlan
from load_engine.models.workout import (
    ActualPerformance,
    PerformedBlock,
    PerformedExercise,
    PlannedExercise,
    WorkoutBlock,
    WorkoutPlan,
)

# ---------------------------------------------------------------------------
# Scalars
# ---------------------------------------------------------------------------


def _date_to_str(value: date | None) -> str | None:
    return value.isoformat() if value is not None else None


def _date_from_str(value: Any) -> date | None:
    if not value:
        return None
    # Accept full timestamps ("2024-03-01T10:00:00.000Z") as well as dates.
    return date.fromisoformat(str(value)[:10])


def _datetime_to_str(value: datetime | None) -> str | None:
    return value.isoformat() if value is not None else None


def _datetime_from_str(value: Any) -> datetime | None:
    if not value:
        return None
    text = str(value)
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    return datetime.fromisoformat(text)


def _opt_float(value: Any) -> float | None:
    if value is None or value == "":
        return None
    return float(value)


def _float(value: Any, default: float = 0.0) -> float:
    if value is None or value == "":
        return default
    return float(value)


def _int(value: Any, default: int = 0) -> int:
    if value is None or value == "":
        return default
    return int(value)


# ---------------------------------------------------------------------------
# Players
# ---------------------------------------------------------------------------


def rm_profile_to_dict(profile: RMProfile) -> dict:
    return {
        "benchPress": profile.bench_press,
        "squat": profile.squat,
        "deadlift": profile.deadlift,
    }


def rm_profile_from_dict(data: dict | None) -> RMProfile:
    data = data or {}
    return RMProfile.from_values(
        bench_press=data.get("benchPress"),
        squat=data.get("squat"),
        deadlift=data.get("deadlift"),
    )


def player_to_dict(player: Player) -> dict:
    """Convert a Player to its stored JSON shape."""
    return {
        "id": player.player_id,
        "name": player.name,
        "position": player.position,
        "jerseyNumber": player.jersey_number,
        "dateOfBirth": _date_to_str(player.date_of_birth),
        "height": player.physical.height_cm,
        "weight": player.physical.weight_kg,
        "fatPercentage": player.physical.body_fat_pct,
        "rmData": rm_profile_to_dict(player.rm_profile),
        "rmHistory": [
            {"date": _date_to_str(record.date), **rm_profile_to_dict(record.profile)}
            for record in player.rm_history
        ],
        "notes": player.notes,
        "active": player.active,
    }


def player_from_dict(data: dict) -> Player:
    """Build a Player from a stored dict.

    Raises:
        KeyError: if ``id`` is missing.
    """
    jersey = data.get("jerseyNumber")
    history = tuple(
        RMTestRecord(date=_date_from_str(entry["date"]), profile=rm_profile_from_dict(entry))
        for entry in data.get("rmHistory") or []
        if entry.get("date")
    )
    return Player(
        player_id=str(data["id"]),
        name=data.get("name", ""),
        position=data.get("position") or "",
        jersey_number=int(jersey) if jersey not in (None, "") else None,
        date_of_birth=_date_from_str(data.get("dateOfBirth")),
        physical=PhysicalData(
            height_cm=_opt_float(data.get("height")),
            weight_kg=_opt_float(data.get("weight")),
            body_fat_pct=_opt_float(data.get("fatPercentage")),
        ),
        rm_profile=rm_profile_from_dict(data.get("rmData")),
        rm_history=tuple(sorted(history, key=lambda r: r.date)),
        active=bool(data.get("active", True)),
        notes=data.get("notes") or "",
    )


# ---------------------------------------------------------------------------
# Workout plans
# ---------------------------------------------------------------------------


def _planned_exercise_to_dict(exercise: PlannedExercise) -> dict:
    return {
        "exerciseId": exercise.exercise_id,
        "sets": exercise.sets,
        "reps": exercise.reps,
        "weight": exercise.weight,
        "notes": exercise.notes,
    }


def _planned_exercise_from_dict(data: dict) -> PlannedExercise:
    return PlannedExercise(
        exercise_id=data["exerciseId"],
        sets=_int(data.get("sets")),
        reps=_int(data.get("reps")),
        weight=_float(data.get("weight")),
        notes=data.get("notes") or "",
    )


def performance_to_dict(performance: ActualPerformance) -> dict:
    """Convert an ActualPerformance to its stored JSON shape."""
    return {
        "date": _date_to_str(performance.date),
        "rpe": performance.rpe,
        "duration": performance.duration_minutes,
        "blocks": [
            {
                "id": block.block_id,
                "exercises": [
                    {
                        "exerciseId": ex.exercise_id,
                        "actualSets": ex.actual_sets,
                        "actualReps": ex.actual_reps,
                        "actualWeight": ex.actual_weight,
                    }
                    for ex in block.exercises
                ],
            }
            for block in performance.blocks
        ],
        "notes": performance.notes,
        "recordedAt": _datetime_to_str(performance.recorded_at),
    }


def performance_from_dict(data: dict) -> ActualPerformance:
    """Build an ActualPerformance; missing numeric fields read as 0."""
    blocks = tuple(
        PerformedBlock(
            block_id=str(block.get("id", "")),
            exercises=tuple(
                PerformedExercise(
                    exercise_id=ex["exerciseId"],
                    actual_sets=_int(ex.get("actualSets")),
                    actual_reps=_int(ex.get("actualReps")),
                    actual_weight=_float(ex.get("actualWeight")),
                )
                for ex in block.get("exercises") or []
            ),
        )
        for block in data.get("blocks") or []
    )
    return ActualPerformance(
        date=_date_from_str(data["date"]),
        rpe=_float(data.get("rpe")),
        duration_minutes=_float(data.get("duration")),
        blocks=blocks,
        notes=data.get("notes") or "",
        recorded_at=_datetime_from_str(data.get("recordedAt")),
    )


def plan_to_dict(plan: WorkoutPlan) -> dict:
    """Convert a WorkoutPlan to its stored JSON shape."""
    return {
        "id": plan.plan_id,
        "playerId": plan.player_id,
        "name": plan.name,
        "description": plan.description,
        "targetDate": _date_to_str(plan.target_date),
        "blocks": [
            {
                "id": block.block_id,
                "name": block.name,
                "exercises": [_planned_exercise_to_dict(ex) for ex in block.exercises],
            }
            for block in plan.blocks
        ],
        "actualPerformance": (
            performance_to_dict(plan.actual_performance)
            if plan.actual_performance is not None
            else None
        ),
        "createdAt": _datetime_to_str(plan.created_at),
        "updatedAt": _datetime_to_str(plan.updated_at),
    }


def plan_from_dict(data: dict) -> WorkoutPlan:
    performance = data.get("actualPerformance")
    return WorkoutPlan(
        plan_id=str(data["id"]),
        player_id=str(data.get("playerId", "")),
        name=data.get("name") or "",
        description=data.get("description") or "",
        target_date=_date_from_str(data.get("targetDate")),
        blocks=tuple(
            WorkoutBlock(
                block_id=str(block.get("id", "")),
                name=block.get("name") or "",
                exercises=tuple(
                    _planned_exercise_from_dict(ex) for ex in block.get("exercises") or []
                ),
            )
            for block in data.get("blocks") or []
        ),
        actual_performance=performance_from_dict(performance) if performance else None,
        created_at=_datetime_from_str(data.get("createdAt")),
        updated_at=_datetime_from_str(data.get("updatedAt")),
    )


# ---------------------------------------------------------------------------
# Practice weeks
# ---------------------------------------------------------------------------


def _drill_to_dict(drill: PracticeDrill) -> dict:
    return {
        "name": drill.name,
        "workTime": drill.work_time,
        "totalTime": drill.total_time,
        "numberOfFields": drill.number_of_fields,
        "contact": drill.contact,
        "perceivedIntensity": drill.perceived_intensity,
    }


def _drill_from_dict(data: dict) -> PracticeDrill:
    return PracticeDrill(
        name=data.get("name") or "",
        work_time=_float(data.get("workTime")),
        total_time=_float(data.get("totalTime")),
        number_of_fields=_float(data.get("numberOfFields"), default=1.0),
        contact=bool(data.get("contact", False)),
        perceived_intensity=_opt_float(data.get("perceivedIntensity")),
    )


def _session_to_dict(session: PracticeSession) -> dict:
    return {
        "title": session.title,
        "description": session.description,
        "duration": session.duration,
        "intensity": session.intensity,
        "status": session.status.name.lower(),
        "numberOfFields": session.number_of_fields,
        "drills": [_drill_to_dict(d) for d in session.drills],
        "sequences": session.sequences,
    }


def _session_from_dict(data: dict | None) -> PracticeSession:
    data = data or {}
    status = str(data.get("status") or "planned").upper()
    return PracticeSession(
        title=data.get("title") or "",
        description=data.get("description") or "",
        duration=_float(data.get("duration")),
        intensity=_float(data.get("intensity")),
        status=SessionStatus[status] if status in SessionStatus.__members__ else SessionStatus.PLANNED,
        number_of_fields=_float(data.get("numberOfFields"), default=1.0),
        drills=tuple(_drill_from_dict(d) for d in data.get("drills") or []),
        sequences=data.get("sequences") or "",
    )


def week_plan_to_dict(week: WeekPlan) -> dict:
    """Convert a WeekPlan to its stored JSON shape."""
    return {
        "id": week.week_id,
        "title": week.title,
        "startDate": _date_to_str(week.start_date),
        "days": [
            {
                "date": _date_to_str(day.date),
                "morning": _session_to_dict(day.morning),
                "evening": _session_to_dict(day.evening),
            }
            for day in week.days
        ],
    }


def week_plan_from_dict(data: dict) -> WeekPlan:
    return WeekPlan(
        week_id=str(data["id"]),
        title=data.get("title") or "",
        start_date=_date_from_str(data["startDate"]),
        days=tuple(
            PracticeDay(
                date=_date_from_str(day["date"]),
                morning=_session_from_dict(day.get("morning")),
                evening=_session_from_dict(day.get("evening")),
            )
            for day in data.get("days") or []
        ),
    )
