"""Tests for record dict serialization."""

from __future__ import annotations

from datetime import date, datetime

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
from load_engine.serialization.records import (
    performance_from_dict,
    plan_from_dict,
    plan_to_dict,
    player_from_dict,
    player_to_dict,
    week_plan_from_dict,
    week_plan_to_dict,
)


def _player() -> Player:
    return Player(
        player_id="p1",
        name="Ana Ruiz",
        position="SF",
        jersey_number=7,
        date_of_birth=date(2001, 4, 2),
        physical=PhysicalData(198.0, 92.5, 10.0),
        rm_profile=RMProfile(bench_press=100.0, squat=160.0),
        rm_history=(RMTestRecord(date(2024, 1, 10), RMProfile(bench_press=100.0, squat=160.0)),),
    )


class TestPlayerRecords:
    def test_camel_case_shape(self) -> None:
        data = player_to_dict(_player())
        assert data["jerseyNumber"] == 7
        assert data["dateOfBirth"] == "2001-04-02"
        assert data["fatPercentage"] == 10.0
        assert data["rmData"] == {"benchPress": 100.0, "squat": 160.0, "deadlift": None}
        assert data["rmHistory"][0]["date"] == "2024-01-10"

    def test_round_trip(self) -> None:
        player = _player()
        assert player_from_dict(player_to_dict(player)) == player

    def test_lenient_reader(self) -> None:
        player = player_from_dict(
            {
                "id": 12,
                "name": "Bo",
                "jerseyNumber": "",
                "dateOfBirth": "1999-05-01T00:00:00.000Z",
                "rmData": {"benchPress": 0, "squat": "140"},
            }
        )
        assert player.player_id == "12"
        assert player.jersey_number is None
        assert player.date_of_birth == date(1999, 5, 1)
        assert player.rm_profile == RMProfile(squat=140.0)
        assert player.active


class TestPlanRecords:
    def test_round_trip_with_performance(self) -> None:
        performance = ActualPerformance(
            date=date(2024, 3, 4),
            rpe=7.0,
            duration_minutes=55.0,
            blocks=(PerformedBlock("b1", (PerformedExercise("back-squat", 3, 5, 120.0),)),),
            recorded_at=datetime(2024, 3, 4, 18, 0),
        )
        plan = WorkoutPlan(
            plan_id="w1",
            player_id="p1",
            name="Lower A",
            target_date=date(2024, 3, 4),
            blocks=(WorkoutBlock("b1", "Main", (PlannedExercise("back-squat", 3, 5, 120.0),)),),
            actual_performance=performance,
            created_at=datetime(2024, 3, 1, 9, 0),
        )
        data = plan_to_dict(plan)
        assert data["actualPerformance"]["duration"] == 55.0
        assert data["blocks"][0]["exercises"][0]["exerciseId"] == "back-squat"
        assert plan_from_dict(data) == plan

    def test_performance_reader_handles_utc_suffix(self) -> None:
        performance = performance_from_dict(
            {"date": "2024-03-04T17:00:00.000Z", "rpe": "8", "recordedAt": "2024-03-04T18:00:00Z"}
        )
        assert performance.date == date(2024, 3, 4)
        assert performance.rpe == 8.0
        assert performance.duration_minutes == 0.0
        assert performance.recorded_at is not None
        assert performance.recorded_at.utcoffset() is not None


class TestWeekPlanRecords:
    def test_round_trip(self) -> None:
        session = PracticeSession(
            title="Team",
            duration=90,
            intensity=6,
            status=SessionStatus.COMPLETED,
            drills=(PracticeDrill("5v5", 8, 10, 2, True, 7.0),),
        )
        week = WeekPlan("wk1", "Week of Mar 3, 2024", date(2024, 3, 3), (PracticeDay(date(2024, 3, 3), morning=session),))
        data = week_plan_to_dict(week)
        assert data["days"][0]["morning"]["status"] == "completed"
        assert data["days"][0]["morning"]["drills"][0]["workTime"] == 8
        assert week_plan_from_dict(data) == week

    def test_unknown_status_reads_as_planned(self) -> None:
        week = week_plan_from_dict(
            {"id": "w", "startDate": "2024-03-03", "days": [{"date": "2024-03-03", "morning": {"status": "moved"}}]}
        )
        assert week.days[0].morning.status == SessionStatus.PLANNED
