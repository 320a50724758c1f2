"""TeamStore: roster, workout plans and practice weeks on top of a repository.

All engine calls (prescription, load aggregation, practice load) go
through ``load_engine``; this module owns ids, timestamps, persistence
and the lookup errors.
"""

from __future__ import annotations

import dataclasses
import json
import logging
import uuid
from datetime import date, datetime, timedelta
from typing import Any, Callable

from load_engine.math.practice_load import week_start_for, weekly_practice_load
from load_engine.math.prescription import prescribe_exercise
from load_engine.math.training_load import (
    load_status,
    load_summary,
    performed_history,
    plan_comparisons,
    weekly_acwr_series,
    weekly_rollup,
)
from load_engine.models.enums import DAYS_PER_WEEK, DEFAULT_ROLLUP_WEEKS, LoadMetric, SessionSlot
from load_engine.models.load_report import (
    LoadStatus,
    LoadSummary,
    PlanComparison,
    WeeklyAcwrPoint,
    WeeklyLoadSummary,
)
from load_engine.models.player import Player, RMProfile, RMTestRecord
from load_engine.models.practice import PracticeDay, PracticeSession, WeekPlan
from load_engine.models.workout import ActualPerformance, WorkoutBlock, WorkoutPlan
from load_engine.serialization.records import (
    plan_from_dict,
    plan_to_dict,
    player_from_dict,
    player_to_dict,
    week_plan_from_dict,
    week_plan_to_dict,
)
from load_engine.validation import parse_physical_data, validate_performance
from team_store import config
from team_store.exceptions import (
    PerformanceExistsError,
    PlanNotFoundError,
    PlanNotSavedError,
    PlayerNotFoundError,
    StorageError,
    WeekPlanNotFoundError,
)
from team_store.repository import KeyValueRepository

logger = logging.getLogger(__name__)

PLAYERS_KEY = "players"
PLANS_KEY = "workoutPlans"
WEEKS_KEY = "weeklyPlans"


def _new_id() -> str:
    return str(uuid.uuid4())


def _week_title(start: date) -> str:
    return f"Week of {start:%b} {start.day}, {start.year}"


_COLLECTIONS: dict[str, tuple[str, Callable[[Any], dict]]] = {
    "players": (PLAYERS_KEY, player_to_dict),
    "plans": (PLANS_KEY, plan_to_dict),
    "weeks": (WEEKS_KEY, week_plan_to_dict),
}


class TeamStore:
    """Service facade for one team's data.

    State is read from *repository* once at construction; every mutation
    writes the affected collection straight back.
    """

    def __init__(
        self,
        repository: KeyValueRepository,
        increment: float = config.WEIGHT_INCREMENT_KG,
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        self._repo = repository
        self._increment = increment
        self._clock = clock
        # Raw entries that failed to parse; written back untouched on every flush
        self._unreadable: dict[str, list] = {}
        self._players: dict[str, Player] = self._load(PLAYERS_KEY, player_from_dict, "player_id")
        self._plans: dict[str, WorkoutPlan] = self._load(PLANS_KEY, plan_from_dict, "plan_id")
        self._weeks: dict[str, WeekPlan] = self._load(WEEKS_KEY, week_plan_from_dict, "week_id")

    # ------------------------------------------------------------------
    # Persistence
    # ------------------------------------------------------------------

    def _load(self, key: str, parse: Callable[[dict], Any], id_attr: str) -> dict:
        raw = self._repo.get(key)
        if raw is None:
            return {}
        if not isinstance(raw, list):
            raise StorageError(f"Expected a list under {key!r}, got {type(raw).__name__}")
        records: dict[str, Any] = {}
        unreadable: list = []
        for entry in raw:
            try:
                record = parse(entry)
            except (KeyError, TypeError, ValueError, AttributeError) as exc:
                logger.warning("Keeping unreadable %s record aside: %s", key, exc)
                unreadable.append(entry)
                continue
            records[getattr(record, id_attr)] = record
        if unreadable:
            self._unreadable[key] = unreadable
        logger.debug("Loaded %d %s records", len(records), key)
        return records

    def _write(self, name: str, records: dict) -> None:
        key, to_dict = _COLLECTIONS[name]
        payload = [to_dict(r) for r in records.values()] + self._unreadable.get(key, [])
        self._repo.put(key, payload)

    def _commit(self, **collections: dict) -> None:
        """Persist replacement collections, then make them current.

        In-memory state changes only after every write succeeded. If a
        later write fails, collections already written are put back.
        """
        written: list[str] = []
        try:
            for name, records in collections.items():
                self._write(name, records)
                written.append(name)
        except StorageError:
            for name in written:
                self._write(name, getattr(self, f"_{name}"))
            raise
        for name, records in collections.items():
            setattr(self, f"_{name}", records)

    # ------------------------------------------------------------------
    # Players
    # ------------------------------------------------------------------

    def add_player(
        self,
        name: str,
        position: str = "",
        jersey_number: int | None = None,
        date_of_birth: date | None = None,
        rm_profile: RMProfile | None = None,
        notes: str = "",
    ) -> Player:
        player = Player(
            player_id=_new_id(),
            name=name,
            position=position,
            jersey_number=jersey_number,
            date_of_birth=date_of_birth,
            rm_profile=rm_profile or RMProfile(),
            notes=notes,
        )
        self._commit(players={**self._players, player.player_id: player})
        logger.info("Added player %s (%s)", player.name, player.player_id)
        return player

    def get_player(self, player_id: str) -> Player:
        try:
            return self._players[player_id]
        except KeyError:
            raise PlayerNotFoundError(player_id) from None

    def list_players(self, active_only: bool = False) -> list[Player]:
        players = [p for p in self._players.values() if p.active or not active_only]
        return sorted(players, key=lambda p: (p.name.lower(), p.player_id))

    def update_player(self, player: Player) -> Player:
        self.get_player(player.player_id)
        self._commit(players={**self._players, player.player_id: player})
        logger.info("Updated player %s", player.player_id)
        return player

    def delete_player(self, player_id: str) -> None:
        """Remove a player together with their workout plans."""
        self.get_player(player_id)
        players = {pid: p for pid, p in self._players.items() if pid != player_id}
        plans = {pid: p for pid, p in self._plans.items() if p.player_id != player_id}
        orphaned = len(self._plans) - len(plans)
        if orphaned:
            self._commit(plans=plans, players=players)
        else:
            self._commit(players=players)
        logger.info("Deleted player %s and %d plan(s)", player_id, orphaned)

    def record_rm_test(
        self,
        player_id: str,
        test_date: date,
        bench_press: object = None,
        squat: object = None,
        deadlift: object = None,
    ) -> Player:
        """Append a strength test and refresh the current RM profile.

        Lifts left blank keep their previous value. A back-dated test is
        added to history without touching the current profile.
        """
        player = self.get_player(player_id)
        tested = RMProfile.from_values(bench_press, squat, deadlift)
        record = RMTestRecord(date=test_date, profile=tested)
        history = tuple(sorted(player.rm_history + (record,), key=lambda r: r.date))

        profile = player.rm_profile
        latest = player.latest_rm_test()
        if latest is None or test_date >= latest.date:
            profile = RMProfile(
                bench_press=tested.bench_press if tested.bench_press is not None else profile.bench_press,
                squat=tested.squat if tested.squat is not None else profile.squat,
                deadlift=tested.deadlift if tested.deadlift is not None else profile.deadlift,
            )
        updated = dataclasses.replace(player, rm_profile=profile, rm_history=history)
        self._commit(players={**self._players, player_id: updated})
        logger.info("Recorded RM test for %s on %s", player_id, test_date.isoformat())
        return updated

    def update_physical_data(self, player_id: str, raw: dict[str, Any]) -> Player:
        """Validate and store height/weight/body-fat entries.

        Raises:
            ValidationError: a field is non-numeric or out of range.
        """
        player = self.get_player(player_id)
        physical = parse_physical_data(raw)
        updated = dataclasses.replace(player, physical=physical)
        self._commit(players={**self._players, player_id: updated})
        logger.info("Updated physical data for %s", player_id)
        return updated

    def export_players(self) -> str:
        return json.dumps([player_to_dict(p) for p in self.list_players()], indent=2)

    def import_players(self, text: str, replace: bool = False) -> int:
        """Load players from an exported JSON string. Returns the number imported.

        Existing players with the same id are overwritten; with
        ``replace=True`` the roster is cleared first.
        """
        try:
            raw = json.loads(text)
            imported = [player_from_dict(entry) for entry in raw]
        except (json.JSONDecodeError, KeyError, TypeError, ValueError, AttributeError) as exc:
            raise StorageError(f"Invalid player export: {exc}") from exc
        players = {} if replace else dict(self._players)
        for player in imported:
            players[player.player_id] = player
        self._commit(players=players)
        logger.info("Imported %d player(s)", len(imported))
        return len(imported)

    # ------------------------------------------------------------------
    # Workout plans
    # ------------------------------------------------------------------

    def new_plan(
        self,
        player_id: str,
        name: str = "",
        target_date: date | None = None,
        description: str = "",
    ) -> WorkoutPlan:
        """Start an unsaved plan with one empty block."""
        self.get_player(player_id)
        return WorkoutPlan(
            plan_id=_new_id(),
            player_id=player_id,
            name=name,
            description=description,
            target_date=target_date,
            blocks=(WorkoutBlock(block_id=_new_id(), name="Block 1"),),
        )

    def add_exercise(
        self,
        plan: WorkoutPlan,
        exercise_id: str,
        intensity_level: object,
        block_id: str | None = None,
    ) -> WorkoutPlan:
        """Return *plan* with a prescribed exercise appended to a block.

        Sets, reps and weight come from the engine using the player's
        current RM profile. Without *block_id* the last block is used.

        Raises:
            ValueError: *block_id* is not a block of *plan*.
        """
        player = self.get_player(plan.player_id)
        planned = prescribe_exercise(
            exercise_id, intensity_level, player.rm_profile, self._increment
        )
        if block_id is None:
            block = plan.blocks[-1] if plan.blocks else WorkoutBlock(block_id=_new_id(), name="Block 1")
        else:
            block = plan.get_block(block_id)
            if block is None:
                raise ValueError(f"Block {block_id} not in plan {plan.plan_id}")
        return plan.with_block(dataclasses.replace(block, exercises=block.exercises + (planned,)))

    def save_plan(self, plan: WorkoutPlan) -> WorkoutPlan:
        """Insert or update a plan.

        On update the stored ``created_at`` and any recorded performance
        are kept; edits to the plan never discard what was performed.
        """
        self.get_player(plan.player_id)
        now = self._clock()
        existing = self._plans.get(plan.plan_id)
        if existing is None:
            saved = dataclasses.replace(plan, created_at=plan.created_at or now, updated_at=now)
            action = "Created"
        else:
            saved = dataclasses.replace(
                plan,
                created_at=existing.created_at,
                actual_performance=existing.actual_performance,
                updated_at=now,
            )
            action = "Updated"
        self._commit(plans={**self._plans, saved.plan_id: saved})
        logger.info("%s workout plan %s for player %s", action, saved.plan_id, saved.player_id)
        return saved

    def get_plan(self, plan_id: str) -> WorkoutPlan:
        try:
            return self._plans[plan_id]
        except KeyError:
            raise PlanNotFoundError(plan_id) from None

    def delete_plan(self, plan_id: str) -> None:
        self.get_plan(plan_id)
        self._commit(plans={pid: p for pid, p in self._plans.items() if pid != plan_id})
        logger.info("Deleted workout plan %s", plan_id)

    def duplicate_plan(self, plan_id: str) -> WorkoutPlan:
        """Copy a plan under a new id, without its recorded performance."""
        source = self.get_plan(plan_id)
        now = self._clock()
        copy = dataclasses.replace(
            source,
            plan_id=_new_id(),
            name=f"{source.name} (Copy)",
            actual_performance=None,
            created_at=now,
            updated_at=now,
        )
        self._commit(plans={**self._plans, copy.plan_id: copy})
        logger.info("Duplicated workout plan %s as %s", plan_id, copy.plan_id)
        return copy

    def player_plans(self, player_id: str) -> list[WorkoutPlan]:
        """A player's plans ordered by target date, undated plans last."""
        self.get_player(player_id)
        plans = [p for p in self._plans.values() if p.player_id == player_id]
        return sorted(
            plans,
            key=lambda p: (
                p.target_date is None,
                p.target_date or date.min,
                p.created_at or datetime.min,
            ),
        )

    def record_performance(
        self,
        plan_id: str,
        performance: ActualPerformance,
        overwrite: bool = False,
    ) -> WorkoutPlan:
        """Attach what was actually done to a saved plan.

        Raises:
            PlanNotSavedError: *plan_id* has not been saved.
            PerformanceExistsError: a performance exists and *overwrite* is False.
            ValidationError: duration or RPE is invalid.
        """
        plan = self._plans.get(plan_id)
        if plan is None:
            raise PlanNotSavedError(plan_id)
        if plan.actual_performance is not None and not overwrite:
            raise PerformanceExistsError(plan_id)
        validate_performance(performance)

        now = self._clock()
        if performance.recorded_at is None:
            performance = dataclasses.replace(performance, recorded_at=now)
        updated = dataclasses.replace(plan, actual_performance=performance, updated_at=now)
        self._commit(plans={**self._plans, plan_id: updated})
        logger.info("Recorded performance for plan %s on %s", plan_id, performance.date.isoformat())
        return updated

    # ------------------------------------------------------------------
    # Load views
    # ------------------------------------------------------------------

    def player_history(self, player_id: str) -> tuple[ActualPerformance, ...]:
        """Performed sessions for a player, oldest first."""
        history = performed_history(self.player_plans(player_id))
        return tuple(sorted(history, key=lambda p: p.date))

    def player_load(
        self,
        player_id: str,
        as_of: date,
        metric: LoadMetric = LoadMetric.VOLUME,
    ) -> LoadStatus:
        return load_status(
            self.player_history(player_id),
            as_of,
            metric,
            acute_days=config.ACUTE_WINDOW_DAYS,
            chronic_days=config.CHRONIC_WINDOW_DAYS,
        )

    def player_weekly_rollup(
        self,
        player_id: str,
        week_count: int = DEFAULT_ROLLUP_WEEKS,
        as_of: date | None = None,
    ) -> list[WeeklyLoadSummary]:
        return weekly_rollup(self.player_history(player_id), week_count=week_count, as_of=as_of)

    def player_acwr_trend(self, player_id: str) -> list[WeeklyAcwrPoint]:
        return weekly_acwr_series(self.player_history(player_id))

    def player_plan_comparisons(self, player_id: str) -> list[PlanComparison]:
        return plan_comparisons(self.player_plans(player_id))

    def player_load_summary(
        self,
        player_id: str,
        as_of: date,
        metric: LoadMetric = LoadMetric.VOLUME,
    ) -> LoadSummary:
        return load_summary(self.player_plans(player_id), as_of, metric)

    # ------------------------------------------------------------------
    # Weekly practice plans
    # ------------------------------------------------------------------

    def create_week_plan(self, start: date, title: str | None = None) -> WeekPlan:
        """Create an empty Sunday-to-Saturday week containing *start*."""
        first = week_start_for(start)
        week = WeekPlan(
            week_id=_new_id(),
            title=title or _week_title(first),
            start_date=first,
            days=tuple(
                PracticeDay(date=first + timedelta(days=offset)) for offset in range(DAYS_PER_WEEK)
            ),
        )
        self._commit(weeks={**self._weeks, week.week_id: week})
        logger.info("Created week plan %s starting %s", week.week_id, first.isoformat())
        return week

    def get_week_plan(self, week_id: str) -> WeekPlan:
        try:
            return self._weeks[week_id]
        except KeyError:
            raise WeekPlanNotFoundError(week_id) from None

    def list_week_plans(self) -> list[WeekPlan]:
        """All practice weeks, most recent first."""
        return sorted(self._weeks.values(), key=lambda w: w.start_date, reverse=True)

    def update_session(
        self,
        week_id: str,
        day_index: int,
        slot: SessionSlot,
        session: PracticeSession,
    ) -> WeekPlan:
        """Replace the morning or evening session of one day.

        Raises:
            ValueError: *day_index* is outside the week.
        """
        week = self.get_week_plan(week_id)
        if not 0 <= day_index < len(week.days):
            raise ValueError(f"Day index {day_index} outside week {week_id}")
        day = week.days[day_index]
        if slot == SessionSlot.MORNING:
            new_day = dataclasses.replace(day, morning=session)
        else:
            new_day = dataclasses.replace(day, evening=session)
        days = week.days[:day_index] + (new_day,) + week.days[day_index + 1 :]
        updated = dataclasses.replace(week, days=days)
        self._commit(weeks={**self._weeks, week_id: updated})
        logger.info("Updated %s session on %s", slot.name.lower(), day.date.isoformat())
        return updated

    def duplicate_week_plan(self, week_id: str) -> WeekPlan:
        """Copy a week's sessions into the following week."""
        source = self.get_week_plan(week_id)
        shift = timedelta(days=DAYS_PER_WEEK)
        start = source.start_date + shift
        copy = WeekPlan(
            week_id=_new_id(),
            title=f"{_week_title(start)} (Copy)",
            start_date=start,
            days=tuple(dataclasses.replace(day, date=day.date + shift) for day in source.days),
        )
        self._commit(weeks={**self._weeks, copy.week_id: copy})
        logger.info("Duplicated week plan %s as %s", week_id, copy.week_id)
        return copy

    def delete_week_plan(self, week_id: str) -> None:
        self.get_week_plan(week_id)
        self._commit(weeks={wid: w for wid, w in self._weeks.items() if wid != week_id})
        logger.info("Deleted week plan %s", week_id)

    def week_load(self, week_id: str) -> float:
        return weekly_practice_load(self.get_week_plan(week_id))
