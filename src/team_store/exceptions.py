"""Custom exception hierarchy for the team data store."""

from __future__ import annotations


class TeamStoreError(Exception):
    """Base exception for all team_store errors."""


class PlayerNotFoundError(TeamStoreError):
    """No player with the requested id."""

    def __init__(self, player_id: str) -> None:
        super().__init__(f"Player not found: {player_id}")
        self.player_id = player_id


class PlanNotFoundError(TeamStoreError):
    """No workout plan with the requested id."""

    def __init__(self, plan_id: str) -> None:
        super().__init__(f"Workout plan not found: {plan_id}")
        self.plan_id = plan_id


class WeekPlanNotFoundError(TeamStoreError):
    """No practice week with the requested id."""

    def __init__(self, week_id: str) -> None:
        super().__init__(f"Week plan not found: {week_id}")
        self.week_id = week_id


class PlanNotSavedError(PlanNotFoundError):
    """Performance can only be recorded against a plan that has been saved."""

    def __init__(self, plan_id: str) -> None:
        TeamStoreError.__init__(self, f"Save workout plan {plan_id} before recording performance")
        self.plan_id = plan_id


class PerformanceExistsError(TeamStoreError):
    """The plan already has a recorded performance and overwrite was not requested."""

    def __init__(self, plan_id: str) -> None:
        super().__init__(f"Performance already recorded for plan {plan_id}")
        self.plan_id = plan_id


class StorageError(TeamStoreError):
    """Stored data could not be read or written."""
