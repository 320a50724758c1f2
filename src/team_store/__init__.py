"""Team data store: roster, workout plans and practice weeks. All file I/O lives here."""

from team_store.exceptions import (
    PerformanceExistsError,
    PlanNotFoundError,
    PlanNotSavedError,
    PlayerNotFoundError,
    StorageError,
    TeamStoreError,
    WeekPlanNotFoundError,
)
from team_store.repository import InMemoryRepository, JsonFileRepository, KeyValueRepository
from team_store.store import TeamStore

__all__ = [
    "InMemoryRepository",
    "JsonFileRepository",
    "KeyValueRepository",
    "PerformanceExistsError",
    "PlanNotFoundError",
    "PlanNotSavedError",
    "PlayerNotFoundError",
    "StorageError",
    "TeamStore",
    "TeamStoreError",
    "WeekPlanNotFoundError",
]
