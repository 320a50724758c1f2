"""Exercise library and transfer-coefficient tables."""

from load_engine.catalog.exercises import (
    BASE_LIFT_EXERCISES,
    EXERCISE_CATALOG,
    EXERCISE_LOAD_SPECS,
    Exercise,
    all_categories,
    all_equipment,
    all_muscle_groups,
    exercise_name,
    filter_exercises,
    get_exercise,
)

__all__ = [
    "BASE_LIFT_EXERCISES",
    "EXERCISE_CATALOG",
    "EXERCISE_LOAD_SPECS",
    "Exercise",
    "all_categories",
    "all_equipment",
    "all_muscle_groups",
    "exercise_name",
    "filter_exercises",
    "get_exercise",
]
