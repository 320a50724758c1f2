"""Tests for the exercise library."""

from __future__ import annotations

from load_engine.catalog.exercises import (
    EXERCISE_CATALOG,
    all_categories,
    all_equipment,
    all_muscle_groups,
    exercise_name,
    filter_exercises,
    get_exercise,
)


class TestLookup:
    def test_get_known_exercise(self) -> None:
        exercise = get_exercise("back-squat")
        assert exercise is not None
        assert exercise.name == "Back Squat"
        assert exercise.target_muscle_group == "Quadriceps"

    def test_get_unknown_exercise(self) -> None:
        assert get_exercise("nope") is None

    def test_ids_are_unique_and_keyed(self) -> None:
        for exercise_id, exercise in EXERCISE_CATALOG.items():
            assert exercise.exercise_id == exercise_id


class TestFilter:
    def test_no_filters_returns_all(self) -> None:
        assert len(filter_exercises()) == len(EXERCISE_CATALOG)

    def test_secondary_muscle_matches(self) -> None:
        ids = {ex.exercise_id for ex in filter_exercises(muscle_group="Triceps")}
        assert {"tricep-pushdown", "bench-press", "overhead-press"} <= ids

    def test_category_and_query(self) -> None:
        result = filter_exercises(category="Strength", query="squat")
        assert result
        assert all(ex.category == "Strength" for ex in result)
        assert all("squat" in (ex.name + ex.description).lower() for ex in result)

    def test_facets_sorted(self) -> None:
        for facet in (all_muscle_groups(), all_categories(), all_equipment()):
            assert facet == sorted(facet)
        assert "Plyometric" in all_categories()


def test_exercise_name_falls_back_to_id() -> None:
    assert exercise_name("bench-press") == "Bench Press"
    assert exercise_name("custom-thing") == "custom-thing"
