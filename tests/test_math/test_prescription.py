"""Tests for RM-based weight prescription."""

from __future__ import annotations

from decimal import Decimal

import pytest

from load_engine.catalog.exercises import EXERCISE_CATALOG, EXERCISE_LOAD_SPECS, Exercise
from load_engine.math.intensity import map_intensity
from load_engine.math.prescription import (
    default_planner_weight,
    prescribe_exercise,
    prescribe_weight,
    resolve_load_spec,
    round_to_increment,
    weight_at_percentage,
)
from load_engine.models.enums import BaseLift
from load_engine.models.player import RMProfile


class TestRoundToIncrement:
    def test_exact_multiple_unchanged(self) -> None:
        assert round_to_increment(120.0, 2.5) == 120.0

    def test_half_step_rounds_up(self) -> None:
        assert round_to_increment(61.25, 2.5) == 62.5
        assert round_to_increment(3.75, 2.5) == 5.0

    def test_below_half_rounds_down(self) -> None:
        assert round_to_increment(107.9, 2.5) == 107.5

    def test_non_positive_weight_is_zero(self) -> None:
        assert round_to_increment(0.0) == 0.0
        assert round_to_increment(-10.0) == 0.0

    def test_bad_increment_uses_default(self) -> None:
        assert round_to_increment(101.0, 0) == 100.0

    def test_custom_increment(self) -> None:
        assert round_to_increment(101.0, 1.0) == 101.0
        assert round_to_increment(103.0, 5.0) == 105.0


class TestResolveLoadSpec:
    def test_base_lift_is_direct(self) -> None:
        spec = resolve_load_spec("back-squat")
        assert spec.base_lift == BaseLift.SQUAT
        assert spec.transfer_coefficient == 1.0

    def test_table_entry_wins_over_heuristic(self) -> None:
        spec = resolve_load_spec("leg-press")
        assert spec.base_lift == BaseLift.SQUAT
        assert spec.transfer_coefficient == pytest.approx(0.9)

    def test_every_catalog_exercise_is_tabulated(self) -> None:
        for exercise_id in EXERCISE_CATALOG:
            if exercise_id in ("back-squat", "bench-press"):
                continue
            assert exercise_id in EXERCISE_LOAD_SPECS

    def test_unmapped_entry_is_not_rescued_by_keywords(self) -> None:
        spec = resolve_load_spec("wall-sit")
        assert not spec.is_mapped

    def test_unknown_id_uses_keywords(self) -> None:
        spec = resolve_load_spec("landmine-press")
        assert spec.base_lift == BaseLift.BENCH_PRESS
        assert spec.transfer_coefficient == pytest.approx(0.7)

    def test_unknown_catalog_entry_uses_muscle_group(self) -> None:
        catalog = {"nordic-curl": Exercise("nordic-curl", "Nordic Curl", "Hamstrings", "Strength", "Bodyweight")}
        spec = resolve_load_spec("nordic-curl", catalog=catalog)
        assert spec.base_lift == BaseLift.DEADLIFT

    def test_unrecognised_id_is_unmapped(self) -> None:
        assert not resolve_load_spec("juggling").is_mapped


class TestPrescribeWeight:
    def test_back_squat_level_five(self, tested_profile: RMProfile) -> None:
        assert prescribe_weight("back-squat", 5, tested_profile) == 120.0

    def test_half_up_case(self) -> None:
        profile = RMProfile(bench_press=122.5)
        # 122.5 x 0.50 = 61.25 -> 62.5
        assert prescribe_weight("bench-press", 3, profile) == 62.5

    @pytest.mark.parametrize(("bench", "expected"), [(87.5, 62.5), (162.5, 115.0)])
    def test_percent_ties_round_up(self, bench: float, expected: float) -> None:
        # 87.5 x 0.70 = 61.25 and 162.5 x 0.70 = 113.75 are exact half steps
        assert prescribe_weight("bench-press", 7, RMProfile(bench_press=bench)) == expected

    @pytest.mark.parametrize("level", range(1, 11))
    def test_leg_press_uses_squat_coefficient(self, level: int, tested_profile: RMProfile) -> None:
        percent = Decimal(repr(map_intensity(level).percent_of_1rm))
        expected = round_to_increment(Decimal("200") * Decimal("0.9") * percent)
        assert prescribe_weight("leg-press", level, tested_profile) == expected

    @pytest.mark.parametrize("exercise_id", ["back-squat", "leg-press", "bench-press", "hip-thrust"])
    def test_empty_profile_gives_zero(self, exercise_id: str, empty_profile: RMProfile) -> None:
        for level in range(1, 11):
            assert prescribe_weight(exercise_id, level, empty_profile) == 0.0

    def test_none_profile_gives_zero(self) -> None:
        assert prescribe_weight("back-squat", 5, None) == 0.0

    def test_missing_relevant_lift_gives_zero(self) -> None:
        profile = RMProfile(bench_press=100.0)
        assert prescribe_weight("romanian-deadlift", 6, profile) == 0.0

    def test_unmapped_exercise_gives_zero(self, tested_profile: RMProfile) -> None:
        assert prescribe_weight("plank", 9, tested_profile) == 0.0

    def test_weight_never_decreases_with_level(self, tested_profile: RMProfile) -> None:
        weights = [prescribe_weight("leg-press", lvl, tested_profile) for lvl in range(1, 11)]
        assert weights == sorted(weights)

    def test_invalid_level_matches_fallback(self, tested_profile: RMProfile) -> None:
        assert prescribe_weight("back-squat", 0, tested_profile) == prescribe_weight(
            "back-squat", 4, tested_profile
        )

    def test_result_is_multiple_of_increment(self, tested_profile: RMProfile) -> None:
        weight = prescribe_weight("overhead-press", 7, tested_profile, increment=5.0)
        assert weight % 5.0 == 0


class TestPrescribeExercise:
    def test_fills_sets_reps_weight(self, tested_profile: RMProfile) -> None:
        planned = prescribe_exercise("back-squat", 5, tested_profile)
        assert planned.exercise_id == "back-squat"
        assert planned.sets == 3
        assert planned.reps == 7
        assert planned.weight == 120.0

    def test_default_planner_weight_is_seventy_percent(self, tested_profile: RMProfile) -> None:
        assert default_planner_weight("back-squat", tested_profile) == 140.0

    def test_weight_at_percentage_zero_percent(self, tested_profile: RMProfile) -> None:
        assert weight_at_percentage("back-squat", 0.0, tested_profile) == 0.0


# Outcome of the planner's lookup for every catalog exercise:
# (base lift, coefficient), or None when no load is prescribed.
_CATALOG_OUTCOMES = {
    "back-squat": (BaseLift.SQUAT, 1.0),
    "front-squat": None,
    "leg-press": (BaseLift.SQUAT, 0.9),
    "romanian-deadlift": (BaseLift.DEADLIFT, 1.0),
    "leg-curl": (BaseLift.SQUAT, 0.7),
    "bulgarian-split-squat": None,
    "lunges": None,
    "bench-press": (BaseLift.BENCH_PRESS, 1.0),
    "incline-bench-press": (BaseLift.BENCH_PRESS, 0.7),
    "overhead-press": (BaseLift.BENCH_PRESS, 0.7),
    "tricep-pushdown": (BaseLift.BENCH_PRESS, 0.7),
    "lat-pulldown": None,
    "seated-cable-row": None,
    "barbell-row": None,
    "pull-ups": None,
    "bicep-curl": None,
    "box-jumps": None,
    "jump-squats": None,
    "plank": None,
    "russian-twists": None,
    "hip-thrust": None,
    "wall-sit": None,
}


class TestCatalogOutcomes:
    def test_covers_whole_catalog(self) -> None:
        assert set(_CATALOG_OUTCOMES) == set(EXERCISE_CATALOG)

    @pytest.mark.parametrize(("exercise_id", "outcome"), sorted(_CATALOG_OUTCOMES.items()))
    def test_resolved_lift_and_coefficient(self, exercise_id: str, outcome) -> None:
        spec = resolve_load_spec(exercise_id)
        if outcome is None:
            assert not spec.is_mapped
        else:
            assert (spec.base_lift, spec.transfer_coefficient) == (outcome[0], pytest.approx(outcome[1]))

    @pytest.mark.parametrize(
        ("exercise_id", "expected"),
        [
            ("romanian-deadlift", 120.0),
            ("overhead-press", 42.5),
            ("incline-bench-press", 42.5),
            ("leg-curl", 85.0),
            ("front-squat", 0.0),
            ("hip-thrust", 0.0),
        ],
    )
    def test_level_five_weights(self, exercise_id: str, expected: float) -> None:
        profile = RMProfile(bench_press=100.0, squat=200.0, deadlift=200.0)
        assert prescribe_weight(exercise_id, 5, profile) == expected
