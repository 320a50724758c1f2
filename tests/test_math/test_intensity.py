"""Tests for the 1-10 intensity scale lookup."""

from __future__ import annotations

import pytest

from load_engine.math.intensity import intensity_table, map_intensity, resolve_level, tuning_for
from load_engine.models.enums import IntensityTuning


class TestMapIntensity:
    def test_level_five_is_moderate_basketball_load(self) -> None:
        p = map_intensity(5)
        assert p.percent_of_1rm == pytest.approx(0.60)
        assert p.rep_range == "5-7"
        assert p.sets == 3
        assert p.tuning == IntensityTuning.BASKETBALL

    def test_level_ten_is_near_maximal(self) -> None:
        p = map_intensity(10)
        assert p.percent_of_1rm == pytest.approx(0.90)
        assert p.reps_high <= 3
        assert p.tuning == IntensityTuning.STRENGTH

    @pytest.mark.parametrize("level", range(1, 11))
    def test_every_level_resolves_to_itself(self, level: int) -> None:
        assert map_intensity(level).level == level

    def test_percent_rises_with_level(self) -> None:
        percents = [p.percent_of_1rm for p in intensity_table()]
        assert percents == sorted(percents)
        assert len(set(percents)) == 10

    def test_rep_range_is_ordered(self) -> None:
        for p in intensity_table():
            assert 1 <= p.reps_low <= p.reps_high
            assert p.sets >= 1

    @pytest.mark.parametrize("level", range(1, 8))
    def test_basketball_levels_stay_moderate(self, level: int) -> None:
        assert 0.40 <= map_intensity(level).percent_of_1rm <= 0.70

    @pytest.mark.parametrize("level", range(8, 11))
    def test_strength_levels_are_heavy(self, level: int) -> None:
        p = map_intensity(level)
        assert 0.80 <= p.percent_of_1rm <= 0.90
        assert 4 <= p.sets <= 5

    def test_tuning_switches_at_eight(self) -> None:
        assert tuning_for(7) == IntensityTuning.BASKETBALL
        assert tuning_for(8) == IntensityTuning.STRENGTH


class TestResolveLevel:
    @pytest.mark.parametrize("raw", [0, -3, 4.5, "hard", None, float("nan"), True])
    def test_low_or_invalid_falls_back_to_four(self, raw) -> None:
        assert resolve_level(raw) == 4

    @pytest.mark.parametrize("raw", [11, 8.5, 99])
    def test_high_unknown_falls_back_to_eight(self, raw) -> None:
        assert resolve_level(raw) == 8

    def test_numeric_strings_are_accepted(self) -> None:
        assert resolve_level("6") == 6

    def test_fallback_prescription_matches_level_four(self) -> None:
        assert map_intensity(0) == map_intensity(4)
