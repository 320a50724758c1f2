"""Tests for physical-data and performance entry validation."""

from __future__ import annotations

from datetime import date

import pytest

from load_engine.exceptions import LoadEngineError, ValidationError
from load_engine.models.workout import ActualPerformance
from load_engine.validation import parse_physical_data, physical_data_errors, validate_performance


class TestPhysicalData:
    def test_valid_entries(self) -> None:
        physical = parse_physical_data({"height_cm": "198", "weight_kg": 95, "body_fat_pct": 9.5})
        assert physical.height_cm == 198.0
        assert physical.weight_kg == 95.0
        assert physical.body_fat_pct == 9.5

    def test_blank_entries_allowed(self) -> None:
        physical = parse_physical_data({"height_cm": "", "weight_kg": None})
        assert physical.height_cm is None
        assert physical.weight_kg is None

    def test_bounds_inclusive(self) -> None:
        assert physical_data_errors({"height_cm": 120, "weight_kg": 150, "body_fat_pct": 3}) == {}

    def test_out_of_range_messages(self) -> None:
        errors = physical_data_errors({"height_cm": 260, "weight_kg": 40, "body_fat_pct": 30})
        assert errors == {
            "height_cm": "Must be between 120-250 cm",
            "weight_kg": "Must be between 50-150 kg",
            "body_fat_pct": "Must be between 3-25%",
        }

    def test_non_numeric(self) -> None:
        assert physical_data_errors({"weight_kg": "heavy"}) == {"weight_kg": "Must be a number"}

    def test_parse_raises_with_field_errors(self) -> None:
        with pytest.raises(ValidationError) as exc_info:
            parse_physical_data({"height_cm": 300})
        assert "height_cm" in exc_info.value.field_errors
        assert isinstance(exc_info.value, LoadEngineError)


class TestPerformance:
    def test_valid(self) -> None:
        validate_performance(ActualPerformance(date(2024, 3, 4), rpe=7, duration_minutes=60))

    @pytest.mark.parametrize("rpe", [0, 11, -1])
    def test_rpe_out_of_range(self, rpe: float) -> None:
        with pytest.raises(ValidationError) as exc_info:
            validate_performance(ActualPerformance(date(2024, 3, 4), rpe=rpe, duration_minutes=60))
        assert set(exc_info.value.field_errors) == {"rpe"}

    def test_duration_must_be_positive(self) -> None:
        with pytest.raises(ValidationError) as exc_info:
            validate_performance(ActualPerformance(date(2024, 3, 4), rpe=5, duration_minutes=0))
        assert set(exc_info.value.field_errors) == {"duration_minutes"}

    def test_nan_fields_rejected(self) -> None:
        nan = float("nan")
        with pytest.raises(ValidationError) as exc_info:
            validate_performance(ActualPerformance(date(2024, 3, 4), rpe=nan, duration_minutes=nan))
        assert set(exc_info.value.field_errors) == {"rpe", "duration_minutes"}
