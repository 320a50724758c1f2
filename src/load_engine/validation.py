"""Range checks for staff-entered physical data and performance records."""

from __future__ import annotations

from typing import Any

from load_engine.exceptions import ValidationError
from load_engine.models.enums import (
    BODY_FAT_RANGE_PCT,
    HEIGHT_RANGE_CM,
    RPE_RANGE,
    WEIGHT_RANGE_KG,
)
from load_engine.models.player import PhysicalData
from load_engine.models.workout import ActualPerformance

_PHYSICAL_FIELDS: tuple[tuple[str, tuple[float, float], str], ...] = (
    ("height_cm", HEIGHT_RANGE_CM, "cm"),
    ("weight_kg", WEIGHT_RANGE_KG, "kg"),
    ("body_fat_pct", BODY_FAT_RANGE_PCT, "%"),
)


def _fmt(value: float) -> str:
    return f"{value:g}"


def physical_data_errors(raw: dict[str, Any]) -> dict[str, str]:
    """Return field -> message for every invalid entry in *raw*.

    Blank entries (None or "") are allowed and mean "not measured".
    """
    errors: dict[str, str] = {}
    for name, (low, high), unit in _PHYSICAL_FIELDS:
        value = raw.get(name)
        if value is None or value == "":
            continue
        try:
            number = float(value)
        except (TypeError, ValueError):
            errors[name] = "Must be a number"
            continue
        if number != number:
            errors[name] = "Must be a number"
        elif number < low or number > high:
            errors[name] = f"Must be between {_fmt(low)}-{_fmt(high)} {unit}".replace(" %", "%")
    return errors


def parse_physical_data(raw: dict[str, Any]) -> PhysicalData:
    """Validate a form dict and convert it to PhysicalData.

    Raises:
        ValidationError: if any field is non-numeric or out of range.
    """
    errors = physical_data_errors(raw)
    if errors:
        raise ValidationError(errors)

    def opt(name: str) -> float | None:
        value = raw.get(name)
        return float(value) if value not in (None, "") else None

    return PhysicalData(
        height_cm=opt("height_cm"),
        weight_kg=opt("weight_kg"),
        body_fat_pct=opt("body_fat_pct"),
    )


def validate_performance(performance: ActualPerformance) -> None:
    """Check the session-level fields a coach must enter before saving.

    Raises:
        ValidationError: duration is not positive or RPE is outside 1-10.
    """
    errors: dict[str, str] = {}
    duration = performance.duration_minutes
    if not duration or duration != duration or duration <= 0:
        errors["duration_minutes"] = "Please enter a valid workout duration"
    low, high = RPE_RANGE
    rpe = performance.rpe
    if not rpe or rpe != rpe or rpe < low or rpe > high:
        errors["rpe"] = f"RPE must be between {_fmt(low)} and {_fmt(high)}"
    if errors:
        raise ValidationError(errors)
