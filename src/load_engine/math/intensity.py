"""Intensity mapping: coach-facing 1-10 scale to %1RM, reps and sets.

Two separate tables are kept on purpose. Levels 1-7 follow a
basketball conditioning tuning (moderate loads, more reps, few sets);
levels 8-10 follow a maximal-strength tuning (heavy loads, low reps,
more sets). The tables are looked up, never interpolated.

Reference:
    Haff & Triplett (2016). Essentials of Strength Training and
    Conditioning, 4th ed., Table 17.7 (%1RM vs. repetitions).
"""

from __future__ import annotations

from load_engine.models.enums import (
    BASKETBALL_FALLBACK_LEVEL,
    MAX_INTENSITY_LEVEL,
    MIN_INTENSITY_LEVEL,
    STRENGTH_FALLBACK_LEVEL,
    STRENGTH_TUNING_FROM_LEVEL,
    IntensityTuning,
)
from load_engine.models.prescription import Prescription

# level: (percent_of_1rm, reps_low, reps_high, sets)
_BASKETBALL_TABLE: dict[int, tuple[float, int, int, int]] = {
    1: (0.40, 12, 15, 1),
    2: (0.45, 10, 12, 1),
    3: (0.50, 8, 10, 2),
    4: (0.55, 6, 8, 2),
    5: (0.60, 5, 7, 3),
    6: (0.65, 4, 6, 3),
    7: (0.70, 3, 5, 3),
}

_STRENGTH_TABLE: dict[int, tuple[float, int, int, int]] = {
    8: (0.80, 4, 6, 4),
    9: (0.85, 3, 5, 4),
    10: (0.90, 1, 3, 5),
}


def resolve_level(level: object) -> int:
    """Resolve a raw intensity input to a level present in one of the tables.

    Inputs below 8 that are not a table level (0, negatives, fractions,
    non-numbers) fall back to level 4. Inputs of 8 or more that are not a
    table level fall back to level 8. This fallback is intentional: a
    planner with a bad slider value still produces a usable session.
    """
    if isinstance(level, bool):
        return BASKETBALL_FALLBACK_LEVEL
    try:
        numeric = float(level)  # type: ignore[arg-type]
    except (TypeError, ValueError):
        return BASKETBALL_FALLBACK_LEVEL
    if numeric != numeric:  # NaN
        return BASKETBALL_FALLBACK_LEVEL

    if numeric >= STRENGTH_TUNING_FROM_LEVEL:
        if numeric.is_integer() and int(numeric) in _STRENGTH_TABLE:
            return int(numeric)
        return STRENGTH_FALLBACK_LEVEL

    if numeric.is_integer() and int(numeric) in _BASKETBALL_TABLE:
        return int(numeric)
    return BASKETBALL_FALLBACK_LEVEL


def tuning_for(level: object) -> IntensityTuning:
    """Which table a (resolved) level is read from."""
    if resolve_level(level) >= STRENGTH_TUNING_FROM_LEVEL:
        return IntensityTuning.STRENGTH
    return IntensityTuning.BASKETBALL


def map_intensity(level: object) -> Prescription:
    """Map an intensity level (1-10) to its prescription.

    Args:
        level: Coach-chosen intensity. Out-of-range values are resolved
            by :func:`resolve_level` instead of raising.

    Returns:
        Prescription with %1RM, rep range and set count.
    """
    resolved = resolve_level(level)
    if resolved >= STRENGTH_TUNING_FROM_LEVEL:
        percent, reps_low, reps_high, sets = _STRENGTH_TABLE[resolved]
        tuning = IntensityTuning.STRENGTH
    else:
        percent, reps_low, reps_high, sets = _BASKETBALL_TABLE[resolved]
        tuning = IntensityTuning.BASKETBALL
    return Prescription(
        level=resolved,
        percent_of_1rm=percent,
        reps_low=reps_low,
        reps_high=reps_high,
        sets=sets,
        tuning=tuning,
    )


def intensity_table() -> tuple[Prescription, ...]:
    """All ten prescriptions in level order, for display."""
    return tuple(
        map_intensity(level) for level in range(MIN_INTENSITY_LEVEL, MAX_INTENSITY_LEVEL + 1)
    )
