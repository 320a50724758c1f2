"""Weight prescription from a player's tested one-rep maxes.

Resolution order for an exercise id:
    1. One of the three tested lifts -> that RM, coefficient 1.0.
    2. The explicit relationship table -> mapped lift x table coefficient.
    3. Heuristic for ids the table does not know -> catalog muscle group,
       then identifier keywords, coefficient 0.7.
    4. Nothing matched -> unmapped, 0 kg.

Missing RM data is an expected state (new players) and yields 0 kg.
"""

from __future__ import annotations

import re
from decimal import ROUND_HALF_UP, Decimal

from load_engine.catalog.exercises import (
    BASE_LIFT_EXERCISES,
    EXERCISE_CATALOG,
    EXERCISE_LOAD_SPECS,
    Exercise,
)
from load_engine.math.intensity import map_intensity
from load_engine.models.enums import (
    DEFAULT_PERCENT_OF_1RM,
    DEFAULT_WEIGHT_INCREMENT_KG,
    DIRECT_LIFT_COEFFICIENT,
    HEURISTIC_TRANSFER_COEFFICIENT,
    BaseLift,
)
from load_engine.models.player import RMProfile
from load_engine.models.prescription import ExerciseLoadSpec
from load_engine.models.workout import PlannedExercise

# Primary muscle group -> lift whose RM best predicts working weight
_MUSCLE_GROUP_LIFTS: dict[str, BaseLift] = {
    "chest": BaseLift.BENCH_PRESS,
    "triceps": BaseLift.BENCH_PRESS,
    "shoulders": BaseLift.BENCH_PRESS,
    "quadriceps": BaseLift.SQUAT,
    "back": BaseLift.DEADLIFT,
    "lower back": BaseLift.DEADLIFT,
    "hamstrings": BaseLift.DEADLIFT,
    "glutes": BaseLift.DEADLIFT,
}

# Identifier tokens, checked in this order (press family wins over legs)
_KEYWORD_LIFTS: tuple[tuple[frozenset[str], BaseLift], ...] = (
    (frozenset({"chest", "tricep", "shoulder", "press"}), BaseLift.BENCH_PRESS),
    (frozenset({"quad", "quadricep", "leg"}), BaseLift.SQUAT),
    (frozenset({"back", "hamstring", "glute"}), BaseLift.DEADLIFT),
)

_TOKEN_SPLIT = re.compile(r"[^a-z0-9]+")


def _tokens(exercise_id: str) -> set[str]:
    tokens = set()
    for raw in _TOKEN_SPLIT.split(exercise_id.lower()):
        if not raw:
            continue
        tokens.add(raw)
        if raw.endswith("s") and len(raw) > 3:
            tokens.add(raw[:-1])
    return tokens


def _heuristic_lift(exercise_id: str, catalog: dict[str, Exercise]) -> BaseLift | None:
    exercise = catalog.get(exercise_id)
    if exercise is not None:
        lift = _MUSCLE_GROUP_LIFTS.get(exercise.target_muscle_group.lower())
        if lift is not None:
            return lift
    tokens = _tokens(exercise_id)
    for keywords, lift in _KEYWORD_LIFTS:
        if tokens & keywords:
            return lift
    return None


def resolve_load_spec(
    exercise_id: str,
    catalog: dict[str, Exercise] | None = None,
    load_specs: dict[str, ExerciseLoadSpec] | None = None,
) -> ExerciseLoadSpec:
    """Resolve which lift and coefficient an exercise is prescribed from.

    Never raises; an unknown exercise resolves to the unmapped spec.
    """
    catalog = EXERCISE_CATALOG if catalog is None else catalog
    load_specs = EXERCISE_LOAD_SPECS if load_specs is None else load_specs

    direct = BASE_LIFT_EXERCISES.get(exercise_id)
    if direct is not None:
        return ExerciseLoadSpec(exercise_id, direct, DIRECT_LIFT_COEFFICIENT)

    tabulated = load_specs.get(exercise_id)
    if tabulated is not None:
        return tabulated

    lift = _heuristic_lift(exercise_id, catalog)
    if lift is not None:
        return ExerciseLoadSpec(exercise_id, lift, HEURISTIC_TRANSFER_COEFFICIENT)
    return ExerciseLoadSpec(exercise_id, None, 0.0)


def _decimal(value: float | Decimal) -> Decimal:
    if isinstance(value, Decimal):
        return value
    return Decimal(repr(float(value)))


def round_to_increment(
    weight: float | Decimal, increment: float = DEFAULT_WEIGHT_INCREMENT_KG
) -> float:
    """Round to the nearest equipment increment, halves rounding up.

    Python's built-in ``round`` uses banker's rounding, which would send
    e.g. 2.5 increments to the even neighbour; plate loading expects
    half-up. Pass an exact Decimal product where ties matter.
    """
    if increment <= 0:
        increment = DEFAULT_WEIGHT_INCREMENT_KG
    if weight <= 0:
        return 0.0
    steps = (_decimal(weight) / _decimal(increment)).quantize(
        Decimal(1), rounding=ROUND_HALF_UP
    )
    return float(steps * _decimal(increment))


def weight_at_percentage(
    exercise_id: str,
    percent_of_1rm: float,
    rm_profile: RMProfile | None,
    increment: float = DEFAULT_WEIGHT_INCREMENT_KG,
    catalog: dict[str, Exercise] | None = None,
) -> float:
    """Working weight for an exercise at a fraction of the relevant 1RM."""
    if rm_profile is None or percent_of_1rm <= 0:
        return 0.0
    spec = resolve_load_spec(exercise_id, catalog)
    if not spec.is_mapped:
        return 0.0
    rm = rm_profile.get(spec.base_lift)  # type: ignore[arg-type]
    if rm is None:
        return 0.0
    # Decimal product keeps exact ties (87.5 x 0.70 = 61.25)
    exact = _decimal(rm) * _decimal(spec.transfer_coefficient) * _decimal(percent_of_1rm)
    return round_to_increment(exact, increment)


def prescribe_weight(
    exercise_id: str,
    intensity_level: object,
    rm_profile: RMProfile | None,
    increment: float = DEFAULT_WEIGHT_INCREMENT_KG,
    catalog: dict[str, Exercise] | None = None,
) -> float:
    """Prescribed external load (kg) for an exercise at an intensity level.

    Args:
        exercise_id: Catalog id (e.g. "back-squat") or a custom id.
        intensity_level: 1-10; out-of-range values fall back per
            :func:`load_engine.math.intensity.resolve_level`.
        rm_profile: The player's tested maxes. None or empty -> 0.
        increment: Smallest load step on the equipment.
        catalog: Exercise library used by the muscle-group heuristic.

    Returns:
        RM x coefficient x %1RM, rounded half-up to ``increment``; 0 when
        the exercise is unmapped or the needed RM is missing.
    """
    prescription = map_intensity(intensity_level)
    return weight_at_percentage(
        exercise_id, prescription.percent_of_1rm, rm_profile, increment, catalog
    )


def prescribe_exercise(
    exercise_id: str,
    intensity_level: object,
    rm_profile: RMProfile | None,
    increment: float = DEFAULT_WEIGHT_INCREMENT_KG,
    catalog: dict[str, Exercise] | None = None,
) -> PlannedExercise:
    """Build a planned line item with sets, reps and weight filled in.

    Reps use the top of the rep range.
    """
    prescription = map_intensity(intensity_level)
    return PlannedExercise(
        exercise_id=exercise_id,
        sets=prescription.sets,
        reps=prescription.reps_high,
        weight=weight_at_percentage(
            exercise_id, prescription.percent_of_1rm, rm_profile, increment, catalog
        ),
    )


def default_planner_weight(
    exercise_id: str,
    rm_profile: RMProfile | None,
    increment: float = DEFAULT_WEIGHT_INCREMENT_KG,
) -> float:
    """Weight at the planner's default 70 % of 1RM."""
    return weight_at_percentage(exercise_id, DEFAULT_PERCENT_OF_1RM, rm_profile, increment)
