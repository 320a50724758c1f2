"""Static exercise library and the exercise-to-lift transfer table.

``EXERCISE_LOAD_SPECS`` lists every catalog exercise explicitly and pins
the outcomes the planner has always produced. The Romanian deadlift reads
the deadlift test directly and the leg press takes 0.9 x squat; the other
mapped accessories carry the 0.7 keyword coefficient.
Entries whose ``base_lift`` is None are unmapped and prescribe 0 kg
rather than falling through to the keyword heuristic.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from load_engine.models.enums import (
    DIRECT_LIFT_COEFFICIENT,
    HEURISTIC_TRANSFER_COEFFICIENT,
    BaseLift,
)
from load_engine.models.prescription import ExerciseLoadSpec


@dataclass(frozen=True)
class Exercise:
    """A library exercise."""

    exercise_id: str
    name: str
    target_muscle_group: str
    category: str
    equipment: str
    secondary_muscles: tuple[str, ...] = field(default_factory=tuple)
    base_intensity_factor: float = 1.0
    description: str = ""


_EXERCISES: tuple[Exercise, ...] = (
    # Lower body
    Exercise("back-squat", "Back Squat", "Quadriceps", "Strength", "Barbell",
             ("Hamstrings", "Glutes", "Lower Back"), 1.0,
             "Compound lower-body lift for quadriceps, hamstrings and glutes."),
    Exercise("front-squat", "Front Squat", "Quadriceps", "Strength", "Barbell",
             ("Hamstrings", "Glutes", "Core"), 0.9,
             "Front-racked squat emphasizing the quadriceps and core."),
    Exercise("leg-press", "Leg Press", "Quadriceps", "Strength", "Machine",
             ("Hamstrings", "Glutes"), 1.2,
             "Machine press with reduced lower back stress."),
    Exercise("romanian-deadlift", "Romanian Deadlift", "Hamstrings", "Strength", "Barbell",
             ("Glutes", "Lower Back"), 0.9,
             "Hip hinge targeting the posterior chain."),
    Exercise("leg-curl", "Leg Curl", "Hamstrings", "Isolation", "Machine",
             (), 0.8, "Hamstring isolation on a machine."),
    Exercise("bulgarian-split-squat", "Bulgarian Split Squat", "Quadriceps", "Strength", "Dumbbell",
             ("Hamstrings", "Glutes", "Core"), 0.8,
             "Rear-foot-elevated unilateral squat."),
    Exercise("lunges", "Lunges", "Quadriceps", "Strength", "Bodyweight",
             ("Hamstrings", "Glutes"), 0.7, "Unilateral stepping pattern."),
    # Upper body push
    Exercise("bench-press", "Bench Press", "Chest", "Strength", "Barbell",
             ("Triceps", "Shoulders"), 1.0, "Compound horizontal press."),
    Exercise("incline-bench-press", "Incline Bench Press", "Chest", "Strength", "Barbell",
             ("Shoulders", "Triceps"), 0.9, "Bench press on a 30-45 degree incline."),
    Exercise("overhead-press", "Overhead Press", "Shoulders", "Strength", "Barbell",
             ("Triceps", "Trapezius"), 0.85, "Standing barbell press overhead."),
    Exercise("tricep-pushdown", "Tricep Pushdown", "Triceps", "Isolation", "Cable",
             (), 0.7, "Cable isolation for the triceps."),
    # Upper body pull
    Exercise("lat-pulldown", "Lat Pulldown", "Back", "Strength", "Cable",
             ("Biceps", "Shoulders"), 0.9, "Vertical cable pull."),
    Exercise("seated-cable-row", "Seated Cable Row", "Back", "Strength", "Cable",
             ("Biceps", "Shoulders"), 0.9, "Horizontal cable row."),
    Exercise("barbell-row", "Barbell Row", "Back", "Strength", "Barbell",
             ("Biceps", "Shoulders", "Lower Back"), 0.9, "Bent-over barbell row."),
    Exercise("pull-ups", "Pull-Ups", "Back", "Bodyweight", "Pull-Up Bar",
             ("Biceps", "Shoulders"), 0.8, "Bodyweight vertical pull."),
    Exercise("bicep-curl", "Bicep Curl", "Biceps", "Isolation", "Dumbbells",
             ("Forearms",), 0.7, "Dumbbell curl."),
    # Plyometric
    Exercise("box-jumps", "Box Jumps", "Quadriceps", "Plyometric", "Box",
             ("Hamstrings", "Glutes", "Calves"), 0.6, "Explosive jump onto a box."),
    Exercise("jump-squats", "Jump Squats", "Quadriceps", "Plyometric", "Bodyweight",
             ("Hamstrings", "Glutes", "Calves"), 0.5, "Squat into a vertical jump."),
    # Core
    Exercise("plank", "Plank", "Core", "Core Stability", "Bodyweight",
             ("Shoulders", "Lower Back"), 0.4, "Isometric anterior core hold."),
    Exercise("russian-twists", "Russian Twists", "Core", "Core Rotation", "Medicine Ball",
             ("Obliques",), 0.5, "Seated rotational core work."),
    Exercise("hip-thrust", "Hip Thrust", "Glutes", "Strength", "Barbell",
             ("Hamstrings", "Lower Back"), 0.85, "Barbell hip extension off a bench."),
    Exercise("wall-sit", "Wall Sit", "Quadriceps", "Isometric", "Bodyweight",
             ("Glutes", "Calves"), 0.5, "Isometric squat hold against a wall."),
)

EXERCISE_CATALOG: dict[str, Exercise] = {ex.exercise_id: ex for ex in _EXERCISES}

# Exercises scored directly against a tested lift.
BASE_LIFT_EXERCISES: dict[str, BaseLift] = {
    "back-squat": BaseLift.SQUAT,
    "bench-press": BaseLift.BENCH_PRESS,
    "deadlift": BaseLift.DEADLIFT,
}


def _spec(exercise_id: str, lift: BaseLift | None, coefficient: float = 0.0) -> ExerciseLoadSpec:
    return ExerciseLoadSpec(exercise_id, lift, coefficient if lift is not None else 0.0)


EXERCISE_LOAD_SPECS: dict[str, ExerciseLoadSpec] = {
    spec.exercise_id: spec
    for spec in (
        # Hinge variant scored straight off the deadlift test
        _spec("romanian-deadlift", BaseLift.DEADLIFT, DIRECT_LIFT_COEFFICIENT),
        _spec("leg-press", BaseLift.SQUAT, 0.9),
        _spec("leg-curl", BaseLift.SQUAT, HEURISTIC_TRANSFER_COEFFICIENT),
        _spec("incline-bench-press", BaseLift.BENCH_PRESS, HEURISTIC_TRANSFER_COEFFICIENT),
        _spec("overhead-press", BaseLift.BENCH_PRESS, HEURISTIC_TRANSFER_COEFFICIENT),
        _spec("tricep-pushdown", BaseLift.BENCH_PRESS, HEURISTIC_TRANSFER_COEFFICIENT),
        _spec("front-squat", None),
        _spec("bulgarian-split-squat", None),
        _spec("lunges", None),
        _spec("lat-pulldown", None),
        _spec("seated-cable-row", None),
        _spec("barbell-row", None),
        _spec("pull-ups", None),
        _spec("bicep-curl", None),
        _spec("box-jumps", None),
        _spec("jump-squats", None),
        _spec("plank", None),
        _spec("russian-twists", None),
        _spec("hip-thrust", None),
        _spec("wall-sit", None),
    )
}


def get_exercise(exercise_id: str) -> Exercise | None:
    """Look up a catalog exercise. Unknown ids return None, not an error."""
    return EXERCISE_CATALOG.get(exercise_id)


def exercise_name(exercise_id: str) -> str:
    """Display name for an id, falling back to the id itself."""
    exercise = EXERCISE_CATALOG.get(exercise_id)
    return exercise.name if exercise else exercise_id


def filter_exercises(
    muscle_group: str = "",
    category: str = "",
    query: str = "",
    catalog: dict[str, Exercise] | None = None,
) -> list[Exercise]:
    """Filter the library the way the exercise picker does.

    ``muscle_group`` matches primary or secondary muscles, ``query`` is a
    case-insensitive substring of the name or description. Empty filters
    match everything.
    """
    catalog = EXERCISE_CATALOG if catalog is None else catalog
    needle = query.strip().lower()
    result: list[Exercise] = []
    for exercise in catalog.values():
        if muscle_group and not (
            exercise.target_muscle_group == muscle_group
            or muscle_group in exercise.secondary_muscles
        ):
            continue
        if category and exercise.category != category:
            continue
        if needle and needle not in exercise.name.lower() and needle not in exercise.description.lower():
            continue
        result.append(exercise)
    return result


def all_muscle_groups(catalog: dict[str, Exercise] | None = None) -> list[str]:
    catalog = EXERCISE_CATALOG if catalog is None else catalog
    groups = {ex.target_muscle_group for ex in catalog.values()}
    for ex in catalog.values():
        groups.update(ex.secondary_muscles)
    return sorted(groups)


def all_categories(catalog: dict[str, Exercise] | None = None) -> list[str]:
    catalog = EXERCISE_CATALOG if catalog is None else catalog
    return sorted({ex.category for ex in catalog.values()})


def all_equipment(catalog: dict[str, Exercise] | None = None) -> list[str]:
    catalog = EXERCISE_CATALOG if catalog is None else catalog
    return sorted({ex.equipment for ex in catalog.values()})
