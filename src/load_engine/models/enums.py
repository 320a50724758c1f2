"""Enumerations and engine constants for the training load core.

Thresholds that encode a published heuristic cite their source.
"""

from enum import IntEnum, auto


class BaseLift(IntEnum):
    """The three tested lifts a player's RM profile records."""

    BENCH_PRESS = auto()
    SQUAT = auto()
    DEADLIFT = auto()

    @property
    def record_key(self) -> str:
        """camelCase key used in persisted player records."""
        return _BASE_LIFT_KEYS[self]

    @classmethod
    def from_record_key(cls, key: str) -> "BaseLift":
        for lift, lift_key in _BASE_LIFT_KEYS.items():
            if lift_key == key:
                return lift
        raise ValueError(f"Unknown base lift key: {key!r}")


_BASE_LIFT_KEYS = {
    BaseLift.BENCH_PRESS: "benchPress",
    BaseLift.SQUAT: "squat",
    BaseLift.DEADLIFT: "deadlift",
}


class IntensityTuning(IntEnum):
    """Which prescription table an intensity level is read from.

    BASKETBALL covers conditioning work (levels 1-7), STRENGTH covers
    maximal-strength work (levels 8-10).
    """

    BASKETBALL = auto()
    STRENGTH = auto()


class AcwrBand(IntEnum):
    """ACWR risk classification, ordered from no data to highest risk."""

    NO_DATA = auto()
    UNDERTRAINING = auto()
    OPTIMAL = auto()
    MODERATE_RISK = auto()
    HIGH_RISK = auto()


class SessionSlot(IntEnum):
    """Practice session slots within a planned day."""

    MORNING = auto()
    EVENING = auto()


class SessionStatus(IntEnum):
    """Lifecycle of a practice session on the weekly schedule."""

    PLANNED = auto()
    COMPLETED = auto()
    CANCELLED = auto()


class LoadMetric(IntEnum):
    """Per-session load measure used by the rolling load calculations."""

    VOLUME = auto()  # sets x reps x weight
    SRPE = auto()  # RPE x duration (Foster session-RPE)


# ---------------------------------------------------------------------------
# Intensity scale
# ---------------------------------------------------------------------------
MIN_INTENSITY_LEVEL = 1
MAX_INTENSITY_LEVEL = 10
STRENGTH_TUNING_FROM_LEVEL = 8

# Out-of-table levels fall back to these entries of each table
BASKETBALL_FALLBACK_LEVEL = 4
STRENGTH_FALLBACK_LEVEL = 8

# ---------------------------------------------------------------------------
# Weight prescription
# ---------------------------------------------------------------------------
DEFAULT_WEIGHT_INCREMENT_KG = 2.5  # smallest plate pair on a standard bar
DIRECT_LIFT_COEFFICIENT = 1.0
HEURISTIC_TRANSFER_COEFFICIENT = 0.7
DEFAULT_PERCENT_OF_1RM = 0.70  # planner default when no level is chosen

# ---------------------------------------------------------------------------
# Load aggregation
# ---------------------------------------------------------------------------
# Rolling windows: Gabbett (2016), Br J Sports Med 50(5):273-280
ACUTE_WINDOW_DAYS = 7
CHRONIC_WINDOW_DAYS = 28
CHRONIC_WINDOW_WEEKS = 4
DEFAULT_ROLLUP_WEEKS = 6

# ACWR thresholds: Gabbett (2016)
ACWR_HIGH_RISK = 1.5
ACWR_MODERATE_RISK = 1.3
ACWR_OPTIMAL_LOW = 0.8

# ---------------------------------------------------------------------------
# Physical data validation ranges (basketball population)
# ---------------------------------------------------------------------------
HEIGHT_RANGE_CM = (120.0, 250.0)
WEIGHT_RANGE_KG = (50.0, 150.0)
BODY_FAT_RANGE_PCT = (3.0, 25.0)
RPE_RANGE = (1.0, 10.0)

# ---------------------------------------------------------------------------
# Practice planning
# ---------------------------------------------------------------------------
CONTACT_DRILL_MULTIPLIER = 1.6
NON_CONTACT_DRILL_MULTIPLIER = 1.0
FIELDS_NORMALIZER = 2.0
DAYS_PER_WEEK = 7
