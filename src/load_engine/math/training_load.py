"""Training load aggregation: rolling acute/chronic load, ACWR, weekly rollups.

Acute and chronic loads are totals over a trailing window divided by the
window length in days (7 and 28), not by the number of sessions. Rest
days therefore dilute the average: two sessions in a week read as a
lower acute load than the same two sessions squeezed into fewer days
would under a per-session definition.

References:
    - Gabbett (2016): ACWR thresholds, rolling-average windows
    - Foster (1998): session-RPE load (RPE x duration)
"""

from __future__ import annotations

import math
from collections.abc import Iterable
from datetime import date, timedelta

import numpy as np
import pandas as pd

from load_engine.models.enums import (
    ACUTE_WINDOW_DAYS,
    ACWR_HIGH_RISK,
    ACWR_MODERATE_RISK,
    ACWR_OPTIMAL_LOW,
    CHRONIC_WINDOW_DAYS,
    CHRONIC_WINDOW_WEEKS,
    DEFAULT_ROLLUP_WEEKS,
    AcwrBand,
    LoadMetric,
)
from load_engine.models.load_report import (
    LoadStatus,
    LoadSummary,
    PlanComparison,
    WeeklyAcwrPoint,
    WeeklyLoadSummary,
)
from load_engine.models.workout import ActualPerformance, LoadSample, WorkoutPlan

_FRAME_COLUMNS = ["date", "rpe", "duration", "srpe", "volume"]


def _percent(value: float) -> int:
    """Nearest whole percent, halves toward +inf (12.5 -> 13, -12.5 -> -12)."""
    return math.floor(value + 0.5)


def session_volume(performance: ActualPerformance) -> float:
    """Sets x reps x weight summed across every exercise in every block."""
    return performance.volume


def session_metric(performance: ActualPerformance, metric: LoadMetric = LoadMetric.VOLUME) -> float:
    if metric == LoadMetric.SRPE:
        return performance.session_load
    return performance.volume


def load_samples(history: Iterable[ActualPerformance]) -> tuple[LoadSample, ...]:
    """One LoadSample per performed session, oldest first."""
    samples = [LoadSample(date=p.date, volume=p.volume) for p in history]
    return tuple(sorted(samples, key=lambda s: s.date))


def performed_history(plans: Iterable[WorkoutPlan]) -> tuple[ActualPerformance, ...]:
    """Extract recorded performances from plans, oldest first."""
    performed = [p.actual_performance for p in plans if p.actual_performance is not None]
    return tuple(sorted(performed, key=lambda a: a.date))


def _history_frame(history: Iterable[ActualPerformance]) -> pd.DataFrame:
    rows = [
        {
            "date": pd.Timestamp(p.date),
            "rpe": float(p.rpe or 0.0),
            "duration": float(p.duration_minutes or 0.0),
            "srpe": p.session_load,
            "volume": p.volume,
        }
        for p in history
    ]
    if not rows:
        return pd.DataFrame(columns=_FRAME_COLUMNS)
    return pd.DataFrame(rows, columns=_FRAME_COLUMNS)


def _window_total(
    history: Iterable[ActualPerformance],
    as_of: date,
    window_days: int,
    metric: LoadMetric,
) -> float:
    frame = _history_frame(history)
    if frame.empty or window_days <= 0:
        return 0.0
    column = "srpe" if metric == LoadMetric.SRPE else "volume"
    end = pd.Timestamp(as_of)
    start = end - pd.Timedelta(days=window_days - 1)
    in_window = frame[(frame["date"] >= start) & (frame["date"] <= end)]
    return float(in_window[column].sum())


def acute_load(
    history: Iterable[ActualPerformance],
    as_of: date,
    metric: LoadMetric = LoadMetric.VOLUME,
    window_days: int = ACUTE_WINDOW_DAYS,
) -> float:
    """Average daily load over the 7 days ending at *as_of* (inclusive).

    The window total is divided by the day count, not the session count.
    """
    if window_days <= 0:
        return 0.0
    return _window_total(history, as_of, window_days, metric) / window_days


def chronic_load(
    history: Iterable[ActualPerformance],
    as_of: date,
    metric: LoadMetric = LoadMetric.VOLUME,
    window_days: int = CHRONIC_WINDOW_DAYS,
) -> float:
    """Average daily load over the 28 days ending at *as_of* (inclusive)."""
    if window_days <= 0:
        return 0.0
    return _window_total(history, as_of, window_days, metric) / window_days


def acwr(
    history: Iterable[ActualPerformance],
    as_of: date,
    metric: LoadMetric = LoadMetric.VOLUME,
    acute_days: int = ACUTE_WINDOW_DAYS,
    chronic_days: int = CHRONIC_WINDOW_DAYS,
) -> float:
    """Acute:Chronic Workload Ratio.

    Returns exactly 0.0 when chronic load is 0. Callers must read 0 as
    "insufficient data", not "no risk".
    """
    sessions = tuple(history)
    chronic = chronic_load(sessions, as_of, metric, chronic_days)
    if chronic <= 0:
        return 0.0
    return acute_load(sessions, as_of, metric, acute_days) / chronic


def classify_acwr(ratio: float) -> AcwrBand:
    """Classify an ACWR value into a risk band.

    Bands: >=1.5 high risk, [1.3, 1.5) moderate risk, [0.8, 1.3) optimal,
    (0, 0.8) undertraining, 0 no data.

    Reference:
        Gabbett (2016), Br J Sports Med 50(5):273-280.
    """
    if ratio is None or math.isnan(ratio) or ratio <= 0:
        return AcwrBand.NO_DATA
    if ratio >= ACWR_HIGH_RISK:
        return AcwrBand.HIGH_RISK
    if ratio >= ACWR_MODERATE_RISK:
        return AcwrBand.MODERATE_RISK
    if ratio >= ACWR_OPTIMAL_LOW:
        return AcwrBand.OPTIMAL
    return AcwrBand.UNDERTRAINING


def load_status(
    history: Iterable[ActualPerformance],
    as_of: date,
    metric: LoadMetric = LoadMetric.VOLUME,
    acute_days: int = ACUTE_WINDOW_DAYS,
    chronic_days: int = CHRONIC_WINDOW_DAYS,
) -> LoadStatus:
    """Acute, chronic, ACWR and band in one pass for a dashboard card."""
    sessions = tuple(history)
    acute = acute_load(sessions, as_of, metric, acute_days)
    chronic = chronic_load(sessions, as_of, metric, chronic_days)
    ratio = acute / chronic if chronic > 0 else 0.0
    return LoadStatus(
        as_of=as_of,
        acute_load=acute,
        chronic_load=chronic,
        acwr=ratio,
        band=classify_acwr(ratio),
    )


# ---------------------------------------------------------------------------
# Weekly views
# ---------------------------------------------------------------------------


def week_start(day: date) -> date:
    """Monday of the calendar week containing *day*."""
    return day - timedelta(days=day.weekday())


def _week_label(start: date) -> str:
    end = start + timedelta(days=6)
    return f"{start:%b %d} - {end:%b %d}"


def weekly_rollup(
    history: Iterable[ActualPerformance],
    week_count: int = DEFAULT_ROLLUP_WEEKS,
    as_of: date | None = None,
) -> list[WeeklyLoadSummary]:
    """Bucket performed sessions into calendar weeks, oldest to newest.

    Args:
        history: Performed sessions.
        week_count: Maximum number of weeks returned.
        as_of: When given, the result is exactly ``week_count`` weeks
            ending with the week containing *as_of*; empty weeks appear
            as zero buckets and sessions after *as_of* are ignored. When
            omitted, the result spans the weeks between the first and last
            session (gaps included), truncated to the newest ``week_count``.

    Returns:
        One WeeklyLoadSummary per week.
    """
    if week_count <= 0:
        return []
    frame = _history_frame(history)
    if as_of is not None and not frame.empty:
        frame = frame[frame["date"] <= pd.Timestamp(as_of)]

    if as_of is not None:
        last_week = week_start(as_of)
        weeks = [last_week - timedelta(weeks=i) for i in range(week_count - 1, -1, -1)]
    elif frame.empty:
        return []
    else:
        first_week = week_start(frame["date"].min().date())
        last_week = week_start(frame["date"].max().date())
        span = (last_week - first_week).days // 7 + 1
        weeks = [first_week + timedelta(weeks=i) for i in range(span)][-week_count:]

    by_week: dict[date, dict] = {}
    if not frame.empty:
        frame = frame.assign(
            week=frame["date"].map(lambda ts: week_start(ts.date()))
        )
        grouped = frame.groupby("week").agg(
            workouts=("rpe", "size"),
            rpe_mean=("rpe", "mean"),
            duration=("duration", "sum"),
            srpe=("srpe", "sum"),
            volume=("volume", "sum"),
        )
        by_week = grouped.to_dict("index")

    summaries: list[WeeklyLoadSummary] = []
    for start in weeks:
        row = by_week.get(start)
        if row is not None:
            summaries.append(
                WeeklyLoadSummary(
                    week_label=_week_label(start),
                    week_start=start,
                    workout_count=int(row["workouts"]),
                    avg_rpe=round(float(row["rpe_mean"]), 1),
                    total_duration=float(row["duration"]),
                    total_load=float(row["srpe"]),
                    total_volume=float(row["volume"]),
                )
            )
        else:
            summaries.append(
                WeeklyLoadSummary(
                    week_label=_week_label(start),
                    week_start=start,
                    workout_count=0,
                    avg_rpe=0.0,
                    total_duration=0.0,
                    total_load=0.0,
                    total_volume=0.0,
                )
            )
    return summaries


def weekly_acwr_series(
    history: Iterable[ActualPerformance],
    chronic_weeks: int = CHRONIC_WINDOW_WEEKS,
) -> list[WeeklyAcwrPoint]:
    """Week-resolution ACWR trend.

    Acute load is a week's total volume; chronic load is the mean of that
    week and the preceding ``chronic_weeks - 1`` weeks. The first point is
    emitted once a full chronic window exists.
    """
    frame = _history_frame(history)
    if frame.empty or chronic_weeks <= 0:
        return []
    weekly = (
        frame.assign(week=frame["date"].map(lambda ts: pd.Timestamp(week_start(ts.date()))))
        .groupby("week")["volume"]
        .sum()
    )
    full_index = pd.date_range(weekly.index.min(), weekly.index.max(), freq="7D")
    weekly = weekly.reindex(full_index, fill_value=0.0)
    chronic = weekly.rolling(window=chronic_weeks, min_periods=chronic_weeks).mean()

    points: list[WeeklyAcwrPoint] = []
    for ts, acute_value in weekly.items():
        chronic_value = chronic.loc[ts]
        if np.isnan(chronic_value):
            continue
        ratio = round(float(acute_value) / float(chronic_value), 2) if chronic_value > 0 else 0.0
        points.append(
            WeeklyAcwrPoint(
                week_start=ts.date(),
                acute_load=float(acute_value),
                chronic_load=float(chronic_value),
                acwr=ratio,
            )
        )
    return points


# ---------------------------------------------------------------------------
# Planned vs. actual
# ---------------------------------------------------------------------------


def compare_plan_to_actual(plan: WorkoutPlan) -> PlanComparison | None:
    """Planned vs. performed volume for a plan, or None if not yet performed."""
    performance = plan.actual_performance
    if performance is None:
        return None
    planned = plan.planned_volume
    actual = performance.volume
    percent = _percent((actual - planned) / planned * 100) if planned > 0 else 0
    return PlanComparison(
        plan_id=plan.plan_id,
        plan_name=plan.name,
        performed_on=performance.date,
        planned_volume=planned,
        actual_volume=actual,
        difference=actual - planned,
        percent_difference=percent,
        rpe=performance.rpe,
        duration_minutes=performance.duration_minutes,
    )


def plan_comparisons(plans: Iterable[WorkoutPlan]) -> list[PlanComparison]:
    """Comparisons for every performed plan, ordered by performance date."""
    comparisons = [c for c in (compare_plan_to_actual(p) for p in plans) if c is not None]
    return sorted(comparisons, key=lambda c: c.performed_on)


def load_summary(
    plans: Iterable[WorkoutPlan],
    as_of: date,
    metric: LoadMetric = LoadMetric.VOLUME,
) -> LoadSummary:
    """Totals across a player's performed plans plus the current ACWR."""
    performed = [p for p in plans if p.actual_performance is not None]
    if not performed:
        return LoadSummary(total_workouts=0, avg_completion_pct=0, avg_rpe=0.0, current_acwr=0.0)

    total_planned = sum(p.planned_volume for p in performed)
    total_actual = sum(p.actual_performance.volume for p in performed)  # type: ignore[union-attr]
    total_rpe = sum(p.actual_performance.rpe for p in performed)  # type: ignore[union-attr]
    completion = _percent(total_actual / total_planned * 100) if total_planned > 0 else 0

    history = performed_history(performed)
    return LoadSummary(
        total_workouts=len(performed),
        avg_completion_pct=completion,
        avg_rpe=round(total_rpe / len(performed), 1),
        current_acwr=round(acwr(history, as_of, metric), 2),
    )
