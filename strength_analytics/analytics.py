"""
Strength Analytics — Pandas analytics engine

Flattens workout logs into one row per performance, then computes e1RM,
weekly aggregates, per-day progression series and personal-record lookups.

All weights are normalized to kilograms on load; the original unit is kept
in `weight_unit` for display by callers.
"""
import logging
from collections import defaultdict

import numpy as np
import pandas as pd

from strength_analytics.config import LOOKBACK_WEEKS, WEEK_START
from strength_analytics.models import StrengthLevel
from strength_analytics.resolver import default_resolver
from strength_analytics.standards import classify_strength_level

logger = logging.getLogger(__name__)

WEEKDAYS = ("MON", "TUE", "WED", "THU", "FRI", "SAT", "SUN")

PERFORMANCE_COLUMNS = [
    "date", "exercise", "canonical", "category", "sets", "reps",
    "weight", "weight_unit", "weight_kg", "e1rm", "volume_kg",
]


# ═══════════════════════════════════════════════════════════════════════
# 1. e1RM
# ═══════════════════════════════════════════════════════════════════════

def calc_e1rm(weight: float, reps: int) -> float:
    """Epley estimate. A single is its own max; zero reps lifted nothing."""
    assert weight >= 0 and reps >= 0, f"negative performance reached the engine: {weight}x{reps}"
    if reps == 0:
        return 0.0
    if reps == 1:
        return float(weight)
    return weight * (1 + reps / 30)


# ═══════════════════════════════════════════════════════════════════════
# 2. FLATTEN & WINDOW
# ═══════════════════════════════════════════════════════════════════════

def to_naive(value) -> pd.Timestamp:
    """Timestamp without timezone; aware values are converted to UTC first."""
    ts = pd.Timestamp(value)
    if ts.tzinfo is not None:
        ts = ts.tz_convert(None)
    return ts


def to_day(value) -> pd.Timestamp:
    """Naive midnight Timestamp for a date, datetime or Timestamp."""
    return to_naive(value).normalize()


def _today() -> pd.Timestamp:
    return pd.Timestamp.today().normalize()


def logs_to_dataframe(logs, resolver=None) -> pd.DataFrame:
    """
    Convert workout logs to a flat DataFrame, one row per performance.

    Input logs are not modified. `canonical` holds the resolved exercise
    name; `e1rm` and `volume_kg` are in kilograms.
    """
    resolver = resolver or default_resolver()
    rows = []
    for log in logs:
        day = to_day(log.date)
        for ex in log.exercises:
            weight_kg = ex.weight_kg
            rows.append({
                "date": day,
                "exercise": ex.name,
                "canonical": resolver.resolve(ex.name),
                "category": ex.category.value,
                "sets": ex.sets,
                "reps": ex.reps,
                "weight": ex.weight,
                "weight_unit": ex.weight_unit.value,
                "weight_kg": weight_kg,
                "e1rm": calc_e1rm(weight_kg, ex.reps),
                "volume_kg": ex.sets * ex.reps * weight_kg,
            })

    df = pd.DataFrame(rows, columns=PERFORMANCE_COLUMNS)
    if not df.empty:
        df = df.sort_values("date", kind="stable").reset_index(drop=True)
    return df


def filter_window(df: pd.DataFrame, lookback_weeks: int = LOOKBACK_WEEKS, as_of=None) -> pd.DataFrame:
    """Rows strictly after `as_of - lookback_weeks` and up to `as_of` (inclusive)."""
    if df.empty:
        return df
    as_of = to_day(as_of) if as_of is not None else _today()
    start = as_of - pd.Timedelta(weeks=lookback_weeks)
    return df[(df["date"] > start) & (df["date"] <= as_of)]


def exercise_history(df: pd.DataFrame, exercise: str, resolver=None) -> pd.DataFrame:
    """All rows whose exercise resolves to the same canonical name as `exercise`."""
    if df.empty:
        return df
    resolver = resolver or default_resolver()
    canonical = resolver.resolve(exercise)
    return df[df["exercise"].map(resolver.resolve) == canonical].copy()


# ═══════════════════════════════════════════════════════════════════════
# 3. WEEKLY AGGREGATION
# ═══════════════════════════════════════════════════════════════════════

def _days_into_week(weekday):
    """Days since the configured first day of the week (WEEK_START)."""
    return (weekday - WEEKDAYS.index(WEEK_START)) % 7


def week_start(day: pd.Timestamp) -> pd.Timestamp:
    """First day (WEEK_START, Monday by default) of the week containing `day`."""
    return day - pd.Timedelta(days=_days_into_week(day.weekday()))


def weekly_breakdown(df: pd.DataFrame, lookback_weeks: int = LOOKBACK_WEEKS, as_of=None) -> pd.DataFrame:
    """
    Weekly summary for one exercise over the lookback window.

    `df` must already be filtered to a single canonical exercise. Every
    week in the window (starting on WEEK_START) gets a row, even when
    empty, so charts show gaps. Empty weeks have NaN `avg_e1rm` and 0 `total_volume`.

    Returns columns: week_start, avg_e1rm, total_volume, n_performances
    """
    as_of = to_day(as_of) if as_of is not None else _today()
    start = as_of - pd.Timedelta(weeks=lookback_weeks)
    skeleton = pd.date_range(week_start(start), week_start(as_of), freq=f"W-{WEEK_START}", name="week_start")

    window = filter_window(df, lookback_weeks, as_of)
    if window.empty:
        return pd.DataFrame({
            "week_start": skeleton,
            "avg_e1rm": np.nan,
            "total_volume": 0.0,
            "n_performances": 0,
        })

    weeks = window["date"] - pd.to_timedelta(_days_into_week(window["date"].dt.weekday), unit="D")
    weekly = (
        window.assign(week_start=weeks)
        .groupby("week_start")
        .agg(
            avg_e1rm=("e1rm", "mean"),
            total_volume=("volume_kg", "sum"),
            n_performances=("e1rm", "size"),
        )
        .reindex(skeleton)
    )
    weekly["total_volume"] = weekly["total_volume"].fillna(0.0)
    weekly["n_performances"] = weekly["n_performances"].fillna(0).astype(int)
    return weekly.reset_index()


# ═══════════════════════════════════════════════════════════════════════
# 4. PR TRACKING
# ═══════════════════════════════════════════════════════════════════════

def best_records(records, resolver=None) -> list:
    """Best record per exercise (by kg), most recent first."""
    resolver = resolver or default_resolver()
    best = {}
    for record in records:
        key = resolver.resolve(record.exercise_name)
        current = best.get(key)
        if current is None or record.weight_kg > current.weight_kg:
            best[key] = record
    return sorted(best.values(), key=lambda r: to_day(r.date), reverse=True)


def group_records_by_category(records) -> dict:
    grouped = defaultdict(list)
    for record in records:
        grouped[record.category.value].append(record)
    return dict(grouped)


def find_best_pr(records, exercise_names, resolver=None):
    """Heaviest record (by kg) whose exercise resolves to any of `exercise_names`, or None."""
    resolver = resolver or default_resolver()
    wanted = set(resolver.resolve_options(exercise_names))
    relevant = [r for r in records if resolver.resolve(r.exercise_name) in wanted]
    if not relevant:
        return None
    return max(relevant, key=lambda r: r.weight_kg)


def current_lift_level(records, profile, exercise: str, resolver=None, standards=None) -> StrengthLevel | None:
    """Strength level of the best PR for `exercise`; None when there is no PR."""
    pr = find_best_pr(records, [exercise], resolver)
    if pr is None:
        return None
    return classify_strength_level(
        pr.weight, pr.weight_unit, pr.exercise_name, profile,
        standards=standards, resolver=resolver,
    )


# ═══════════════════════════════════════════════════════════════════════
# 5. LIFT PROGRESSION SERIES
# ═══════════════════════════════════════════════════════════════════════

def lift_progression(
    df: pd.DataFrame,
    exercise: str,
    records=None,
    resolver=None,
    lookback_weeks: int = LOOKBACK_WEEKS,
    as_of=None,
) -> pd.DataFrame:
    """
    Per-day progression for one lift: best e1RM and summed volume per date.

    Only performances with sets, reps and weight all above zero count. The
    best personal record for the lift is attached to its date when it falls
    inside the window; a PR on a day with no logged sets gets its own row
    with NaN e1RM.

    Returns columns: date, e1rm, volume_kg, actual_pr, is_actual_pr
    """
    columns = ["date", "e1rm", "volume_kg", "actual_pr", "is_actual_pr"]
    as_of = to_day(as_of) if as_of is not None else _today()

    history = filter_window(exercise_history(df, exercise, resolver), lookback_weeks, as_of)
    if not history.empty:
        history = history[(history["sets"] > 0) & (history["reps"] > 0) & (history["weight_kg"] > 0)]

    if history.empty:
        daily = pd.DataFrame(columns=["date", "e1rm", "volume_kg"])
    else:
        daily = (
            history.groupby("date")
            .agg(e1rm=("e1rm", "max"), volume_kg=("volume_kg", "sum"))
            .reset_index()
        )
    daily["actual_pr"] = np.nan
    daily["is_actual_pr"] = False

    pr = find_best_pr(records or [], [exercise], resolver)
    if pr is not None and pr.weight > 0:
        pr_day = to_day(pr.date)
        start = as_of - pd.Timedelta(weeks=lookback_weeks)
        if start < pr_day <= as_of:
            on_pr_day = daily["date"] == pr_day
            if on_pr_day.any():
                daily.loc[on_pr_day, "actual_pr"] = pr.weight_kg
                daily.loc[on_pr_day, "is_actual_pr"] = True
            else:
                pr_row = pd.DataFrame([{
                    "date": pr_day, "e1rm": np.nan, "volume_kg": 0.0,
                    "actual_pr": pr.weight_kg, "is_actual_pr": True,
                }])
                daily = pr_row if daily.empty else pd.concat([daily, pr_row], ignore_index=True)

    return daily[columns].sort_values("date").reset_index(drop=True)
