"""
Strength Analytics — Trend classification

Two separate procedures:

- `classify_trend`: least-squares slope over raw (time, value) points with a
  noise tolerance of 0.1% of the mean value.
- `weekly_progression_trend`: first-to-last change across active weeks,
  combined with a recent-plateau check, because a slope alone stays
  optimistic after early gains flatten out.

Plus the supporting series helpers used for lift progression displays.
"""
import logging
from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import NamedTuple, Optional

import numpy as np
import pandas as pd

from strength_analytics.analytics import to_naive
from strength_analytics.config import POSITIVE_TREND_PCT, STAGNATION_WEEKS, TREND_TOLERANCE_PCT

logger = logging.getLogger(__name__)


class TrendDirection(str, Enum):
    POSITIVE = "Positive"
    NEGATIVE = "Negative"
    STAGNATED = "Stagnated"
    REGRESSING = "Regressing"


class ProgressionTrend(str, Enum):
    POSITIVE = "Positive"
    PLATEAUED = "Slightly Positive / Plateaued"
    STAGNATED_OR_REGRESSING = "Stagnated or Regressing"
    STAGNATED = "Stagnated"
    INSUFFICIENT_DATA = "Data insufficient to determine trend"


class ProgressionStatus(str, Enum):
    EXCELLENT = "Excellent"
    GOOD = "Good"
    STAGNATED = "Stagnated"
    REGRESSING = "Regressing"


class TrendPoint(NamedTuple):
    x: object  # date, datetime, Timestamp or number
    y: float


@dataclass(eq=False)
class WeeklyTrend:
    label: ProgressionTrend
    percent_change: Optional[float]
    recent_stagnation: bool
    weekly: pd.DataFrame


# ═══════════════════════════════════════════════════════════════════════
# 1. SLOPE-BASED DIRECTION
# ═══════════════════════════════════════════════════════════════════════

def regression_slope(x, y) -> float:
    """OLS slope; 0.0 when every x is identical."""
    x = np.asarray(x, dtype=float)
    y = np.asarray(y, dtype=float)
    n = len(x)
    denominator = n * np.sum(x * x) - np.sum(x) ** 2
    if denominator == 0:
        return 0.0
    return float((n * np.sum(x * y) - np.sum(x) * np.sum(y)) / denominator)


def _numeric_points(points) -> list:
    """Sort by time and express dates as days since the first point."""
    points = [TrendPoint(*p) for p in points]
    if points and isinstance(points[0].x, date):
        stamps = [(to_naive(p.x), p.y) for p in points]
        stamps.sort(key=lambda p: p[0])
        origin = stamps[0][0]
        return [((ts - origin) / pd.Timedelta(days=1), y) for ts, y in stamps]
    return sorted((float(p.x), float(p.y)) for p in points)


def classify_trend(points) -> TrendDirection:
    """
    Direction of a (time, value) series.

    Fewer than two points, or a slope within 0.1% of the mean value per
    unit of time (days for dated points), is Stagnated.
    """
    numeric = _numeric_points(points)
    if len(numeric) < 2:
        return TrendDirection.STAGNATED

    x, y = zip(*numeric)
    slope = regression_slope(x, y)
    tolerance = abs(np.mean(y)) * TREND_TOLERANCE_PCT
    if slope == 0 or abs(slope) < tolerance:
        return TrendDirection.STAGNATED
    return TrendDirection.POSITIVE if slope > 0 else TrendDirection.NEGATIVE


def with_recency(direction: TrendDirection, recently_stagnated: bool) -> TrendDirection:
    """A falling slope that has also stopped moving recently is Regressing."""
    if direction == TrendDirection.NEGATIVE and recently_stagnated:
        return TrendDirection.REGRESSING
    return direction


# ═══════════════════════════════════════════════════════════════════════
# 2. WEEKLY PROGRESSION WITH RECENCY
# ═══════════════════════════════════════════════════════════════════════

def _active_values(weekly: pd.DataFrame) -> list:
    if weekly.empty:
        return []
    active = weekly[weekly["n_performances"] > 0].sort_values("week_start")
    return active["avg_e1rm"].astype(float).tolist()


def recent_stagnation(values, weeks: int = STAGNATION_WEEKS) -> bool:
    """True if the last `weeks` values (2 if fewer exist) never increase."""
    if len(values) < 2:
        return False
    window = weeks if len(values) >= weeks else 2
    tail = list(values)[-window:]
    return all(later <= earlier for earlier, later in zip(tail, tail[1:]))


def weekly_progression_trend(weekly: pd.DataFrame) -> WeeklyTrend:
    """
    Label a weekly breakdown (see `analytics.weekly_breakdown`).

    Percent change runs from the first to the last active week. Empty weeks
    are skipped. One active week, or a zero first week, is insufficient data.
    """
    values = _active_values(weekly)
    if len(values) < 2 or values[0] <= 0:
        logger.debug("Weekly trend: %d active week(s), insufficient", len(values))
        return WeeklyTrend(ProgressionTrend.INSUFFICIENT_DATA, None, False, weekly)

    pct = (values[-1] - values[0]) / values[0] * 100
    stagnated = recent_stagnation(values)

    if pct > POSITIVE_TREND_PCT and not stagnated:
        label = ProgressionTrend.POSITIVE
    elif pct > 0 and stagnated:
        label = ProgressionTrend.PLATEAUED
    elif pct <= 0 and stagnated:
        label = ProgressionTrend.STAGNATED_OR_REGRESSING
    else:
        label = ProgressionTrend.STAGNATED

    return WeeklyTrend(label, round(pct, 2), stagnated, weekly)


def progression_status(weekly: pd.DataFrame) -> Optional[ProgressionStatus]:
    """
    Coarse status from the weekly e1RM slope as a % of the first active week.

    > 5% Excellent, > 1% Good, < -2% Regressing, otherwise Stagnated.
    None when fewer than two active weeks exist.
    """
    values = _active_values(weekly)
    if len(values) < 2:
        return None
    slope = regression_slope(range(len(values)), values)
    normalized = slope / values[0] * 100 if values[0] > 0 else 0.0

    if normalized > 5:
        return ProgressionStatus.EXCELLENT
    if normalized > 1:
        return ProgressionStatus.GOOD
    if normalized < -2:
        return ProgressionStatus.REGRESSING
    return ProgressionStatus.STAGNATED


# ═══════════════════════════════════════════════════════════════════════
# 3. TRENDLINE
# ═══════════════════════════════════════════════════════════════════════

def trendline(values) -> Optional[tuple]:
    """
    Fitted (start, end) values over index positions 0..len(values)-1.

    Missing or non-positive values are left out of the fit but still count
    as positions.
    """
    values = list(values)
    points = [(i, v) for i, v in enumerate(values) if pd.notna(v) and v > 0]
    if len(points) < 2:
        return None
    x, y = zip(*points)
    x_mean, y_mean = np.mean(x), np.mean(y)
    denominator = sum((xi - x_mean) ** 2 for xi in x)
    if denominator == 0:
        return None
    slope = sum((xi - x_mean) * (yi - y_mean) for xi, yi in points) / denominator
    intercept = y_mean - slope * x_mean
    return float(intercept), float(slope * (len(values) - 1) + intercept)


def trend_improvement(values) -> Optional[float]:
    """Percent change along the fitted trendline, or None."""
    line = trendline(values)
    if line is None:
        return None
    start, end = line
    if start <= 0:
        return None
    return (end - start) / start * 100
