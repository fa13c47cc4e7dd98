"""
Strength Analytics — Bilateral strength balance

For each configured pair of opposing movements (push vs. pull, hamstring vs.
quad...), compare each side's average e1RM over the recent window and flag
level or ratio imbalances.
"""
import logging
from functools import lru_cache
from typing import Optional

import pandas as pd

from strength_analytics.analytics import filter_window, logs_to_dataframe
from strength_analytics.config import IMBALANCE_CONFIG, LOOKBACK_WEEKS
from strength_analytics.models import (
    ImbalanceFinding,
    ImbalanceFocus,
    ImbalancePairConfig,
    LiftSummary,
    NoDataFinding,
    RatioSide,
    StrengthLevel,
    UserProfile,
    WeightUnit,
)
from strength_analytics.resolver import default_resolver
from strength_analytics.standards import classify_strength_level, guiding_level, ratio_band

logger = logging.getLogger(__name__)


def load_imbalance_pairs(raw: dict = IMBALANCE_CONFIG) -> list:
    return [
        ImbalancePairConfig(
            name=name,
            lift1_options=tuple(cfg["lift1_options"]),
            lift2_options=tuple(cfg["lift2_options"]),
            numerator=RatioSide(cfg.get("numerator", "lift1")),
        )
        for name, cfg in raw.items()
    ]


@lru_cache(maxsize=1)
def default_imbalance_pairs() -> tuple:
    return tuple(load_imbalance_pairs())


def find_window_avg_e1rm(
    df: pd.DataFrame,
    exercise_options,
    resolver=None,
    lookback_weeks: int = LOOKBACK_WEEKS,
    as_of=None,
) -> Optional[LiftSummary]:
    """
    Best side candidate: the option with the highest average e1RM in the window.

    Only performances with sets, reps and weight above zero qualify. Session
    count is the number of distinct training days for the chosen exercise.
    """
    resolver = resolver or default_resolver()
    window = filter_window(df, lookback_weeks, as_of)
    if window.empty:
        return None

    options = resolver.resolve_options(exercise_options)
    window = window.assign(canonical=window["exercise"].map(resolver.resolve))
    qualifying = window[
        window["canonical"].isin(options)
        & (window["sets"] > 0)
        & (window["reps"] > 0)
        & (window["weight_kg"] > 0)
    ]
    if qualifying.empty:
        return None

    per_exercise = qualifying.groupby("canonical").agg(
        avg_e1rm=("e1rm", "mean"),
        sessions=("date", "nunique"),
    )
    best = per_exercise["avg_e1rm"].idxmax()
    return LiftSummary(
        exercise=best,
        weight=float(per_exercise.loc[best, "avg_e1rm"]),
        weight_unit=WeightUnit.KG,
        session_count=int(per_exercise.loc[best, "sessions"]),
    )


def detect_pair_imbalance(
    df: pd.DataFrame,
    pair: ImbalancePairConfig,
    profile: UserProfile,
    resolver=None,
    standards: Optional[dict] = None,
    bands: Optional[dict] = None,
    lookback_weeks: int = LOOKBACK_WEEKS,
    as_of=None,
):
    """
    Finding for one pair: `NoDataFinding` if either side has no qualifying
    performances, otherwise an `ImbalanceFinding`.

    Focus priority: Level Imbalance (both levels known and different), then
    Ratio Imbalance (a band exists and the ratio falls outside it), else
    Balanced.
    """
    resolver = resolver or default_resolver()
    lift1 = find_window_avg_e1rm(df, pair.lift1_options, resolver, lookback_weeks, as_of)
    lift2 = find_window_avg_e1rm(df, pair.lift2_options, resolver, lookback_weeks, as_of)
    if lift1 is None or lift2 is None:
        logger.debug("%s: no data (lift1=%s, lift2=%s)", pair.name, lift1 is not None, lift2 is not None)
        return NoDataFinding(pair.name)

    ratio = pair.ratio(lift1.weight, lift2.weight)

    level1 = classify_strength_level(
        lift1.weight, lift1.weight_unit, lift1.exercise, profile, standards=standards, resolver=resolver,
    )
    level2 = classify_strength_level(
        lift2.weight, lift2.weight_unit, lift2.exercise, profile, standards=standards, resolver=resolver,
    )
    guide = guiding_level(level1, level2)
    band = ratio_band(pair.name, profile.gender, guide, bands)

    na = StrengthLevel.NOT_APPLICABLE
    if level1 != na and level2 != na and level1 != level2:
        focus = ImbalanceFocus.LEVEL_IMBALANCE
    elif band is not None and not band.contains(ratio):
        focus = ImbalanceFocus.RATIO_IMBALANCE
    else:
        focus = ImbalanceFocus.BALANCED

    return ImbalanceFinding(
        pair=pair.name,
        lift1=lift1,
        lift2=lift2,
        lift1_level=level1,
        lift2_level=level2,
        guiding_level=guide,
        ratio=ratio,
        band=band,
        focus=focus,
    )


def strength_imbalances(
    data,
    profile: UserProfile,
    pairs=None,
    resolver=None,
    standards: Optional[dict] = None,
    bands: Optional[dict] = None,
    lookback_weeks: int = LOOKBACK_WEEKS,
    as_of=None,
) -> list:
    """
    One finding per configured pair, in configuration order.

    `data` is either a performance DataFrame (see `analytics.logs_to_dataframe`)
    or an iterable of WorkoutLog.
    """
    resolver = resolver or default_resolver()
    df = data if isinstance(data, pd.DataFrame) else logs_to_dataframe(data, resolver)
    pairs = pairs if pairs is not None else default_imbalance_pairs()
    return [
        detect_pair_imbalance(df, pair, profile, resolver, standards, bands, lookback_weeks, as_of)
        for pair in pairs
    ]
