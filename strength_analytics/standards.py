"""
Strength Analytics — Strength standards & level classification

A lift is classified by its ratio to a body-composition base (bodyweight or
skeletal muscle mass, depending on the exercise), optionally age-adjusted,
against gender-specific thresholds.

Missing inputs never raise: they classify as N/A.
"""
import logging
import math
from dataclasses import dataclass
from enum import Enum
from functools import lru_cache
from typing import Optional

from strength_analytics.config import (
    AGE_ADJUSTMENT_PER_YEAR,
    AGE_ADJUSTMENT_START,
    LBS_TO_KG,
    STRENGTH_RATIOS,
    STRENGTH_STANDARDS,
)
from strength_analytics.models import (
    LEVEL_RANKS,
    ExerciseCategory,
    Gender,
    RatioBand,
    StrengthLevel,
    StrengthThresholds,
    UserProfile,
    WeightUnit,
    to_kg,
)
from strength_analytics.resolver import default_resolver

logger = logging.getLogger(__name__)


class BaseType(str, Enum):
    BODYWEIGHT = "bw"
    MUSCLE_MASS = "smm"

    def base_value_kg(self, profile: UserProfile) -> Optional[float]:
        """The profile value this standard is relative to, in kg, or None if missing."""
        if self is BaseType.BODYWEIGHT:
            mass = profile.bodyweight
        else:
            mass = profile.skeletal_muscle_mass
        return mass.kg if mass is not None else None


@dataclass(frozen=True)
class ExerciseStrengthStandard:
    base_type: BaseType
    category: ExerciseCategory
    thresholds: dict  # {Gender: StrengthThresholds}


def load_strength_standards(raw: dict = STRENGTH_STANDARDS) -> dict:
    """Build {canonical name: ExerciseStrengthStandard} from a config table."""
    standards = {}
    for name, entry in raw.items():
        standards[name] = ExerciseStrengthStandard(
            base_type=BaseType(entry["type"]),
            category=ExerciseCategory(entry["category"]),
            thresholds={
                Gender(gender): StrengthThresholds(**ratios)
                for gender, ratios in entry["standards"].items()
            },
        )
    return standards


def load_ratio_bands(raw: dict = STRENGTH_RATIOS) -> dict:
    """Build {pair: {Gender: {StrengthLevel: RatioBand}}} from a config table."""
    return {
        pair: {
            Gender(gender): {
                StrengthLevel(level): RatioBand(**band)
                for level, band in levels.items()
            }
            for gender, levels in genders.items()
        }
        for pair, genders in raw.items()
    }


@lru_cache(maxsize=1)
def default_strength_standards() -> dict:
    return load_strength_standards()


@lru_cache(maxsize=1)
def default_ratio_bands() -> dict:
    return load_ratio_bands()


# ═══════════════════════════════════════════════════════════════════════
# LEVEL CLASSIFICATION
# ═══════════════════════════════════════════════════════════════════════

def age_factor(age: Optional[int]) -> float:
    """Linear bonus past 40; no upper clamp."""
    if age and age > AGE_ADJUSTMENT_START:
        return 1 + (age - AGE_ADJUSTMENT_START) * AGE_ADJUSTMENT_PER_YEAR
    return 1.0


def _thresholds_and_base(exercise_name, profile, standards, resolver):
    """(thresholds, base_kg) for this exercise and profile, or None with the reason logged."""
    canonical = resolver.resolve(exercise_name)
    standard = standards.get(canonical)
    if standard is None:
        logger.debug("No strength standard for %r", canonical)
        return None
    if profile.gender is None:
        logger.debug("Gender unset, %r not classifiable", canonical)
        return None
    thresholds = standard.thresholds.get(profile.gender)
    if thresholds is None:
        logger.debug("No %s thresholds for %r", profile.gender.value, canonical)
        return None
    base_kg = standard.base_type.base_value_kg(profile)
    if base_kg is None or base_kg <= 0:
        logger.debug("Missing %s base for %r", standard.base_type.value, canonical)
        return None
    return thresholds, base_kg


def classify_strength_level(
    lifted_weight: float,
    weight_unit,
    exercise_name: str,
    profile: UserProfile,
    standards: Optional[dict] = None,
    resolver=None,
) -> StrengthLevel:
    """
    Strength level for a single lift.

    Returns N/A when the exercise has no standard, gender is unset, or the
    profile lacks the bodyweight / muscle-mass value the standard needs.
    """
    standards = standards if standards is not None else default_strength_standards()
    resolver = resolver or default_resolver()

    found = _thresholds_and_base(exercise_name, profile, standards, resolver)
    if found is None:
        return StrengthLevel.NOT_APPLICABLE
    thresholds, base_kg = found

    ratio = to_kg(lifted_weight, weight_unit) / base_kg * age_factor(profile.age)

    if ratio >= thresholds.elite:
        return StrengthLevel.ELITE
    if ratio >= thresholds.advanced:
        return StrengthLevel.ADVANCED
    if ratio >= thresholds.intermediate:
        return StrengthLevel.INTERMEDIATE
    return StrengthLevel.BEGINNER


def strength_thresholds(
    exercise_name: str,
    profile: UserProfile,
    output_unit=WeightUnit.KG,
    standards: Optional[dict] = None,
    resolver=None,
) -> Optional[dict]:
    """
    Weight needed to reach each level, in `output_unit`, rounded up.

    Rounded up so that lifting exactly the returned weight classifies at
    that level. None when the lift cannot be classified for this profile.
    """
    standards = standards if standards is not None else default_strength_standards()
    resolver = resolver or default_resolver()

    found = _thresholds_and_base(exercise_name, profile, standards, resolver)
    if found is None:
        return None
    thresholds, base_kg = found
    factor = age_factor(profile.age)

    unit = WeightUnit(output_unit)

    def weight_for(ratio: float) -> int:
        weight = ratio * base_kg / factor
        if unit == WeightUnit.LBS:
            weight /= LBS_TO_KG
        needed = math.ceil(round(weight, 6))
        # rounding can land a hair under the threshold
        if to_kg(needed, unit) / base_kg * factor < ratio:
            needed += 1
        return needed

    return {
        StrengthLevel.INTERMEDIATE: weight_for(thresholds.intermediate),
        StrengthLevel.ADVANCED: weight_for(thresholds.advanced),
        StrengthLevel.ELITE: weight_for(thresholds.elite),
    }


# ═══════════════════════════════════════════════════════════════════════
# RATIO BANDS
# ═══════════════════════════════════════════════════════════════════════

def guiding_level(level1: StrengthLevel, level2: StrengthLevel) -> StrengthLevel:
    """The weaker of two levels; N/A if either is N/A."""
    if StrengthLevel.NOT_APPLICABLE in (level1, level2):
        return StrengthLevel.NOT_APPLICABLE
    return min(level1, level2, key=LEVEL_RANKS.get)


def ratio_band(pair: str, gender: Optional[Gender], level: StrengthLevel, bands: Optional[dict] = None) -> Optional[RatioBand]:
    if level == StrengthLevel.NOT_APPLICABLE or gender is None:
        return None
    bands = bands if bands is not None else default_ratio_bands()
    return bands.get(pair, {}).get(gender, {}).get(level)
