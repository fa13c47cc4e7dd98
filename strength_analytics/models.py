"""
Strength Analytics — Data model

Inputs arrive already deserialized from the persistence layer; these types
are the boundary. Records with negative counts or weights are rejected here
so the analytics never see them.
"""
from dataclasses import dataclass, field
from datetime import date, datetime
from enum import Enum
from typing import Optional

from strength_analytics.config import LBS_TO_KG


class WeightUnit(str, Enum):
    KG = "kg"
    LBS = "lbs"


class Gender(str, Enum):
    MALE = "Male"
    FEMALE = "Female"

    @classmethod
    def parse(cls, value) -> Optional["Gender"]:
        """Map a stored profile value to a supported gender, or None."""
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            return None


class ExerciseCategory(str, Enum):
    UPPER_BODY = "Upper Body"
    LOWER_BODY = "Lower Body"
    FULL_BODY = "Full Body"
    CORE = "Core"
    CARDIO = "Cardio"
    OTHER = "Other"


class StrengthLevel(str, Enum):
    BEGINNER = "Beginner"
    INTERMEDIATE = "Intermediate"
    ADVANCED = "Advanced"
    ELITE = "Elite"
    NOT_APPLICABLE = "N/A"


# Rank order for comparisons; N/A sits outside the scale.
LEVEL_RANKS = {
    StrengthLevel.BEGINNER: 0,
    StrengthLevel.INTERMEDIATE: 1,
    StrengthLevel.ADVANCED: 2,
    StrengthLevel.ELITE: 3,
    StrengthLevel.NOT_APPLICABLE: -1,
}


def to_kg(weight: float, unit) -> float:
    return weight * LBS_TO_KG if WeightUnit(unit) == WeightUnit.LBS else float(weight)


@dataclass(frozen=True)
class Mass:
    """A body-composition value such as bodyweight or skeletal muscle mass."""
    value: float
    unit: WeightUnit = WeightUnit.KG

    @property
    def kg(self) -> float:
        return to_kg(self.value, self.unit)


@dataclass(frozen=True)
class ExercisePerformance:
    """One logged set-group: `sets` × `reps` at `weight`."""
    name: str
    sets: int
    reps: int
    weight: float
    weight_unit: WeightUnit = WeightUnit.KG
    category: ExerciseCategory = ExerciseCategory.OTHER

    def __post_init__(self):
        if self.sets < 0 or self.reps < 0:
            raise ValueError(f"{self.name!r}: sets and reps must be >= 0 (got {self.sets}x{self.reps})")
        if self.weight < 0:
            raise ValueError(f"{self.name!r}: weight must be >= 0 (got {self.weight})")
        object.__setattr__(self, "weight_unit", WeightUnit(self.weight_unit))
        object.__setattr__(self, "category", ExerciseCategory(self.category))

    @property
    def weight_kg(self) -> float:
        return to_kg(self.weight, self.weight_unit)


@dataclass(frozen=True)
class WorkoutLog:
    date: date
    exercises: tuple = ()

    def __post_init__(self):
        if not isinstance(self.date, (date, datetime)):
            raise TypeError(f"WorkoutLog.date must be a date/datetime, got {type(self.date).__name__}")
        object.__setattr__(self, "exercises", tuple(self.exercises))


@dataclass(frozen=True)
class PersonalRecord:
    exercise_name: str
    weight: float
    date: date
    weight_unit: WeightUnit = WeightUnit.KG
    category: ExerciseCategory = ExerciseCategory.OTHER

    def __post_init__(self):
        if self.weight < 0:
            raise ValueError(f"{self.exercise_name!r}: weight must be >= 0 (got {self.weight})")
        object.__setattr__(self, "weight_unit", WeightUnit(self.weight_unit))
        object.__setattr__(self, "category", ExerciseCategory(self.category))

    @property
    def weight_kg(self) -> float:
        return to_kg(self.weight, self.weight_unit)


@dataclass(frozen=True)
class UserProfile:
    """The profile fields used as normalization bases. Any of them may be missing."""
    age: Optional[int] = None
    gender: Optional[Gender] = None
    bodyweight: Optional[Mass] = None
    skeletal_muscle_mass: Optional[Mass] = None

    def __post_init__(self):
        object.__setattr__(self, "gender", Gender.parse(self.gender))


@dataclass(frozen=True)
class StrengthThresholds:
    intermediate: float
    advanced: float
    elite: float

    def __post_init__(self):
        if not self.intermediate <= self.advanced <= self.elite:
            raise ValueError(f"thresholds must be ascending: {self}")


@dataclass(frozen=True)
class RatioBand:
    """Acceptable ratio range for a pair at one guiding level."""
    target: float
    lower: float
    upper: float

    def __post_init__(self):
        if not self.lower <= self.target <= self.upper:
            raise ValueError(f"ratio band must satisfy lower <= target <= upper: {self}")

    def contains(self, ratio: float) -> bool:
        return self.lower <= ratio <= self.upper


class ImbalanceFocus(str, Enum):
    BALANCED = "Balanced"
    LEVEL_IMBALANCE = "Level Imbalance"
    RATIO_IMBALANCE = "Ratio Imbalance"


class RatioSide(str, Enum):
    LIFT1 = "lift1"
    LIFT2 = "lift2"


@dataclass(frozen=True)
class ImbalancePairConfig:
    name: str
    lift1_options: tuple
    lift2_options: tuple
    numerator: RatioSide = RatioSide.LIFT1

    def ratio(self, lift1_kg: float, lift2_kg: float) -> float:
        if self.numerator == RatioSide.LIFT1:
            return lift1_kg / lift2_kg
        return lift2_kg / lift1_kg


@dataclass(frozen=True)
class LiftSummary:
    """Best recent figure for one side of a pair (average e1RM over the window)."""
    exercise: str
    weight: float
    weight_unit: WeightUnit
    session_count: int


@dataclass(frozen=True)
class NoDataFinding:
    pair: str
    has_data: bool = field(default=False, init=False)


@dataclass(frozen=True)
class ImbalanceFinding:
    pair: str
    lift1: LiftSummary
    lift2: LiftSummary
    lift1_level: StrengthLevel
    lift2_level: StrengthLevel
    guiding_level: StrengthLevel
    ratio: float
    band: Optional[RatioBand]
    focus: ImbalanceFocus
    has_data: bool = field(default=True, init=False)
