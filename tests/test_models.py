"""
Tests for the input data model and configuration helpers.
Run: pytest tests/ -v
"""
from datetime import date

import pytest


class TestBoundaryValidation:

    def test_negative_performance_rejected(self):
        from strength_analytics.models import ExercisePerformance
        with pytest.raises(ValueError):
            ExercisePerformance("Squat", sets=-1, reps=5, weight=100)
        with pytest.raises(ValueError):
            ExercisePerformance("Squat", sets=3, reps=5, weight=-100)

    def test_enum_fields_coerced(self):
        from strength_analytics.models import ExerciseCategory, ExercisePerformance, WeightUnit
        perf = ExercisePerformance("Squat", sets=3, reps=5, weight=225, weight_unit="lbs", category="Lower Body")
        assert perf.weight_unit is WeightUnit.LBS
        assert perf.category is ExerciseCategory.LOWER_BODY
        assert perf.weight_kg == pytest.approx(102.0582)

    def test_unknown_unit_rejected(self):
        from strength_analytics.models import ExercisePerformance
        with pytest.raises(ValueError):
            ExercisePerformance("Squat", sets=3, reps=5, weight=100, weight_unit="stone")

    def test_workout_log_needs_real_date(self):
        from strength_analytics.models import WorkoutLog
        with pytest.raises(TypeError):
            WorkoutLog(date="2026-02-01")
        assert WorkoutLog(date(2026, 2, 1), []).exercises == ()

    def test_gender_parse(self):
        from strength_analytics.models import Gender, UserProfile
        assert Gender.parse("Female") is Gender.FEMALE
        assert Gender.parse("female") is None
        assert UserProfile(gender="Male").gender is Gender.MALE
        assert UserProfile(gender="Non-binary").gender is None

    def test_mass_kg(self):
        from strength_analytics.models import Mass
        assert Mass(80).kg == 80
        assert Mass(176, "lbs").kg == pytest.approx(79.832, abs=1e-3)


class TestConfigHelpers:

    def test_exercise_category(self):
        from strength_analytics.config import get_exercise_category
        assert get_exercise_category("leg press") == "Lower Body"
        assert get_exercise_category("treadmill") == "Cardio"
        assert get_exercise_category("zercher squat") is None

    def test_canonical_exercises_include_alias_targets(self):
        from strength_analytics.config import get_canonical_exercises
        names = get_canonical_exercises()
        assert "bench press" in names
        assert "bulgarian split squat" in names

    def test_imbalance_pairs_match_bands(self):
        from strength_analytics.config import STRENGTH_RATIOS, get_imbalance_types
        assert set(get_imbalance_types()) == set(STRENGTH_RATIOS)
