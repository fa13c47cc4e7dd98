"""
Tests for strength standards, level classification and ratio bands.
Run: pytest tests/ -v
"""
import pytest


def _profile(**overrides):
    from strength_analytics.models import Mass, UserProfile
    fields = {"age": 30, "gender": "Male", "bodyweight": Mass(80), "skeletal_muscle_mass": Mass(36)}
    fields.update(overrides)
    return UserProfile(**fields)


class TestClassifyStrengthLevel:

    def test_bench_press_bands(self, male_80kg):
        from strength_analytics.models import StrengthLevel
        from strength_analytics.standards import classify_strength_level
        assert classify_strength_level(60, "kg", "Bench Press", male_80kg) == StrengthLevel.BEGINNER
        assert classify_strength_level(80, "kg", "Bench Press", male_80kg) == StrengthLevel.INTERMEDIATE
        assert classify_strength_level(120, "kg", "Bench Press", male_80kg) == StrengthLevel.ADVANCED
        assert classify_strength_level(160, "kg", "Bench Press", male_80kg) == StrengthLevel.ELITE

    def test_pounds_converted(self, male_80kg):
        from strength_analytics.models import StrengthLevel
        from strength_analytics.standards import classify_strength_level
        # 265 lbs ≈ 120.2 kg → 1.50 × bodyweight
        assert classify_strength_level(265, "lbs", "bench press", male_80kg) == StrengthLevel.ADVANCED

    def test_monotonic_in_weight(self, male_80kg):
        from strength_analytics.models import LEVEL_RANKS
        from strength_analytics.standards import classify_strength_level
        ranks = [
            LEVEL_RANKS[classify_strength_level(w, "kg", "squat", male_80kg)]
            for w in range(0, 250, 5)
        ]
        assert ranks == sorted(ranks)

    def test_unset_gender_is_na(self):
        from strength_analytics.models import StrengthLevel
        from strength_analytics.standards import classify_strength_level
        for gender in (None, "Other", ""):
            profile = _profile(gender=gender)
            assert classify_strength_level(200, "kg", "squat", profile) == StrengthLevel.NOT_APPLICABLE

    def test_muscle_mass_base_required(self):
        from strength_analytics.models import StrengthLevel
        from strength_analytics.standards import classify_strength_level
        profile = _profile(skeletal_muscle_mass=None)
        assert classify_strength_level(100, "kg", "glutes", profile) == StrengthLevel.NOT_APPLICABLE
        assert classify_strength_level(40, "kg", "Rotary Torso", profile) == StrengthLevel.NOT_APPLICABLE
        # bodyweight-based lifts are unaffected
        assert classify_strength_level(100, "kg", "squat", profile) == StrengthLevel.INTERMEDIATE

    def test_muscle_mass_base_used(self):
        from strength_analytics.models import StrengthLevel
        from strength_analytics.standards import classify_strength_level
        # 90 / 36 = 2.5 × SMM
        assert classify_strength_level(90, "kg", "glutes", _profile()) == StrengthLevel.ADVANCED

    def test_zero_bodyweight_is_na(self):
        from strength_analytics.models import Mass, StrengthLevel
        from strength_analytics.standards import classify_strength_level
        profile = _profile(bodyweight=Mass(0))
        assert classify_strength_level(100, "kg", "squat", profile) == StrengthLevel.NOT_APPLICABLE

    def test_unknown_exercise_is_na(self, male_80kg):
        from strength_analytics.models import StrengthLevel
        from strength_analytics.standards import classify_strength_level
        assert classify_strength_level(100, "kg", "Zercher Squat", male_80kg) == StrengthLevel.NOT_APPLICABLE

    def test_age_adjustment(self):
        from strength_analytics.models import StrengthLevel
        from strength_analytics.standards import classify_strength_level
        # 76 / 80 = 0.95 → Beginner at 30; × 1.10 at 50 = 1.045 → Intermediate
        assert classify_strength_level(76, "kg", "bench press", _profile(age=30)) == StrengthLevel.BEGINNER
        assert classify_strength_level(76, "kg", "bench press", _profile(age=50)) == StrengthLevel.INTERMEDIATE

    def test_age_factor_uncapped(self):
        from strength_analytics.standards import age_factor
        assert age_factor(None) == 1.0
        assert age_factor(40) == 1.0
        assert age_factor(41) == pytest.approx(1.01)
        assert age_factor(100) == pytest.approx(1.6)

    def test_injected_standards(self, male_80kg):
        from strength_analytics.models import StrengthLevel
        from strength_analytics.standards import classify_strength_level, load_strength_standards
        standards = load_strength_standards({
            "deadlift": {
                "type": "bw",
                "category": "Full Body",
                "standards": {"Male": {"intermediate": 1.5, "advanced": 2.0, "elite": 2.5}},
            },
        })
        assert classify_strength_level(160, "kg", "deadlift", male_80kg, standards=standards) \
            == StrengthLevel.ADVANCED
        assert classify_strength_level(160, "kg", "bench press", male_80kg, standards=standards) \
            == StrengthLevel.NOT_APPLICABLE


class TestStandardsTables:

    def test_defaults_load(self):
        from strength_analytics.standards import default_strength_standards, BaseType
        standards = default_strength_standards()
        assert len(standards) == 21
        assert standards["glutes"].base_type == BaseType.MUSCLE_MASS
        assert standards["bench press"].base_type == BaseType.BODYWEIGHT

    def test_unknown_base_type_rejected(self):
        from strength_analytics.standards import load_strength_standards
        with pytest.raises(ValueError):
            load_strength_standards({
                "x": {"type": "height", "category": "Core",
                      "standards": {"Male": {"intermediate": 1, "advanced": 2, "elite": 3}}},
            })

    def test_unordered_thresholds_rejected(self):
        from strength_analytics.standards import load_strength_standards
        with pytest.raises(ValueError):
            load_strength_standards({
                "x": {"type": "bw", "category": "Core",
                      "standards": {"Male": {"intermediate": 2, "advanced": 1, "elite": 3}}},
            })

    def test_unordered_band_rejected(self):
        from strength_analytics.standards import load_ratio_bands
        with pytest.raises(ValueError):
            load_ratio_bands({"P": {"Male": {"Beginner": {"target": 0.9, "lower": 0.5, "upper": 0.8}}}})

    def test_every_default_band_ordered(self):
        from strength_analytics.standards import default_ratio_bands
        for genders in default_ratio_bands().values():
            for levels in genders.values():
                for band in levels.values():
                    assert band.lower <= band.target <= band.upper


class TestStrengthThresholds:

    def test_kg_rounded_up(self, male_80kg):
        from strength_analytics.models import StrengthLevel
        from strength_analytics.standards import strength_thresholds
        t = strength_thresholds("Chest Press", male_80kg)
        # 0.80 / 1.15 / 1.50 × 80
        assert t == {StrengthLevel.INTERMEDIATE: 64, StrengthLevel.ADVANCED: 92, StrengthLevel.ELITE: 120}

    def test_lbs(self, male_80kg):
        from strength_analytics.models import StrengthLevel
        from strength_analytics.standards import strength_thresholds
        t = strength_thresholds("bench press", male_80kg, output_unit="lbs")
        assert t[StrengthLevel.INTERMEDIATE] == 177  # 80 kg / 0.453592 = 176.37

    def test_threshold_weight_classifies_at_level(self):
        from strength_analytics.models import Mass
        from strength_analytics.standards import classify_strength_level, strength_thresholds
        profile = _profile(age=47, bodyweight=Mass(83.4))
        for level, weight in strength_thresholds("leg press", profile).items():
            assert classify_strength_level(weight, "kg", "leg press", profile) == level

    def test_pound_thresholds_classify_at_level(self):
        from strength_analytics.models import Mass, StrengthLevel
        from strength_analytics.standards import classify_strength_level, strength_thresholds
        profile = _profile(bodyweight=Mass(200 / 2.20462))
        t = strength_thresholds("bench press", profile, output_unit="lbs")
        assert t[StrengthLevel.INTERMEDIATE] == 201
        for level, weight in t.items():
            assert classify_strength_level(weight, "lbs", "bench press", profile) == level

    def test_pound_bodyweight_threshold_exact(self):
        from strength_analytics.models import Mass, StrengthLevel
        from strength_analytics.standards import classify_strength_level, strength_thresholds
        profile = _profile(bodyweight=Mass(200, "lbs"))
        t = strength_thresholds("bench press", profile, output_unit="lbs")
        assert t[StrengthLevel.INTERMEDIATE] == 200
        assert classify_strength_level(200, "lbs", "bench press", profile) == StrengthLevel.INTERMEDIATE

    def test_age_lowers_thresholds(self):
        from strength_analytics.models import StrengthLevel
        from strength_analytics.standards import strength_thresholds
        young = strength_thresholds("squat", _profile(age=30))
        old = strength_thresholds("squat", _profile(age=60))
        assert old[StrengthLevel.ELITE] < young[StrengthLevel.ELITE]

    def test_unclassifiable(self):
        from strength_analytics.standards import strength_thresholds
        assert strength_thresholds("squat", _profile(gender=None)) is None
        assert strength_thresholds("Zercher Squat", _profile()) is None


class TestRatioBands:

    def test_guiding_level_is_weaker(self):
        from strength_analytics.models import StrengthLevel as L
        from strength_analytics.standards import guiding_level
        assert guiding_level(L.ADVANCED, L.INTERMEDIATE) == L.INTERMEDIATE
        assert guiding_level(L.ELITE, L.ELITE) == L.ELITE
        assert guiding_level(L.BEGINNER, L.NOT_APPLICABLE) == L.NOT_APPLICABLE

    def test_lookup(self):
        from strength_analytics.models import Gender, StrengthLevel
        from strength_analytics.standards import ratio_band
        band = ratio_band("Hamstring vs. Quad", Gender.FEMALE, StrengthLevel.INTERMEDIATE)
        assert (band.lower, band.target, band.upper) == (0.65, 0.68, 0.72)

    def test_missing_lookup_is_none(self):
        from strength_analytics.models import Gender, StrengthLevel
        from strength_analytics.standards import ratio_band
        assert ratio_band("Hamstring vs. Quad", None, StrengthLevel.BEGINNER) is None
        assert ratio_band("Hamstring vs. Quad", Gender.MALE, StrengthLevel.NOT_APPLICABLE) is None
        assert ratio_band("Unknown Pair", Gender.MALE, StrengthLevel.BEGINNER) is None
