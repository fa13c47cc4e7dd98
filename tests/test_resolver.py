"""
Tests for exercise name resolution.
Run: pytest tests/ -v
"""
import pytest


class TestNormalize:

    def test_case_and_whitespace(self):
        from strength_analytics.resolver import normalize_exercise_name
        assert normalize_exercise_name("  Bench   PRESS ") == "bench press"

    def test_equipment_prefix_dropped(self):
        from strength_analytics.resolver import normalize_exercise_name
        assert normalize_exercise_name("EGYM Leg Curl") == "leg curl"
        assert normalize_exercise_name("Machine Chest Press") == "chest press"

    def test_prefix_only_at_start(self):
        from strength_analytics.resolver import normalize_exercise_name
        assert normalize_exercise_name("Smith Machine Squat") == "smith machine squat"

    def test_parentheses_removed(self):
        from strength_analytics.resolver import normalize_exercise_name
        assert normalize_exercise_name("Leg Press (Sled)") == "leg press sled"

    def test_empty(self):
        from strength_analytics.resolver import normalize_exercise_name
        assert normalize_exercise_name("") == ""
        assert normalize_exercise_name(None) == ""


class TestDefaultResolver:

    def test_aliases(self):
        from strength_analytics.resolver import default_resolver
        r = default_resolver()
        assert r.resolve("Squats") == "squat"
        assert r.resolve("Seated Chest Press") == "chest press"
        assert r.resolve("Military Press") == "overhead press"
        assert r.resolve("Row") == "seated row"
        assert r.resolve("EGYM Lat Pulldowns") == "lat pulldown"

    def test_canonical_match_after_normalizing(self):
        from strength_analytics.resolver import default_resolver
        r = default_resolver()
        assert r.resolve("BENCH PRESS") == "bench press"
        assert r.resolve("Machine Leg Extension") == "leg extension"

    def test_unknown_returned_unchanged(self):
        from strength_analytics.resolver import default_resolver
        r = default_resolver()
        assert r.resolve("Turkish Get-Up") == "Turkish Get-Up"
        assert not r.is_known("Turkish Get-Up")

    def test_idempotent(self):
        from strength_analytics.resolver import default_resolver
        r = default_resolver()
        for name in ["Squats", "Bench Presses", "EGYM Row", "leg curl", "Zercher Squat", "Butterflies"]:
            once = r.resolve(name)
            assert r.resolve(once) == once

    def test_every_canonical_resolves_to_itself(self):
        from strength_analytics.config import get_canonical_exercises
        from strength_analytics.resolver import default_resolver
        r = default_resolver()
        for name in get_canonical_exercises():
            assert r.resolve(name) == name

    def test_cached(self):
        from strength_analytics.resolver import default_resolver
        assert default_resolver() is default_resolver()


class TestInjectedTables:

    def test_custom_tables(self):
        from strength_analytics.resolver import ExerciseResolver
        r = ExerciseResolver({"RDL": "romanian deadlift"}, ["deadlift"])
        assert r.resolve("rdl") == "romanian deadlift"
        assert r.resolve("Deadlift") == "deadlift"
        assert r.canonical_names == {"deadlift", "romanian deadlift"}

    def test_ambiguous_tables_rejected(self):
        from strength_analytics.resolver import ExerciseResolver
        # "squat" is canonical but also aliased elsewhere, so resolve() would not be idempotent.
        with pytest.raises(ValueError, match="Ambiguous"):
            ExerciseResolver({"squat": "back squat"}, ["squat"])

    def test_resolve_options_dedupes_in_order(self):
        from strength_analytics.resolver import default_resolver
        r = default_resolver()
        assert r.resolve_options(["Seated Row", "rows", "Row", "Lat Pulldown"]) == \
            ["seated row", "rows", "lat pulldown"]
