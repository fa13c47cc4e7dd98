"""
Strength Analytics — Configuration

Static data tables consumed by the engine: strength standards, imbalance
ratio bands, imbalance pair definitions and exercise name aliases.

Tables are plain dicts keyed by canonical (lowercase) exercise name or pair
name. They are read-only inputs; the engine never mutates them.
"""
import logging
import os

# ── Units ────────────────────────────────────────────────────────────
LBS_TO_KG = 0.453592

# ── Analysis windows & thresholds ────────────────────────────────────
LOOKBACK_WEEKS = int(os.environ.get("STRENGTH_LOOKBACK_WEEKS", "6"))
WEEK_START = "MON"  # pandas anchored-offset suffix, e.g. "W-MON"

TREND_TOLERANCE_PCT = 0.001  # |slope| below 0.1% of mean(y) is flat
POSITIVE_TREND_PCT = 5.0  # first→last active week change for "Positive"
STAGNATION_WEEKS = 3  # consecutive non-increasing weeks = recent plateau

AGE_ADJUSTMENT_START = 40
AGE_ADJUSTMENT_PER_YEAR = 0.01

LOG_LEVEL = os.environ.get("STRENGTH_LOG_LEVEL", "WARNING")


def configure_logging(level: str | None = None) -> None:
    """Basic stderr logging for scripts and notebooks. Library code never calls this."""
    logging.basicConfig(
        level=(level or LOG_LEVEL).upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


# ═════════════════════════════════════════════════════════════════════
# STRENGTH STANDARDS — keyed by canonical exercise name
#
# Ratios are (weight lifted in kg) / (base value in kg).
# "type" selects the base: "bw" = bodyweight, "smm" = skeletal muscle mass.
# ═════════════════════════════════════════════════════════════════════

STRENGTH_STANDARDS = {
    "abdominal crunch": {
        "type": "bw",
        "category": "Core",
        "standards": {
            "Male": {"intermediate": 0.75, "advanced": 1.0, "elite": 1.3},
            "Female": {"intermediate": 0.60, "advanced": 0.85, "elite": 1.15},
        },
    },
    "abductor": {
        "type": "bw",
        "category": "Lower Body",
        "standards": {
            "Male": {"intermediate": 1.5, "advanced": 2.0, "elite": 2.5},
            "Female": {"intermediate": 1.25, "advanced": 1.75, "elite": 2.25},
        },
    },
    "adductor": {
        "type": "bw",
        "category": "Lower Body",
        "standards": {
            "Male": {"intermediate": 1.1, "advanced": 1.6, "elite": 2.1},
            "Female": {"intermediate": 1.00, "advanced": 1.50, "elite": 2.25},
        },
    },
    "back extension": {
        "type": "bw",
        "category": "Core",
        "standards": {
            "Male": {"intermediate": 0.80, "advanced": 1.10, "elite": 1.50},
            "Female": {"intermediate": 0.65, "advanced": 0.95, "elite": 1.35},
        },
    },
    "bench press": {
        "type": "bw",
        "category": "Upper Body",
        "standards": {
            "Male": {"intermediate": 1.0, "advanced": 1.5, "elite": 2.0},
            "Female": {"intermediate": 0.75, "advanced": 1.0, "elite": 1.25},
        },
    },
    "bicep curl": {
        "type": "bw",
        "category": "Upper Body",
        "standards": {
            "Male": {"intermediate": 0.35, "advanced": 0.5, "elite": 0.75},
            "Female": {"intermediate": 0.40, "advanced": 0.70, "elite": 1.00},
        },
    },
    "butterfly": {
        "type": "bw",
        "category": "Upper Body",
        "standards": {
            "Male": {"intermediate": 0.85, "advanced": 1.15, "elite": 1.55},
            "Female": {"intermediate": 0.60, "advanced": 0.90, "elite": 1.30},
        },
    },
    "chest press": {
        "type": "bw",
        "category": "Upper Body",
        "standards": {
            "Male": {"intermediate": 0.80, "advanced": 1.15, "elite": 1.50},
            "Female": {"intermediate": 0.55, "advanced": 0.90, "elite": 1.25},
        },
    },
    "glutes": {
        "type": "smm",
        "category": "Lower Body",
        "standards": {
            "Male": {"intermediate": 2.0, "advanced": 2.5, "elite": 3.0},
            "Female": {"intermediate": 2.2, "advanced": 2.8, "elite": 3.4},
        },
    },
    "hip thrust": {
        "type": "bw",
        "category": "Lower Body",
        "standards": {
            "Male": {"intermediate": 2.0, "advanced": 3.0, "elite": 4.0},
            "Female": {"intermediate": 1.50, "advanced": 2.25, "elite": 3.00},
        },
    },
    "lat pulldown": {
        "type": "bw",
        "category": "Upper Body",
        "standards": {
            "Male": {"intermediate": 0.9, "advanced": 1.2, "elite": 1.5},
            "Female": {"intermediate": 0.70, "advanced": 0.95, "elite": 1.30},
        },
    },
    "leg curl": {
        "type": "bw",
        "category": "Lower Body",
        "standards": {
            "Male": {"intermediate": 0.95, "advanced": 1.25, "elite": 1.75},
            "Female": {"intermediate": 0.75, "advanced": 1.05, "elite": 1.45},
        },
    },
    "leg extension": {
        "type": "bw",
        "category": "Lower Body",
        "standards": {
            "Male": {"intermediate": 1.5, "advanced": 1.75, "elite": 2.5},
            "Female": {"intermediate": 1.0, "advanced": 1.25, "elite": 2.0},
        },
    },
    "leg press": {
        "type": "bw",
        "category": "Lower Body",
        "standards": {
            "Male": {"intermediate": 2.2, "advanced": 3.2, "elite": 4.3},
            "Female": {"intermediate": 2.00, "advanced": 3.25, "elite": 4.50},
        },
    },
    "overhead press": {
        "type": "bw",
        "category": "Upper Body",
        "standards": {
            "Male": {"intermediate": 0.75, "advanced": 1.0, "elite": 1.3},
            "Female": {"intermediate": 0.50, "advanced": 0.85, "elite": 1.20},
        },
    },
    "reverse flys": {
        "type": "bw",
        "category": "Upper Body",
        "standards": {
            "Male": {"intermediate": 0.25, "advanced": 0.40, "elite": 0.60},
            "Female": {"intermediate": 0.20, "advanced": 0.35, "elite": 0.55},
        },
    },
    "rotary torso": {
        "type": "smm",
        "category": "Core",
        "standards": {
            "Male": {"intermediate": 0.8, "advanced": 1.0, "elite": 1.2},
            "Female": {"intermediate": 0.7, "advanced": 0.9, "elite": 1.1},
        },
    },
    "seated row": {
        "type": "bw",
        "category": "Upper Body",
        "standards": {
            "Male": {"intermediate": 1.0, "advanced": 1.5, "elite": 2.0},
            "Female": {"intermediate": 0.75, "advanced": 1.25, "elite": 1.75},
        },
    },
    "shoulder press": {
        "type": "bw",
        "category": "Upper Body",
        "standards": {
            "Male": {"intermediate": 0.75, "advanced": 1.0, "elite": 1.3},
            "Female": {"intermediate": 0.50, "advanced": 0.85, "elite": 1.20},
        },
    },
    "squat": {
        "type": "bw",
        "category": "Lower Body",
        "standards": {
            "Male": {"intermediate": 1.25, "advanced": 1.75, "elite": 2.25},
            "Female": {"intermediate": 1.0, "advanced": 1.5, "elite": 2.0},
        },
    },
    "triceps": {
        "type": "bw",
        "category": "Upper Body",
        "standards": {
            "Male": {"intermediate": 0.50, "advanced": 0.75, "elite": 1.0},
            "Female": {"intermediate": 0.75, "advanced": 1.25, "elite": 1.50},
        },
    },
}


# ═════════════════════════════════════════════════════════════════════
# IMBALANCE RATIO BANDS — pair → gender → guiding level
# ═════════════════════════════════════════════════════════════════════

_PUSH_PULL_BANDS = {
    "Female": {
        "Beginner": {"target": 0.55, "lower": 0.50, "upper": 0.60},
        "Intermediate": {"target": 0.62, "lower": 0.60, "upper": 0.65},
        "Advanced": {"target": 0.67, "lower": 0.65, "upper": 0.70},
        "Elite": {"target": 0.67, "lower": 0.65, "upper": 0.70},
    },
    "Male": {
        "Beginner": {"target": 0.60, "lower": 0.55, "upper": 0.65},
        "Intermediate": {"target": 0.70, "lower": 0.65, "upper": 0.75},
        "Advanced": {"target": 0.75, "lower": 0.70, "upper": 0.80},
        "Elite": {"target": 0.75, "lower": 0.70, "upper": 0.80},
    },
}

STRENGTH_RATIOS = {
    "Vertical Push vs. Pull": _PUSH_PULL_BANDS,
    "Horizontal Push vs. Pull": _PUSH_PULL_BANDS,
    "Hamstring vs. Quad": {
        "Female": {
            "Beginner": {"target": 0.63, "lower": 0.60, "upper": 0.67},
            "Intermediate": {"target": 0.68, "lower": 0.65, "upper": 0.72},
            "Advanced": {"target": 0.74, "lower": 0.70, "upper": 0.78},
            "Elite": {"target": 0.74, "lower": 0.70, "upper": 0.78},
        },
        "Male": {
            "Beginner": {"target": 0.60, "lower": 0.55, "upper": 0.65},
            "Intermediate": {"target": 0.65, "lower": 0.60, "upper": 0.70},
            "Advanced": {"target": 0.71, "lower": 0.67, "upper": 0.75},
            "Elite": {"target": 0.71, "lower": 0.67, "upper": 0.75},
        },
    },
    "Adductor vs. Abductor": {
        "Female": {
            "Beginner": {"target": 0.75, "lower": 0.65, "upper": 0.85},
            "Intermediate": {"target": 0.80, "lower": 0.70, "upper": 0.90},
            "Advanced": {"target": 0.85, "lower": 0.75, "upper": 0.95},
            "Elite": {"target": 0.85, "lower": 0.75, "upper": 0.95},
        },
        "Male": {
            "Beginner": {"target": 0.75, "lower": 0.65, "upper": 0.85},
            "Intermediate": {"target": 0.82, "lower": 0.75, "upper": 0.90},
            "Advanced": {"target": 0.87, "lower": 0.80, "upper": 0.95},
            "Elite": {"target": 0.87, "lower": 0.80, "upper": 0.95},
        },
    },
}


# ═════════════════════════════════════════════════════════════════════
# IMBALANCE PAIRS — which lifts make up each side, and the numerator
# ═════════════════════════════════════════════════════════════════════

IMBALANCE_CONFIG = {
    "Horizontal Push vs. Pull": {
        "lift1_options": ["chest press"],
        "lift2_options": ["seated row"],
        "numerator": "lift1",
    },
    "Vertical Push vs. Pull": {
        "lift1_options": ["shoulder press"],
        "lift2_options": ["lat pulldown"],
        "numerator": "lift1",
    },
    "Hamstring vs. Quad": {
        "lift1_options": ["leg curl"],
        "lift2_options": ["leg extension"],
        "numerator": "lift1",
    },
    "Adductor vs. Abductor": {
        "lift1_options": ["adductor"],
        "lift2_options": ["abductor"],
        "numerator": "lift1",
    },
}


# ═════════════════════════════════════════════════════════════════════
# NAME ALIASES — normalized variant → canonical name
# ═════════════════════════════════════════════════════════════════════

LIFT_NAME_ALIASES = {
    "lat pull": "lat pulldown",
    "biceps curl": "bicep curl",
    "reverse fly": "reverse flys",
    "tricep extension": "triceps",
    "tricep pushdown": "triceps",
    "squats": "squat",

    # Plural/singular variations
    "abdominal crunches": "abdominal crunch",
    "abductors": "abductor",
    "adductors": "adductor",
    "back extensions": "back extension",
    "bench presses": "bench press",
    "bicep curls": "bicep curl",
    "butterflies": "butterfly",
    "chest presses": "chest press",
    "hip thrusts": "hip thrust",
    "lat pulldowns": "lat pulldown",
    "leg curls": "leg curl",
    "leg extensions": "leg extension",
    "leg presses": "leg press",
    "overhead presses": "overhead press",
    "rotary torsos": "rotary torso",
    "seated rows": "seated row",
    "shoulder presses": "shoulder press",

    # Legacy / equipment-qualified names seen in OCR'd logs
    "seated chest press": "chest press",
    "chest press seated": "chest press",
    "row": "seated row",
    "seated cable row": "seated row",
    "lying leg curl": "leg curl",
    "seated leg curl": "leg curl",
    "hip adductor": "adductor",
    "hip abductor": "abductor",
    "military press": "overhead press",

    "cable glute kickbacks": "cable glute kickback",
    "bulgarian split squats": "bulgarian split squat",
}

CARDIO_EXERCISES = {
    name: "Cardio"
    for name in [
        "run", "running", "jog", "jogging", "walk", "walking", "cycle",
        "cycling", "bike", "biking", "stationary bike", "elliptical",
        "rowing", "rower", "swimming", "swim", "jump rope", "skipping",
        "sprinting", "sprint", "stair climbing", "stairs", "treadmill",
        "hiit", "high intensity interval training",
    ]
}


# ═════════════════════════════════════════════════════════════════════
# HELPER FUNCTIONS — derive lookups from the tables above
# ═════════════════════════════════════════════════════════════════════

def get_canonical_exercises() -> set:
    """Every canonical name the system knows: standards keys plus alias targets."""
    return set(STRENGTH_STANDARDS) | set(LIFT_NAME_ALIASES.values())


def get_imbalance_types() -> list:
    """Pair names in display order."""
    return list(IMBALANCE_CONFIG)


def get_exercise_category(canonical_name: str) -> str | None:
    """Category for a canonical exercise, from the standards or cardio table."""
    entry = STRENGTH_STANDARDS.get(canonical_name)
    if entry:
        return entry["category"]
    return CARDIO_EXERCISES.get(canonical_name)
