"""Test configuration — ensure strength_analytics is importable and share fixtures."""
import sys
from datetime import date
from pathlib import Path

import pytest

# Add project root to path so `from strength_analytics.xxx import` works
sys.path.insert(0, str(Path(__file__).parent.parent))

from strength_analytics.models import Gender, Mass, UserProfile  # noqa: E402

# A fixed "today" so window filtering is deterministic (a Sunday).
AS_OF = date(2026, 3, 1)


@pytest.fixture
def as_of():
    return AS_OF


@pytest.fixture
def male_80kg():
    return UserProfile(age=30, gender=Gender.MALE, bodyweight=Mass(80, "kg"))
