import numpy as np
import pandas as pd
import pytest

from roster import COLUMNS, COMPLIANT, LEAD_MARKER, NON_COMPLIANT


class FakeTimer:
    """Monotonic clock that only moves when told to."""

    def __init__(self, now=100.0):
        self.now = now

    def __call__(self):
        return self.now

    def advance(self, seconds):
        self.now += seconds


class FixedRng:
    """Stand-in generator: every draw returns the same value."""

    def __init__(self, draw, pick_high=False):
        self.draw = draw
        self.pick_high = pick_high

    def random(self):
        return self.draw

    def integers(self, low, high):
        return high - 1 if self.pick_high else low


def make_roster(rows):
    return pd.DataFrame(
        [dict(zip(COLUMNS, r)) for r in rows],
        columns=COLUMNS,
    )


@pytest.fixture
def rng():
    return np.random.default_rng(42)


@pytest.fixture
def small_roster():
    return make_roster([
        ("EMP1", "Lead A", "+1-555-1000", LEAD_MARKER, COMPLIANT, True),
        ("EMP2", "Member One", "+1-555-1001", "Lead A", COMPLIANT, False),
        ("EMP3", "Member Two", "+1-555-1002", "Lead A", NON_COMPLIANT, False),
    ])


@pytest.fixture
def timer():
    return FakeTimer()


@pytest.fixture
def enquiry_form():
    return {
        "employee_id": "EMP1001",
        "employee_name": "John Mitchell",
        "team_lead": "Sarah Connor",
        "contact_number": "+1 (555) 123-4567",
    }


@pytest.fixture
def roster_factory():
    return make_roster


@pytest.fixture
def fixed_rng():
    return FixedRng
