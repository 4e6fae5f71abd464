# roster.py
"""Mock employee roster for the safety dashboard.

Every dashboard visit gets a freshly generated roster. Nothing here reads
global random state: pass a ``numpy.random.Generator`` to get a
reproducible roster.
"""
import logging

import numpy as np
import pandas as pd

import config

logger = logging.getLogger(__name__)

TEAM_LEADS = [
    "John Mitchell", "Sarah Connor", "Mike Johnson", "Lisa Anderson",
    "David Brown", "Emma Wilson", "Tom Harris", "Anna Davis",
    "Chris Taylor", "Rachel Green",
]

MEMBER_NAMES = [
    "Alex Thompson", "Brian Clark", "Catherine Lee", "Daniel Martinez", "Emily Rodriguez",
    "Frank Wilson", "Grace Kim", "Henry Adams", "Isabella Garcia", "Jack Nelson",
    "Kate Phillips", "Liam Parker", "Maya Singh", "Nathan Cooper", "Olivia Turner",
    "Paul Evans", "Quinn Roberts", "Ruby White", "Sam Miller", "Tara Johnson",
]

COMPLIANT = "Compliant"
NON_COMPLIANT = "Non-Compliant"
LEAD_MARKER = "Team Lead"

FIRST_ID = 1001
MAX_ROSTER = 60
LEAD_NON_COMPLIANCE = 0.10
MEMBER_NON_COMPLIANCE = 0.15
BASE_TEAM_SIZE = 5

COLUMNS = ["Employee_ID", "Name", "Contact", "Team_Lead", "PPE_Status", "Is_Lead"]


def default_rng():
    return np.random.default_rng(config.ROSTER_SEED)


def _contact(rng):
    return f"+1-555-{int(rng.integers(1000, 10000))}"


def _status(rng, non_compliance):
    return COMPLIANT if rng.random() >= non_compliance else NON_COMPLIANT


def generate_roster(rng=None) -> pd.DataFrame:
    """Build the roster: every lead followed by their 5 or 6 members.

    The result is capped at ``MAX_ROSTER`` rows; anything past the cap is
    dropped without complaint.
    """
    rng = rng if rng is not None else default_rng()
    rows = []
    next_id = FIRST_ID

    for lead_idx, lead in enumerate(TEAM_LEADS):
        rows.append({
            "Employee_ID": f"EMP{next_id}",
            "Name": lead,
            "Contact": _contact(rng),
            "Team_Lead": LEAD_MARKER,
            "PPE_Status": _status(rng, LEAD_NON_COMPLIANCE),
            "Is_Lead": True,
        })
        next_id += 1

        team_size = BASE_TEAM_SIZE + int(rng.integers(0, 2))
        for member_idx in range(team_size):
            pick = MEMBER_NAMES[int(rng.integers(0, len(MEMBER_NAMES)))]
            rows.append({
                "Employee_ID": f"EMP{next_id}",
                "Name": f"{pick} {lead_idx}{member_idx}",
                "Contact": _contact(rng),
                "Team_Lead": lead,
                "PPE_Status": _status(rng, MEMBER_NON_COMPLIANCE),
                "Is_Lead": False,
            })
            next_id += 1

    roster = pd.DataFrame(rows[:MAX_ROSTER], columns=COLUMNS)
    logger.debug("Generated roster with %d of %d records", len(roster), len(rows))
    return roster
