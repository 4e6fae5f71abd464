import re

import numpy as np
import pytest

from roster import (
    COLUMNS, COMPLIANT, FIRST_ID, LEAD_MARKER, MAX_ROSTER, NON_COMPLIANT, TEAM_LEADS, generate_roster,
)


@pytest.mark.parametrize("seed", [0, 1, 7, 42, 1234])
def test_roster_is_capped(seed):
    roster = generate_roster(np.random.default_rng(seed))
    # 10 leads with at least 5 members each always reach the cap
    assert len(roster) == MAX_ROSTER
    assert list(roster.columns) == COLUMNS


def test_ids_are_sequential_from_base(rng):
    roster = generate_roster(rng)
    assert roster["Employee_ID"].tolist() == [f"EMP{FIRST_ID + i}" for i in range(len(roster))]


def test_every_member_reports_to_exactly_one_lead(rng):
    roster = generate_roster(rng)
    leads = roster.loc[roster["Is_Lead"], "Name"].tolist()
    members = roster[~roster["Is_Lead"]]
    for lead in members["Team_Lead"]:
        assert leads.count(lead) == 1


def test_leads_carry_the_marker(rng):
    roster = generate_roster(rng)
    leads = roster[roster["Is_Lead"]]
    assert (leads["Team_Lead"] == LEAD_MARKER).all()
    assert leads["Name"].tolist() == TEAM_LEADS[:len(leads)]
    assert roster.iloc[0]["Name"] == "John Mitchell"


def test_generated_fields_have_expected_shape(rng):
    roster = generate_roster(rng)
    assert roster["Contact"].str.match(r"^\+1-555-\d{4}$").all()
    assert set(roster["PPE_Status"]) <= {COMPLIANT, NON_COMPLIANT}
    member_names = roster.loc[~roster["Is_Lead"], "Name"]
    assert all(re.match(r"^[A-Za-z]+ [A-Za-z]+ \d\d$", n) for n in member_names)


def test_member_suffix_encodes_lead_and_member_index(fixed_rng):
    roster = generate_roster(fixed_rng(0.5))
    team = roster[roster["Team_Lead"] == TEAM_LEADS[3]]
    assert [n.split(" ")[-1] for n in team["Name"]] == ["30", "31", "32", "33", "34"]


def test_seeded_generators_are_reproducible():
    first = generate_roster(np.random.default_rng(99))
    second = generate_roster(np.random.default_rng(99))
    assert first.equals(second)


def test_lead_and_member_thresholds_differ(fixed_rng):
    # a draw of 0.12 is above the lead threshold but below the member one
    roster = generate_roster(fixed_rng(0.12))
    assert (roster.loc[roster["Is_Lead"], "PPE_Status"] == COMPLIANT).all()
    assert (roster.loc[~roster["Is_Lead"], "PPE_Status"] == NON_COMPLIANT).all()


def test_smallest_teams_fill_the_roster_exactly(fixed_rng):
    roster = generate_roster(fixed_rng(0.5))
    assert len(roster) == MAX_ROSTER
    assert roster["Is_Lead"].sum() == len(TEAM_LEADS)


def test_truncation_drops_trailing_records(fixed_rng):
    roster = generate_roster(fixed_rng(0.5, pick_high=True))
    assert len(roster) == MAX_ROSTER
    assert "Rachel Green" not in roster["Name"].tolist()
    assert roster.iloc[-1]["Team_Lead"] == "Chris Taylor"
    assert roster.iloc[-1]["Contact"] == "+1-555-9999"
