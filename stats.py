# stats.py
"""Filtering and chart data for the safety dashboard."""
import math
from functools import cached_property

import pandas as pd

from roster import COMPLIANT, NON_COMPLIANT, generate_roster

ALL = "All"

STATUS_COLORS = {COMPLIANT: "#10B981", NON_COMPLIANT: "#EF4444"}


def lead_names(roster: pd.DataFrame):
    return roster.loc[roster["Is_Lead"], "Name"].drop_duplicates().tolist()


def team_lead_options(roster: pd.DataFrame):
    return [ALL] + lead_names(roster)


def filter_roster(roster: pd.DataFrame, search_term: str = "", team_lead: str = ALL) -> pd.DataFrame:
    filtered = roster
    term = (search_term or "").lower()
    if term:
        mask = (
            filtered["Name"].str.lower().str.contains(term, regex=False)
            | filtered["Employee_ID"].str.lower().str.contains(term, regex=False)
        )
        filtered = filtered[mask]
    # a lead's own Team_Lead is the marker, so match leads by name as well
    if team_lead and team_lead != ALL:
        filtered = filtered[(filtered["Team_Lead"] == team_lead) | (filtered["Name"] == team_lead)]
    return filtered.copy()


def compliance_split(roster: pd.DataFrame) -> pd.DataFrame:
    counts = roster["PPE_Status"].value_counts().reindex([COMPLIANT, NON_COMPLIANT], fill_value=0)
    split = counts.rename_axis("Status").reset_index(name="Count")
    split["Count"] = split["Count"].astype(int)
    return split


def _round_half_up(value):
    return int(math.floor(value + 0.5))


def team_compliance(roster: pd.DataFrame) -> pd.DataFrame:
    rows = []
    for lead in lead_names(roster):
        team = roster[(roster["Team_Lead"] == lead) | (roster["Name"] == lead)]
        compliant = int(team["PPE_Status"].eq(COMPLIANT).sum())
        rows.append({
            "Team": lead.split(" ")[0],
            "Team_Lead": lead,
            "Team_Size": len(team),
            "Compliance": _round_half_up(100 * compliant / len(team)),
        })
    return pd.DataFrame(rows, columns=["Team", "Team_Lead", "Team_Size", "Compliance"])


def summary(roster: pd.DataFrame):
    split = compliance_split(roster).set_index("Status")["Count"]
    return {
        "total": len(roster),
        "compliant": int(split[COMPLIANT]),
        "non_compliant": int(split[NON_COMPLIANT]),
        "team_leads": len(lead_names(roster)),
    }


class DashboardState:
    """One dashboard view: a fixed roster plus the current filters.

    The roster never changes for the lifetime of the view, so the
    roster-wide aggregates are computed once. ``filtered`` is rebuilt on
    every access from the current filter values.
    """

    def __init__(self, roster=None, rng=None):
        self.roster = roster if roster is not None else generate_roster(rng)
        self.search_term = ""
        self.team_lead = ALL

    def set_search(self, term):
        self.search_term = term or ""

    def set_team_lead(self, lead):
        self.team_lead = lead or ALL

    def reset_filters(self):
        self.search_term = ""
        self.team_lead = ALL

    @property
    def filtered(self):
        return filter_roster(self.roster, self.search_term, self.team_lead)

    @cached_property
    def lead_options(self):
        return team_lead_options(self.roster)

    @cached_property
    def split(self):
        return compliance_split(self.roster)

    @cached_property
    def teams(self):
        return team_compliance(self.roster)

    @cached_property
    def summary(self):
        return summary(self.roster)
