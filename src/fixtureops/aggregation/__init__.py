"""Stateless projections and metrics over a snapshot."""

from .board import (
    FixtureBoardRow,
    FixtureOverview,
    competitions_by_sport,
    fixture_board,
    fixture_overview,
    group_by,
    orphaned_pricing,
    players_by_team,
    team_label,
    teams_by_sport,
)
from .metrics import (
    OperationalSummary,
    high_priority_issue_count,
    mapped_fixture_count,
    mapping_coverage,
    percent,
    pricing_ready_count,
    pricing_ready_share,
    scheduled_count,
    summarize,
)

__all__ = [
    "FixtureBoardRow",
    "FixtureOverview",
    "competitions_by_sport",
    "fixture_board",
    "fixture_overview",
    "group_by",
    "orphaned_pricing",
    "players_by_team",
    "team_label",
    "teams_by_sport",
    "OperationalSummary",
    "high_priority_issue_count",
    "mapped_fixture_count",
    "mapping_coverage",
    "percent",
    "pricing_ready_count",
    "pricing_ready_share",
    "scheduled_count",
    "summarize",
]
