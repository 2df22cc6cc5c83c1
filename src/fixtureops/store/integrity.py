"""Optional referential checks applied before an upsert in strict mode."""

from __future__ import annotations

from typing import List, Sequence

from fixtureops.models import (
    CollaborationNote,
    Competition,
    Fixture,
    FixtureMapping,
    MarketClassification,
    OperationIssue,
    Player,
    PricingSnapshot,
    Record,
    SportsState,
    Team,
)

from .actions import Action, Upsert


class ValidationError(ValueError):
    """Raised when strict mode rejects a mutation. Nothing has been applied."""

    def __init__(self, problems: Sequence[str]):
        self.problems = list(problems)
        super().__init__("; ".join(self.problems))


def _missing(state: SportsState, collection: str, record_id: str) -> bool:
    return state.find(collection, record_id) is None


def find_problems(state: SportsState, record: Record) -> List[str]:
    """List every dangling reference carried by ``record`` against ``state``."""

    problems: list[str] = []

    def require(collection: str, record_id: str, label: str) -> None:
        if _missing(state, collection, record_id):
            problems.append(f"{type(record).__name__} {record.id}: {label} {record_id!r} not found")

    if isinstance(record, Competition):
        require("sports", record.sport_id, "sport")
    elif isinstance(record, Team):
        require("sports", record.sport_id, "sport")
        for competition_id in record.competition_ids:
            require("competitions", competition_id, "competition")
    elif isinstance(record, Player):
        require("teams", record.team_id, "team")
    elif isinstance(record, Fixture):
        require("sports", record.sport_id, "sport")
        require("competitions", record.competition_id, "competition")
        require("teams", record.home_team_id, "home team")
        require("teams", record.away_team_id, "away team")
        if record.home_team_id == record.away_team_id:
            problems.append(f"Fixture {record.id}: home and away team are both {record.home_team_id!r}")
    elif isinstance(record, (FixtureMapping, PricingSnapshot)):
        require("fixtures", record.fixture_id, "fixture")
        require("bookmakers", record.bookmaker_id, "bookmaker")
    elif isinstance(record, (MarketClassification, OperationIssue, CollaborationNote)):
        require("fixtures", record.fixture_id, "fixture")
    return problems


def validate_action(state: SportsState, action: Action) -> None:
    """Raise :class:`ValidationError` if ``action`` would leave a dangling reference."""

    if not isinstance(action, Upsert):
        return
    problems = find_problems(state, action.record)
    if problems:
        raise ValidationError(problems)
