"""Read-only projections behind the fixture board and detail panels."""

from __future__ import annotations

from collections import defaultdict
from dataclasses import dataclass
from typing import Callable, Dict, Iterable, List, Optional, Sequence, Tuple, TypeVar

from fixtureops.models import (
    CollaborationNote,
    Competition,
    Fixture,
    FixtureMapping,
    MarketClassification,
    OperationIssue,
    Player,
    PricingSnapshot,
    Sport,
    SportsState,
    Team,
)


UNKNOWN_LABEL = "TBC"

T = TypeVar("T")


@dataclass(frozen=True)
class FixtureBoardRow:
    fixture: Fixture
    home: Optional[Team]
    away: Optional[Team]
    classification: Optional[MarketClassification]
    mappings: Tuple[FixtureMapping, ...]
    issues: Tuple[OperationIssue, ...]

    @property
    def label(self) -> str:
        return f"{team_label(self.home)} vs {team_label(self.away)}"


@dataclass(frozen=True)
class FixtureOverview:
    """Everything the console shows for one selected fixture."""

    fixture: Fixture
    sport: Optional[Sport]
    competition: Optional[Competition]
    home: Optional[Team]
    away: Optional[Team]
    classification: Optional[MarketClassification]
    mappings: Tuple[FixtureMapping, ...]
    issues: Tuple[OperationIssue, ...]
    notes: Tuple[CollaborationNote, ...]
    pricing: Tuple[PricingSnapshot, ...]


def team_label(team: Optional[Team]) -> str:
    return team.short_name if team is not None else UNKNOWN_LABEL


def _index(records: Iterable[T], key: Callable[[T], str]) -> Dict[str, T]:
    lookup: Dict[str, T] = {}
    for record in records:
        lookup.setdefault(key(record), record)
    return lookup


def _by_fixture(records: Iterable[T]) -> Dict[str, List[T]]:
    grouped: Dict[str, List[T]] = defaultdict(list)
    for record in records:
        grouped[record.fixture_id].append(record)
    return grouped


def fixture_board(state: SportsState) -> List[FixtureBoardRow]:
    """Fixtures in kick-off order with their teams, classification, mappings and issues."""

    teams = _index(state.teams, lambda team: team.id)
    classifications = _index(state.classifications, lambda cls: cls.fixture_id)
    mappings = _by_fixture(state.mappings)
    issues = _by_fixture(state.issues)
    rows: list[FixtureBoardRow] = []
    for fixture in sorted(state.fixtures, key=lambda item: item.kick_off):
        rows.append(
            FixtureBoardRow(
                fixture=fixture,
                home=teams.get(fixture.home_team_id),
                away=teams.get(fixture.away_team_id),
                classification=classifications.get(fixture.id),
                mappings=tuple(mappings.get(fixture.id, ())),
                issues=tuple(issues.get(fixture.id, ())),
            )
        )
    return rows


def fixture_overview(state: SportsState, fixture_id: str) -> Optional[FixtureOverview]:
    fixture = state.find("fixtures", fixture_id)
    if fixture is None:
        return None

    def for_fixture(records: Sequence[T]) -> Tuple[T, ...]:
        return tuple(record for record in records if record.fixture_id == fixture_id)

    return FixtureOverview(
        fixture=fixture,
        sport=state.find("sports", fixture.sport_id),
        competition=state.find("competitions", fixture.competition_id),
        home=state.find("teams", fixture.home_team_id),
        away=state.find("teams", fixture.away_team_id),
        classification=next(iter(for_fixture(state.classifications)), None),
        mappings=for_fixture(state.mappings),
        issues=for_fixture(state.issues),
        notes=for_fixture(state.notes),
        pricing=for_fixture(state.pricing),
    )


def group_by(
    records: Iterable[T],
    key: Callable[[T], str],
    groups: Iterable[str],
) -> Dict[str, List[T]]:
    """Bucket ``records`` under each id in ``groups``, keeping group order; unmatched records are dropped."""

    grouped: Dict[str, List[T]] = {group: [] for group in groups}
    for record in records:
        bucket = grouped.get(key(record))
        if bucket is not None:
            bucket.append(record)
    return grouped


def competitions_by_sport(state: SportsState) -> Dict[str, List[Competition]]:
    return group_by(state.competitions, lambda item: item.sport_id, (sport.id for sport in state.sports))


def teams_by_sport(state: SportsState) -> Dict[str, List[Team]]:
    return group_by(state.teams, lambda item: item.sport_id, (sport.id for sport in state.sports))


def players_by_team(state: SportsState) -> Dict[str, List[Player]]:
    return group_by(state.players, lambda item: item.team_id, (team.id for team in state.teams))


def orphaned_pricing(state: SportsState) -> List[PricingSnapshot]:
    """Pricing rows whose fixture has been deleted. They are kept as history."""

    fixture_ids = {fixture.id for fixture in state.fixtures}
    return [row for row in state.pricing if row.fixture_id not in fixture_ids]
