from fixtureops.aggregation import (
    competitions_by_sport,
    fixture_board,
    fixture_overview,
    group_by,
    orphaned_pricing,
    players_by_team,
    teams_by_sport,
)
from fixtureops.config import default_state
from fixtureops.models import SportsState
from fixtureops.store import DeleteFixture, Upsert, apply

from tests.factories import make_fixture, make_pricing


def test_board_orders_fixtures_by_kick_off():
    rows = fixture_board(default_state())

    assert [row.fixture.id for row in rows] == ["fix-rma-oly", "fix-ars-liv"]
    assert [row.label for row in rows] == ["RMB vs OLY", "ARS vs LIV"]


def test_board_orders_mixed_offsets_by_instant(empty_state: SportsState):
    state = apply(empty_state, Upsert("fixtures", make_fixture("fix-late", kickOff="2024-11-02T15:00:00+00:00")))
    state = apply(state, Upsert("fixtures", make_fixture("fix-early", kickOff="2024-11-02T15:30:00+02:00")))

    assert [row.fixture.id for row in fixture_board(state)] == ["fix-early", "fix-late"]


def test_board_row_collects_related_records():
    rows = {row.fixture.id: row for row in fixture_board(default_state())}

    ars_liv = rows["fix-ars-liv"]
    assert ars_liv.classification is not None
    assert ars_liv.classification.market_status == "ready"
    assert [mapping.id for mapping in ars_liv.mappings] == ["map-ars-liv-pinnacle"]
    assert ars_liv.issues == ()

    rma_oly = rows["fix-rma-oly"]
    assert rma_oly.classification is None
    assert [issue.id for issue in rma_oly.issues] == ["issue-rma-oly-feed"]


def test_unknown_team_is_labelled_tbc(empty_state: SportsState):
    state = apply(empty_state, Upsert("fixtures", make_fixture("fix-1", awayTeamId="team-missing")))

    (row,) = fixture_board(state)

    assert row.home is None
    assert row.label == "TBC vs TBC"


def test_overview_gathers_everything_for_one_fixture():
    overview = fixture_overview(default_state(), "fix-ars-liv")

    assert overview is not None
    assert overview.sport is not None and overview.sport.name == "Football"
    assert overview.competition is not None and overview.competition.id == "comp-epl"
    assert overview.home is not None and overview.home.short_name == "ARS"
    assert overview.away is not None and overview.away.short_name == "LIV"
    assert [note.id for note in overview.notes] == ["note-ars-liv-trading"]
    assert [row.id for row in overview.pricing] == ["price-ars-liv-home"]


def test_overview_of_unknown_fixture_is_none():
    assert fixture_overview(default_state(), "fix-missing") is None


def test_orphaned_pricing_lists_history_of_deleted_fixtures():
    state = apply(default_state(), Upsert("pricing", make_pricing("price-other", "fix-rma-oly")))

    assert orphaned_pricing(state) == []

    state = apply(state, DeleteFixture("fix-ars-liv"))

    assert [row.id for row in orphaned_pricing(state)] == ["price-ars-liv-home"]


def test_group_by_keeps_group_order_and_empty_groups():
    grouped = group_by(["apple", "avocado", "cherry", "kiwi"], lambda word: word[0], ["c", "a", "b"])

    assert list(grouped) == ["c", "a", "b"]
    assert grouped == {"c": ["cherry"], "a": ["apple", "avocado"], "b": []}


def test_reference_groupings_on_seed_data():
    state = default_state()

    competitions = competitions_by_sport(state)
    teams = teams_by_sport(state)
    players = players_by_team(state)

    assert [item.id for item in competitions["sport-basketball"]] == ["comp-euroleague"]
    assert [item.id for item in teams["sport-football"]] == ["team-ars", "team-liv"]
    assert players["team-rma"] == []
    assert [item.id for item in players["team-oly"]] == ["player-vezenkov"]
