"""REST API for the operator console store."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import Callable, TypeVar

from fastapi import FastAPI, HTTPException, Request, Response

from fixtureops.aggregation import fixture_board, fixture_overview, summarize
from fixtureops.api.schemas import (
    FixtureBoardRowResponse,
    FixtureOverviewResponse,
    OptionSetResponse,
    SummaryResponse,
)
from fixtureops.config import iter_option_sets
from fixtureops.models import (
    CollaborationNote,
    Competition,
    Fixture,
    FixtureMapping,
    MarketClassification,
    OperationIssue,
    Player,
    PricingSnapshot,
    SportsState,
    Team,
)
from fixtureops.store import SportsStore, ValidationError


logger = logging.getLogger(__name__)

R = TypeVar("R")


def _no_content() -> Response:
    return Response(status_code=204)


def _mutate(entry_point: Callable[[R], None], record: R) -> Response:
    try:
        entry_point(record)
    except ValidationError as exc:
        raise HTTPException(status_code=422, detail=exc.problems) from exc
    return _no_content()


def create_app(store: SportsStore | None = None) -> FastAPI:
    owns_store = store is None

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        yield
        if owns_store:
            app.state.sports_store.close()

    app = FastAPI(title="fixtureops console", lifespan=lifespan)
    app.state.sports_store = store if store is not None else SportsStore.open()

    def current_store(request: Request) -> SportsStore:
        return request.app.state.sports_store

    @app.get("/health")
    async def health() -> dict[str, str]:
        return {"status": "ok"}

    @app.get("/state", response_model=SportsState, response_model_exclude_none=True)
    def read_state(request: Request) -> SportsState:
        return current_store(request).snapshot

    @app.get("/summary", response_model=SummaryResponse)
    def read_summary(request: Request) -> SummaryResponse:
        return SummaryResponse.from_summary(summarize(current_store(request).snapshot))

    @app.get("/options", response_model=list[OptionSetResponse])
    async def read_options() -> list[OptionSetResponse]:
        return [
            OptionSetResponse(
                collection=option_set.collection,
                field=option_set.field,
                options=list(option_set.options),
                default=option_set.default,
            )
            for option_set in iter_option_sets()
        ]

    @app.get("/fixtures", response_model=list[FixtureBoardRowResponse])
    def read_board(request: Request) -> list[FixtureBoardRowResponse]:
        rows = fixture_board(current_store(request).snapshot)
        return [FixtureBoardRowResponse.from_row(row) for row in rows]

    @app.get("/fixtures/{fixture_id}", response_model=FixtureOverviewResponse)
    def read_fixture(fixture_id: str, request: Request) -> FixtureOverviewResponse:
        overview = fixture_overview(current_store(request).snapshot, fixture_id)
        if overview is None:
            raise HTTPException(status_code=404, detail="Fixture not found")
        return FixtureOverviewResponse.from_overview(overview)

    @app.post("/competitions", status_code=204)
    def post_competition(competition: Competition, request: Request) -> Response:
        return _mutate(current_store(request).upsert_competition, competition)

    @app.post("/teams", status_code=204)
    def post_team(team: Team, request: Request) -> Response:
        return _mutate(current_store(request).upsert_team, team)

    @app.post("/players", status_code=204)
    def post_player(player: Player, request: Request) -> Response:
        return _mutate(current_store(request).upsert_player, player)

    @app.post("/fixtures", status_code=204)
    def post_fixture(fixture: Fixture, request: Request) -> Response:
        return _mutate(current_store(request).upsert_fixture, fixture)

    @app.post("/mappings", status_code=204)
    def post_mapping(mapping: FixtureMapping, request: Request) -> Response:
        return _mutate(current_store(request).upsert_mapping, mapping)

    @app.post("/classifications", status_code=204)
    def post_classification(classification: MarketClassification, request: Request) -> Response:
        return _mutate(current_store(request).upsert_classification, classification)

    @app.post("/issues", status_code=204)
    def post_issue(issue: OperationIssue, request: Request) -> Response:
        return _mutate(current_store(request).upsert_issue, issue)

    @app.post("/notes", status_code=204)
    def post_note(note: CollaborationNote, request: Request) -> Response:
        return _mutate(current_store(request).upsert_note, note)

    @app.post("/pricing", status_code=204)
    def post_pricing(pricing: PricingSnapshot, request: Request) -> Response:
        return _mutate(current_store(request).record_pricing, pricing)

    @app.delete("/fixtures/{fixture_id}", status_code=204)
    def delete_fixture(fixture_id: str, request: Request) -> Response:
        current_store(request).delete_fixture(fixture_id)
        logger.info("Deleted fixture %s", fixture_id)
        return _no_content()

    @app.delete("/mappings/{mapping_id}", status_code=204)
    def delete_mapping(mapping_id: str, request: Request) -> Response:
        current_store(request).delete_mapping(mapping_id)
        return _no_content()

    @app.delete("/notes/{note_id}", status_code=204)
    def delete_note(note_id: str, request: Request) -> Response:
        current_store(request).delete_note(note_id)
        return _no_content()

    return app
