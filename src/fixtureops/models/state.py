"""The immutable snapshot of every entity collection."""

from __future__ import annotations

from typing import Any, Dict, Mapping, Tuple, Type

from pydantic import BaseModel
from pydantic.config import ConfigDict

from .entities import (
    Bookmaker,
    CollaborationNote,
    Competition,
    Fixture,
    FixtureMapping,
    MarketClassification,
    OperationIssue,
    Player,
    PricingSnapshot,
    Record,
    Sport,
    Team,
)


COLLECTION_MODELS: Mapping[str, Type[Record]] = {
    "sports": Sport,
    "bookmakers": Bookmaker,
    "competitions": Competition,
    "teams": Team,
    "players": Player,
    "fixtures": Fixture,
    "mappings": FixtureMapping,
    "classifications": MarketClassification,
    "issues": OperationIssue,
    "notes": CollaborationNote,
    "pricing": PricingSnapshot,
}


class SportsState(BaseModel):
    """Snapshot of all collections at one point in time.

    Collections are tuples of frozen records, newest first. A snapshot is never
    modified; the mutation engine builds a new one with :meth:`replace`.
    """

    sports: Tuple[Sport, ...] = ()
    bookmakers: Tuple[Bookmaker, ...] = ()
    competitions: Tuple[Competition, ...] = ()
    teams: Tuple[Team, ...] = ()
    players: Tuple[Player, ...] = ()
    fixtures: Tuple[Fixture, ...] = ()
    mappings: Tuple[FixtureMapping, ...] = ()
    classifications: Tuple[MarketClassification, ...] = ()
    issues: Tuple[OperationIssue, ...] = ()
    notes: Tuple[CollaborationNote, ...] = ()
    pricing: Tuple[PricingSnapshot, ...] = ()

    model_config = ConfigDict(frozen=True, extra="ignore")

    def collection(self, name: str) -> Tuple[Record, ...]:
        if name not in COLLECTION_MODELS:
            raise KeyError(f"Unknown collection {name!r}")
        return getattr(self, name)

    def replace(self, **collections: Tuple[Record, ...]) -> "SportsState":
        for name in collections:
            if name not in COLLECTION_MODELS:
                raise KeyError(f"Unknown collection {name!r}")
        return self.model_copy(update=collections)

    def find(self, name: str, record_id: str) -> Record | None:
        for record in self.collection(name):
            if record.id == record_id:
                return record
        return None

    def to_document(self) -> Dict[str, Any]:
        """JSON-ready document using the persisted camelCase field names."""

        return self.model_dump(mode="json", by_alias=True, exclude_none=True)
