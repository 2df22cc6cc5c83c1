"""Entity records and the snapshot that holds them."""

from .entities import (
    Bookmaker,
    CollaborationNote,
    Competition,
    Fixture,
    FixtureCoverage,
    FixtureMapping,
    MarketClassification,
    OperationIssue,
    Player,
    PricingSnapshot,
    Record,
    Sport,
    Team,
    as_utc,
)
from .state import COLLECTION_MODELS, SportsState

__all__ = [
    "Bookmaker",
    "CollaborationNote",
    "Competition",
    "Fixture",
    "FixtureCoverage",
    "FixtureMapping",
    "MarketClassification",
    "OperationIssue",
    "Player",
    "PricingSnapshot",
    "Record",
    "Sport",
    "Team",
    "COLLECTION_MODELS",
    "SportsState",
    "as_utc",
]
