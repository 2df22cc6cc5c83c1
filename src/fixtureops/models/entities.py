"""Canonical entity records shared by the store, persistence and API layers."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Annotated, List, Literal, Optional

from pydantic import AfterValidator, BaseModel, Field
from pydantic.alias_generators import to_camel
from pydantic.config import ConfigDict


CompetitionTier = Literal["professional", "semi-professional", "international", "youth"]
PlayerStatus = Literal["active", "injured", "suspended", "retired"]
FixtureStatus = Literal["scheduled", "in-progress", "delayed", "completed", "postponed", "cancelled"]
MappingStatus = Literal["complete", "pending", "issue", "needs-review"]
RiskLevel = Literal["low", "medium", "high"]
MarketStatus = Literal["ready", "needs-pricing", "awaiting-confirmation"]
IssueSeverity = Literal["critical", "high", "medium", "low"]
NoteTeam = Literal["trading", "operations", "integrity", "engineering", "risk"]


def as_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


# Instants are stored in UTC; naive input is taken to be UTC already.
UtcDatetime = Annotated[datetime, AfterValidator(as_utc)]


class Record(BaseModel):
    """Base for every stored entity.

    Field names are snake_case in Python and camelCase on the wire. Unknown
    fields are kept so newer documents survive a load/save cycle.
    """

    id: str = Field(..., min_length=1)

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
        extra="allow",
    )


class Sport(Record):
    code: str
    name: str


class Bookmaker(Record):
    name: str
    region: Optional[str] = None


class Competition(Record):
    sport_id: str
    name: str
    region: str
    tier: CompetitionTier
    season: str
    governing_body: Optional[str] = None


class Team(Record):
    sport_id: str
    competition_ids: List[str] = Field(default_factory=list)
    name: str
    short_name: str
    primary_color: str
    secondary_color: str
    home_venue: Optional[str] = None


class Player(Record):
    team_id: str
    name: str
    position: str
    nationality: str
    date_of_birth: Optional[str] = None
    status: PlayerStatus = "active"


class FixtureCoverage(BaseModel):
    """Data feeds confirmed for a fixture."""

    feed: bool = True
    streams: bool = True
    tracking: bool = False

    model_config = ConfigDict(frozen=True)


class Fixture(Record):
    sport_id: str
    competition_id: str
    home_team_id: str
    away_team_id: str
    venue: str
    kick_off: UtcDatetime
    status: FixtureStatus = "scheduled"
    coverage: FixtureCoverage = Field(default_factory=FixtureCoverage)
    notes: Optional[str] = None


class FixtureMapping(Record):
    """A bookmaker's external identifier and market coverage for one fixture."""

    fixture_id: str
    bookmaker_id: str
    external_fixture_id: str
    markets_covered: List[str] = Field(default_factory=list)
    status: MappingStatus = "pending"
    confidence: float
    # Filled by the store entry point when omitted.
    last_synced: Optional[UtcDatetime] = None
    issues: Optional[List[str]] = None


class MarketClassification(Record):
    """Pricing template, risk and readiness for a fixture (one per fixture by convention)."""

    fixture_id: str
    template: str
    pricing_lead: str
    risk_level: RiskLevel = "medium"
    market_status: MarketStatus = "needs-pricing"
    notes: Optional[str] = None


class OperationIssue(Record):
    fixture_id: str
    severity: IssueSeverity
    message: str
    suggested_action: str
    detected_at: Optional[UtcDatetime] = None


class CollaborationNote(Record):
    fixture_id: str
    author: str
    team: NoteTeam
    created_at: Optional[UtcDatetime] = None
    message: str


class PricingSnapshot(Record):
    fixture_id: str
    bookmaker_id: str
    market: str
    selection: str
    price: float
    probability: float
    recorded_at: Optional[UtcDatetime] = None
