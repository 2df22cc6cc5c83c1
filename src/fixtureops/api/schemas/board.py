from __future__ import annotations

from typing import List, Optional

from fixtureops.aggregation import FixtureBoardRow, FixtureOverview
from fixtureops.models import (
    CollaborationNote,
    Competition,
    Fixture,
    FixtureMapping,
    MarketClassification,
    OperationIssue,
    PricingSnapshot,
    Sport,
    Team,
)

from .base import ApiModel


class FixtureBoardRowResponse(ApiModel):
    label: str
    fixture: Fixture
    home: Optional[Team] = None
    away: Optional[Team] = None
    classification: Optional[MarketClassification] = None
    mappings: List[FixtureMapping]
    issues: List[OperationIssue]

    @classmethod
    def from_row(cls, row: FixtureBoardRow) -> "FixtureBoardRowResponse":
        return cls(
            label=row.label,
            fixture=row.fixture,
            home=row.home,
            away=row.away,
            classification=row.classification,
            mappings=list(row.mappings),
            issues=list(row.issues),
        )


class FixtureOverviewResponse(ApiModel):
    fixture: Fixture
    sport: Optional[Sport] = None
    competition: Optional[Competition] = None
    home: Optional[Team] = None
    away: Optional[Team] = None
    classification: Optional[MarketClassification] = None
    mappings: List[FixtureMapping]
    issues: List[OperationIssue]
    notes: List[CollaborationNote]
    pricing: List[PricingSnapshot]

    @classmethod
    def from_overview(cls, overview: FixtureOverview) -> "FixtureOverviewResponse":
        return cls(
            fixture=overview.fixture,
            sport=overview.sport,
            competition=overview.competition,
            home=overview.home,
            away=overview.away,
            classification=overview.classification,
            mappings=list(overview.mappings),
            issues=list(overview.issues),
            notes=list(overview.notes),
            pricing=list(overview.pricing),
        )


class OptionSetResponse(ApiModel):
    collection: str
    field: str
    options: List[str]
    default: str
