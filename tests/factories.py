"""Record builders shared by the test modules."""

from __future__ import annotations

from fixtureops.models import (
    CollaborationNote,
    Fixture,
    FixtureMapping,
    MarketClassification,
    OperationIssue,
    PricingSnapshot,
)


def make_fixture(fixture_id: str, **overrides) -> Fixture:
    payload = {
        "id": fixture_id,
        "sportId": "sport-football",
        "competitionId": "comp-epl",
        "homeTeamId": "team-ars",
        "awayTeamId": "team-liv",
        "venue": "Emirates Stadium",
        "kickOff": "2024-11-02T15:00:00Z",
        "status": "scheduled",
    }
    payload.update(overrides)
    return Fixture.model_validate(payload)


def make_mapping(mapping_id: str, fixture_id: str, status: str = "complete", **overrides) -> FixtureMapping:
    payload = {
        "id": mapping_id,
        "fixtureId": fixture_id,
        "bookmakerId": "bm-pinnacle",
        "externalFixtureId": f"EXT-{mapping_id}",
        "marketsCovered": ["1X2"],
        "status": status,
        "confidence": 0.9,
        "lastSynced": "2024-10-20T08:00:00Z",
    }
    payload.update(overrides)
    return FixtureMapping.model_validate(payload)


def make_classification(classification_id: str, fixture_id: str, market_status: str = "ready") -> MarketClassification:
    return MarketClassification(
        id=classification_id,
        fixture_id=fixture_id,
        template="Football Tier 1",
        pricing_lead="A. Trader",
        risk_level="medium",
        market_status=market_status,
    )


def make_issue(issue_id: str, fixture_id: str, severity: str = "high") -> OperationIssue:
    return OperationIssue(
        id=issue_id,
        fixture_id=fixture_id,
        severity=severity,
        message="Feed delayed",
        suggested_action="Chase provider",
        detected_at="2024-10-20T09:00:00Z",
    )


def make_note(note_id: str, fixture_id: str) -> CollaborationNote:
    return CollaborationNote(
        id=note_id,
        fixture_id=fixture_id,
        author="Sam",
        team="operations",
        created_at="2024-10-20T09:30:00Z",
        message="Venue confirmed",
    )


def make_pricing(pricing_id: str, fixture_id: str) -> PricingSnapshot:
    return PricingSnapshot(
        id=pricing_id,
        fixture_id=fixture_id,
        bookmaker_id="bm-pinnacle",
        market="1X2",
        selection="Home",
        price=2.1,
        probability=0.47,
        recorded_at="2024-10-20T10:00:00Z",
    )
