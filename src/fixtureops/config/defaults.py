"""Bundled seed data used when no stored snapshot is available."""

from __future__ import annotations

import copy
from functools import lru_cache
from typing import Any, Dict

from fixtureops.models import SportsState


_SEED_DOCUMENT: Dict[str, Any] = {
    "sports": [
        {"id": "sport-football", "code": "FOOT", "name": "Football"},
        {"id": "sport-basketball", "code": "BASK", "name": "Basketball"},
    ],
    "bookmakers": [
        {"id": "bm-pinnacle", "name": "Pinnacle", "region": "Global"},
        {"id": "bm-bet365", "name": "Bet365", "region": "UK"},
        {"id": "bm-betfair", "name": "Betfair Exchange", "region": "UK"},
    ],
    "competitions": [
        {
            "id": "comp-epl",
            "sportId": "sport-football",
            "name": "Premier League",
            "region": "England",
            "tier": "professional",
            "season": "2024/25",
            "governingBody": "The FA",
        },
        {
            "id": "comp-euroleague",
            "sportId": "sport-basketball",
            "name": "EuroLeague",
            "region": "Europe",
            "tier": "professional",
            "season": "2024/25",
        },
    ],
    "teams": [
        {
            "id": "team-ars",
            "sportId": "sport-football",
            "competitionIds": ["comp-epl"],
            "name": "Arsenal",
            "shortName": "ARS",
            "primaryColor": "#ef0107",
            "secondaryColor": "#ffffff",
            "homeVenue": "Emirates Stadium",
        },
        {
            "id": "team-liv",
            "sportId": "sport-football",
            "competitionIds": ["comp-epl"],
            "name": "Liverpool",
            "shortName": "LIV",
            "primaryColor": "#c8102e",
            "secondaryColor": "#00b2a9",
            "homeVenue": "Anfield",
        },
        {
            "id": "team-rma",
            "sportId": "sport-basketball",
            "competitionIds": ["comp-euroleague"],
            "name": "Real Madrid Baloncesto",
            "shortName": "RMB",
            "primaryColor": "#ffffff",
            "secondaryColor": "#3d195b",
        },
        {
            "id": "team-oly",
            "sportId": "sport-basketball",
            "competitionIds": ["comp-euroleague"],
            "name": "Olympiacos",
            "shortName": "OLY",
            "primaryColor": "#d20a11",
            "secondaryColor": "#ffffff",
            "homeVenue": "Peace and Friendship Stadium",
        },
    ],
    "players": [
        {
            "id": "player-saka",
            "teamId": "team-ars",
            "name": "Bukayo Saka",
            "position": "Winger",
            "nationality": "England",
            "dateOfBirth": "2001-09-05",
            "status": "active",
        },
        {
            "id": "player-salah",
            "teamId": "team-liv",
            "name": "Mohamed Salah",
            "position": "Forward",
            "nationality": "Egypt",
            "status": "active",
        },
        {
            "id": "player-vezenkov",
            "teamId": "team-oly",
            "name": "Sasha Vezenkov",
            "position": "Forward",
            "nationality": "Bulgaria",
            "status": "injured",
        },
    ],
    "fixtures": [
        {
            "id": "fix-ars-liv",
            "sportId": "sport-football",
            "competitionId": "comp-epl",
            "homeTeamId": "team-ars",
            "awayTeamId": "team-liv",
            "venue": "Emirates Stadium",
            "kickOff": "2024-10-26T16:30:00Z",
            "status": "scheduled",
            "coverage": {"feed": True, "streams": True, "tracking": True},
        },
        {
            "id": "fix-rma-oly",
            "sportId": "sport-basketball",
            "competitionId": "comp-euroleague",
            "homeTeamId": "team-rma",
            "awayTeamId": "team-oly",
            "venue": "WiZink Center",
            "kickOff": "2024-10-24T19:00:00Z",
            "status": "scheduled",
            "coverage": {"feed": True, "streams": False, "tracking": False},
            "notes": "Streaming rights pending confirmation",
        },
    ],
    "mappings": [
        {
            "id": "map-ars-liv-pinnacle",
            "fixtureId": "fix-ars-liv",
            "bookmakerId": "bm-pinnacle",
            "externalFixtureId": "PIN-1597534",
            "marketsCovered": ["1X2", "Asian Handicap", "Totals"],
            "status": "complete",
            "confidence": 0.97,
            "lastSynced": "2024-10-20T08:15:00Z",
        },
        {
            "id": "map-rma-oly-bet365",
            "fixtureId": "fix-rma-oly",
            "bookmakerId": "bm-bet365",
            "externalFixtureId": "B365-88213",
            "marketsCovered": ["Moneyline"],
            "status": "needs-review",
            "confidence": 0.62,
            "lastSynced": "2024-10-20T09:40:00Z",
            "issues": ["Home/away order differs from feed"],
        },
    ],
    "classifications": [
        {
            "id": "cls-ars-liv",
            "fixtureId": "fix-ars-liv",
            "template": "Football Tier 1",
            "pricingLead": "A. Trader",
            "riskLevel": "high",
            "marketStatus": "ready",
        },
    ],
    "issues": [
        {
            "id": "issue-rma-oly-feed",
            "fixtureId": "fix-rma-oly",
            "severity": "high",
            "message": "Bet365 mapping confidence below threshold",
            "suggestedAction": "Confirm external fixture id with bookmaker",
            "detectedAt": "2024-10-20T09:45:00Z",
        },
    ],
    "notes": [
        {
            "id": "note-ars-liv-trading",
            "fixtureId": "fix-ars-liv",
            "author": "Jordan",
            "team": "trading",
            "createdAt": "2024-10-20T10:00:00Z",
            "message": "Opening lines published; monitoring team news.",
        },
    ],
    "pricing": [
        {
            "id": "price-ars-liv-home",
            "fixtureId": "fix-ars-liv",
            "bookmakerId": "bm-pinnacle",
            "market": "1X2",
            "selection": "Arsenal",
            "price": 2.45,
            "probability": 0.41,
            "recordedAt": "2024-10-20T10:05:00Z",
        },
    ],
}


def default_document() -> Dict[str, Any]:
    """Return a fresh copy of the seed document in persisted form."""

    return copy.deepcopy(_SEED_DOCUMENT)


@lru_cache(maxsize=1)
def default_state() -> SportsState:
    """Return the seed snapshot. Snapshots are immutable so one instance is shared."""

    return SportsState.model_validate(default_document())
