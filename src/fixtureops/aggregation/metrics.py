"""Operational summary metrics derived from a snapshot."""

from __future__ import annotations

import math
from dataclasses import dataclass

from fixtureops.config.vocabulary import HIGH_PRIORITY_SEVERITIES
from fixtureops.models import SportsState


def percent(part: int, total: int) -> int:
    """Whole-number percentage rounded half up; 0 when ``total`` is 0."""

    if not total:
        return 0
    return math.floor(part / total * 100 + 0.5)


def mapped_fixture_count(state: SportsState) -> int:
    return len({mapping.fixture_id for mapping in state.mappings if mapping.status == "complete"})


def mapping_coverage(state: SportsState) -> int:
    return percent(mapped_fixture_count(state), len(state.fixtures))


def high_priority_issue_count(state: SportsState) -> int:
    return sum(1 for issue in state.issues if issue.severity in HIGH_PRIORITY_SEVERITIES)


def pricing_ready_count(state: SportsState) -> int:
    return sum(1 for classification in state.classifications if classification.market_status == "ready")


def pricing_ready_share(state: SportsState) -> int:
    return percent(pricing_ready_count(state), len(state.fixtures))


def scheduled_count(state: SportsState) -> int:
    return sum(1 for fixture in state.fixtures if fixture.status == "scheduled")


@dataclass(frozen=True)
class OperationalSummary:
    """Headline metrics shown at the top of the console."""

    fixture_count: int
    scheduled_count: int
    mapped_fixture_count: int
    mapping_coverage: int
    pricing_ready_count: int
    pricing_ready_share: int
    high_priority_issue_count: int

    @property
    def scheduled_trend(self) -> str:
        return f"{self.scheduled_count} upcoming fixtures requiring monitoring"

    @property
    def coverage_trend(self) -> str:
        return f"{self.mapped_fixture_count}/{self.fixture_count} fixtures confirmed with bookmakers"

    @property
    def pricing_trend(self) -> str:
        return f"{self.pricing_ready_share}% of fixtures have classifications"

    @property
    def issues_trend(self) -> str:
        if self.high_priority_issue_count:
            return "Urgent attention required"
        return "All clear across priority fixtures"


def summarize(state: SportsState) -> OperationalSummary:
    return OperationalSummary(
        fixture_count=len(state.fixtures),
        scheduled_count=scheduled_count(state),
        mapped_fixture_count=mapped_fixture_count(state),
        mapping_coverage=mapping_coverage(state),
        pricing_ready_count=pricing_ready_count(state),
        pricing_ready_share=pricing_ready_share(state),
        high_priority_issue_count=high_priority_issue_count(state),
    )
