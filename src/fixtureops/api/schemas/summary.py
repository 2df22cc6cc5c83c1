from __future__ import annotations

from fixtureops.aggregation import OperationalSummary

from .base import ApiModel


class MetricResponse(ApiModel):
    label: str
    value: int | str
    trend: str


class SummaryResponse(ApiModel):
    fixture_count: int
    scheduled_count: int
    mapped_fixture_count: int
    mapping_coverage: int
    pricing_ready_count: int
    pricing_ready_share: int
    high_priority_issue_count: int
    metrics: list[MetricResponse]

    @classmethod
    def from_summary(cls, summary: OperationalSummary) -> "SummaryResponse":
        return cls(
            fixture_count=summary.fixture_count,
            scheduled_count=summary.scheduled_count,
            mapped_fixture_count=summary.mapped_fixture_count,
            mapping_coverage=summary.mapping_coverage,
            pricing_ready_count=summary.pricing_ready_count,
            pricing_ready_share=summary.pricing_ready_share,
            high_priority_issue_count=summary.high_priority_issue_count,
            metrics=[
                MetricResponse(
                    label="Fixtures Scheduled",
                    value=summary.scheduled_count,
                    trend=summary.scheduled_trend,
                ),
                MetricResponse(
                    label="Mapping Coverage",
                    value=f"{summary.mapping_coverage}%",
                    trend=summary.coverage_trend,
                ),
                MetricResponse(
                    label="Pricing Ready",
                    value=summary.pricing_ready_count,
                    trend=summary.pricing_trend,
                ),
                MetricResponse(
                    label="High Priority Issues",
                    value=summary.high_priority_issue_count,
                    trend=summary.issues_trend,
                ),
            ],
        )
