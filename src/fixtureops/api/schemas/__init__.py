"""Pydantic models for API I/O."""

from .base import ApiModel
from .board import FixtureBoardRowResponse, FixtureOverviewResponse, OptionSetResponse
from .summary import MetricResponse, SummaryResponse

__all__ = [
    "ApiModel",
    "FixtureBoardRowResponse",
    "FixtureOverviewResponse",
    "OptionSetResponse",
    "MetricResponse",
    "SummaryResponse",
]
