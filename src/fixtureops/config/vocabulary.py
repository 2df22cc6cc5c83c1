"""Option sets for the enumerated fields of each entity."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, FrozenSet, Iterable, Tuple, get_args

from fixtureops.models.entities import (
    CompetitionTier,
    FixtureStatus,
    IssueSeverity,
    MappingStatus,
    MarketStatus,
    NoteTeam,
    PlayerStatus,
    RiskLevel,
)


@dataclass(frozen=True)
class OptionSet:
    collection: str
    field: str
    options: Tuple[str, ...]
    default: str


_OPTION_SETS: Dict[Tuple[str, str], OptionSet] = {
    ("competitions", "tier"): OptionSet(
        collection="competitions",
        field="tier",
        options=get_args(CompetitionTier),
        default="professional",
    ),
    ("players", "status"): OptionSet(
        collection="players",
        field="status",
        options=get_args(PlayerStatus),
        default="active",
    ),
    ("fixtures", "status"): OptionSet(
        collection="fixtures",
        field="status",
        options=get_args(FixtureStatus),
        default="scheduled",
    ),
    ("mappings", "status"): OptionSet(
        collection="mappings",
        field="status",
        options=get_args(MappingStatus),
        default="pending",
    ),
    ("classifications", "riskLevel"): OptionSet(
        collection="classifications",
        field="riskLevel",
        options=get_args(RiskLevel),
        default="medium",
    ),
    ("classifications", "marketStatus"): OptionSet(
        collection="classifications",
        field="marketStatus",
        options=get_args(MarketStatus),
        default="needs-pricing",
    ),
    ("issues", "severity"): OptionSet(
        collection="issues",
        field="severity",
        options=get_args(IssueSeverity),
        default="medium",
    ),
    ("notes", "team"): OptionSet(
        collection="notes",
        field="team",
        options=get_args(NoteTeam),
        default="operations",
    ),
}

HIGH_PRIORITY_SEVERITIES: FrozenSet[str] = frozenset({"critical", "high"})

# Child collections removed together with their fixture. Pricing history is kept.
CASCADE_COLLECTIONS: Tuple[str, ...] = ("mappings", "issues", "classifications", "notes")

DEFAULT_SUGGESTED_ACTION = "Review with trading team"


def iter_option_sets() -> Iterable[OptionSet]:
    """Return an iterator of all configured option sets."""

    return _OPTION_SETS.values()


def get_options(collection: str, field: str) -> OptionSet:
    """Fetch the option set for a collection field, raising KeyError if missing."""

    key = (collection.lower(), field)
    if key not in _OPTION_SETS:
        raise KeyError(f"No option set configured for collection={collection!r}, field={field!r}")
    return _OPTION_SETS[key]


def get_options_by_key(key: str) -> OptionSet:
    """Resolve an option set from a dotted "collection.field" key."""

    if not isinstance(key, str):
        raise TypeError("key must be a 'collection.field' string")
    parts = key.split(".", 1)
    if len(parts) != 2:
        raise ValueError(f"key must look like 'collection.field', got {key!r}")
    collection, field = parts
    return get_options(collection, field)
