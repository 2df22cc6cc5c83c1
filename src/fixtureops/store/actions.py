"""Commands accepted by the mutation engine."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from fixtureops.models import Record


@dataclass(frozen=True)
class Upsert:
    """Create ``record`` in ``collection`` or replace the record with the same id."""

    collection: str
    record: Record


@dataclass(frozen=True)
class DeleteRecord:
    """Remove one record without touching any other collection."""

    collection: str
    record_id: str


@dataclass(frozen=True)
class DeleteFixture:
    """Remove a fixture together with its mappings, issues, classifications and notes."""

    fixture_id: str


Action = Union[Upsert, DeleteRecord, DeleteFixture]
