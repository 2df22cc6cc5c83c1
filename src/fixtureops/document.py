"""Export and import the snapshot as a JSON file."""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path

from fixtureops.models import SportsState
from fixtureops.persistence import merge_with_defaults


@dataclass
class SnapshotDocument:
    state: SportsState

    @classmethod
    def load(cls, path: Path) -> "SnapshotDocument":
        """Read ``path`` and merge it over the seed data.

        Unlike startup loading, a broken file is an error here: the caller asked
        for this particular file. Raises ``ValueError`` (``json.JSONDecodeError``
        and pydantic's ``ValidationError`` both derive from it).
        """

        data = json.loads(path.read_text(encoding="utf-8"))
        if not isinstance(data, dict):
            raise ValueError(f"{path} does not contain a JSON object")
        return cls(state=merge_with_defaults(data))

    def save(self, path: Path) -> None:
        path.write_text(json.dumps(self.state.to_document(), indent=2), encoding="utf-8")
