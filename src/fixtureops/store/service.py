"""The session store: current snapshot, mutation entry points and change fan-out."""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from threading import RLock
from typing import Callable, Iterable, List, Optional

from fixtureops.config.defaults import default_state
from fixtureops.config.environment import strict_mode
from fixtureops.config.vocabulary import DEFAULT_SUGGESTED_ACTION
from fixtureops.models import (
    CollaborationNote,
    Competition,
    Fixture,
    FixtureMapping,
    MarketClassification,
    OperationIssue,
    Player,
    PricingSnapshot,
    SportsState,
    Team,
    as_utc,
)
from fixtureops.persistence import SnapshotRepository, SnapshotWriter

from .actions import Action, DeleteFixture, DeleteRecord, Upsert
from .engine import apply
from .integrity import validate_action


logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]
Listener = Callable[[SportsState], None]


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def _clean_text(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    cleaned = value.strip()
    return cleaned or None


def _clean_lines(values: Optional[Iterable[str]]) -> Optional[List[str]]:
    if values is None:
        return None
    cleaned = [value.strip() for value in values if value and value.strip()]
    return cleaned or None


class SportsStore:
    """Owns the current :class:`SportsState` for one session.

    Every entry point builds a command, runs it through the pure engine and
    installs the resulting snapshot in one step under a lock, so readers see
    either the old snapshot or the new one. Subscribers are notified and the
    snapshot is queued for saving once it is installed.
    """

    def __init__(
        self,
        repository: SnapshotRepository | None = None,
        *,
        initial: SportsState | None = None,
        clock: Clock = utc_now,
        strict: bool | None = None,
    ):
        self.repository = repository
        self._writer = SnapshotWriter(repository) if repository is not None else None
        self._clock = clock
        self.strict = strict_mode() if strict is None else strict
        self._lock = RLock()
        self._listeners: list[Listener] = []
        if initial is not None:
            self._state = initial
        elif repository is not None:
            self._state = repository.load()
        else:
            self._state = default_state()
        logger.info(
            "Store opened with %d fixtures (strict=%s, persistence=%s)",
            len(self._state.fixtures),
            self.strict,
            repository.db_path if repository is not None else None,
        )

    @classmethod
    def open(cls, db_path=None, **kwargs) -> "SportsStore":
        repository = SnapshotRepository(db_path) if db_path is not None else SnapshotRepository()
        return cls(repository, **kwargs)

    @property
    def snapshot(self) -> SportsState:
        return self._state

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register ``listener`` for new snapshots; returns a function that unregisters it."""

        with self._lock:
            self._listeners.append(listener)

        def unsubscribe() -> None:
            with self._lock:
                if listener in self._listeners:
                    self._listeners.remove(listener)

        return unsubscribe

    def dispatch(self, action: Action) -> None:
        with self._lock:
            current = self._state
            if self.strict:
                validate_action(current, action)
            updated = apply(current, action)
            if updated is current:
                logger.debug("No change for %s", action)
                return
            self._state = updated
            logger.debug("Applied %s", action)
            self._publish(updated)

    def reset(self) -> None:
        """Replace the whole snapshot with the seed data."""

        with self._lock:
            self._state = default_state()
            logger.info("Store reset to initial data")
            self._publish(self._state)

    def flush(self) -> None:
        if self._writer is not None:
            self._writer.flush()

    def close(self) -> None:
        if self._writer is not None:
            self._writer.close()

    def _publish(self, state: SportsState) -> None:
        for listener in list(self._listeners):
            try:
                listener(state)
            except Exception:
                logger.exception("Snapshot listener %r failed", listener)
        if self._writer is not None:
            self._writer.submit(state)

    def _now(self, now: datetime | None) -> datetime:
        # model_copy skips validation, so normalise here as UtcDatetime would.
        return as_utc(now if now is not None else self._clock())

    # Entry points ---------------------------------------------------------

    def upsert_competition(self, competition: Competition) -> None:
        record = competition.model_copy(update={"governing_body": _clean_text(competition.governing_body)})
        self.dispatch(Upsert("competitions", record))

    def upsert_team(self, team: Team) -> None:
        record = team.model_copy(update={"home_venue": _clean_text(team.home_venue)})
        self.dispatch(Upsert("teams", record))

    def upsert_player(self, player: Player) -> None:
        record = player.model_copy(update={"date_of_birth": _clean_text(player.date_of_birth)})
        self.dispatch(Upsert("players", record))

    def upsert_fixture(self, fixture: Fixture) -> None:
        record = fixture.model_copy(update={"notes": _clean_text(fixture.notes)})
        self.dispatch(Upsert("fixtures", record))

    def upsert_mapping(self, mapping: FixtureMapping, *, now: datetime | None = None) -> None:
        record = mapping.model_copy(
            update={
                "last_synced": mapping.last_synced or self._now(now),
                "issues": _clean_lines(mapping.issues),
            }
        )
        self.dispatch(Upsert("mappings", record))

    def upsert_classification(self, classification: MarketClassification) -> None:
        record = classification.model_copy(update={"notes": _clean_text(classification.notes)})
        self.dispatch(Upsert("classifications", record))

    def upsert_issue(self, issue: OperationIssue, *, now: datetime | None = None) -> None:
        record = issue.model_copy(
            update={
                "detected_at": issue.detected_at or self._now(now),
                "suggested_action": _clean_text(issue.suggested_action) or DEFAULT_SUGGESTED_ACTION,
            }
        )
        self.dispatch(Upsert("issues", record))

    def upsert_note(self, note: CollaborationNote, *, now: datetime | None = None) -> None:
        record = note.model_copy(update={"created_at": note.created_at or self._now(now)})
        self.dispatch(Upsert("notes", record))

    def record_pricing(self, pricing: PricingSnapshot, *, now: datetime | None = None) -> None:
        record = pricing.model_copy(update={"recorded_at": pricing.recorded_at or self._now(now)})
        self.dispatch(Upsert("pricing", record))

    def delete_fixture(self, fixture_id: str) -> None:
        self.dispatch(DeleteFixture(fixture_id))

    def delete_mapping(self, mapping_id: str) -> None:
        self.dispatch(DeleteRecord("mappings", mapping_id))

    def delete_note(self, note_id: str) -> None:
        self.dispatch(DeleteRecord("notes", note_id))
