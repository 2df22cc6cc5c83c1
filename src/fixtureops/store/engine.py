"""Pure state transitions: ``apply(state, action) -> state``."""

from __future__ import annotations

from typing import Tuple, TypeVar

from fixtureops.config.vocabulary import CASCADE_COLLECTIONS
from fixtureops.models import COLLECTION_MODELS, Record, SportsState

from .actions import Action, DeleteFixture, DeleteRecord, Upsert


R = TypeVar("R", bound=Record)


def upsert(collection: Tuple[R, ...], record: R) -> Tuple[R, ...]:
    """Replace the record with the same id in place, or prepend a new one."""

    if any(item.id == record.id for item in collection):
        return tuple(record if item.id == record.id else item for item in collection)
    return (record, *collection)


def remove_by_id(collection: Tuple[R, ...], record_id: str) -> Tuple[R, ...]:
    return tuple(item for item in collection if item.id != record_id)


def _check_collection(name: str) -> None:
    if name not in COLLECTION_MODELS:
        raise KeyError(f"Unknown collection {name!r}")


def _apply_upsert(state: SportsState, action: Upsert) -> SportsState:
    _check_collection(action.collection)
    expected = COLLECTION_MODELS[action.collection]
    if not isinstance(action.record, expected):
        raise TypeError(
            f"Collection {action.collection!r} holds {expected.__name__}, got {type(action.record).__name__}"
        )
    current = state.collection(action.collection)
    return state.replace(**{action.collection: upsert(current, action.record)})


def _apply_delete(state: SportsState, action: DeleteRecord) -> SportsState:
    _check_collection(action.collection)
    current = state.collection(action.collection)
    remaining = remove_by_id(current, action.record_id)
    if len(remaining) == len(current):
        return state
    return state.replace(**{action.collection: remaining})


def _apply_delete_fixture(state: SportsState, action: DeleteFixture) -> SportsState:
    fixture_id = action.fixture_id
    changes: dict[str, tuple] = {}
    fixtures = remove_by_id(state.fixtures, fixture_id)
    if len(fixtures) != len(state.fixtures):
        changes["fixtures"] = fixtures
    for name in CASCADE_COLLECTIONS:
        current = state.collection(name)
        remaining = tuple(item for item in current if item.fixture_id != fixture_id)
        if len(remaining) != len(current):
            changes[name] = remaining
    if not changes:
        return state
    return state.replace(**changes)


def apply(state: SportsState, action: Action) -> SportsState:
    """Return the snapshot that results from ``action``.

    No I/O and no clock reads. When the action changes nothing the input
    snapshot itself is returned.
    """

    if isinstance(action, Upsert):
        return _apply_upsert(state, action)
    if isinstance(action, DeleteFixture):
        return _apply_delete_fixture(state, action)
    if isinstance(action, DeleteRecord):
        return _apply_delete(state, action)
    raise TypeError(f"Unsupported action {action!r}")
