import json
import logging
import sqlite3
import tempfile
from pathlib import Path

import pytest

from fixtureops.config import default_state
from fixtureops.config.environment import DB_PATH_ENV
from fixtureops.models import SportsState
from fixtureops.persistence import (
    SnapshotRepository,
    SnapshotWriter,
    merge_with_defaults,
    parse_document,
    serialize,
)
from fixtureops.store import DeleteFixture, SportsStore, Upsert, apply

from tests.factories import make_fixture, make_mapping


def _write_raw(repository: SnapshotRepository, payload: str) -> None:
    with repository._connect() as conn:
        conn.execute(
            "INSERT OR REPLACE INTO documents (key, payload, updated_at) VALUES (?, ?, ?)",
            (repository.key, payload, "2024-10-21T00:00:00+00:00"),
        )
        conn.commit()


def test_load_without_document_returns_seed_data(tmp_path: Path):
    repository = SnapshotRepository(tmp_path / "state.sqlite")

    assert repository.read_raw() is None
    assert repository.load() == default_state()


def test_round_trip_preserves_every_collection(tmp_path: Path):
    repository = SnapshotRepository(tmp_path / "state.sqlite")
    state = apply(default_state(), Upsert("fixtures", make_fixture("fix-new", notes="Late kick-off")))
    state = apply(state, Upsert("mappings", make_mapping("map-new", "fix-new")))
    state = apply(state, DeleteFixture("fix-rma-oly"))

    repository.save(state)

    assert repository.load() == state


def test_round_trip_keeps_empty_collections(tmp_path: Path):
    repository = SnapshotRepository(tmp_path / "state.sqlite")
    empty = default_state().replace(issues=(), notes=())

    repository.save(empty)
    loaded = repository.load()

    assert loaded.issues == ()
    assert loaded.notes == ()
    assert loaded.fixtures == default_state().fixtures


def test_missing_collection_falls_back_to_seed_data(tmp_path: Path):
    repository = SnapshotRepository(tmp_path / "state.sqlite")
    document = SportsState().to_document()
    del document["bookmakers"]
    _write_raw(repository, json.dumps(document))

    loaded = repository.load()

    assert loaded.fixtures == ()
    assert loaded.bookmakers == default_state().bookmakers


def test_unknown_top_level_collection_is_dropped():
    document = default_state().to_document()
    document["venues"] = [{"id": "venue-1"}]

    loaded = merge_with_defaults(document)

    assert "venues" not in loaded.to_document()
    assert loaded == default_state()


@pytest.mark.parametrize(
    "payload",
    [
        "{not json",
        "[1, 2, 3]",
        json.dumps({"fixtures": [{"id": "fix-1"}]}),
        json.dumps({"fixtures": None}),
    ],
)
def test_unreadable_document_recovers_with_warning(tmp_path: Path, caplog, payload: str):
    repository = SnapshotRepository(tmp_path / "state.sqlite")
    _write_raw(repository, payload)

    with caplog.at_level(logging.WARNING, logger="fixtureops.persistence"):
        loaded = repository.load()

    assert loaded == default_state()
    assert any("using initial data" in message for message in caplog.messages)


def test_parse_document_handles_empty_input():
    assert parse_document(None) == default_state()
    assert parse_document("") == default_state()


def test_serialize_uses_wire_names_and_omits_missing_optionals():
    document = json.loads(serialize(default_state()))

    fixture = next(item for item in document["fixtures"] if item["id"] == "fix-ars-liv")
    assert fixture["homeTeamId"] == "team-ars"
    assert "notes" not in fixture
    assert set(document) == {
        "sports",
        "bookmakers",
        "competitions",
        "teams",
        "players",
        "fixtures",
        "mappings",
        "classifications",
        "issues",
        "notes",
        "pricing",
    }


def test_save_overwrites_single_document(tmp_path: Path):
    repository = SnapshotRepository(tmp_path / "state.sqlite")

    repository.save(default_state())
    repository.save(SportsState())

    with repository._connect() as conn:
        count = conn.execute("SELECT COUNT(*) FROM documents").fetchone()[0]
    assert count == 1
    assert repository.load().fixtures == ()


def test_clear_removes_document(tmp_path: Path):
    repository = SnapshotRepository(tmp_path / "state.sqlite")
    repository.save(SportsState())

    repository.clear()

    assert repository.read_raw() is None


def test_environment_path_overrides_argument(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    env_path = tmp_path / "env" / "state.sqlite"
    monkeypatch.setenv(DB_PATH_ENV, str(env_path))

    repository = SnapshotRepository(tmp_path / "ignored.sqlite")

    assert repository.db_path == env_path
    assert env_path.exists()
    assert not (tmp_path / "ignored.sqlite").exists()


def test_writer_applies_saves_in_order(tmp_path: Path):
    repository = SnapshotRepository(tmp_path / "state.sqlite")
    writer = SnapshotWriter(repository)
    state = SportsState()
    for index in range(5):
        state = apply(state, Upsert("fixtures", make_fixture(f"fix-{index}")))
        writer.submit(state)

    writer.flush()
    writer.close()

    assert [fixture.id for fixture in repository.load().fixtures] == [f"fix-{i}" for i in range(4, -1, -1)]


def test_writer_drops_saves_after_close(tmp_path: Path):
    repository = SnapshotRepository(tmp_path / "state.sqlite")
    writer = SnapshotWriter(repository)
    writer.close()

    writer.submit(SportsState())

    assert repository.read_raw() is None


@pytest.fixture
def runtime_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    monkeypatch.setattr(tempfile, "tempdir", str(tmp_path / "tmp"))
    return tmp_path / "tmp" / "fixtureops-runtime"


def test_corrupt_database_file_recovers_with_seed_data(tmp_path: Path, runtime_dir: Path, caplog):
    db_path = tmp_path / "corrupt.sqlite"
    db_path.write_bytes(b"this is not a sqlite database at all" * 100)

    with caplog.at_level(logging.WARNING, logger="fixtureops.persistence"):
        store = SportsStore.open(db_path)

    assert store.snapshot == default_state()
    assert store.repository.db_path == runtime_dir / "fixtureops.sqlite"
    assert any("falling back" in message for message in caplog.messages)
    store.close()


def test_unopenable_path_falls_back_to_runtime_dir(tmp_path: Path, runtime_dir: Path):
    blocker = tmp_path / "blocker"
    blocker.write_text("not a directory", encoding="utf-8")

    repository = SnapshotRepository(blocker / "state.sqlite")
    repository.save(SportsState())

    assert repository.db_path == runtime_dir / "fixtureops.sqlite"
    assert repository.load().fixtures == ()


def test_save_failure_is_logged_not_raised(tmp_path: Path, monkeypatch: pytest.MonkeyPatch, caplog):
    repository = SnapshotRepository(tmp_path / "state.sqlite")

    def broken_connect() -> sqlite3.Connection:
        raise sqlite3.OperationalError("disk I/O error")

    monkeypatch.setattr(repository, "_connect", broken_connect)

    with caplog.at_level(logging.ERROR, logger="fixtureops.persistence"):
        repository.save(default_state())

    assert any(record.levelno == logging.ERROR and "Failed to save" in record.getMessage() for record in caplog.records)
    with pytest.raises(sqlite3.OperationalError):
        repository.write(default_state())


def test_file_uri_path_is_opened_in_uri_mode(tmp_path: Path):
    db_file = tmp_path / "uri.sqlite"
    uri = f"{db_file.as_uri()}?mode=rwc"

    repository = SnapshotRepository(uri)
    repository.save(SportsState())

    assert repository.db_path == uri
    assert db_file.exists()
    assert SnapshotRepository(uri).load().fixtures == ()


def test_file_uri_from_environment(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    db_file = tmp_path / "env-uri.sqlite"
    monkeypatch.setenv(DB_PATH_ENV, f"{db_file.as_uri()}?mode=rwc")

    repository = SnapshotRepository(tmp_path / "ignored.sqlite")
    repository.save(default_state())

    assert db_file.exists()
    assert repository.load() == default_state()
