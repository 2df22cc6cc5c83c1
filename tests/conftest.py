from __future__ import annotations

import pytest

from fixtureops.config.environment import DB_PATH_ENV, STRICT_ENV
from fixtureops.models import SportsState


@pytest.fixture(autouse=True)
def _isolated_environment(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.delenv(DB_PATH_ENV, raising=False)
    monkeypatch.delenv(STRICT_ENV, raising=False)


@pytest.fixture
def anyio_backend() -> str:
    return "asyncio"


@pytest.fixture
def empty_state() -> SportsState:
    return SportsState()
