"""Mutation engine and the session store built on it."""

from .actions import Action, DeleteFixture, DeleteRecord, Upsert
from .engine import apply, remove_by_id, upsert
from .ids import generate_id
from .integrity import ValidationError, find_problems, validate_action
from .service import SportsStore, utc_now

__all__ = [
    "Action",
    "DeleteFixture",
    "DeleteRecord",
    "Upsert",
    "apply",
    "remove_by_id",
    "upsert",
    "generate_id",
    "ValidationError",
    "find_problems",
    "validate_action",
    "SportsStore",
    "utc_now",
]
