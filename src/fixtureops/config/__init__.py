"""Configuration helpers: vocabulary, seed data and environment settings."""

from .defaults import default_document, default_state
from .vocabulary import (
    CASCADE_COLLECTIONS,
    DEFAULT_SUGGESTED_ACTION,
    HIGH_PRIORITY_SEVERITIES,
    OptionSet,
    get_options,
    get_options_by_key,
    iter_option_sets,
)

__all__ = [
    "CASCADE_COLLECTIONS",
    "DEFAULT_SUGGESTED_ACTION",
    "HIGH_PRIORITY_SEVERITIES",
    "OptionSet",
    "default_document",
    "default_state",
    "get_options",
    "get_options_by_key",
    "iter_option_sets",
]
