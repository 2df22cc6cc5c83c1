"""Domain state store for a sports fixture operations console."""

from fixtureops.models import SportsState
from fixtureops.store import SportsStore

__all__ = ["SportsState", "SportsStore"]

__version__ = "0.1.0"
