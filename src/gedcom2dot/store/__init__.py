from __future__ import annotations

from .builder import BuilderState, StoreBuilder, build_store
from .entities import EntityStore, Family, Person
from .xref import ABSENT_XREF, normalize_xref

__all__ = [
    "ABSENT_XREF",
    "BuilderState",
    "EntityStore",
    "Family",
    "Person",
    "StoreBuilder",
    "build_store",
    "normalize_xref",
]
