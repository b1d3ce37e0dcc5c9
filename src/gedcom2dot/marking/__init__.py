from __future__ import annotations

from .marker import RelevanceMarker, mark
from .policy import InclusionPolicy
from .roots import NO_ROOT, FamilyRoot, NoRoot, PersonRoot, Root, parse_root

__all__ = [
    "NO_ROOT",
    "FamilyRoot",
    "InclusionPolicy",
    "NoRoot",
    "PersonRoot",
    "RelevanceMarker",
    "Root",
    "mark",
    "parse_root",
]
