from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Optional, Union

from gedcom2dot.core.exceptions import ConfigurationError

_ROOT_PATTERN = re.compile(r"\A[FI]\d+\Z")


@dataclass(frozen=True)
class NoRoot:
    """Keep the whole graph."""


@dataclass(frozen=True)
class PersonRoot:
    id: str


@dataclass(frozen=True)
class FamilyRoot:
    id: str


Root = Union[NoRoot, PersonRoot, FamilyRoot]

NO_ROOT = NoRoot()


def parse_root(value: Optional[str]) -> Root:
    """
    Parse a ``--root`` argument such as ``F123`` or ``i4``.

    Raises ConfigurationError unless the id is F or I followed by digits.
    """
    if value is None:
        return NO_ROOT

    root_id = value.strip().upper()
    if not _ROOT_PATTERN.match(root_id):
        raise ConfigurationError(
            "--root argument must be F or I followed by digits, like F123 or I4"
        )
    if root_id.startswith("F"):
        return FamilyRoot(root_id)
    return PersonRoot(root_id)
