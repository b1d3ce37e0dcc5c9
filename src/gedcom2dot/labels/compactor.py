"""
Compact node labels for person boxes.

A GEDCOM name such as ``Mary Jane /Smith/`` becomes ``Mary\\nJ.\\nSmith``:
surname slashes dropped, middle names reduced to initials, one name per line.
"""

from __future__ import annotations

import re
from typing import Iterable, List

# Leading words that are titles rather than given names; the name after them
# is kept in full.
DEFAULT_TITLES = ("Ompu", "O.", "Amani", "A.", "Aman", "Datu", "Nai", "Apa")

UNKNOWN_PLACEHOLDER = "(....)"

_UNKNOWN_NAME = re.compile(r"^\(.+\)", re.MULTILINE)


def _replace_unknown_segments(name: str) -> str:
    segments = name.split("/")
    segments = [
        UNKNOWN_PLACEHOLDER + "\n" if _UNKNOWN_NAME.search(seg) else seg
        for seg in segments
    ]
    return "".join(segments)


def _abbreviate_middle_names(tokens: List[str], titles: Iterable[str]) -> List[str]:
    if len(tokens) <= 2:
        return tokens

    titled = tokens[0].strip() in set(titles)
    out = list(tokens)
    for i in range(1, len(tokens) - 1):
        if i == 1 and titled:
            continue
        out[i] = tokens[i][0].upper() + "."
    return out


def _wrap(tokens: List[str]) -> List[str]:
    out = list(tokens)
    for i in range(len(tokens) - 1):
        # consecutive initials share a line
        if not (tokens[i].endswith(".") and tokens[i + 1].endswith(".")):
            out[i] = tokens[i] + "\n"
    return out


def compact_label(raw_name: str, titles: Iterable[str] = DEFAULT_TITLES) -> str:
    """Return the compact, line-wrapped label for ``raw_name``."""
    name = _replace_unknown_segments(raw_name or "")
    tokens = name.split()
    tokens = _abbreviate_middle_names(tokens, titles)
    return "".join(_wrap(tokens))
