"""
Record stream: turns GEDCOM tokens into person/family field events.

Only level-1 lines directly under a level-0 ``INDI`` or ``FAM`` record are
decoded; every other record and substructure is ignored. A record ends when the
next level-0 line (or the end of input) is reached.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Iterable, Iterator, Optional

from .tokenizer import Token


class FieldKind(str, Enum):
    PERSON_START = "person-start"
    PERSON_NAME = "person-name"
    PERSON_FAMILY_AS_CHILD = "person-family-as-child"
    PERSON_FAMILY_AS_PARENT = "person-family-as-parent"
    PERSON_END = "person-end"
    FAMILY_START = "family-start"
    FAMILY_PARENT = "family-parent"
    FAMILY_CHILD = "family-child"
    FAMILY_END = "family-end"


END_KINDS = frozenset({FieldKind.PERSON_END, FieldKind.FAMILY_END})


@dataclass(frozen=True)
class FieldEvent:
    kind: FieldKind
    value: Optional[str] = None
    lineno: int = 0


_RECORDS: Dict[str, tuple] = {
    "INDI": (FieldKind.PERSON_START, FieldKind.PERSON_END),
    "FAM": (FieldKind.FAMILY_START, FieldKind.FAMILY_END),
}

_FIELDS: Dict[str, Dict[str, FieldKind]] = {
    "INDI": {
        "NAME": FieldKind.PERSON_NAME,
        "FAMC": FieldKind.PERSON_FAMILY_AS_CHILD,
        "FAMS": FieldKind.PERSON_FAMILY_AS_PARENT,
    },
    "FAM": {
        "HUSB": FieldKind.FAMILY_PARENT,
        "WIFE": FieldKind.FAMILY_PARENT,
        "CHIL": FieldKind.FAMILY_CHILD,
    },
}


def iter_field_events(tokens: Iterable[Token]) -> Iterator[FieldEvent]:
    """Yield field events in source order, closing each record with its end event."""
    current: Optional[str] = None
    lineno = 0

    for tok in tokens:
        lineno = tok.lineno
        if tok.level == 0:
            if current is not None:
                yield FieldEvent(_RECORDS[current][1], lineno=lineno)
                current = None
            if tok.tag in _RECORDS:
                current = tok.tag
                yield FieldEvent(_RECORDS[current][0], tok.pointer, lineno=lineno)
            continue

        if current is None or tok.level != 1:
            continue

        kind = _FIELDS[current].get(tok.tag)
        if kind is not None:
            yield FieldEvent(kind, tok.value.strip(), lineno=lineno)

    if current is not None:
        yield FieldEvent(_RECORDS[current][1], lineno=lineno)
