"""
Store builder: an explicit state machine fed by record-stream field events.

States
------
* ``Idle``            – between records.
* ``BuildingPerson``  – a person-start was seen; person fields accumulate.
* ``BuildingFamily``  – a family-start was seen; family fields accumulate.

``on_record_complete()`` moves the finished entity into the store and returns
to ``Idle``. Any event that does not fit the current state raises
``RecordSequenceError``.
"""

from __future__ import annotations

from enum import Enum
from typing import Iterable, Optional, Union

from gedcom2dot.core.exceptions import RecordSequenceError
from gedcom2dot.loader.record_stream import END_KINDS, FieldEvent, FieldKind
from gedcom2dot.logging import get_logger
from gedcom2dot.store.entities import EntityStore, Family, Person
from gedcom2dot.store.xref import normalize_xref

log = get_logger(__name__)


class BuilderState(str, Enum):
    IDLE = "Idle"
    BUILDING_PERSON = "BuildingPerson"
    BUILDING_FAMILY = "BuildingFamily"


_PERSON_FIELDS = {
    FieldKind.PERSON_NAME,
    FieldKind.PERSON_FAMILY_AS_CHILD,
    FieldKind.PERSON_FAMILY_AS_PARENT,
}
_FAMILY_FIELDS = {FieldKind.FAMILY_PARENT, FieldKind.FAMILY_CHILD}


class StoreBuilder:
    """
    Accumulates one record at a time into an ``EntityStore``.

    ``premark`` is the initial ``marked`` value of every entity; it is True
    when no root filter is active so the whole graph is kept.
    """

    def __init__(self, store: Optional[EntityStore] = None, premark: bool = False):
        self.store = store if store is not None else EntityStore()
        self.premark = premark
        self.state = BuilderState.IDLE
        self._partial: Union[Person, Family, None] = None
        self._partial_has_id = False
        self.skipped = 0

    # ---------------------------------------------------------
    # Event interface
    # ---------------------------------------------------------
    def on_field_event(self, event: FieldEvent) -> None:
        kind = event.kind

        if kind in END_KINDS:
            expected = (
                BuilderState.BUILDING_PERSON
                if kind is FieldKind.PERSON_END
                else BuilderState.BUILDING_FAMILY
            )
            self._require(expected, event)
            self.on_record_complete()
            return

        if kind is FieldKind.PERSON_START:
            self._require(BuilderState.IDLE, event)
            self._start(Person(id=normalize_xref(event.value) or ""), BuilderState.BUILDING_PERSON)
            return

        if kind is FieldKind.FAMILY_START:
            self._require(BuilderState.IDLE, event)
            self._start(Family(id=normalize_xref(event.value) or ""), BuilderState.BUILDING_FAMILY)
            return

        if kind in _PERSON_FIELDS:
            self._require(BuilderState.BUILDING_PERSON, event)
            self._apply_person_field(kind, event.value)
            return

        if kind in _FAMILY_FIELDS:
            self._require(BuilderState.BUILDING_FAMILY, event)
            self._apply_family_field(kind, event.value)
            return

        raise RecordSequenceError(f"Unknown field event {kind!r}")

    def on_record_complete(self) -> None:
        if self.state is BuilderState.IDLE or self._partial is None:
            raise RecordSequenceError("Record completed while no record was open")

        entity = self._partial
        self._partial = None
        state, self.state = self.state, BuilderState.IDLE

        if not self._partial_has_id:
            self.skipped += 1
            log.warning("Skipping %s record without a usable id", state.value)
            return

        entity.marked = self.premark
        if isinstance(entity, Person):
            if entity.id in self.store.people:
                log.warning("Duplicate person id %s; keeping the later record", entity.id)
            self.store.register_person(entity)
        else:
            if entity.id in self.store.families:
                log.warning("Duplicate family id %s; keeping the later record", entity.id)
            self.store.register_family(entity)

    def feed(self, events: Iterable[FieldEvent]) -> EntityStore:
        """Apply a whole event stream and return the populated store."""
        for event in events:
            self.on_field_event(event)
        if self.state is not BuilderState.IDLE:
            raise RecordSequenceError(f"Event stream ended in state {self.state.value}")
        return self.store

    # ---------------------------------------------------------
    # Internals
    # ---------------------------------------------------------
    def _require(self, state: BuilderState, event: FieldEvent) -> None:
        if self.state is not state:
            raise RecordSequenceError(
                f"Line {event.lineno}: {event.kind.value} not allowed in state {self.state.value}"
            )

    def _start(self, entity: Union[Person, Family], state: BuilderState) -> None:
        self._partial = entity
        self._partial_has_id = bool(entity.id)
        self.state = state

    def _apply_person_field(self, kind: FieldKind, value: Optional[str]) -> None:
        person = self._partial
        if not isinstance(person, Person):
            raise RecordSequenceError("Person field applied outside a person record")

        # Repeated fields overwrite: the last NAME/FAMC/FAMS line wins.
        if kind is FieldKind.PERSON_NAME:
            person.name = value or ""
        elif kind is FieldKind.PERSON_FAMILY_AS_CHILD:
            person.family_as_child = normalize_xref(value)
        else:
            person.family_as_parent = normalize_xref(value)

    def _apply_family_field(self, kind: FieldKind, value: Optional[str]) -> None:
        family = self._partial
        if not isinstance(family, Family):
            raise RecordSequenceError("Family field applied outside a family record")

        xref = normalize_xref(value)
        if xref is None:
            return
        if kind is FieldKind.FAMILY_PARENT:
            family.parents.append(xref)
        else:
            family.children.append(xref)


def build_store(events: Iterable[FieldEvent], premark: bool = False) -> EntityStore:
    return StoreBuilder(premark=premark).feed(events)
