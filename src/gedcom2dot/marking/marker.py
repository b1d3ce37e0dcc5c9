"""
Relevance marker.

Flags the people and families that survive pruning around a root. The
traversal keeps an explicit stack of pending ``(operation, person id)`` tasks
and visits them in the same order a depth-first recursive walk would, so the
outcome matches the recursive formulation while deep pedigrees cannot exhaust
the interpreter's recursion limit.

A person that is already marked is never expanded again. That guard is what
makes the walk terminate on cyclic data.
"""

from __future__ import annotations

from enum import Enum
from typing import List, Tuple

from gedcom2dot.core.exceptions import UnresolvedRootError
from gedcom2dot.logging import get_logger
from gedcom2dot.marking.policy import InclusionPolicy
from gedcom2dot.marking.roots import FamilyRoot, NoRoot, PersonRoot, Root
from gedcom2dot.store.entities import EntityStore, Family, Person

log = get_logger(__name__)


class _Op(Enum):
    ANCESTORS = "ancestors"
    DESCENDANTS = "descendants"
    INCLUDE = "include"


Task = Tuple[_Op, str]


class RelevanceMarker:
    def __init__(self, store: EntityStore, policy: InclusionPolicy = InclusionPolicy.DEFAULT):
        self.store = store
        self.policy = policy
        # number of tasks popped off the stack; bounded even on cyclic data
        self.visits = 0

    # ---------------------------------------------------------
    # Entry point
    # ---------------------------------------------------------
    def mark(self, root: Root) -> None:
        if isinstance(root, NoRoot):
            self.store.mark_all()
            return

        if isinstance(root, FamilyRoot):
            family = self.store.get_family(root.id)
            if family is None:
                raise UnresolvedRootError(root.id, "family")
            self.mark_family(family)
        elif isinstance(root, PersonRoot):
            person = self.store.get_person(root.id)
            if person is None:
                raise UnresolvedRootError(root.id, "person")
            self.mark_person(person)
        else:
            raise TypeError(f"Unsupported root: {root!r}")

        counts = self.store.counts()
        log.info(
            "Marked %d of %d people and %d of %d families (policy=%s, visits=%d)",
            counts["marked_people"],
            counts["people"],
            counts["marked_families"],
            counts["families"],
            self.policy.value,
            self.visits,
        )

    def mark_person(self, person: Person) -> None:
        """
        Two-phase marking for a person root.

        Ancestors are marked first (which marks the root too); the root is then
        unmarked so the descendant walk expands it instead of stopping at it.
        """
        self.mark_ancestors(person)
        person.marked = False
        self.mark_descendants(person)

    def mark_family(self, family: Family) -> None:
        family.marked = True
        tasks: List[Task] = [(_Op.ANCESTORS, pid) for pid in family.parents]
        tasks += [(_Op.DESCENDANTS, cid) for cid in family.children]
        self._run(tasks)

    def mark_ancestors(self, person: Person) -> None:
        self._run([(_Op.ANCESTORS, person.id)])

    def mark_descendants(self, person: Person) -> None:
        self._run([(_Op.DESCENDANTS, person.id)])

    # ---------------------------------------------------------
    # Worklist
    # ---------------------------------------------------------
    def _run(self, tasks: List[Task]) -> None:
        stack: List[Task] = list(reversed(tasks))

        while stack:
            op, person_id = stack.pop()
            self.visits += 1

            person = self.store.get_person(person_id)
            if person is None:
                log.debug("Skipping unknown person id %s", person_id)
                continue

            if op is _Op.INCLUDE:
                person.marked = True
                continue

            if person.marked:
                continue
            person.marked = True

            if op is _Op.ANCESTORS:
                pending = self._expand_ancestors(person)
            else:
                pending = self._expand_descendants(person)

            # reversed so the first pending task is popped next
            stack.extend(reversed(pending))

    def _expand_ancestors(self, person: Person) -> List[Task]:
        family = self.store.get_family(person.family_as_child)
        if family is None:
            return []

        family.marked = True
        pending: List[Task] = [(_Op.ANCESTORS, pid) for pid in family.parents]

        if self.policy is InclusionPolicy.CHILDREN:
            pending += [(_Op.INCLUDE, cid) for cid in family.children]
        elif self.policy is InclusionPolicy.BLOOD:
            pending += [(_Op.DESCENDANTS, cid) for cid in family.children]
        return pending

    def _expand_descendants(self, person: Person) -> List[Task]:
        family = self.store.get_family(person.family_as_parent)
        if family is None:
            return []

        family.marked = True
        return [(_Op.DESCENDANTS, cid) for cid in family.children]


def mark(store: EntityStore, root: Root, policy: InclusionPolicy = InclusionPolicy.DEFAULT) -> RelevanceMarker:
    marker = RelevanceMarker(store, policy)
    marker.mark(root)
    return marker
