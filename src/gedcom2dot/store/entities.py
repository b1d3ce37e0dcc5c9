from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Optional


# -----------------------------
# Entities
# -----------------------------

@dataclass(slots=True)
class Person:
    """
    An INDI record reduced to what the graph needs.

    ``family_as_child`` is the FAMC link (the family this person was born
    into); ``family_as_parent`` is the FAMS link (the family this person heads
    as a spouse).
    """
    id: str
    name: str = ""
    family_as_child: Optional[str] = None
    family_as_parent: Optional[str] = None
    marked: bool = False


@dataclass(slots=True)
class Family:
    id: str
    parents: List[str] = field(default_factory=list)
    children: List[str] = field(default_factory=list)
    marked: bool = False


# -----------------------------
# Store
# -----------------------------

@dataclass(slots=True)
class EntityStore:
    """
    In-memory entity store indexed by record id, in source order.
    """
    people: Dict[str, Person] = field(default_factory=dict)
    families: Dict[str, Family] = field(default_factory=dict)

    def register_person(self, person: Person) -> None:
        self.people[person.id] = person

    def register_family(self, family: Family) -> None:
        self.families[family.id] = family

    def get_person(self, person_id: Optional[str]) -> Optional[Person]:
        if not person_id:
            return None
        return self.people.get(person_id)

    def get_family(self, family_id: Optional[str]) -> Optional[Family]:
        if not family_id:
            return None
        return self.families.get(family_id)

    def iter_marked_people(self) -> Iterator[Person]:
        return (p for p in self.people.values() if p.marked)

    def iter_marked_families(self) -> Iterator[Family]:
        return (f for f in self.families.values() if f.marked)

    def mark_all(self) -> None:
        for person in self.people.values():
            person.marked = True
        for family in self.families.values():
            family.marked = True

    def counts(self) -> Dict[str, int]:
        return {
            "people": len(self.people),
            "families": len(self.families),
            "marked_people": sum(1 for _ in self.iter_marked_people()),
            "marked_families": sum(1 for _ in self.iter_marked_families()),
        }
