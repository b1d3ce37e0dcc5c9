"""
dot_exporter.py
Graphviz DOT writer for a marked EntityStore.

Families are small circles, people are borderless boxes carrying a compact
label. Edges run person -> family-as-child and family -> parents, without
arrowheads, so ``dot`` lays the tree out from the youngest generation up.

The exporter only reads the store; marking must be finished beforehand.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, List, Optional

from gedcom2dot.labels import DEFAULT_TITLES, compact_label
from gedcom2dot.logging import get_logger
from gedcom2dot.marking.roots import NO_ROOT, FamilyRoot, PersonRoot, Root
from gedcom2dot.store.entities import EntityStore, Family, Person

log = get_logger(__name__)

INDENT = "    "


@dataclass
class DotStyle:
    font_size: int = 6
    root_color: str = "red"

    @classmethod
    def from_config(cls, cfg) -> "DotStyle":
        dot = getattr(cfg, "dot", None) or {}
        return cls(
            font_size=int(dot.get("font_size", cls.font_size)),
            root_color=str(dot.get("root_color", cls.root_color)),
        )


@dataclass
class EmitStats:
    family_nodes: int = 0
    person_nodes: int = 0
    spouse_nodes: int = 0
    child_edges: int = 0
    parent_edges: int = 0

    @property
    def nodes(self) -> int:
        return self.family_nodes + self.person_nodes + self.spouse_nodes

    @property
    def edges(self) -> int:
        return self.child_edges + self.parent_edges


def dot_escape(text: str) -> str:
    """Escape text for use inside a double-quoted DOT string."""
    return (
        text.replace("\\", "\\\\")
        .replace('"', '\\"')
        .replace("\n", "\\n")
    )


class DotExporter:
    def __init__(
        self,
        store: EntityStore,
        root: Root = NO_ROOT,
        style: Optional[DotStyle] = None,
        titles: Iterable[str] = DEFAULT_TITLES,
    ):
        self.store = store
        self.root = root
        self.style = style or DotStyle()
        self.titles = tuple(titles)
        self.stats = EmitStats()

    # ---------------------------------------------------------
    # Node / edge formatting
    # ---------------------------------------------------------
    def person_node(self, person: Person) -> str:
        label = dot_escape(compact_label(person.name, self.titles))
        return (
            f'{INDENT}{person.id} [ label="{label}" shape=box '
            f"fontsize={self.style.font_size} color=white style=solid];"
        )

    def _highlight(self, entity_id: str) -> str:
        return f"{INDENT}{entity_id} [style=filled fillcolor={self.style.root_color}]"

    def _resolved_parents(self, family: Family) -> List[str]:
        return [pid for pid in family.parents if pid in self.store.people]

    # ---------------------------------------------------------
    # Emission
    # ---------------------------------------------------------
    def iter_lines(self) -> Iterator[str]:
        """Yield the DOT description line by line (without newlines)."""
        self.stats = EmitStats()
        stats = self.stats

        yield "digraph familyTree {"
        yield f'{INDENT}node [width=0.1 height=0.1 fixedsize=true label=""]'
        yield f"{INDENT}edge [arrowhead=none]"
        yield f"{INDENT}node [shape=circle]"
        yield f"{INDENT}fontsize={self.style.font_size}"

        if isinstance(self.root, FamilyRoot):
            yield self._highlight(self.root.id)

        log.debug("Writing node definitions of marked families")
        for family in self.store.iter_marked_families():
            stats.family_nodes += 1
            yield f"{INDENT}{family.id};"

        log.debug("Writing node definitions of marked people")
        for person in self.store.iter_marked_people():
            stats.person_nodes += 1
            yield self.person_node(person)

        yield f"{INDENT}node [shape=box]"
        if isinstance(self.root, PersonRoot):
            yield self._highlight(self.root.id)

        log.debug("Connecting marked people to their parent family")
        for person in self.store.iter_marked_people():
            if self.store.get_family(person.family_as_child) is None:
                continue
            stats.child_edges += 1
            yield f"{INDENT}{person.id} -> {person.family_as_child}"

        log.debug("Connecting couples to their family")
        for family in self.store.iter_marked_families():
            parents = self._resolved_parents(family)

            # a spouse who married into the tree is unmarked; declare it here
            spouses = [pid for pid in parents if not self.store.people[pid].marked]
            if len(spouses) == 1:
                stats.spouse_nodes += 1
                yield self.person_node(self.store.people[spouses[0]])

            if parents:
                stats.parent_edges += 1
                targets = "; ".join(parents)
                if len(parents) > 1:
                    targets = f"{{{targets};}}"
                yield f"{INDENT}{family.id} -> {targets}"

        yield "}"

    def render(self) -> str:
        return "\n".join(self.iter_lines()) + "\n"


def export_dot(store: EntityStore, root: Root = NO_ROOT, **kwargs) -> str:
    return DotExporter(store, root, **kwargs).render()
