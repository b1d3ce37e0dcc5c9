from __future__ import annotations

import pytest

from gedcom2dot.core.exceptions import UnresolvedRootError
from gedcom2dot.marking import (
    NO_ROOT,
    FamilyRoot,
    InclusionPolicy,
    PersonRoot,
    RelevanceMarker,
    mark,
)
from gedcom2dot.store import Family, Person


def marked_ids(store):
    people = {p.id for p in store.iter_marked_people()}
    families = {f.id for f in store.iter_marked_families()}
    return people, families


# ---------------------------------------------------------
# No root
# ---------------------------------------------------------

def test_no_root_marks_every_person_and_family(sample_store):
    mark(sample_store, NO_ROOT)

    assert all(p.marked for p in sample_store.people.values())
    assert all(f.marked for f in sample_store.families.values())


# ---------------------------------------------------------
# Family root
# ---------------------------------------------------------

def test_root_family_marks_parents_and_children(make_store):
    store = make_store(
        people=[Person("I1"), Person("I2"), Person("I3", family_as_child="F1")],
        families=[Family("F1", parents=["I1", "I2"], children=["I3"])],
    )

    mark(store, FamilyRoot("F1"))

    assert marked_ids(store) == ({"I1", "I2", "I3"}, {"F1"})


def test_family_root_on_sample(sample_store):
    mark(sample_store, FamilyRoot("F1"))

    people, families = marked_ids(sample_store)
    assert people == {"I1", "I2", "I3", "I4", "I5", "I6", "I11"}
    assert families == {"F1", "F2", "F4"}


# ---------------------------------------------------------
# Person root and policies
# ---------------------------------------------------------

def test_person_root_default_policy(sample_store):
    mark(sample_store, PersonRoot("I3"))

    people, families = marked_ids(sample_store)
    assert people == {"I1", "I2", "I3", "I5", "I6", "I11"}
    assert families == {"F1", "F2", "F4"}


def test_person_root_children_policy_adds_siblings_only(sample_store):
    mark(sample_store, PersonRoot("I3"), InclusionPolicy.CHILDREN)

    people, families = marked_ids(sample_store)
    # I4 is I3's sister, I7 is I1's brother; I7's son I9 is not pulled in
    assert people == {"I1", "I2", "I3", "I4", "I5", "I6", "I7", "I11"}
    assert families == {"F1", "F2", "F4"}


def test_person_root_blood_policy_adds_sibling_lines(sample_store):
    mark(sample_store, PersonRoot("I3"), InclusionPolicy.BLOOD)

    people, families = marked_ids(sample_store)
    assert people == {"I1", "I2", "I3", "I4", "I5", "I6", "I7", "I9", "I11"}
    assert families == {"F1", "F2", "F3", "F4"}
    # I7's wife is reached only through the spouse rule, never marked
    assert not sample_store.get_person("I8").marked


def test_root_descendants_survive_two_phase_marking(make_store):
    # Under BLOOD the ancestor pass revisits the root as its parents' child;
    # the root is unmarked afterwards so its own descendants still get walked.
    store = make_store(
        people=[
            Person("I1", family_as_parent="F1"),
            Person("I2", family_as_child="F1", family_as_parent="F2"),
            Person("I3", family_as_child="F2"),
        ],
        families=[
            Family("F1", parents=["I1"], children=["I2"]),
            Family("F2", parents=["I2"], children=["I3"]),
        ],
    )

    mark(store, PersonRoot("I2"), InclusionPolicy.BLOOD)

    assert marked_ids(store) == ({"I1", "I2", "I3"}, {"F1", "F2"})


def test_married_in_spouse_is_not_marked(make_store):
    store = make_store(
        people=[
            Person("I5", family_as_parent="F2"),
            Person("I1", family_as_child="F2", family_as_parent="F1"),
            Person("I2", family_as_parent="F1"),
            Person("I3", family_as_child="F1"),
        ],
        families=[
            Family("F2", parents=["I5"], children=["I1"]),
            Family("F1", parents=["I1", "I2"], children=["I3"]),
        ],
    )

    mark(store, PersonRoot("I5"))

    assert marked_ids(store) == ({"I5", "I1", "I3"}, {"F2", "F1"})


# ---------------------------------------------------------
# Guards
# ---------------------------------------------------------

def test_remarking_is_a_no_op(sample_store):
    marker = RelevanceMarker(sample_store, InclusionPolicy.BLOOD)
    person = sample_store.get_person("I3")

    marker.mark_ancestors(person)
    before = marked_ids(sample_store)
    visits = marker.visits

    marker.mark_ancestors(person)
    marker.mark_descendants(person)

    assert marked_ids(sample_store) == before
    assert marker.visits == visits + 2


def test_cycle_terminates_with_bounded_visits(make_store):
    # I1 is recorded as both child and grandparent of I2
    store = make_store(
        people=[
            Person("I1", family_as_child="F1", family_as_parent="F2"),
            Person("I2", family_as_child="F2", family_as_parent="F1"),
        ],
        families=[
            Family("F1", parents=["I2"], children=["I1"]),
            Family("F2", parents=["I1"], children=["I2"]),
        ],
    )

    for policy in InclusionPolicy:
        for p in store.people.values():
            p.marked = False
        marker = mark(store, PersonRoot("I1"), policy)

        assert all(p.marked for p in store.people.values())
        assert marker.visits <= 4 * (len(store.people) + len(store.families))


def test_deep_pedigree_does_not_hit_recursion_limit(make_store):
    depth = 5000
    people = [
        Person(f"I{i}", family_as_child=f"F{i}", family_as_parent=f"F{i - 1}" if i else None)
        for i in range(depth)
    ]
    families = [Family(f"F{i}", parents=[f"I{i + 1}"], children=[f"I{i}"]) for i in range(depth)]
    store = make_store(people=people, families=families)

    mark(store, PersonRoot("I0"))

    assert sum(1 for _ in store.iter_marked_people()) == depth


def test_dangling_references_are_treated_as_no_link(make_store):
    store = make_store(
        people=[Person("I1", family_as_child="F9", family_as_parent="F1")],
        families=[Family("F1", parents=["I1", "I404"], children=["I999"])],
    )

    mark(store, FamilyRoot("F1"))

    assert marked_ids(store) == ({"I1"}, {"F1"})


@pytest.mark.parametrize(
    "root, kind",
    [(PersonRoot("I99999"), "person"), (FamilyRoot("F99999"), "family")],
)
def test_unresolved_root_raises(sample_store, root, kind):
    with pytest.raises(UnresolvedRootError) as info:
        mark(sample_store, root)

    assert info.value.root_id == root.id
    assert info.value.kind == kind
    assert info.value.exit_code == 4
    assert not any(p.marked for p in sample_store.people.values())
