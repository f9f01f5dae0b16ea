# tests/test_build_registry.py

from __future__ import annotations

from gedcom_relation.identity import IdSeeds
from gedcom_relation.loader import build_tree, parse_gedcom, tokenize_file
from gedcom_relation.registry import Gender, build_registry
from gedcom_relation.utils import mock_file_path


def _document(text: str, seeds=None):
    return build_registry(build_tree(parse_gedcom(text)), seeds)


def _person(pointer: str, sex: str = "M", time: str = "16:00:00", extra: str = "") -> str:
    return (
        f"0 {pointer} INDI\n"
        f"1 NAME X /{pointer.strip('@')}/\n"
        f"1 SEX {sex}\n"
        f"{extra}"
        "1 CHAN\n"
        "2 DATE 15 APR 2020\n"
        f"3 TIME {time}\n"
    )


def _family(husb: str, wife: str, *children: str, pointer: str = "@F1@") -> str:
    lines = [f"0 {pointer} FAM", f"1 HUSB {husb}", f"1 WIFE {wife}"]
    lines += [f"1 CHIL {c}" for c in children]
    lines += ["1 CHAN", "2 DATE 15 APR 2020", "3 TIME 16:40:57"]
    return "\n".join(lines) + "\n"


def test_individual_with_only_name_yields_zero_persons() -> None:
    doc = _document("0 HEAD\n0 @I1@ INDI\n1 NAME Gavin /Henderson/\n0 TRLR\n")
    assert doc.persons == []
    assert doc.counts() == {"persons": 0, "families": 0, "children": 0}


def test_single_person_scenario() -> None:
    doc = build_registry(build_tree(tokenize_file(mock_file_path("one_node.ged"))))

    (person,) = doc.persons
    assert person.id == 1
    assert person.gender is Gender.MALE
    assert person.to_dict()["DateCreated"] == "2020-04-15T16:19:21"
    (birth,) = person.facts
    assert birth.preferred
    assert doc.families == []
    assert doc.children == []


def test_one_family_three_persons_scenario() -> None:
    doc = build_registry(build_tree(tokenize_file(mock_file_path("three_node.ged"))))

    assert [p.id for p in doc.persons] == [1, 2, 3]
    (family,) = doc.families
    assert (family.id, family.father_id, family.mother_id) == (10000001, 3, 2)
    (row,) = doc.children
    assert (row.id, row.child_id, row.family_id) == (20000001, 1, 10000001)


def test_two_children_same_family_scenario() -> None:
    doc = build_registry(build_tree(tokenize_file(mock_file_path("siblings.ged"))))

    assert [(c.id, c.child_id, c.family_id) for c in doc.children] == [
        (20000001, 1, 10000001),
        (20000002, 4, 10000001),
    ]


def test_dropped_person_does_not_consume_an_id() -> None:
    text = (
        "0 HEAD\n"
        + _person("@I1@")
        + "0 @I2@ INDI\n1 NAME No /Chan/\n1 SEX F\n"
        + _person("@I3@", sex="F")
        + "0 TRLR\n"
    )
    doc = _document(text)
    assert [p.id for p in doc.persons] == [1, 2]


def test_indi_without_pointer_is_skipped() -> None:
    text = "0 INDI\n1 SEX M\n1 CHAN\n2 DATE 15 APR 2020\n3 TIME 16:00:00\n" + _person("@I1@")
    doc = _document(text)
    assert [p.id for p in doc.persons] == [1]


def test_family_with_dropped_spouse_emits_no_child_rows() -> None:
    text = (
        _person("@I1@")
        + _person("@I2@", sex="F")
        + "0 @I3@ INDI\n1 SEX M\n"  # no CHAN: dropped
        + _family("@I3@", "@I2@", "@I1@")
        + _family("@I1@", "@I2@", pointer="@F2@")
    )
    doc = _document(text)

    assert [f.id for f in doc.families] == [10000001]
    assert doc.families[0].father_id == 1
    assert doc.children == []


def test_child_rows_only_reference_accepted_families() -> None:
    text = (
        _person("@I1@")
        + _person("@I2@", sex="F")
        + _person("@I3@")
        + _person("@I4@", sex="F")
        + _family("@I9@", "@I2@", "@I3@", pointer="@F1@")
        + _family("@I1@", "@I2@", "@I3@", "@I4@", pointer="@F2@")
    )
    doc = _document(text)

    family_ids = {f.id for f in doc.families}
    assert family_ids == {10000001}
    assert all(c.family_id in family_ids for c in doc.children)
    assert [c.id for c in doc.children] == [20000001, 20000002]


def test_family_before_its_persons_cannot_resolve_them() -> None:
    text = _family("@I1@", "@I2@") + _person("@I1@") + _person("@I2@", sex="F")
    doc = _document(text)
    assert len(doc.persons) == 2
    assert doc.families == []


def test_other_records_are_ignored() -> None:
    text = "0 HEAD\n0 @S1@ SOUR\n1 TITL Census\n0 @N1@ NOTE text\n0 @O1@ OBJE\n" + _person("@I1@") + "0 TRLR\n"
    doc = _document(text)
    assert doc.counts() == {"persons": 1, "families": 0, "children": 0}


def test_custom_seeds() -> None:
    text = _person("@I1@") + _person("@I2@", sex="F") + _family("@I1@", "@I2@", "@I1@")
    doc = _document(text, IdSeeds(person=100, family=500, child=900))

    assert [p.id for p in doc.persons] == [100, 101]
    assert (doc.families[0].id, doc.families[0].father_id) == (500, 100)
    assert (doc.children[0].id, doc.children[0].child_id) == (900, 100)


def test_mapping_same_tree_twice_is_identical() -> None:
    tree = build_tree(tokenize_file(mock_file_path("siblings.ged")))
    assert build_registry(tree).to_dict() == build_registry(tree).to_dict()
