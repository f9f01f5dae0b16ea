from datetime import date, datetime

import pytest

from gedcom_relation.core.exceptions import EntityBuildError
from gedcom_relation.loader.segmenter import GEDCOMNode
from gedcom_relation.loader.tags import parse_tag
from gedcom_relation.registry.build_individual import build_birth, build_name, build_person
from gedcom_relation.registry.entities import Gender, Place


def make_node(tag, value=None, pointer=None, children=None, level=1):
    return GEDCOMNode(
        tag=parse_tag(tag),
        value=value,
        pointer=pointer,
        children=children or [],
        lineno=1,
        level=level,
    )


def chan(date_text="15 APR 2020", time_text="16:19:21"):
    return make_node(
        "CHAN",
        children=[make_node("DATE", date_text, level=2, children=[make_node("TIME", time_text, level=3)])],
    )


def indi(*children, pointer="@I1@"):
    return make_node("INDI", pointer=pointer, children=list(children), level=0)


def test_build_person_basic():
    node = indi(
        make_node(
            "NAME",
            value="Gavin /Henderson/",
            children=[make_node("GIVN", "Gavin", level=2), make_node("SURN", "Henderson", level=2)],
        ),
        make_node("SEX", "M"),
        make_node(
            "BIRT",
            children=[
                make_node("_PRIM", "Y", level=2),
                make_node("DATE", "1 Jan 1990", level=2),
                make_node("PLAC", "Dundee", level=2),
            ],
        ),
        make_node("_UID", "9ACF01CA-A40C-4AF5-8905-D6678B6288BE"),
        chan(),
    )

    person = build_person(node, 7)

    assert person.id == 7
    assert person.gender is Gender.MALE
    assert person.date_created == datetime(2020, 4, 15, 16, 19, 21)
    assert person.is_living is True

    assert len(person.names) == 1
    assert person.names[0].given_names == "Gavin"
    assert person.names[0].surnames == "Henderson"

    (birth,) = person.facts
    assert birth.date_detail == date(1990, 1, 1)
    assert birth.place == Place("Dundee")
    assert birth.preferred is True


@pytest.mark.parametrize(
    "code, expected",
    [("M", Gender.MALE), ("m", Gender.MALE), ("F", Gender.FEMALE), ("f", Gender.FEMALE), ("U", Gender.OTHER), ("M ", Gender.OTHER), (None, Gender.OTHER)],
)
def test_gender_codes(code, expected):
    person = build_person(indi(make_node("SEX", code), chan()), 1)
    assert person.gender is expected


def test_last_sex_and_chan_win():
    node = indi(
        make_node("SEX", "M"),
        chan("1 JAN 2000", "00:00:00"),
        make_node("SEX", "F"),
        chan("2 FEB 2001", "01:02:03"),
    )
    person = build_person(node, 1)
    assert person.gender is Gender.FEMALE
    assert person.date_created == datetime(2001, 2, 2, 1, 2, 3)


def test_missing_chan_raises():
    with pytest.raises(EntityBuildError):
        build_person(indi(make_node("SEX", "M")), 1)


def test_missing_sex_raises():
    with pytest.raises(EntityBuildError):
        build_person(indi(chan()), 1)


def test_only_name_raises():
    with pytest.raises(EntityBuildError):
        build_person(indi(make_node("NAME", "John /Doe/")), 1)


def test_invalid_chan_is_not_a_timestamp():
    with pytest.raises(EntityBuildError):
        build_person(indi(make_node("SEX", "M"), chan("15 XYZ 2020")), 1)


def test_invalid_chan_followed_by_valid_one():
    person = build_person(indi(make_node("SEX", "M"), chan("bad"), chan()), 1)
    assert person.date_created == datetime(2020, 4, 15, 16, 19, 21)


def test_non_indi_node_raises():
    with pytest.raises(EntityBuildError):
        build_person(make_node("FAM", pointer="@F1@", level=0), 1)


def test_multiple_names_and_births_kept_in_order():
    node = indi(
        make_node("NAME", children=[make_node("GIVN", "Jane", level=2)]),
        make_node("NAME", children=[make_node("SURN", "Reed", level=2)]),
        make_node("BIRT"),
        make_node("BIRT", children=[make_node("PLAC", "Perth", level=2)]),
        make_node("SEX", "F"),
        chan(),
    )
    person = build_person(node, 2)

    assert [(n.given_names, n.surnames) for n in person.names] == [("Jane", None), (None, "Reed")]
    assert [f.place for f in person.facts] == [None, Place("Perth")]


def test_name_without_parts():
    name = build_name(make_node("NAME", "John /Doe/"))
    assert name.given_names is None
    assert name.surnames is None


def test_birth_defaults():
    birth = build_birth(make_node("BIRT"))
    assert birth.date_detail is None
    assert birth.place is None
    assert birth.preferred is False


def test_birth_preferred_marker_must_be_exact():
    assert build_birth(make_node("BIRT", children=[make_node("_PRIM", "N", level=2)])).preferred is False
    assert build_birth(make_node("BIRT", children=[make_node("_PRIM", "y", level=2)])).preferred is False
    assert build_birth(make_node("BIRT", children=[make_node("_prim", "Y", level=2)])).preferred is False


def test_birth_with_unparseable_date_keeps_place():
    birth = build_birth(
        make_node(
            "BIRT",
            children=[make_node("DATE", "ABT 1900", level=2), make_node("PLAC", "Dundee", level=2)],
        )
    )
    assert birth.date_detail is None
    assert birth.place == Place("Dundee")
