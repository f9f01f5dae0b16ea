# tests/test_tags.py

from __future__ import annotations

import pytest

from gedcom_relation.loader.tags import (
    TAG_TABLE,
    CustomTag,
    GedcomTag,
    UnknownTagError,
    is_custom,
    parse_tag,
    tag_code,
)


def test_known_code_maps_to_member() -> None:
    assert parse_tag("INDI") is GedcomTag.INDIVIDUAL
    assert parse_tag("FAM") is GedcomTag.FAMILY
    assert parse_tag("CHAN") is GedcomTag.CHANGE


def test_known_code_is_case_insensitive() -> None:
    assert parse_tag("indi") is GedcomTag.INDIVIDUAL
    assert parse_tag("Birt") is GedcomTag.BIRTH


def test_continuation_tags_are_ordinary_members() -> None:
    assert parse_tag("CONT") is GedcomTag.CONTINUED
    assert parse_tag("CONC") is GedcomTag.CONCATENATION


def test_underscore_tag_becomes_custom_with_casing_kept() -> None:
    tag = parse_tag("_Prim")
    assert tag == CustomTag("_Prim")
    assert tag != CustomTag("_PRIM")
    assert is_custom(tag, "_Prim")
    assert not is_custom(tag, "_PRIM")


def test_unknown_code_without_underscore_raises() -> None:
    with pytest.raises(UnknownTagError):
        parse_tag("XYZZY")


def test_bare_underscore_is_not_a_custom_tag() -> None:
    with pytest.raises(UnknownTagError):
        parse_tag("_")


def test_unknown_tag_error_is_value_error() -> None:
    with pytest.raises(ValueError):
        parse_tag("NOPE")


def test_tag_code_round_trips_table() -> None:
    for code, member in TAG_TABLE.items():
        assert tag_code(member) == code
        assert parse_tag(code) is member
    assert tag_code(CustomTag("_UID")) == "_UID"
