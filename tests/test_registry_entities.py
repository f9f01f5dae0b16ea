from datetime import date, datetime

from gedcom_relation.registry.entities import (
    BirthFact,
    Child,
    FactTypeId,
    Family,
    Gender,
    NameFact,
    Person,
    Place,
    RelationDocument,
)

CREATED = datetime(2020, 4, 15, 16, 44, 0)


def test_gender_from_code():
    assert Gender.from_code("M") is Gender.MALE
    assert Gender.from_code("f") is Gender.FEMALE
    assert Gender.from_code("X") is Gender.OTHER
    assert Gender.from_code("") is Gender.OTHER
    assert Gender.from_code(None) is Gender.OTHER
    assert [int(g) for g in Gender] == [1, 2, 3]


def test_gender_code_must_be_exact():
    assert Gender.from_code("M ") is Gender.OTHER
    assert Gender.from_code(" f") is Gender.OTHER
    assert Gender.from_code("Male") is Gender.OTHER


def test_fact_type_ids():
    assert FactTypeId.NAME == 100
    assert FactTypeId.BIRTH == 405


def test_name_fact_keeps_nulls():
    assert NameFact(given_names="Gavin").to_dict() == {
        "FactTypeId": 100,
        "GivenNames": "Gavin",
        "Surnames": None,
    }


def test_birth_fact_omits_absent_fields():
    assert BirthFact().to_dict() == {"FactTypeId": 405, "Preferred": False}
    assert BirthFact(date(1990, 1, 1), Place("Dundee"), True).to_dict() == {
        "DateDetail": "1 Jan 1990",
        "FactTypeId": 405,
        "Place": {"PlaceName": "Dundee"},
        "Preferred": True,
    }


def test_person_without_facts_omits_facts_key():
    person = Person(id=1, date_created=CREATED, gender=Gender.MALE, names=(NameFact("Gavin", "Henderson"),))
    assert person.to_dict() == {
        "DateCreated": "2020-04-15T16:44:00",
        "Gender": 1,
        "Id": 1,
        "IsLiving": True,
        "Names": [{"FactTypeId": 100, "GivenNames": "Gavin", "Surnames": "Henderson"}],
    }


def test_person_names_always_emitted():
    person = Person(id=1, date_created=CREATED, gender=Gender.OTHER)
    assert person.to_dict()["Names"] == []


def test_person_with_facts():
    person = Person(
        id=2,
        date_created=CREATED,
        gender=Gender.FEMALE,
        facts=(BirthFact(place=Place("Dundee"), preferred=True),),
    )
    assert person.to_dict()["Facts"] == [
        {"FactTypeId": 405, "Place": {"PlaceName": "Dundee"}, "Preferred": True}
    ]


def test_family_and_child_rows():
    assert Family(10000001, CREATED, 3, 2).to_dict() == {
        "DateCreated": "2020-04-15T16:44:00",
        "FatherId": 3,
        "Id": 10000001,
        "MotherId": 2,
    }
    assert Child(id=20000001, child_id=1, family_id=10000001).to_dict() == {
        "ChildId": 1,
        "FamilyId": 10000001,
        "Id": 20000001,
        "RelationshipToFather": 1,
        "RelationshipToMother": 1,
    }


def test_empty_document_has_all_collections():
    doc = RelationDocument()
    assert doc.to_dict() == {
        "Childs": [],
        "FactTypes": [],
        "Familys": [],
        "MasterSources": [],
        "Medias": [],
        "Persons": [],
        "SourceRepos": [],
    }
    assert doc.counts() == {"persons": 0, "families": 0, "children": 0}


def test_document_add_family_with_rows():
    doc = RelationDocument()
    doc.add_family(Family(10000001, CREATED, 3, 2), [Child(20000001, 1, 10000001)])

    assert doc.counts() == {"persons": 0, "families": 1, "children": 1}
