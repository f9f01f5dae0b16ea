from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime
from enum import IntEnum
from typing import Any, Dict, List, Optional, Tuple

from gedcom_relation.dates import format_date_created, format_date_detail


# -----------------------------
# Discriminators
# -----------------------------

class Gender(IntEnum):
    MALE = 1
    FEMALE = 2
    OTHER = 3

    @classmethod
    def from_code(cls, code: Optional[str]) -> "Gender":
        """Exactly 'M' or 'F' in any case; anything else, padding included, is OTHER."""
        value = (code or "").upper()
        if value == "M":
            return cls.MALE
        if value == "F":
            return cls.FEMALE
        return cls.OTHER


class FactTypeId(IntEnum):
    NAME = 100
    BIRTH = 405


# Child join rows are always biological.
RELATIONSHIP_BIOLOGICAL = 1


# -----------------------------
# Facts (small atoms)
# -----------------------------

@dataclass(frozen=True, slots=True)
class Place:
    name: str

    def to_dict(self) -> Dict[str, Any]:
        return {"PlaceName": self.name}


@dataclass(frozen=True, slots=True)
class NameFact:
    """
    GEDCOM NAME substructure reduced to its GIVN / SURN parts.

    Absent parts serialize as null; the full NAME value is not carried.
    """
    given_names: Optional[str] = None
    surnames: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "FactTypeId": int(FactTypeId.NAME),
            "GivenNames": self.given_names,
            "Surnames": self.surnames,
        }


@dataclass(frozen=True, slots=True)
class BirthFact:
    """
    GEDCOM BIRT substructure.

    ``date_detail`` and ``place`` are dropped from the output when unset;
    ``preferred`` comes from a ``_PRIM Y`` marker.
    """
    date_detail: Optional[date] = None
    place: Optional[Place] = None
    preferred: bool = False

    def to_dict(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {"FactTypeId": int(FactTypeId.BIRTH)}
        if self.date_detail is not None:
            out["DateDetail"] = format_date_detail(self.date_detail)
        if self.place is not None:
            out["Place"] = self.place.to_dict()
        out["Preferred"] = self.preferred
        return out


# -----------------------------
# Entities
# -----------------------------

@dataclass(frozen=True, slots=True)
class Person:
    id: int
    date_created: datetime
    gender: Gender
    names: Tuple[NameFact, ...] = ()
    facts: Tuple[BirthFact, ...] = ()
    is_living: bool = True

    def to_dict(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {
            "DateCreated": format_date_created(self.date_created),
            "Gender": int(self.gender),
            "Id": self.id,
            "IsLiving": self.is_living,
            "Names": [n.to_dict() for n in self.names],
        }
        if self.facts:
            out["Facts"] = [f.to_dict() for f in self.facts]
        return out


@dataclass(frozen=True, slots=True)
class Family:
    id: int
    date_created: datetime
    father_id: int
    mother_id: int

    def to_dict(self) -> Dict[str, Any]:
        return {
            "DateCreated": format_date_created(self.date_created),
            "FatherId": self.father_id,
            "Id": self.id,
            "MotherId": self.mother_id,
        }


@dataclass(frozen=True, slots=True)
class Child:
    """Join row linking a person to the family they are a child of."""
    id: int
    child_id: int
    family_id: int
    relationship_to_father: int = RELATIONSHIP_BIOLOGICAL
    relationship_to_mother: int = RELATIONSHIP_BIOLOGICAL

    def to_dict(self) -> Dict[str, Any]:
        return {
            "ChildId": self.child_id,
            "FamilyId": self.family_id,
            "Id": self.id,
            "RelationshipToFather": self.relationship_to_father,
            "RelationshipToMother": self.relationship_to_mother,
        }


# -----------------------------
# Document
# -----------------------------

@dataclass(slots=True)
class RelationDocument:
    """
    The relational output of one mapping pass, in document order.

    FactTypes, MasterSources, Medias and SourceRepos are not modeled and are
    always emitted as empty lists.
    """
    persons: List[Person] = field(default_factory=list)
    families: List[Family] = field(default_factory=list)
    children: List[Child] = field(default_factory=list)

    def add_person(self, person: Person) -> None:
        self.persons.append(person)

    def add_family(self, family: Family, children: List[Child]) -> None:
        self.families.append(family)
        self.children.extend(children)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "Childs": [c.to_dict() for c in self.children],
            "FactTypes": [],
            "Familys": [f.to_dict() for f in self.families],
            "MasterSources": [],
            "Medias": [],
            "Persons": [p.to_dict() for p in self.persons],
            "SourceRepos": [],
        }

    def counts(self) -> Dict[str, int]:
        return {
            "persons": len(self.persons),
            "families": len(self.families),
            "children": len(self.children),
        }
