from __future__ import annotations

from .build_family import build_family
from .build_individual import build_birth, build_name, build_person
from .build_registry import build_registry
from .entities import (
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
from .utils import change_node_to_datetime

__all__ = [
    "BirthFact",
    "Child",
    "FactTypeId",
    "Family",
    "Gender",
    "NameFact",
    "Person",
    "Place",
    "RelationDocument",
    "build_birth",
    "build_family",
    "build_name",
    "build_person",
    "build_registry",
    "change_node_to_datetime",
]
