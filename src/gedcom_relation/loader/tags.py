# src/gedcom_relation/loader/tags.py

"""
Closed GEDCOM 5.5.1 tag vocabulary.

Every line tag is classified into exactly one of:
    - a ``GedcomTag`` member (known code, matched case-insensitively), or
    - a ``CustomTag`` (underscore-prefixed vendor extension, casing kept).

The lookup table is plain data so new codes can be added without touching
the parser.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Union


class UnknownTagError(ValueError):
    """Raised when a token is neither a known code nor a valid custom tag."""


class GedcomTag(Enum):
    ABBREVIATION = "ABBR"
    ADDRESS = "ADDR"
    ADDRESS1 = "ADR1"
    ADDRESS2 = "ADR2"
    ADOPTION = "ADOP"
    ANCESTRAL_FILE_NUMBER = "AFN"
    AGE = "AGE"
    AGENCY = "AGNC"
    ALIAS = "ALIA"
    ANCESTORS = "ANCE"
    ANCESTOR_INTEREST = "ANCI"
    ANNULMENT = "ANUL"
    ASSOCIATES = "ASSO"
    AUTHOR = "AUTH"
    BAPTISM_LDS = "BAPL"
    BAPTISM = "BAPM"
    BAR_MITZVAH = "BARM"
    BAS_MITZVAH = "BASM"
    BIRTH = "BIRT"
    BLESSING = "BLES"
    BURIAL = "BURI"
    CALL_NUMBER = "CALN"
    CASTE = "CAST"
    CAUSE = "CAUS"
    CENSUS = "CENS"
    CHANGE = "CHAN"
    CHARACTER = "CHAR"
    CHILD = "CHIL"
    CHRISTENING = "CHR"
    ADULT_CHRISTENING = "CHRA"
    CITY = "CITY"
    CONCATENATION = "CONC"
    CONFIRMATION = "CONF"
    CONFIRMATION_LDS = "CONL"
    CONTINUED = "CONT"
    COPYRIGHT = "COPR"
    CORPORATE = "CORP"
    CREMATION = "CREM"
    COUNTRY = "CTRY"
    DATA = "DATA"
    DATE = "DATE"
    DEATH = "DEAT"
    DESCENDANTS = "DESC"
    DESCENDANT_INTEREST = "DESI"
    DESTINATION = "DEST"
    DIVORCE = "DIV"
    DIVORCE_FILED = "DIVF"
    PHYSICAL_DESCRIPTION = "DSCR"
    EDUCATION = "EDUC"
    EMAIL = "EMAI"
    EMIGRATION = "EMIG"
    ENDOWMENT = "ENDL"
    ENGAGEMENT = "ENGA"
    EVENT = "EVEN"
    FACT = "FACT"
    FAMILY = "FAM"
    FAMILY_CHILD = "FAMC"
    FAMILY_FILE = "FAMF"
    FAMILY_SPOUSE = "FAMS"
    FACSIMILE = "FAX"
    FIRST_COMMUNION = "FCOM"
    FILE = "FILE"
    FORMAT = "FORM"
    PHONETIC = "FONE"
    GEDCOM = "GEDC"
    GIVEN_NAME = "GIVN"
    GRADUATION = "GRAD"
    HEADER = "HEAD"
    HUSBAND = "HUSB"
    IDENTITY_NUMBER = "IDNO"
    IMMIGRATION = "IMMI"
    INDIVIDUAL = "INDI"
    LANGUAGE = "LANG"
    LATITUDE = "LATI"
    LONGITUDE = "LONG"
    MAP = "MAP"
    MARRIAGE_BANNS = "MARB"
    MARRIAGE_CONTRACT = "MARC"
    MARRIAGE_LICENSE = "MARL"
    MARRIAGE = "MARR"
    MARRIAGE_SETTLEMENT = "MARS"
    MEDIA = "MEDI"
    NAME = "NAME"
    NATIONALITY = "NATI"
    NATURALISATION = "NATU"
    CHILDREN_COUNT = "NCHI"
    NICKNAME = "NICK"
    MARRIAGE_COUNT = "NMR"
    NOTE = "NOTE"
    NAME_PREFIX = "NPFX"
    NAME_SUFFIX = "NSFX"
    OBJECT = "OBJE"
    OCCUPATION = "OCCU"
    ORDINANCE = "ORDI"
    ORDINATION = "ORDN"
    PAGE = "PAGE"
    PEDIGREE = "PEDI"
    PHONE = "PHON"
    PLACE = "PLAC"
    POSTAL_CODE = "POST"
    PROBATE = "PROB"
    PROPERTY = "PROP"
    PUBLICATION = "PUBL"
    QUALITY_OF_DATA = "QUAY"
    REFERENCE = "REFN"
    RELATIONSHIP = "RELA"
    RELIGION = "RELI"
    REPOSITORY = "REPO"
    RESIDENCE = "RESI"
    RESTRICTION = "RESN"
    RETIREMENT = "RETI"
    RECORD_FILE_NUMBER = "RFN"
    RECORD_ID_NUMBER = "RIN"
    ROLE = "ROLE"
    ROMANISED = "ROMN"
    SEX = "SEX"
    SEALING_CHILD = "SLGC"
    SEALING_SPOUSE = "SLGS"
    SOURCE = "SOUR"
    SURNAME_PREFIX = "SPFX"
    SOCIAL_SECURITY_NUMBER = "SSN"
    STATE = "STAE"
    STATUS = "STAT"
    SUBMITTER = "SUBM"
    SUBMISSION = "SUBN"
    SURNAME = "SURN"
    TEMPLE = "TEMP"
    TEXT = "TEXT"
    TIME = "TIME"
    TITLE = "TITL"
    TRAILER = "TRLR"
    TYPE = "TYPE"
    VERSION = "VERS"
    WIFE = "WIFE"
    WILL = "WILL"
    WEB = "WWW"

    def __repr__(self) -> str:  # pragma: no cover - cosmetic
        return f"<GedcomTag {self.value}>"


@dataclass(frozen=True)
class CustomTag:
    """Underscore-prefixed extension tag such as ``_PRIM`` or ``_UID``."""

    name: str

    def __str__(self) -> str:
        return self.name


Tag = Union[GedcomTag, CustomTag]

# Uppercase code -> tag. Built once from the enum so both stay in sync.
TAG_TABLE: Dict[str, GedcomTag] = {member.value: member for member in GedcomTag}

VALID_CUSTOM_TAG = re.compile(r"^_[A-Za-z0-9_]+$")


def parse_tag(token: str) -> Tag:
    """
    Classify a raw tag token.

    Known codes match case-insensitively ("indi" -> GedcomTag.INDIVIDUAL).
    Anything else must look like ``_[A-Za-z0-9_]+`` and becomes a CustomTag
    with its original casing.

    Raises:
        UnknownTagError: if the token is neither.
    """
    known = TAG_TABLE.get(token.upper())
    if known is not None:
        return known

    if VALID_CUSTOM_TAG.match(token):
        return CustomTag(token)

    raise UnknownTagError(
        f"Unknown tag {token!r}: custom tags must start with '_' and contain "
        "only A-Z, a-z, 0-9 and '_'"
    )


def tag_code(tag: Tag) -> str:
    """Return the textual code of a tag, e.g. 'INDI' or '_PRIM'."""
    if isinstance(tag, GedcomTag):
        return tag.value
    return tag.name


def is_custom(tag: Tag, name: str) -> bool:
    """True if ``tag`` is the custom tag ``name`` (exact casing)."""
    return isinstance(tag, CustomTag) and tag.name == name


__all__ = [
    "CustomTag",
    "GedcomTag",
    "Tag",
    "TAG_TABLE",
    "UnknownTagError",
    "VALID_CUSTOM_TAG",
    "is_custom",
    "parse_tag",
    "tag_code",
]
