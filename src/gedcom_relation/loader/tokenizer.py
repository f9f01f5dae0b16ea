# src/gedcom_relation/loader/tokenizer.py

from __future__ import annotations

import string
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Tuple, Union

from .tags import Tag, UnknownTagError, parse_tag

BOM = "\ufeff"
AT = "@"
HASH = "#"
DELIM = " "
CR = "\r"
LF = "\n"

ALPHA = frozenset(string.ascii_letters + "_")
DIGIT = frozenset(string.digits)

# Printable ASCII that is neither alphanumeric, '_', '@', '#' nor space.
OTHERCHAR = frozenset(
    chr(c)
    for c in range(0x21, 0x7F)
    if chr(c) not in ALPHA and chr(c) not in DIGIT and chr(c) not in (AT, HASH)
)


@dataclass(frozen=True)
class GedcomLine:
    """
    A single parsed GEDCOM line.

    Attributes:
        level: Nesting depth, 0..99.
        tag: A GedcomTag member or a CustomTag.
        pointer: Cross-reference label defined by this line, e.g. "@I1@".
        value: Optional payload. May itself be a pointer ("@I3@") or free
            text with escapes ("@#DJULIAN@ 1700") kept verbatim.
        lineno: 1-based line number in the document (diagnostics only).
    """
    level: int
    tag: Tag
    pointer: Optional[str] = None
    value: Optional[str] = None
    lineno: int = field(default=0, compare=False)


class GedcomSyntaxError(ValueError):
    """
    Raised when a GEDCOM line cannot be parsed.

    Carries the position of the failure and the unconsumed remainder of the
    input so callers can point at the offending text.
    """

    def __init__(self, reason: str, lineno: int = 0, column: int = 0, remainder: str = ""):
        self.reason = reason
        self.lineno = lineno
        self.column = column
        self.remainder = remainder
        preview = remainder[:40]
        super().__init__(f"Line {lineno}, column {column}: {reason} -> {preview!r}")


# ---------------------------------------------------------------------------
# Character classes
# ---------------------------------------------------------------------------

def _is_alphanum(ch: str) -> bool:
    return ch in ALPHA or ch in DIGIT


def _is_otherchar(ch: str) -> bool:
    """
    Printable ASCII punctuation other than '@' and '#', plus every code point
    from U+0080 up. The high range is open-ended so that UTF-8 text beyond
    Latin-1 (for example CJK or Cyrillic names) parses as a value.
    """
    return ch in OTHERCHAR or ord(ch) >= 0x80


def _is_nonat(ch: str) -> bool:
    return _is_alphanum(ch) or ch == DELIM or ch == HASH or _is_otherchar(ch)


class _LineCursor:
    """Position bookkeeping for one line; all offsets index the full text."""

    def __init__(self, text: str, pos: int, lineno: int):
        self.text = text
        self.pos = pos
        self.start = pos
        self.lineno = lineno

    def peek(self, offset: int = 0) -> str:
        i = self.pos + offset
        return self.text[i] if i < len(self.text) else ""

    def at_end(self) -> bool:
        return self.pos >= len(self.text)

    def startswith(self, prefix: str) -> bool:
        return self.text.startswith(prefix, self.pos)

    def fail(self, reason: str, pos: Optional[int] = None) -> GedcomSyntaxError:
        p = self.pos if pos is None else pos
        return GedcomSyntaxError(
            reason,
            lineno=self.lineno,
            column=p - self.start + 1,
            remainder=self.text[p:],
        )


# ---------------------------------------------------------------------------
# Grammar productions
# ---------------------------------------------------------------------------

def _parse_level(cur: _LineCursor) -> int:
    """level := digit | nonzero-digit digit"""
    begin = cur.pos
    digits = ""
    while len(digits) < 2 and cur.peek() in DIGIT:
        digits += cur.peek()
        cur.pos += 1

    if not digits:
        raise cur.fail("level must start with a digit", begin)
    if len(digits) == 2 and digits[0] == "0":
        raise cur.fail(f"invalid level {digits!r} (leading zero)", begin)

    return int(digits)


def _expect_delim(cur: _LineCursor, what: str) -> None:
    if cur.peek() != DELIM:
        raise cur.fail(f"expected a single space {what}")
    cur.pos += 1


def _parse_pointer(cur: _LineCursor) -> Optional[str]:
    """
    pointer := '@' alphanum nonat* '@'

    Returns None (without consuming input) if the text does not start with
    '@' followed by an alphanumeric character.
    """
    if cur.peek() != AT or not cur.peek(1) or not _is_alphanum(cur.peek(1)):
        return None

    begin = cur.pos
    cur.pos += 2
    while not cur.at_end() and _is_nonat(cur.peek()):
        cur.pos += 1

    if cur.peek() != AT:
        raise cur.fail("unterminated pointer, expected closing '@'", begin)
    cur.pos += 1
    return cur.text[begin:cur.pos]


def _parse_tag(cur: _LineCursor) -> Tag:
    begin = cur.pos
    while not cur.at_end() and _is_alphanum(cur.peek()):
        cur.pos += 1

    token = cur.text[begin:cur.pos]
    if not token:
        raise cur.fail("missing tag", begin)

    try:
        return parse_tag(token)
    except UnknownTagError as exc:
        raise cur.fail(str(exc), begin) from None


def _consume_anychar(cur: _LineCursor) -> bool:
    """anychar := nonat | '@@'"""
    if cur.startswith(AT + AT):
        cur.pos += 2
        return True
    if not cur.at_end() and _is_nonat(cur.peek()):
        cur.pos += 1
        return True
    return False


def _consume_escape(cur: _LineCursor) -> None:
    """escape := '@#' anychar+ '@' nonat"""
    begin = cur.pos
    cur.pos += 2

    text_start = cur.pos
    while _consume_anychar(cur):
        pass
    if cur.pos == text_start:
        raise cur.fail("empty escape sequence", begin)

    if cur.peek() != AT:
        raise cur.fail("unterminated escape sequence, expected '@'", begin)
    cur.pos += 1

    if not cur.peek() or not _is_nonat(cur.peek()):
        raise cur.fail("escape sequence must be followed by a non-'@' character", begin)
    cur.pos += 1


def _parse_line_item(cur: _LineCursor) -> Optional[str]:
    """line_item := (anychar | escape)+"""
    begin = cur.pos
    while True:
        if cur.startswith(AT + HASH):
            _consume_escape(cur)
        elif not _consume_anychar(cur):
            break

    if cur.pos == begin:
        return None
    return cur.text[begin:cur.pos]


def _parse_value(cur: _LineCursor) -> str:
    """line_value := line_item | pointer"""
    item = _parse_line_item(cur)
    if item is not None:
        return item

    pointer = _parse_pointer(cur)
    if pointer is not None:
        return pointer

    raise cur.fail("expected a line value after delimiter")


def _parse_terminator(cur: _LineCursor) -> None:
    """terminator := CR LF | LF CR | CR | LF  (end of input also accepted)"""
    if cur.at_end():
        return
    for term in (CR + LF, LF + CR, CR, LF):
        if cur.startswith(term):
            cur.pos += len(term)
            return
    raise cur.fail("expected line terminator")


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def parse_line(text: str, pos: int = 0, lineno: int = 1) -> Tuple[GedcomLine, int]:
    """
    Parse one GEDCOM line starting at ``pos`` in ``text``.

    Grammar:
        <level> ' ' [<pointer> ' '] <tag> [' ' <value>] <terminator>

    Examples:
        "0 HEAD"
        "0 @I1@ INDI"
        "1 NAME Gavin /Henderson/"
        "1 HUSB @I3@"

    Returns:
        (GedcomLine, position just after the terminator)

    Raises:
        GedcomSyntaxError: on the first grammar violation.
    """
    cur = _LineCursor(text, pos, lineno)

    level = _parse_level(cur)
    _expect_delim(cur, "after level")

    pointer: Optional[str] = None
    if cur.peek() == AT:
        pointer = _parse_pointer(cur)
        if pointer is None:
            raise cur.fail("invalid cross-reference label")
        _expect_delim(cur, "after cross-reference label")

    tag = _parse_tag(cur)

    value: Optional[str] = None
    if cur.peek() == DELIM:
        cur.pos += 1
        value = _parse_value(cur)

    _parse_terminator(cur)

    line = GedcomLine(level=level, tag=tag, pointer=pointer, value=value, lineno=lineno)
    return line, cur.pos


def parse_gedcom(text: str) -> List[GedcomLine]:
    """
    Parse a whole GEDCOM document into an ordered list of GedcomLine.

    An optional byte-order mark before the first line is discarded. The
    parse is atomic: the first invalid line raises and nothing is returned.

    Raises:
        GedcomSyntaxError: if the document is empty or any line is invalid.
    """
    pos = 1 if text.startswith(BOM) else 0

    if pos >= len(text):
        raise GedcomSyntaxError("empty GEDCOM document", lineno=1, column=1)

    lines: List[GedcomLine] = []
    lineno = 1
    while pos < len(text):
        line, pos = parse_line(text, pos, lineno)
        lines.append(line)
        lineno += 1

    return lines


def tokenize_file(path: Union[str, Path]) -> List[GedcomLine]:
    """
    Read a GEDCOM file as UTF-8 and parse it.

    Raises:
        FileNotFoundError: if ``path`` does not exist.
        GedcomSyntaxError: if a line is syntactically invalid.
    """
    file_path = Path(path)

    if not file_path.is_file():
        raise FileNotFoundError(f"GEDCOM file not found: {file_path}")

    # newline="" keeps CR/LF exactly as written; the grammar handles them.
    with file_path.open("r", encoding="utf-8", newline="") as f:
        text = f.read()

    return parse_gedcom(text)
