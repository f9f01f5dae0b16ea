# src/gedcom_relation/identity/id_factory.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Optional


# -----------------------------
# Sequential identifiers
# -----------------------------

class IdSequence:
    """
    Monotonic integer counter.

    ``peek()`` shows the id the next accepted entity will get; ``claim()``
    hands it out and advances. Rejected entities never call ``claim()`` so
    accepted ids stay gap-free.
    """

    def __init__(self, seed: int):
        if seed < 0:
            raise ValueError(f"Id seed must be non-negative, got {seed}")
        self._next = seed

    def peek(self) -> int:
        return self._next

    def claim(self) -> int:
        value = self._next
        self._next += 1
        return value

    def __repr__(self) -> str:  # pragma: no cover - cosmetic
        return f"<IdSequence next={self._next}>"


@dataclass(frozen=True)
class IdSeeds:
    """First id for each generated entity kind."""

    person: int = 1
    family: int = 10_000_001
    child: int = 20_000_001

    @classmethod
    def from_config(cls, ids: Optional[Mapping[str, Any]]) -> "IdSeeds":
        """Build seeds from the ``ids:`` config section; missing keys keep defaults."""
        ids = ids or {}
        default = cls()
        return cls(
            person=int(ids.get("person_seed", default.person)),
            family=int(ids.get("family_seed", default.family)),
            child=int(ids.get("child_seed", default.child)),
        )

    def sequences(self) -> "tuple[IdSequence, IdSequence, IdSequence]":
        """Fresh (person, family, child) counters for one mapping pass."""
        return IdSequence(self.person), IdSequence(self.family), IdSequence(self.child)


__all__ = ["IdSeeds", "IdSequence"]
